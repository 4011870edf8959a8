"""
Color filters: color map lookup and solid fill.
"""
import cv2
import numpy as np
from typing import Tuple

from ..core import constants
from ..core.errors import InvalidParameterError
from .base import ImageFilter


class ColorMapFilter(ImageFilter):
    """
    Applies one of OpenCV's predefined color maps (COLORMAP_*) to the image.
    """

    def __init__(
        self,
        colormap: int = constants.DEFAULT_COLORMAP,
        name: str = "Color Map Filter",
        description: str = ""
    ):
        """
        Initialize color map filter.

        Args:
            colormap: OpenCV color map identifier, e.g. cv2.COLORMAP_JET
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description, inplace_capable=True)
        self.colormap = colormap

    @classmethod
    def from_name(cls, colormap_name: str, **kwargs) -> "ColorMapFilter":
        """
        Build a filter from a color map name such as "jet" or "COLORMAP_HOT".

        Raises:
            InvalidParameterError: If OpenCV has no color map by that name
        """
        key = colormap_name.strip().upper()
        if not key.startswith("COLORMAP_"):
            key = f"COLORMAP_{key}"
        colormap = getattr(cv2, key, None)
        if colormap is None:
            raise InvalidParameterError(f"Unknown color map '{colormap_name}'")
        kwargs.setdefault("name", f"Color Map ({key[len('COLORMAP_'):].lower()})")
        return cls(colormap, **kwargs)

    def process(self, source: np.ndarray, dest: np.ndarray) -> None:
        self._check_alive()
        cv2.applyColorMap(source, self.colormap, dst=dest)

    def duplicate(self) -> "ColorMapFilter":
        return ColorMapFilter(self.colormap, name=self.name, description=self.description)


class SolidColorFilter(ImageFilter):
    """
    Fills the destination with a single color, ignoring the source.
    """

    def __init__(
        self,
        color: Tuple[int, int, int],
        name: str = "Solid Color Filter",
        description: str = ""
    ):
        """
        Initialize solid color filter.

        Args:
            color: Fill color in the destination's channel order (B, G, R)
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description)
        self.color = tuple(color)

    def process(self, source: np.ndarray, dest: np.ndarray) -> None:
        self._check_alive()
        dest[...] = self.color

    def duplicate(self) -> "SolidColorFilter":
        return SolidColorFilter(self.color, name=self.name, description=self.description)
