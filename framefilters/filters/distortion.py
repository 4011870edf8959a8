"""
Radial lens distortion filter.
"""
import logging
import cv2
import numpy as np
from typing import Optional, Tuple

from ..core import constants
from ..core.buffers import Size, image_size
from ..core.errors import InvalidParameterError
from .base import ImageFilter

logger = logging.getLogger(__name__)


class DistortionFilter(ImageFilter):
    """
    Simulates radial lens distortion around a configurable optical center.

    The undistortion maps depend only on the source size, so they are
    built on the first frame and reused until a frame of a different
    size arrives. The coefficient is divided by width squared, which
    keeps the visible amount of distortion about the same across
    resolutions.
    """

    def __init__(
        self,
        center_width: float,
        center_height: float,
        distortion_coefficient: float,
        name: str = "Distortion Filter",
        description: str = ""
    ):
        """
        Initialize distortion filter.

        Args:
            center_width: Value in [0, 1]. 0 puts the center on the left
                edge of the image, 1 on the right edge.
            center_height: Value in [0, 1]. 0 puts the center on the top
                edge of the image, 1 on the bottom edge.
            distortion_coefficient: Radial distortion strength. Positive
                and negative values bend the image in opposite directions.
            name: Filter name
            description: Filter description

        Raises:
            InvalidParameterError: If either center value is outside [0, 1]
        """
        if not (0.0 <= center_width <= 1.0 and 0.0 <= center_height <= 1.0):
            raise InvalidParameterError(
                "center_width and center_height must be numbers >= 0 and <= 1.0, "
                f"got ({center_width}, {center_height})"
            )
        super().__init__(name, description)
        self.center_width = center_width
        self.center_height = center_height
        self.distortion_coefficient = distortion_coefficient

        # (map_x, map_y) valid for _map_size, or both absent
        self._maps: Optional[Tuple[np.ndarray, np.ndarray]] = None
        self._map_size: Optional[Size] = None

    @property
    def map_size(self) -> Optional[Size]:
        """Source size the cached maps were built for, or None."""
        return self._map_size

    def process(self, source: np.ndarray, dest: np.ndarray) -> None:
        """
        Remap source into dest through the distortion maps.

        Args:
            source: Input BGR image
            dest: Output BGR image, must not be `source`
        """
        self._check_alive()
        size = image_size(source)
        if size != self._map_size:
            self._maps = None
            self._map_size = None

        if self._maps is None:
            self._maps = self._build_maps(size)
            self._map_size = size

        map_x, map_y = self._maps
        cv2.remap(
            source,
            map_x,
            map_y,
            constants.REMAP_INTERPOLATION,
            dst=dest,
            borderMode=constants.REMAP_BORDER_MODE,
            borderValue=constants.REMAP_BORDER_VALUE
        )

    def _build_maps(self, size: Size) -> Tuple[np.ndarray, np.ndarray]:
        """
        Build the remap pair for a source size.

        The fractional center is applied with its axes swapped:
        center_height scales the width into cx and center_width scales
        the height into cy.
        """
        width, height = size
        camera_matrix = np.eye(3, dtype=np.float64)
        camera_matrix[0, 2] = int(width * self.center_height)
        camera_matrix[1, 2] = int(height * self.center_width)

        dist_coeffs = np.zeros(constants.DISTORTION_COEFF_COUNT, dtype=np.float64)
        dist_coeffs[0] = self.distortion_coefficient / (width * width)

        map_x, map_y = cv2.initUndistortRectifyMap(
            camera_matrix,
            dist_coeffs,
            None,
            camera_matrix,
            size,
            constants.DISTORTION_MAP_TYPE
        )
        logger.debug("%s: built distortion maps for %s", self.name, size)
        return map_x, map_y

    def _release(self):
        self._maps = None
        self._map_size = None

    def duplicate(self) -> "DistortionFilter":
        return DistortionFilter(
            self.center_width,
            self.center_height,
            self.distortion_coefficient,
            name=self.name,
            description=self.description
        )
