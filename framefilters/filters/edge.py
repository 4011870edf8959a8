"""
Edge detection filters for image processing.
"""
import cv2
import numpy as np

from ..core import constants
from ..core.buffers import image_size
from .base import ImageFilter


class EdgeFilter(ImageFilter):
    """
    Per-channel Canny edge detection filter.

    Each BGR channel is run through Canny on its own and the three edge
    maps are merged back, so an edge that only shows up in one channel
    keeps that channel's color in the output.
    """

    def __init__(
        self,
        low_threshold: float = constants.EDGE_LOW_THRESHOLD,
        high_threshold: float = constants.EDGE_HIGH_THRESHOLD,
        aperture_size: int = constants.EDGE_APERTURE_SIZE,
        name: str = "Edge Filter",
        description: str = "Per-channel Canny edge detection"
    ):
        """
        Initialize edge filter.

        Thresholds are passed to Canny as-is; invalid values surface as
        cv2.error from process().

        Args:
            low_threshold: Lower threshold for edge detection
            high_threshold: Upper threshold for hysteresis edge linking
            aperture_size: Sobel kernel size (3, 5 or 7)
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description, inplace_capable=True)
        self.low_threshold = low_threshold
        self.high_threshold = high_threshold
        self.aperture_size = aperture_size

    def process(self, source: np.ndarray, dest: np.ndarray) -> None:
        """
        Apply per-channel edge detection.

        Args:
            source: Input BGR image
            dest: Output BGR image, may be `source`
        """
        size = image_size(source)
        planes = [self.get_buffer_gray(size, i) for i in constants.EDGE_PLANE_SLOTS]
        edges = [self.get_buffer_gray(size, i) for i in constants.EDGE_RESULT_SLOTS]

        for channel, plane in enumerate(planes):
            cv2.extractChannel(source, channel, dst=plane)

        for plane, edge in zip(planes, edges):
            cv2.Canny(
                plane,
                self.low_threshold,
                self.high_threshold,
                edges=edge,
                apertureSize=self.aperture_size
            )

        cv2.merge(edges, dst=dest)

    def duplicate(self) -> "EdgeFilter":
        return EdgeFilter(
            self.low_threshold,
            self.high_threshold,
            self.aperture_size,
            name=self.name,
            description=self.description
        )
