"""
Base filter interface for image processing filters.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional
import numpy as np

from ..core.buffers import BufferFactory, Size, color_buffer, gray_buffer, image_size
from ..core.errors import ObjectDisposedError

logger = logging.getLogger(__name__)


class ImageFilter(ABC):
    """
    Abstract base class for all image filters.

    A filter reads a BGR source image and writes its result into a
    caller-supplied BGR destination of the same size. Scratch images are
    borrowed from two lazily created buffer factories (color and gray)
    and reused across frames.

    Instances are not thread-safe. Use duplicate() to get an independent
    copy for each stream processed concurrently.
    """

    def __init__(self, name: str, description: str = "", inplace_capable: bool = False):
        """
        Initialize the filter.

        Args:
            name: Human-readable name for this filter
            description: Optional description of what the filter does
            inplace_capable: True if process() accepts the same array as
                source and dest
        """
        self.name = name
        self.description = description
        self._inplace_capable = inplace_capable
        self._bgr_buffers: Optional[BufferFactory] = None
        self._gray_buffers: Optional[BufferFactory] = None
        self._disposed = False

    @property
    def inplace_capable(self) -> bool:
        """If True, source and dest passed to process() may be the same image."""
        return self._inplace_capable

    @property
    def is_disposed(self) -> bool:
        """Check if the filter has been disposed."""
        return self._disposed

    @abstractmethod
    def process(self, source: np.ndarray, dest: np.ndarray) -> None:
        """
        Filter source into dest.

        Args:
            source: Input BGR image
            dest: Output BGR image of the same size. Must not be `source`
                unless inplace_capable is True.
        """
        pass

    @abstractmethod
    def duplicate(self) -> "ImageFilter":
        """
        Create a new filter with the same parameters.

        The copy owns its own buffers and caches and shares no state
        with this instance.
        """
        pass

    def apply(self, image: np.ndarray) -> np.ndarray:
        """
        Filter an image into a newly allocated result.

        Args:
            image: Input BGR image

        Returns:
            Filtered BGR image
        """
        result = color_buffer(image_size(image))
        self.process(image, result)
        return result

    def get_buffer_bgr(self, size: Size, index: int) -> np.ndarray:
        """Borrow a 3-channel scratch image for the duration of one process() call."""
        self._check_alive()
        if self._bgr_buffers is None:
            self._bgr_buffers = BufferFactory(color_buffer, f"{self.name}/bgr")
        return self._bgr_buffers.get_buffer(size, index)

    def get_buffer_gray(self, size: Size, index: int) -> np.ndarray:
        """Borrow a single-channel scratch image for the duration of one process() call."""
        self._check_alive()
        if self._gray_buffers is None:
            self._gray_buffers = BufferFactory(gray_buffer, f"{self.name}/gray")
        return self._gray_buffers.get_buffer(size, index)

    def dispose(self):
        """Release owned buffers and caches. Safe to call more than once."""
        if self._disposed:
            return
        if self._bgr_buffers is not None:
            self._bgr_buffers.dispose()
            self._bgr_buffers = None
        if self._gray_buffers is not None:
            self._gray_buffers.dispose()
            self._gray_buffers = None
        self._release()
        self._disposed = True
        logger.debug("Disposed %r", self)

    def _release(self):
        """Release filter-specific cached state. Subclasses with caches override this."""
        pass

    def _check_alive(self):
        if self._disposed:
            raise ObjectDisposedError(f"{self.__class__.__name__} '{self.name}' has been disposed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False

    def __repr__(self) -> str:
        """String representation of the filter."""
        return f"{self.__class__.__name__}(name='{self.name}', inplace={self._inplace_capable})"
