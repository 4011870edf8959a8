"""
Buffer factory for reusing scratch images across frames.
"""
import logging
from typing import Callable, Dict, Optional, Tuple
import numpy as np

from .errors import ObjectDisposedError

logger = logging.getLogger(__name__)

# (width, height), same order OpenCV uses for dsize
Size = Tuple[int, int]


def image_size(image: np.ndarray) -> Size:
    """Return the (width, height) of an image array."""
    h, w = image.shape[:2]
    return (w, h)


def color_buffer(size: Size) -> np.ndarray:
    """Allocate a zeroed 3-channel BGR image of the given size."""
    w, h = size
    return np.zeros((h, w, 3), dtype=np.uint8)


def gray_buffer(size: Size) -> np.ndarray:
    """Allocate a zeroed single-channel image of the given size."""
    w, h = size
    return np.zeros((h, w), dtype=np.uint8)


class BufferFactory:
    """
    Cache of scratch images keyed by slot index.

    A factory tracks a single active size. Requesting a buffer at a size
    other than the tracked one drops every held buffer before allocating,
    so callers interleaving two sizes on one factory will reallocate on
    each switch. Filters use one factory per pixel format and only ever
    ask for the size of the frame they are processing.

    Buffers are owned by the factory. A returned array stays valid until
    the next size change or until the factory is disposed.
    """

    def __init__(self, constructor: Callable[[Size], np.ndarray], name: str = ""):
        """
        Initialize the buffer factory.

        Args:
            constructor: Callable building a new image for a (width, height) size
            name: Optional label used in log messages
        """
        self._constructor = constructor
        self.name = name or getattr(constructor, "__name__", "buffers")
        self._size: Optional[Size] = None
        self._buffers: Dict[int, np.ndarray] = {}
        self._disposed = False

    @property
    def size(self) -> Optional[Size]:
        """The size all held buffers share, or None if nothing was allocated."""
        return self._size

    @property
    def is_disposed(self) -> bool:
        """Check if the factory has been disposed."""
        return self._disposed

    def get_buffer(self, size: Size, index: int) -> np.ndarray:
        """
        Get the scratch image for a slot, allocating it on first use.

        Args:
            size: Requested image size as (width, height)
            index: Non-negative slot index

        Returns:
            The buffer held in that slot, sized to `size`

        Raises:
            ObjectDisposedError: If the factory has been disposed
            ValueError: If index is negative
        """
        if self._disposed:
            raise ObjectDisposedError(f"BufferFactory '{self.name}' has been disposed")
        if index < 0:
            raise ValueError(f"Buffer index must be non-negative, got {index}")

        size = (int(size[0]), int(size[1]))
        if size != self._size:
            if self._buffers:
                logger.debug(
                    "%s: size changed %s -> %s, dropping %d buffer(s)",
                    self.name, self._size, size, len(self._buffers)
                )
            self._buffers.clear()
            self._size = size

        buffer = self._buffers.get(index)
        if buffer is None:
            buffer = self._constructor(size)
            self._buffers[index] = buffer
            logger.debug("%s: allocated slot %d at %s", self.name, index, size)
        return buffer

    def dispose(self):
        """Release every held buffer. Safe to call more than once."""
        if self._disposed:
            return
        logger.debug("%s: disposing %d buffer(s)", self.name, len(self._buffers))
        self._buffers.clear()
        self._size = None
        self._disposed = True

    def __len__(self) -> int:
        return len(self._buffers)

    def __contains__(self, index: int) -> bool:
        return index in self._buffers

    def __repr__(self) -> str:
        return f"BufferFactory(name='{self.name}', size={self._size}, buffers={len(self._buffers)})"
