"""Core: buffer management and shared definitions."""
from .buffers import BufferFactory, Size, color_buffer, gray_buffer, image_size
from .errors import FilterError, InvalidParameterError, ObjectDisposedError

__all__ = [
    "BufferFactory",
    "Size",
    "color_buffer",
    "gray_buffer",
    "image_size",
    "FilterError",
    "InvalidParameterError",
    "ObjectDisposedError",
]
