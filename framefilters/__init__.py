"""
framefilters: image filters with reusable scratch buffers.
"""
import logging

from .core import (
    BufferFactory,
    FilterError,
    InvalidParameterError,
    ObjectDisposedError,
    image_size,
)
from .filters import (
    ColorMapFilter,
    DistortionFilter,
    EdgeFilter,
    FilterRegistry,
    ImageFilter,
    SolidColorFilter,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BufferFactory",
    "FilterError",
    "InvalidParameterError",
    "ObjectDisposedError",
    "image_size",
    "ImageFilter",
    "ColorMapFilter",
    "SolidColorFilter",
    "DistortionFilter",
    "EdgeFilter",
    "FilterRegistry",
]
