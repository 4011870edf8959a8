"""Filters: Reusable per-frame image filters."""
from .base import ImageFilter
from .color import ColorMapFilter, SolidColorFilter
from .distortion import DistortionFilter
from .edge import EdgeFilter
from .registry import FilterRegistry

__all__ = [
    "ImageFilter",
    "ColorMapFilter",
    "SolidColorFilter",
    "DistortionFilter",
    "EdgeFilter",
    "FilterRegistry",
]
