"""
Global filter registry for named filter prototypes.
"""
import logging
from typing import Dict, Optional

from ..core import constants
from .base import ImageFilter
from .color import ColorMapFilter
from .distortion import DistortionFilter
from .edge import EdgeFilter

logger = logging.getLogger(__name__)


class FilterRegistry:
    """
    Singleton registry for storing and retrieving named filter prototypes.

    A registered filter is a template: create() hands out a duplicate so
    each stream gets its own buffers and caches, while get_filter()
    returns the shared prototype itself.
    """

    _instance: Optional['FilterRegistry'] = None
    _filters: Dict[str, ImageFilter] = {}

    def __new__(cls):
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._filters = {}
        return cls._instance

    @classmethod
    def register_filter(cls, name: str, filter_obj: ImageFilter) -> None:
        """
        Register a named filter prototype.

        Args:
            name: Unique name for the filter
            filter_obj: Filter instance to use as the prototype

        Raises:
            ValueError: If name is empty or filter_obj is None
        """
        if not name:
            raise ValueError("Filter name cannot be empty")
        if filter_obj is None:
            raise ValueError("Filter object cannot be None")

        instance = cls()
        previous = instance._filters.get(name)
        if previous is not None and previous is not filter_obj:
            previous.dispose()
        instance._filters[name] = filter_obj
        logger.debug("Registered filter '%s': %r", name, filter_obj)

    @classmethod
    def get_filter(cls, name: str) -> Optional[ImageFilter]:
        """
        Retrieve a registered prototype by name.

        Returns:
            Filter instance if found, None otherwise
        """
        instance = cls()
        return instance._filters.get(name)

    @classmethod
    def create(cls, name: str) -> ImageFilter:
        """
        Create an independent filter from a registered prototype.

        Raises:
            KeyError: If no filter is registered under that name
        """
        prototype = cls.get_filter(name)
        if prototype is None:
            raise KeyError(f"No filter named '{name}' is registered")
        return prototype.duplicate()

    @classmethod
    def has_filter(cls, name: str) -> bool:
        """Check if a filter is registered."""
        instance = cls()
        return name in instance._filters

    @classmethod
    def list_filters(cls) -> list[str]:
        """Get list of all registered filter names."""
        instance = cls()
        return list(instance._filters.keys())

    @classmethod
    def unregister_filter(cls, name: str) -> bool:
        """
        Unregister and dispose a filter prototype.

        Returns:
            True if filter was removed, False if it didn't exist
        """
        instance = cls()
        filter_obj = instance._filters.pop(name, None)
        if filter_obj is None:
            return False
        filter_obj.dispose()
        return True

    @classmethod
    def clear(cls) -> None:
        """Dispose and remove all registered prototypes."""
        instance = cls()
        for filter_obj in instance._filters.values():
            filter_obj.dispose()
        instance._filters.clear()

    @classmethod
    def register_defaults(cls) -> None:
        """Register the stock "edges", "jet" and "barrel" prototypes."""
        cls.register_filter("edges", EdgeFilter())
        cls.register_filter("jet", ColorMapFilter(constants.DEFAULT_COLORMAP))
        cls.register_filter("barrel", DistortionFilter(
            constants.DISTORTION_CENTER_WIDTH,
            constants.DISTORTION_CENTER_HEIGHT,
            constants.DISTORTION_COEFFICIENT
        ))
