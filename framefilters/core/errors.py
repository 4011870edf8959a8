"""
Exceptions raised by filters and buffer factories.
"""


class FilterError(Exception):
    """Base class for framefilters errors."""


class InvalidParameterError(FilterError, ValueError):
    """A filter was constructed with a parameter outside its valid range."""


class ObjectDisposedError(FilterError, RuntimeError):
    """A filter or buffer factory was used after dispose()."""
