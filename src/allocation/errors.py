from __future__ import annotations


class AllocationError(Exception):
    pass


class HeaderNotFoundError(AllocationError):
    """Raised when no line in the export looks like the holdings header row."""


class EmptyDatasetError(AllocationError):
    """Raised when the export parses but yields no usable holdings."""
