class MemSpaceError(Exception):
    """Base class for errors raised by memspace."""


class NotFoundError(MemSpaceError, LookupError):
    """Raised when a value or link handle is not present in a list."""


class EmptyAllocationError(MemSpaceError):
    """Raised when freeing from a memory space that has nothing allocated."""
