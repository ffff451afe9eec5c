from .exceptions import MemSpaceError, NotFoundError, EmptyAllocationError
from .data_structure import Link, RegionList
from .memory import Region, MemorySpace, ALLOCATION_FAILED
from .conf import SpaceConfig

__all__ = [
    "MemSpaceError",
    "NotFoundError",
    "EmptyAllocationError",
    "Link",
    "RegionList",
    "Region",
    "MemorySpace",
    "ALLOCATION_FAILED",
    "SpaceConfig",
]
