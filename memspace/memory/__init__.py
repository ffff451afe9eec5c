from .region import Region
from .space import MemorySpace, ALLOCATION_FAILED

__all__ = ["Region", "MemorySpace", "ALLOCATION_FAILED"]
