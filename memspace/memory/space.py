from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from memspace.conf import SpaceConfig
from memspace.data_structure import RegionList
from memspace.exceptions import EmptyAllocationError, NotFoundError
from memspace.memory.region import Region

logger = logging.getLogger(__name__)

# Returned by malloc when no single free region is large enough
ALLOCATION_FAILED = -1


class MemorySpace:
    """
    A managed memory space of a given size.

    The space keeps a list of allocated regions and a list of free regions which
    together partition [0, max_size). ``malloc`` and ``free`` move regions between
    the two lists; ``defrag`` sorts the free list and merges neighbouring regions.

    Example:
        >>> space = MemorySpace(100)
        >>> space.malloc(20)
        0
        >>> str(space.free_list)
        '(20 , 80)'
    """

    def __init__(self, max_size: int, strict_free: bool = False):
        """
        Create a memory space covering [0, max_size).

        Args:
                max_size (int): Size of the address space, must be positive.
                strict_free (bool): Raise NotFoundError when ``free`` is given an address
                        that does not start an allocated region.

        Returns:
                None
        """
        if max_size <= 0:
            raise ValueError(f"Memory space size must be positive, got {max_size}")

        self.max_size = max_size
        self.strict_free = strict_free
        self.allocated_list = RegionList()
        self.free_list = RegionList()
        self.free_list.append_last(Region(0, max_size))

        self.allocation_count = 0
        self.failed_allocation_count = 0
        self.free_count = 0
        self.ignored_free_count = 0
        self.defrag_count = 0
        self.merge_count = 0

    @classmethod
    def from_config(cls, config: SpaceConfig) -> MemorySpace:
        return cls(config.max_size, strict_free=config.strict_free)

    def malloc(self, length: int) -> int:
        """
        Allocate a region of the requested length.

        Scans the free list in list order, which after frees is insertion order
        rather than address order, and takes the first region that is long enough.
        The allocated region starts at that free region's start and is appended to
        the allocated list. The free region is dropped when it is used up, otherwise
        it is replaced by what remains after its front is carved off.

        For example, requesting 17 units from the free region (250 , 20) allocates
        (250 , 17) and leaves the free region (267 , 3).

        Args:
                length (int): The number of units to allocate, must be positive.

        Returns:
                int: The start address of the allocated region, or ALLOCATION_FAILED if
                no free region is large enough.
        """
        if length <= 0:
            raise ValueError(f"Allocation length must be positive, got {length}")

        for link in self.free_list.links():
            region = link.value
            if region.length < length:
                continue

            allocated = Region(region.start, length)
            self.allocated_list.append_last(allocated)
            if region.length == length:
                self.free_list.remove_link(link)
            else:
                self.free_list.replace(link, region.shrink_front(length))

            self.allocation_count += 1
            logger.debug(f"malloc({length}) -> {allocated.start}")
            return allocated.start

        self.failed_allocation_count += 1
        logger.debug(
            f"malloc({length}) failed: largest free region is "
            f"{self._largest_free_length()} of {self.free_bytes} free"
        )
        return ALLOCATION_FAILED

    def free(self, address: int) -> None:
        """
        Free the allocated region that starts at ``address``.

        The region is removed from the allocated list and appended, unchanged, to
        the end of the free list. It is not merged with its neighbours until
        ``defrag`` runs. An address that does not start an allocated region is
        ignored, unless the space was created with ``strict_free``.

        Args:
                address (int): The start address of the region to free.

        Raises:
                EmptyAllocationError: If nothing is allocated.
                NotFoundError: In strict mode, if no allocated region starts at address.
        """
        if not self.allocated_list:
            raise EmptyAllocationError(
                f"Cannot free address {address}: nothing is allocated"
            )

        for link in self.allocated_list.links():
            region = link.value
            if region.start == address:
                self.allocated_list.remove_link(link)
                self.free_list.append_last(region)
                self.free_count += 1
                logger.debug(f"free({address}) released {region}")
                return

        if self.strict_free:
            raise NotFoundError(f"No allocated region starts at address {address}")
        self.ignored_free_count += 1
        logger.warning(f"free({address}) ignored: no allocated region starts there")

    def defrag(self) -> None:
        """
        Merge address-adjacent free regions.

        The free list is sorted by start address, then walked once. Whenever the
        current region ends where the next one starts, the two are merged and the
        current region is compared again with its new neighbour. The allocated list
        is never touched.
        """
        self.defrag_count += 1
        if self.free_list.size <= 1:
            return

        self.free_list.sort_by_start()
        before = self.free_list.size
        current = self.free_list.first
        while current is not None and current.next is not None:
            following = current.next
            if current.value.is_adjacent_to(following.value):
                self.free_list.replace(current, current.value.merge(following.value))
                self.free_list.remove_link(following)
                self.merge_count += 1
            else:
                current = following

        logger.debug(f"defrag merged {before} free regions into {self.free_list.size}")

    @property
    def allocated_bytes(self) -> int:
        return sum(region.length for region in self.allocated_list)

    @property
    def free_bytes(self) -> int:
        return sum(region.length for region in self.free_list)

    def _largest_free_length(self) -> int:
        largest = self.largest_free_region()
        return largest.length if largest else 0

    def largest_free_region(self) -> Optional[Region]:
        """Get the longest free region, the earliest in list order on ties"""
        largest = None
        for region in self.free_list:
            if largest is None or region.length > largest.length:
                largest = region
        return largest

    def can_allocate(self, length: int) -> bool:
        """Check if ``malloc(length)`` would succeed without allocating"""
        return any(region.length >= length for region in self.free_list)

    def allocated_regions(self) -> List[Region]:
        return self.allocated_list.to_list()

    def free_regions(self) -> List[Region]:
        return self.free_list.to_list()

    def get_fragmentation_ratio(self) -> float:
        """Get the fragmentation ratio (0.0 = one usable free region, towards 1.0 = scattered)"""
        free_bytes = self.free_bytes
        if free_bytes == 0:
            return 0.0
        return 1.0 - (self._largest_free_length() / free_bytes)

    def get_statistics(self) -> Dict[str, Any]:
        """Get memory space statistics"""
        return {
            "max_size": self.max_size,
            "allocation_count": self.allocation_count,
            "failed_allocation_count": self.failed_allocation_count,
            "free_count": self.free_count,
            "ignored_free_count": self.ignored_free_count,
            "defrag_count": self.defrag_count,
            "merge_count": self.merge_count,
            "allocated_regions": self.allocated_list.size,
            "free_regions": self.free_list.size,
            "allocated_bytes": self.allocated_bytes,
            "free_bytes": self.free_bytes,
            "largest_free_length": self._largest_free_length(),
            "fragmentation_ratio": self.get_fragmentation_ratio(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Export the memory space in dictionary form"""
        return {
            "max_size": self.max_size,
            "strict_free": self.strict_free,
            "free": [region.to_dict() for region in self.free_list],
            "allocated": [region.to_dict() for region in self.allocated_list],
        }

    def __str__(self) -> str:
        return f"{self.free_list}\n{self.allocated_list}"

    def __repr__(self) -> str:
        return (
            f"MemorySpace(max_size={self.max_size}, "
            f"allocated={self.allocated_list.size}, free={self.free_list.size})"
        )
