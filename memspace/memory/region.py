from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class Region:
    """Represents the contiguous address range [start, start + length)"""

    start: int
    length: int

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"Region start must be non-negative, got {self.start}")
        if self.length <= 0:
            raise ValueError(f"Region length must be positive, got {self.length}")

    @property
    def end(self) -> int:
        """Get the exclusive end address of the region"""
        return self.start + self.length

    def is_adjacent_to(self, other: Region) -> bool:
        """Check if ``other`` begins exactly where this region ends"""
        return self.end == other.start

    def overlaps(self, other: Region) -> bool:
        return self.start < other.end and other.start < self.end

    def contains_address(self, addr: int) -> bool:
        return self.start <= addr < self.end

    def shrink_front(self, amount: int) -> Region:
        """
        Build the region left over after carving ``amount`` units off the front.

        Args:
                amount (int): Units taken from the start, strictly between 0 and length.

        Returns:
                Region: The remainder ``[start + amount, end)``.
        """
        if not 0 < amount < self.length:
            raise ValueError(
                f"Cannot take {amount} units from a region of length {self.length}"
            )
        return Region(self.start + amount, self.length - amount)

    def merge(self, other: Region) -> Region:
        """
        Combine this region with the region that immediately follows it.

        Args:
                other (Region): A region adjacent to the end of this one.

        Returns:
                Region: The region spanning both.
        """
        if not self.is_adjacent_to(other):
            raise ValueError(f"Cannot merge non-adjacent regions {self} and {other}")
        return Region(self.start, self.length + other.length)

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "length": self.length, "end": self.end}

    def __str__(self) -> str:
        return f"({self.start} , {self.length})"
