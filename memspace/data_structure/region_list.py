from __future__ import annotations
import logging
from operator import attrgetter
from typing import Any, Iterator, List, Optional

from sortedcontainers import SortedKeyList

from memspace.data_structure.links import Link
from memspace.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class RegionList:
    """
    An ordered sequence of regions with positional access.

    The list is built from doubly linked ``Link`` nodes. Appending or prepending is
    O(1), removing through a link handle is O(1), and everything positional walks
    from the head. The list does not validate the address ranges it holds; keeping
    them non-overlapping is the caller's job.

    Example:
        >>> from memspace.memory.region import Region
        >>> regions = RegionList()
        >>> _ = regions.append_last(Region(20, 80))
        >>> _ = regions.append_first(Region(0, 20))
        >>> [r.start for r in regions]
        [0, 20]
    """

    def __init__(self, values: Optional[List[Any]] = None):
        self._first: Optional[Link] = None
        self._last: Optional[Link] = None
        self._size: int = 0
        for value in values or []:
            self.append_last(value)

    @property
    def first(self) -> Optional[Link]:
        """The head link, or None when the list is empty."""
        return self._first

    @property
    def last(self) -> Optional[Link]:
        """The tail link, or None when the list is empty."""
        return self._last

    @property
    def size(self) -> int:
        return self._size

    def _check_position(self, index: int) -> None:
        if index < 0 or index > self._size:
            raise IndexError(
                f"index {index} out of range, must be between 0 and {self._size}"
            )

    def _check_element(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexError(
                f"index {index} out of range, must be between 0 and {self._size - 1}"
            )

    def _check_owned(self, link: Optional[Link]) -> None:
        if link is None or link.owner is not self:
            raise NotFoundError(f"{link!r} does not belong to this list")

    def get_link(self, index: int) -> Optional[Link]:
        """
        Get the link located at the given position.

        ``index == size`` is accepted as a cursor position one past the tail and
        yields None; it is never a real element.

        Args:
            index (int): Position between 0 and size, inclusive.

        Returns:
            Optional[Link]: The link at ``index``, or None when ``index == size``.

        Raises:
            IndexError: If index is negative or greater than size.
        """
        self._check_position(index)
        if index == self._size:
            return None
        if index == self._size - 1:
            return self._last
        node = self._first
        for _ in range(index):
            node = node.next
        return node

    def insert(self, index: int, value: Any) -> Link:
        """
        Insert a value before the given position.

        Inserting at 0 or at size takes constant time; any other position walks
        the list.

        Args:
            index (int): Position between 0 and size, inclusive.
            value (Any): The region to insert.

        Returns:
            Link: The handle of the new element.

        Raises:
            IndexError: If index is negative or greater than size.
        """
        self._check_position(index)
        link = Link(value, owner=self)

        if self._size == 0:
            self._first = link
            self._last = link
        elif index == 0:
            self._first.insert_before(link)
            self._first = link
        elif index == self._size:
            self._last.insert_after(link)
            self._last = link
        else:
            self.get_link(index).insert_before(link)

        self._size += 1
        return link

    def append_first(self, value: Any) -> Link:
        return self.insert(0, value)

    def append_last(self, value: Any) -> Link:
        return self.insert(self._size, value)

    def value_at(self, index: int) -> Any:
        """Return the payload at ``index``; valid positions are 0 to size - 1."""
        self._check_element(index)
        return self.get_link(index).value

    def index_of(self, value: Any) -> int:
        """
        Find the position of the first element holding ``value``.

        An element matches when it is the same object or compares equal.

        Args:
            value (Any): The region to look for.

        Returns:
            int: The index of the first match, or -1 if the value is absent.
        """
        for index, current in enumerate(self):
            if current is value or current == value:
                return index
        return -1

    def find_link(self, value: Any) -> Optional[Link]:
        for link in self.links():
            if link.value is value or link.value == value:
                return link
        return None

    def remove_link(self, link: Link) -> None:
        """
        Remove the element held by ``link`` from this list.

        Args:
            link (Link): A handle previously returned by this list.

        Raises:
            NotFoundError: If the link does not belong to this list.
        """
        self._check_owned(link)
        if link is self._first:
            self._first = link.next
        if link is self._last:
            self._last = link.prev
        link.unlink()
        self._size -= 1

    def remove_at(self, index: int) -> Any:
        """Remove the element at ``index`` and return its payload."""
        self._check_element(index)
        link = self.get_link(index)
        self.remove_link(link)
        return link.value

    def remove(self, value: Any) -> None:
        """
        Remove the first element holding ``value``.

        Raises:
            NotFoundError: If no element holds the value.
        """
        link = self.find_link(value)
        if link is None:
            raise NotFoundError(f"{value} is not in the list")
        self.remove_link(link)

    def replace(self, link: Link, value: Any) -> None:
        """Swap the payload held by ``link`` for ``value``, keeping its position."""
        self._check_owned(link)
        link.value = value

    def sort_by_start(self) -> None:
        """
        Reorder the list in place by ascending ``start``.

        Payloads are rewritten into the existing links, so handles stay attached to
        positions rather than to regions. Equal starts keep their relative order.
        """
        if self._size <= 1:
            return
        ordered = SortedKeyList(self.values(), key=attrgetter("start"))
        for link, value in zip(self.links(), ordered):
            link.value = value
        logger.debug(f"Sorted {self._size} regions by start address")

    def clear(self) -> None:
        while self._first is not None:
            self.remove_link(self._first)

    def links(self) -> Iterator[Link]:
        node = self._first
        while node is not None:
            yield node
            node = node.next

    def values(self) -> Iterator[Any]:
        for link in self.links():
            yield link.value

    def to_list(self) -> List[Any]:
        return list(self.values())

    def __iter__(self) -> Iterator[Any]:
        return self.values()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: Any) -> bool:
        return self.index_of(value) >= 0

    def __getitem__(self, index: int) -> Any:
        return self.value_at(index)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"RegionList([{', '.join(repr(value) for value in self)}])"
