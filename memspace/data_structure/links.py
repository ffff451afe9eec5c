from __future__ import annotations
from typing import Any, Optional


class Link:
    __slots__ = ("_prev", "_next", "_value", "_owner")

    def __init__(self, value: Any, owner: Any = None):
        """
        Create a non-circular doubly linked node.

        The node starts detached: both neighbours are ``None``. ``owner`` records the
        container the node currently belongs to, so that a container can reject
        handles it does not own.

        Args:
            value (Any): The payload stored in the node.
            owner (Any): The container holding this node, or None when detached.

        Returns:
            None

        Example:
            >>> link = Link("A")
            >>> link.value
            'A'
            >>> link.prev is None and link.next is None
            True
        """
        self._prev: Optional[Link] = None
        self._next: Optional[Link] = None
        self._value: Any = value
        self._owner: Any = owner

    @property
    def prev(self) -> Optional[Link]:
        return self._prev

    @property
    def next(self) -> Optional[Link]:
        return self._next

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def is_detached(self) -> bool:
        return self._owner is None and self._prev is None and self._next is None

    def insert_after(self, node: Link) -> None:
        """Insert a node after the current node.

        Args:
                node (Link): The node to be inserted.

        Returns:
                None
        """
        node._prev = self
        node._next = self._next
        if self._next:
            self._next._prev = node
        self._next = node

    def insert_before(self, node: Link) -> None:
        """Insert a node before the current node.

        Args:
                node (Link): The node to be inserted.

        Returns:
                None
        """
        node._next = self
        node._prev = self._prev
        if self._prev:
            self._prev._next = node
        self._prev = node

    def unlink(self) -> None:
        """Remove the current node from its chain and drop the owner reference."""
        if self._prev:
            self._prev._next = self._next
        if self._next:
            self._next._prev = self._prev
        self._prev = None
        self._next = None
        self._owner = None

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Link({self._value!r})"
