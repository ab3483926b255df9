"""
SinglyLinkedList - head-anchored chain of integer nodes.

Positions are zero-based. Insertion accepts positions [0, size];
reads and deletions accept [0, size - 1].
"""

from __future__ import annotations

import logging
from typing import Iterator

from pycontainers.errors import IndexOutOfRange

logger = logging.getLogger(__name__)


class Node:
    """List node holding an integer value and the next link."""

    __slots__ = ("value", "next")

    def __init__(self, value: int, next: Node | None = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value})"


class SinglyLinkedList:
    """Singly linked list of integers with positional insert and delete."""

    def __init__(self) -> None:
        self._head: Node | None = None
        self._size = 0

    @property
    def head(self) -> Node | None:
        """First node, or None if empty."""
        return self._head

    def insert_head(self, x: int) -> None:
        """Insert at the head of the list."""
        self.insert_nth(x, 0)

    def insert(self, data: int) -> None:
        """Append at the tail of the list."""
        self.insert_nth(data, self._size)

    def insert_nth(self, data: int, position: int) -> None:
        """
        Insert a new node so that it ends up at ``position``.

        Raises IndexOutOfRange unless 0 <= position <= size.
        """
        self.check_bounds(position, 0, self._size, self._size)

        new_node = Node(data)
        if position == 0:
            new_node.next = self._head
            self._head = new_node
        else:
            cur = self._node_before(position)
            new_node.next = cur.next
            cur.next = new_node
        self._size += 1

    def delete_head(self) -> None:
        """Delete the head node."""
        self.delete_nth(0)

    def delete(self) -> None:
        """Delete the tail node."""
        self.delete_nth(self._size - 1)

    def delete_nth(self, position: int) -> None:
        """
        Delete the node at ``position``.

        Raises IndexOutOfRange unless 0 <= position <= size - 1.
        """
        self.check_bounds(position, 0, self._size - 1, self._size)

        if position == 0:
            destroy = self._head
            self._head = destroy.next  # type: ignore[union-attr]
        else:
            cur = self._node_before(position)
            destroy = cur.next
            cur.next = destroy.next  # type: ignore[union-attr]
        destroy.next = None  # type: ignore[union-attr]
        self._size -= 1

    def _node_before(self, position: int) -> Node:
        """Node at position - 1. Caller has already bounds-checked."""
        cur = self._head
        for _ in range(position - 1):
            cur = cur.next  # type: ignore[union-attr]
        return cur  # type: ignore[return-value]

    @staticmethod
    def check_bounds(position: int, low: int, high: int, size: int | None = None) -> None:
        """Raise IndexOutOfRange if position is outside [low, high]."""
        if position > high or position < low:
            raise IndexOutOfRange(position, size)

    def clear(self) -> None:
        """Unlink every node and reset the list."""
        cur = self._head
        while cur is not None:
            nxt = cur.next
            cur.next = None
            cur = nxt
        logger.debug("SinglyLinkedList cleared %d nodes", self._size)
        self._head = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def count(self) -> int:
        """Count nodes by walking the chain."""
        count = 0
        cur = self._head
        while cur is not None:
            cur = cur.next
            count += 1
        return count

    def search(self, key: int) -> bool:
        """Check whether any node holds ``key``."""
        for value in self:
            if value == key:
                return True
        return False

    def __contains__(self, key: object) -> bool:
        return self.search(key)  # type: ignore[arg-type]

    def get_nth(self, index: int) -> int:
        """Value at ``index``; raises IndexOutOfRange unless 0 <= index <= size - 1."""
        self.check_bounds(index, 0, self._size - 1, self._size)
        cur = self._head
        for _ in range(index):
            cur = cur.next  # type: ignore[union-attr]
        return cur.value  # type: ignore[union-attr]

    def __iter__(self) -> Iterator[int]:
        cur = self._head
        while cur is not None:
            yield cur.value
            cur = cur.next

    def __str__(self) -> str:
        return "->".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"
