"""
DoublyLinkedList - integer list anchored at both head and tail.

Every Link knows its successor (next) and predecessor (previous).
The list keeps these invariants after each public operation:

- walking next from head and previous from tail both visit size links
- head is None iff tail is None iff size == 0
- head.previous is None and tail.next is None
- n.previous.next is n and n.next.previous is n wherever defined

Each insertion adds exactly one to size and each deletion removes exactly
one, whichever branch handles it.
"""

from __future__ import annotations

import logging
from typing import IO, Iterable, Iterator

from pycontainers.errors import EmptyList, IndexOutOfRange, NotFound, NullInput

logger = logging.getLogger(__name__)


class Link:
    """Node of a DoublyLinkedList."""

    __slots__ = ("value", "next", "previous")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: Link | None = None
        self.previous: Link | None = None

    def display_link(self, file: IO[str] | None = None) -> None:
        """Print the value followed by a space."""
        print(self.value, end=" ", file=file)

    def __repr__(self) -> str:
        return f"Link({self.value})"


class DoublyLinkedList:
    """Doubly linked list of integers."""

    def __init__(self) -> None:
        self._head: Link | None = None
        self._tail: Link | None = None
        self._size = 0

    @classmethod
    def from_array(cls, array: Iterable[int] | None) -> DoublyLinkedList:
        """
        Build a list holding the values of ``array`` in order.

        Raises NullInput if array is None.
        """
        if array is None:
            raise NullInput("array must not be None")
        dll = cls()
        for value in array:
            dll.insert_tail(value)
        return dll

    @property
    def head(self) -> Link | None:
        return self._head

    @property
    def tail(self) -> Link | None:
        return self._tail

    def insert_head(self, x: int) -> None:
        """Insert x before the current head."""
        new_link = Link(x)
        if self.is_empty():
            self._tail = new_link
        else:
            self._head.previous = new_link  # type: ignore[union-attr]
        new_link.next = self._head
        self._head = new_link
        self._size += 1

    def insert_tail(self, x: int) -> None:
        """Insert x after the current tail."""
        new_link = Link(x)
        if self.is_empty():
            self._head = new_link
        else:
            self._tail.next = new_link  # type: ignore[union-attr]
            new_link.previous = self._tail
        self._tail = new_link
        self._size += 1

    def insert_element_by_index(self, x: int, index: int) -> None:
        """
        Insert x so that it ends up at ``index``.

        Raises IndexOutOfRange unless 0 <= index <= size.
        """
        if index < 0 or index > self._size:
            raise IndexOutOfRange(index, self._size)

        if index == 0:
            self.insert_head(x)
        elif index == self._size:
            self.insert_tail(x)
        else:
            current = self._head
            for _ in range(index):
                current = current.next  # type: ignore[union-attr]
            self._add_before(current, Link(x))  # type: ignore[arg-type]

    def insert_ordered(self, x: int) -> None:
        """
        Insert x before the first link whose value is >= x.

        Keeps a non-decreasing list non-decreasing; ordering is not checked.
        """
        current = self._head
        while current is not None and x > current.value:
            current = current.next

        if current is self._head:
            self.insert_head(x)
        elif current is None:
            self.insert_tail(x)
        else:
            self._add_before(current, Link(x))

    def _add_before(self, current: Link, new_link: Link) -> None:
        """Splice new_link in front of current, which is not the head."""
        new_link.previous = current.previous
        new_link.next = current
        current.previous.next = new_link  # type: ignore[union-attr]
        current.previous = new_link
        self._size += 1

    def delete_head(self) -> Link:
        """
        Remove and return the head link.

        Raises EmptyList if the list is empty.
        """
        if self._head is None:
            raise EmptyList("delete_head() on an empty list")

        temp = self._head
        self._head = temp.next
        if self._head is None:
            self._tail = None
        else:
            self._head.previous = None
        temp.next = None
        self._size -= 1
        return temp

    def delete_tail(self) -> Link:
        """
        Remove and return the tail link.

        Raises EmptyList if the list is empty.
        """
        if self._tail is None:
            raise EmptyList("delete_tail() on an empty list")

        temp = self._tail
        self._tail = temp.previous
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        temp.previous = None
        self._size -= 1
        return temp

    def delete(self, x: int) -> None:
        """
        Remove the first link whose value equals x.

        Raises NotFound if there is none.
        """
        current = self._head
        while current is not None and current.value != x:
            current = current.next

        if current is None:
            raise NotFound(x)
        self.delete_node(current)

    def delete_node(self, z: Link) -> None:
        """
        Unlink z, which must belong to this list.

        A detached link (no predecessor and not the head) raises NotFound.
        """
        if self._head is None:
            raise EmptyList("delete_node() on an empty list")
        if z.previous is None and z is not self._head:
            raise NotFound(z.value)

        if z.next is None:
            self.delete_tail()
        elif z is self._head:
            self.delete_head()
        else:
            self._splice_out(z)

    def _splice_out(self, z: Link) -> None:
        """Unlink an interior link (neither head nor tail)."""
        z.previous.next = z.next  # type: ignore[union-attr]
        z.next.previous = z.previous  # type: ignore[union-attr]
        z.next = None
        z.previous = None
        self._size -= 1

    @staticmethod
    def remove_duplicates(dll: DoublyLinkedList) -> int:
        """
        Remove every link whose value already appeared earlier in dll.

        The first occurrence of each value survives. Returns the number of
        links removed. O(n^2).
        """
        removed = 0
        link_one = dll._head
        while link_one is not None:
            link_two = link_one.next
            while link_two is not None:
                following = link_two.next
                if link_two.value == link_one.value:
                    dll.delete_node(link_two)
                    removed += 1
                link_two = following
            link_one = link_one.next

        if removed:
            logger.debug("DoublyLinkedList removed %d duplicate links", removed)
        return removed

    def clear_list(self) -> None:
        """Drop every link."""
        current = self._head
        while current is not None:
            following = current.next
            current.next = None
            current.previous = None
            current = following
        logger.debug("DoublyLinkedList cleared %d links", self._size)
        self._head = None
        self._tail = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def display(self, file: IO[str] | None = None) -> None:
        """Print each value followed by a space, then a newline."""
        current = self._head
        while current is not None:
            current.display_link(file)
            current = current.next
        print(file=file)

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __reversed__(self) -> Iterator[int]:
        current = self._tail
        while current is not None:
            yield current.value
            current = current.previous

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"
