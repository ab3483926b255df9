"""
Bag - add-only multiset.

A bag only supports adding and traversing elements; nothing can be
removed. Internally it is a singly linked chain that only grows at the
front, so iteration yields elements in reverse insertion order.
"""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from pycontainers.errors import NoSuchElement, UnsupportedOperation

E = TypeVar("E")


class _Node(Generic[E]):
    """Chain node: an element and the link to the next node."""

    __slots__ = ("content", "next_element")

    def __init__(self, content: E, next_element: _Node[E] | None = None) -> None:
        self.content = content
        self.next_element = next_element


class Bag(Generic[E]):
    """
    Add-only collection of elements.

    ``first`` always names the most recently added node.
    """

    def __init__(self) -> None:
        self._first: _Node[E] | None = None
        self._size = 0

    def is_empty(self) -> bool:
        """Check if bag is empty."""
        return self._first is None

    def size(self) -> int:
        """Number of elements."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def add(self, element: E) -> None:
        """Add element at the front of the chain."""
        self._first = _Node(element, self._first)
        self._size += 1

    def contains(self, element: E) -> bool:
        """
        Check whether the bag holds an element equal to ``element``.

        None is a valid probe: it only matches a stored None.
        """
        for item in self:
            if item is element or item == element:
                return True
        return False

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def iterator(self) -> BagIterator[E]:
        """Return an iterator over the elements, most recent first."""
        return BagIterator(self._first)

    def __iter__(self) -> Iterator[E]:
        return self.iterator()

    def __repr__(self) -> str:
        return f"Bag({list(self)!r})"


class BagIterator(Iterator[E]):
    """Forward iterator over a bag's chain."""

    def __init__(self, first: _Node[E] | None) -> None:
        self._current = first

    def has_next(self) -> bool:
        return self._current is not None

    def __next__(self) -> E:
        if self._current is None:
            raise NoSuchElement()
        element = self._current.content
        self._current = self._current.next_element
        return element

    def __iter__(self) -> BagIterator[E]:
        return self

    def remove(self) -> None:
        """Removal is not allowed in a bag."""
        raise UnsupportedOperation("remove is not supported by Bag")
