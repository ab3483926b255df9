"""
DynamicArray - indexed sequence with geometric growth.

Live elements occupy positions [0, size) of a backing list whose length is
the capacity. Positions [size, capacity) are unoccupied and hold None.
When an append would overflow, the backing list is reallocated with
GROWTH_FACTOR times the capacity, which keeps appends amortized O(1).
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, TypeVar

from pycontainers.errors import (
    ConcurrentModification,
    IllegalState,
    IndexOutOfRange,
    NoSuchElement,
    NullInput,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2


class DynamicArray(Generic[E]):
    """
    Array that doubles its capacity when full.

    Removing an element shifts the tail left by one; capacity never
    shrinks except through trim_to_size().
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1 (got {capacity})")
        self._size = 0
        self._capacity = capacity
        self._elements: list[E | None] = [None] * capacity

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return self._capacity

    def new_capacity(self) -> int:
        """Capacity the next growth step would allocate. Changes nothing."""
        return self._capacity * GROWTH_FACTOR

    def add(self, element: E) -> None:
        """
        Append element at position size.

        The backing list is reallocated first if it is full.
        """
        if self._size == len(self._elements):
            old_capacity = self._capacity
            new_capacity = self.new_capacity()
            self._elements = self._elements + [None] * (new_capacity - old_capacity)
            self._capacity = new_capacity
            logger.debug("DynamicArray grew from %d to %d slots", old_capacity, self._capacity)

        self._elements[self._size] = element
        self._size += 1

    def put(self, index: int, element: E) -> None:
        """Overwrite the slot at index without changing size."""
        self._check_slot(index)
        self._elements[index] = element

    def get(self, index: int) -> E | None:
        """
        Return the element at index.

        Unoccupied slots in [size, capacity) return None.
        """
        self._check_slot(index)
        return self._elements[index]

    def remove(self, index: int) -> E:
        """Remove and return the element at index, compacting the tail."""
        if index < 0 or index >= self._size:
            raise IndexOutOfRange(index, self._size)

        old_element = self._elements[index]
        self._fast_remove(index)
        return old_element  # type: ignore[return-value]

    def _fast_remove(self, index: int) -> None:
        """
        Shift [index + 1, size) left by one and clear the vacated slot.

        Size drops by one; capacity is unchanged.
        """
        new_size = self._size - 1
        if new_size > index:
            self._elements[index:new_size] = self._elements[index + 1 : self._size]
        self._elements[new_size] = None
        self._size = new_size

    def _check_slot(self, index: int) -> None:
        if index < 0 or index >= self._capacity:
            raise IndexOutOfRange(index, self._capacity)

    def trim_to_size(self) -> None:
        """Shrink the backing list to the live elements (at least one slot)."""
        new_capacity = max(self._size, 1)
        if new_capacity == self._capacity:
            return
        logger.debug("DynamicArray trimmed from %d to %d slots", self._capacity, new_capacity)
        self._elements = self._elements[:new_capacity]
        self._capacity = new_capacity

    def size(self) -> int:
        """Number of live elements (not the capacity)."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def stream(self) -> Iterator[E]:
        """Lazily yield the live elements in index order."""
        for i in range(self._size):
            yield self._elements[i]  # type: ignore[misc]

    def iterator(self) -> DynamicArrayIterator[E]:
        return DynamicArrayIterator(self)

    def __iter__(self) -> Iterator[E]:
        return self.iterator()

    def __str__(self) -> str:
        """Render the occupied slots, e.g. ``[Peubes, Marley]``."""
        return "[" + ", ".join(str(e) for e in self._elements if e is not None) + "]"

    def __repr__(self) -> str:
        return f"DynamicArray(size={self._size}, capacity={self._capacity})"


class DynamicArrayIterator(Iterator[E]):
    """
    Forward iterator over a DynamicArray.

    Holds no snapshot: it reads the array's current state on every step.
    If the backing list shrinks below the cursor, the next step raises
    ConcurrentModification.
    """

    def __init__(self, array: DynamicArray[E]) -> None:
        self._array = array
        self._cursor = 0
        self._last_returned = -1

    def has_next(self) -> bool:
        return self._cursor < self._array._size

    def __next__(self) -> E:
        array = self._array
        if self._cursor > len(array._elements):
            raise ConcurrentModification(
                f"cursor {self._cursor} is past backing length {len(array._elements)}"
            )
        if self._cursor >= array._size:
            raise NoSuchElement()

        element = array._elements[self._cursor]
        self._last_returned = self._cursor
        self._cursor += 1
        return element  # type: ignore[return-value]

    def __iter__(self) -> DynamicArrayIterator[E]:
        return self

    def remove(self) -> None:
        """Remove the element most recently returned and rewind the cursor."""
        if self._last_returned < 0:
            raise IllegalState("remove() requires a preceding next()")

        self._array.remove(self._last_returned)
        self._cursor -= 1
        self._last_returned = -1

    def for_each_remaining(self, action: Callable[[E], object]) -> None:
        """Apply action to every live element, starting from position 0."""
        if action is None:
            raise NullInput("action must not be None")

        for i in range(self._array._size):
            action(self._array._elements[i])  # type: ignore[arg-type]
