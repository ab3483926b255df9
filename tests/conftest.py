"""
Pytest configuration and fixtures for container tests.

The invariant fixtures return checker callables that walk a container's
internal structure and assert the relationships it must keep after every
public operation.
"""

from typing import Callable

import pytest

from pycontainers import Bag, DoublyLinkedList, DynamicArray, SinglyLinkedList


@pytest.fixture
def check_bag() -> Callable[[Bag], None]:
    """Chain from first has exactly size nodes."""

    def _check(bag: Bag) -> None:
        count = 0
        node = bag._first
        while node is not None:
            count += 1
            node = node.next_element
        assert count == bag.size()
        assert (bag._first is None) == (bag.size() == 0)

    return _check


@pytest.fixture
def check_array() -> Callable[[DynamicArray], None]:
    """size <= capacity and every unoccupied slot is None."""

    def _check(array: DynamicArray) -> None:
        assert 0 <= array.size() <= array.capacity
        assert array.capacity >= 1
        assert len(array._elements) == array.capacity
        for i in range(array.size(), array.capacity):
            assert array.get(i) is None

    return _check


@pytest.fixture
def check_slist() -> Callable[[SinglyLinkedList], None]:
    """Walked node count equals the recorded size."""

    def _check(slist: SinglyLinkedList) -> None:
        assert slist.size() >= 0
        assert slist.count() == slist.size()
        assert (slist.head is None) == (slist.size() == 0)

    return _check


@pytest.fixture
def check_dlist() -> Callable[[DoublyLinkedList], None]:
    """Forward and backward walks agree with each other and with size."""

    def _check(dll: DoublyLinkedList) -> None:
        head, tail = dll.head, dll.tail
        assert (head is None) == (tail is None) == (dll.size() == 0)
        if head is None:
            return

        assert head.previous is None
        assert tail.next is None

        forward = []
        link = head
        while link is not None:
            if link.next is not None:
                assert link.next.previous is link
            forward.append(link.value)
            link = link.next

        backward = []
        link = tail
        while link is not None:
            if link.previous is not None:
                assert link.previous.next is link
            backward.append(link.value)
            link = link.previous

        assert len(forward) == dll.size()
        assert forward == backward[::-1]
        assert list(reversed(dll)) == backward

    return _check
