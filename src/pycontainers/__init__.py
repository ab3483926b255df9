"""
PyContainers - fundamental container data structures.

Four self-contained containers, each showing one shape of element storage
and traversal:

- Bag: add-only multiset, iterated in reverse insertion order
- DynamicArray: indexed sequence with geometric growth
- SinglyLinkedList: integer list with positional insert/delete/search
- DoublyLinkedList: integer list with head/tail/ordered insertion
"""

from pycontainers.bag import Bag, BagIterator
from pycontainers.dynamic_array import (
    DEFAULT_CAPACITY,
    GROWTH_FACTOR,
    DynamicArray,
    DynamicArrayIterator,
)
from pycontainers.singly_linked_list import Node, SinglyLinkedList
from pycontainers.doubly_linked_list import DoublyLinkedList, Link
from pycontainers.errors import (
    ContainerError,
    IndexOutOfRange,
    NoSuchElement,
    UnsupportedOperation,
    NotFound,
    ConcurrentModification,
    NullInput,
    EmptyList,
    IllegalState,
)

__version__ = "0.1.0"
__all__ = [
    # Containers
    "Bag",
    "BagIterator",
    "DynamicArray",
    "DynamicArrayIterator",
    "DEFAULT_CAPACITY",
    "GROWTH_FACTOR",
    "SinglyLinkedList",
    "Node",
    "DoublyLinkedList",
    "Link",
    # Errors
    "ContainerError",
    "IndexOutOfRange",
    "NoSuchElement",
    "UnsupportedOperation",
    "NotFound",
    "ConcurrentModification",
    "NullInput",
    "EmptyList",
    "IllegalState",
]
