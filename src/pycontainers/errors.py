"""
Container error taxonomy.

Every error derives from ContainerError and from the builtin exception a
Python caller would already expect, so ``except IndexError`` and friends
keep working.
"""

from __future__ import annotations


class ContainerError(Exception):
    """Base class for all container errors."""


class IndexOutOfRange(ContainerError, IndexError):
    """Positional operation called with an index outside its allowed range."""

    def __init__(self, index: int, size: int | None = None) -> None:
        self.index = index
        self.size = size
        if size is None:
            message = str(index)
        else:
            message = f"Index: {index}, Size: {size}"
        super().__init__(message)


class NoSuchElement(ContainerError, StopIteration):
    """
    Iterator advanced past its end.

    Subclasses StopIteration so ``for`` loops over the class-based
    iterators terminate normally.
    """


class UnsupportedOperation(ContainerError, NotImplementedError):
    """Operation not supported by this container."""


class NotFound(ContainerError, ValueError):
    """No element with the requested value."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"The element to be deleted does not exist: {value!r}")


class ConcurrentModification(ContainerError, RuntimeError):
    """Backing storage shrank underneath an active iterator."""


class NullInput(ContainerError, TypeError):
    """Required input was None."""


class EmptyList(ContainerError, IndexError):
    """Removal requested from an empty list."""


class IllegalState(ContainerError, RuntimeError):
    """Iterator operation called out of sequence."""
