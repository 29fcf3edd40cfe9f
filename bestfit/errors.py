"""Exceptions raised by the packing heuristics."""

from __future__ import annotations


class PackingError(Exception):
    """Base class for all packing errors."""


class InvalidItemSize(PackingError, ValueError):
    """An item can never be placed because its size is outside ``[1, K]``."""

    def __init__(self, index: int, size: object, capacity: int) -> None:
        self.index = index
        self.size = size
        self.capacity = capacity
        super().__init__(
            f"Item {index} has size {size!r}, expected an integer in [1, {capacity}]"
        )


class InvalidConfiguration(PackingError, ValueError):
    """The problem configuration does not match the items it is used with."""


class AllocationFailure(PackingError, MemoryError):
    """Working storage for a packing run could not be allocated."""


class InvariantViolation(PackingError, RuntimeError):
    """A packing broke a structural guarantee. Always an implementation bug."""
