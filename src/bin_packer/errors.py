"""Errors raised when packing inputs violate the bin constraints."""

from __future__ import annotations

from typing import Any


class PackingError(ValueError):
    """Base class for input-validation failures detected before the pass."""

    code = "PACKING_ERROR"

    def details(self) -> dict[str, Any]:
        return {}


class InvalidCapacity(PackingError):
    """Raised when the bin capacity is negative or not an integer."""

    code = "INVALID_CAPACITY"

    def __init__(self, capacity: Any):
        self.capacity = capacity
        super().__init__(f"Bin capacity must be a non-negative integer, got {capacity!r}")

    def details(self) -> dict[str, Any]:
        return {"capacity": self.capacity}


class InvalidPackageSize(PackingError):
    """Raised when a package size is negative or not an integer."""

    code = "INVALID_PACKAGE_SIZE"

    def __init__(self, index: int, size: Any):
        self.index = index
        self.size = size
        super().__init__(f"Package[{index}] size must be a non-negative integer, got {size!r}")

    def details(self) -> dict[str, Any]:
        return {"index": self.index, "size": self.size}


class ItemTooLarge(PackingError):
    """Raised when a package can never be placed without overflowing a bin."""

    code = "ITEM_TOO_LARGE"

    def __init__(self, index: int, size: int, capacity: int):
        self.index = index
        self.size = size
        self.capacity = capacity
        super().__init__(f"Package[{index}] size {size} exceeds bin capacity {capacity}")

    def details(self) -> dict[str, Any]:
        return {"index": self.index, "size": self.size, "capacity": self.capacity}
