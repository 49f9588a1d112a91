"""Constraints checked on packing inputs before the pass."""

from __future__ import annotations

from typing import Any, Iterable

from bin_packer.errors import InvalidCapacity, InvalidPackageSize, ItemTooLarge
from bin_packer.models import Package


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_capacity(capacity: Any) -> int:
    """
    Check that a bin capacity is usable.

    Args:
        capacity: Capacity shared by every bin in the run

    Returns:
        The capacity, unchanged

    Raises:
        InvalidCapacity: if capacity is negative or not an integer
    """
    if not _is_int(capacity) or capacity < 0:
        raise InvalidCapacity(capacity)
    return capacity


def check_size(index: int, size: Any) -> int:
    if not _is_int(size) or size < 0:
        raise InvalidPackageSize(index, size)
    return size


def check_package(package: Package, capacity: int) -> None:
    """Reject a package that could never be placed without overflowing a bin."""
    if package.size > capacity:
        raise ItemTooLarge(package.index, package.size, capacity)


def validate(capacity: Any, packages: Iterable[Package]) -> None:
    check_capacity(capacity)
    for package in packages:
        check_package(package, capacity)
