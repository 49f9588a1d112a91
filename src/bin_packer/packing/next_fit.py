# src/bin_packer/packing/next_fit.py

from __future__ import annotations

import logging
from typing import Sequence

from bin_packer.models import Bin, Package
from bin_packer.packing.constraints import check_capacity, check_size, validate

logger = logging.getLogger(__name__)


def to_packages(sizes: Sequence[int]) -> list[Package]:
    """Tag each size with its position in the input sequence."""
    return [Package(index=i, size=check_size(i, size)) for i, size in enumerate(sizes)]


def pack_packages(capacity: int, packages: Sequence[Package]) -> list[Bin]:
    """
    Decreasing next-fit packer.
    - Sorts packages by size, largest first (stable: ties keep input order)
    - Only ever tries the most recently opened bin
    - Opens a new bin when the package does not fit; earlier bins are never revisited
    - Deterministic (no randomness)

    Raises:
        InvalidCapacity: capacity is negative
        ItemTooLarge: a package is larger than capacity
    """
    validate(capacity, packages)

    # Sort big packages first (helps fill)
    packages_sorted = sorted(packages, key=lambda p: p.size, reverse=True)

    bins: list[Bin] = []
    current: Bin | None = None

    for package in packages_sorted:
        if current is not None and current.can_fit(package):
            current.add_package(package)
            continue

        current = Bin(capacity=capacity)
        current.add_package(package)
        bins.append(current)
        logger.debug(
            "Opened bin %d with package %d (size=%d)", len(bins), package.index, package.size
        )

    logger.info("Packed %d packages into %d bins (capacity=%d)", len(packages_sorted), len(bins), capacity)
    return bins


def pack(capacity: int, sizes: Sequence[int]) -> list[Bin]:
    """
    Pack integer sizes into bins of the given capacity.

    Args:
        capacity: Capacity shared by every bin
        sizes: Package sizes, in input order

    Returns:
        Bins in creation order; each bin's total is at most capacity
    """
    check_capacity(capacity)
    return pack_packages(capacity, to_packages(sizes))
