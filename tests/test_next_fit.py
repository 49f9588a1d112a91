from __future__ import annotations

import logging

import pytest

from bin_packer.errors import InvalidCapacity, InvalidPackageSize, ItemTooLarge
from bin_packer.generator import generate_sizes, make_rng
from bin_packer.models import Package
from bin_packer.packing.next_fit import pack, pack_packages


def bin_sizes(bins):
    return [b.sizes for b in bins]


def assert_conserved(sizes, bins):
    packed = sorted(size for b in bins for size in b.sizes)
    assert packed == sorted(sizes)


def test_empty_input_returns_no_bins() -> None:
    """Test that packing nothing opens no bins."""
    assert pack(10, []) == []


def test_single_item_fitting_exactly() -> None:
    bins = pack(10, [10])

    assert bin_sizes(bins) == [[10]]
    assert bins[0].total == 10
    assert bins[0].remaining == 0


def test_current_bin_only_fit_policy() -> None:
    """
    6 opens bin A, 5 does not fit in A and opens bin B, 4 fits in B.
    4 is never tried in A even though 6 + 4 == 10 would fit.
    """
    bins = pack(10, [6, 5, 4])

    assert bin_sizes(bins) == [[6], [5, 4]]
    assert [b.total for b in bins] == [6, 9]


def test_earlier_bins_are_never_revisited() -> None:
    # Sorted: 7, 6, 3, 2, 2 -> [7] then 6 opens B, 3 fits (9), 2 overflows (11) -> C
    bins = pack(10, [2, 7, 3, 6, 2])

    assert bin_sizes(bins) == [[7], [6, 3], [2, 2]]


def test_items_are_sorted_descending() -> None:
    bins = pack(100, [1, 5, 3, 4, 2])

    assert bin_sizes(bins) == [[5, 4, 3, 2, 1]]


def test_equal_sizes_keep_input_order() -> None:
    bins = pack(10, [5, 3, 5, 3, 5])

    indices = [[p.index for p in b.packages] for b in bins]
    assert indices == [[0, 2], [4, 1], [3]]


def test_zero_size_packages_share_a_bin() -> None:
    bins = pack(0, [0, 0, 0])

    assert bin_sizes(bins) == [[0, 0, 0]]


def test_oversized_item_is_rejected() -> None:
    """Oversized packages are rejected up front instead of overflowing a bin of their own."""
    with pytest.raises(ItemTooLarge) as exc_info:
        pack(5, [7])

    err = exc_info.value
    assert (err.index, err.size, err.capacity) == (0, 7, 5)
    assert err.code == "ITEM_TOO_LARGE"


def test_oversized_item_rejected_before_any_bin_is_built() -> None:
    with pytest.raises(ItemTooLarge) as exc_info:
        pack(10, [3, 4, 11, 2])

    assert exc_info.value.index == 2


def test_negative_capacity_is_rejected() -> None:
    with pytest.raises(InvalidCapacity):
        pack(-1, [1])


def test_negative_size_is_rejected() -> None:
    with pytest.raises(InvalidPackageSize) as exc_info:
        pack(10, [1, -3])

    assert exc_info.value.index == 1


def test_non_integer_size_is_rejected() -> None:
    with pytest.raises(InvalidPackageSize):
        pack(10, [1.5])


def test_boolean_size_is_rejected() -> None:
    with pytest.raises(InvalidPackageSize) as exc_info:
        pack(10, [3, True])

    assert exc_info.value.index == 1


def test_packing_logs_opened_bins_and_summary(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="bin_packer.packing.next_fit")

    pack(10, [6, 5, 4])

    messages = [r.getMessage() for r in caplog.records if r.name == "bin_packer.packing.next_fit"]
    assert messages == [
        "Opened bin 1 with package 0 (size=6)",
        "Opened bin 2 with package 1 (size=5)",
        "Packed 3 packages into 2 bins (capacity=10)",
    ]


def test_pack_packages_accepts_tagged_packages() -> None:
    packages = [Package(index=10, size=3), Package(index=11, size=8)]

    bins = pack_packages(10, packages)

    assert [[p.index for p in b.packages] for b in bins] == [[11], [10]]


def test_random_run_respects_invariants() -> None:
    """Conservation, count and capacity invariants for a generated run."""
    sizes = generate_sizes(100, 100, make_rng(7))

    bins = pack(400, sizes)

    assert_conserved(sizes, bins)
    assert sum(len(b.packages) for b in bins) == len(sizes)
    assert all(b.total <= 400 for b in bins)
    assert sum(b.total for b in bins) == sum(sizes)


def test_packing_is_deterministic() -> None:
    sizes = generate_sizes(50, 40, make_rng(3))

    first = pack(60, sizes)
    second = pack(60, sizes)

    assert [b.packages for b in first] == [b.packages for b in second]


def test_input_sequence_is_not_mutated() -> None:
    sizes = [1, 9, 4]

    pack(10, sizes)

    assert sizes == [1, 9, 4]
