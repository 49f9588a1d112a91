from __future__ import annotations

import pytest

from bin_packer.generator import generate_sizes, make_rng


def test_sizes_within_range() -> None:
    sizes = generate_sizes(500, 100, make_rng(1))

    assert len(sizes) == 500
    assert all(0 <= s < 100 for s in sizes)
    assert all(isinstance(s, int) for s in sizes)


def test_same_seed_same_sizes() -> None:
    assert generate_sizes(50, 100, make_rng(42)) == generate_sizes(50, 100, make_rng(42))


def test_zero_count() -> None:
    assert generate_sizes(0, 100, make_rng(1)) == []


@pytest.mark.parametrize("count, max_size", [(-1, 100), (10, 0), (10, -5)])
def test_invalid_arguments(count: int, max_size: int) -> None:
    with pytest.raises(ValueError):
        generate_sizes(count, max_size, make_rng(1))
