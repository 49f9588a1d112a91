"""Random package sizes for demo and benchmark runs."""

from __future__ import annotations

import random
from typing import Optional


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def generate_sizes(count: int, max_size: int, rng: random.Random) -> list[int]:
    """
    Draw package sizes uniformly from [0, max_size).

    Args:
        count: Number of packages
        max_size: Exclusive upper bound on a package size
        rng: Random source; pass a seeded one for reproducible runs
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if max_size <= 0:
        raise ValueError(f"max_size must be > 0, got {max_size}")
    return [rng.randrange(max_size) for _ in range(count)]
