from __future__ import annotations

from typing import Sequence

from bin_packer.models import Bin, PackingResult


def compute_metrics(capacity: int, bins: list[Bin]) -> tuple[int, int, float]:
    used = sum(b.total for b in bins)
    available = capacity * len(bins)
    fill_rate = 0.0 if available == 0 else used / available
    return used, available, fill_rate


def lower_bound(capacity: int, sizes: Sequence[int]) -> int:
    """Fewest bins any packing of these sizes could use."""
    if not sizes:
        return 0
    if capacity == 0:
        return 1
    return max(1, -(-sum(sizes) // capacity))


def summarize(capacity: int, bins: list[Bin]) -> PackingResult:
    sizes = [size for b in bins for size in b.sizes]
    used, _, fill_rate = compute_metrics(capacity, bins)
    return PackingResult(
        capacity=capacity,
        bins=bins,
        package_count=len(sizes),
        bin_count=len(bins),
        total_size=sum(sizes),
        used_capacity=used,
        fill_rate=fill_rate,
        lower_bound=lower_bound(capacity, sizes),
    )
