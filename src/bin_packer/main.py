from __future__ import annotations

import logging
import random
from typing import Optional

from bin_packer.config import Settings, load_settings
from bin_packer.generator import generate_sizes, make_rng
from bin_packer.metrics import summarize
from bin_packer.models import PackingResult
from bin_packer.packing.next_fit import pack


def format_report(result: PackingResult) -> str:
    return f"Optimized {result.package_count} packages into {result.bin_count} bins"


def run(settings: Settings, rng: Optional[random.Random] = None) -> PackingResult:
    """Generate settings.package_count packages and pack them into bins of settings.bin_size."""
    if rng is None:
        rng = make_rng(settings.seed)
    sizes = generate_sizes(settings.package_count, settings.max_package_size, rng)
    bins = pack(settings.bin_size, sizes)
    return summarize(settings.bin_size, bins)


def print_result(result: PackingResult) -> None:
    print(format_report(result))
    print(f"  Bin capacity     : {result.capacity}")
    print(f"  Lower bound      : {result.lower_bound} bins")
    print(f"  Fill rate        : {result.fill_rate * 100:.2f}%")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    print_result(run(settings))


if __name__ == "__main__":
    main()
