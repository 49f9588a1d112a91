from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from bin_packer.config import Settings, load_settings
from bin_packer.errors import PackingError
from bin_packer.main import format_report, print_result, run
from bin_packer.metrics import summarize
from bin_packer.models import PackingResult
from bin_packer.packing.next_fit import pack

logger = logging.getLogger(__name__)


def load_input(path: Path, settings: Settings) -> tuple[int, list[int]]:
    """
    Read a packing input file.

    Expected shape: {"capacity": 400, "sizes": [12, 7, ...]}
    capacity is optional and falls back to the configured bin size.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Input must be a JSON object")
    if "sizes" not in data or not isinstance(data["sizes"], list):
        raise ValueError("Input must include a 'sizes' list")

    capacity = data.get("capacity", settings.bin_size)
    return capacity, data["sizes"]


def write_plan(result: PackingResult, output_path: str) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result.model_dump(), f, indent=2, sort_keys=True)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides: dict[str, Any] = {}
    if args.capacity is not None:
        overrides["bin_size"] = args.capacity
    if args.count is not None:
        overrides["package_count"] = args.count
    if args.max_size is not None:
        overrides["max_package_size"] = args.max_size
    if args.seed is not None:
        overrides["seed"] = args.seed
    return dataclasses.replace(settings, **overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bin Packer CLI")
    parser.add_argument("--capacity", type=int, help="Bin capacity (default: BIN_PACKER_BIN_SIZE or 400)")
    parser.add_argument("--count", type=int, help="Number of random packages to generate")
    parser.add_argument("--max-size", type=int, help="Exclusive upper bound on generated package sizes")
    parser.add_argument("--seed", type=int, help="Seed for reproducible package generation")
    parser.add_argument("--input", help="Input JSON file with 'sizes' (and optional 'capacity')")
    parser.add_argument("--output", help="Output plan JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = apply_overrides(load_settings(), args)
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)

    try:
        if args.input:
            try:
                capacity, sizes = load_input(Path(args.input), settings)
            except (OSError, ValueError) as e:
                print(f"Invalid input file {args.input}: {e}", file=sys.stderr)
                return 1
            if args.capacity is not None:
                capacity = args.capacity
            result = summarize(capacity, pack(capacity, sizes))
        else:
            result = run(settings)
    except PackingError as e:
        logger.debug("Packing rejected: %s", e.details())
        print(f"{e.code}: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print_result(result)
    else:
        print(format_report(result))

    if args.output:
        write_plan(result, args.output)
        print(f"Plan written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
