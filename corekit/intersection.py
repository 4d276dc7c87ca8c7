"""Intersection of integer lists."""

from __future__ import annotations

import argparse
from typing import Iterable

from corekit.hashing import format_value


def find_intersection(first: Iterable[int], second: Iterable[int]) -> tuple[bool, list[int]]:
    """Return whether the lists share any value, and the shared values.

    Shared values appear once each, in the order of their first occurrence in ``second``.
    """
    present = set(first)
    common = list(dict.fromkeys(item for item in second if item in present))
    return bool(common), common


def main(argv: list[str] | None = None) -> int:
    """Print the intersection for a few sample pairs of lists."""
    parser = argparse.ArgumentParser(description="Demonstrate list intersection.")
    parser.parse_args(argv)

    examples = [
        ("a", [65, 3, 58, 678, 64], "b", [64, 2, 3, 43]),
        ("c", [1, 2, 3], "d", [4, 5, 6]),
        ("e", [1, 2, 3, 3, 2, 1], "f", [3, 2, 1, 1, 2, 3]),
    ]
    for first_name, first, second_name, second in examples:
        found, common = find_intersection(first, second)
        print(f"Slice {first_name}:", format_value(first))
        print(f"Slice {second_name}:", format_value(second))
        print("Has intersection:", format_value(found))
        print("Intersection:", format_value(common))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())