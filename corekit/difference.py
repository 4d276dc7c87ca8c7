"""Set difference of string lists, keeping order and duplicates."""

from __future__ import annotations

import argparse
from typing import Iterable

from corekit.hashing import format_value


def find_difference(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """Return the items of ``first`` that do not occur in ``second``.

    Order and duplicates of ``first`` are kept.
    """
    excluded = set(second)
    return [item for item in first if item not in excluded]


def main(argv: list[str] | None = None) -> int:
    """Print the difference for a few sample pairs of lists."""
    parser = argparse.ArgumentParser(description="Demonstrate list difference.")
    parser.parse_args(argv)

    examples = [
        (["apple", "banana", "cherry", "date", "43", "lead", "gno1"], ["banana", "date", "fig"]),
        (["a", "b", "c"], ["d", "e", "f"]),
        (["a", "b", "c"], ["a", "b", "c"]),
    ]
    for first, second in examples:
        print("Difference between slices:", format_value(find_difference(first, second)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())