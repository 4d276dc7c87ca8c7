"""Small operations on lists of integers."""

from __future__ import annotations

import argparse
import random
from typing import Iterable

from corekit.hashing import format_value


def generate_random_slice(size: int) -> list[int]:
    """Return ``size`` random integers from 0 to 99."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    rng = random.Random()
    return [rng.randrange(100) for _ in range(size)]


def even_numbers(values: Iterable[int]) -> list[int]:
    """Return the even numbers of ``values`` in their original order."""
    return [v for v in values if v % 2 == 0]


def add_element(values: Iterable[int], element: int) -> list[int]:
    """Return a new list holding ``values`` followed by ``element``."""
    return [*values, element]


def copy_slice(values: Iterable[int]) -> list[int]:
    """Return an independent copy of ``values``."""
    return list(values)


def remove_element(values: list[int], index: int) -> list[int]:
    """Return ``values`` without the item at ``index``.

    An index outside ``0 <= index < len(values)`` leaves the list as it is.
    """
    if not 0 <= index < len(values):
        return values
    return values[:index] + values[index + 1:]


def main(argv: list[str] | None = None) -> int:
    """Demonstrate the list operations on a random list."""
    parser = argparse.ArgumentParser(description="Demonstrate list operations.")
    parser.parse_args(argv)

    original = generate_random_slice(10)
    print("Original slice:", format_value(original))
    print("Even numbers of the original slice:", format_value(even_numbers(original)))
    print("Slice after appending 42:", format_value(add_element(original, 42)))
    print("Copy of the original slice:", format_value(copy_slice(original)))
    print("Slice after removing index 2:", format_value(remove_element(original, 2)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())