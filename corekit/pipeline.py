"""A lazy stage that turns small unsigned integers into their cubes."""

from __future__ import annotations

import argparse
import math
from typing import Iterable, Iterator

from corekit.hashing import format_value

_BYTE_MAX = 255


def pipeline(numbers: Iterable[int]) -> Iterator[float]:
    """Yield the cube of each number as a float, in input order.

    Each number must be an integer from 0 to 255; anything else raises
    ValueError when it is reached.
    """
    for number in numbers:
        if isinstance(number, bool) or not isinstance(number, int):
            raise ValueError(f"expected an integer from 0 to {_BYTE_MAX}, got {number!r}")
        if not 0 <= number <= _BYTE_MAX:
            raise ValueError(f"expected an integer from 0 to {_BYTE_MAX}, got {number}")
        yield math.pow(float(number), 3)


def main(argv: list[str] | None = None) -> int:
    """Print the cubes of the numbers 1 to 5."""
    parser = argparse.ArgumentParser(description="Print cubes of 1 to 5.")
    parser.parse_args(argv)

    for result in pipeline(range(1, 6)):
        print(format_value(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())