"""An endless source of random numbers that runs until told to stop."""

from __future__ import annotations

import argparse
import random
import threading
from typing import Iterator


def random_generator(stop: threading.Event | None = None) -> Iterator[int]:
    """Yield random integers from 0 to 99 until ``stop`` is set.

    Without a ``stop`` event the generator never ends on its own.
    """
    rng = random.Random()
    while stop is None or not stop.is_set():
        yield rng.randrange(100)


def main(argv: list[str] | None = None) -> int:
    """Print random numbers for a limited time, then stop the generator."""
    parser = argparse.ArgumentParser(description="Print random numbers for a while.")
    parser.add_argument(
        "--seconds",
        type=float,
        default=5.0,
        help="how long to keep reading numbers (default: 5)",
    )
    args = parser.parse_args(argv)
    if args.seconds < 0:
        parser.error("--seconds must not be negative")

    stop = threading.Event()
    timer = threading.Timer(args.seconds, stop.set)
    timer.daemon = True
    timer.start()
    try:
        for number in random_generator(stop):
            print("Received random number:", number)
    finally:
        timer.cancel()
        stop.set()
    print("Time is up, finishing.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())