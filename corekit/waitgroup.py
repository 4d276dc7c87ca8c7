"""A wait group: block until a counter of outstanding tasks reaches zero."""

from __future__ import annotations

import argparse
import threading
import time


class WaitGroup:
    """Counts outstanding tasks and lets threads wait for all of them."""

    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition()

    @property
    def count(self) -> int:
        """The number of tasks still outstanding."""
        with self._cond:
            return self._count

    def add(self, delta: int) -> None:
        """Change the counter by ``delta``; waiters wake when it reaches zero.

        Raises ValueError if the counter would become negative.
        """
        with self._cond:
            new_count = self._count + delta
            if new_count < 0:
                raise ValueError("negative WaitGroup counter")
            self._count = new_count
            if new_count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        """Mark one task as finished."""
        self.add(-1)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the counter is zero.

        Returns True once it is, or False if ``timeout`` seconds pass first.
        """
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count})"


def main(argv: list[str] | None = None) -> int:
    """Start three workers of different lengths and wait for all of them."""
    parser = argparse.ArgumentParser(description="Wait for several workers.")
    parser.add_argument(
        "--unit",
        type=float,
        default=1.0,
        help="seconds each worker sleeps per its number (default: 1)",
    )
    args = parser.parse_args(argv)
    if args.unit < 0:
        parser.error("--unit must not be negative")

    group = WaitGroup()
    group.add(3)

    def worker(worker_id: int) -> None:
        try:
            print(f"Worker {worker_id} started")
            time.sleep(worker_id * args.unit)
            print(f"Worker {worker_id} finished")
        finally:
            group.done()

    for worker_id in range(1, 4):
        threading.Thread(target=worker, args=(worker_id,), daemon=True).start()

    group.wait()
    print("All workers finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())