"""Fan-in of several iterables into one stream, consumed concurrently."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")

_DONE = object()


class _Failure:
    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


def _drain(source: Iterable[T], out: queue.Queue) -> None:
    try:
        for item in source:
            out.put(item)
    except BaseException as error:  # forwarded to the consumer
        out.put(_Failure(error))
    finally:
        out.put(_DONE)


def merge(*args: Iterable[T]) -> Iterator[T]:
    """Yield the items of all given iterables as each produces them.

    Every iterable is read in its own thread; the order of items from one
    source is kept, while items of different sources interleave. The stream
    ends once every source is exhausted. An exception raised by a source is
    re-raised to the consumer.
    """
    out: queue.Queue = queue.Queue()
    for source in args:
        threading.Thread(target=_drain, args=(source, out), daemon=True).start()

    remaining = len(args)
    while remaining:
        item = out.get()
        if item is _DONE:
            remaining -= 1
        elif isinstance(item, _Failure):
            raise item.error
        else:
            yield item


def _paced(start: int, stop: int, delay: float) -> Iterator[int]:
    for number in range(start, stop + 1):
        yield number
        time.sleep(delay)


def main(argv: list[str] | None = None) -> int:
    """Merge three paced number sequences and print what arrives."""
    parser = argparse.ArgumentParser(description="Merge several number streams.")
    parser.parse_args(argv)

    merged = merge(
        _paced(1, 5, 0.1),
        _paced(10, 15, 0.15),
        _paced(20, 23, 0.2),
    )
    for number in merged:
        print(number)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())