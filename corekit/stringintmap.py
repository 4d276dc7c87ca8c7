"""A mapping from strings to integers."""

from __future__ import annotations

import argparse
from typing import Iterator, Mapping

from corekit.hashing import format_value


class StringIntMap:
    """Stores pairs of string keys and integer values."""

    def __init__(self, items: Mapping[str, int] | None = None) -> None:
        self._data: dict[str, int] = {}
        for key, value in (items or {}).items():
            self.add(key, value)

    def add(self, key: str, value: int) -> None:
        """Set ``key`` to ``value``, replacing any earlier value."""
        if not isinstance(key, str):
            raise TypeError(f"key must be a str, got {type(key).__name__}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an int, got {type(value).__name__}")
        self._data[key] = value

    def remove(self, key: str) -> None:
        """Remove ``key``; a missing key is ignored."""
        self._data.pop(key, None)

    def copy(self) -> dict[str, int]:
        """Return the contents as a new independent dict."""
        return dict(self._data)

    def exists(self, key: str) -> bool:
        """Tell whether ``key`` is present."""
        return key in self._data

    def get(self, key: str) -> int | None:
        """Return the value of ``key``, or None if it is absent."""
        return self._data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def main(argv: list[str] | None = None) -> int:
    """Demonstrate adding, looking up, removing and copying entries."""
    parser = argparse.ArgumentParser(description="Demonstrate StringIntMap.")
    parser.parse_args(argv)

    sim = StringIntMap()
    sim.add("один", 1)
    sim.add("два", 2)
    print("Map after adding entries:", format_value(sim.copy()))
    if sim.exists("один"):
        value = sim.get("один")
        if value is not None:
            print("Key 'один' exists with value:", value)
    sim.remove("один")
    print("Map after removing key 'один':", format_value(sim.copy()))
    print("Copied map:", format_value(sim.copy()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())