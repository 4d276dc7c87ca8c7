"""Value formatting and salted SHA-256 hashing of mixed values."""

from __future__ import annotations

import argparse
import hashlib
import math
from decimal import Decimal
from typing import Any, Iterable

SALT = "go-2024"

_TYPE_NAMES = {
    bool: "bool",
    int: "int",
    float: "float64",
    str: "string",
    complex: "complex128",
}


def _shortest_digits(x: float) -> tuple[str, int]:
    """Return the shortest round-trip digits of a positive float and its decimal point position."""
    sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, len(stripped) + exponent


def _format_float(x: float, plus: bool = False) -> str:
    if math.isnan(x):
        return "+NaN" if plus else "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if math.copysign(1.0, x) < 0:
        sign = "-"
    else:
        sign = "+" if plus else ""
    if x == 0:
        return sign + "0"

    digits, point = _shortest_digits(abs(x))
    exponent = point - 1
    if exponent < -4 or exponent >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exponent < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent):02d}"

    if point <= 0:
        whole, fraction = "0", "0" * (-point) + digits
    elif point >= len(digits):
        whole, fraction = digits + "0" * (point - len(digits)), ""
    else:
        whole, fraction = digits[:point], digits[point:]
    return sign + whole + ("." + fraction if fraction else "")


def format_value(value: Any) -> str:
    """Format a value in its plain default text form."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, complex):
        return f"({_format_float(value.real)}{_format_float(value.imag, plus=True)}i)"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        items = list(value.items())
        try:
            items.sort(key=lambda pair: pair[0])
        except TypeError:
            pass
        body = " ".join(f"{format_value(k)}:{format_value(v)}" for k, v in items)
        return f"map[{body}]"
    return str(value)


def _type_name(value: Any) -> str:
    return _TYPE_NAMES.get(type(value), type(value).__name__)


def _salted(text: str) -> str:
    # The salt is spliced in at the middle and also overwrites the first
    # characters of the second half.
    half = len(text) // 2
    tail = text[half:]
    overlap = min(len(SALT), len(tail))
    return text[:half] + SALT + SALT[:overlap] + tail[overlap:]


def process_variables(values: Iterable[Any]) -> tuple[str, str]:
    """Join the formatted values, each followed by a space, and hash the salted result.

    Returns the joined string and the hex SHA-256 digest.
    """
    combined = "".join(f"{format_value(v)} " for v in values)
    digest = hashlib.sha256(_salted(combined).encode("utf-8")).hexdigest()
    return combined, digest


def main(argv: list[str] | None = None) -> int:
    """Show the type of several sample values, their joined form and its hash."""
    parser = argparse.ArgumentParser(description="Join sample values and hash them.")
    parser.parse_args(argv)

    values = [42, 0o52, 0x2A, 3.14, "corekit", True, complex(1, 2)]
    for value in values:
        print(f"Type of variable {format_value(value)}: {_type_name(value)}")
    combined, digest = process_variables(values)
    print(f"Combined string: {combined}")
    print(f"SHA256 Hash: {digest}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())