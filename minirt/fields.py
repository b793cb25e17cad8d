"""Low-level field parsing for scene description lines."""

from __future__ import annotations

from itertools import takewhile
from typing import Optional, Tuple as Triple

_SPACES = " \t\n\v\f\r"
_VALUE_CHARS = frozenset("0123456789-.")


class SceneError(ValueError):
    """Raised when a scene description holds invalid data."""


def is_space(c: str) -> bool:
    """True for a space or one of the control characters tab..carriage return."""
    return c == " " or (len(c) == 1 and 9 <= ord(c) <= 13)


def parse_float(text: str) -> float:
    """Parse a leading decimal number, ignoring whatever follows it.

    Leading whitespace and a single sign are accepted; text without digits
    gives 0.0.
    """
    rest = text.lstrip(_SPACES)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    integer_digits = "".join(takewhile(str.isdigit, rest))
    result = 0.0
    for digit in integer_digits:
        result = result * 10.0 + int(digit)
    rest = rest[len(integer_digits):]

    if rest[:1] == ".":
        divisor = 10.0
        for digit in takewhile(str.isdigit, rest[1:]):
            result += int(digit) / divisor
            divisor *= 10.0

    return -result if negative else result


def values_validation(text: str) -> bool:
    """True if text is three comma-separated numeric fields.

    Only digits, '-' and '.' may appear between the two commas; the text may
    end in whitespace.
    """
    commas = 0
    stop: Optional[str] = None
    for c in text:
        if c == ",":
            commas += 1
        elif c not in _VALUE_CHARS:
            stop = c
            break
    return commas == 2 and (stop is None or is_space(stop))


def split_triplet(text: Optional[str]) -> Triple[float, float, float]:
    """Parse "a,b,c" into three floats; raises SceneError if malformed."""
    if text is None or not values_validation(text):
        raise SceneError(f"expected three comma-separated values, got {text!r}")
    parts = [part for part in text.split(",") if part]
    if len(parts) < 3:
        raise SceneError(f"expected three comma-separated values, got {text!r}")
    a, b, c = (parse_float(part) for part in parts[:3])
    return a, b, c