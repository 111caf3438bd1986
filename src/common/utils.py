"""Common utility functions."""

import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_WHITESPACE = re.compile(r"\s+")


def slugify_category(name: str) -> str:
    """Derive a category slug: lowercase, whitespace runs become hyphens."""
    return _WHITESPACE.sub("-", name.strip().lower())


def parse_read_time(value: Any) -> int | None:
    """Parse a read time in minutes from form or model input.

    Leading-integer semantics: "7 min" -> 7, "abc" -> None. Values that are
    not positive are dropped.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        minutes = int(value)
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return None
        minutes = int(match.group(1))
    return minutes if minutes > 0 else None


def to_base36(number: int) -> str:
    """Render a non-negative integer in lowercase base 36."""
    if number < 0:
        raise ValueError("number must be non-negative")
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if number == 0:
        return "0"
    out = []
    while number:
        number, rem = divmod(number, 36)
        out.append(digits[rem])
    return "".join(reversed(out))
