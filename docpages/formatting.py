"""
formatting.py

Responsibility: human-readable byte sizes and durations for the limits table.

Both formatters are total over non-negative integers and fail fast with
`InvalidInput` for anything else.
"""

from __future__ import annotations

from docpages.records import InvalidInput

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")

# Coarsest unit first.
_DURATION_UNITS = (
    (86400, "day"),
    (3600, "hour"),
    (60, "minute"),
)


def _require_non_negative_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{what} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidInput(f"{what} must not be negative, got {value}")
    return value


def _trim_decimal(value: float) -> str:
    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_byte_size(n: int) -> str:
    """
    Scale `n` bytes to the largest binary unit whose value is >= 1.

    Examples: 0 -> "0 bytes", 512 -> "512 B", 1024 -> "1 KiB",
    1536 -> "1.5 KiB", 3 * 1024**3 -> "3 GiB".
    """
    n = _require_non_negative_int(n, "byte size")
    if n == 0:
        return "0 bytes"
    if n < 1024:
        return f"{n} B"

    value = float(n)
    exponent = 0
    while value >= 1024 and exponent < len(_BINARY_UNITS):
        value /= 1024
        exponent += 1

    # 1023.96 KiB would print as "1024 KiB"; carry into the next unit instead.
    if float(f"{value:.1f}") >= 1024 and exponent < len(_BINARY_UNITS):
        value /= 1024
        exponent += 1

    return f"{_trim_decimal(value)} {_BINARY_UNITS[exponent - 1]}"


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(seconds: int) -> str:
    """
    Describe `seconds` in the coarsest whole unit: seconds below a minute,
    minutes below an hour, hours below a day, days otherwise.
    """
    seconds = _require_non_negative_int(seconds, "duration")
    for size, unit in _DURATION_UNITS:
        if seconds >= size:
            return _pluralize(seconds // size, unit)
    return _pluralize(seconds, "second")
