"""Numeric helpers: linear rescaling and lenient decimal parsing."""

from __future__ import annotations

_WHITESPACE = {chr(code) for code in range(9, 14)} | {" "}


def scale(value: float, new_min: float, new_max: float,
          old_min: float, old_max: float) -> float:
    """Map ``value`` from the range [old_min, old_max] onto [new_min, new_max]."""
    return (new_max - new_min) * (value - old_min) / (old_max - old_min) + new_min


def parse_double(text: str | None) -> float:
    """Parse a decimal number the lenient way the command line expects.

    Leading whitespace is skipped and any run of sign characters is folded
    into one sign. Characters are taken as digits without validation, so
    malformed input yields a number rather than an error. ``None`` gives 0.
    """
    if text is None:
        return 0.0
    rest = text.lstrip("".join(_WHITESPACE))

    sign = 1
    signs = len(rest) - len(rest.lstrip("+-"))
    sign = -1 if rest[:signs].count("-") % 2 else 1
    rest = rest[signs:]

    whole_part, dot, fraction_part = rest.partition(".")
    whole = 0
    for ch in whole_part:
        whole = whole * 10 + (ord(ch) - 48)

    fraction = 0.0
    power = 1.0
    for ch in fraction_part:
        power /= 10
        fraction += (ord(ch) - 48) * power

    return (whole + fraction) * sign