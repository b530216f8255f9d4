"""Shortest round-trip float formatting."""

from __future__ import annotations

import math


def format_float(value: float) -> str:
    """Shortest decimal string that parses back to exactly ``value``.

    The digits come from ``repr`` (shortest round-trip since Python 3.1);
    only the exponent is normalised so that output stays compact:

        >>> format_float(1.0)
        '1.0'
        >>> format_float(2.5e-09)
        '2.5e-9'
        >>> format_float(1e16)
        '1e16'
    """
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    sign = "-" if exponent.startswith("-") else ""
    digits = exponent.lstrip("+-").lstrip("0") or "0"
    return f"{mantissa}e{sign}{digits}"
