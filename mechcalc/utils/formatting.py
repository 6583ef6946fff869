"""Rounding and display formatting helpers."""

from __future__ import annotations

import math

from mechcalc.utils.constants import NOT_AVAILABLE


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to *ndigits* decimals, ties away from zero.

    ``round()`` uses banker's rounding; calculator results are rounded the
    way a hand calculation would be (2.5 -> 3, 0.125 -> 0.13).
    """
    scale = 10.0**ndigits
    rounded = math.floor(abs(value) * scale + 0.5) / scale
    if rounded == 0.0:
        return 0.0
    return math.copysign(rounded, value)


def round2(value: float) -> float:
    """Round to 2 decimals, ties away from zero."""
    return round_half_up(value, 2)


def format_fixed(value: float | None, decimals: int) -> str:
    """Fixed-point string, or the N/A sentinel for a missing value."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}"


def format_grouped(value: float | None, decimals: int = 2) -> str:
    """Fixed-point string with thousands separators (``1,333.33``)."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:,.{decimals}f}"


def format_positive(value: float, decimals: int, zero: str | None = None) -> str:
    """Format *value*, showing *zero* (default all-zero digits) when it is not positive."""
    if value > 0:
        return f"{value:.{decimals}f}"
    if zero is not None:
        return zero
    return f"{0.0:.{decimals}f}"
