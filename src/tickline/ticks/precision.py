"""Decimal precision estimation for axis and table values.

The precision of a value is the number of decimal digits needed to print it
without visible rounding. Values that come out of floating-point arithmetic
(``0.1 * 3``) or have no finite decimal form (``1 / 3``) are compared with a
tolerance of a couple of units in the last place and the search is
capped, so the estimate always terminates.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

MAX_PRECISION_DIGITS = 15
# Rounding error allowed, in units in the last place of the value.
PRECISION_TOLERANCE_ULPS = 2.0


def get_precision(
    value: float,
    *,
    max_digits: int = MAX_PRECISION_DIGITS,
    ulps: float = PRECISION_TOLERANCE_ULPS,
) -> int:
    """Return the smallest digit count that reproduces *value*.

    Args:
        value: The number to inspect.
        max_digits: Upper bound on the search; returned when no smaller
            digit count reproduces the value.
        ulps: Allowed rounding error, in units in the last place of *value*.

    Returns:
        A non-negative digit count. Non-finite values report 0.
    """
    if not math.isfinite(value):
        return 0
    limit = ulps * math.ulp(value)
    for digits in range(max_digits + 1):
        if abs(round(value, digits) - value) <= limit:
            return digits
    return max_digits


def get_precision_of_set(
    values: Iterable[float],
    *,
    max_digits: int = MAX_PRECISION_DIGITS,
    ulps: float = PRECISION_TOLERANCE_ULPS,
) -> int:
    """Shared precision for a collection of values (0 when empty)."""
    return max(
        (get_precision(v, max_digits=max_digits, ulps=ulps) for v in values),
        default=0,
    )


def format_value(value: float, precision: int) -> str:
    """Fixed-point representation of *value* with *precision* decimals."""
    text = f"{value:.{precision}f}"
    # "-0.00" reads as a distinct tick from "0.00"
    if text.startswith("-") and not text.strip("-0."):
        return text[1:]
    return text
