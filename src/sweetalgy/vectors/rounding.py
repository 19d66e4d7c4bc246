"""Scalar conversions shared by the vector helpers."""

import math


def floor_to_int(value: float) -> int:
    """Largest integer less than or equal to `value`."""
    return math.floor(value)


def ceil_to_int(value: float) -> int:
    """Smallest integer greater than or equal to `value`."""
    return math.ceil(value)


def round_to_int(value: float) -> int:
    """Nearest integer; halves round to the even neighbour (2.5 -> 2, 3.5 -> 4)."""
    return round(value)


def truncate_to_int(value: float) -> int:
    """Drop the fractional part, rounding toward zero (-1.7 -> -1)."""
    return math.trunc(value)


def divide_int(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (-7 / 2 -> -3).

    Raises:
        ZeroDivisionError: If `divisor` is zero.
    """
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient
