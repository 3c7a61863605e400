from __future__ import annotations

import contextlib
from typing import ContextManager

import numpy as np

from fractional.core import flags
from fractional.core.typing import IntegerLike


def wrapping() -> ContextManager:
    """
    Context in which fixed-width scalar arithmetic wraps around on overflow. Whether NumPy still reports the
    overflow is decided by flags.SILENCE_OVERFLOW_WARNINGS at the time of the call.
    """
    if flags.SILENCE_OVERFLOW_WARNINGS:
        return np.errstate(over="ignore")
    return contextlib.nullcontext()


def gcd(a: IntegerLike, b: IntegerLike) -> IntegerLike:
    # Euclid. The sign of the result is not normalized, callers take the magnitude.
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: IntegerLike, b: IntegerLike) -> IntegerLike:
    """
    Least common multiple of two nonzero integers. For fixed-width types the product a * b is formed before the
    division and may wrap around.
    """
    with wrapping():
        return a * b // gcd(a, b)


def canonicalize(
    numerator: IntegerLike,
    denominator: IntegerLike,
) -> tuple[IntegerLike, IntegerLike]:
    """
    Reduces a raw numerator/denominator pair to its unique representative: coprime parts and a non-negative
    denominator. A zero denominator is kept, so (0, 0) stays NaN and (n, 0) collapses to (sign(n), 0).

    Args:
        numerator (IntegerLike): Raw numerator
        denominator (IntegerLike): Raw denominator, of the same type as the numerator

    Returns:
        tuple[IntegerLike, IntegerLike]: Canonical (numerator, denominator)
    """
    with wrapping():
        divisor = gcd(numerator, denominator)
        if divisor < 0:
            divisor = -divisor
        # both inputs zero, nothing to divide by
        if divisor == 0:
            return numerator, denominator
        numerator = numerator // divisor
        denominator = denominator // divisor
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
    return numerator, denominator
