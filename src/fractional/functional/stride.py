from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from fractional.core.fraction import Fraction
from fractional.core.typing import IntegerLike
from fractional.functional.arithmetic import advanced, lift


def _walk(
    start: Fraction,
    stop: Fraction | IntegerLike,
    step: Fraction | IntegerLike,
    ascending_ok: Callable[[Fraction, Fraction | IntegerLike], bool],
    descending_ok: Callable[[Fraction, Fraction | IntegerLike], bool],
) -> Iterator[Fraction]:
    step = lift(step, start)
    if not start.is_finite or not step.is_finite:
        raise ValueError(f"Cannot stride from {start} by {step}, both must be finite")
    if step == 0:
        raise ValueError("Stride step must not be zero")
    keep_going = ascending_ok if step > 0 else descending_ok
    return _iterate(start, stop, step, keep_going)


def _iterate(
    current: Fraction,
    stop: Fraction | IntegerLike,
    step: Fraction,
    keep_going: Callable[[Fraction, Fraction | IntegerLike], bool],
) -> Iterator[Fraction]:
    while keep_going(current, stop):
        yield current
        current = advanced(current, step)


def stride(
    start: Fraction,
    stop: Fraction | IntegerLike,
    step: Fraction | IntegerLike,
) -> Iterator[Fraction]:
    """
    Yields start, start + step, start + 2 * step, ... up to but excluding stop. A negative step counts down.
    The sequence is lazy, an infinite stop gives an endless iterator.

    Args:
        start (Fraction): First value, must be finite
        stop (Fraction | IntegerLike): Exclusive bound
        step (Fraction | IntegerLike): Nonzero finite step

    Returns:
        Iterator[Fraction]: The values of the stride
    """
    return _walk(start, stop, step, lambda c, s: c < s, lambda c, s: c > s)


def stride_through(
    start: Fraction,
    stop: Fraction | IntegerLike,
    step: Fraction | IntegerLike,
) -> Iterator[Fraction]:
    """Like stride, but stop itself is included when the steps land on it."""
    return _walk(start, stop, step, lambda c, s: c <= s, lambda c, s: c >= s)


@dataclass(frozen=True)
class FractionRange:
    lower: Fraction
    upper: Fraction
    closed: bool = False

    def __post_init__(self):
        if self.lower.is_nan or self.upper.is_nan:
            raise ValueError("Range bounds must not be NaN")
        if self.upper < self.lower:
            raise ValueError(f"Range lower bound {self.lower} is above upper bound {self.upper}")

    @property
    def is_empty(self) -> bool:
        return not self.closed and self.lower == self.upper

    def __contains__(self, value: Fraction | IntegerLike) -> bool:
        if self.closed:
            return self.lower <= value <= self.upper
        return self.lower <= value < self.upper

    def by(self, step: Fraction | IntegerLike) -> Iterator[Fraction]:
        if self.closed:
            return stride_through(self.lower, self.upper, step)
        return stride(self.lower, self.upper, step)

    def __str__(self) -> str:
        return f"{self.lower}{'...' if self.closed else '..<'}{self.upper}"
