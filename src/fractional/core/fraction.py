from __future__ import annotations

from typing import Any

import numpy as np

from fractional.core.integer import canonicalize
from fractional.core.pytrees import TreeClass, autoinit, frozen_field
from fractional.core.typing import (
    IntegerLike,
    IntegerType,
    cast_integer,
    is_integer_value,
    resolve_integer_type,
)


def is_operand(x: Any) -> bool:
    return isinstance(x, Fraction) or is_integer_value(x)


@autoinit
class Fraction(TreeClass):
    """Exact fraction over a signed integer type, extended by +Inf, -Inf and NaN.

    Every instance is canonical: numerator and denominator are coprime and the denominator is non-negative.
    A zero denominator encodes the non-finite values, (0, 0) is NaN and (1, 0) / (-1, 0) are the infinities.
    Arithmetic never raises for these, the results follow the extended-real rules instead.

    Python ints are stored in the default backing type (np.int64). NumPy integer scalars keep their own type,
    and integer_type=int selects the unbounded built-in int. Both fields are static pytree structure.
    """

    numerator: IntegerLike = frozen_field(kind="POS_OR_KW")
    denominator: IntegerLike = frozen_field(default=1, kind="POS_OR_KW")
    integer_type: IntegerType | None = frozen_field(default=None)

    def __post_init__(self):
        for v in (self.numerator, self.denominator):
            if not is_integer_value(v):
                raise TypeError(f"Fraction only supports integer values, got {v!r}")
        t = resolve_integer_type(self.numerator, self.denominator, integer_type=self.integer_type)
        numerator = cast_integer(self.numerator, t)
        denominator = cast_integer(self.denominator, t)
        self.numerator, self.denominator = canonicalize(numerator, denominator)
        self.integer_type = t

    @classmethod
    def infinity(cls, integer_type: IntegerType | None = None) -> Fraction:
        return cls(1, 0, integer_type=integer_type)

    @classmethod
    def nan(cls, integer_type: IntegerType | None = None) -> Fraction:
        return cls(0, 0, integer_type=integer_type)

    @property
    def is_finite(self) -> bool:
        return bool(self.denominator != 0)

    @property
    def is_infinite(self) -> bool:
        return bool(self.denominator == 0 and self.numerator != 0)

    @property
    def is_nan(self) -> bool:
        return bool(self.denominator == 0 and self.numerator == 0)

    @property
    def reciprocal(self) -> Fraction:
        from fractional.functional.arithmetic import reciprocal

        return reciprocal(self)

    @property
    def magnitude(self) -> Fraction:
        """Absolute value backed by the unsigned type of the same width."""
        from fractional.functional.arithmetic import magnitude

        return magnitude(self)

    def advanced(self, by: Fraction | IntegerLike) -> Fraction:
        from fractional.functional.arithmetic import advanced

        return advanced(self, by)

    def distance(self, to: Fraction | IntegerLike) -> Fraction:
        from fractional.functional.arithmetic import distance

        return distance(self, to)

    def whole_quotient(self, other: Fraction | IntegerLike) -> int:
        from fractional.functional.arithmetic import whole_quotient

        return whole_quotient(self, other)

    def remainder(self, other: Fraction | IntegerLike) -> Fraction:
        from fractional.functional.arithmetic import remainder

        return remainder(self, other)

    def to_float32(self) -> np.float32:
        from fractional.functional.convert import to_float32

        return to_float32(self)

    def to_float64(self) -> np.float64:
        from fractional.functional.convert import to_float64

        return to_float64(self)

    def __float__(self) -> float:
        return float(self.to_float64())

    def __bool__(self) -> bool:
        return bool(self.numerator != 0)

    def __str__(self) -> str:
        from fractional.functional.format import describe

        return describe(self)

    def __repr__(self) -> str:
        return str(self)

    def __hash__(self) -> int:
        from fractional.functional.compare import hash_fraction

        return hash_fraction(self)

    def __eq__(self, other: Any) -> bool:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.compare import eq

        return eq(self, other)

    def __ne__(self, other: Any) -> bool:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.compare import ne

        return ne(self, other)

    def __lt__(self, other: Any) -> bool:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.compare import lt

        return lt(self, other)

    def __le__(self, other: Any) -> bool:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.compare import le

        return le(self, other)

    def __gt__(self, other: Any) -> bool:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.compare import gt

        return gt(self, other)

    def __ge__(self, other: Any) -> bool:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.compare import ge

        return ge(self, other)

    def __add__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import add

        return add(self, other)

    def __radd__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import add

        return add(other, self)

    def __sub__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import subtract

        return subtract(self, other)

    def __rsub__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import subtract

        return subtract(other, self)

    def __mul__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import multiply

        return multiply(self, other)

    def __rmul__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import multiply

        return multiply(other, self)

    def __truediv__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import divide

        return divide(self, other)

    def __rtruediv__(self, other: Any) -> Fraction:
        if not is_operand(other):
            return NotImplemented
        from fractional.functional.arithmetic import divide

        return divide(other, self)

    def __pow__(self, exponent: Any) -> Fraction:
        if not is_integer_value(exponent):
            return NotImplemented
        from fractional.functional.arithmetic import power

        return power(self, exponent)

    def __neg__(self) -> Fraction:
        from fractional.functional.arithmetic import negate

        return negate(self)

    def __pos__(self) -> Fraction:
        return self

    def __abs__(self) -> Fraction:
        from fractional.functional.arithmetic import absolute

        return absolute(self)


def make(
    numerator: IntegerLike,
    denominator: IntegerLike = 1,
    integer_type: IntegerType | None = None,
) -> Fraction:
    """
    Builds a canonical fraction. Shorthand for Fraction(numerator, denominator, integer_type=integer_type).

    Args:
        numerator (IntegerLike): Raw numerator
        denominator (IntegerLike, optional): Raw denominator. Defaults to 1, zero yields an infinity or NaN.
        integer_type (IntegerType | None, optional): Backing integer type. Defaults to the type of NumPy
            operands, or np.int64 for Python ints.

    Returns:
        Fraction: The reduced fraction
    """
    return Fraction(numerator, denominator, integer_type=integer_type)


INFINITY = Fraction.infinity()
NAN = Fraction.nan()
