# ruff: noqa: F811
import math

import numpy as np
from plum import dispatch, overload

from fractional.core.fraction import Fraction
from fractional.core.integer import lcm, wrapping
from fractional.core.typing import IntegerLike, is_integer_value, promote_integer_types, unsigned_counterpart


def lift(x: Fraction | IntegerLike, like: Fraction) -> Fraction:
    """Turns an integer operand into a whole fraction. Python ints take the backing type of the other operand."""
    if isinstance(x, Fraction):
        return x
    if isinstance(x, np.integer):
        return Fraction(x)
    return Fraction(x, integer_type=like.integer_type)


def align(x: Fraction, y: Fraction) -> tuple[Fraction, Fraction]:
    t = promote_integer_types(x.integer_type, y.integer_type)
    if x.integer_type is not t:
        x = x.updated_copy(integer_type=t)
    if y.integer_type is not t:
        y = y.updated_copy(integer_type=t)
    return x, y


def common_denominator(
    x: Fraction,
    y: Fraction,
) -> tuple[IntegerLike, IntegerLike, IntegerLike]:
    """
    Scales two finite fractions of the same backing type to their least common denominator.

    Args:
        x (Fraction): First finite fraction
        y (Fraction): Second finite fraction

    Returns:
        tuple[IntegerLike, IntegerLike, IntegerLike]: Scaled numerator of x, scaled numerator of y and the
        common denominator
    """
    assert x.is_finite and y.is_finite, "common denominator of a non-finite fraction"
    denominator = lcm(x.denominator, y.denominator)
    with wrapping():
        x_numerator = x.numerator * (denominator // x.denominator)
        y_numerator = y.numerator * (denominator // y.denominator)
    return x_numerator, y_numerator, denominator


## Addition #################################
def _add_fractions(x: Fraction, y: Fraction) -> Fraction:
    x, y = align(x, y)
    if x.is_nan or y.is_nan:
        return Fraction.nan(x.integer_type)
    if not x.is_finite or not y.is_finite:
        # an infinity absorbs every finite value, opposite infinities cancel to NaN
        if x.is_finite:
            return y
        if y.is_finite:
            return x
        if x.numerator == y.numerator:
            return x
        return Fraction.nan(x.integer_type)
    x_numerator, y_numerator, denominator = common_denominator(x, y)
    with wrapping():
        numerator = x_numerator + y_numerator
    return Fraction(numerator, denominator, integer_type=x.integer_type)


@overload
def add(x: Fraction, y: Fraction) -> Fraction:
    return _add_fractions(x, y)


@overload
def add(x: Fraction, y: IntegerLike) -> Fraction:
    return _add_fractions(x, lift(y, x))


@overload
def add(x: IntegerLike, y: Fraction) -> Fraction:
    return _add_fractions(lift(x, y), y)


@dispatch
def add(x, y):
    del x, y
    raise NotImplementedError()


## Negation #################################
def negate(x: Fraction) -> Fraction:
    with wrapping():
        numerator = -x.numerator
    return Fraction(numerator, x.denominator, integer_type=x.integer_type)


def absolute(x: Fraction) -> Fraction:
    if x.numerator < 0:
        return negate(x)
    return x


def magnitude(x: Fraction) -> Fraction:
    """Absolute value of x, backed by the unsigned counterpart of its integer type (int stays int)."""
    return Fraction(
        absolute(x).numerator,
        x.denominator,
        integer_type=unsigned_counterpart(x.integer_type),
    )


## Subtraction ##############################
@overload
def subtract(x: Fraction, y: Fraction) -> Fraction:
    return _add_fractions(x, negate(y))


@overload
def subtract(x: Fraction, y: IntegerLike) -> Fraction:
    return _add_fractions(x, negate(lift(y, x)))


@overload
def subtract(x: IntegerLike, y: Fraction) -> Fraction:
    return _add_fractions(lift(x, y), negate(y))


@dispatch
def subtract(x, y):
    del x, y
    raise NotImplementedError()


## Multiplication ###########################
def _multiply_fractions(x: Fraction, y: Fraction) -> Fraction:
    x, y = align(x, y)
    t = x.integer_type
    # cross-reduce first so the products stay small. 0 * Inf comes out as (0, 0), i.e. NaN
    left = Fraction(x.numerator, y.denominator, integer_type=t)
    right = Fraction(y.numerator, x.denominator, integer_type=t)
    with wrapping():
        numerator = left.numerator * right.numerator
        denominator = left.denominator * right.denominator
    return Fraction(numerator, denominator, integer_type=t)


@overload
def multiply(x: Fraction, y: Fraction) -> Fraction:
    return _multiply_fractions(x, y)


@overload
def multiply(x: Fraction, y: IntegerLike) -> Fraction:
    return _multiply_fractions(x, lift(y, x))


@overload
def multiply(x: IntegerLike, y: Fraction) -> Fraction:
    return _multiply_fractions(lift(x, y), y)


@dispatch
def multiply(x, y):
    del x, y
    raise NotImplementedError()


## Division #################################
def reciprocal(x: Fraction) -> Fraction:
    # the swapped pair can have a negative denominator, so it goes through the constructor
    return Fraction(x.denominator, x.numerator, integer_type=x.integer_type)


@overload
def divide(x: Fraction, y: Fraction) -> Fraction:
    return _multiply_fractions(x, reciprocal(y))


@overload
def divide(x: Fraction, y: IntegerLike) -> Fraction:
    return _multiply_fractions(x, reciprocal(lift(y, x)))


@overload
def divide(x: IntegerLike, y: Fraction) -> Fraction:
    return _multiply_fractions(lift(x, y), reciprocal(y))


@dispatch
def divide(x, y):
    del x, y
    raise NotImplementedError()


def power(x: Fraction, exponent: IntegerLike) -> Fraction:
    """
    Integer power by repeated multiplication. Negative exponents take the reciprocal of the positive power,
    x ** 0 is 1 for every x.
    """
    if not is_integer_value(exponent):
        raise TypeError(f"Exponent must be an integer, got {exponent!r}")
    result = Fraction(1, integer_type=x.integer_type)
    for _ in range(abs(int(exponent))):
        result = _multiply_fractions(result, x)
    if exponent < 0:
        return reciprocal(result)
    return result


## Striding #################################
def advanced(x: Fraction, by: Fraction | IntegerLike) -> Fraction:
    """Value reached from x after one step of size by. Identical to x + by, including for non-finite values."""
    return _add_fractions(x, lift(by, x))


def distance(x: Fraction, to: Fraction | IntegerLike) -> Fraction:
    """Step that leads from x to the target, so that advanced(x, distance(x, to)) == to for finite values."""
    return advanced(lift(to, x), negate(x))


## Integer division #########################
def whole_quotient(x: Fraction, y: Fraction | IntegerLike) -> int:
    """
    Truncating integer quotient of x / y. The quotient is taken through a float64, so for quotients beyond
    2**53 the result is only as precise as the float.
    """
    from fractional.functional.convert import to_float64

    quotient = to_float64(divide(x, y))
    if not math.isfinite(quotient):
        raise ValueError(f"Quotient of {x} and {y} is {quotient} and has no integer value")
    return int(quotient)


def remainder(x: Fraction, y: Fraction | IntegerLike) -> Fraction:
    y = lift(y, x)
    quotient = Fraction(whole_quotient(x, y), integer_type=x.integer_type)
    return subtract(x, multiply(quotient, y))
