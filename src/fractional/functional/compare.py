# ruff: noqa: F811
from plum import dispatch, overload

from fractional.core.fraction import Fraction
from fractional.core.typing import IntegerLike
from fractional.functional.arithmetic import align, common_denominator


def _whole(x: IntegerLike) -> Fraction:
    # integers meet the fraction in the unbounded backing, so comparing never overflows
    return Fraction(x, integer_type=int)


def hash_fraction(x: Fraction) -> int:
    # whole numbers hash like the equal int. Every NaN shares one hash since every NaN is equal.
    if x.denominator == 1:
        return hash(x.numerator)
    return hash(x.numerator) ^ hash(x.denominator)


## Equality #################################
def _equal(x: Fraction, y: Fraction) -> bool:
    # structural on the canonical pair, so NaN == NaN
    return bool(x.numerator == y.numerator and x.denominator == y.denominator)


@overload
def eq(x: Fraction, y: Fraction) -> bool:
    return _equal(x, y)


@overload
def eq(x: Fraction, y: IntegerLike) -> bool:
    return _equal(*align(x, _whole(y)))


@overload
def eq(x: IntegerLike, y: Fraction) -> bool:
    return _equal(*align(_whole(x), y))


@dispatch
def eq(x, y):
    del x, y
    raise NotImplementedError()


def ne(x: Fraction | IntegerLike, y: Fraction | IntegerLike) -> bool:
    return not eq(x, y)


## Ordering #################################
def _less(x: Fraction, y: Fraction) -> bool:
    if x.is_nan or y.is_nan:
        return False
    if x.is_infinite and y.is_infinite:
        return bool(x.numerator < y.numerator)
    if x.is_infinite:
        return bool(x.numerator < 0)
    if y.is_infinite:
        return bool(y.numerator > 0)
    x, y = align(x, y)
    x_numerator, y_numerator, _ = common_denominator(x, y)
    return bool(x_numerator < y_numerator)


def _less_equal(x: Fraction, y: Fraction) -> bool:
    if x.is_nan or y.is_nan:
        return False
    x, y = align(x, y)
    return _less(x, y) or _equal(x, y)


@overload
def lt(x: Fraction, y: Fraction) -> bool:
    return _less(x, y)


@overload
def lt(x: Fraction, y: IntegerLike) -> bool:
    return _less(x, _whole(y))


@overload
def lt(x: IntegerLike, y: Fraction) -> bool:
    return _less(_whole(x), y)


@dispatch
def lt(x, y):
    del x, y
    raise NotImplementedError()


@overload
def le(x: Fraction, y: Fraction) -> bool:
    return _less_equal(x, y)


@overload
def le(x: Fraction, y: IntegerLike) -> bool:
    return _less_equal(x, _whole(y))


@overload
def le(x: IntegerLike, y: Fraction) -> bool:
    return _less_equal(_whole(x), y)


@dispatch
def le(x, y):
    del x, y
    raise NotImplementedError()


def gt(x: Fraction | IntegerLike, y: Fraction | IntegerLike) -> bool:
    return lt(y, x)


def ge(x: Fraction | IntegerLike, y: Fraction | IntegerLike) -> bool:
    return le(y, x)
