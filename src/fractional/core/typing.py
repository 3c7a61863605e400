from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Union

import numpy as np

from fractional.core.constants import DEFAULT_INTEGER_TYPE

logger = logging.getLogger(__name__)

# Scalar types a fraction can be backed by. Built-in int is the unbounded fallback, every NumPy type is fixed-width
# and wraps around on overflow.
IntegerType = Union[type[np.integer], type[int]]

# Values accepted wherever a fraction operand is expected
IntegerLike = Union[int, np.integer]


@lru_cache(maxsize=1)
def _integer_types() -> tuple[tuple[type[np.signedinteger], ...], tuple[type[np.unsignedinteger], ...]]:
    """
    Return the fixed-width signed and unsigned NumPy scalar types, narrowest first.
    Platform aliases (np.intc, np.longlong, ...) resolve to one of these and are deduplicated.
    """
    signed: list[Any] = []
    unsigned: list[Any] = []
    for bits in (8, 16, 32, 64):
        for kind, out in (("i", signed), ("u", unsigned)):
            t = np.dtype(f"{kind}{bits // 8}").type
            if t not in out:
                out.append(t)
    return tuple(signed), tuple(unsigned)


SIGNED_INTEGER_TYPES, UNSIGNED_INTEGER_TYPES = _integer_types()


def is_integer_value(x: Any) -> bool:
    # bool is an int subclass, but a flag is not a numerator
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (int, np.integer))


def is_integer_type(t: Any) -> bool:
    if t is int:
        return True
    return isinstance(t, type) and issubclass(t, np.integer)


def promote_integer_types(a: IntegerType, b: IntegerType) -> IntegerType:
    """
    Common backing type of two fractions. The built-in int absorbs every fixed-width type, NumPy types follow
    NumPy promotion as long as the result is still an integer type.

    Args:
        a (IntegerType): Backing type of the first operand
        b (IntegerType): Backing type of the second operand

    Returns:
        IntegerType: Type both operands are cast to before combining them
    """
    if a is b:
        return a
    if a is int or b is int:
        return int
    promoted = np.promote_types(a, b)
    if promoted.kind not in "iu":
        raise TypeError(f"{a.__name__} and {b.__name__} have no common integer type")
    logger.debug("Promoting backing types %s and %s to %s", a.__name__, b.__name__, promoted.type.__name__)
    return promoted.type


def resolve_integer_type(*values: Any, integer_type: IntegerType | None = None) -> IntegerType:
    if integer_type is not None:
        if not is_integer_type(integer_type):
            raise TypeError(f"Backing type must be int or a NumPy integer type, got {integer_type!r}")
        return integer_type
    resolved: IntegerType | None = None
    for v in values:
        if isinstance(v, np.integer):
            resolved = type(v) if resolved is None else promote_integer_types(resolved, type(v))
    return DEFAULT_INTEGER_TYPE if resolved is None else resolved


def unsigned_counterpart(t: IntegerType) -> IntegerType:
    if t is int or issubclass(t, np.unsignedinteger):
        return t
    return np.dtype(f"u{np.dtype(t).itemsize}").type


def cast_integer(value: IntegerLike, t: IntegerType) -> IntegerLike:
    """Casts to the backing type. NumPy scalars wrap like C casts, Python ints out of range raise OverflowError."""
    if t is int:
        return int(value)
    if isinstance(value, np.integer):
        return value.astype(t)
    return t(value)
