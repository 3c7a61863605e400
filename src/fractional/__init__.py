import logging

from fractional.core.exceptions import FractionalError, FractionDecodingError
from fractional.core.fraction import INFINITY, NAN, Fraction, make
from fractional.functional.arithmetic import (
    absolute,
    add,
    advanced,
    distance,
    divide,
    magnitude,
    multiply,
    negate,
    power,
    reciprocal,
    remainder,
    subtract,
    whole_quotient,
)
from fractional.functional.compare import eq, ge, gt, le, lt, ne
from fractional.functional.convert import to_array, to_float32, to_float64, tree_to_float
from fractional.functional.serialization import decode, encode, from_json, to_json
from fractional.functional.stride import FractionRange, stride, stride_through

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "Fraction",
    "make",
    "INFINITY",
    "NAN",
    "absolute",
    "add",
    "advanced",
    "distance",
    "divide",
    "magnitude",
    "multiply",
    "negate",
    "power",
    "reciprocal",
    "remainder",
    "subtract",
    "whole_quotient",
    "eq",
    "ne",
    "lt",
    "le",
    "gt",
    "ge",
    "to_array",
    "to_float32",
    "to_float64",
    "tree_to_float",
    "FractionRange",
    "stride",
    "stride_through",
    "encode",
    "decode",
    "to_json",
    "from_json",
    "FractionalError",
    "FractionDecodingError",
]
