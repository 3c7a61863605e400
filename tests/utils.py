import numpy as np

from fractional import make


def finite_samples():
    """Finite fractions across backing types, zero included"""
    return [
        make(0),
        make(1),
        make(-1),
        make(3, 4),
        make(-5, 6),
        make(7, 2),
        make(np.int32(-2), np.int32(9)),
        make(np.int16(11), np.int16(4)),
        make(2**40, 3),
        make(10**30, 7, integer_type=int),
    ]


def nonzero_finite_samples():
    return [x for x in finite_samples() if x != 0]
