import numpy as np

"""Backing integer type for fractions built from Python ints only. Mirrors a platform-width signed integer."""
DEFAULT_INTEGER_TYPE: type[np.integer] = np.int64

"""Field names, in encoding order, of the structured record form of a fraction"""
FIELD_NAMES: tuple[str, str] = ("numerator", "denominator")
