"""Global overflow flag. If True, wraparound of fixed-width backing integers during fraction arithmetic is silent.
If False, NumPy emits its usual RuntimeWarning on scalar overflow. The wrapped result is the same either way.
"""

SILENCE_OVERFLOW_WARNINGS: bool = True
