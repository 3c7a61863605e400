"""Errors raised by the fractional package. Arithmetic never raises, edge cases become infinity or NaN values."""


class FractionalError(Exception):
    """Base class of every error raised on purpose by this package."""


class FractionDecodingError(FractionalError, ValueError):
    """A structured record or JSON text could not be turned into a fraction.

    Raised when the input is not a mapping, when the ``numerator`` or ``denominator`` field is missing, or when
    either field does not hold an integer.
    """
