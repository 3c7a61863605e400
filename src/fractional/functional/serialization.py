from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from fractional.core.constants import FIELD_NAMES
from fractional.core.exceptions import FractionDecodingError
from fractional.core.fraction import Fraction
from fractional.core.null import MISSING
from fractional.core.typing import IntegerType, is_integer_value

logger = logging.getLogger(__name__)


def encode(x: Fraction) -> dict[str, int]:
    """Structured record of a fraction: numerator then denominator, as plain ints, nothing else."""
    numerator_name, denominator_name = FIELD_NAMES
    return {numerator_name: int(x.numerator), denominator_name: int(x.denominator)}


def decode(
    record: Any,
    integer_type: IntegerType | None = None,
) -> Fraction:
    """
    Rebuilds a fraction from its structured record. The pair goes through the constructor, so a record holding
    6 and 8 decodes to 3/4. Keys other than numerator and denominator are ignored.

    Args:
        record (Any): Mapping with integer fields numerator and denominator
        integer_type (IntegerType | None, optional): Backing integer type. Defaults to np.int64.

    Raises:
        FractionDecodingError: If the record is not a mapping, misses a field, holds a non-integer value or a
            value that does not fit the backing type.

    Returns:
        Fraction: The canonical fraction
    """
    if not isinstance(record, Mapping):
        raise FractionDecodingError(f"Expected a mapping with fields {FIELD_NAMES}, got {type(record).__name__}")
    values = []
    for name in FIELD_NAMES:
        value = record.get(name, MISSING)
        if value is MISSING:
            logger.debug("Record %r has no field %s", record, name)
            raise FractionDecodingError(f"Missing field '{name}'")
        if not is_integer_value(value):
            logger.debug("Record %r has non-integer field %s", record, name)
            raise FractionDecodingError(f"Field '{name}' must be an integer, got {value!r}")
        # an explicit backing type range-checks every value, NumPy scalars included
        values.append(value if integer_type is None else int(value))
    numerator, denominator = values
    try:
        return Fraction(numerator, denominator, integer_type=integer_type)
    except OverflowError as err:
        raise FractionDecodingError(f"Record {dict(record)!r} does not fit the backing integer type") from err


def to_json(x: Fraction) -> str:
    return json.dumps(encode(x), separators=(",", ":"))


def from_json(
    text: str | bytes,
    integer_type: IntegerType | None = None,
) -> Fraction:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as err:
        raise FractionDecodingError(f"Invalid JSON for a fraction: {err.msg}") from err
    return decode(record, integer_type=integer_type)
