import json

import numpy as np
import pytest

from fractional import INFINITY, NAN, FractionalError, FractionDecodingError, decode, encode, from_json, make, to_json


def test_encode():
    """Encoding gives exactly the two fields, in order"""
    record = encode(make(3, 4))
    assert record == {"numerator": 3, "denominator": 4}
    assert list(record) == ["numerator", "denominator"]
    assert all(type(v) is int for v in record.values())


def test_codable():
    """Test the compact JSON text form both ways"""
    text = '{"numerator":3,"denominator":4}'
    assert to_json(make(3, 4)) == text
    assert from_json(text) == make(3, 4)
    assert from_json(text.encode()) == make(3, 4)


def test_decode_canonicalizes():
    """Decoding goes through the constructor"""
    f = decode({"numerator": 6, "denominator": 8})
    assert f == make(3, 4)
    assert (f.numerator, f.denominator) == (3, 4)
    g = decode({"numerator": 3, "denominator": -4})
    assert (g.numerator, g.denominator) == (-3, 4)


def test_round_trip():
    """Encode then decode reproduces the canonical value"""
    for f in [make(3, 4), make(-6, 8), make(5), make(0), INFINITY, -INFINITY, NAN]:
        assert decode(encode(f)) == f
        assert from_json(to_json(f)) == f


def test_non_finite_records():
    """Zero denominators survive the record form"""
    assert encode(NAN) == {"numerator": 0, "denominator": 0}
    assert encode(-INFINITY) == {"numerator": -1, "denominator": 0}
    assert decode({"numerator": -5, "denominator": 0}) == -INFINITY


def test_decode_backing_type():
    """Decoding can pick the backing type"""
    f = decode({"numerator": 2**80, "denominator": 2}, integer_type=int)
    assert f.integer_type is int
    assert f.numerator == 2**79
    assert decode({"numerator": 1, "denominator": 2}, integer_type=np.int8).integer_type is np.int8
    assert decode({"numerator": np.int32(1), "denominator": np.int32(2)}).integer_type is np.int32


def test_decode_ignores_extra_keys():
    """Only the two fraction fields are read"""
    assert decode({"numerator": 1, "denominator": 2, "note": "x"}) == make(1, 2)


def test_decode_missing_field():
    """Missing fields are a decoding error"""
    with pytest.raises(FractionDecodingError, match="denominator"):
        decode({"numerator": 3})
    with pytest.raises(FractionDecodingError, match="numerator"):
        from_json('{"denominator":4}')


def test_decode_non_integer_field():
    """Fields must hold integers"""
    for bad in ["3", 3.0, None, True, [3]]:
        with pytest.raises(FractionDecodingError):
            decode({"numerator": bad, "denominator": 4})
    with pytest.raises(FractionDecodingError):
        from_json('{"numerator":3,"denominator":4.5}')


def test_decode_not_a_mapping():
    """Only mappings can be decoded"""
    with pytest.raises(FractionDecodingError):
        decode([3, 4])
    with pytest.raises(FractionDecodingError):
        from_json("[3, 4]")


def test_decode_out_of_range():
    """Values that do not fit the backing type are a decoding error"""
    with pytest.raises(FractionDecodingError):
        decode({"numerator": 2**70, "denominator": 1})


def test_decode_numpy_value_out_of_range():
    """NumPy values are range-checked against an explicit backing type instead of wrapping"""
    with pytest.raises(FractionDecodingError):
        decode({"numerator": np.int64(300), "denominator": 1}, integer_type=np.int8)
    with pytest.raises(FractionDecodingError):
        decode({"numerator": 1, "denominator": np.int64(-2)}, integer_type=np.uint8)
    f = decode({"numerator": np.int64(100), "denominator": np.int64(8)}, integer_type=np.int8)
    assert f.integer_type is np.int8
    assert f == make(25, 2)


def test_invalid_json():
    """Malformed JSON is a decoding error chained from the parser error"""
    with pytest.raises(FractionDecodingError) as err:
        from_json("{")
    assert isinstance(err.value.__cause__, json.JSONDecodeError)


def test_decoding_error_hierarchy():
    """Decoding errors are ValueErrors and package errors"""
    assert issubclass(FractionDecodingError, ValueError)
    assert issubclass(FractionDecodingError, FractionalError)
