import pytest

from fractional import INFINITY, NAN, FractionRange, make, stride, stride_through


def test_stride():
    """Test the exclusive stride"""
    values = list(stride(make(1, 4), make(5, 4), make(1, 4)))
    assert values == [make(1, 4), make(1, 2), make(3, 4), make(1)]


def test_stride_through():
    """Test the inclusive stride"""
    values = list(stride_through(make(1, 4), make(5, 4), make(1, 4)))
    assert values == [make(1, 4), make(1, 2), make(3, 4), make(1), make(5, 4)]


def test_stride_through_bound_not_hit():
    """The inclusive bound is only emitted if a step lands on it"""
    values = list(stride_through(make(0), make(1), make(2, 5)))
    assert values == [make(0), make(2, 5), make(4, 5)]


def test_stride_descending():
    """A negative step counts down"""
    values = list(stride(make(1), make(0), make(-1, 3)))
    assert values == [make(1), make(2, 3), make(1, 3)]


def test_stride_integer_step_and_bound():
    """Integers are accepted as bound and step"""
    assert list(stride(make(1, 2), 3, 1)) == [make(1, 2), make(3, 2), make(5, 2)]


def test_stride_empty():
    """A bound behind the start yields nothing"""
    assert list(stride(make(1), make(0), make(1, 2))) == []
    assert list(stride(make(1), make(1), make(1, 2))) == []


def test_stride_restartable():
    """Each call starts a fresh sequence"""
    first = list(stride(make(0), make(1), make(1, 2)))
    second = list(stride(make(0), make(1), make(1, 2)))
    assert first == second == [make(0), make(1, 2)]


def test_stride_infinite_bound_is_lazy():
    """An infinite bound gives an endless but lazy iterator"""
    it = stride(make(0), INFINITY, make(1, 3))
    assert [next(it) for _ in range(4)] == [make(0), make(1, 3), make(2, 3), make(1)]


def test_stride_invalid_step():
    """Zero and non-finite steps are rejected up front"""
    with pytest.raises(ValueError):
        stride(make(0), make(1), make(0))
    with pytest.raises(ValueError):
        stride(make(0), make(1), NAN)
    with pytest.raises(ValueError):
        stride(make(0), make(1), INFINITY)
    with pytest.raises(ValueError):
        stride(-INFINITY, make(1), make(1))


def test_range():
    """Test containment in a half-open range"""
    r = FractionRange(make(2, 4), make(5, 4))
    assert make(1, 4) not in r
    assert make(2, 4) in r
    assert make(3, 4) in r
    assert make(5, 4) not in r
    assert 1 in r
    assert NAN not in r


def test_closed_range():
    """A closed range contains its upper bound"""
    r = FractionRange(make(2, 4), make(5, 4), closed=True)
    assert make(5, 4) in r
    assert make(3, 2) not in r


def test_range_iteration():
    """Ranges iterate by a step"""
    assert list(FractionRange(make(0), make(1)).by(make(1, 2))) == [make(0), make(1, 2)]
    assert list(FractionRange(make(0), make(1), closed=True).by(make(1, 2))) == [make(0), make(1, 2), make(1)]


def test_range_bounds():
    """Test bound validation and emptiness"""
    with pytest.raises(ValueError):
        FractionRange(make(1), make(0))
    with pytest.raises(ValueError):
        FractionRange(NAN, make(1))
    assert FractionRange(make(1), make(1)).is_empty
    assert not FractionRange(make(1), make(1), closed=True).is_empty
    assert make(10**9) in FractionRange(make(0), INFINITY)


def test_range_str():
    """Test the string form of ranges"""
    assert str(FractionRange(make(1, 2), make(5, 4))) == "1/2..<5/4"
    assert str(FractionRange(make(0), INFINITY, closed=True)) == "0...+Inf"
