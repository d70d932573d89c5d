"""
Unit tests for `ZeroRange`, the `[0, max]` index domain of rows and centres.
"""
import pytest

from pascals_triangle import ZeroRange


def test_zero_range_basic_properties():
    r = ZeroRange(5)
    assert r.first == 0
    assert r.last == 5
    assert len(r) == 6
    assert list(r) == [0, 1, 2, 3, 4, 5]
    assert r.as_range() == range(6)


def test_zero_range_single_element():
    """`ZeroRange(0)` contains exactly the index 0."""
    r = ZeroRange(0)
    assert len(r) == 1
    assert list(r) == [0]
    assert 0 in r
    assert 1 not in r


def test_zero_range_rejects_negative_end():
    with pytest.raises(ValueError, match="end of range must be nonnegative"):
        ZeroRange(-1)


def test_zero_range_indexing_and_membership():
    r = ZeroRange(3)
    assert r[0] == 0
    assert r[3] == 3
    with pytest.raises(IndexError):
        r[4]
    with pytest.raises(IndexError):
        r[-1]

    assert 2 in r
    assert -1 not in r
    assert 4 not in r
    assert "2" not in r


def test_zero_range_equality_and_repr():
    assert ZeroRange(4) == ZeroRange(4)
    assert ZeroRange(4) != ZeroRange(5)
    assert repr(ZeroRange(4)) == "ZeroRange(4)"
