"""
Unit tests for the `Column` and `LazyColumn` types.

Both present column `c` of Pascal's triangle indexed by row number, so that
`column[n] == C(n, c)`. `Column` is computed eagerly for a fixed number of
rows; `LazyColumn` fills a sparse cache on demand and pre-computes a small
neighbourhood around every miss.
"""
import math
from fractions import Fraction

import numpy as np
import pytest

from pascals_triangle import Column, DomainError, Entry, LazyColumn, OutOfBoundsError


# ---------------------------------------------------------------------------
# Column
# ---------------------------------------------------------------------------
def test_column_values():
    assert Column(4, 5).values == [1, 5, 15, 35, 70]
    assert Column(5, 4).values == [1, 6, 21, 56]
    assert Column(0, 4).values == [1, 1, 1, 1]
    assert Column(1, 4).values == [1, 2, 3, 4]
    assert Column(3, 0).values == []


@pytest.mark.parametrize("c", range(0, 12))
def test_column_matches_binomials(c):
    column = Column(c, 20)
    assert column.values == [math.comb(c + i, c) for i in range(20)]
    assert column.is_valid()


def test_column_rejects_negative_arguments():
    with pytest.raises(DomainError):
        Column(-1, 4)
    with pytest.raises(DomainError):
        Column(2, -4)


def test_column_indexing_uses_row_numbers():
    column = Column(4, 5)
    assert column.col_number == 4
    assert column.first_index == 4
    assert column.last_index == 8
    assert column[4] == 1
    assert column[8] == 70
    assert len(column) == 5
    with pytest.raises(IndexError):
        column[3]
    with pytest.raises(IndexError):
        column[9]


def test_column_from_data_is_not_checked():
    column = Column(2, [1, 3, 6, 11])
    assert column[5] == 11
    assert not column.is_valid()
    assert Column(2, [1, 3, 6, 10]) == Column(2, 4)


def test_column_value_type():
    column = Column(3, 6, value_type=float)
    assert all(isinstance(v, float) for v in column)
    assert column.values == pytest.approx([1, 4, 10, 20, 35, 56])
    assert Column(3, 3, value_type=Fraction)[5] == Fraction(10)


def test_column_moves_between_columns():
    column = Column(9, 6)
    assert column.prev() == column.left() == Column(8, 6)
    assert column.next() == column.right() == Column(10, 6)
    assert column == Column(9, 6)

    assert column.next_inplace() is column
    assert column == Column(10, 6)
    column.prev_inplace().prev_inplace()
    assert column == Column(8, 6)


def test_column_walk_across_triangle():
    column = Column(0, 10)
    for c in range(1, 15):
        column.right_inplace()
        assert column == Column(c, 10)
    for c in range(13, -1, -1):
        column.left_inplace()
        assert column == Column(c, 10)


def test_column_previous_of_first_column_raises():
    assert Column(0, 3).is_first()
    assert Column(0, 3).is_at_left()
    with pytest.raises(OutOfBoundsError, match="no previous column"):
        Column(0, 3).prev_inplace()


def test_column_copy_is_independent():
    a = Column(3, 5)
    b = a.copy()
    b.next_inplace()
    assert a == Column(3, 5)
    assert Column.from_column(a) == a


def test_column_conversions():
    assert Column(2, 3).to_entries() == [Entry(2, 2), Entry(3, 2), Entry(4, 2)]

    arr = Column(2, 3).as_array()
    assert arr.dtype == object
    assert list(arr) == [1, 3, 6]
    assert Column(2, 3, value_type=float).as_array().dtype == np.float64

    assert repr(Column(2, 3)) == "Column(2, [1, 3, 6])"


# ---------------------------------------------------------------------------
# LazyColumn
# ---------------------------------------------------------------------------
def test_lazy_column_starts_with_top_of_column():
    lazy = LazyColumn(4)
    assert lazy.cached_offsets == [1]
    assert lazy[4] == 1
    assert lazy.first_index == 4


def test_lazy_column_rejects_bad_arguments():
    with pytest.raises(DomainError):
        LazyColumn(-1)
    with pytest.raises(ValueError):
        LazyColumn(2, precalc_number=-1)
    with pytest.raises(IndexError):
        LazyColumn(5)[4]


def test_lazy_column_miss_fills_neighbourhood():
    """A miss at offset 20 caches offsets 15..25 around it."""
    lazy = LazyColumn(3, precalc_number=5)
    assert lazy[22] == math.comb(22, 3)
    assert lazy.cached_offsets == [1] + list(range(15, 26))
    assert lazy.is_valid()


def test_lazy_column_neighbourhood_stops_at_top():
    lazy = LazyColumn(3, precalc_number=5)
    lazy[5]
    assert lazy.cached_offsets == list(range(1, 9))
    assert lazy.is_valid()


def test_lazy_column_fill_keeps_existing_values():
    lazy = LazyColumn(2, {1: 1, 6: 99}, precalc_number=5)
    assert lazy[9] == math.comb(9, 2)
    assert lazy[7] == 99
    assert not lazy.is_valid()


@pytest.mark.parametrize("c", range(0, 8))
def test_lazy_column_matches_eager_column(c):
    lazy = LazyColumn(c)
    assert lazy.head(25) == Column(c, 25).values
    assert lazy.is_valid()


def test_lazy_column_value_type():
    lazy = LazyColumn(4, value_type=float)
    assert lazy.value_type is float
    assert lazy[30] == pytest.approx(math.comb(30, 4))
    assert LazyColumn(4, {1: 1.0}).value_type is float


def test_lazy_column_moves_between_columns():
    lazy = LazyColumn(9)
    assert lazy.prev() == lazy.left() == LazyColumn(8)
    assert lazy.next() == lazy.right() == LazyColumn(10)


def test_lazy_column_move_shifts_cached_values():
    lazy = LazyColumn(3)
    lazy.head(12)
    offsets = lazy.cached_offsets

    moved = lazy.next()
    assert moved.col_number == 4
    assert moved.cached_offsets == offsets
    assert moved.head(12) == Column(4, 12).values
    assert moved.is_valid()

    back = moved.prev()
    assert back == lazy


def test_lazy_column_previous_of_first_column_raises():
    with pytest.raises(OutOfBoundsError, match="no previous column"):
        LazyColumn(0).prev_inplace()


def test_lazy_column_conversions():
    column = Column(3, 6)
    lazy = LazyColumn.from_column(column)
    assert lazy.cached_offsets == list(range(1, 7))
    assert Column.from_lazy(lazy, 6) == column
    assert Column.from_lazy(LazyColumn(3), 6) == column

    copy = lazy.copy()
    copy[40]
    assert lazy.cached_offsets == list(range(1, 7))
    assert LazyColumn.from_lazy(lazy) == lazy

    assert LazyColumn(2).to_entries() == [Entry(2, 2)]
    assert repr(LazyColumn(2)) == "LazyColumn(2, {1: 1})"


def test_column_indices_must_be_integers():
    """A whole-valued float is rejected whether or not the value is cached."""
    with pytest.raises(TypeError):
        Column(2, 5)[3.0]

    lazy = LazyColumn(2, precalc_number=1)
    lazy[5]
    assert lazy.cached_offsets == [1, 3, 4, 5]
    with pytest.raises(TypeError):
        lazy[5.0]
    with pytest.raises(TypeError):
        lazy[40.0]
    assert lazy[np.int64(5)] == 10


def test_lazy_column_precalc_number_sets_neighbourhood():
    lazy = LazyColumn(2, precalc_number=1)
    assert lazy[20] == math.comb(20, 2)
    assert lazy.cached_offsets == [1, 18, 19, 20]
    assert lazy.precalc_number == 1
