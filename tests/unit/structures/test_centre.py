"""
Unit tests for the central-element sequences `Centre` and `LazyCentre`.

Element `n` of either sequence is `C(n, n // 2)`, the middle of row `n`.
"""
import math

import numpy as np
import pytest

from pascals_triangle import Center, Centre, DomainError, Entry, LazyCenter, LazyCentre
from pascals_triangle.structures.centre import centre_down, centre_up


# ---------------------------------------------------------------------------
# Centre movement helpers
# ---------------------------------------------------------------------------
def test_centre_down_walks_the_middle():
    entry = Entry(0, 0)
    for n in range(1, 30):
        centre_down(entry)
        assert entry.n == n
        assert entry.k == n // 2
        assert entry.val == math.comb(n, n // 2)


def test_centre_up_walks_the_middle():
    entry = Entry(30, 15)
    for n in range(29, -1, -1):
        centre_up(entry)
        assert entry.n == n
        assert entry.k == n // 2
        assert entry.val == math.comb(n, n // 2)


# ---------------------------------------------------------------------------
# Centre
# ---------------------------------------------------------------------------
def test_centre_values():
    assert Centre(0).values == [1]
    assert Centre(4).values == [1, 1, 2, 3, 6]
    assert Centre(8).values == [1, 1, 2, 3, 6, 10, 20, 35, 70]


@pytest.mark.parametrize("max_row", [0, 1, 2, 10, 40])
def test_centre_matches_binomials(max_row):
    centre = Centre(max_row)
    assert centre.values == [math.comb(n, n // 2) for n in range(max_row + 1)]
    assert centre.is_valid()


def test_centre_rejects_negative_max_row():
    with pytest.raises(DomainError):
        Centre(-1)


def test_centre_indexing():
    centre = Centre(10)
    assert len(centre) == 11
    assert centre.first_index == 0
    assert centre.last_index == 10
    assert list(centre.indices) == list(range(11))
    assert centre[10] == 252
    with pytest.raises(IndexError):
        centre[11]
    with pytest.raises(IndexError):
        centre[-1]


def test_centre_from_data_is_not_checked():
    centre = Centre([1, 1, 2, 4])
    assert centre[3] == 4
    assert not centre.is_valid()
    assert Centre([1, 1, 2, 3]) == Centre(3)


def test_centre_float_values():
    centre = Centre(20, value_type=float)
    assert all(isinstance(v, float) for v in centre)
    assert centre.values == pytest.approx([math.comb(n, n // 2) for n in range(21)])
    assert centre.as_array().dtype == np.float64


def test_centre_to_entries_bias():
    left = Centre(3).to_entries()
    right = Centre(3).to_entries(left_bias=False)
    assert [(e.n, e.k) for e in left] == [(0, 0), (1, 0), (2, 1), (3, 1)]
    assert [(e.n, e.k) for e in right] == [(0, 0), (1, 1), (2, 1), (3, 2)]
    assert all(e.is_valid() for e in left + right)


def test_centre_copy_and_repr():
    centre = Centre(4)
    assert centre.copy() == centre
    assert Centre.from_centre(centre) == centre
    assert repr(centre) == "Centre([1, 1, 2, 3, 6])"
    assert list(centre.as_array()) == [1, 1, 2, 3, 6]


def test_center_aliases():
    assert Center is Centre
    assert LazyCenter is LazyCentre


# ---------------------------------------------------------------------------
# LazyCentre
# ---------------------------------------------------------------------------
def test_lazy_centre_starts_with_first_two_rows():
    lazy = LazyCentre()
    assert lazy.cached_rows == [0, 1]
    assert lazy[0] == 1
    assert lazy[1] == 1
    with pytest.raises(IndexError):
        lazy[-1]


def test_lazy_centre_rejects_negative_precalc_number():
    with pytest.raises(ValueError):
        LazyCentre(precalc_number=-1)


@pytest.mark.parametrize("n", [2, 3, 10, 11, 37, 100])
def test_lazy_centre_miss_fills_neighbourhood(n):
    lazy = LazyCentre(precalc_number=5)
    assert lazy[n] == math.comb(n, n // 2)
    expected = sorted({0, 1} | set(range(max(0, n - 5), n + 6)))
    assert lazy.cached_rows == expected
    assert lazy.is_valid()


def test_lazy_centre_matches_eager_centre():
    lazy = LazyCentre()
    assert lazy.head(50) == Centre(49).values
    assert lazy.is_valid()


def test_lazy_centre_float_values():
    lazy = LazyCentre(value_type=float)
    assert lazy.value_type is float
    assert lazy[60] == pytest.approx(math.comb(60, 30))
    assert lazy[61] == pytest.approx(math.comb(61, 30))


def test_lazy_centre_conversions():
    centre = Centre(6)
    lazy = LazyCentre.from_centre(centre)
    assert lazy.cached_rows == list(range(7))
    assert Centre.from_lazy(lazy) == centre

    # Only the contiguous prefix of the cache becomes a Centre.
    sparse = LazyCentre(precalc_number=2)
    sparse[20]
    assert Centre.from_lazy(sparse) == Centre(1)

    copy = lazy.copy()
    copy[30]
    assert lazy.cached_rows == list(range(7))
    assert LazyCentre.from_lazy(lazy) == lazy

    assert [(e.n, e.k) for e in LazyCentre().to_entries()] == [(0, 0), (1, 0)]
    assert repr(LazyCentre()) == "LazyCentre({0: 1, 1: 1})"


def test_centre_indices_must_be_integers():
    """A whole-valued float is rejected whether or not the value is cached."""
    with pytest.raises(TypeError):
        Centre(4)[2.0]

    lazy = LazyCentre()
    with pytest.raises(TypeError):
        lazy[1.0]
    with pytest.raises(TypeError):
        lazy[30.0]
    assert lazy[np.int64(4)] == 6
