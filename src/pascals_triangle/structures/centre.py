"""
Central elements of Pascal's triangle.

`Centre` and `LazyCentre` are sequences indexed by row number whose `n`-th
element is the middle value of row `n`, `C(n, n // 2)`. For odd rows the two
middle values are equal, so the floor convention loses nothing. `Centre`
computes every element up to a maximum row when constructed; `LazyCentre`
computes and caches elements as they are requested.

`Center` and `LazyCenter` are accepted aliases.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, Sequence, TypeVar, Union

import numpy as np

from pascals_triangle.config import PRECALC_NUMBER
from pascals_triangle.exceptions import DomainError
from pascals_triangle.structures.entry import Entry
from pascals_triangle.structures.zero_range import ZeroRange
from pascals_triangle.utils.binomial_utils import check_index, is_index

logger = logging.getLogger(__name__)

V = TypeVar("V")


def centre_down(entry: Entry[V]) -> Entry[V]:
    """
    Moves a central entry in place to the centre of the next row.

    From an even row `2m` the plain `down` step lands on `(2m+1, m)`, which is
    already central. From an odd row `2m+1` the centre of row `2m+2` sits one
    position to the right, and `C(2m+2, m+1) = 2 * C(2m+1, m)`.
    """
    if entry.n % 2 == 0:
        return entry.down_inplace()
    entry.val = entry.val * 2
    entry.n += 1
    entry.k += 1
    return entry


def centre_up(entry: Entry[V]) -> Entry[V]:
    """
    Moves a central entry in place to the centre of the previous row.

    From an odd row `up` lands on the centre of the even row above. From an
    even row `2m` it lands on `(2m-1, m)`, the right-hand twin of the centre,
    so `k` is shifted to its equal left-hand twin `m-1`.
    """
    entry.up_inplace()
    if entry.n % 2 == 1:
        entry.k -= 1
    return entry


def _centre_entries(rows: Sequence[int], values: Sequence[V], left_bias: bool) -> List[Entry[V]]:
    return [Entry(n, n // 2 if left_bias else (n + 1) // 2, v) for n, v in zip(rows, values)]


class Centre(Generic[V]):
    """
    The central elements of rows `0 .. max_row`, computed eagerly.

    Parameters
    ----------
    data : int | Sequence[V]
        Either `max_row`, the last row to compute, or the central values
        themselves starting at row 0 (copied, not checked).
    value_type : Callable, optional
        Numeric type for computed values, by default `int`.

    Raises
    ------
    DomainError
        If `max_row` is negative.
    """
    __slots__ = ("_data",)

    def __init__(self, data: Union[int, Sequence[V]], *, value_type: Optional[Callable[[Any], V]] = None):
        if is_index(data):
            if data < 0:
                raise DomainError(f"max_row must be non-negative, max_row: {data}")
            self._data: List[V] = self._compute(data, value_type or int)
        else:
            self._data = list(data)

    @staticmethod
    def _compute(max_row: int, value_type: Callable[[Any], V]) -> List[V]:
        one = value_type(1)
        values = [one] * (max_row + 1)
        entry = Entry(0, 0, one)
        for n in range(1, max_row + 1):
            values[n] = centre_down(entry).val
        return values

    @classmethod
    def from_centre(cls, other: "Centre[V]") -> "Centre[V]":
        return cls(list(other._data))

    @classmethod
    def from_lazy(cls, lazy: "LazyCentre[V]") -> "Centre[V]":
        """The cached values of `lazy` from row 0 up to the first gap."""
        values = []
        n = 0
        while lazy.is_cached(n):
            values.append(lazy[n])
            n += 1
        return cls(values)

    def copy(self) -> "Centre[V]":
        return Centre.from_centre(self)

    # --- Accessors ---
    @property
    def values(self) -> List[V]:
        return list(self._data)

    @property
    def indices(self) -> ZeroRange:
        return ZeroRange(len(self._data) - 1)

    @property
    def first_index(self) -> int:
        return 0

    @property
    def last_index(self) -> int:
        return len(self._data) - 1

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[V]:
        return iter(self._data)

    def __getitem__(self, n: int) -> V:
        n = check_index("n", n)
        if not 0 <= n < len(self._data):
            raise IndexError(f"Centre index {n} out of range 0..{len(self._data) - 1}")
        return self._data[n]

    # --- Checks ---
    def is_valid(self) -> bool:
        return all(math.comb(n, n // 2) == v for n, v in enumerate(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Centre):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    # --- Conversion ---
    def to_entries(self, left_bias: bool = True) -> List[Entry[V]]:
        """
        The centre as entries. Odd rows use the left middle position, or the
        right one when `left_bias` is False.
        """
        return _centre_entries(range(len(self._data)), self._data, left_bias)

    def as_array(self) -> np.ndarray:
        is_float = bool(self._data) and all(isinstance(v, float) for v in self._data)
        return np.array(self._data, dtype=np.float64 if is_float else object)

    def __repr__(self) -> str:
        return f"Centre({self._data!r})"


class LazyCentre(Generic[V]):
    """
    The central elements of every row, computed on demand.

    Backed by a sparse `{row: value}` cache seeded with rows 0 and 1. A cache
    miss computes the requested value directly and then walks
    `precalc_number` rows up and down with the centre movements, caching
    rows that were not known yet. The cache is never evicted, and reads
    mutate it.

    Parameters
    ----------
    data : Mapping[int, V], optional
        Initial cache (copied, not checked). Defaults to `{0: 1, 1: 1}`.
    value_type : Callable, optional
        Numeric type for computed values. Defaults to `int`, or to the type of
        the first cached value when `data` is supplied.
    precalc_number : int, optional
        Rows pre-computed on each side of a cache miss.
    """
    __slots__ = ("_data", "_value_type", "_precalc_number")

    def __init__(self, data: Optional[Mapping[int, V]] = None, *,
                 value_type: Optional[Callable[[Any], V]] = None,
                 precalc_number: int = PRECALC_NUMBER):
        if precalc_number < 0:
            raise ValueError(f"precalc_number must be nonnegative, got {precalc_number}")
        self._precalc_number = precalc_number
        if data is None:
            self._value_type = value_type or int
            one = self._value_type(1)
            self._data: Dict[int, V] = {0: one, 1: one}
        else:
            self._data = dict(data)
            if value_type is None:
                value_type = type(next(iter(self._data.values()))) if self._data else int
            self._value_type = value_type

    @classmethod
    def from_lazy(cls, other: "LazyCentre[V]") -> "LazyCentre[V]":
        return cls(other._data, value_type=other._value_type, precalc_number=other._precalc_number)

    @classmethod
    def from_centre(cls, centre: Centre[V], precalc_number: int = PRECALC_NUMBER) -> "LazyCentre[V]":
        return cls(dict(enumerate(centre.values)), precalc_number=precalc_number)

    def copy(self) -> "LazyCentre[V]":
        return LazyCentre.from_lazy(self)

    # --- Accessors ---
    @property
    def value_type(self) -> Callable[[Any], V]:
        return self._value_type

    @property
    def precalc_number(self) -> int:
        return self._precalc_number

    @property
    def first_index(self) -> int:
        return 0

    @property
    def cached_rows(self) -> List[int]:
        return sorted(self._data)

    def is_cached(self, n: int) -> bool:
        return n in self._data

    def __getitem__(self, n: int) -> V:
        n = check_index("n", n)
        if n < 0:
            raise IndexError(f"LazyCentre index {n} is negative")
        if n in self._data:
            return self._data[n]
        return self._fill(n)

    def _fill(self, n: int) -> V:
        entry = Entry(n, n // 2, value_type=self._value_type)
        self._data[n] = entry.val
        logger.debug(f"LazyCentre miss at row {n}; precomputing {self._precalc_number} either side")

        walker = entry.copy()
        for row in range(n - 1, max(-1, n - self._precalc_number - 1), -1):
            centre_up(walker)
            self._data.setdefault(row, walker.val)

        walker = entry.copy()
        for row in range(n + 1, n + self._precalc_number + 1):
            centre_down(walker)
            self._data.setdefault(row, walker.val)

        return entry.val

    def head(self, count: int) -> List[V]:
        """Central values of rows `0 .. count-1`, computing any that are missing."""
        return [self[n] for n in range(count)]

    # --- Checks ---
    def is_valid(self) -> bool:
        return all(math.comb(n, n // 2) == v for n, v in self._data.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LazyCentre):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    # --- Conversion ---
    def to_entries(self, left_bias: bool = True) -> List[Entry[V]]:
        """Cached values as entries, in row order."""
        rows = sorted(self._data)
        return _centre_entries(rows, [self._data[n] for n in rows], left_bias)

    def __repr__(self) -> str:
        return f"LazyCentre({dict(sorted(self._data.items()))!r})"


Center = Centre
LazyCenter = LazyCentre
