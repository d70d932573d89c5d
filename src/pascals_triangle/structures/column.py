from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, Sequence, TypeVar, Union

import numpy as np

from pascals_triangle.config import PRECALC_NUMBER
from pascals_triangle.exceptions import DomainError, OutOfBoundsError
from pascals_triangle.structures.entry import Entry
from pascals_triangle.utils.binomial_utils import check_index, is_index

logger = logging.getLogger(__name__)

V = TypeVar("V")


class Column(Generic[V]):
    """
    A contiguous vertical slice of Pascal's triangle, computed eagerly.

    Column `c` holds `C(n, c)` for `n = c, c+1, ..., c+len-1`. Indexing uses
    the row number itself, so `column[n] == C(n, c)` for every valid `n`.
    Values are computed by walking down the column, one ratio update per
    value.

    Parameters
    ----------
    col_number : int
        The column (row position) represented, `col_number >= 0`.
    data : int | Sequence[V]
        Either the number of values to compute, or the values themselves
        (copied, not checked).
    value_type : Callable, optional
        Numeric type for computed values, by default `int`.

    Raises
    ------
    DomainError
        If `col_number` or the requested size is negative.
    """
    __slots__ = ("_col_number", "_data")

    def __init__(self, col_number: int, data: Union[int, Sequence[V]], *,
                 value_type: Optional[Callable[[Any], V]] = None):
        col_number = check_index("col_number", col_number)
        if col_number < 0:
            raise DomainError(f"col_number must be nonnegative, got {col_number}")
        self._col_number = col_number

        if is_index(data):
            if data < 0:
                raise DomainError(f"datasize must be nonnegative, got {data}")
            self._data: List[V] = self._compute(col_number, data, value_type or int)
        else:
            self._data = list(data)

    @staticmethod
    def _compute(col_number: int, datasize: int, value_type: Callable[[Any], V]) -> List[V]:
        one = value_type(1)
        values = [one] * datasize
        entry = Entry(col_number, col_number, one)
        for i in range(1, datasize):
            entry.down_inplace()
            values[i] = entry.val
        return values

    @classmethod
    def from_column(cls, other: "Column[V]") -> "Column[V]":
        return cls(other._col_number, list(other._data))

    @classmethod
    def from_lazy(cls, lazy: "LazyColumn[V]", count: int) -> "Column[V]":
        """The first `count` values of `lazy`, computing any that are missing."""
        return cls(lazy.col_number, lazy.head(count))

    def copy(self) -> "Column[V]":
        return Column.from_column(self)

    # --- Accessors ---
    @property
    def col_number(self) -> int:
        return self._col_number

    @property
    def values(self) -> List[V]:
        return list(self._data)

    @property
    def first_index(self) -> int:
        return self._col_number

    @property
    def last_index(self) -> int:
        return self._col_number + len(self._data) - 1

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[V]:
        return iter(self._data)

    def __getitem__(self, n: int) -> V:
        n = check_index("n", n)
        if not self.first_index <= n <= self.last_index:
            raise IndexError(f"Column index {n} out of range {self.first_index}..{self.last_index}")
        return self._data[n - self._col_number]

    # --- Checks ---
    def is_first(self) -> bool:
        return self._col_number == 0

    def is_at_left(self) -> bool:
        return self.is_first()

    def is_valid(self) -> bool:
        c = self._col_number
        return all(math.comb(c + i, c) == v for i, v in enumerate(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self._col_number == other._col_number and self._data == other._data

    __hash__ = None

    # --- Movement ---
    def next_inplace(self) -> "Column[V]":
        """Shifts to column `c + 1`; the row offsets stay the same."""
        data = self._data
        for i in range(1, len(data)):
            data[i] += data[i - 1]
        self._col_number += 1
        return self

    def prev_inplace(self) -> "Column[V]":
        """Shifts to column `c - 1`."""
        if self.is_first():
            raise OutOfBoundsError("no previous column")
        data = self._data
        for i in range(len(data) - 1, 0, -1):
            data[i] -= data[i - 1]
        self._col_number -= 1
        return self

    def right_inplace(self) -> "Column[V]":
        return self.next_inplace()

    def left_inplace(self) -> "Column[V]":
        return self.prev_inplace()

    def next(self) -> "Column[V]":
        return self.copy().next_inplace()

    def prev(self) -> "Column[V]":
        return self.copy().prev_inplace()

    def right(self) -> "Column[V]":
        return self.next()

    def left(self) -> "Column[V]":
        return self.prev()

    # --- Conversion ---
    def to_entries(self) -> List[Entry[V]]:
        c = self._col_number
        return [Entry(c + i, c, v) for i, v in enumerate(self._data)]

    def as_array(self) -> np.ndarray:
        """Dense NumPy view; `float64` for float data, `object` otherwise."""
        is_float = bool(self._data) and all(isinstance(v, float) for v in self._data)
        return np.array(self._data, dtype=np.float64 if is_float else object)

    def __repr__(self) -> str:
        return f"Column({self._col_number}, {self._data!r})"


class LazyColumn(Generic[V]):
    """
    An unbounded column of Pascal's triangle, computed on demand.

    Values are cached in a sparse mapping from offset (1-based, counted from
    the top of the column) to value. A read that misses the cache computes
    the requested value directly and then walks `precalc_number` positions up
    and down the column with the movement identities, caching every position
    it passes that was not known yet. Nearby reads are then cache hits.

    The cache is never evicted. Reads mutate the cache, so even read-only
    sharing across threads needs external synchronisation.

    Parameters
    ----------
    col_number : int
        The column represented, `col_number >= 0`.
    data : Mapping[int, V], optional
        Initial cache `{offset: value}` (copied, not checked). Defaults to
        `{1: 1}`, the top of the column.
    value_type : Callable, optional
        Numeric type for computed values. Defaults to `int`, or to the type of
        the first cached value when `data` is supplied.
    precalc_number : int, optional
        Positions pre-computed on each side of a cache miss.

    Raises
    ------
    DomainError
        If `col_number` is negative.
    """
    __slots__ = ("_col_number", "_data", "_value_type", "_precalc_number")

    def __init__(self, col_number: int, data: Optional[Mapping[int, V]] = None, *,
                 value_type: Optional[Callable[[Any], V]] = None,
                 precalc_number: int = PRECALC_NUMBER):
        col_number = check_index("col_number", col_number)
        if col_number < 0:
            raise DomainError(f"col_number must be nonnegative, got {col_number}")
        if precalc_number < 0:
            raise ValueError(f"precalc_number must be nonnegative, got {precalc_number}")
        self._col_number = col_number
        self._precalc_number = precalc_number

        if data is None:
            self._value_type = value_type or int
            self._data: Dict[int, V] = {1: self._value_type(1)}
        else:
            self._data = dict(data)
            if value_type is None:
                value_type = type(next(iter(self._data.values()))) if self._data else int
            self._value_type = value_type

    @classmethod
    def from_lazy(cls, other: "LazyColumn[V]") -> "LazyColumn[V]":
        return cls(other._col_number, other._data, value_type=other._value_type,
                   precalc_number=other._precalc_number)

    @classmethod
    def from_column(cls, column: Column[V], precalc_number: int = PRECALC_NUMBER) -> "LazyColumn[V]":
        """A lazy column pre-seeded with every value of an eager one."""
        data = {i + 1: v for i, v in enumerate(column.values)}
        return cls(column.col_number, data, precalc_number=precalc_number)

    def copy(self) -> "LazyColumn[V]":
        return LazyColumn.from_lazy(self)

    # --- Accessors ---
    @property
    def col_number(self) -> int:
        return self._col_number

    @property
    def value_type(self) -> Callable[[Any], V]:
        return self._value_type

    @property
    def precalc_number(self) -> int:
        return self._precalc_number

    @property
    def first_index(self) -> int:
        return self._col_number

    @property
    def cached_offsets(self) -> List[int]:
        return sorted(self._data)

    def __getitem__(self, n: int) -> V:
        n = check_index("n", n)
        if n < self._col_number:
            raise IndexError(f"LazyColumn index {n} is above the top of column {self._col_number}")
        offset = n - self._col_number + 1
        if offset in self._data:
            return self._data[offset]
        return self._fill(n, offset)

    def _fill(self, n: int, offset: int) -> V:
        c = self._col_number
        entry = Entry(n, c, value_type=self._value_type)
        self._data[offset] = entry.val
        logger.debug(f"LazyColumn({c}) miss at row {n}; precomputing {self._precalc_number} either side")

        walker = entry.copy()
        for j in range(offset - 1, max(0, offset - self._precalc_number - 1), -1):
            walker.up_inplace()
            self._data.setdefault(j, walker.val)

        walker = entry.copy()
        for j in range(offset + 1, offset + self._precalc_number + 1):
            walker.down_inplace()
            self._data.setdefault(j, walker.val)

        return entry.val

    def head(self, count: int) -> List[V]:
        """The first `count` values of the column, computing any that are missing."""
        c = self._col_number
        return [self[c + i] for i in range(count)]

    # --- Checks ---
    def is_first(self) -> bool:
        return self._col_number == 0

    def is_at_left(self) -> bool:
        return self.is_first()

    def is_valid(self) -> bool:
        """True if every cached value equals the exact binomial coefficient."""
        c = self._col_number
        return all(math.comb(c + offset - 1, c) == v for offset, v in self._data.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LazyColumn):
            return NotImplemented
        return self._col_number == other._col_number and self._data == other._data

    __hash__ = None

    # --- Movement ---
    def next_inplace(self) -> "LazyColumn[V]":
        """
        Shifts every cached value to column `c + 1` at the same offset.

        `(n, c)` becomes `(n+1, c+1)`: one step down, then one step right.
        Uncached offsets stay uncached.
        """
        c = self._col_number
        for offset, value in self._data.items():
            entry = Entry(c + offset - 1, c, value)
            self._data[offset] = entry.down_inplace().right_inplace().val
        self._col_number += 1
        return self

    def prev_inplace(self) -> "LazyColumn[V]":
        """Shifts every cached value to column `c - 1`: one step left, then one step up."""
        if self.is_first():
            raise OutOfBoundsError("no previous column")
        c = self._col_number
        for offset, value in self._data.items():
            entry = Entry(c + offset - 1, c, value)
            self._data[offset] = entry.left_inplace().up_inplace().val
        self._col_number -= 1
        return self

    def right_inplace(self) -> "LazyColumn[V]":
        return self.next_inplace()

    def left_inplace(self) -> "LazyColumn[V]":
        return self.prev_inplace()

    def next(self) -> "LazyColumn[V]":
        return self.copy().next_inplace()

    def prev(self) -> "LazyColumn[V]":
        return self.copy().prev_inplace()

    def right(self) -> "LazyColumn[V]":
        return self.next()

    def left(self) -> "LazyColumn[V]":
        return self.prev()

    # --- Conversion ---
    def to_entries(self) -> List[Entry[V]]:
        """Cached values as entries, in row order."""
        c = self._col_number
        return [Entry(c + offset - 1, c, self._data[offset]) for offset in sorted(self._data)]

    def __repr__(self) -> str:
        return f"LazyColumn({self._col_number}, {dict(sorted(self._data.items()))!r})"
