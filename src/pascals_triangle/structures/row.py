from __future__ import annotations

import logging
import math
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

import numpy as np

from pascals_triangle.exceptions import DomainError, OutOfBoundsError
from pascals_triangle.structures.entry import Entry
from pascals_triangle.structures.zero_range import ZeroRange
from pascals_triangle.utils.binomial_utils import check_index

logger = logging.getLogger(__name__)

V = TypeVar("V")

# Rows this long or longer are abbreviated by `repr`.
REPR_THRESHOLD = 10
REPR_HALF = 4


def num_elements(row_number: int) -> int:
    """
    Number of slots a `Row` stores to represent row `row_number`.

    Positions 0 and 1 (and their mirrors n and n-1) are always 1 and n, so
    they are not stored, and by symmetry only positions up to the middle are
    needed. For odd rows both middle values are kept.
    """
    if row_number <= 3:
        return 0
    return (row_number - 1) // 2


class Row(Generic[V]):
    """
    A full row of Pascal's triangle, stored compactly.

    The row presents the zero-indexed values `C(n, 0), ..., C(n, n)` but only
    stores positions `2 .. ceil(n/2)`: the two outermost values on each side
    are trivial and the second half mirrors the first. Reads reflect the
    index about the middle and map it onto the stored slots.

    Rows are mutable. `next_inplace` and `prev_inplace` move to the adjacent
    row by updating the stored slots with Pascal's recurrence rather than
    recomputing them, and backing storage can be pre-allocated (`datasize`)
    so repeated advancing never reallocates.

    Parameters
    ----------
    row_number : int
        The row represented, `row_number >= 0`.
    data : Sequence[V], optional
        Raw backing slots (positions `2 ..` of the row). Taken as given and not
        checked; supplying them directly is not recommended. When omitted the
        row is computed.
    value_type : Callable, optional
        Numeric type for computed values. Defaults to `int`, or to the type of
        `data[0]` when `data` is supplied.
    datasize : int, optional
        Largest row number the storage should accommodate without growing.
        Defaults to `row_number`. Cannot be combined with `data`.

    Raises
    ------
    DomainError
        If `row_number` is negative.
    ValueError
        If `datasize` is smaller than `row_number`, or is given together
        with `data`.
    """
    __slots__ = ("_row_number", "_data", "_value_type")

    def __init__(self, row_number: int, data: Optional[Sequence[V]] = None, *,
                 value_type: Optional[Callable[[Any], V]] = None,
                 datasize: Optional[int] = None):
        row_number = check_index("row_number", row_number)
        if row_number < 0:
            raise DomainError(f"row_number must be nonnegative, got {row_number}")

        if data is not None:
            if datasize is not None:
                raise ValueError("datasize cannot be combined with data; the storage is taken from data")
            self._row_number = row_number
            self._data: List[V] = list(data)
            if value_type is None:
                value_type = type(self._data[0]) if self._data else int
            self._value_type = value_type
            return

        if datasize is None:
            datasize = row_number
        if datasize < row_number:
            raise ValueError("datasize specified is not enough to store the row")

        self._row_number = row_number
        self._value_type = value_type if value_type is not None else int
        self._data = self._compute_slots(row_number, datasize)

    def _compute_slots(self, row_number: int, datasize: int) -> List[V]:
        one = self._value_type(1)
        slots = [one] * num_elements(datasize)
        # The second entry of every row is n, so walk right from there.
        entry = Entry(row_number, 1, one * row_number) if row_number >= 1 else None
        for i in range(num_elements(row_number)):
            entry.right_inplace()
            slots[i] = entry.val
        return slots

    @classmethod
    def from_row(cls, other: "Row[V]") -> "Row[V]":
        """A deep copy of `other`, including any pre-allocated capacity."""
        return cls(other._row_number, list(other._data), value_type=other._value_type)

    def copy(self) -> "Row[V]":
        return Row.from_row(self)

    # --- Accessors ---
    @property
    def row_number(self) -> int:
        return self._row_number

    @property
    def value_type(self) -> Callable[[Any], V]:
        return self._value_type

    @property
    def capacity(self) -> int:
        """Number of allocated backing slots."""
        return len(self._data)

    @property
    def indices(self) -> ZeroRange:
        return ZeroRange(self._row_number)

    @property
    def first_index(self) -> int:
        return 0

    @property
    def last_index(self) -> int:
        return self._row_number

    @property
    def values(self) -> List[V]:
        """The full row as a list."""
        return [self[i] for i in range(self._row_number + 1)]

    def _slots(self) -> List[V]:
        return self._data[:num_elements(self._row_number)]

    def __len__(self) -> int:
        return self._row_number + 1

    def __iter__(self) -> Iterator[V]:
        for i in range(self._row_number + 1):
            yield self[i]

    def __getitem__(self, i: int) -> V:
        i = check_index("i", i)
        n = self._row_number
        if not 0 <= i <= n:
            raise IndexError(f"Row index {i} out of range 0..{n}")
        index = n - i if i > n // 2 else i
        if index == 0:
            return self._value_type(1)
        if index == 1:
            return self._value_type(1) * n
        return self._data[index - 2]

    # --- Checks ---
    def is_first(self) -> bool:
        return self._row_number == 0

    def is_valid(self) -> bool:
        """
        True if the stored slots match a freshly computed row.

        This recomputes the row and is meant for diagnostics only.
        """
        count = num_elements(self._row_number)
        if len(self._data) < count:
            return False
        return all(math.comb(self._row_number, j + 2) == v for j, v in enumerate(self._data[:count]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._row_number == other._row_number and self._slots() == other._slots()

    __hash__ = None

    # --- Aggregates ---
    def sum(self, func: Optional[Callable[[V], Any]] = None) -> Any:
        """
        Sum of the row, or of `func` applied to each value of the row.

        Without `func` this is `2 ** n`. With `func` each stored slot is
        evaluated once and counted twice, except the single middle value of
        an even row.
        """
        n = self._row_number
        if func is None:
            return 2 ** n

        one = self._value_type(1)
        if n == 0:
            return func(one)
        if n == 1:
            return 2 * func(one)
        if n == 2:
            return 2 * func(one) + func(one * 2)

        total = 2 * func(one) + 2 * func(one * n)
        slots = self._slots()
        if not slots:
            return total
        for value in slots[:-1]:
            total += 2 * func(value)
        # The last slot of an odd row mirrors the one before it.
        if n % 2 == 0:
            total += func(slots[-1])
        return total

    # --- Movement ---
    def next_inplace(self) -> "Row[V]":
        """Advances to the next row using `C(n+1, i) = C(n, i) + C(n, i-1)`."""
        n = self._row_number
        old_count = num_elements(n)
        new_count = num_elements(n + 1)

        data = self._data
        for j in range(old_count - 1, 0, -1):
            data[j] += data[j - 1]
        if old_count >= 1:
            data[0] += n

        if new_count > old_count:
            if n == 3:
                new_slot = self._value_type(1) * 6
            else:
                # Odd rows keep both middle values, which are equal.
                new_slot = data[old_count - 1]
            if len(data) > old_count:
                data[old_count] = new_slot
            else:
                logger.debug(f"Row storage grown to {old_count + 1} slots at row {n + 1}")
                data.append(new_slot)

        self._row_number = n + 1
        return self

    def prev_inplace(self) -> "Row[V]":
        """Moves back to the previous row, inverting `next_inplace`."""
        if self.is_first():
            raise OutOfBoundsError("no previous row")
        self._row_number -= 1
        n = self._row_number
        count = num_elements(n)
        data = self._data
        if count >= 1:
            data[0] -= n
            for j in range(1, count):
                data[j] -= data[j - 1]
        return self

    def down_inplace(self) -> "Row[V]":
        return self.next_inplace()

    def up_inplace(self) -> "Row[V]":
        return self.prev_inplace()

    def next(self) -> "Row[V]":
        return self.copy().next_inplace()

    def prev(self) -> "Row[V]":
        return self.copy().prev_inplace()

    def down(self) -> "Row[V]":
        return self.next()

    def up(self) -> "Row[V]":
        return self.prev()

    # --- Conversion ---
    def to_entries(self) -> List[Entry[V]]:
        """The row as a list of `Entry` objects."""
        n = self._row_number
        return [Entry(n, k, value) for k, value in enumerate(self.values)]

    def as_array(self) -> np.ndarray:
        """
        The row as a dense NumPy array.

        Float rows use `float64`; every other value type uses `object` so that
        arbitrary-precision integers stay exact.
        """
        dtype = np.float64 if self._value_type is float else object
        return np.array(self.values, dtype=dtype)

    def __repr__(self) -> str:
        values = self.values
        if self._row_number < REPR_THRESHOLD:
            body = ", ".join(str(v) for v in values)
        else:
            head = ", ".join(str(v) for v in values[:REPR_HALF])
            tail = ", ".join(str(v) for v in values[-REPR_HALF:])
            body = f"{head}, ..., {tail}"
        return f"Row<{body}>"
