from __future__ import annotations

import math
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from pascals_triangle.exceptions import NonAdjacentError, OutOfBoundsError
from pascals_triangle.movement import down_value, left_value, right_value, up_value
from pascals_triangle.utils.binomial_utils import binomial, check_index

V = TypeVar("V")

# Default relative tolerance, sqrt(float64 eps).
DEFAULT_REL_TOL = 1.4901161193847656e-08


class Entry(Generic[V]):
    """
    A single entry of Pascal's triangle: a location `(n, k)` and its value.

    The value should equal the binomial coefficient `C(n, k)`. It is computed
    when not supplied; an explicitly supplied value is trusted and not checked
    (use `is_valid` to check it).

    Entries are mutable so tight loops can walk the triangle in place with the
    `*_inplace` movement methods. The pure movement methods (`up`, `down`,
    `left`, `right`, `prev`, `next`) copy first and leave the receiver alone.

    Parameters
    ----------
    n : int
        The row number, `n >= 0`.
    k : int
        The position within the row, `0 <= k <= n`.
    val : V, optional
        The value of the entry. Computed from `n` and `k` when omitted.
    value_type : Callable, optional
        Numeric type for the value (e.g. `float`, `Fraction`). Applied to both
        computed and supplied values. Defaults to `int` for computed values.

    Raises
    ------
    TypeError
        If `n` or `k` is not an integer.
    ValueError
        If `0 <= k <= n` does not hold.
    """
    __slots__ = ("n", "k", "val")

    def __init__(self, n: int, k: int, val: Optional[V] = None, *,
                 value_type: Optional[Callable[[Any], V]] = None):
        n = check_index("n", n)
        k = check_index("k", k)
        if not 0 <= k <= n:
            raise ValueError(f"Entry requires 0 <= k <= n but n:{n}, k:{k}")
        if val is None:
            val = binomial(n, k, value_type)
        elif value_type is not None:
            val = value_type(val)
        self.n = n
        self.k = k
        self.val = val

    @classmethod
    def from_pair(cls, pair: Tuple[int, int], value_type: Optional[Callable[[Any], V]] = None) -> "Entry[V]":
        """Builds the entry at `pair = (n, k)` using the binomial formula."""
        n, k = pair
        return cls(n, k, value_type=value_type)

    @classmethod
    def from_entry(cls, other: "Entry[V]") -> "Entry[V]":
        """An independent copy of `other`."""
        return cls(other.n, other.k, other.val)

    def copy(self) -> "Entry[V]":
        return Entry.from_entry(self)

    # --- Accessors ---
    @property
    def row_number(self) -> int:
        return self.n

    @property
    def row_position(self) -> int:
        return self.k

    @property
    def value(self) -> V:
        return self.val

    # --- Checks ---
    def is_first(self) -> bool:
        """True for the apex `(0, 0)`."""
        return self.n == 0 and self.k == 0

    def is_at_left(self) -> bool:
        return self.k <= 0

    def is_at_right(self) -> bool:
        return self.k >= self.n

    def is_interior(self) -> bool:
        """True if the entry is neither on the left nor the right edge."""
        return self.n >= 2 and 0 < self.k < self.n

    def is_adjacent(self, other: "Entry") -> bool:
        return is_adjacent(self, other)

    def is_subtractable(self, other: "Entry") -> bool:
        return is_subtractable(self, other)

    def is_valid(self) -> bool:
        """True if the stored value equals the exact binomial coefficient."""
        return 0 <= self.k <= self.n and math.comb(self.n, self.k) == self.val

    # --- In-place movement ---
    def up_inplace(self) -> "Entry[V]":
        if self.is_at_right() or self.is_first():
            raise OutOfBoundsError("no entry above")
        self.val = up_value(self.n, self.k, self.val)
        self.n -= 1
        return self

    def down_inplace(self) -> "Entry[V]":
        self.val = down_value(self.n, self.k, self.val)
        self.n += 1
        return self

    def left_inplace(self) -> "Entry[V]":
        if self.is_at_left():
            raise OutOfBoundsError("no entry to the left")
        self.val = left_value(self.n, self.k, self.val)
        self.k -= 1
        return self

    def right_inplace(self) -> "Entry[V]":
        if self.is_at_right():
            raise OutOfBoundsError("no entry to the right")
        self.val = right_value(self.n, self.k, self.val)
        self.k += 1
        return self

    def prev_inplace(self) -> "Entry[V]":
        """
        Moves to the previous entry in reading order.

        That is the entry to the left or, at the start of a row, the last
        entry of the row above.
        """
        if self.is_first():
            raise OutOfBoundsError("no previous entry")
        if not self.is_at_left():
            return self.left_inplace()
        self.n -= 1
        self.k = self.n
        self.val = self._one()
        return self

    def next_inplace(self) -> "Entry[V]":
        """
        Moves to the next entry in reading order.

        That is the entry to the right or, at the end of a row, the first
        entry of the row below.
        """
        if not self.is_at_right():
            return self.right_inplace()
        self.n += 1
        self.k = 0
        self.val = self._one()
        return self

    # --- Pure movement ---
    def up(self) -> "Entry[V]":
        return self.copy().up_inplace()

    def down(self) -> "Entry[V]":
        return self.copy().down_inplace()

    def left(self) -> "Entry[V]":
        return self.copy().left_inplace()

    def right(self) -> "Entry[V]":
        return self.copy().right_inplace()

    def prev(self) -> "Entry[V]":
        return self.copy().prev_inplace()

    def next(self) -> "Entry[V]":
        return self.copy().next_inplace()

    def _one(self) -> V:
        # Keeps the value's numeric type when wrapping onto an edge.
        return type(self.val)(1)

    # --- Operators ---
    def __add__(self, other: "Entry") -> "Entry":
        """Adjacent entries add to the entry directly beneath both of them."""
        if not isinstance(other, Entry):
            return NotImplemented
        if not is_adjacent(self, other):
            raise NonAdjacentError()
        return Entry(self.n + 1, max(self.k, other.k), self.val + other.val)

    def __sub__(self, other: "Entry") -> "Entry":
        """
        Inverse of `+`: subtracting an entry above gives its neighbour.

        `C(n, k) - C(n-1, k)` is `C(n-1, k-1)` and `C(n, k) - C(n-1, k-1)` is
        `C(n-1, k)`.
        """
        if not isinstance(other, Entry):
            return NotImplemented
        if not is_subtractable(self, other):
            raise NonAdjacentError()
        return Entry(other.n, 2 * self.k - other.k - 1, self.val - other.val)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.n == other.n and self.k == other.k and self.val == other.val

    __hash__ = None  # mutable

    def is_close(self, other: "Entry", rel_tol: float = DEFAULT_REL_TOL, abs_tol: float = 0.0) -> bool:
        """Same location and approximately equal values."""
        return (self.n == other.n and self.k == other.k
                and math.isclose(self.val, other.val, rel_tol=rel_tol, abs_tol=abs_tol))

    # Entries are ordered by value only; their locations are ignored.
    def __lt__(self, other: "Entry") -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.val < other.val

    def __le__(self, other: "Entry") -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.val <= other.val

    def __gt__(self, other: "Entry") -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.val > other.val

    def __ge__(self, other: "Entry") -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.val >= other.val

    def __repr__(self) -> str:
        return f"Entry({self.n}, {self.k}, {self.val!r})"

    def __str__(self) -> str:
        return f"({self.n}, {self.k}, {self.val})"


def is_adjacent(a: Entry, b: Entry) -> bool:
    """True if `a` and `b` are neighbours on the same row."""
    return a.n == b.n and abs(a.k - b.k) == 1


def is_subtractable(a: Entry, b: Entry) -> bool:
    """
    True if `a - b` is defined.

    `a` must be an interior entry and `b` must lie directly above it or
    diagonally above-left of it.
    """
    return a.n == b.n + 1 and a.is_interior() and 0 <= a.k - b.k <= 1
