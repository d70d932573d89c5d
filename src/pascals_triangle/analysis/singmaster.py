"""
Search for values that repeat inside Pascal's triangle.

Singmaster's conjecture concerns how often a number can appear in the
triangle. Away from the trivial edges (`k = 0, 1` and their mirrors), repeats
are rare: `C(16,2) = C(10,3) = 120` and `C(15,5) = C(14,6) = 3003` are the
only ones up to row 20.

`find_collisions` merges the columns `k >= 2` of the left half of the
triangle in ascending order of value, using a heap of entries (entries order
by value alone). Neighbouring heap items whose values are approximately
equal are reported as candidate collisions. With floating-point values this
also surfaces near-misses where the format cannot tell two coefficients
apart, so `check_collisions` filters the candidates down to the exact ones.
"""
from __future__ import annotations

import heapq
import logging
import math
from fractions import Fraction
from numbers import Rational
from typing import Any, Callable, Iterable, List, Tuple

from tqdm import tqdm

from pascals_triangle.structures.entry import DEFAULT_REL_TOL, Entry

logger = logging.getLogger(__name__)

Collision = Tuple[Entry, Entry]

# Columns 0 and 1 hold every natural number and are excluded from the search.
FIRST_COLUMN = 2


def count_searched_entries(max_row: int) -> int:
    """Number of entries `(n, k)` with `2 <= k <= n/2` and `n <= max_row`."""
    return sum(max_row - 2 * k + 1 for k in range(FIRST_COLUMN, max_row // 2 + 1))


def values_close(a: Any, b: Any, rel_tol: float = DEFAULT_REL_TOL) -> bool:
    """
    True if `a` and `b` differ by at most `rel_tol` relative to the larger one.

    Rational values (int, Fraction) are compared exactly with the tolerance
    taken as a fraction, so integers beyond the float range never get
    converted. Everything else goes through `math.isclose`.
    """
    if a == b:
        return True
    if isinstance(a, Rational) and isinstance(b, Rational):
        tol = Fraction(rel_tol)
        return abs(a - b) * tol.denominator <= tol.numerator * max(abs(a), abs(b))
    return math.isclose(a, b, rel_tol=rel_tol)


def _check_value_range(max_row: int, value_type: Callable[[Any], Any]) -> None:
    # Ratio updates multiply before dividing, so the largest intermediate is
    # the central value of the last row times `max_row + 1`.
    largest = math.comb(max_row, max_row // 2) * (max_row + 1)
    try:
        converted = value_type(largest)
    except OverflowError:
        converted = None
    if converted is None or (isinstance(converted, float) and math.isinf(converted)):
        raise ValueError(
            f"max_row {max_row} is too large for value type {getattr(value_type, '__name__', value_type)}: "
            f"C({max_row},{max_row // 2}) * {max_row + 1} does not fit; use an exact value type such as int"
        )


def find_collisions(max_row: int, *,
                    value_type: Callable[[Any], Any] = float,
                    rel_tol: float = DEFAULT_REL_TOL,
                    show_progress: bool = False) -> List[Collision]:
    """
    Finds pairs of entries with approximately equal values.

    Parameters
    ----------
    max_row : int
        The last row of the triangle searched.
    value_type : Callable, optional
        Numeric type used for the walk, by default `float`. `int` and
        `Fraction` walks are compared exactly (see `values_close`) and work for
        any `max_row`.
    rel_tol : float, optional
        Relative tolerance for two values to count as equal. With `int` values
        and `rel_tol=0` every reported pair is an exact collision.
    show_progress : bool, optional
        Display a tqdm progress bar, by default False.

    Returns
    -------
    List[Tuple[Entry, Entry]]
        Candidate pairs in ascending order of value, each ordered so that the
        entry on the later row comes first.

    Raises
    ------
    ValueError
        If `max_row` is negative, or the values of its rows overflow
        `value_type` (`float` fails from about row 1020).
    """
    if max_row < 0:
        raise ValueError(f"max_row must be non-negative, got {max_row}")
    _check_value_range(max_row, value_type)

    # Each column starts at its first entry in the left half of the triangle.
    heap: List[Entry] = [Entry(2 * k, k, value_type=value_type)
                         for k in range(FIRST_COLUMN, max_row // 2 + 1)]
    heapq.heapify(heap)

    collisions: List[Collision] = []
    with tqdm(total=count_searched_entries(max_row), desc="Collision search",
              leave=False, disable=not show_progress) as progress:
        while heap:
            entry = heapq.heappop(heap)
            progress.update(1)

            if heap:
                top = heap[0]
                if values_close(entry.val, top.val, rel_tol):
                    pair = (entry, top) if entry.n > top.n else (top, entry)
                    logger.debug(f"Collision candidate: {pair[0]} ~ {pair[1]}")
                    collisions.append((pair[0].copy(), pair[1].copy()))

            if entry.n < max_row:
                heapq.heappush(heap, entry.down_inplace())

    return collisions


def is_collision(pair: Collision) -> bool:
    """True if both entries of `pair` have exactly the same binomial coefficient."""
    first, second = pair
    return math.comb(first.n, first.k) == math.comb(second.n, second.k)


def check_collisions(pairs: Iterable[Collision]) -> List[Collision]:
    """Keeps only the exact collisions among candidate `pairs`."""
    return [pair for pair in pairs if is_collision(pair)]
