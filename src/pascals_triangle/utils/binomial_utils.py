"""Reference binomial coefficients and coordinate checks."""
from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Callable, List, Optional, TypeVar

V = TypeVar("V")


def binomial(n: int, k: int, value_type: Optional[Callable[[Any], V]] = None) -> V:
    """
    Compute `C(n, k)` exactly and convert it to `value_type`.

    The coefficient is evaluated with arbitrary-precision integers, so it never
    overflows; the conversion is the only place precision can be lost (e.g.
    for `float`).

    Parameters
    ----------
    n : int
        Row number, `n >= 0`.
    k : int
        Row position, `0 <= k <= n`.
    value_type : Callable, optional
        Numeric type for the result. Defaults to `int`.
    """
    exact = math.comb(n, k)
    if value_type is None or value_type is int:
        return exact
    return value_type(exact)


def binomial_row(n: int) -> List[int]:
    """Return `[C(n,0), ..., C(n,n)]` computed directly, for cross-checks."""
    return [math.comb(n, k) for k in range(n + 1)]


def is_index(value: Any) -> bool:
    """True if `value` can be used as a row number or row position."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_index(name: str, value: Any) -> int:
    """
    Validates that `value` is an integral coordinate and returns it as `int`.

    Raises
    ------
    TypeError
        If `value` is not an integer (floats such as `2.0` are rejected too).
    """
    if not is_index(value):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
    return int(value)
