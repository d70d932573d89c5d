"""
Ratio identities for moving between neighbouring entries of Pascal's triangle.

Given the value `C(n, k)` of one entry, the value of any adjacent entry can be
obtained with one multiplication and one division instead of recomputing a
binomial coefficient from scratch:

    C(n-1, k)   = C(n, k) * (n - k) / n
    C(n+1, k)   = C(n, k) * (n + 1) / (n - k + 1)
    C(n, k-1)   = C(n, k) * k / (n - k + 1)
    C(n, k+1)   = C(n, k) * (n - k) / (k + 1)

The functions here perform no bounds checks; callers (`Entry`, `Row`,
`Column`, `Centre` and their lazy variants) validate the move first.
"""
from __future__ import annotations
from numbers import Integral
from typing import TypeVar

V = TypeVar("V")


def exact_ratio(value: V, numerator: int, denominator: int) -> V:
    """
    Scales `value` by `numerator / denominator`.

    For integral values the product is formed first and floor division is
    applied last, so the result is exact whenever `value * numerator` is a
    multiple of `denominator`, which the binomial identities guarantee. Other
    numeric types (float, Fraction, Decimal) use true division.

    Parameters
    ----------
    value : V
        The known value.
    numerator : int
        The multiplier.
    denominator : int
        The divisor; must be non-zero.

    Returns
    -------
    V
        The scaled value, of the same numeric type as `value`.
    """
    if isinstance(value, Integral):
        return value * numerator // denominator
    return value * numerator / denominator


def up_value(n: int, k: int, val: V) -> V:
    """Value of `(n-1, k)` given `val = C(n, k)`. Requires `0 <= k < n`."""
    return exact_ratio(val, n - k, n)


def down_value(n: int, k: int, val: V) -> V:
    """Value of `(n+1, k)` given `val = C(n, k)`."""
    return exact_ratio(val, n + 1, n - k + 1)


def left_value(n: int, k: int, val: V) -> V:
    """Value of `(n, k-1)` given `val = C(n, k)`. Requires `0 < k <= n`."""
    return exact_ratio(val, k, n - k + 1)


def right_value(n: int, k: int, val: V) -> V:
    """Value of `(n, k+1)` given `val = C(n, k)`. Requires `0 <= k < n`."""
    return exact_ratio(val, n - k, k + 1)
