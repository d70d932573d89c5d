from __future__ import annotations


class PascalsTriangleError(Exception):
    """Base class for all errors raised by `pascals_triangle`."""


class OutOfBoundsError(PascalsTriangleError):
    """
    An attempt to reach a part of Pascal's triangle that doesn't exist.

    Raised by the movement operations when asked to move past an edge of the
    triangle: an entry `(n, k)` for which `0 <= k <= n` would not hold, or a
    row or column before the first.

    Parameters
    ----------
    msg : str
        A short, human-readable reason, e.g. "no entry above".
    """
    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return f"OutOfBoundsError: {self.msg}"


class NonAdjacentError(PascalsTriangleError, ArithmeticError):
    """
    An attempt to add or subtract entries that are not appropriately arranged.

    Entries that are adjacent on the same row can be added together, and an
    interior entry can have the entry directly (or diagonally left) above it
    subtracted. Any other combination raises this error.
    """
    def __init__(self, msg: str = "entries not appropriately arranged"):
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return f"NonAdjacentError: {self.msg}"


class DomainError(PascalsTriangleError, ValueError):
    """A container was constructed with a negative row number, column number or size."""
