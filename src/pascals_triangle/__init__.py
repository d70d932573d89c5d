"""Incremental computation of Pascal's triangle by moving between neighbouring entries."""
from pascals_triangle.exceptions import DomainError, NonAdjacentError, OutOfBoundsError, PascalsTriangleError
from pascals_triangle.structures import (
    Center,
    Centre,
    Column,
    Entry,
    LazyCenter,
    LazyCentre,
    LazyColumn,
    Row,
    ZeroRange,
    is_adjacent,
    is_subtractable,
)

__version__ = "0.1.0"

__all__ = [
    "DomainError",
    "NonAdjacentError",
    "OutOfBoundsError",
    "PascalsTriangleError",
    "Center",
    "Centre",
    "Column",
    "Entry",
    "LazyCenter",
    "LazyCentre",
    "LazyColumn",
    "Row",
    "ZeroRange",
    "is_adjacent",
    "is_subtractable",
]
