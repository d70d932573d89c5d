from pascals_triangle.structures.zero_range import ZeroRange
from pascals_triangle.structures.entry import Entry, is_adjacent, is_subtractable
from pascals_triangle.structures.row import Row, num_elements
from pascals_triangle.structures.column import Column, LazyColumn
from pascals_triangle.structures.centre import Centre, Center, LazyCentre, LazyCenter

__all__ = [
    "ZeroRange",
    "Entry",
    "is_adjacent",
    "is_subtractable",
    "Row",
    "num_elements",
    "Column",
    "LazyColumn",
    "Centre",
    "Center",
    "LazyCentre",
    "LazyCenter",
]
