from pascals_triangle.utils.binomial_utils import binomial, binomial_row, check_index, is_index
from pascals_triangle.utils.yaml_io import read_yaml

__all__ = [
    "binomial",
    "binomial_row",
    "check_index",
    "is_index",
    "read_yaml",
]
