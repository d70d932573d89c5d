from pascals_triangle.analysis.singmaster import check_collisions, find_collisions, is_collision

__all__ = [
    "check_collisions",
    "find_collisions",
    "is_collision",
]
