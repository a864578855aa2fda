from .quadtree import CAPACITY, MAX_DEPTH, QuadTreeNode, Rect, build_index
from .nearest import calculate_distance, find_nearest, find_nearest_with_distance

__all__ = [
    "CAPACITY",
    "MAX_DEPTH",
    "QuadTreeNode",
    "Rect",
    "build_index",
    "calculate_distance",
    "find_nearest",
    "find_nearest_with_distance",
]
