import math
from typing import Optional, Tuple

from nearvehicle.core.point import Point
from nearvehicle.index.quadtree import QuadTreeNode


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Planar Euclidean distance between (x1, y1) and (x2, y2)."""
    dx = float(x2) - float(x1)
    dy = float(y2) - float(y1)
    return math.sqrt(dx * dx + dy * dy)


def find_nearest_with_distance(root: QuadTreeNode, x: float, y: float) -> Tuple[Optional[Point], float]:
    """
    Same search as `find_nearest`, also returning the distance to the point found
    (math.inf when nothing was found).
    """
    nearest: Optional[Point] = None
    best_distance = math.inf

    def _visit(node: QuadTreeNode):
        nonlocal nearest, best_distance

        for point in node.points:
            distance = calculate_distance(x, y, point.lat, point.lon)
            # Strict comparison: on ties the first point seen wins
            if distance < best_distance:
                best_distance = distance
                nearest = point

        if node.children is None:
            return
        for child in node.children:
            if child.rect.contains_xy(x, y):
                _visit(child)

    _visit(root)
    return nearest, best_distance


def find_nearest(root: QuadTreeNode, x: float, y: float) -> Optional[Point]:
    """
    Finds the nearest point to (x, y) by descending the quadtree.

    Every visited node compares its own points; the descent then continues only into the
    child whose rectangle contains (x, y). Sibling quadrants are never revisited, so near a
    cell boundary the answer can be farther away than the true global nearest.
    The root is always visited, even for queries outside its rectangle.

    Returns:
        The closest point found, or None if the index is empty or no populated cell
        on the descent path contains the query.
    """
    nearest, _ = find_nearest_with_distance(root, x, y)
    return nearest
