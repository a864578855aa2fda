from nearvehicle.core.point import Point
from nearvehicle.index import QuadTreeNode, Rect, build_index, find_nearest
from nearvehicle.finder import NearestVehicleFinder, NearestResult

__version__ = "0.1.0"

__all__ = [
    "Point",
    "QuadTreeNode",
    "Rect",
    "build_index",
    "find_nearest",
    "NearestVehicleFinder",
    "NearestResult",
]
