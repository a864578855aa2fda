from dataclasses import dataclass, field
from typing import List, Tuple

from nearvehicle.index.quadtree import CAPACITY, MAX_DEPTH, MAX_DEPTH_LIMIT, Rect

# Latitude is the x axis, longitude the y axis
DEFAULT_DOMAIN = Rect(-90.0, -180.0, 180.0, 360.0)

DEFAULT_QUERY_COORDINATES: List[Tuple[float, float]] = [
    (34.544909, -102.10084),
    (32.345544, -99.123124),
    (33.234235, -100.21412),
    (35.195739, -95.348899),
    (31.895839, -97.789573),
    (32.895839, -101.78957),
    (34.115839, -100.22573),
    (32.335839, -99.992232),
    (33.535339, -94.792232),
    (32.234235, -100.22222),
]


@dataclass(frozen=True)
class FinderConfig:
    """
    Settings for building the vehicle index.

    Args:
        domain: Rectangle covered by the root node. Positions outside it are not indexed.
        capacity: Points a node holds before it splits.
        max_depth: Depth at which nodes stop splitting.
        sep: Field delimiter of the input file.
    """
    domain: Rect = field(default=DEFAULT_DOMAIN)
    capacity: int = CAPACITY
    max_depth: int = MAX_DEPTH
    sep: str = '\t'

    def __post_init__(self):
        if self.capacity < 1:
            raise ValueError(f"Node capacity must be at least 1, got {self.capacity}")
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 0 and {MAX_DEPTH_LIMIT}, got {self.max_depth}")
        if self.domain.width <= 0 or self.domain.height <= 0:
            raise ValueError(f"Domain must have positive width and height, got {self.domain}")
