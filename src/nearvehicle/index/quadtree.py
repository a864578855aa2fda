from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional
import logging

from nearvehicle.core.point import Point

logger = logging.getLogger(__name__)

CAPACITY = 4
MAX_DEPTH = 32
# Deeper trees only stack up recursion; at 64 halvings a cell of the
# default domain is far below float spacing anyway.
MAX_DEPTH_LIMIT = 64


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle with origin (x, y) and extent (width, height).
    Containment is half-open: the lower edges belong to the rectangle, the upper edges do not.

    The upper edges are stored rather than recomputed from x + width, so quadrants
    share their parent's edges exactly and no point on a boundary falls between them.
    """
    x: float
    y: float
    width: float
    height: float
    x_max: Optional[float] = field(default=None, compare=False, repr=False)
    y_max: Optional[float] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.x_max is None:
            object.__setattr__(self, 'x_max', self.x + self.width)
        if self.y_max is None:
            object.__setattr__(self, 'y_max', self.y + self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains_xy(self, px: float, py: float) -> bool:
        return (self.x <= px < self.x_max
                and self.y <= py < self.y_max)

    def can_split(self) -> bool:
        """False once halving would produce a quadrant with zero width or height."""
        mid_x = self.x + self.width / 2
        mid_y = self.y + self.height / 2
        return self.x < mid_x < self.x_max and self.y < mid_y < self.y_max

    def quadrant(self, idx: int) -> "Rect":
        #
        # 2 | 3
        # -----
        # 0 | 1
        #
        mid_x = self.x + self.width / 2
        mid_y = self.y + self.height / 2
        x0, x1 = (mid_x, self.x_max) if idx in (1, 3) else (self.x, mid_x)
        y0, y1 = (mid_y, self.y_max) if idx in (2, 3) else (self.y, mid_y)
        return Rect(x0, y0, x1 - x0, y1 - y0, x_max=x1, y_max=y1)


class QuadTreeNode:
    """
    One cell of an adaptive point quadtree.

    A node holds up to `capacity` points until one more arrives; it then splits
    into four quadrant children, hands its points down and from then on only
    routes inserts. Nodes at `max_depth`, or too small to halve, never split and
    keep every point they get, so clustered or duplicate coordinates cannot recurse forever.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        capacity: int = CAPACITY,
        max_depth: int = MAX_DEPTH,
        depth: int = 0
    ):
        if max_depth > MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be at most {MAX_DEPTH_LIMIT}, got {max_depth}")
        self.rect = Rect(x, y, width, height)
        self.capacity = capacity
        self.max_depth = max_depth
        self.depth = depth
        self.points: List[Point] = []
        self.children: Optional[List["QuadTreeNode"]] = None

    @classmethod
    def from_rect(
        cls,
        rect: Rect,
        capacity: int = CAPACITY,
        max_depth: int = MAX_DEPTH,
        depth: int = 0
    ) -> "QuadTreeNode":
        node = cls(rect.x, rect.y, rect.width, rect.height, capacity=capacity, max_depth=max_depth, depth=depth)
        node.rect = rect
        return node

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def contains(self, point: Point) -> bool:
        return self.rect.contains_xy(point.lat, point.lon)

    def insert(self, point: Point) -> bool:
        """
        Inserts a point into this subtree.

        Returns:
            False if the point lies outside this node's rectangle (it is dropped), True otherwise.
        """
        if not self.contains(point):
            return False

        if self.children is None:
            if (len(self.points) < self.capacity
                    or self.depth >= self.max_depth
                    or not self.rect.can_split()):
                self.points.append(point)
                return True
            self._split()

        for child in self.children:
            if child.insert(point):
                return True
        return False

    def _split(self):
        self.children = [
            QuadTreeNode.from_rect(
                self.rect.quadrant(i),
                capacity=self.capacity,
                max_depth=self.max_depth,
                depth=self.depth + 1
            )
            for i in range(4)
        ]
        logger.debug("Split node at depth %d (%s) holding %d points",
                     self.depth, self.rect, len(self.points))

        for point in self.points:
            for child in self.children:
                if child.insert(point):
                    break
        self.points = []

    def iter_points(self) -> Iterator[Point]:
        """Yields every point stored in this subtree: local points first, then children 0..3."""
        yield from self.points
        if self.children is not None:
            for child in self.children:
                yield from child.iter_points()

    def iter_nodes(self) -> Iterator["QuadTreeNode"]:
        yield self
        if self.children is not None:
            for child in self.children:
                yield from child.iter_nodes()

    def count(self) -> int:
        return sum(len(node.points) for node in self.iter_nodes())

    def height(self) -> int:
        return max(node.depth for node in self.iter_nodes()) - self.depth

    def __repr__(self):
        return (f"QuadTreeNode({self.rect.x}, {self.rect.y}, {self.rect.width}, {self.rect.height}, "
                f"depth={self.depth}, points={len(self.points)}, leaf={self.is_leaf})")


def build_index(
    domain: Rect,
    points: Iterable[Point],
    capacity: int = CAPACITY,
    max_depth: int = MAX_DEPTH
) -> QuadTreeNode:
    """
    Builds a quadtree over `domain` by inserting every point in order.
    Points outside the domain are left out of the index.
    """
    root = QuadTreeNode.from_rect(domain, capacity=capacity, max_depth=max_depth)
    indexed = 0
    dropped = 0
    for point in points:
        if root.insert(point):
            indexed += 1
        else:
            dropped += 1

    logger.info("Indexed %d points (%d outside domain), tree height %d",
                indexed, dropped, root.height())
    return root
