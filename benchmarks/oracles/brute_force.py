from typing import List, Optional
import numpy as np

from nearvehicle.core.point import Point

class BruteForceOracle:
    """
    Exact nearest-neighbour oracle.
    Scans every point for each query, so it is only meant as ground truth for
    measuring the quadtree search. Ties resolve to the earliest point in load order.
    """

    def __init__(self):
        self.points: List[Point] = []
        self.coords = np.empty((0, 2), dtype=np.float64)

    def fit(self, points: List[Point]) -> "BruteForceOracle":
        self.points = list(points)
        self.coords = np.array([[p.lat, p.lon] for p in self.points], dtype=np.float64).reshape(-1, 2)
        return self

    def query(self, lat: float, lon: float) -> Optional[Point]:
        if not self.points:
            return None

        deltas = self.coords - np.array([lat, lon], dtype=np.float64)
        distances = np.sqrt(np.einsum('ij,ij->i', deltas, deltas))
        # argmin returns the first occurrence of the minimum
        return self.points[int(np.argmin(distances))]
