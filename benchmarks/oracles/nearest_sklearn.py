from typing import List, Optional
import numpy as np
from sklearn.neighbors import NearestNeighbors

from nearvehicle.core.point import Point

class NearestOracleSklearn:
    """
    Exact nearest-neighbour oracle using Scikit-Learn's NearestNeighbors
    with a plain euclidean metric on (lat, lon), matching the quadtree's distance.
    """

    def __init__(self, algorithm: str = 'brute'):
        """
        Args:
            algorithm: Neighbour search algorithm passed to NearestNeighbors ('brute', 'kd_tree', 'ball_tree').
        """
        self.algorithm = algorithm
        self.points: List[Point] = []
        self.model: Optional[NearestNeighbors] = None

    def fit(self, points: List[Point]) -> "NearestOracleSklearn":
        self.points = list(points)
        if not self.points:
            self.model = None
            return self

        coords = np.array([[p.lat, p.lon] for p in self.points], dtype=np.float64)
        self.model = NearestNeighbors(n_neighbors=1, algorithm=self.algorithm, metric='euclidean')
        self.model.fit(coords)
        return self

    def query(self, lat: float, lon: float) -> Optional[Point]:
        if self.model is None:
            return None

        _, indices = self.model.kneighbors(np.array([[lat, lon]], dtype=np.float64))
        return self.points[int(indices[0][0])]
