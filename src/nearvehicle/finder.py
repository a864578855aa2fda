import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from nearvehicle.config import FinderConfig
from nearvehicle.core.point import Point
from nearvehicle.core.stream import VehiclePositionStream
from nearvehicle.index.nearest import find_nearest_with_distance
from nearvehicle.index.quadtree import QuadTreeNode, build_index


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearestResult:
    query_lat: float
    query_lon: float
    vehicle: Optional[Point] = None
    distance: Optional[float] = None


class NearestVehicleFinder:
    """
    Loads vehicle positions into a quadtree and answers nearest-vehicle queries against it.
    All positions are loaded first; the index is not modified while queries run.
    """

    def __init__(self, config: Optional[FinderConfig] = None):
        self.config = config or FinderConfig()
        self.vehicles: List[Point] = []
        self.root: Optional[QuadTreeNode] = None

    def load(self, points: Iterable[Point]) -> QuadTreeNode:
        """
        Builds the index from `points`, replacing any previously loaded data.
        The loaded records are also kept, in order, in `self.vehicles`.
        """
        self.vehicles = list(points)
        self.root = build_index(
            self.config.domain,
            self.vehicles,
            capacity=self.config.capacity,
            max_depth=self.config.max_depth
        )
        return self.root

    def load_file(self, filepath: str | Path) -> QuadTreeNode:
        stream = VehiclePositionStream(filepath, sep=self.config.sep)
        logger.info("Loading vehicle positions from %s", stream.filepath)
        return self.load(stream.stream())

    def find(self, lat: float, lon: float) -> Optional[Point]:
        return self.query(lat, lon).vehicle

    def query(self, lat: float, lon: float) -> NearestResult:
        if self.root is None:
            raise RuntimeError("No vehicle positions loaded; call load() before querying")

        vehicle, distance = find_nearest_with_distance(self.root, lat, lon)
        return NearestResult(
            query_lat=lat,
            query_lon=lon,
            vehicle=vehicle,
            distance=distance if vehicle is not None else None
        )

    def find_all(self, coordinates: Iterable[Tuple[float, float]]) -> List[NearestResult]:
        return [self.query(lat, lon) for lat, lon in coordinates]


def format_result(result: NearestResult) -> str:
    header = f"Nearest vehicle to ({result.query_lat}, {result.query_lon}):"
    vehicle = result.vehicle
    if vehicle is None:
        return f"{header}\nNo vehicle found\n"

    return (
        f"{header}\n"
        f"Vehicle ID: {vehicle.vehicle_id}\n"
        f"Vehicle Registration: {vehicle.registration}\n"
        f"Latitude: {vehicle.lat}\n"
        f"Longitude: {vehicle.lon}\n"
    )


def write_results_csv(results: Iterable[NearestResult], filepath: str | Path) -> Path:
    """
    Writes one row per query. Queries without a result get empty vehicle columns.
    """
    path = Path(filepath)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(["query_lat", "query_lon", "vehicle_id", "registration", "lat", "lon", "distance"])
        for result in results:
            vehicle = result.vehicle
            if vehicle is None:
                writer.writerow([result.query_lat, result.query_lon, "", "", "", "", ""])
                continue
            writer.writerow([
                result.query_lat, result.query_lon,
                vehicle.vehicle_id, vehicle.registration,
                vehicle.lat, vehicle.lon, result.distance
            ])
    return path
