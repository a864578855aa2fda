import csv
import os
import tempfile
import unittest

import pytest

from nearvehicle.config import DEFAULT_DOMAIN, DEFAULT_QUERY_COORDINATES, FinderConfig
from nearvehicle.core.point import Point
from nearvehicle.finder import NearestResult, NearestVehicleFinder, format_result, write_results_csv
from nearvehicle.index.quadtree import Rect


def make_point(i, lat, lon):
    return Point(vehicle_id=i, registration=f"REG{i}", lat=lat, lon=lon, recorded_time_utc=1_600_000_000 + i)


class TestFinderConfig(unittest.TestCase):
    def test_defaults(self):
        config = FinderConfig()
        self.assertEqual(config.domain, DEFAULT_DOMAIN)
        self.assertEqual(config.domain, Rect(-90.0, -180.0, 180.0, 360.0))
        self.assertEqual(config.capacity, 4)
        self.assertEqual(config.sep, '\t')

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            FinderConfig(capacity=0)
        with self.assertRaises(ValueError):
            FinderConfig(max_depth=-1)
        with self.assertRaises(ValueError):
            FinderConfig(max_depth=65)
        with self.assertRaises(ValueError):
            FinderConfig(domain=Rect(0.0, 0.0, 0.0, 10.0))


class TestNearestVehicleFinder(unittest.TestCase):
    def setUp(self):
        self.points = [
            make_point(1, 34.5, -102.1),
            make_point(2, 32.3, -99.1),
            make_point(3, 33.2, -100.2),
            make_point(4, 35.2, -95.3),
            make_point(5, 31.9, -97.8),
            make_point(6, 200.0, 0.0),  # outside the domain
        ]
        self.finder = NearestVehicleFinder()

    def test_query_before_load(self):
        with self.assertRaises(RuntimeError):
            self.finder.find(34.5, -102.1)

    def test_load_and_find(self):
        root = self.finder.load(self.points)

        self.assertEqual(len(self.finder.vehicles), 6)
        self.assertEqual(root.count(), 5)
        self.assertEqual(self.finder.find(34.544909, -102.10084).vehicle_id, 1)
        self.assertEqual(self.finder.find(35.195739, -95.348899).vehicle_id, 4)

    def test_find_all_default_coordinates(self):
        self.finder.load(self.points)
        results = self.finder.find_all(DEFAULT_QUERY_COORDINATES)

        self.assertEqual(len(results), len(DEFAULT_QUERY_COORDINATES))
        for result, (lat, lon) in zip(results, DEFAULT_QUERY_COORDINATES):
            self.assertEqual((result.query_lat, result.query_lon), (lat, lon))
            self.assertIsNotNone(result.vehicle)
            self.assertGreaterEqual(result.distance, 0.0)

    def test_empty_load(self):
        self.finder.load([])
        result = self.finder.query(1.0, 1.0)
        self.assertIsNone(result.vehicle)
        self.assertIsNone(result.distance)

    def test_load_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "VehiclePositions.dat")
            with open(path, "w") as f:
                for p in self.points:
                    f.write(f"{p.vehicle_id}\t{p.registration}\t{p.lat}\t{p.lon}\t{p.recorded_time_utc}\n")
            root = self.finder.load_file(path)

        self.assertEqual(self.finder.vehicles, self.points)
        self.assertEqual(root.count(), 5)


def test_format_result():
    vehicle = make_point(42, 34.5, -102.1)
    text = format_result(NearestResult(query_lat=34.544909, query_lon=-102.10084, vehicle=vehicle, distance=0.1))
    assert text.splitlines() == [
        "Nearest vehicle to (34.544909, -102.10084):",
        "Vehicle ID: 42",
        "Vehicle Registration: REG42",
        "Latitude: 34.5",
        "Longitude: -102.1",
    ]


def test_format_missing_result():
    text = format_result(NearestResult(query_lat=1.0, query_lon=2.0))
    assert text.splitlines() == ["Nearest vehicle to (1.0, 2.0):", "No vehicle found"]


def test_write_results_csv(tmp_path):
    finder = NearestVehicleFinder(FinderConfig(domain=Rect(0.0, 0.0, 10.0, 10.0)))
    finder.load([make_point(1, 1.0, 1.0), make_point(2, 8.0, 8.0)])
    results = finder.find_all([(0.0, 0.0), (8.0, 7.0)])
    results.append(NearestResult(query_lat=50.0, query_lon=50.0))

    out = write_results_csv(results, tmp_path / "results.csv")
    with open(out, newline="") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 3
    assert rows[0]["vehicle_id"] == "1"
    assert float(rows[0]["distance"]) == pytest.approx(2 ** 0.5)
    assert rows[1]["registration"] == "REG2"
    assert float(rows[1]["distance"]) == pytest.approx(1.0)
    assert rows[2]["vehicle_id"] == ""
