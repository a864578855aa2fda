import random

import pytest

from nearvehicle.core.point import Point
from nearvehicle.index.nearest import find_nearest
from nearvehicle.index.quadtree import Rect, build_index
from benchmarks.oracles.brute_force import BruteForceOracle
from benchmarks.oracles.nearest_sklearn import NearestOracleSklearn


def make_point(i, lat, lon):
    return Point(vehicle_id=i, registration=f"REG{i}", lat=lat, lon=lon, recorded_time_utc=1_600_000_000 + i)


@pytest.fixture
def scattered_points():
    rng = random.Random(5)
    return [make_point(i, rng.uniform(30.0, 36.0), rng.uniform(-103.0, -94.0)) for i in range(500)]


@pytest.mark.parametrize("oracle_cls", [BruteForceOracle, NearestOracleSklearn])
def test_empty_oracle_returns_none(oracle_cls):
    oracle = oracle_cls().fit([])
    assert oracle.query(1.0, 2.0) is None


@pytest.mark.parametrize("oracle_cls", [BruteForceOracle, NearestOracleSklearn])
def test_oracle_finds_global_nearest(oracle_cls):
    points = [
        make_point(1, 4.9, 4.9),
        make_point(2, 1.0, 1.0),
        make_point(3, 1.0, 2.0),
        make_point(4, 2.0, 1.0),
        make_point(5, 9.0, 9.0),
    ]
    oracle = oracle_cls().fit(points)
    assert oracle.query(5.0, 5.0) == points[0]
    assert oracle.query(0.0, 0.0) == points[1]
    assert oracle.query(8.0, 8.5) == points[4]


def test_brute_force_ties_keep_first_point():
    left = make_point(1, 4.0, 5.0)
    right = make_point(2, 6.0, 5.0)
    assert BruteForceOracle().fit([left, right]).query(5.0, 5.0) is left
    assert BruteForceOracle().fit([right, left]).query(5.0, 5.0) is right


def test_oracles_agree(scattered_points):
    brute = BruteForceOracle().fit(scattered_points)
    sk = NearestOracleSklearn(algorithm='kd_tree').fit(scattered_points)

    rng = random.Random(9)
    for _ in range(100):
        lat, lon = rng.uniform(30.0, 36.0), rng.uniform(-103.0, -94.0)
        assert brute.query(lat, lon) == sk.query(lat, lon)


def test_quadtree_never_beats_oracle(scattered_points):
    root = build_index(Rect(-90.0, -180.0, 180.0, 360.0), scattered_points)
    brute = BruteForceOracle().fit(scattered_points)

    rng = random.Random(13)
    for _ in range(100):
        lat, lon = rng.uniform(30.0, 36.0), rng.uniform(-103.0, -94.0)
        found = find_nearest(root, lat, lon)
        exact = brute.query(lat, lon)
        if found is None:
            continue
        d_found = (found.lat - lat) ** 2 + (found.lon - lon) ** 2
        d_exact = (exact.lat - lat) ** 2 + (exact.lon - lon) ** 2
        assert d_found >= d_exact
