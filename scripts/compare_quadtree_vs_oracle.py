import argparse
import os
import random
import sys
import time

# Add project root to sys.path to find benchmarks and src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(project_root)
sys.path.append(os.path.join(project_root, "src"))

from nearvehicle.config import FinderConfig, DEFAULT_QUERY_COORDINATES
from nearvehicle.core.logger import configure_logging
from nearvehicle.core.point import Point
from nearvehicle.finder import NearestVehicleFinder
from nearvehicle.metrics import calculate_accuracy_stats
from benchmarks.oracles.brute_force import BruteForceOracle
from benchmarks.oracles.nearest_sklearn import NearestOracleSklearn


def random_points(n: int, seed: int):
    """Uniform positions over a box around the default query area."""
    rng = random.Random(seed)
    return [
        Point(
            vehicle_id=i + 1,
            registration=f"SIM{i + 1:06d}",
            lat=rng.uniform(31.0, 36.0),
            lon=rng.uniform(-103.0, -94.0),
            recorded_time_utc=1_600_000_000 + i
        )
        for i in range(n)
    ]


def timed(label, fn, *args):
    start = time.perf_counter()
    result = fn(*args)
    elapsed = time.perf_counter() - start
    print(f" - {label}: {elapsed * 1000:.2f} ms")
    return result


def main():
    parser = argparse.ArgumentParser(description="Compare quadtree nearest search against exact oracles.")
    parser.add_argument("--input", type=str, default=None, help="Vehicle positions file. Random points if omitted.")
    parser.add_argument("--points", type=int, default=100_000, help="Number of random points when no input is given.")
    parser.add_argument("--queries", type=int, default=1000, help="Number of random queries in addition to the defaults.")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    configure_logging()
    finder = NearestVehicleFinder(FinderConfig())

    print("Building indexes...")
    if args.input:
        if not os.path.exists(args.input):
            print(f"Error: Input file {args.input} not found.")
            sys.exit(1)
        timed("quadtree", finder.load_file, args.input)
    else:
        timed("quadtree", finder.load, random_points(args.points, args.seed))

    brute = timed("brute force", BruteForceOracle().fit, finder.vehicles)
    sklearn_oracle = timed("sklearn", NearestOracleSklearn(algorithm='kd_tree').fit, finder.vehicles)

    rng = random.Random(args.seed + 1)
    queries = list(DEFAULT_QUERY_COORDINATES)
    queries += [(rng.uniform(31.0, 36.0), rng.uniform(-103.0, -94.0)) for _ in range(args.queries)]

    print(f"Answering {len(queries)} queries...")
    found = timed("quadtree", lambda: [finder.find(lat, lon) for lat, lon in queries])
    exact = timed("brute force", lambda: [brute.query(lat, lon) for lat, lon in queries])
    timed("sklearn", lambda: [sklearn_oracle.query(lat, lon) for lat, lon in queries])

    stats = calculate_accuracy_stats(queries, found, exact)
    print("Accuracy of single-path descent:")
    print(f" - Hit rate: {stats['hit_rate']:.3f}")
    print(f" - Average excess distance: {stats['average_excess']:.6f}")
    print(f" - Max excess distance: {stats['max_excess']:.6f}")
    print(f" - Misses (no result): {stats['misses']}")


if __name__ == "__main__":
    main()
