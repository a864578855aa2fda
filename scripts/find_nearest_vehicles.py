import argparse
import os
import sys

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from nearvehicle.config import FinderConfig, DEFAULT_QUERY_COORDINATES
from nearvehicle.core.logger import configure_logging
from nearvehicle.finder import NearestVehicleFinder, format_result, write_results_csv


def parse_coordinate(value: str):
    try:
        lat, lon = (float(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'lat,lon', got {value!r}")
    return lat, lon


def main():
    parser = argparse.ArgumentParser(description="Find the nearest vehicle position to a set of coordinates.")
    parser.add_argument(
        "--input",
        type=str,
        default=os.path.join(project_root, "data", "VehiclePositions.dat"),
        help="Path to the tab separated vehicle positions file."
    )
    parser.add_argument(
        "--query",
        type=parse_coordinate,
        action="append",
        help="Query coordinate as 'lat,lon'. Can be repeated. Defaults to the built-in list."
    )
    parser.add_argument("--sep", type=str, default="\t", help="Field delimiter of the input file.")
    parser.add_argument("--output", type=str, default=None, help="Optional CSV file for the results.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args()

    configure_logging(debug=args.debug)

    if not os.path.exists(args.input):
        print(f"Error: Input file {args.input} not found.")
        sys.exit(1)

    finder = NearestVehicleFinder(FinderConfig(sep=args.sep))
    finder.load_file(args.input)
    print(f"Loaded {len(finder.vehicles)} vehicle positions.")

    coordinates = args.query or DEFAULT_QUERY_COORDINATES
    results = finder.find_all(coordinates)

    for result in results:
        print(format_result(result))

    if args.output:
        write_results_csv(results, args.output)
        print(f"Results saved to {args.output}")


if __name__ == "__main__":
    main()
