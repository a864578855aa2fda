import argparse
import os
import random
import sys
import matplotlib.pyplot as plt
import matplotlib.patches

# Add project root to sys.path to find src
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.join(current_dir, "..")
sys.path.append(os.path.join(project_root, "src"))

from nearvehicle.core.point import Point
from nearvehicle.index import Rect, build_index, find_nearest


def plot_quadtree(root, queries=None, output_img=None):
    fig = plt.figure(figsize=(10, 10))
    ax = fig.gca()
    rect = root.rect
    ax.set_xlim((rect.x, rect.x + rect.width))
    ax.set_ylim((rect.y, rect.y + rect.height))
    ax.set_xlabel("Latitude")
    ax.set_ylabel("Longitude")

    for node in root.iter_nodes():
        ax.add_patch(matplotlib.patches.Rectangle(
            (node.rect.x, node.rect.y), node.rect.width, node.rect.height,
            fill=False, edgecolor='black', linewidth=0.5))

    points = list(root.iter_points())
    ax.scatter([p.lat for p in points], [p.lon for p in points], s=4, c='blue')

    for lat, lon in queries or []:
        nearest = find_nearest(root, lat, lon)
        ax.plot(lat, lon, 'rx')
        if nearest is not None:
            ax.plot([lat, nearest.lat], [lon, nearest.lon], 'r-', linewidth=1)

    if output_img:
        plt.savefig(output_img, dpi=200, bbox_inches='tight')
        print(f"Visualization saved to {output_img}")
    else:
        plt.show()


def main():
    parser = argparse.ArgumentParser(description="Plot the cells of a quadtree over random points.")
    parser.add_argument("--points", type=int, default=400)
    parser.add_argument("--queries", type=int, default=10)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--output", type=str, default=None, help="Save the figure instead of showing it.")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    points = [
        Point(vehicle_id=i, registration=f"V{i}", lat=rng.uniform(0, 100), lon=rng.uniform(0, 100))
        for i in range(args.points)
    ]
    root = build_index(Rect(0.0, 0.0, 100.0, 100.0), points)

    queries = [(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(args.queries)]
    plot_quadtree(root, queries=queries, output_img=args.output)


if __name__ == "__main__":
    main()
