from typing import Dict, List, Optional, Sequence, Tuple
from nearvehicle.core.point import Point
from nearvehicle.index.nearest import calculate_distance

def calculate_distance_excess(query: Tuple[float, float], found: Optional[Point], exact: Optional[Point]) -> float:
    """
    How much farther the indexed answer is from the query than the exact nearest point.

    Args:
        query: The (lat, lon) query coordinate.
        found: The point returned by the index search (may be None).
        exact: The true nearest point (may be None if there are no points).

    Returns:
        0.0 when both answers are equally close (or both are None), the extra distance otherwise.
        Returns inf when the index found nothing but an exact answer exists.
    """
    if exact is None:
        return 0.0
    if found is None:
        return float('inf')

    x, y = query
    d_found = calculate_distance(x, y, found.lat, found.lon)
    d_exact = calculate_distance(x, y, exact.lat, exact.lon)
    return max(0.0, d_found - d_exact)

def calculate_accuracy_stats(
    queries: Sequence[Tuple[float, float]],
    found: Sequence[Optional[Point]],
    exact: Sequence[Optional[Point]]
) -> Dict[str, float | int | List[float]]:
    """
    Compares index answers against exact nearest-neighbour answers.

    Metrics:
    - hit_rate: Share of queries whose index answer is as close as the exact answer.
    - average_excess: Mean extra distance over queries where the index found a point.
    - max_excess: Largest extra distance over those queries.
    - misses: Queries where the index found nothing although points exist.

    Returns:
        Dictionary containing 'hit_rate', 'average_excess', 'max_excess', 'misses' and 'excess'.
    """
    if not (len(queries) == len(found) == len(exact)):
        raise ValueError("queries, found and exact must have the same length")

    if not queries:
        return {'hit_rate': 1.0, 'average_excess': 0.0, 'max_excess': 0.0, 'misses': 0, 'excess': []}

    hits = 0
    misses = 0
    excess = []

    for query, f, e in zip(queries, found, exact):
        delta = calculate_distance_excess(query, f, e)
        if delta == float('inf'):
            misses += 1
            continue
        if delta == 0.0:
            hits += 1
        excess.append(delta)

    return {
        'hit_rate': hits / len(queries),
        'average_excess': sum(excess) / len(excess) if excess else 0.0,
        'max_excess': max(excess) if excess else 0.0,
        'misses': misses,
        'excess': excess
    }
