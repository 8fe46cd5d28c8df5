"""All-pairs shortest paths with the Floyd–Warshall algorithm."""

from __future__ import annotations

from typing import Sequence

INF = 99999
"""Distance used to mark a missing edge."""

SAMPLE_GRAPH = (
    (0, 4, 11),
    (6, 0, 2),
    (3, INF, 0),
)


def floyd_warshall(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the matrix of shortest distances for an adjacency matrix.

    Entries equal to ``INF`` mean there is no edge; the input is not modified.
    """
    dist = [list(row) for row in graph]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("graph must be a square matrix")

    for k in range(size):
        via = dist[k]
        for row in dist:
            through = row[k]
            if through == INF:
                continue
            for j, cost in enumerate(via):
                if cost != INF and through + cost < row[j]:
                    row[j] = through + cost
    return dist


def format_distances(distances: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix as a table with seven-character columns."""
    lines = ["Shortest distances between every pair of vertices:"]
    for row in distances:
        lines.append(
            "".join(f"{'INF':>7}" if value == INF else f"{value:>7}" for value in row)
        )
    return "\n".join(lines) + "\n"