"""
Single-source shortest paths: Dijkstra.

Edge weights are non-negative integers; WeightedGraph rejects negative
weights at construction, which is the precondition Dijkstra relies on.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..diagnostics import assert_shortest_paths, is_debug_enabled
from ..logging import get_logger
from .core import WeightedGraph, check_vertex
from .utils import reconstruct_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class DistanceTable:
    """
    Result of a single-source shortest-path computation.

    Every vertex of the graph has an entry. A distance of ``None`` marks an
    unreachable vertex, which is distinct from distance 0 (the source).

    Attributes:
        source: Source vertex.
        distances: Mapping vertex -> shortest distance, or None if unreachable.
        parents: Mapping vertex -> predecessor on a shortest path (None for
            the source and for unreachable vertices).
    """

    source: int
    distances: Dict[int, Optional[int]]
    parents: Dict[int, Optional[int]]

    def __getitem__(self, vertex: int) -> Optional[int]:
        return self.distances[check_vertex(vertex, len(self.distances))]

    def __len__(self) -> int:
        return len(self.distances)

    def is_reachable(self, vertex: int) -> bool:
        return self[vertex] is not None

    def reachable(self) -> List[int]:
        """Return the reachable vertices in ascending index order."""
        return [v for v, d in self.distances.items() if d is not None]

    def path_to(self, target: int) -> Optional[List[int]]:
        """
        Return the vertices of a shortest path from source to target.

        Returns:
            List from source to target inclusive, or None if unreachable.
        """
        if not self.is_reachable(target):
            return None
        return reconstruct_path(self.parents, target)


def dijkstra(graph: WeightedGraph, source: int) -> DistanceTable:
    """
    Dijkstra's algorithm for single-source shortest paths.

    A binary heap holds (distance, vertex) entries. A vertex may be pushed
    several times; entries popped with a distance above the recorded best
    are stale and skipped.

    Args:
        graph: WeightedGraph with non-negative edge weights.
        source: Source vertex.

    Returns:
        DistanceTable covering every vertex of the graph.

    Raises:
        OutOfRangeVertex: If source is out of range.

    Complexity: O(E log E) using a binary heap with lazy deletion.

    Example:
        >>> G = WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])
        >>> dijkstra(G, 0).distances
        {0: 0, 1: 4, 2: 5}
    """
    source = check_vertex(source, graph.vertex_count)

    dist: Dict[int, Optional[int]] = {v: None for v in graph.vertices()}
    parent: Dict[int, Optional[int]] = {v: None for v in graph.vertices()}
    dist[source] = 0

    pq: List[Tuple[int, int]] = [(0, source)]
    settled = 0

    while pq:
        d, u = heapq.heappop(pq)

        if d > dist[u]:
            continue
        settled += 1

        for v, weight in graph.neighbors(u):
            new_dist = d + weight
            if dist[v] is None or new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, v))

    logger.debug("Dijkstra from %d settled %d vertices", source, settled)

    table = DistanceTable(source=source, distances=dist, parents=parent)

    if is_debug_enabled():
        assert_shortest_paths(graph, table)

    return table
