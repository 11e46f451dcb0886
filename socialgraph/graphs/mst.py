"""
Minimum spanning tree: Kruskal with union-find.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Kruskal).
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..diagnostics import assert_forest, is_debug_enabled
from ..logging import get_logger
from .core import Edge, WeightedGraph
from .unionfind import UnionFind

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpanningTree:
    """
    Result of a minimum spanning tree computation.

    On a disconnected graph this is a minimum spanning forest.

    Attributes:
        edges: Accepted edges, in the order Kruskal accepted them.
        total_weight: Sum of the accepted edge weights.
    """

    edges: Tuple[Edge, ...]
    total_weight: int

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)


def kruskal_mst(graph: WeightedGraph) -> SpanningTree:
    """
    Kruskal's algorithm for minimum spanning tree.

    Edges are sorted by weight with a stable sort, so edges of equal weight
    are considered in input order. Each edge joining two different sets is
    accepted; edges that would close a cycle are discarded.

    Args:
        graph: Undirected WeightedGraph.

    Returns:
        SpanningTree with edges in acceptance order. For disconnected graphs
        it has vertex_count - components edges.

    Complexity: O(E log E) for sorting, near-linear for union-find.

    Example:
        >>> G = WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])
        >>> tree = kruskal_mst(G)
        >>> tree.edges
        (Edge(src=1, dest=2, weight=1), Edge(src=0, dest=1, weight=4))
        >>> tree.total_weight
        5
    """
    edge_list = sorted(graph.edges(), key=lambda e: e.weight)

    uf = UnionFind(graph.vertex_count)
    accepted: List[Edge] = []
    total_weight = 0

    for edge in edge_list:
        if uf.union(edge.src, edge.dest):
            accepted.append(edge)
            total_weight += edge.weight

    if uf.component_count > 1:
        logger.debug(
            "Graph has %d components; returning a spanning forest of %d edges",
            uf.component_count,
            len(accepted),
        )

    if is_debug_enabled():
        assert_forest(graph.vertex_count, accepted)

    return SpanningTree(edges=tuple(accepted), total_weight=total_weight)
