"""
Core graph data structure.

Provides the immutable WeightedGraph (the Graph Store) built once from an
edge list. Vertices are the integers ``0..vertex_count-1``; adjacency keeps
the input order of the edges, which the traversal tie-breaks depend on.
"""

from numbers import Integral
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from ..diagnostics import assert_symmetric, is_debug_enabled
from ..logging import get_logger
from .errors import InvalidWeight, OutOfRangeVertex

logger = get_logger(__name__)


class Edge(NamedTuple):
    """Undirected weighted edge between two vertex indices."""

    src: int
    dest: int
    weight: int


EdgeLike = Union[Edge, Sequence[int]]


def check_vertex(vertex, vertex_count: int) -> int:
    """
    Validate a vertex index and return it as a plain int.

    Raises:
        OutOfRangeVertex: If vertex is not an integer in [0, vertex_count).
    """
    if isinstance(vertex, bool) or not isinstance(vertex, Integral):
        raise OutOfRangeVertex(vertex, vertex_count)
    if not 0 <= vertex < vertex_count:
        raise OutOfRangeVertex(vertex, vertex_count)
    return int(vertex)


def check_weight(weight) -> int:
    """
    Validate an edge weight and return it as a plain int.

    Raises:
        InvalidWeight: If weight is not a non-negative integer (bools,
            floats and strings are rejected).
    """
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise InvalidWeight(weight, f"Edge weight must be an integer, got {weight!r}")
    if weight < 0:
        raise InvalidWeight(weight)
    return int(weight)


def invert_weights(
    edges: Iterable[EdgeLike], max_strength: Optional[int] = None
) -> List[Edge]:
    """
    Turn interaction strengths into distances.

    Each weight ``w`` becomes ``max_strength - w + 1``: the strongest
    interaction maps to distance 1 and ordering is reversed. The result is
    always at least 1, so it is valid input for Dijkstra.

    Args:
        edges: Iterable of (src, dest, strength) triples.
        max_strength: Upper bound on the strengths. Defaults to the largest
            strength present.

    Returns:
        List of Edge with inverted weights, in input order.

    Raises:
        InvalidWeight: If a strength or max_strength is not a non-negative
            integer, or a strength exceeds max_strength.

    Example:
        >>> invert_weights([(0, 1, 8), (0, 2, 21)], max_strength=21)
        [Edge(src=0, dest=1, weight=14), Edge(src=0, dest=2, weight=1)]
    """
    edge_list = [Edge(src, dest, check_weight(weight)) for src, dest, weight in edges]

    if max_strength is None:
        max_strength = max((e.weight for e in edge_list), default=0)
    else:
        max_strength = check_weight(max_strength)

    for edge in edge_list:
        if edge.weight > max_strength:
            raise InvalidWeight(
                edge.weight,
                f"Strength {edge.weight} on edge ({edge.src}, {edge.dest}) "
                f"exceeds max_strength {max_strength}",
            )

    return [Edge(e.src, e.dest, max_strength - e.weight + 1) for e in edge_list]


class WeightedGraph:
    """
    Undirected weighted multigraph with adjacency-list representation.

    The graph is read-only once constructed: there are no add/remove
    operations, adjacency sequences and the edge list are tuples, and labels
    are exposed through a read-only mapping.

    Attributes:
        vertex_count: Number of vertices, fixed at construction.

    Complexity:
        - construction: O(V + E)
        - neighbors, degree, label: O(1)
        - edges: O(1) (returns the stored tuple)

    Example:
        >>> G = WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])
        >>> G.neighbors(0)
        ((1, 4), (2, 10))
    """

    def __init__(
        self,
        vertex_count: int,
        edges: Iterable[EdgeLike] = (),
        labels: Optional[Mapping[int, str]] = None,
    ):
        """
        Build the graph from an edge list.

        Args:
            vertex_count: Number of vertices (non-negative).
            edges: Iterable of Edge or (src, dest, weight) triples.
            labels: Optional mapping vertex -> display name. Labels are a
                presentation concern and never affect the algorithms.

        Raises:
            ValueError: If vertex_count is negative or not an integer.
            OutOfRangeVertex: If an edge endpoint or label key is out of range.
            InvalidWeight: If an edge weight is not a non-negative integer.
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, Integral) or vertex_count < 0:
            raise ValueError(f"vertex_count must be a non-negative integer, got {vertex_count!r}")

        self._vertex_count = int(vertex_count)

        adjacency: List[List[Tuple[int, int]]] = [[] for _ in range(self._vertex_count)]
        edge_list: List[Edge] = []

        for raw in edges:
            src, dest, weight = raw
            src = check_vertex(src, self._vertex_count)
            dest = check_vertex(dest, self._vertex_count)
            weight = check_weight(weight)

            edge = Edge(src, dest, weight)
            edge_list.append(edge)
            adjacency[src].append((dest, weight))
            adjacency[dest].append((src, weight))

        self._adjacency: Tuple[Tuple[Tuple[int, int], ...], ...] = tuple(
            tuple(entries) for entries in adjacency
        )
        self._edges: Tuple[Edge, ...] = tuple(edge_list)

        label_map = {}
        for vertex, name in (labels or {}).items():
            label_map[check_vertex(vertex, self._vertex_count)] = name
        self._labels = MappingProxyType(label_map)

        logger.debug(
            "Built graph with %d vertices and %d edges", self._vertex_count, len(self._edges)
        )

        if is_debug_enabled():
            assert_symmetric(self)

    @classmethod
    def from_interactions(
        cls,
        vertex_count: int,
        interactions: Iterable[EdgeLike],
        labels: Optional[Mapping[int, str]] = None,
        max_strength: Optional[int] = None,
    ) -> "WeightedGraph":
        """
        Build a graph whose weights are distances derived from interaction strengths.

        Each strength ``s`` becomes ``max_strength - s + 1``, so the strongest
        interaction is the shortest distance. See invert_weights.

        Args:
            vertex_count: Number of vertices.
            interactions: Iterable of (src, dest, strength) triples.
            labels: Optional mapping vertex -> display name.
            max_strength: Inversion bound; defaults to the largest strength present.

        Returns:
            WeightedGraph over the inverted weights.
        """
        return cls(vertex_count, invert_weights(interactions, max_strength), labels)

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def labels(self) -> Mapping[int, str]:
        """Read-only mapping of vertex -> display name (may be partial or empty)."""
        return self._labels

    def vertices(self) -> range:
        """Return the vertex indices in ascending order."""
        return range(self._vertex_count)

    def neighbors(self, vertex: int) -> Tuple[Tuple[int, int], ...]:
        """
        Return (neighbor, weight) entries of a vertex in edge insertion order.

        Raises:
            OutOfRangeVertex: If vertex is out of range.
        """
        return self._adjacency[check_vertex(vertex, self._vertex_count)]

    def degree(self, vertex: int) -> int:
        """Return the number of adjacency entries of a vertex (parallel edges count)."""
        return len(self.neighbors(vertex))

    def edges(self) -> Tuple[Edge, ...]:
        """Return the edges exactly as supplied at construction, in input order."""
        return self._edges

    def label(self, vertex: int) -> str:
        """Return the display name of a vertex, or its index as a string."""
        vertex = check_vertex(vertex, self._vertex_count)
        return self._labels.get(vertex, str(vertex))

    def __len__(self) -> int:
        return self._vertex_count

    def __contains__(self, vertex) -> bool:
        return (
            isinstance(vertex, Integral)
            and not isinstance(vertex, bool)
            and 0 <= vertex < self._vertex_count
        )

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices())

    def __repr__(self) -> str:
        return f"WeightedGraph(vertex_count={self._vertex_count}, edges={len(self._edges)})"
