"""Invariant checks for graphs and engine results.

These helpers only use the read-only graph API (``vertices``,
``neighbors``, ``edges``), so they work on any object exposing it.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence, Tuple

from ..graphs.unionfind import UnionFind


def is_symmetric(graph) -> bool:
    """
    Return True if every adjacency entry has its mirror entry.

    For every ``(v, w)`` in ``neighbors(u)`` there must be a matching
    ``(u, w)`` in ``neighbors(v)``, with multiplicity (parallel edges count
    separately).
    """
    outgoing: Counter = Counter()
    for u in graph.vertices():
        for v, weight in graph.neighbors(u):
            outgoing[(u, v, weight)] += 1

    for (u, v, weight), count in outgoing.items():
        if outgoing[(v, u, weight)] != count:
            return False
    return True


def assert_symmetric(graph) -> None:
    """
    Raise if the undirected symmetry invariant does not hold.

    Raises
    ------
    ValueError
        If some adjacency entry has no mirror entry.
    """
    if not is_symmetric(graph):
        raise ValueError("Adjacency is not symmetric; graph is not undirected.")


def assert_shortest_paths(graph, table) -> None:
    """
    Check a Dijkstra distance table against every edge of the graph.

    The source must be at distance 0, and no edge may be relaxable:
    ``dist[v] <= dist[u] + w`` in both directions. A vertex adjacent to a
    reachable vertex must itself be reachable.

    Raises
    ------
    ValueError
        If the table violates shortest-path optimality.
    """
    if table[table.source] != 0:
        raise ValueError(
            f"Source {table.source} has distance {table[table.source]}, expected 0."
        )

    for u, v, weight in graph.edges():
        for a, b in ((u, v), (v, u)):
            da = table[a]
            if da is None:
                continue
            db = table[b]
            if db is None or db > da + weight:
                raise ValueError(
                    f"Edge ({a}, {b}, {weight}) can still be relaxed: "
                    f"dist[{a}]={da}, dist[{b}]={db}."
                )


def _first_cycle_edge(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> Tuple[int, ...] | None:
    uf = UnionFind(vertex_count)
    for edge in edges:
        if not uf.union(edge[0], edge[1]):
            return tuple(edge)
    return None


def is_forest(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return True if the edges form an acyclic subgraph over ``vertex_count`` vertices."""
    return _first_cycle_edge(vertex_count, edges) is None


def assert_forest(vertex_count: int, edges: Iterable[Sequence[int]]) -> None:
    """
    Raise if the edges contain a cycle.

    Raises
    ------
    ValueError
        If some edge joins two vertices that are already connected.
    """
    cycle_edge = _first_cycle_edge(vertex_count, edges)
    if cycle_edge is not None:
        raise ValueError(f"Edge {cycle_edge} closes a cycle.")


def count_components(graph) -> int:
    """Return the number of connected components, isolated vertices included."""
    uf = UnionFind(len(graph.vertices()))
    for u, v, _ in graph.edges():
        uf.union(u, v)
    return uf.component_count
