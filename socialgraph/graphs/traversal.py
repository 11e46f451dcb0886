"""
Graph traversal algorithms: BFS and DFS.

Both traversals are iterative and return lazy generators of vertex indices
in visitation order. Each call validates its start vertex immediately and
owns its own visited-set, so calls are independent and restartable.
Neighbors are considered in adjacency (edge insertion) order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Iterator, List

from ..logging import get_logger
from .core import WeightedGraph, check_vertex

logger = get_logger(__name__)


def dfs(graph: WeightedGraph, start: int) -> Iterator[int]:
    """
    Depth-first search (iterative, explicit stack).

    From the current vertex, the unvisited neighbors are collected in
    adjacency order. Traversal continues directly to the last of them and
    the others are pushed onto the stack in their original order. When no
    unvisited neighbor remains, the next vertex is popped from the stack;
    a popped vertex that was visited in the meantime is not yielded again,
    but its adjacency is scanned once more.

    Args:
        graph: Graph to traverse.
        start: Start vertex.

    Returns:
        Iterator over vertices in visitation order.

    Raises:
        OutOfRangeVertex: If start is out of range (raised at call time).

    Complexity: O(sum of deg(v)^2) time in the worst case, since a vertex
    is rescanned each time it becomes current again; dense graphs approach
    O(V * E). The stack is bounded by the same count. No recursion.

    Example:
        >>> G = WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])
        >>> list(dfs(G, 0))
        [0, 2, 1]
    """
    start = check_vertex(start, graph.vertex_count)
    logger.debug("DFS from vertex %d", start)
    return _dfs(graph, start)


def _dfs(graph: WeightedGraph, start: int) -> Iterator[int]:
    visited = [False] * graph.vertex_count
    stack: List[int] = []
    current = start

    while True:
        if not visited[current]:
            visited[current] = True
            yield current

        unvisited = [v for v, _ in graph.neighbors(current) if not visited[v]]

        if unvisited:
            # Continue to the last unvisited neighbor, defer the rest
            stack.extend(unvisited[:-1])
            current = unvisited[-1]
        elif stack:
            current = stack.pop()
        else:
            return


def bfs(graph: WeightedGraph, start: int) -> Iterator[int]:
    """
    Breadth-first search (level order).

    Vertices are marked visited when enqueued, so each is queued at most once.

    Args:
        graph: Graph to traverse.
        start: Start vertex.

    Returns:
        Iterator over vertices in visitation order.

    Raises:
        OutOfRangeVertex: If start is out of range (raised at call time).

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])
        >>> list(bfs(G, 0))
        [0, 1, 2]
    """
    start = check_vertex(start, graph.vertex_count)
    logger.debug("BFS from vertex %d", start)
    return _bfs(graph, start)


def _bfs(graph: WeightedGraph, start: int) -> Iterator[int]:
    visited = [False] * graph.vertex_count
    visited[start] = True
    queue = deque([start])

    while queue:
        u = queue.popleft()
        yield u

        for v, _ in graph.neighbors(u):
            if not visited[v]:
                visited[v] = True
                queue.append(v)


def bfs_levels(graph: WeightedGraph, start: int) -> Dict[int, int]:
    """
    Hop count from start to every reachable vertex.

    Unreachable vertices are absent from the result.

    Raises:
        OutOfRangeVertex: If start is out of range.

    Example:
        >>> G = WeightedGraph(3, [(0, 1, 1), (1, 2, 1)])
        >>> bfs_levels(G, 0)
        {0: 0, 1: 1, 2: 2}
    """
    start = check_vertex(start, graph.vertex_count)
    level: Dict[int, int] = {start: 0}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v, _ in graph.neighbors(u):
            if v not in level:
                level[v] = level[u] + 1
                queue.append(v)

    return level
