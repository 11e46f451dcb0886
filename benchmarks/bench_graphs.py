"""Benchmark the graph engines on random graphs."""

import time
from typing import Dict

import numpy as np

from socialgraph import WeightedGraph, bfs, dfs, dijkstra, kruskal_mst


def random_graph(
    vertex_count: int,
    edge_count: int,
    max_weight: int = 100,
    seed: int = 0,
) -> WeightedGraph:
    """Build a random multigraph with numpy-generated endpoints and weights.

    Args:
        vertex_count: Number of vertices.
        edge_count: Number of edges (self-loops are shifted to the next vertex).
        max_weight: Largest edge weight.
        seed: RNG seed.

    Returns:
        WeightedGraph instance.
    """
    rng = np.random.default_rng(seed)
    src = rng.integers(0, vertex_count, size=edge_count)
    dest = rng.integers(0, vertex_count, size=edge_count)
    dest = np.where(src == dest, (dest + 1) % vertex_count, dest)
    weight = rng.integers(0, max_weight + 1, size=edge_count)
    edges = zip(src.tolist(), dest.tolist(), weight.tolist())
    return WeightedGraph(vertex_count, edges)


def benchmark_engines(vertex_count: int, edge_count: int, repeats: int = 5) -> Dict[str, float]:
    """Benchmark DFS, BFS, Dijkstra and Kruskal.

    Args:
        vertex_count: Number of vertices.
        edge_count: Number of edges.
        repeats: Timed runs per engine; the best run is reported.

    Returns:
        Dictionary with best time in seconds per engine.
    """
    start = time.perf_counter()
    G = random_graph(vertex_count, edge_count)
    results = {"build_sec": time.perf_counter() - start}

    engines = {
        "dfs_sec": lambda: sum(1 for _ in dfs(G, 0)),
        "bfs_sec": lambda: sum(1 for _ in bfs(G, 0)),
        "dijkstra_sec": lambda: dijkstra(G, 0),
        "kruskal_sec": lambda: kruskal_mst(G),
    }

    for name, run in engines.items():
        timings = []
        for _ in range(repeats):
            start = time.perf_counter()
            run()
            timings.append(time.perf_counter() - start)
        results[name] = min(timings)

    return results


if __name__ == "__main__":
    print("Benchmarking graph engines...")

    for n, m in [(1_000, 5_000), (10_000, 50_000), (100_000, 500_000)]:
        results = benchmark_engines(n, m)
        print(f"V={n}, E={m}:")
        for name, seconds in results.items():
            print(f"  {name[:-4]:>9}: {seconds * 1e3:.2f} ms")
