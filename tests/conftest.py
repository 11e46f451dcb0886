"""Pytest configuration and shared fixtures for socialgraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized property tests
- A random graph factory built on that RNG
- The small triangle graph and the sample network used across test modules
"""

import os
from typing import Callable

import numpy as np
import pytest

from socialgraph import WeightedGraph, load_sample_network


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., WeightedGraph]:
    """Factory building random multigraphs without self-loops.

    Returns:
        Callable (vertex_count, edge_count, max_weight=20) -> WeightedGraph.
    """

    def build(vertex_count: int, edge_count: int, max_weight: int = 20) -> WeightedGraph:
        edges = []
        while len(edges) < edge_count:
            u, v = (int(x) for x in rng.integers(0, vertex_count, size=2))
            if u == v:
                continue
            edges.append((u, v, int(rng.integers(0, max_weight + 1))))
        return WeightedGraph(vertex_count, edges)

    return build


@pytest.fixture
def triangle() -> WeightedGraph:
    """Three vertices, edges (0,1,4), (1,2,1), (0,2,10)."""
    return WeightedGraph(3, [(0, 1, 4), (1, 2, 1), (0, 2, 10)])


@pytest.fixture
def sample_network() -> WeightedGraph:
    """Built-in eleven-user network with inverted (distance) weights."""
    return load_sample_network()
