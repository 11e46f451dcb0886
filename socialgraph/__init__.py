"""socialgraph - weighted social network graphs with classical graph algorithms."""

__version__ = "0.1.0"

# Graph engines
from .graphs import (
    DistanceTable,
    Edge,
    GraphError,
    InvalidWeight,
    OutOfRangeVertex,
    SpanningTree,
    UnionFind,
    WeightedGraph,
    adjacency_matrix,
    bfs,
    bfs_levels,
    check_vertex,
    check_weight,
    dfs,
    dijkstra,
    invert_weights,
    kruskal_mst,
    reconstruct_path,
)

# Sample data
from .datasets import (
    MAX_INTERACTION_STRENGTH,
    SAMPLE_INTERACTIONS,
    SAMPLE_USERS,
    load_sample_network,
)

# Diagnostics
from .diagnostics import (
    assert_forest,
    assert_shortest_paths,
    assert_symmetric,
    count_components,
    debug_context,
    is_debug_enabled,
    is_forest,
    is_symmetric,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph store
    "Edge",
    "WeightedGraph",
    "check_vertex",
    "check_weight",
    # Errors
    "GraphError",
    "OutOfRangeVertex",
    "InvalidWeight",
    # Traversal
    "dfs",
    "bfs",
    "bfs_levels",
    # Shortest paths
    "DistanceTable",
    "dijkstra",
    # Spanning trees
    "UnionFind",
    "SpanningTree",
    "kruskal_mst",
    # Utilities
    "invert_weights",
    "reconstruct_path",
    "adjacency_matrix",
    # Sample data
    "SAMPLE_USERS",
    "SAMPLE_INTERACTIONS",
    "MAX_INTERACTION_STRENGTH",
    "load_sample_network",
    # Diagnostics
    "is_symmetric",
    "assert_symmetric",
    "assert_shortest_paths",
    "is_forest",
    "assert_forest",
    "count_components",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
