"""Performance benchmarks for socialgraph.

This package contains microbenchmarks for the graph engines: traversal,
shortest paths and minimum spanning trees on random graphs.
"""
