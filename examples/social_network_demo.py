"""Example: Exploring a Social Network with socialgraph

Builds the sample network (friendship distances derived from interaction
strengths) and prints traversals, shortest distances and the minimum
spanning tree using the user names.
"""

import numpy as np

from socialgraph import (
    adjacency_matrix,
    bfs,
    dfs,
    dijkstra,
    kruskal_mst,
    load_sample_network,
)


def header(title):
    print("=" * 60)
    print(title)
    print("=" * 60)


def show_connections(G):
    """Print every user's friends with friendship distances."""
    header("Social Network Connections")
    for u in G.vertices():
        print(f"{G.label(u)} connects with:")
        for v, weight in G.neighbors(u):
            print(f"  -> {G.label(v)} (friendship distance: {weight})")
    print()

    W = adjacency_matrix(G)
    print("Friendship distance matrix (0 = not connected):")
    print(np.array2string(W, max_line_width=120))
    print()


def show_traversals(G, start):
    header(f"Friendship Exploration (DFS) from {G.label(start)}")
    print(" -> ".join(G.label(v) for v in dfs(G, start)))
    print()

    header(f"Layer-by-Layer Inspection (BFS) from {G.label(start)}")
    print(" -> ".join(G.label(v) for v in bfs(G, start)))
    print()


def show_shortest_distances(G, source):
    header(f"Shortest Friendship Distances from {G.label(source)}")
    table = dijkstra(G, source)
    for v in G.vertices():
        if table.is_reachable(v):
            route = " -> ".join(G.label(p) for p in table.path_to(v))
            print(f"{G.label(v):>8}: {table[v]:>3}  via {route}")
        else:
            print(f"{G.label(v):>8}: no connection")
    print()


def show_spanning_tree(G):
    header("Strongest Friendship Paths (Minimum Spanning Tree)")
    tree = kruskal_mst(G)
    for edge in tree:
        print(f"{G.label(edge.src)} - {G.label(edge.dest)}: {edge.weight}")
    print(f"Total friendship distance: {tree.total_weight}")
    print()


def main():
    G = load_sample_network()
    show_connections(G)
    show_traversals(G, 0)
    show_shortest_distances(G, 0)
    show_spanning_tree(G)


if __name__ == "__main__":
    main()
