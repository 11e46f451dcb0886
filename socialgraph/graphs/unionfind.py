"""
Disjoint-set forest (union-find) over the integers 0..n-1.

Has no package imports; shared by the MST engine and the diagnostics.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21.3 (disjoint-set forests).
"""

from typing import List


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Elements are the integers 0..n-1. Used by Kruskal's algorithm for cycle
    detection.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements.
        """
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self.component_count = n

    def find(self, x: int) -> int:
        """
        Find root of x with path compression.

        Args:
            x: Element to find root for.

        Returns:
            Root element.
        """
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> bool:
        """
        Union sets containing x and y using union by rank.

        Args:
            x: First element.
            y: Second element.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self.component_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
