# src/stickymaze/unionfind.py
# Fixed-size disjoint-set forest over cell ids.

from typing import List

class DisjointSet:
    """
    Union-find with union by rank and full path compression.
    Nodes are the ints 0..size-1; there is no removal.
    """
    def __init__(self, size: int):
        if size < 0:
            raise ValueError("size must be >= 0")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self.set_count = size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, node: int) -> int:
        parent = self.parent
        root = node
        while parent[root] != root:
            root = parent[root]
        # Second pass: point every node on the chain straight at the root.
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding a and b. Returns False if already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        self.set_count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
