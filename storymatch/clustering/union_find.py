"""Disjoint-set forest over item identifiers."""

from typing import Dict, List


class UnionFind:
    """Union-find with path compression and union by rank."""

    def __init__(self) -> None:
        self._parent: Dict[str, str] = {}
        self._rank: Dict[str, int] = {}

    def make_set(self, x: str) -> None:
        """Register x as its own singleton set if unseen."""
        if x not in self._parent:
            self._parent[x] = x
            self._rank[x] = 0

    def find(self, x: str) -> str:
        """Return the root of x's set, compressing the path on the way."""
        self.make_set(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]

        while self._parent[x] != root:
            next_x = self._parent[x]
            self._parent[x] = root
            x = next_x

        return root

    def union(self, x: str, y: str) -> None:
        """Merge the sets containing x and y."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return

        rank_x = self._rank[root_x]
        rank_y = self._rank[root_y]
        if rank_x < rank_y:
            self._parent[root_x] = root_y
        elif rank_x > rank_y:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] = rank_x + 1

    def groups(self) -> List[List[str]]:
        """Members of every set, in first-registration order."""
        by_root: Dict[str, List[str]] = {}
        for item in list(self._parent):
            by_root.setdefault(self.find(item), []).append(item)
        return list(by_root.values())

    def __len__(self) -> int:
        return len(self._parent)
