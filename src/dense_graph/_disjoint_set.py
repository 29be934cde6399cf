from __future__ import annotations


class DisjointSet:
    """Union-find over the integers ``0 .. n - 1``.

    Uses union by rank and path compression, so ``find`` and ``unite`` run in
    amortized near-constant time. The number of live sets and the size of
    every set are tracked as sets are merged.

    Parameters
    ----------
    n : int
        Number of elements. Every element starts in a singleton set.
    """

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._sets = n

    def __len__(self) -> int:
        """Return the number of elements."""
        return len(self._parent)

    def __repr__(self) -> str:
        return f"DisjointSet(n={len(self)}, sets={self._sets})"

    def find(self, x: int) -> int:
        """Find the representative of the set containing ``x``.

        Every element on the path from ``x`` to the root is pointed directly
        at the root.
        """
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]

        while parent[x] != root:
            parent[x], x = root, parent[x]

        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets containing ``x`` and ``y``.

        Returns
        -------
        bool
            True if two distinct sets were merged, False if ``x`` and ``y``
            already were in the same set.
        """
        x = self.find(x)
        y = self.find(y)
        if x == y:
            return False

        # attach the lower ranked tree under the higher ranked one
        if self._rank[x] < self._rank[y]:
            x, y = y, x
        elif self._rank[x] == self._rank[y]:
            self._rank[x] += 1
        self._parent[y] = x
        self._size[x] += self._size[y]
        self._sets -= 1
        return True

    def same_set(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def sets(self) -> int:
        """Return the number of disjoint sets."""
        return self._sets

    def cardinality(self, x: int) -> int:
        """Return the number of elements in the set containing ``x``."""
        return self._size[self.find(x)]
