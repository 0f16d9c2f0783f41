# weighted quick union-find with path compression
class WeightedQuickUnionUF:
    """
    Disjoint-set forest over the elements 0 through n-1.

    Trees are linked by size (the smaller root goes under the larger one)
    and flattened by path compression on every find, so a sequence of
    operations runs in near-constant amortized time per call.
    """

    def __init__(self, n: int):
        """
        Creates 'n' singleton components. An empty structure (n == 0)
        is allowed.

        :param n: The number of elements.
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")

        # parent[i] is the parent of element i; a root is its own parent
        self.parent = list(range(n))

        # size[r] is the number of elements in the tree rooted at r,
        # only meaningful while r is a root
        self.size = [1] * n

        self.count = n

    def get_count(self) -> int:
        """
        Returns the number of components.
        """
        return self.count

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Returns the root of the tree holding 'p'. Compresses by path
        halving: each element visited is linked to its grandparent, which
        halves the path length in a single pass.
        """
        self._validate(p)

        parent = self.parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def connected(self, p: int, q: int) -> bool:
        """
        Returns True if 'p' and 'q' are in the same component.
        """
        self._validate(q)
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int):
        """
        Merges the component holding 'p' with the component holding 'q'.
        Does nothing when they already share a root.
        """
        self._validate(q)
        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return

        if self.size[rootP] < self.size[rootQ]:
            rootP, rootQ = rootQ, rootP

        # rootP now heads the larger tree (ties keep p's root on top)
        self.parent[rootQ] = rootP
        self.size[rootP] += self.size[rootQ]
        self.count -= 1
