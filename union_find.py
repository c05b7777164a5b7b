# weighted quick union-find
class WeightedQuickUnionUF:
    """
    Disjoint-set forest over the elements 0 through n-1.

    Union by size keeps the trees shallow and find() compresses every
    path it walks, so connected() and union() run in amortized
    near-constant time.
    """

    def __init__(self, n: int):
        """
        Creates n singleton components.

        :param n: The number of elements.
        """
        if n <= 0:
            raise ValueError("n must be > 0")

        # parent[i] == i marks a root
        self.parent = list(range(n))

        # size[r] = number of elements in the tree rooted at r, only valid for roots
        self.size = [1] * n

        self._count = n

    def __len__(self) -> int:
        return len(self.parent)

    def count(self) -> int:
        """
        Returns the number of disjoint components.
        """
        return self._count

    def _validate(self, p: int):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n - 1}")

    def find(self, p: int) -> int:
        """
        Returns the root of the component containing p and points every
        element on the walked path straight at that root.
        """
        self._validate(p)
        parent = self.parent

        root = p
        while root != parent[root]:
            root = parent[root]

        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p

        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """
        Merges the components containing p and q. The smaller tree is
        hung under the root of the larger one.
        """
        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return

        if self.size[rootP] < self.size[rootQ]:
            rootP, rootQ = rootQ, rootP

        self.parent[rootQ] = rootP
        self.size[rootP] += self.size[rootQ]

        self._count -= 1
