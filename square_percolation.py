import numpy as np

from union_find import WeightedQuickUnionUF


class Percolation:
    """
    N-by-N site percolation model on the square lattice.

    Sites are addressed by 1-based (row, col). Two union-find structures
    are kept side by side:

    - wqfFull spans the N*N sites plus the virtual top and answers isFull().
    - wqfGrid spans the N*N sites plus the virtual top and the virtual
      bottom and answers percolates().

    wqfFull never sees the virtual bottom, otherwise an open bottom-row
    site would look full as soon as the system percolated through some
    other column (backwash).
    """

    def __init__(self, n: int):
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise ValueError("n must be a positive integer")
        if n <= 0:
            raise ValueError("n must be a positive integer")

        self.gridSize = int(n)
        self.gridSquare = self.gridSize * self.gridSize
        self.grid = np.zeros((self.gridSize, self.gridSize), dtype=bool)

        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare + 1

        self.wqfGrid = WeightedQuickUnionUF(self.gridSquare + 2) # top and bottom
        self.wqfFull = WeightedQuickUnionUF(self.gridSquare + 1) # top only

        self.openSite = 0

        for col in range(1, self.gridSize + 1):
            top = self.flattenGrid(1, col)
            bottom = self.flattenGrid(self.gridSize, col)
            self.wqfGrid.union(self.virtualTop, top)
            self.wqfFull.union(self.virtualTop, top)
            self.wqfGrid.union(self.virtualBottom, bottom)

    @property
    def size(self) -> int:
        return self.gridSize

    # open site (row, col); re-opening only re-runs the neighbour unions
    def open_site(self, row: int, col: int) -> None:
        self.validState(row, col)

        if not self.grid[row - 1][col - 1]:
            self.grid[row - 1][col - 1] = True
            self.openSite += 1

        flatIndex = self.flattenGrid(row, col)

        for nRow, nCol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self.isOnGrid(nRow, nCol) and self.grid[nRow - 1][nCol - 1]:
                neighbour = self.flattenGrid(nRow, nCol)
                self.wqfGrid.union(flatIndex, neighbour)
                self.wqfFull.union(flatIndex, neighbour)

    # is site (row, col) open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1])

    # is site (row, col) open and connected to the top row?
    def isFull(self, row: int, col: int) -> bool:
        if not self.isOpen(row, col):
            return False
        return self.wqfFull.connected(self.virtualTop, self.flattenGrid(row, col))

    def percolates(self) -> bool:
        # a 1x1 grid is wired to both sentinels before anything is open
        if self.gridSize == 1:
            return self.isOpen(1, 1)
        return self.wqfGrid.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(f"site ({row}, {col}) is outside the {self.gridSize}x{self.gridSize} grid")

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize

    def __repr__(self) -> str:
        return f"Percolation(n={self.gridSize}, open={self.openSite}, percolates={self.percolates()})"
