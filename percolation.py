import numpy as np

from weighted_union_find import WeightedQuickUnionUF


class Percolation:
    """
    An n by n grid of sites, each blocked or open, that percolates once an
    open path joins the top row to the bottom row.

    Two union-find structures are kept side by side. ``grid`` holds every
    site plus a virtual top and a virtual bottom node and answers
    ``percolates()``. ``full`` holds every site plus the virtual top only and
    answers ``isFull()``; with no bottom node in it, a site that only reaches
    the top through the bottom row (backwash) is never reported full.
    """

    def __init__(self, n: int):
        if n <= 0:
            raise ValueError(f"n must be a positive integer, got {n}")

        self.gridSize = n
        self.gridSquare = n * n
        self.openNodes = np.zeros((n, n), dtype=bool)

        self.grid = WeightedQuickUnionUF(self.gridSquare + 2)
        self.full = WeightedQuickUnionUF(self.gridSquare + 1)

        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare + 1

        self.openSite = 0

    # open the site[row, col] if it's not open yet
    def open(self, row: int, col: int):
        self.validState(row, col)

        if self.isOpen(row, col):
            return

        self.openNodes[row - 1][col - 1] = True
        self.openSite += 1

        flatIndex = self.flattenGrid(row, col)

        ## top row
        if row == 1:
            self.grid.union(self.virtualTop, flatIndex)
            self.full.union(self.virtualTop, flatIndex)

        ## bottom row, never in `full`
        if row == self.gridSize:
            self.grid.union(self.virtualBottom, flatIndex)

        ## up, down, left, right
        for nRow, nCol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self.isOnGrid(nRow, nCol) and self.isOpen(nRow, nCol):
                neighbour = self.flattenGrid(nRow, nCol)
                self.grid.union(neighbour, flatIndex)
                self.full.union(neighbour, flatIndex)

    # is site[row, col] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.openNodes[row - 1][col - 1])

    # is site[row, col] connected to the top row through open sites?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return self.full.connected(self.flattenGrid(row, col), self.virtualTop)

    def percolates(self) -> bool:
        return self.grid.connected(self.virtualTop, self.virtualBottom)

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(
                f"site ({row}, {col}) is outside the grid [1, {self.gridSize}] x [1, {self.gridSize}]"
            )

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.gridSize and 1 <= col <= self.gridSize
