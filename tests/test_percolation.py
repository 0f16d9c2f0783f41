"""Tests for the percolation grid."""

import pytest

from percolation import Percolation


class TestConstruction:
    """Tests for a fresh grid."""

    @pytest.mark.parametrize("n", [1, 2, 5, 20])
    def test_fresh_grid(self, n):
        """A new grid has no open sites and does not percolate."""
        p = Percolation(n)

        assert p.numberOfOpenSites() == 0
        assert not p.percolates()
        assert not p.isOpen(1, 1)
        assert not p.isFull(n, n)

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_invalid_size(self, n):
        with pytest.raises(ValueError):
            Percolation(n)

    def test_structure_sizes(self):
        """`grid` carries top and bottom nodes, `full` only the top."""
        p = Percolation(3)

        assert len(p.grid.parent) == 11
        assert len(p.full.parent) == 10


class TestOpen:
    """Tests for opening sites."""

    def test_open_marks_site(self):
        p = Percolation(3)
        p.open(2, 3)

        assert p.isOpen(2, 3)
        assert not p.isOpen(3, 2)
        assert p.numberOfOpenSites() == 1

    def test_open_is_idempotent(self):
        p = Percolation(3)
        p.open(1, 2)
        p.open(2, 2)
        before = (p.isOpen(2, 2), p.numberOfOpenSites(), p.percolates(), p.isFull(2, 2))

        p.open(2, 2)

        after = (p.isOpen(2, 2), p.numberOfOpenSites(), p.percolates(), p.isFull(2, 2))
        assert before == after
        assert p.numberOfOpenSites() == 2

    def test_linear_index(self):
        p = Percolation(4)

        assert p.flattenGrid(1, 1) == 0
        assert p.flattenGrid(1, 4) == 3
        assert p.flattenGrid(2, 1) == 4
        assert p.flattenGrid(4, 4) == 15

    def test_neighbours_are_joined(self):
        p = Percolation(3)
        p.open(2, 2)
        p.open(2, 3)
        p.open(3, 3)

        assert p.grid.connected(p.flattenGrid(2, 2), p.flattenGrid(3, 3))
        assert p.full.connected(p.flattenGrid(2, 2), p.flattenGrid(3, 3))

    def test_diagonal_is_not_a_neighbour(self):
        p = Percolation(3)
        p.open(1, 1)
        p.open(2, 2)

        assert not p.isFull(2, 2)


class TestPercolates:
    """Tests for percolation and full sites."""

    def test_single_site_grid(self):
        p = Percolation(1)
        p.open(1, 1)

        assert p.percolates()
        assert p.isFull(1, 1)
        assert p.numberOfOpenSites() == 1

    def test_vertical_column_percolates(self):
        p = Percolation(3)
        p.open(1, 2)
        p.open(2, 2)
        assert not p.percolates()

        p.open(3, 2)
        assert p.percolates()

    def test_winding_path(self):
        p = Percolation(3)
        for row, col in [(1, 1), (2, 1), (2, 2), (2, 3), (3, 3)]:
            assert not p.percolates()
            p.open(row, col)

        assert p.percolates()
        assert p.isFull(3, 3)

    def test_percolation_is_monotonic(self):
        p = Percolation(4)
        for row in range(1, 5):
            p.open(row, 1)
        assert p.percolates()

        for row in range(1, 5):
            for col in range(1, 5):
                p.open(row, col)
                assert p.percolates()

    def test_full_propagates_from_top(self):
        p = Percolation(4)
        p.open(2, 2)
        p.open(3, 2)
        assert not p.isFull(3, 2)

        p.open(1, 2)
        assert p.isFull(2, 2)
        assert p.isFull(3, 2)

    def test_no_backwash_before_percolation(self):
        """A path hanging off the bottom row is not full."""
        p = Percolation(4)
        path = [(4, 1), (3, 1), (3, 2), (2, 2)]
        for row, col in path:
            p.open(row, col)

        assert not p.percolates()
        assert p.grid.connected(p.flattenGrid(2, 2), p.virtualBottom)
        for row, col in path:
            assert not p.isFull(row, col)

    def test_no_backwash_after_percolation(self):
        """Once the grid percolates, bottom-only paths stay empty."""
        p = Percolation(3)
        for row in range(1, 4):
            p.open(row, 1)
        p.open(3, 3)

        assert p.percolates()
        assert p.isFull(3, 1)
        assert not p.isFull(3, 3)


class TestRange:
    """Tests for out-of-range coordinates."""

    @pytest.mark.parametrize("row, col", [(0, 1), (4, 1), (1, 0), (1, 4), (-1, -1)])
    def test_accessors_reject(self, row, col):
        p = Percolation(3)

        with pytest.raises(IndexError):
            p.open(row, col)
        with pytest.raises(IndexError):
            p.isOpen(row, col)
        with pytest.raises(IndexError):
            p.isFull(row, col)

        assert p.numberOfOpenSites() == 0
        assert not p.openNodes.any()
        assert p.grid.get_count() == 11
        assert p.full.get_count() == 10
