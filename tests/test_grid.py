"""
Tests for grid <-> playfield mapping and rectangle hit testing.
"""
import pytest

from lawn.constants import GRID_OFFSET_X, GRID_OFFSET_Y, CELL_WIDTH, CELL_HEIGHT, GRID_ROWS, GRID_COLS
from lawn.grid import world_from_grid, grid_from_world, point_in_rect, in_bounds
from lawn.models import Rect


class TestWorldFromGrid:
    """Tests for cell center computation."""

    def test_first_cell_center(self):
        """Top-left cell center sits half a cell inside the offsets."""
        pos = world_from_grid(0, 0)
        assert pos.x == GRID_OFFSET_X + CELL_WIDTH / 2
        assert pos.y == GRID_OFFSET_Y + CELL_HEIGHT / 2

    def test_column_and_row_order(self):
        """First argument is the column, second the row."""
        pos = world_from_grid(2, 3)
        assert pos.x == pytest.approx(130 + 2 * 71 + 35.5)
        assert pos.y == pytest.approx(185 + 3 * 64 + 32)


class TestGridFromWorld:
    """Tests for click -> cell mapping."""

    def test_round_trip_of_cell_centers(self):
        """Every cell center maps back to its own cell."""
        for row in range(GRID_ROWS):
            for col in range(GRID_COLS):
                pos = world_from_grid(col, row)
                assert grid_from_world(pos.x, pos.y) == (row, col)

    def test_top_left_corner_is_inside(self):
        """The exact grid origin belongs to cell (0, 0)."""
        assert grid_from_world(GRID_OFFSET_X, GRID_OFFSET_Y) == (0, 0)

    def test_off_lawn_points(self):
        """Points left of, above, or past the grid map to None."""
        assert grid_from_world(GRID_OFFSET_X - 1, GRID_OFFSET_Y + 10) is None
        assert grid_from_world(GRID_OFFSET_X + 10, GRID_OFFSET_Y - 1) is None
        assert grid_from_world(GRID_OFFSET_X + GRID_COLS * CELL_WIDTH, GRID_OFFSET_Y + 10) is None
        assert grid_from_world(GRID_OFFSET_X + 10, GRID_OFFSET_Y + GRID_ROWS * CELL_HEIGHT) is None

    def test_in_bounds(self):
        assert in_bounds(0, 0)
        assert in_bounds(GRID_ROWS - 1, GRID_COLS - 1)
        assert not in_bounds(-1, 0)
        assert not in_bounds(0, GRID_COLS)


class TestPointInRect:
    """Tests for inclusive rectangle containment."""

    def test_inside_and_edges(self):
        """Edges count as inside."""
        rect = Rect(10, 20, 50, 50)
        assert point_in_rect(30, 40, rect)
        assert point_in_rect(10, 20, rect)
        assert point_in_rect(60, 70, rect)

    def test_outside(self):
        rect = Rect(10, 20, 50, 50)
        assert not point_in_rect(9.9, 40, rect)
        assert not point_in_rect(30, 70.1, rect)

    def test_centered_rect(self):
        """Rect.centered builds a square around a center point."""
        rect = Rect.centered(100, 100, 25)
        assert (rect.x, rect.y, rect.w, rect.h) == (75, 75, 50, 50)
