"""Conversions between lawn cells and playfield pixels, plus hit testing."""

from __future__ import annotations

import math

from .constants import (
    GRID_ROWS, GRID_COLS, CELL_WIDTH, CELL_HEIGHT, GRID_OFFSET_X, GRID_OFFSET_Y
)
from .models import Point, Rect


def world_from_grid(col: int, row: int) -> Point:
    """Return the pixel center of the cell at (col, row)."""
    return Point(
        GRID_OFFSET_X + col * CELL_WIDTH + CELL_WIDTH / 2,
        GRID_OFFSET_Y + row * CELL_HEIGHT + CELL_HEIGHT / 2,
    )


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < GRID_ROWS and 0 <= col < GRID_COLS


def grid_from_world(x: float, y: float) -> tuple[int, int] | None:
    """
    Map a playfield point to the (row, col) of the cell containing it.

    Returns
    -------
    tuple[int, int] | None
        The cell, or None when the point is off the lawn.
    """
    col = math.floor((x - GRID_OFFSET_X) / CELL_WIDTH)
    row = math.floor((y - GRID_OFFSET_Y) / CELL_HEIGHT)
    if not in_bounds(row, col):
        return None
    return row, col


def point_in_rect(px: float, py: float, rect: Rect) -> bool:
    """Inclusive on every edge."""
    return (rect.x <= px <= rect.x + rect.w) and (rect.y <= py <= rect.y + rect.h)
