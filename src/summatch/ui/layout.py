from __future__ import annotations

from typing import Optional, Tuple

from summatch.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    GRID_COLS,
    GRID_ROWS,
    HEADER_HEIGHT,
)

MIN_TILE_SIZE = 20


def compute_board_geometry(
    window_width: int,
    window_height: int,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Tuple[int, float, float]:
    """Return (tile_size, start_x, start_y) shared by rendering and input mapping.

    ``start_y`` is the bottom edge of the board in window coordinates; grid row
    ``rows - 1`` is drawn there and row 0 at the top.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HEADER_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(
    row: int,
    col: int,
    geometry: Tuple[int, float, float],
    rows: int = GRID_ROWS,
) -> Tuple[float, float]:
    tile_size, start_x, start_y = geometry
    screen_row = rows - 1 - row
    return start_x + (col + 0.5) * tile_size, start_y + (screen_row + 0.5) * tile_size


def cell_at_point(
    x: float,
    y: float,
    geometry: Tuple[int, float, float],
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
) -> Optional[Tuple[int, int]]:
    """Grid (row, col) under a window point, or None when outside the board."""
    tile_size, start_x, start_y = geometry
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    screen_row = int((y - start_y) // tile_size)
    return rows - 1 - screen_row, col
