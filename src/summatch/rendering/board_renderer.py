from __future__ import annotations

from typing import TYPE_CHECKING

from summatch.ui.layout import cell_center
from summatch.utils.snapshot import SessionSnapshot

if TYPE_CHECKING:
    from summatch.systems.render import RenderSystem

GRID_BACKGROUND = (24, 24, 27)
BLOCK_FILL = (39, 39, 42)
BLOCK_OUTLINE = (63, 63, 70)
SELECTED_FILL = (16, 185, 129)
SELECTED_OUTLINE = (110, 231, 183)
VALUE_COLOR = (244, 244, 245)


class BoardRenderer:
    """Draws the grid background and every block from a session snapshot."""

    def __init__(self, render_system: "RenderSystem", padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, snapshot: SessionSnapshot, geometry, rows: int, cols: int) -> None:
        tile_size, start_x, start_y = geometry
        arcade.draw_lbwh_rectangle_filled(start_x, start_y, cols * tile_size, rows * tile_size, GRID_BACKGROUND)
        draw_size = max(tile_size - self._padding, 4)
        font_size = max(int(tile_size * 0.38), 8)
        for view in snapshot.grid:
            cx, cy = cell_center(view.row, view.col, geometry, rows)
            left = cx - draw_size / 2
            bottom = cy - draw_size / 2
            selected = snapshot.is_selected(view.block_id)
            fill = SELECTED_FILL if selected else BLOCK_FILL
            outline = SELECTED_OUTLINE if selected else BLOCK_OUTLINE
            arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, fill)
            arcade.draw_lbwh_rectangle_outline(left, bottom, draw_size, draw_size, outline, border_width=2)
            arcade.draw_text(
                str(view.value),
                cx,
                cy,
                VALUE_COLOR,
                font_size,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
