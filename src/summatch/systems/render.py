from typing import Optional

import arcade
from esper import World

from summatch.components.board import Board
from summatch.components.control_button import ControlAction, ControlButton, GameOverChoice
from summatch.components.game_state import GameMode, PlayMode
from summatch.events.bus import EVENT_SESSION_CHANGED, EventBus
from summatch.rendering.board_renderer import BoardRenderer
from summatch.systems.session import SessionSystem
from summatch.ui.layout import compute_board_geometry
from summatch.utils.game_state import get_game_state
from summatch.utils.snapshot import SessionSnapshot

PADDING = 4
LABEL_COLOR = (113, 113, 122)
TEXT_COLOR = (255, 255, 255)
TARGET_COLOR = (16, 185, 129)
TIMER_COLOR = (59, 130, 246)
TIMER_CRITICAL_COLOR = (239, 68, 68)
OVERLAY_COLOR = (9, 9, 11, 210)
TIMER_BAR_HEIGHT = 6
CONTROL_FILL_COLOR = (24, 24, 27)
CONTROL_OUTLINE_COLOR = (63, 63, 70)
CARD_BUTTON_COLOR = (39, 39, 42)


class RenderSystem:
    """Draws the in-game screen from the latest session snapshot."""

    def __init__(self, world: World, event_bus: EventBus, window, session_system: SessionSystem):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.session_system = session_system
        self.snapshot: Optional[SessionSnapshot] = None
        self._board_renderer = BoardRenderer(self, padding=PADDING)
        self.event_bus.subscribe(EVENT_SESSION_CHANGED, self.on_session_changed)

    def on_session_changed(self, sender, **kwargs):
        snapshot = kwargs.get('snapshot')
        if isinstance(snapshot, SessionSnapshot):
            self.snapshot = snapshot

    def process(self):
        state = get_game_state(self.world)
        if state is None or state.mode == GameMode.IDLE:
            return
        snapshot = self.snapshot or self.session_system.snapshot()
        board = self.world.component_for_entity(self.session_system.grid.board_entity, Board)
        geometry = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        self._board_renderer.render(arcade, snapshot, geometry, board.rows, board.cols)
        self._draw_header(snapshot, geometry, board)
        if snapshot.is_paused:
            self._draw_overlay("PAUSED", "Press P or Resume to continue")
        elif snapshot.game_over:
            self._draw_overlay(
                "GAME OVER",
                f"Score {snapshot.score}   Best {snapshot.high_score}",
            )
        self._draw_controls()

    def _draw_header(self, snapshot: SessionSnapshot, geometry, board: Board):
        tile_size, start_x, start_y = geometry
        width = board.cols * tile_size
        top = start_y + board.rows * tile_size
        center_x = start_x + width / 2
        arcade.draw_text("SCORE", start_x, top + 96, LABEL_COLOR, 10, anchor_x="left", bold=True)
        arcade.draw_text(snapshot.score_label, start_x, top + 70, TEXT_COLOR, 20, anchor_x="left", bold=True)
        arcade.draw_text("BEST", start_x + width, top + 96, LABEL_COLOR, 10, anchor_x="right", bold=True)
        arcade.draw_text(str(snapshot.high_score), start_x + width, top + 70, TEXT_COLOR, 20, anchor_x="right", bold=True)
        arcade.draw_text("TARGET", center_x, top + 96, LABEL_COLOR, 10, anchor_x="center", bold=True)
        arcade.draw_text(str(snapshot.target), center_x, top + 56, TARGET_COLOR, 36, anchor_x="center", bold=True)
        arcade.draw_text(
            f"Selected {snapshot.selection_sum}",
            center_x,
            top + 30,
            LABEL_COLOR,
            11,
            anchor_x="center",
        )
        if snapshot.mode is PlayMode.TIMED:
            bar_color = TIMER_CRITICAL_COLOR if snapshot.time_critical else TIMER_COLOR
            arcade.draw_lbwh_rectangle_filled(start_x, top + 10, width, TIMER_BAR_HEIGHT, (39, 39, 42))
            arcade.draw_lbwh_rectangle_filled(
                start_x, top + 10, width * snapshot.time_fraction, TIMER_BAR_HEIGHT, bar_color
            )

    def _draw_overlay(self, title: str, subtitle: str):
        arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, OVERLAY_COLOR)
        center_x = self.window.width / 2
        center_y = self.window.height / 2
        arcade.draw_text(title, center_x, center_y + 20, TEXT_COLOR, 36, anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(subtitle, center_x, center_y - 30, LABEL_COLOR, 14, anchor_x="center", anchor_y="center")

    def _draw_controls(self):
        for ent, button in self.world.get_component(ControlButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill = CONTROL_FILL_COLOR
            if self.world.has_component(ent, GameOverChoice):
                choice = self.world.component_for_entity(ent, GameOverChoice)
                fill = TARGET_COLOR if choice.action == ControlAction.RETRY else CARD_BUTTON_COLOR
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill)
            arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, CONTROL_OUTLINE_COLOR, border_width=2)
            arcade.draw_text(button.label, button.x, button.y, TEXT_COLOR, 13, anchor_x="center", anchor_y="center", bold=True)
