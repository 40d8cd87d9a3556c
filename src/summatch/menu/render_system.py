"""Rendering system responsible for drawing the main menu."""
import arcade
from esper import World
from summatch.components.game_state import GameMode
from summatch.components.session import Session
from summatch.menu.components import MenuBackground, MenuButton
from summatch.utils.game_state import get_game_state

TITLE_COLOR = (255, 255, 255)
ACCENT_COLOR = (16, 185, 129)
CAPTION_COLOR = (113, 113, 122)


class MenuRenderSystem:
    """Renders menu entities when the session is idle."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        """Draw the menu if the current mode is Idle."""
        state = get_game_state(self.world)
        if not state or state.mode != GameMode.IDLE:
            return

        for _, background in self.world.get_component(MenuBackground):
            arcade.draw_lrbt_rectangle_filled(
                0,
                self.window.width,
                0,
                self.window.height,
                background.color,
            )

        center_x = self.window.width / 2
        title_y = self.window.height / 2 + 150
        arcade.draw_text("SUM", center_x - 8, title_y, TITLE_COLOR, 56, anchor_x="right", anchor_y="center", bold=True, italic=True)
        arcade.draw_text("MATCH", center_x - 8, title_y, ACCENT_COLOR, 56, anchor_x="left", anchor_y="center", bold=True, italic=True)
        arcade.draw_text(
            "Pick numbers that add up to the target",
            center_x,
            title_y - 50,
            CAPTION_COLOR,
            14,
            anchor_x="center",
            anchor_y="center",
        )

        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = (24, 24, 27) if button.enabled else (39, 39, 42)
            outline_color = (63, 63, 70)
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, outline_color, border_width=2)
            arcade.draw_text(
                button.label,
                left + 20,
                button.y + 10,
                TITLE_COLOR,
                20,
                anchor_x="left",
                anchor_y="center",
                bold=True,
            )
            arcade.draw_text(button.caption, left + 20, button.y - 16, CAPTION_COLOR, 11, anchor_x="left", anchor_y="center")

        best = 0
        for _, session in self.world.get_component(Session):
            best = session.high_score
        arcade.draw_text(
            f"Best {best}",
            center_x,
            self.window.height / 2 - 180,
            CAPTION_COLOR,
            14,
            anchor_x="center",
            anchor_y="center",
        )
