"""Factory helpers for the clickable in-game controls."""
from esper import World

from summatch.components.control_button import ControlAction, ControlButton, ControlTag, GameOverChoice
from summatch.components.game_state import GameMode
from summatch.constants import BOTTOM_MARGIN

EXIT_BUTTON_SIZE = 40.0
EXIT_BUTTON_INSET = 30.0
FOOTER_BUTTON_GAP = 80.0
CARD_BUTTON_WIDTH = 240.0
CARD_BUTTON_HEIGHT = 48.0


def spawn_game_controls(world: World, width: int, height: int, mode: GameMode) -> None:
    """Rebuild the controls that belong to ``mode``.

    Active and paused games get pause/resume and restart in the footer below
    the board plus an exit button in the header corner. The game-over card
    offers retry and back-to-menu instead. The menu has no in-game controls.
    """
    clear_game_controls(world)
    center_x = width / 2
    if mode in (GameMode.ACTIVE, GameMode.PAUSED):
        footer_y = BOTTOM_MARGIN / 2
        pause_label = "Resume" if mode == GameMode.PAUSED else "Pause"
        world.create_entity(
            ControlButton(pause_label, ControlAction.PAUSE, center_x - FOOTER_BUTTON_GAP, footer_y),
            ControlTag(),
        )
        world.create_entity(
            ControlButton("Restart", ControlAction.RESTART, center_x + FOOTER_BUTTON_GAP, footer_y),
            ControlTag(),
        )
        world.create_entity(
            ControlButton(
                "X",
                ControlAction.EXIT,
                width - EXIT_BUTTON_INSET,
                height - EXIT_BUTTON_INSET,
                width=EXIT_BUTTON_SIZE,
                height=EXIT_BUTTON_SIZE,
            ),
            ControlTag(),
        )
    elif mode == GameMode.GAME_OVER:
        center_y = height / 2
        card_specs = (
            ("Try again", ControlAction.RETRY, center_y - 90.0),
            ("Back to menu", ControlAction.MENU, center_y - 150.0),
        )
        for label, action, y_position in card_specs:
            world.create_entity(
                ControlButton(
                    label,
                    action,
                    center_x,
                    y_position,
                    width=CARD_BUTTON_WIDTH,
                    height=CARD_BUTTON_HEIGHT,
                ),
                GameOverChoice(action=action),
                ControlTag(),
            )


def clear_game_controls(world: World) -> None:
    to_delete = {ent for ent, _ in world.get_component(ControlTag)}
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)
