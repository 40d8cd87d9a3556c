"""Input handling for the ECS-driven main menu."""
from typing import Callable, Optional, Tuple

from esper import World

from summatch.components.game_state import GameMode, PlayMode
from summatch.events.bus import (
    EVENT_GAME_MODE_CHANGED,
    EVENT_KEY_PRESS,
    EVENT_MODE_CHOSEN,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from summatch.menu.components import MenuAction, MenuButton
from summatch.menu.factory import clear_main_menu, spawn_main_menu
from summatch.utils.game_state import get_game_state, is_guarded_press

# arcade.key values, kept numeric to avoid importing arcade here.
KEY_1 = 49
KEY_2 = 50
KEY_C = 99
KEY_T = 116

_ACTION_MODES = {
    MenuAction.CLASSIC: PlayMode.CLASSIC,
    MenuAction.TIMED: PlayMode.TIMED,
}


class MenuInputSystem:
    """Processes input events while the session is idle and rebuilds the menu on return."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        menu_size_provider: Optional[Callable[[], Tuple[int, int]]] = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._menu_size_provider = menu_size_provider
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_game_mode_changed)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        press_id = payload.get("press_id")
        try:
            press_id_int = int(press_id) if press_id is not None else None
        except (TypeError, ValueError):
            press_id_int = None
        self.handle_mouse_press(float(x), float(y), int(button), press_id_int)

    def handle_mouse_press(self, x: float, y: float, button: int, press_id: int | None = None) -> None:
        """Choose a play mode when a menu button is clicked."""
        if not self._menu_active() or is_guarded_press(self.world, press_id):
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if menu_button.contains(x, y):
                self._activate_action(menu_button.action, press_id=press_id)
                return

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None or not self._menu_active():
            return
        if symbol in (KEY_1, KEY_C):
            self._activate_action(MenuAction.CLASSIC)
        elif symbol in (KEY_2, KEY_T):
            self._activate_action(MenuAction.TIMED)

    def on_game_mode_changed(self, sender, **payload) -> None:
        new_mode = payload.get("new_mode")
        if new_mode == GameMode.IDLE:
            if self._menu_size_provider is not None:
                width, height = self._menu_size_provider()
                spawn_main_menu(self.world, width, height)
        elif payload.get("previous_mode") == GameMode.IDLE:
            clear_main_menu(self.world)

    def _activate_action(self, action: MenuAction, *, press_id: int | None = None) -> None:
        mode = _ACTION_MODES.get(action)
        if mode is None:
            return
        self.event_bus.emit(EVENT_MODE_CHOSEN, mode=mode, press_id=press_id)

    def _menu_active(self) -> bool:
        state = get_game_state(self.world)
        return state is not None and state.mode == GameMode.IDLE
