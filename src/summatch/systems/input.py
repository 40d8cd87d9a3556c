from esper import World

from summatch.components.board import Board
from summatch.components.control_button import ControlAction, ControlButton
from summatch.components.game_state import GameMode
from summatch.events.bus import (
    EventBus,
    EVENT_BLOCK_TOGGLE,
    EVENT_EXIT_TO_MENU,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_PAUSE_TOGGLE,
    EVENT_RESTART,
)
from summatch.systems.grid import GridSystem
from summatch.ui.layout import cell_at_point, compute_board_geometry
from summatch.utils.game_state import get_game_state, is_guarded_press

# arcade.key / arcade.MOUSE_BUTTON_LEFT values; numeric to keep arcade out of the engine.
MOUSE_BUTTON_LEFT = 1
KEY_ENTER = 65293
KEY_ESCAPE = 65307
KEY_SPACE = 32
KEY_P = 112
KEY_R = 114


class InputSystem:
    """Maps control-button clicks, board clicks and keys onto player intents."""

    def __init__(self, event_bus: EventBus, window, world: World, grid_system: GridSystem):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.grid = grid_system
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != MOUSE_BUTTON_LEFT:
            return
        state = get_game_state(self.world)
        if state is None or state.mode == GameMode.IDLE:
            return
        press_id = kwargs.get('press_id')
        if is_guarded_press(self.world, press_id):
            # The press that caused the current phase was already handled.
            return
        action = self._control_at(float(x), float(y))
        if action is not None:
            self._activate_control(action, state.mode, press_id)
            return
        if state.mode != GameMode.ACTIVE:
            return
        board = self.world.component_for_entity(self.grid.board_entity, Board)
        geometry = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        cell = cell_at_point(float(x), float(y), geometry, board.rows, board.cols)
        if cell is None:
            return
        block = self.grid.block_at(*cell)
        if block is None:
            # Holes left by earlier matches are not selectable.
            return
        self.event_bus.emit(EVENT_BLOCK_TOGGLE, block_id=block.block_id)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        mode = self._mode()
        if mode in (None, GameMode.IDLE):
            return
        if symbol in (KEY_P, KEY_SPACE):
            if mode in (GameMode.ACTIVE, GameMode.PAUSED):
                self.event_bus.emit(EVENT_PAUSE_TOGGLE)
        elif symbol == KEY_R or (symbol == KEY_ENTER and mode == GameMode.GAME_OVER):
            self.event_bus.emit(EVENT_RESTART, mode=None)
        elif symbol == KEY_ESCAPE:
            self.event_bus.emit(EVENT_EXIT_TO_MENU)

    def _mode(self):
        state = get_game_state(self.world)
        return state.mode if state is not None else None

    def _control_at(self, x: float, y: float):
        for _, button in self.world.get_component(ControlButton):
            if button.contains(x, y):
                return button.action
        return None

    def _activate_control(self, action: ControlAction, mode: GameMode, press_id):
        if action == ControlAction.PAUSE:
            if mode in (GameMode.ACTIVE, GameMode.PAUSED):
                self.event_bus.emit(EVENT_PAUSE_TOGGLE)
        elif action in (ControlAction.RESTART, ControlAction.RETRY):
            self.event_bus.emit(EVENT_RESTART, mode=None, press_id=press_id)
        elif action in (ControlAction.EXIT, ControlAction.MENU):
            self.event_bus.emit(EVENT_EXIT_TO_MENU, press_id=press_id)
