"""Entry point for the SumMatch number puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import argparse
import itertools
import logging
import random
from pathlib import Path

from arcade import Window, run, set_background_color

from summatch.components.game_state import GameMode
from summatch.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from summatch.menu.factory import spawn_main_menu
from summatch.menu.input_system import MenuInputSystem
from summatch.menu.render_system import MenuRenderSystem
from summatch.systems.clock import ClockSystem
from summatch.systems.controls import ControlSystem
from summatch.systems.grid import GridSystem
from summatch.systems.input import InputSystem
from summatch.systems.render import RenderSystem
from summatch.systems.session import SessionSystem
from summatch.utils.game_state import get_game_state
from summatch.utils.high_score_store import JsonHighScoreStore
from summatch.world import create_world

logger = logging.getLogger(__name__)


class SumMatchWindow(Window):
    def __init__(self, *, seed: int | None = None, save_path: Path | None = None):
        super().__init__(480, 800, "SumMatch", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self._press_ids = itertools.count(1)
        self.world = create_world(self.event_bus, rng=random.Random(seed))

        # Engine systems
        self.clock_system = ClockSystem(self.event_bus)
        self.grid_system = GridSystem(self.world, self.event_bus)
        self.session_system = SessionSystem(
            self.world,
            self.event_bus,
            grid_system=self.grid_system,
            clock=self.clock_system,
            high_score_store=JsonHighScoreStore(save_path),
        )

        # Menu systems
        spawn_main_menu(self.world, self.width, self.height)
        self.menu_input_system = MenuInputSystem(
            self.world,
            self.event_bus,
            menu_size_provider=lambda: (self.width, self.height),
        )
        self.menu_render_system = MenuRenderSystem(self.world, self)

        # Interface systems
        self.control_system = ControlSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world, self.grid_system)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.session_system)

        set_background_color((9, 9, 11))

    def on_resize(self, width: int, height: int):
        # pyglet may report a size before __init__ has built the world.
        if not hasattr(self, "world"):
            return super().on_resize(width, height)
        state = get_game_state(self.world)
        if state and state.mode == GameMode.IDLE:
            spawn_main_menu(self.world, width, height)
        else:
            self.control_system.refresh()
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        state = get_game_state(self.world)
        if state and state.mode == GameMode.IDLE:
            self.menu_render_system.process()
            return
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
            press_id=next(self._press_ids),
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="SumMatch: pick blocks that add up to the target.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for block values and targets.")
    parser.add_argument("--save-path", type=Path, default=None, help="Where the high score JSON lives.")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level name.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    window = SumMatchWindow(seed=args.seed, save_path=args.save_path)
    logger.info("High score file: %s", window.session_system.high_score_store.path)
    run()

if __name__ == "__main__":
    main()
