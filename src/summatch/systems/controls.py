from esper import World

from summatch.components.game_state import GameMode
from summatch.events.bus import EVENT_GAME_MODE_CHANGED, EventBus
from summatch.ui.controls import spawn_game_controls
from summatch.utils.game_state import get_game_state


class ControlSystem:
    """Keeps the in-game control buttons in step with the session phase."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_game_mode_changed)
        self.refresh()

    def on_game_mode_changed(self, sender, **kwargs):
        new_mode = kwargs.get('new_mode')
        if isinstance(new_mode, GameMode):
            spawn_game_controls(self.world, self.window.width, self.window.height, new_mode)

    def refresh(self):
        """Respawn for the current phase, e.g. after a window resize."""
        state = get_game_state(self.world)
        mode = state.mode if state is not None else GameMode.IDLE
        spawn_game_controls(self.world, self.window.width, self.window.height, mode)
