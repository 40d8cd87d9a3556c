from __future__ import annotations

from esper import World

from summatch.components.game_state import GameMode, GameState
from summatch.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def _press_id_or_none(value) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def set_game_mode(
    world: World,
    event_bus: EventBus,
    mode: GameMode,
    *,
    input_guard_press_id: int | None = None,
) -> bool:
    """Move the session into phase ``mode``.

    Returns False without emitting when the session is already there. On a
    real change the guard is replaced, so a click that caused one change is
    never remembered past the next one.
    """
    guard_id = _press_id_or_none(input_guard_press_id)
    state = get_game_state(world)
    if state is None:
        previous_mode = None
        world.create_entity(GameState(mode=mode, input_guard_press_id=guard_id))
    elif state.mode == mode:
        return False
    else:
        previous_mode = state.mode
        state.mode = mode
        state.input_guard_press_id = guard_id
    event_bus.emit(
        EVENT_GAME_MODE_CHANGED,
        previous_mode=previous_mode,
        new_mode=mode,
        input_guard_press_id=guard_id,
    )
    return True


def is_guarded_press(world: World, press_id) -> bool:
    """True when ``press_id`` is the click that triggered the current phase."""
    press = _press_id_or_none(press_id)
    if press is None:
        return False
    state = get_game_state(world)
    return state is not None and state.input_guard_press_id == press
