from esper import World

from summatch.components.game_state import GameMode, GameState
from summatch.events.bus import EVENT_GAME_MODE_CHANGED, EventBus
from summatch.utils.game_state import get_game_state, is_guarded_press, set_game_mode
from tests.helpers import Recorder


def test_set_game_mode_creates_state_when_missing():
    bus = EventBus(); world = World()
    changes = Recorder(bus, EVENT_GAME_MODE_CHANGED)
    assert set_game_mode(world, bus, GameMode.ACTIVE, input_guard_press_id=4)
    state = get_game_state(world)
    assert state.mode == GameMode.ACTIVE and state.input_guard_press_id == 4
    assert changes.calls == [
        {"previous_mode": None, "new_mode": GameMode.ACTIVE, "input_guard_press_id": 4}
    ]


def test_same_phase_is_not_re_emitted_and_keeps_guard():
    bus = EventBus(); world = World()
    world.create_entity(GameState(mode=GameMode.ACTIVE, input_guard_press_id=1))
    changes = Recorder(bus, EVENT_GAME_MODE_CHANGED)
    assert not set_game_mode(world, bus, GameMode.ACTIVE, input_guard_press_id=2)
    assert changes.calls == []
    assert get_game_state(world).input_guard_press_id == 1


def test_phase_change_replaces_guard():
    bus = EventBus(); world = World()
    world.create_entity(GameState(mode=GameMode.ACTIVE, input_guard_press_id=1))
    set_game_mode(world, bus, GameMode.PAUSED)
    assert get_game_state(world).input_guard_press_id is None


def test_guarded_press_matches_only_the_stored_id():
    world = World()
    assert not is_guarded_press(world, 3)
    world.create_entity(GameState(mode=GameMode.IDLE, input_guard_press_id=3))
    assert is_guarded_press(world, 3)
    assert is_guarded_press(world, "3")
    assert not is_guarded_press(world, 4)
    assert not is_guarded_press(world, None)
    assert not is_guarded_press(world, "nope")
