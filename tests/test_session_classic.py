from summatch.components.board import Board
from summatch.components.game_state import GameMode, PlayMode
from summatch.events.bus import (
    EVENT_BLOCK_TOGGLE,
    EVENT_GAME_OVER,
    EVENT_MATCH_SUCCESS,
    EVENT_ROW_INJECTED,
    EVENT_SELECTION_OVERSHOOT,
)
from tests.helpers import Recorder, ScriptedRandomSource, find_subset, make_session, place_blocks


def test_start_builds_initial_grid_and_target():
    _, _, system = make_session(PlayMode.CLASSIC)
    snapshot = system.snapshot()
    assert system.mode == GameMode.ACTIVE
    assert snapshot.mode is PlayMode.CLASSIC
    assert len(snapshot.grid) == 24
    assert snapshot.score == 0
    assert snapshot.selected_ids == ()
    assert snapshot.target > 0
    assert find_subset(snapshot.grid, snapshot.target) is not None


def test_matching_selection_scores_and_regenerates_target_from_remaining_blocks():
    bus, _, system = make_session(PlayMode.CLASSIC, random_source=ScriptedRandomSource())
    place_blocks(system, {"A": (3, 9, 0), "B": (5, 9, 1), "C": (2, 9, 2)})
    system.session.target = 5
    matches = Recorder(bus, EVENT_MATCH_SUCCESS)

    system.toggle_select("A")
    assert system.session.selected_ids == ["A"]
    system.toggle_select("C")

    assert system.session.score == 20
    assert system.session.selected_ids == []
    remaining_ids = {view.block_id for view in system.grid.blocks()}
    assert "A" not in remaining_ids and "C" not in remaining_ids
    assert "B" in remaining_ids
    # Only B was left when the target was drawn.
    assert system.session.target == 5
    assert matches.calls == [{"block_ids": ["A", "C"], "points": 20, "target": 5}]


def test_classic_match_injects_a_row_below_survivors():
    bus, _, system = make_session(PlayMode.CLASSIC)
    place_blocks(system, {"A": (3, 9, 0), "B": (5, 9, 1), "C": (2, 9, 2)})
    system.session.target = 5
    rows = Recorder(bus, EVENT_ROW_INJECTED)

    system.toggle_select("A")
    system.toggle_select("C")

    blocks = system.grid.blocks()
    survivor = next(view for view in blocks if view.block_id == "B")
    assert (survivor.row, survivor.col) == (8, 1)
    assert len([view for view in blocks if view.row == 9]) == 6
    assert len(blocks) == 7
    assert rows.calls[0]["reason"] == "match"


def test_overshoot_clears_selection_only():
    bus, _, system = make_session(PlayMode.CLASSIC)
    place_blocks(system, {"A": (3, 9, 0), "B": (5, 9, 1), "C": (2, 9, 2)})
    system.session.target = 5
    overshoots = Recorder(bus, EVENT_SELECTION_OVERSHOOT)
    before = system.grid.blocks()

    system.toggle_select("A")
    system.toggle_select("B")

    assert system.session.selected_ids == []
    assert system.session.score == 0
    assert system.session.target == 5
    assert system.grid.blocks() == before
    assert overshoots.calls == [{"block_ids": ["A", "B"], "total": 8, "target": 5}]


def test_deselecting_keeps_game_pending():
    _, _, system = make_session(PlayMode.CLASSIC)
    place_blocks(system, {"A": (3, 9, 0), "B": (5, 9, 1), "C": (2, 9, 2)})
    system.session.target = 10
    system.toggle_select("A")
    system.toggle_select("C")
    system.toggle_select("A")
    assert system.session.selected_ids == ["C"]
    assert system.snapshot().selection_sum == 2


def test_row_injection_with_top_row_occupied_ends_the_game():
    bus, _, system = make_session(PlayMode.CLASSIC, board=Board(rows=4, cols=3, initial_rows=4))
    place_blocks(system, {"A": (3, 3, 0), "B": (2, 3, 1), "TOP": (9, 0, 1)})
    system.session.target = 5
    overs = Recorder(bus, EVENT_GAME_OVER)
    rows = Recorder(bus, EVENT_ROW_INJECTED)

    system.toggle_select("A")
    system.toggle_select("B")

    assert system.game_over
    assert system.mode == GameMode.GAME_OVER
    assert system.session.score == 20
    assert [view.block_id for view in system.grid.blocks()] == ["TOP"]
    assert len(rows) == 0
    assert overs.calls == [{"score": 20, "high_score": 20, "reason": "match"}]


def test_score_is_sum_of_selection_sizes_and_never_decreases():
    _, _, system = make_session(PlayMode.CLASSIC, seed=11)
    expected = 0
    last = 0
    for _ in range(5):
        if system.game_over:
            break
        subset = find_subset(system.grid.blocks(), system.session.target)
        assert subset is not None
        target = system.session.target
        assert sum(view.value for view in subset) == target
        for view in subset:
            system.toggle_select(view.block_id)
            assert system.session.score >= last
            last = system.session.score
        expected += len(subset) * 10
        assert system.session.score == expected
        remaining = {view.block_id for view in system.grid.blocks()}
        assert remaining.isdisjoint(view.block_id for view in subset)


def test_bus_intents_drive_the_session():
    bus, _, system = make_session(PlayMode.CLASSIC)
    place_blocks(system, {"A": (3, 9, 0), "B": (5, 9, 1)})
    system.session.target = 8
    bus.emit(EVENT_BLOCK_TOGGLE, block_id="A")
    bus.emit(EVENT_BLOCK_TOGGLE, block_id="B")
    assert system.session.score == 20
