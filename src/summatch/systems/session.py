"""Session state machine: mode rules, scoring and the game-over transition."""
from __future__ import annotations

import logging
from typing import Any, List

from esper import World

from summatch.components.block import BlockView
from summatch.components.game_state import GameMode, PlayMode
from summatch.components.session import Session
from summatch.constants import POINTS_PER_BLOCK
from summatch.errors import StorageUnavailable
from summatch.events.bus import (
    EVENT_BLOCK_TOGGLE,
    EVENT_CLOCK_SECOND,
    EVENT_EXIT_TO_MENU,
    EVENT_GAME_OVER,
    EVENT_HIGH_SCORE_CHANGED,
    EVENT_MATCH_SUCCESS,
    EVENT_MODE_CHOSEN,
    EVENT_PAUSE_TOGGLE,
    EVENT_RESTART,
    EVENT_SCORE_CHANGED,
    EVENT_SELECTION_CHANGED,
    EVENT_SELECTION_OVERSHOOT,
    EVENT_SESSION_CHANGED,
    EVENT_TARGET_CHANGED,
    EVENT_TIMER_CHANGED,
    EventBus,
)
from summatch.systems.clock import ClockSystem
from summatch.systems.grid import GridSystem
from summatch.systems.match import MatchOutcome, evaluate_selection, selection_sum
from summatch.systems.target import generate_target
from summatch.utils.game_state import get_game_state, set_game_mode
from summatch.utils.high_score_store import HighScoreStore, MemoryHighScoreStore
from summatch.utils.random_source import RandomSource
from summatch.utils.snapshot import SessionSnapshot

logger = logging.getLogger(__name__)


class SessionSystem:
    """Drives one game at a time from player intents and clock seconds.

    Phases follow ``GameMode``: IDLE (menu) -> ACTIVE <-> PAUSED -> GAME_OVER.
    Every stimulus is handled to completion before the next one, and the
    clock is disarmed before any state is reset so a stale second can never
    reach a fresh game.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        grid_system: GridSystem | None = None,
        clock: ClockSystem | None = None,
        high_score_store: HighScoreStore | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.random_source = random_source or getattr(world, "random_source", None) or RandomSource()
        self.grid = grid_system or GridSystem(world, event_bus, random_source=self.random_source)
        self.clock = clock or ClockSystem(event_bus)
        self.high_score_store: HighScoreStore = high_score_store or MemoryHighScoreStore()
        self._session_entity = self._ensure_session_entity()
        self.session.high_score = self._load_high_score()

        self.event_bus.subscribe(EVENT_MODE_CHOSEN, self._on_mode_chosen)
        self.event_bus.subscribe(EVENT_BLOCK_TOGGLE, self._on_block_toggle)
        self.event_bus.subscribe(EVENT_PAUSE_TOGGLE, self._on_pause_toggle)
        self.event_bus.subscribe(EVENT_RESTART, self._on_restart)
        self.event_bus.subscribe(EVENT_EXIT_TO_MENU, self._on_exit_to_menu)
        self.event_bus.subscribe(EVENT_CLOCK_SECOND, self._on_clock_second)

    def _ensure_session_entity(self) -> int:
        existing = list(self.world.get_component(Session))
        if existing:
            return existing[0][0]
        return self.world.create_entity(Session())

    def _load_high_score(self) -> int:
        try:
            return max(0, int(self.high_score_store.load()))
        except (StorageUnavailable, TypeError, ValueError) as exc:
            logger.warning("High score unavailable, starting from 0: %s", exc)
            return 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self.world.component_for_entity(self._session_entity, Session)

    @property
    def mode(self) -> GameMode:
        state = get_game_state(self.world)
        return state.mode if state is not None else GameMode.IDLE

    @property
    def is_paused(self) -> bool:
        return self.mode == GameMode.PAUSED

    @property
    def game_over(self) -> bool:
        return self.mode == GameMode.GAME_OVER

    def snapshot(self) -> SessionSnapshot:
        session = self.session
        blocks = self.grid.blocks()
        return SessionSnapshot(
            grid=tuple(blocks),
            target=session.target,
            score=session.score,
            high_score=session.high_score,
            game_over=self.game_over,
            selected_ids=tuple(session.selected_ids),
            mode=session.play_mode,
            time_left=session.time_left,
            max_time=session.max_time,
            is_paused=self.is_paused,
            selection_sum=selection_sum(session.selected_ids, blocks),
        )

    # ------------------------------------------------------------------
    # Player intents
    # ------------------------------------------------------------------

    def start(self, mode: PlayMode | str, *, press_id: int | None = None) -> bool:
        """Begin a game from the menu or the game-over screen."""
        play_mode = PlayMode.parse(mode)
        if play_mode is None:
            return False
        if self.mode not in (GameMode.IDLE, GameMode.GAME_OVER):
            return False
        self._begin(play_mode, press_id=press_id)
        return True

    def reset(self, mode: PlayMode | str | None = None, *, press_id: int | None = None) -> bool:
        """Start over from any phase; ``None`` replays the current mode."""
        play_mode = PlayMode.parse(mode) if mode is not None else self.session.play_mode
        if play_mode is None:
            return False
        self._begin(play_mode, press_id=press_id)
        return True

    def toggle_select(self, block_id: str) -> None:
        if self.mode != GameMode.ACTIVE:
            return
        if not isinstance(block_id, str) or not self.grid.has_block(block_id):
            return
        selected = self.session.selected_ids
        if block_id in selected:
            selected.remove(block_id)
        else:
            selected.append(block_id)
        self.on_selection_changed()
        self._publish()

    def on_selection_changed(self) -> MatchOutcome:
        """Evaluate the current selection and apply the resulting transition."""
        session = self.session
        blocks = self.grid.blocks()
        present = {view.block_id for view in blocks}
        session.selected_ids[:] = [block_id for block_id in session.selected_ids if block_id in present]
        total = selection_sum(session.selected_ids, blocks)
        self.event_bus.emit(
            EVENT_SELECTION_CHANGED,
            selected_ids=list(session.selected_ids),
            total=total,
        )
        outcome = evaluate_selection(session.selected_ids, blocks, session.target)
        if outcome is MatchOutcome.SUCCESS:
            self._resolve_match()
        elif outcome is MatchOutcome.OVERSHOOT:
            overshot = list(session.selected_ids)
            session.selected_ids.clear()
            self.event_bus.emit(
                EVENT_SELECTION_OVERSHOOT,
                block_ids=overshot,
                total=total,
                target=session.target,
            )
        return outcome

    def toggle_pause(self) -> None:
        session = self.session
        if self.mode == GameMode.ACTIVE:
            self.clock.disarm()
            set_game_mode(self.world, self.event_bus, GameMode.PAUSED)
        elif self.mode == GameMode.PAUSED:
            set_game_mode(self.world, self.event_bus, GameMode.ACTIVE)
            if session.play_mode is PlayMode.TIMED:
                self.clock.arm()
        else:
            return
        self._publish()

    def exit_to_menu(self, *, press_id: int | None = None) -> None:
        self.clock.disarm()
        self.grid.clear()
        session = self.session
        session.play_mode = None
        session.score = 0
        session.target = 0
        session.time_left = session.max_time
        session.selected_ids.clear()
        set_game_mode(self.world, self.event_bus, GameMode.IDLE, input_guard_press_id=press_id)
        self._publish()

    # ------------------------------------------------------------------
    # Clock
    # ------------------------------------------------------------------

    def on_clock_tick(self) -> None:
        session = self.session
        if self.mode != GameMode.ACTIVE or session.play_mode is not PlayMode.TIMED:
            return
        session.time_left -= 1
        if session.time_left <= 0:
            self._inject_row(reason="timer")
            session.time_left = session.max_time
        self._emit_timer()
        self._publish()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _begin(self, play_mode: PlayMode, *, press_id: int | None = None) -> None:
        self.clock.disarm()
        session = self.session
        session.play_mode = play_mode
        session.score = 0
        session.selected_ids.clear()
        session.time_left = session.max_time
        blocks = self.grid.build_initial_grid()
        self._set_target(blocks)
        set_game_mode(self.world, self.event_bus, GameMode.ACTIVE, input_guard_press_id=press_id)
        if play_mode is PlayMode.TIMED:
            self.clock.arm()
        logger.info("Started %s game (target %d)", play_mode.value, session.target)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=0)
        self._emit_timer()
        self._publish()

    def _resolve_match(self) -> None:
        session = self.session
        matched = list(session.selected_ids)
        target = session.target
        points = len(matched) * POINTS_PER_BLOCK
        self._award(points)
        remaining = self.grid.remove_blocks(matched)
        session.selected_ids.clear()
        logger.debug("Matched %s for target %d (+%d)", matched, target, points)
        self.event_bus.emit(EVENT_MATCH_SUCCESS, block_ids=matched, points=points, target=target)
        self._set_target(remaining)
        if session.play_mode is PlayMode.CLASSIC:
            self._inject_row(reason="match")
        elif session.play_mode is PlayMode.TIMED:
            session.time_left = session.max_time
            self._emit_timer()

    def _inject_row(self, reason: str) -> bool:
        if self.grid.is_full():
            self._enter_game_over(reason)
            return False
        self.grid.fill_fresh_bottom_row(reason=reason)
        return True

    def _enter_game_over(self, reason: str) -> None:
        self.clock.disarm()
        session = self.session
        session.selected_ids.clear()
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        logger.info("Game over (%s): score %d, best %d", reason, session.score, session.high_score)
        self.event_bus.emit(
            EVENT_GAME_OVER,
            score=session.score,
            high_score=session.high_score,
            reason=reason,
        )

    def _set_target(self, blocks: List[BlockView]) -> None:
        session = self.session
        session.target = generate_target(blocks, self.random_source)
        self.event_bus.emit(EVENT_TARGET_CHANGED, target=session.target)

    def _award(self, points: int) -> None:
        if points <= 0:
            return
        session = self.session
        session.score += points
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=session.score, delta=points)
        if session.score > session.high_score:
            session.high_score = session.score
            self._persist_high_score(session.high_score)
            self.event_bus.emit(EVENT_HIGH_SCORE_CHANGED, high_score=session.high_score)

    def _persist_high_score(self, score: int) -> None:
        try:
            self.high_score_store.save(score)
        except StorageUnavailable as exc:
            logger.warning("Could not persist high score %d: %s", score, exc)

    def _emit_timer(self) -> None:
        session = self.session
        self.event_bus.emit(EVENT_TIMER_CHANGED, time_left=session.time_left, max_time=session.max_time)

    def _publish(self) -> None:
        self.event_bus.emit(EVENT_SESSION_CHANGED, snapshot=self.snapshot())

    # Event handlers -----------------------------------------------------

    def _on_mode_chosen(self, sender: Any, **payload: Any) -> None:
        self.start(payload.get("mode"), press_id=payload.get("press_id"))

    def _on_block_toggle(self, sender: Any, **payload: Any) -> None:
        self.toggle_select(payload.get("block_id"))

    def _on_pause_toggle(self, sender: Any, **payload: Any) -> None:
        self.toggle_pause()

    def _on_restart(self, sender: Any, **payload: Any) -> None:
        if self.mode == GameMode.IDLE:
            return
        self.reset(payload.get("mode"), press_id=payload.get("press_id"))

    def _on_exit_to_menu(self, sender: Any, **payload: Any) -> None:
        self.exit_to_menu(press_id=payload.get("press_id"))

    def _on_clock_second(self, sender: Any, **payload: Any) -> None:
        self.on_clock_tick()
