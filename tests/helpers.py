from __future__ import annotations

import itertools
import random
from collections import deque
from typing import Iterable, Sequence

from esper import World

from summatch.components.block import BlockView
from summatch.components.board import Board
from summatch.events.bus import EventBus
from summatch.systems.clock import ClockSystem
from summatch.systems.grid import GridSystem
from summatch.systems.session import SessionSystem
from summatch.utils.high_score_store import MemoryHighScoreStore
from summatch.utils.random_source import RandomSource
from summatch.world import create_world


class ScriptedRandomSource(RandomSource):
    """RandomSource whose integers come from a script; falls back to a seeded rng once exhausted."""

    def __init__(self, ints: Iterable[int] = (), *, seed: int = 0) -> None:
        super().__init__(random.Random(seed))
        self._ints = deque(ints)

    def next_int(self, lo: int, hi: int) -> int:
        if self._ints:
            value = self._ints.popleft()
            assert lo <= value <= hi, f"scripted {value} outside [{lo}, {hi}]"
            return value
        return super().next_int(lo, hi)

    def pick_distinct(self, items: Sequence, k: int) -> list:
        # Deterministic: the first k items in the order given.
        return list(items)[: max(0, min(k, len(items)))]


def make_session(
    mode=None,
    *,
    seed: int = 0,
    board: Board | None = None,
    store=None,
    random_source: RandomSource | None = None,
) -> tuple[EventBus, World, SessionSystem]:
    bus = EventBus()
    world = create_world(bus, board=board, rng=random.Random(seed))
    source = random_source or world.random_source
    clock = ClockSystem(bus)
    grid = GridSystem(world, bus, random_source=source)
    session = SessionSystem(
        world,
        bus,
        grid_system=grid,
        clock=clock,
        high_score_store=store if store is not None else MemoryHighScoreStore(),
        random_source=source,
    )
    if mode is not None:
        assert session.start(mode)
    return bus, world, session


def place_blocks(session: SessionSystem, layout: dict[str, tuple[int, int, int]]) -> None:
    """Replace the grid with ``{block_id: (value, row, col)}``."""
    session.grid.clear()
    session.grid.spawn(
        BlockView(block_id=block_id, value=value, row=row, col=col)
        for block_id, (value, row, col) in layout.items()
    )


def find_subset(blocks: Sequence[BlockView], target: int, max_size: int = 4) -> list[BlockView] | None:
    for size in range(1, max_size + 1):
        for combo in itertools.combinations(blocks, size):
            if sum(view.value for view in combo) == target:
                return list(combo)
    return None


class Recorder:
    """Collects payloads emitted for one event name."""

    def __init__(self, bus: EventBus, name: str) -> None:
        self.calls: list[dict] = []
        bus.subscribe(name, self)

    def __call__(self, sender, **payload) -> None:
        self.calls.append(payload)

    def __len__(self) -> int:
        return len(self.calls)
