from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from summatch.components.block import BlockView
from summatch.components.game_state import PlayMode
from summatch.constants import SCORE_LABEL_DIGITS, TIME_CRITICAL_THRESHOLD


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a renderer needs for one frame. Never mutated after creation."""

    grid: Tuple[BlockView, ...]
    target: int
    score: int
    high_score: int
    game_over: bool
    selected_ids: Tuple[str, ...]
    mode: PlayMode | None
    time_left: int
    max_time: int
    is_paused: bool
    selection_sum: int = 0

    @property
    def time_fraction(self) -> float:
        if self.max_time <= 0:
            return 0.0
        return max(0.0, min(1.0, self.time_left / self.max_time))

    @property
    def time_critical(self) -> bool:
        return self.mode is PlayMode.TIMED and self.time_left < TIME_CRITICAL_THRESHOLD

    @property
    def score_label(self) -> str:
        return str(self.score).zfill(SCORE_LABEL_DIGITS)

    def is_selected(self, block_id: str) -> bool:
        return block_id in self.selected_ids
