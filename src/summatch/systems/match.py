from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Sequence

from summatch.components.block import BlockView


class MatchOutcome(Enum):
    SUCCESS = auto()
    OVERSHOOT = auto()
    PENDING = auto()


def selection_sum(selected_ids: Iterable[str], blocks: Sequence[BlockView]) -> int:
    """Total value of the selected blocks; ids missing from ``blocks`` count for nothing."""
    wanted = set(selected_ids)
    return sum(view.value for view in blocks if view.block_id in wanted)


def evaluate_selection(
    selected_ids: Iterable[str],
    blocks: Sequence[BlockView],
    target: int,
) -> MatchOutcome:
    total = selection_sum(selected_ids, blocks)
    if total == target and target > 0:
        return MatchOutcome.SUCCESS
    if total > target:
        return MatchOutcome.OVERSHOOT
    return MatchOutcome.PENDING
