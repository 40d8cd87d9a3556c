from __future__ import annotations

from typing import List, Sequence

from summatch.components.block import BlockView
from summatch.constants import DEFAULT_TARGET, TARGET_MAX_BLOCKS, TARGET_MIN_BLOCKS
from summatch.utils.random_source import RandomSource


def pick_target_basis(blocks: Sequence[BlockView], random_source: RandomSource) -> List[BlockView]:
    """Blocks whose values make up the next target; empty when the grid is empty."""
    if not blocks:
        return []
    count = random_source.next_int(TARGET_MIN_BLOCKS, TARGET_MAX_BLOCKS)
    return random_source.pick_distinct(blocks, min(count, len(blocks)))


def generate_target(blocks: Sequence[BlockView], random_source: RandomSource) -> int:
    """Sum of 2-4 distinct blocks drawn from ``blocks``.

    The target is reachable on the grid it was drawn from. Later removals may
    take that away; no attempt is made to keep it reachable.
    """
    basis = pick_target_basis(blocks, random_source)
    if not basis:
        return DEFAULT_TARGET
    return sum(view.value for view in basis)
