from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from esper import World

from summatch.components.block import Block, BlockView
from summatch.components.board import Board
from summatch.components.board_position import BoardPosition
from summatch.events.bus import EVENT_ROW_INJECTED, EventBus
from summatch.utils.random_source import RandomSource

logger = logging.getLogger(__name__)


class GridSystem:
    """Owns the block entities: row generation, the rising stack and removals.

    Blocks never fall. A removed block leaves a hole that stays until the
    stack shifts past it.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        random_source: RandomSource | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.random_source = random_source or getattr(world, "random_source", None) or RandomSource()
        self.board_entity = self._ensure_board_entity()

    def _ensure_board_entity(self) -> int:
        existing = list(self.world.get_component(Board))
        if existing:
            return existing[0][0]
        return self.world.create_entity(Board())

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def blocks(self) -> List[BlockView]:
        """Snapshot of the grid ordered top-to-bottom, left-to-right."""
        views = [
            BlockView(block.block_id, block.value, pos.row, pos.col)
            for _, (block, pos) in self.world.get_components(Block, BoardPosition)
        ]
        views.sort(key=lambda view: (view.row, view.col))
        return views

    def block_at(self, row: int, col: int) -> Optional[BlockView]:
        for _, (block, pos) in self.world.get_components(Block, BoardPosition):
            if pos.row == row and pos.col == col:
                return BlockView(block.block_id, block.value, pos.row, pos.col)
        return None

    def has_block(self, block_id: str) -> bool:
        return self._entity_for(block_id) is not None

    def is_full(self) -> bool:
        """True when any block sits on the top row, i.e. one more shift would overflow."""
        return any(pos.row == 0 for _, pos in self.world.get_component(BoardPosition))

    def _entity_for(self, block_id: str) -> Optional[int]:
        for ent, block in self.world.get_component(Block):
            if block.block_id == block_id:
                return ent
        return None

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_row(self, row_index: int) -> List[BlockView]:
        """Fresh full row for ``row_index``. Nothing is added to the world."""
        board = self.board
        return [
            BlockView(
                block_id=self.random_source.next_id(),
                value=self.random_source.next_int(board.min_value, board.max_value),
                row=row_index,
                col=col,
            )
            for col in range(board.cols)
        ]

    def spawn(self, views: Iterable[BlockView]) -> List[int]:
        board = self.board
        occupied = {(pos.row, pos.col) for _, pos in self.world.get_component(BoardPosition)}
        pending = list(views)
        for view in pending:
            if not board.contains(view.row, view.col):
                raise ValueError(f"block {view.block_id} outside board at ({view.row}, {view.col})")
            if (view.row, view.col) in occupied:
                raise ValueError(f"cell ({view.row}, {view.col}) already occupied")
            occupied.add((view.row, view.col))
        return [
            self.world.create_entity(
                Block(block_id=view.block_id, value=view.value),
                BoardPosition(row=view.row, col=view.col),
            )
            for view in pending
        ]

    def clear(self) -> None:
        for ent, _ in list(self.world.get_component(Block)):
            self.world.delete_entity(ent, immediate=True)

    def build_initial_grid(self, initial_rows: int | None = None) -> List[BlockView]:
        """Reset to ``initial_rows`` full rows stacked up from the bottom."""
        board = self.board
        count = board.initial_rows if initial_rows is None else initial_rows
        count = max(0, min(int(count), board.rows))
        self.clear()
        for offset in range(count):
            self.spawn(self.generate_row(board.bottom_row - offset))
        return self.blocks()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def shift_up(self) -> None:
        for _, pos in self.world.get_component(BoardPosition):
            pos.row -= 1

    def fill_fresh_bottom_row(self, reason: str = "row_injection") -> List[BlockView]:
        """Raise the stack one row and fill the bottom; returns the whole grid afterwards."""
        self.shift_up()
        new_row = self.generate_row(self.board.bottom_row)
        self.spawn(new_row)
        logger.debug("Injected row (%s): %s", reason, [view.value for view in new_row])
        self.event_bus.emit(
            EVENT_ROW_INJECTED,
            block_ids=[view.block_id for view in new_row],
            reason=reason,
        )
        return self.blocks()

    def remove_blocks(self, block_ids: Iterable[str]) -> List[BlockView]:
        doomed = set(block_ids)
        for ent, block in list(self.world.get_component(Block)):
            if block.block_id in doomed:
                self.world.delete_entity(ent, immediate=True)
        return self.blocks()
