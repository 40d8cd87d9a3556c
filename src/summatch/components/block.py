from dataclasses import dataclass

@dataclass(slots=True)
class Block:
    """Numbered tile. ``block_id`` never changes for the lifetime of the entity.

    Grid coordinates live in a separate BoardPosition component.
    """
    block_id: str
    value: int


@dataclass(frozen=True, slots=True)
class BlockView:
    """Read-only copy of a block and its position, handed to pure helpers and renderers."""
    block_id: str
    value: int
    row: int
    col: int
