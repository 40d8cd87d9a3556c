from dataclasses import dataclass

from summatch.constants import GRID_COLS, GRID_ROWS, INITIAL_ROWS, MAX_VALUE, MIN_VALUE
from summatch.errors import ConfigurationError

@dataclass(slots=True)
class Board:
    """Singleton component holding the grid dimensions and value bounds.

    Row 0 is the top of the stack; new rows enter at ``rows - 1``.
    """
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    min_value: int = MIN_VALUE
    max_value: int = MAX_VALUE
    initial_rows: int = INITIAL_ROWS

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError(
                f"board needs at least one row and column, got {self.rows}x{self.cols}"
            )
        if self.min_value < 1:
            raise ConfigurationError(f"block values must be positive, got min_value={self.min_value}")
        if self.min_value > self.max_value:
            raise ConfigurationError(
                f"min_value {self.min_value} exceeds max_value {self.max_value}"
            )
        if not 0 <= self.initial_rows <= self.rows:
            raise ConfigurationError(
                f"initial_rows must lie in [0, {self.rows}], got {self.initial_rows}"
            )

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def bottom_row(self) -> int:
        return self.rows - 1
