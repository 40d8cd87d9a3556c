"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """High-level session phases that gate which inputs are honoured."""
    IDLE = auto()
    ACTIVE = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class PlayMode(Enum):
    """Progression rule chosen from the menu."""
    CLASSIC = "classic"
    TIMED = "timed"

    @classmethod
    def parse(cls, value) -> "PlayMode | None":
        """Accept a PlayMode or its string value; anything else yields None."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            # The original web build called timed mode "time".
            if lowered == "time":
                return cls.TIMED
            for mode in cls:
                if mode.value == lowered:
                    return mode
        return None


@dataclass
class GameState:
    """Singleton component storing the current session phase.

    ``input_guard_press_id`` names the mouse press that caused the last phase
    change so board input can skip that same press.
    """
    mode: GameMode = GameMode.IDLE
    input_guard_press_id: Optional[int] = None
