from dataclasses import dataclass
from enum import Enum, auto


class ControlAction(Enum):
    PAUSE = auto()
    RESTART = auto()
    EXIT = auto()
    RETRY = auto()
    MENU = auto()


@dataclass(slots=True)
class ControlButton:
    """Clickable in-game button, centred on (x, y) in window coordinates."""
    label: str
    action: ControlAction
    x: float
    y: float
    width: float = 140.0
    height: float = 44.0

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x - self.width / 2 <= x <= self.x + self.width / 2
            and self.y - self.height / 2 <= y <= self.y + self.height / 2
        )


@dataclass(slots=True)
class GameOverChoice:
    """Marks a button that belongs to the game-over card."""

    action: ControlAction = ControlAction.MENU


@dataclass(slots=True)
class ControlTag:
    """Marker so every in-game control can be cleared together."""
