"""Components used by the main menu ECS subsystem."""
from dataclasses import dataclass
from enum import Enum, auto


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    CLASSIC = auto()
    TIMED = auto()


@dataclass
class MenuButton:
    """Interactive button displayed in the main menu."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = 320.0
    height: float = 72.0
    caption: str = ""
    enabled: bool = True

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x - self.width / 2 <= x <= self.x + self.width / 2
            and self.y - self.height / 2 <= y <= self.y + self.height / 2
        )


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (9, 9, 11)


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
