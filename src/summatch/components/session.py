from dataclasses import dataclass, field
from typing import List, Optional

from summatch.components.game_state import PlayMode
from summatch.constants import MAX_TIME


@dataclass
class Session:
    """Singleton component with the per-game counters and the player's selection.

    ``high_score`` outlives individual games; everything else is rebuilt by
    ``SessionSystem.start``.
    """
    play_mode: Optional[PlayMode] = None
    score: int = 0
    high_score: int = 0
    target: int = 0
    time_left: int = MAX_TIME
    max_time: int = MAX_TIME
    selected_ids: List[str] = field(default_factory=list)
