from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float (host frame)
EVENT_CLOCK_SECOND = "clock_second"        # payload: elapsed=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers


# ============================================================================
# PLAYER INTENTS
# ============================================================================
EVENT_MODE_CHOSEN = "mode_chosen"          # payload: mode=PlayMode|str
EVENT_BLOCK_TOGGLE = "block_toggle"        # payload: block_id=str
EVENT_PAUSE_TOGGLE = "pause_toggle"        # payload: None
EVENT_RESTART = "restart"                  # payload: mode=PlayMode|str|None, press_id=int|None
EVENT_EXIT_TO_MENU = "exit_to_menu"        # payload: press_id=int|None


# ============================================================================
# GRID & MATCHING
# ============================================================================
EVENT_SELECTION_CHANGED = "selection_changed"      # payload: selected_ids=list[str], total=int
EVENT_MATCH_SUCCESS = "match_success"              # payload: block_ids=list[str], points=int, target=int
EVENT_SELECTION_OVERSHOOT = "selection_overshoot"  # payload: block_ids=list[str], total=int, target=int
EVENT_TARGET_CHANGED = "target_changed"            # payload: target=int
EVENT_ROW_INJECTED = "row_injected"                # payload: block_ids=list[str], reason=str


# ============================================================================
# SESSION & SCORE
# ============================================================================
EVENT_TIMER_CHANGED = "timer_changed"              # payload: time_left=int, max_time=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_HIGH_SCORE_CHANGED = "high_score_changed"    # payload: high_score=int
EVENT_GAME_OVER = "game_over"                      # payload: score=int, high_score=int, reason=str
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode, new_mode, input_guard_press_id
EVENT_SESSION_CHANGED = "session_changed"          # payload: snapshot=SessionSnapshot
