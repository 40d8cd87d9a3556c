from __future__ import annotations

import logging
from typing import Any

from summatch.constants import CLOCK_INTERVAL
from summatch.events.bus import EVENT_CLOCK_SECOND, EVENT_TICK, EventBus

logger = logging.getLogger(__name__)


class ClockSystem:
    """Turns host frame ticks into whole-second ticks while armed.

    ``disarm()`` drops any partially accumulated second, and a frame that
    spans several seconds stops emitting as soon as a listener disarms.
    """

    def __init__(self, event_bus: EventBus, *, interval: float = CLOCK_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError(f"clock interval must be positive, got {interval}")
        self.event_bus = event_bus
        self.interval = float(interval)
        self._armed = False
        self._accumulated = 0.0
        self._elapsed = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def elapsed(self) -> float:
        """Seconds accumulated since the last ``arm()``."""
        return self._elapsed

    def arm(self) -> None:
        self._armed = True
        self._accumulated = 0.0
        self._elapsed = 0.0
        logger.debug("Clock armed (interval %.2fs)", self.interval)

    def disarm(self) -> None:
        if self._armed:
            logger.debug("Clock disarmed after %.2fs", self._elapsed)
        self._armed = False
        self._accumulated = 0.0

    def on_tick(self, sender: Any, **payload: Any) -> None:
        if not self._armed:
            return
        try:
            dt = float(payload.get("dt", 0.0))
        except (TypeError, ValueError):
            return
        if dt <= 0.0:
            return
        self._accumulated += dt
        self._elapsed += dt
        while self._armed and self._accumulated >= self.interval:
            self._accumulated -= self.interval
            self.event_bus.emit(EVENT_CLOCK_SECOND, elapsed=self._elapsed)
