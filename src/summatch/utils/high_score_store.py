"""Persistence of the single best-score integer."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from summatch.constants import HIGH_SCORE_KEY
from summatch.errors import StorageUnavailable

logger = logging.getLogger(__name__)


def parse_score(raw) -> int:
    """Decode a stored score, falling back to 0 for anything that is not a non-negative integer."""
    if isinstance(raw, bool):
        return 0
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return 0
    return value if value >= 0 else 0


class HighScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score in memory; used headless and in tests."""

    def __init__(self, initial: int = 0, *, fail_writes: bool = False) -> None:
        self.value = parse_score(initial)
        self.fail_writes = fail_writes
        self.writes: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        if self.fail_writes:
            raise StorageUnavailable("memory store configured to reject writes")
        self.value = int(score)
        self.writes.append(int(score))


class JsonHighScoreStore:
    """One named key in a JSON file, value written as decimal text."""

    def __init__(self, path: Path | str | None = None, *, key: str = HIGH_SCORE_KEY) -> None:
        self._path = Path(path) if path is not None else self._default_path()
        self._key = key

    @staticmethod
    def _default_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / "high_score.json"

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> int:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return 0
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self._path, exc)
            return 0
        if not isinstance(payload, dict):
            return 0
        return parse_score(payload.get(self._key))

    def save(self, score: int) -> None:
        payload = {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                existing = json.load(handle)
            if isinstance(existing, dict):
                payload = existing
        except (OSError, json.JSONDecodeError, UnicodeDecodeError):
            pass
        payload[self._key] = str(int(score))
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
        except OSError as exc:
            raise StorageUnavailable(f"could not write {self._path}: {exc}") from exc
