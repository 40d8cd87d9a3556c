from __future__ import annotations

import itertools
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Seedable source of block values, target picks and block ids."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._ids = itertools.count(1)
        # Distinguishes ids minted by different sources sharing one world.
        self._prefix = format(self._rng.getrandbits(24), "06x")

    @property
    def rng(self) -> random.Random:
        return self._rng

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer in ``[lo, hi]`` inclusive."""
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return self._rng.randint(lo, hi)

    def pick_distinct(self, items: Sequence[T], k: int) -> list[T]:
        """Choose ``k`` items without replacement; ``k`` is clamped to ``len(items)``."""
        k = max(0, min(int(k), len(items)))
        return self._rng.sample(list(items), k)

    def next_id(self) -> str:
        return f"{self._prefix}-{next(self._ids):x}"
