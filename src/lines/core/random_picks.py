from __future__ import annotations

import random
from typing import List, Sequence, TypeVar

from lines.core.grid import PALETTE, Color

T = TypeVar("T")


class EmptySourceSet(ValueError):
    """Raised when more random picks are requested than candidates exist."""

    def __init__(self, requested: int, available: int):
        super().__init__(f"Cannot pick {requested} item(s) from {available} candidate(s)")
        self.requested = requested
        self.available = available


def _rng(rng: random.Random | None) -> random.Random:
    return rng if isinstance(rng, random.Random) else random.Random()


def pick_one(items: Sequence[T], rng: random.Random | None = None) -> T:
    if not items:
        raise EmptySourceSet(1, 0)
    return _rng(rng).choice(items)


def pick_distinct(items: Sequence[T], k: int, rng: random.Random | None = None) -> List[T]:
    """Return k different elements of items, chosen uniformly without replacement."""
    if k < 0:
        raise ValueError(f"Pick count must not be negative, got {k}")
    if k > len(items):
        raise EmptySourceSet(k, len(items))
    return _rng(rng).sample(list(items), k)


def random_color(rng: random.Random | None = None, palette: Sequence[Color] | None = None) -> Color:
    """Uniform choice among the non-empty colors."""
    return pick_one(list(palette) if palette else PALETTE, rng)
