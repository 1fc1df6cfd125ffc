from __future__ import annotations

import math
from typing import Dict, Iterable

from lines.core.line_matcher import DirectionResult

COMBO_BASE = 1.0

# Clearing along all four directions at once is a deliberate jackpot.
DIRECTION_COUNT_MULTIPLIERS: Dict[int, float] = {
    0: 0,
    1: 1,
    2: 1.5,
    3: 2.5,
    4: 69,
}


def length_multiplier(length: int, n: int) -> float:
    """Bonus for overshooting the minimum: +0.5 for every two extra pieces."""
    return 1 + math.floor((length - n) / 2) * 0.5


def compute_score(results: Iterable[DirectionResult], n: int, combo: float) -> int:
    """Score earned for one scan.

    Each direction counts as a single run of its whole accepted-cell list,
    even when that list was built from several separate runs.
    """
    total = 0.0
    dir_count = 0
    for result in results:
        if not result.status:
            continue
        dir_count += 1
        length = len(result.cells)
        total += length * length_multiplier(length, n)
    return math.floor(total * DIRECTION_COUNT_MULTIPLIERS[dir_count] * combo)


def next_combo(combo: float, growth: float = 1.5) -> float:
    return round(combo * growth, 2)
