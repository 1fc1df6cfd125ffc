from __future__ import annotations

from lines.core.grid import PALETTE, Color, Coord, Grid, InvalidCoordinate, manhattan_distance
from lines.core.line_matcher import Direction, DirectionResult, matched_cells, scan_runs
from lines.core.pathfinder import find_path
from lines.core.random_picks import EmptySourceSet, pick_distinct, pick_one, random_color
from lines.core.scoring import COMBO_BASE, compute_score, next_combo

__all__ = [
    "COMBO_BASE",
    "Color",
    "Coord",
    "Direction",
    "DirectionResult",
    "EmptySourceSet",
    "Grid",
    "InvalidCoordinate",
    "PALETTE",
    "compute_score",
    "find_path",
    "manhattan_distance",
    "matched_cells",
    "next_combo",
    "pick_distinct",
    "pick_one",
    "random_color",
    "scan_runs",
]
