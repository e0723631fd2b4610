"""Density maze builder for the tilt game.

Bordered board, open interior, one goal, and independent wall placement on
every other interior cell with probability ``wall_density``.
"""
from __future__ import annotations

import random
from typing import Optional, Tuple

from .difficulty import GenerationParams
from .grid import Grid, GridCanvas
from .tiles import FLOOR, GOAL, WALL, Coord2D

MAX_PLACEMENT_TRIES = 100


def _acceptable_pair(start: Coord2D, goal: Coord2D, params: GenerationParams) -> bool:
    if start == goal:
        return False
    if params.forbid_aligned and (start[0] == goal[0] or start[1] == goal[1]):
        return False
    return abs(start[0] - goal[0]) + abs(start[1] - goal[1]) >= params.min_separation


def pick_start_goal(params: GenerationParams, rng=None) -> Optional[Tuple[Coord2D, Coord2D]]:
    """Rejection-sample two interior cells; None if no acceptable pair turned up."""
    if rng is None:
        rng = random
    hi_x, hi_y = params.width - 2, params.height - 2
    if hi_x < 1 or hi_y < 1:
        return None
    for _ in range(MAX_PLACEMENT_TRIES):
        start = (rng.randint(1, hi_x), rng.randint(1, hi_y))
        goal = (rng.randint(1, hi_x), rng.randint(1, hi_y))
        if _acceptable_pair(start, goal, params):
            return start, goal
    return None


def build_tilt_layout(params: GenerationParams, start: Coord2D, goal: Coord2D, rng=None) -> Grid:
    if rng is None:
        rng = random
    canvas = GridCanvas(params.width, params.height, fill=WALL)
    for x, y in canvas.interior():
        canvas.set(x, y, FLOOR)
    canvas.add_border(WALL)
    canvas.set(goal[0], goal[1], GOAL)
    for x, y in canvas.interior():
        if (x, y) == start or (x, y) == goal:
            continue
        if rng.random() < params.wall_density:
            canvas.set(x, y, WALL)
    return canvas.freeze()


__all__ = ["pick_start_goal", "build_tilt_layout", "MAX_PLACEMENT_TRIES"]
