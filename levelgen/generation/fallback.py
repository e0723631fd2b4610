"""Hand-built layouts that are solvable by construction.

Used only when randomized generation and relaxed retries both run out.
"""
from __future__ import annotations

from typing import NamedTuple

from .grid import Grid, GridCanvas
from .tiles import FLOOR, GOAL, WALL, Coord2D


class FallbackLayout(NamedTuple):
    grid: Grid
    start: Coord2D
    goal: Coord2D


def build_tilt_fallback(width: int, height: int) -> FallbackLayout:
    """Open bordered board; start and goal face each other along the middle row."""
    canvas = GridCanvas(width, height, fill=WALL)
    for x, y in canvas.interior():
        canvas.set(x, y, FLOOR)
    canvas.add_border(WALL)
    start = (1, height // 2)
    goal = (width - 2, height // 2)
    canvas.set(goal[0], goal[1], GOAL)
    return FallbackLayout(canvas.freeze(), start, goal)


def build_dungeon_fallback(width: int, height: int) -> FallbackLayout:
    """One large room with start and goal in opposite interior corners."""
    canvas = GridCanvas(width, height, fill=WALL)
    canvas.fill_rect(2, 2, width - 4, height - 4, FLOOR)
    start = (3, 3)
    goal = (width - 3, height - 3)
    canvas.set(goal[0], goal[1], GOAL)
    return FallbackLayout(canvas.freeze(), start, goal)


__all__ = ["FallbackLayout", "build_tilt_fallback", "build_dungeon_fallback"]
