"""Movement models: the single source of truth for how an actor moves.

Both the solver and ``LevelSession.move`` call these functions, so whatever the
generator proves solvable is exactly what a player can do.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from .grid import Grid
from .tiles import GOAL, Coord2D


class MoveOutcome(NamedTuple):
    final_position: Coord2D
    reached_goal: bool


MovementModel = Callable[[Grid, Coord2D, Coord2D], MoveOutcome]


def walk_step(grid: Grid, position: Coord2D, direction: Coord2D) -> MoveOutcome:
    """Move exactly one tile; walls and the grid edge block the move."""
    x, y = position
    dx, dy = direction
    nx, ny = x + dx, y + dy
    if not grid.in_bounds(nx, ny) or grid.is_wall(nx, ny):
        return MoveOutcome(position, False)
    return MoveOutcome((nx, ny), grid[nx][ny] == GOAL)


def tilt_step(grid: Grid, position: Coord2D, direction: Coord2D) -> MoveOutcome:
    """Slide until a wall or edge blocks the next tile; entering the goal stops the slide."""
    x, y = position
    dx, dy = direction
    while True:
        nx, ny = x + dx, y + dy
        if not grid.in_bounds(nx, ny) or grid.is_wall(nx, ny):
            break
        x, y = nx, ny
        if grid[x][y] == GOAL:
            break
    return MoveOutcome((x, y), grid.tile(x, y) == GOAL)


def movement_for(variant) -> MovementModel:
    """Movement model used by a layout variant (``LayoutVariant`` or its string value)."""
    value = getattr(variant, "value", variant)
    if value == "tilt":
        return tilt_step
    if value == "dungeon":
        return walk_step
    raise ValueError(f"unknown layout variant {variant!r}")


__all__ = ["MoveOutcome", "MovementModel", "walk_step", "tilt_step", "movement_for"]
