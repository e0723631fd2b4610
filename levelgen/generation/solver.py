"""Move-level BFS solver.

Nodes are positions, edges are one ``step()`` call per direction. A single
tilt can cross many tiles, so tile adjacency says nothing about tilt
solvability; this search uses the real movement model instead.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Tuple

from .grid import Grid
from .movement import MovementModel, tilt_step
from .tiles import DIRECTIONS, GOAL, Coord2D


def solve(grid: Grid, start: Coord2D, movement: MovementModel = tilt_step) -> Optional[List[str]]:
    """Shortest sequence of direction names from ``start`` to the goal, or None if unsolvable."""
    if grid.find(GOAL) is None:
        return None
    sx, sy = start
    if not grid.in_bounds(sx, sy):
        return None
    if grid[sx][sy] == GOAL:
        return []
    parents: Dict[Coord2D, Tuple[Coord2D, str]] = {}
    visited = {start}
    q = deque([start])

    def path_to(pos: Coord2D) -> List[str]:
        path: List[str] = []
        while pos != start:
            pos, name = parents[pos]
            path.append(name)
        path.reverse()
        return path

    while q:
        pos = q.popleft()
        for name, direction in DIRECTIONS.items():
            outcome = movement(grid, pos, direction)
            if outcome.reached_goal:
                # Goal counts even if that tile was visited before.
                return path_to(pos) + [name]
            nxt = outcome.final_position
            if nxt == pos or nxt in visited:
                continue
            visited.add(nxt)
            parents[nxt] = (pos, name)
            q.append(nxt)
    return None


def shortest_solution_length(grid: Grid, start: Coord2D, movement: MovementModel = tilt_step) -> Optional[int]:
    """Minimum number of moves from start to goal; None means unsolvable."""
    path = solve(grid, start, movement)
    if path is None:
        return None
    return len(path)


def is_solvable(grid: Grid, start: Coord2D, movement: MovementModel = tilt_step) -> bool:
    return solve(grid, start, movement) is not None


__all__ = ["solve", "shortest_solution_length", "is_solvable"]
