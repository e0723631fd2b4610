"""Reachability analysis over the walking adjacency.

Iterative flood fill (BFS) from a start tile across non-wall tiles, keeping the
per-tile distance so the dungeon goal can be placed as far from the start as
the connected component allows.
"""
from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Mapping, Optional

from .grid import Grid
from .tiles import Coord2D

_DIRS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


@dataclass(frozen=True)
class ReachableSet:
    start: Optional[Coord2D]
    positions: FrozenSet[Coord2D] = frozenset()
    distances: Mapping[Coord2D, int] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        # Read-only copy; hashing and equality go through start and positions.
        object.__setattr__(self, "distances", MappingProxyType(dict(self.distances)))

    def __contains__(self, pos: object) -> bool:
        return pos in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Coord2D]:
        # Sorted so callers that sample from it stay deterministic per seed.
        return iter(sorted(self.positions))

    def distance(self, pos: Coord2D) -> Optional[int]:
        return self.distances.get(pos)

    @property
    def max_distance(self) -> int:
        return max(self.distances.values(), default=0)


def compute_reachable(grid: Grid, start: Coord2D) -> ReachableSet:
    sx, sy = start
    if not grid.in_bounds(sx, sy) or grid.is_wall(sx, sy):
        return ReachableSet(start=start)
    dist: Dict[Coord2D, int] = {start: 0}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in _DIRS:
            nx, ny = cx + dx, cy + dy
            if (nx, ny) in dist:
                continue
            if grid.in_bounds(nx, ny) and not grid.is_wall(nx, ny):
                dist[(nx, ny)] = dist[(cx, cy)] + 1
                q.append((nx, ny))
    return ReachableSet(start=start, positions=frozenset(dist), distances=dist)


def farthest_positions(reachable: ReachableSet) -> List[Coord2D]:
    """All tiles at the maximum BFS distance; empty when only the start is reachable."""
    best = reachable.max_distance
    if best <= 0:
        return []
    return sorted(p for p, d in reachable.distances.items() if d == best)


def pick_farthest(reachable: ReachableSet, rng=None) -> Optional[Coord2D]:
    if rng is None:
        rng = random
    candidates = farthest_positions(reachable)
    if not candidates:
        return None
    return candidates[rng.randrange(len(candidates))]


__all__ = ["ReachableSet", "compute_reachable", "farthest_positions", "pick_farthest"]
