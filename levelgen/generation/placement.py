"""Monster / loot placement on a generated level.

Candidates are the reachable tiles minus start and goal. Monsters take tiles
outside ``safe_radius`` (Manhattan) of the start first and only spill into the
near-start band when the far band runs out; loot takes what monsters left.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .tiles import Coord2D

__all__ = ["EntityPlacement", "place_entities"]


@dataclass(frozen=True)
class EntityPlacement:
    monsters: Tuple[Coord2D, ...] = ()
    loot: Tuple[Coord2D, ...] = ()

    def occupied(self) -> frozenset:
        return frozenset(self.monsters) | frozenset(self.loot)


def _manhattan(a: Coord2D, b: Coord2D) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _draw(rng, count_range: Tuple[int, int]) -> int:
    lo, hi = count_range
    if hi <= 0:
        return 0
    return rng.randint(max(0, lo), hi)


def place_entities(
    level,
    rng=None,
    monster_count: Optional[int] = None,
    loot_count: Optional[int] = None,
    safe_radius: int = 3,
) -> EntityPlacement:
    if rng is None:
        rng = random
    start, goal = level.start, level.goal
    # Sorted base order keeps the shuffles below reproducible for a seeded rng
    available: List[Coord2D] = [p for p in sorted(level.reachable) if p != start and p != goal]

    if monster_count is None:
        monster_count = _draw(rng, level.params.monster_count_range)
    if loot_count is None:
        loot_count = _draw(rng, level.params.loot_count_range)

    far = [p for p in available if _manhattan(p, start) > safe_radius]
    near = [p for p in available if _manhattan(p, start) <= safe_radius]
    rng.shuffle(far)
    rng.shuffle(near)
    monster_pool = far + near if len(far) < monster_count else far
    monsters = monster_pool[: max(0, min(monster_count, len(monster_pool)))]

    taken = set(monsters)
    loot_pool = [p for p in available if p not in taken]
    rng.shuffle(loot_pool)
    loot = loot_pool[: max(0, min(loot_count, len(loot_pool)))]
    return EntityPlacement(tuple(monsters), tuple(loot))
