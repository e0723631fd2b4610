"""Play session: applies player input with the same movement rules the generator verified."""
from __future__ import annotations

import random
from typing import Optional

from .config import GeneratorSettings
from .generation.difficulty import LayoutVariant
from .generation.generator import generate
from .generation.movement import MoveOutcome, movement_for
from .generation.placement import EntityPlacement, place_entities
from .generation.tiles import DIRECTIONS
from .logging_utils import get_logger

log = get_logger("session")


class LevelSession:
    """One run through successive levels of a single variant.

    The session owns its rng; levels are regenerated from it whenever the goal
    is reached or the run is reset.
    """

    def __init__(self, variant=LayoutVariant.TILT, rng=None, settings: Optional[GeneratorSettings] = None):
        self.variant = LayoutVariant(getattr(variant, "value", variant))
        self.rng = rng if rng is not None else random.Random()
        self.settings = settings or GeneratorSettings()
        self._step = movement_for(self.variant)
        self.level_index = 0
        self.total_moves = 0
        self.levels_completed = 0
        self.moves = 0
        self.entities = EntityPlacement()
        self._load_level()

    def _load_level(self) -> None:
        self.level = generate(self.level_index, self.rng, self.variant, self.settings)
        self.position = self.level.start
        self.moves = 0
        if self.variant is LayoutVariant.DUNGEON:
            self.entities = place_entities(self.level, self.rng)
        else:
            self.entities = EntityPlacement()

    def move(self, direction_name: str) -> MoveOutcome:
        """Apply one input. Moves that leave the position unchanged are not counted."""
        try:
            direction = DIRECTIONS[direction_name.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"unknown direction {direction_name!r}") from None
        outcome = self._step(self.level.grid, self.position, direction)
        if outcome.final_position == self.position:
            return outcome
        self.position = outcome.final_position
        self.moves += 1
        self.total_moves += 1
        if outcome.reached_goal:
            log.info(
                event="level_completed",
                variant=self.variant.value,
                level=self.level_index,
                moves=self.moves,
                par=self.level.solution_length,
            )
            self.levels_completed += 1
            self.level_index += 1
            self._load_level()
        return outcome

    def reset(self) -> None:
        """Start a new run at level 0."""
        self.level_index = 0
        self.total_moves = 0
        self.levels_completed = 0
        self._load_level()


__all__ = ["LevelSession"]
