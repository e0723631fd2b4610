"""
project: levelgen
module: __init__.py
License: MIT

Procedural level generation for grid mini-games: a tilt puzzle where the
piece slides until it hits a wall, and a room-and-corridor dungeon walked one
tile at a time. Every returned level is verified solvable / reachable.
"""

from .config import GeneratorSettings  # noqa: F401
from .errors import GenerationRejected, InvariantViolation, LevelGenError  # noqa: F401
from .generation import (  # noqa: F401
    GeneratedLevel,
    GenerationPhase,
    LayoutVariant,
    generate,
    place_entities,
)
from .session import LevelSession  # noqa: F401

__all__ = [
    "GeneratorSettings",
    "GenerationRejected",
    "InvariantViolation",
    "LevelGenError",
    "GeneratedLevel",
    "GenerationPhase",
    "LayoutVariant",
    "generate",
    "place_entities",
    "LevelSession",
]
