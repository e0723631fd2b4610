"""Public generation package interface.

Grid model, movement rules, solvers and the generation controller.
"""

from .difficulty import GenerationParams, LayoutVariant, params_for, relax  # noqa: F401
from .generator import GeneratedLevel, GenerationPhase, generate  # noqa: F401
from .grid import Grid, GridCanvas  # noqa: F401
from .movement import MoveOutcome, movement_for, tilt_step, walk_step  # noqa: F401
from .placement import EntityPlacement, place_entities  # noqa: F401
from .reachability import ReachableSet, compute_reachable  # noqa: F401
from .solver import is_solvable, shortest_solution_length, solve  # noqa: F401
from .tiles import DIRECTIONS, FLOOR, GOAL, WALL  # noqa: F401

__all__ = [
    "GenerationParams",
    "LayoutVariant",
    "params_for",
    "relax",
    "GeneratedLevel",
    "GenerationPhase",
    "generate",
    "Grid",
    "GridCanvas",
    "MoveOutcome",
    "movement_for",
    "tilt_step",
    "walk_step",
    "EntityPlacement",
    "place_entities",
    "ReachableSet",
    "compute_reachable",
    "is_solvable",
    "shortest_solution_length",
    "solve",
    "DIRECTIONS",
    "FLOOR",
    "GOAL",
    "WALL",
]
