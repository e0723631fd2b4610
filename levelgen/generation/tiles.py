from typing import Dict, Tuple

Coord2D = Tuple[int, int]

# Tile constants centralized for modular imports
WALL = "#"
FLOOR = "."
GOAL = "G"

TILE_KINDS = (WALL, FLOOR, GOAL)

# Screen orientation: y grows downward, so "up" is y-1.
DIRECTIONS: Dict[str, Coord2D] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

__all__ = ["Coord2D", "WALL", "FLOOR", "GOAL", "TILE_KINDS", "DIRECTIONS"]
