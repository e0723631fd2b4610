import random
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

from .difficulty import GenerationParams
from .grid import Grid, GridCanvas
from .tiles import FLOOR, WALL


@dataclass
class Room:
    x: int
    y: int
    w: int
    h: int

    def cells(self):
        for ix in range(self.x, self.x + self.w):
            for iy in range(self.y, self.y + self.h):
                yield ix, iy

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def overlaps(self, other: "Room") -> bool:
        return (
            self.x < other.x + other.w
            and self.x + self.w > other.x
            and self.y < other.y + other.h
            and self.y + self.h > other.y
        )


class DungeonLayout(NamedTuple):
    grid: Grid
    rooms: List[Room]
    target: int


def place_rooms(canvas: GridCanvas, params: GenerationParams, rng=None):
    """Place non-overlapping rooms onto the canvas.

    Returns (rooms, target_attempted, placed_count). Proposals are capped at
    three per targeted room; placement stops early once the target is met.
    """
    if rng is None:
        rng = random
    target = rng.randint(*params.room_count_range)
    attempts = target * 3
    rooms: List[Room] = []
    min_w, max_w = params.room_width_range
    min_h, max_h = params.room_height_range
    while len(rooms) < target and attempts > 0:
        attempts -= 1
        w = rng.randint(min_w, max_w)
        h = rng.randint(min_h, max_h)
        if canvas.width - w - 2 < 1 or canvas.height - h - 2 < 1:
            continue
        x = rng.randint(1, canvas.width - w - 2)
        y = rng.randint(1, canvas.height - h - 2)
        new_room = Room(x, y, w, h)
        if any(new_room.overlaps(r) for r in rooms):
            continue
        # carve interior
        for ix, iy in new_room.cells():
            canvas.set(ix, iy, FLOOR)
        rooms.append(new_room)
    return rooms, target, len(rooms)


def carve_corridor(canvas: GridCanvas, a: Room, b: Room) -> None:
    """L-shaped corridor: along a's centre row to b's centre column, then along that column."""
    x1, y1 = a.center
    x2, y2 = b.center
    for x in range(min(x1, x2), max(x1, x2) + 1):
        canvas.set(x, y1, FLOOR)
    for y in range(min(y1, y2), max(y1, y2) + 1):
        canvas.set(x2, y, FLOOR)


def connect_rooms(canvas: GridCanvas, rooms: List[Room]) -> int:
    # Insertion order only; overall connectivity is checked afterwards by the controller.
    for a, b in zip(rooms, rooms[1:]):
        carve_corridor(canvas, a, b)
    return max(0, len(rooms) - 1)


def build_dungeon_layout(params: GenerationParams, rng=None) -> DungeonLayout:
    canvas = GridCanvas(params.width, params.height, fill=WALL)
    rooms, target, _placed = place_rooms(canvas, params, rng)
    connect_rooms(canvas, rooms)
    return DungeonLayout(canvas.freeze(), rooms, target)


__all__ = ["Room", "DungeonLayout", "place_rooms", "carve_corridor", "connect_rooms", "build_dungeon_layout"]
