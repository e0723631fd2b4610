"""Grid primitives shared by every layout builder and analyzer.

``Grid`` is immutable: builders paint into a ``GridCanvas`` and freeze it, and
later edits (placing the goal) go through ``Grid.with_tiles`` which returns a
new grid. Storage is column-major (``grid[x][y]``) like the rest of the code.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .tiles import FLOOR, GOAL, TILE_KINDS, WALL, Coord2D


class Grid:
    __slots__ = ("_cols", "_width", "_height")

    def __init__(self, columns: Sequence[Sequence[str]]):
        cols = tuple(tuple(col) for col in columns)
        if not cols or not cols[0]:
            raise ValueError("grid must be at least 1x1")
        height = len(cols[0])
        for col in cols:
            if len(col) != height:
                raise ValueError("grid columns must share one height")
            for t in col:
                if t not in TILE_KINDS:
                    raise ValueError(f"unknown tile {t!r}")
        self._cols: Tuple[Tuple[str, ...], ...] = cols
        self._width = len(cols)
        self._height = height

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def filled(cls, width: int, height: int, kind: str = WALL) -> "Grid":
        return cls([[kind] * height for _ in range(width)])

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Build from row strings (``rows[y][x]``), the layout used in tests and dumps."""
        if not rows:
            raise ValueError("grid must be at least 1x1")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("rows must share one width")
        return cls([[rows[y][x] for y in range(len(rows))] for x in range(width)])

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def __getitem__(self, x: int) -> Tuple[str, ...]:
        return self._cols[x]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cols == other._cols

    def __hash__(self) -> int:
        return hash(self._cols)

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def tile(self, x: int, y: int) -> str:
        """Tile at (x, y); anything outside the grid reads as WALL."""
        if not self.in_bounds(x, y):
            return WALL
        return self._cols[x][y]

    def is_wall(self, x: int, y: int) -> bool:
        return self.tile(x, y) == WALL

    def is_open(self, x: int, y: int) -> bool:
        return self.tile(x, y) != WALL

    def positions(self, kind: Optional[str] = None) -> Iterator[Coord2D]:
        for x in range(self._width):
            for y in range(self._height):
                if kind is None or self._cols[x][y] == kind:
                    yield (x, y)

    def find(self, kind: str) -> Optional[Coord2D]:
        for pos in self.positions(kind):
            return pos
        return None

    def count(self, kind: str) -> int:
        return sum(col.count(kind) for col in self._cols)

    def open_positions(self) -> List[Coord2D]:
        return [(x, y) for (x, y) in self.positions() if self._cols[x][y] != WALL]

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------
    def with_tiles(self, updates: Dict[Coord2D, str]) -> "Grid":
        """Return a copy with ``updates`` applied; out-of-bounds keys raise."""
        cols = [list(col) for col in self._cols]
        for (x, y), kind in updates.items():
            if not self.in_bounds(x, y):
                raise IndexError(f"position {(x, y)} outside {self._width}x{self._height} grid")
            cols[x][y] = kind
        return Grid(cols)

    def rows(self, marks: Optional[Dict[Coord2D, str]] = None) -> List[str]:
        """Row strings for dumps; ``marks`` overlays single characters (e.g. start)."""
        marks = marks or {}
        out = []
        for y in range(self._height):
            out.append("".join(marks.get((x, y), self._cols[x][y]) for x in range(self._width)))
        return out


class GridCanvas:
    """Mutable painting surface used by the layout builders."""

    def __init__(self, width: int, height: int, fill: str = WALL):
        self.width = width
        self.height = height
        self.cells: List[List[str]] = [[fill for _ in range(height)] for _ in range(width)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> str:
        if self.in_bounds(x, y):
            return self.cells[x][y]
        return WALL

    def set(self, x: int, y: int, kind: str) -> None:
        if self.in_bounds(x, y):
            self.cells[x][y] = kind

    def fill_rect(self, x0: int, y0: int, w: int, h: int, kind: str = FLOOR) -> None:
        for x in range(x0, x0 + w):
            for y in range(y0, y0 + h):
                self.set(x, y, kind)

    def add_border(self, kind: str = WALL) -> None:
        for x in range(self.width):
            self.cells[x][0] = kind
            self.cells[x][self.height - 1] = kind
        for y in range(self.height):
            self.cells[0][y] = kind
            self.cells[self.width - 1][y] = kind

    def interior(self) -> Iterable[Coord2D]:
        for x in range(1, self.width - 1):
            for y in range(1, self.height - 1):
                yield (x, y)

    def freeze(self) -> Grid:
        return Grid(self.cells)


def border_is_wall(grid: Grid) -> bool:
    w, h = grid.width, grid.height
    return all(grid[x][0] == WALL and grid[x][h - 1] == WALL for x in range(w)) and all(
        grid[0][y] == WALL and grid[w - 1][y] == WALL for y in range(h)
    )


def single_goal(grid: Grid) -> bool:
    return grid.count(GOAL) == 1


__all__ = ["Grid", "GridCanvas", "border_is_wall", "single_goal"]
