#Grid model for the interactive maze
#Cells are addressed as (x, y) with x the column and y the row
#The outer ring is always wall and both endpoints are always open

from __future__ import annotations

import logging
import random
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

DIRS = {
    "E": (1, 0),
    "W": (-1, 0),
    "S": (0, 1),
    "N": (0, -1),
}

MIN_SIDE = 3
DEFAULT_WALL_PROBABILITY = 0.3


class CellState(IntEnum):
    OPEN = 0
    WALL = 1


def within_bounds(width: int, height: int, x: int, y: int) -> bool:
    return 0 <= x < width and 0 <= y < height


class Grid:

    #Occupancy matrix plus endpoints and the last stored path
    #Every mutation clears the stored path, recomputing it is the caller's job

    def __init__(self, rows: int = 20, cols: int = 20, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.rows = 0
        self.cols = 0
        self.cells: List[List[CellState]] = []
        self.start: Point = (1, 1)
        self.end: Point = (1, 1)
        self._path: List[Point] = []
        self.resize(rows, cols)

    def resize(self, rows: int, cols: int) -> None:
        if rows < MIN_SIDE or cols < MIN_SIDE:
            raise ValueError(f"grid must be at least {MIN_SIDE}x{MIN_SIDE}, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [[CellState.OPEN for _ in range(cols)] for _ in range(rows)]
        self.start = (1, 1)
        self.end = (cols - 2, rows - 2)
        self.reset()

    def reset(self) -> None:
        for y in range(self.rows):
            for x in range(self.cols):
                self.cells[y][x] = CellState.WALL if self.on_boundary(x, y) else CellState.OPEN
        self.clear_path()

    def randomize(self, wall_probability: float = DEFAULT_WALL_PROBABILITY, rng: Optional[random.Random] = None) -> None:
        if not 0.0 <= wall_probability <= 1.0:
            clamped = min(1.0, max(0.0, wall_probability))
            logger.warning("wall_probability %s outside [0, 1], clamped to %s", wall_probability, clamped)
            wall_probability = clamped
        rng = rng or self.rng
        self.reset()
        for y in range(1, self.rows - 1):
            for x in range(1, self.cols - 1):
                self.cells[y][x] = CellState.WALL if rng.random() < wall_probability else CellState.OPEN
        #Keep the endpoints reachable from themselves
        self._open(self.start)
        self._open(self.end)
        logger.debug("randomized %dx%d grid with wall_probability=%.2f", self.rows, self.cols, wall_probability)

    def toggle_wall(self, x: int, y: int) -> None:
        if not self.editable(x, y):
            return
        current = self.cells[y][x]
        self.cells[y][x] = CellState.OPEN if current == CellState.WALL else CellState.WALL
        if (x, y) in (self.start, self.end):
            self.cells[y][x] = CellState.OPEN
        self.clear_path()

    def set_start(self, x: int, y: int) -> None:
        if not self.editable(x, y):
            return
        self.start = (x, y)
        self._open(self.start)
        self.clear_path()
        logger.debug("start moved to %s", self.start)

    def set_end(self, x: int, y: int) -> None:
        if not self.editable(x, y):
            return
        self.end = (x, y)
        self._open(self.end)
        self.clear_path()
        logger.debug("end moved to %s", self.end)

    def set_path(self, path: Sequence[Point]) -> None:
        self._path = list(path)

    def clear_path(self) -> None:
        self._path = []

    @property
    def path(self) -> List[Point]:
        return list(self._path)

    # Queries

    def in_bounds(self, x: int, y: int) -> bool:
        return within_bounds(self.cols, self.rows, x, y)

    def on_boundary(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.cols - 1 or y == self.rows - 1

    def editable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self.on_boundary(x, y)

    def cell_state(self, x: int, y: int) -> CellState:
        if not self.in_bounds(x, y):
            return CellState.WALL
        return self.cells[y][x]

    def is_open(self, x: int, y: int) -> bool:
        return self.cell_state(x, y) == CellState.OPEN

    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def start_point(self) -> Point:
        return self.start

    def end_point(self) -> Point:
        return self.end

    def open_neighbors(self, x: int, y: int) -> List[Point]:
        return [
            (nx, ny)
            for dx, dy in DIRS.values()
            if self.is_open(nx := x + dx, ny := y + dy)
        ]

    def to_text(self, path: Optional[Sequence[Point]] = None) -> str:
        on_path = set(self._path if path is None else path)
        lines = []
        for y in range(self.rows):
            row = []
            for x in range(self.cols):
                if (x, y) == self.start:
                    row.append("S")
                elif (x, y) == self.end:
                    row.append("E")
                elif (x, y) in on_path:
                    row.append("*")
                elif self.cells[y][x] == CellState.WALL:
                    row.append("#")
                else:
                    row.append(".")
            lines.append("".join(row))
        return "\n".join(lines)

    def _open(self, point: Point) -> None:
        x, y = point
        self.cells[y][x] = CellState.OPEN

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self.start}, end={self.end})"
