#Shortest path search over a Grid
#A* with unit step cost and Manhattan distance to the end cell, plus a BFS reference solver

from __future__ import annotations

import heapq
import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generator, List, Optional, Tuple

from maze_grid import Grid, Point

logger = logging.getLogger(__name__)


class SolveOutcome(Enum):
    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_ENDPOINTS = "invalid_endpoints"


@dataclass
class SolveResult:
    outcome: SolveOutcome
    path: List[Point] = field(default_factory=list)
    expanded: int = 0
    elapsed: float = 0.0

    @property
    def found(self) -> bool:
        return self.outcome is SolveOutcome.FOUND


@dataclass
class SolverSnapshot:
    current: Optional[Point]
    frontier_size: int
    expanded: int
    path: List[Point]
    done: bool
    success: bool
    elapsed: float
    outcome: Optional[SolveOutcome] = None


def manhattan(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(parent: Dict[Point, Point], start: Point, goal: Point) -> List[Point]:
    if goal != start and goal not in parent:
        return []
    cur = goal
    result = [cur]
    while cur != start:
        cur = parent[cur]
        result.append(cur)
    result.reverse()
    return result


def endpoints_valid(grid: Grid) -> bool:
    return grid.is_open(*grid.start) and grid.is_open(*grid.end)


class PathFinder:

    #Stateless A* solver, every call owns its own cost/visited/predecessor tables
    #The heap may hold stale duplicates of a cell, they are skipped once the cell is closed

    def solve(self, grid: Grid) -> List[Point]:
        return self.solve_detailed(grid).path

    def solve_detailed(self, grid: Grid) -> SolveResult:
        last = None
        for snapshot in self.steps(grid):
            last = snapshot
        assert last is not None and last.outcome is not None
        result = SolveResult(last.outcome, last.path, last.expanded, last.elapsed)
        logger.debug(
            "A* %s -> %s: %s, expanded=%d, path_len=%d",
            grid.start, grid.end, result.outcome.value, result.expanded, len(result.path),
        )
        return result

    def steps(self, grid: Grid) -> Generator[SolverSnapshot, None, None]:
        start_time = time.perf_counter()
        start, goal = grid.start, grid.end

        if not endpoints_valid(grid):
            yield SolverSnapshot(None, 0, 0, [], True, False, time.perf_counter() - start_time, SolveOutcome.INVALID_ENDPOINTS)
            return

        best_cost: Dict[Point, int] = {start: 0}
        visited = set()
        parent: Dict[Point, Point] = {}
        open_heap: List[Tuple[int, Point]] = [(manhattan(start, goal), start)]
        expanded = 0

        while open_heap:
            _, current = heapq.heappop(open_heap)
            if current in visited:
                continue
            visited.add(current)
            expanded += 1

            if current == goal:
                path = reconstruct_path(parent, start, goal)
                elapsed = time.perf_counter() - start_time
                yield SolverSnapshot(current, len(open_heap), expanded, path, True, True, elapsed, SolveOutcome.FOUND)
                return

            yield SolverSnapshot(current, len(open_heap), expanded, [], False, False, time.perf_counter() - start_time)

            tentative = best_cost[current] + 1
            for nxt in grid.open_neighbors(*current):
                if nxt in visited:
                    continue
                if tentative >= best_cost.get(nxt, float("inf")):
                    continue
                best_cost[nxt] = tentative
                parent[nxt] = current
                heapq.heappush(open_heap, (tentative + manhattan(nxt, goal), nxt))

        elapsed = time.perf_counter() - start_time
        yield SolverSnapshot(None, 0, expanded, [], True, False, elapsed, SolveOutcome.NO_PATH)


def breadth_first_path(grid: Grid) -> SolveResult:
    #Plain BFS on the same grid, used to cross-check A* path lengths
    start_time = time.perf_counter()
    start, goal = grid.start, grid.end
    if not endpoints_valid(grid):
        return SolveResult(SolveOutcome.INVALID_ENDPOINTS, elapsed=time.perf_counter() - start_time)

    q = deque([start])
    parent: Dict[Point, Point] = {}
    seen = {start}
    expanded = 0
    while q:
        current = q.popleft()
        expanded += 1
        if current == goal:
            path = reconstruct_path(parent, start, goal)
            return SolveResult(SolveOutcome.FOUND, path, expanded, time.perf_counter() - start_time)
        for nxt in grid.open_neighbors(*current):
            if nxt in seen:
                continue
            seen.add(nxt)
            parent[nxt] = current
            q.append(nxt)
    return SolveResult(SolveOutcome.NO_PATH, [], expanded, time.perf_counter() - start_time)
