"""
Pathfinding utilities: implements incremental grid-based A* search.

The search advances one observable action per call to AStarSearch.step():
either one open-set pop (the expanded cell is marked VISITED) or one
reconstructed path cell (marked PATH), walking back from the goal.
"""

from __future__ import annotations
import enum
import heapq
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .grid import CellRole, Grid, Position

logger = logging.getLogger(__name__)


def heuristic(a: Position, b: Position) -> int:
    """Manhattan distance heuristic for grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class StepKind(enum.Enum):
    VISIT = "visit"
    PATH = "path"
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of a single search step.
    kind: what the step did.
    position: the popped (VISIT) or marked (PATH) cell; None for terminal results.
    """

    kind: StepKind
    position: Optional[Position] = None

    @property
    def terminal(self) -> bool:
        return self.kind in (StepKind.FOUND, StepKind.NOT_FOUND)


class AStarSearch:
    """
    Single A* run over a grid from start to goal.

    Open-set entries are (f_score, count, position); count is the insertion
    sequence number, so ties in f_score pop in FIFO order. Stale entries for
    positions re-pushed with a better score are left in the heap and still
    expanded when popped; no closed set is kept.
    """

    def __init__(self, grid: Grid, start: Position, goal: Position) -> None:
        for pos in (start, goal):
            if grid.role(pos) == CellRole.WALL:
                raise ValueError(f"Search endpoint {pos} is a wall")
        self.grid = grid
        self.start = start
        self.goal = goal
        self.open_set: List[Tuple[int, int, Position]] = []
        self.g_score: Dict[Position, int] = {start: 0}
        self.came_from: Dict[Position, Position] = {}
        self.count = 0
        # None while running, then True/False
        self.found: Optional[bool] = None
        self.expanded = 0
        self._result: Optional[StepResult] = None
        # Cursor walking cameFrom back toward start once the goal is popped
        self._trace: Optional[Position] = None
        self._push(start, heuristic(start, goal))

    def _push(self, pos: Position, f_score: int) -> None:
        heapq.heappush(self.open_set, (f_score, self.count, pos))
        self.count += 1

    def _finish(self, found: bool) -> StepResult:
        self.found = found
        self._result = StepResult(StepKind.FOUND if found else StepKind.NOT_FOUND)
        logger.debug(
            "A* %s -> %s finished: found=%s expanded=%d pushed=%d",
            self.start,
            self.goal,
            found,
            self.expanded,
            self.count,
        )
        return self._result

    @property
    def done(self) -> bool:
        return self._result is not None

    def step(self) -> StepResult:
        """Perform one pop or one reconstruction action and report it."""
        if self._result is not None:
            return self._result
        if self.start == self.goal:
            return self._finish(True)
        if self._trace is not None:
            return self._trace_step()

        if not self.open_set:
            return self._finish(False)

        _, _, current = heapq.heappop(self.open_set)
        if current == self.goal:
            self._trace = current
            return self._trace_step()

        self.expanded += 1
        if self.grid.role(current) not in (CellRole.START, CellRole.GOAL):
            self.grid.set_role(current, CellRole.VISITED)

        tentative_g = self.g_score[current] + 1
        for neighbor in self.grid.neighbors4(current):
            # If this path to neighbor is better than any previous one
            if tentative_g < self.g_score.get(neighbor, float("inf")):
                self.g_score[neighbor] = tentative_g
                self.came_from[neighbor] = current
                self._push(neighbor, tentative_g + heuristic(neighbor, self.goal))
        return StepResult(StepKind.VISIT, current)

    def _trace_step(self) -> StepResult:
        """Move the reconstruction cursor one cell toward start."""
        current = self.came_from[self._trace]
        if current == self.start:
            return self._finish(True)
        self._trace = current
        self.grid.set_role(current, CellRole.PATH)
        return StepResult(StepKind.PATH, current)

    def run(self, on_step: Optional[Callable[[StepResult], None]] = None) -> bool:
        """
        Drive the search to completion, calling on_step after every
        observable (non-terminal) step. Returns True if a path was found.
        """
        while True:
            result = self.step()
            if result.terminal:
                return bool(self.found)
            if on_step is not None:
                on_step(result)

    def path(self) -> List[Position]:
        """
        Return the best known path from start to goal inclusive, or an empty
        list if the goal has not been reached.
        """
        if self.start == self.goal:
            return [self.start]
        if self.goal not in self.came_from:
            return []
        current = self.goal
        path = [current]
        while current != self.start:
            current = self.came_from[current]
            path.append(current)
        path.reverse()
        return path


def find_path(grid: Grid, start: Position, goal: Position) -> List[Position]:
    """
    Find a path on a grid from start to goal using A*, without leaving
    search marks behind on the grid.
    Returns list of (row, col) coordinates from start to goal inclusive,
    or empty list if no path.
    """
    scratch = Grid(grid.width, grid.height, map_grid=grid.cells)
    search = AStarSearch(scratch, start, goal)
    if not search.run():
        return []
    return search.path()
