"""
Interaction session: owns the grid and gates editing, search execution and
reset on the current phase.
"""

from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from .config import GRID_WIDTH, GRID_HEIGHT
from .grid import CellRole, Grid, Position
from .pathfinding import AStarSearch, StepKind, StepResult

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    EDITING = "editing"
    RUNNING = "running"
    DONE = "done"


class PlacementMode(enum.Enum):
    WALL = CellRole.WALL
    START = CellRole.START
    GOAL = CellRole.GOAL


class InvalidRunRequest(RuntimeError):
    """A run was requested without both start and goal placed."""


class NoPathFound(RuntimeError):
    """The search exhausted the open set without reaching the goal."""


# Input events


@dataclass(frozen=True)
class PointerClick:
    cell: Position


@dataclass(frozen=True)
class PointerMove:
    cell: Position


@dataclass(frozen=True)
class SetPlacementMode:
    mode: PlacementMode


@dataclass(frozen=True)
class RequestRun:
    pass


@dataclass(frozen=True)
class RequestReset:
    pass


Event = Union[PointerClick, PointerMove, SetPlacementMode, RequestRun, RequestReset]


class Session:
    """
    Single owner of the grid and the search lifecycle.

    Phases: EDITING -> RUNNING -> DONE -> EDITING (on reset).
    Diagnostics for rejected runs and failed searches are logged and kept in
    self.diagnostics for the host to display.
    """

    def __init__(self, grid: Optional[Grid] = None) -> None:
        self.grid = grid if grid is not None else Grid(GRID_WIDTH, GRID_HEIGHT)
        self.phase = Phase.EDITING
        self.mode = PlacementMode.WALL
        self.pointer: Optional[Position] = None
        self.start: Optional[Position] = self.grid.find(CellRole.START)
        self.goal: Optional[Position] = self.grid.find(CellRole.GOAL)
        self.search: Optional[AStarSearch] = None
        self.diagnostics: List[str] = []

    def _set_phase(self, phase: Phase) -> None:
        logger.info("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _diagnose(self, error: Exception) -> None:
        logger.warning("%s", error)
        self.diagnostics.append(str(error))

    def handle(self, event: Event) -> None:
        """Dispatch one input event according to the current phase."""
        if isinstance(event, PointerMove):
            self.pointer = event.cell
        elif isinstance(event, SetPlacementMode):
            self.mode = event.mode
        elif isinstance(event, PointerClick):
            self.pointer = event.cell
            if self.phase == Phase.EDITING:
                self.place(event.cell)
        elif isinstance(event, RequestRun):
            try:
                self.request_run()
            except InvalidRunRequest as e:
                self._diagnose(e)
        elif isinstance(event, RequestReset):
            if self.phase == Phase.DONE:
                self.reset()
        else:
            raise TypeError(f"Unknown event {event!r}")

    def place(self, cell: Position) -> None:
        """Apply the active placement mode at cell and resync the placed endpoint."""
        role = self.mode.value
        self.grid.set_role(cell, role)
        # Only the endpoint being placed is re-read; walls never touch either
        if role == CellRole.START:
            self.start = self.grid.find(CellRole.START)
        elif role == CellRole.GOAL:
            self.goal = self.grid.find(CellRole.GOAL)

    def request_run(self) -> None:
        """
        Start a search from the mirrored start to goal.
        Ignored outside EDITING; raises InvalidRunRequest if an endpoint
        is missing.
        """
        if self.phase != Phase.EDITING:
            return
        if self.start is None or self.goal is None:
            raise InvalidRunRequest(
                "Please set both start and goal positions before running."
            )
        self.search = AStarSearch(self.grid, self.start, self.goal)
        self._set_phase(Phase.RUNNING)

    def tick(self) -> Optional[StepResult]:
        """
        Advance a running search by one step. Returns the step result, or
        None when no search is running.
        """
        if self.phase != Phase.RUNNING or self.search is None:
            return None
        result = self.search.step()
        if result.terminal:
            self._complete(result)
        return result

    def _complete(self, result: StepResult) -> None:
        if result.kind == StepKind.NOT_FOUND:
            self._diagnose(NoPathFound("No path found."))
        else:
            logger.info("Path found with %d steps", len(self.search.path()) - 1)
        self.search = None
        self._set_phase(Phase.DONE)

    def run_search(
        self, on_step: Optional[Callable[[StepResult], None]] = None
    ) -> Optional[bool]:
        """
        Drive a running search to completion synchronously, calling on_step
        after each observable step. Returns whether a path was found, or
        None if no search was running.
        """
        search = self.search
        if self.phase != Phase.RUNNING or search is None:
            return None
        while self.phase == Phase.RUNNING:
            result = self.tick()
            if on_step is not None and not result.terminal:
                on_step(result)
        return bool(search.found)

    def reset(self) -> None:
        """Clear search marks and the mirrored endpoints, back to EDITING."""
        self.grid.reset_search_marks()
        self.start = None
        self.goal = None
        self._set_phase(Phase.EDITING)

    def load_layout(
        self,
        walls: Iterable[Position],
        start: Optional[Position] = None,
        goal: Optional[Position] = None,
    ) -> None:
        """Place walls and endpoints through the normal editing rules."""
        saved = self.mode
        try:
            for mode, cells in (
                (PlacementMode.WALL, walls),
                (PlacementMode.START, [start] if start is not None else []),
                (PlacementMode.GOAL, [goal] if goal is not None else []),
            ):
                self.mode = mode
                for cell in cells:
                    self.handle(PointerClick(cell))
        finally:
            self.mode = saved
