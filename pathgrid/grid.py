"""
Grid model: fixed-size board of cells, each tagged with exactly one role.
All role transitions (wall toggling, single start/goal placement, clearing
search marks) go through this module.
"""

from __future__ import annotations
import enum
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Position = Tuple[int, int]  # (row, col)

# Neighbor offsets as (d_row, d_col): east, west, south, north
_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


class CellRole(enum.IntEnum):
    """Role held by a grid cell. Values are the codes stored in the grid array."""

    EMPTY = 0
    WALL = 1
    START = 2
    GOAL = 3
    VISITED = 4
    PATH = 5


class OutOfBounds(IndexError):
    """A coordinate outside the grid extents was passed to a grid operation."""

    def __init__(self, pos: Position, height: int, width: int) -> None:
        super().__init__(
            f"Position {pos} outside grid of {height} rows x {width} cols"
        )
        self.pos = pos


class Grid:
    """Rectangular grid of cell roles, indexed by (row, col)."""

    def __init__(
        self,
        width: int,
        height: int,
        map_grid: Optional[Sequence[Sequence[int]]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.full((height, width), CellRole.EMPTY, dtype=np.int8)
        if map_grid is not None:
            self._load(map_grid)

    def _load(self, map_grid: Sequence[Sequence[int]]) -> None:
        """Copy an initial layout of role codes, checking shape and invariants."""
        rows = np.asarray(map_grid, dtype=np.int8)
        if rows.shape != self.cells.shape:
            raise ValueError(
                f"Map shape {rows.shape} does not match grid "
                f"{self.height}x{self.width}"
            )
        valid = [int(role) for role in CellRole]
        if not np.isin(rows, valid).all():
            raise ValueError("Map contains unknown cell role codes")
        for role in (CellRole.START, CellRole.GOAL):
            if np.count_nonzero(rows == role) > 1:
                raise ValueError(f"Map contains more than one {role.name} cell")
        self.cells[:, :] = rows

    def in_bounds(self, pos: Position) -> bool:
        """Return True if pos lies inside the grid."""
        row, col = pos
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBounds(pos, self.height, self.width)

    def role(self, pos: Position) -> CellRole:
        """Return the role of the cell at pos."""
        self._check(pos)
        return CellRole(int(self.cells[pos]))

    def set_role(self, pos: Position, role: CellRole) -> None:
        """
        Apply a role change at pos following the placement rules:
        - WALL toggles EMPTY <-> WALL; any other current role is left alone.
        - START/GOAL first clear the previous holder of that role, then take
          the cell unless it is a wall or the other endpoint.
        - VISITED/PATH/EMPTY are assigned directly.
        """
        current = self.role(pos)
        if role == CellRole.WALL:
            if current == CellRole.WALL:
                self.cells[pos] = CellRole.EMPTY
            elif current == CellRole.EMPTY:
                self.cells[pos] = CellRole.WALL
            return
        if role in (CellRole.START, CellRole.GOAL):
            previous = self.find(role)
            if previous is not None:
                self.cells[previous] = CellRole.EMPTY
            other = CellRole.GOAL if role == CellRole.START else CellRole.START
            if current in (CellRole.WALL, other):
                logger.debug("Cannot place %s on %s at %s", role.name, current.name, pos)
                return
            self.cells[pos] = role
            return
        self.cells[pos] = role

    def find(self, role: CellRole) -> Optional[Position]:
        """Return the first position holding role, or None."""
        hits = np.argwhere(self.cells == role)
        if len(hits) == 0:
            return None
        row, col = hits[0]
        return (int(row), int(col))

    def count(self, role: CellRole) -> int:
        """Return the number of cells holding role."""
        return int(np.count_nonzero(self.cells == role))

    def reset_search_marks(self) -> None:
        """Turn every VISITED or PATH cell back to EMPTY."""
        marks = np.isin(self.cells, (CellRole.VISITED, CellRole.PATH))
        self.cells[marks] = CellRole.EMPTY

    def neighbors4(self, pos: Position) -> List[Position]:
        """
        Return in-bounds, non-wall neighbors of pos in the fixed order
        east, west, south, north.
        """
        row, col = pos
        out: List[Position] = []
        for d_row, d_col in _DIRECTIONS:
            n = (row + d_row, col + d_col)
            if self.in_bounds(n) and self.cells[n] != CellRole.WALL:
                out.append(n)
        return out

    def snapshot(self) -> np.ndarray:
        """Return a read-only copy of the role codes, shape (height, width)."""
        view = self.cells.copy()
        view.flags.writeable = False
        return view
