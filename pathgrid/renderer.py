"""
Grid renderer: draws a read-only grid snapshot onto a pygame surface,
one filled rectangle per cell with a dark border.
"""

from __future__ import annotations
import logging
from typing import Dict, Tuple

import numpy as np
import pygame

from .config import (
    CELL_SIZE,
    BORDER_COLOR,
    BORDER_WIDTH,
    EMPTY_COLOR,
    WALL_COLOR,
    START_COLOR,
    GOAL_COLOR,
    VISITED_COLOR,
    PATH_COLOR,
)
from .grid import CellRole

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

ROLE_COLORS: Dict[CellRole, Color] = {
    CellRole.EMPTY: EMPTY_COLOR,
    CellRole.WALL: WALL_COLOR,
    CellRole.START: START_COLOR,
    CellRole.GOAL: GOAL_COLOR,
    CellRole.VISITED: VISITED_COLOR,
    CellRole.PATH: PATH_COLOR,
}


class Renderer:
    """Draws grid snapshots; holds no grid state of its own."""

    def __init__(self, cell_size: int = CELL_SIZE) -> None:
        self.cell_size = cell_size
        self.frames = 0

    def cell_rect(self, row: int, col: int) -> pygame.Rect:
        """Return the pixel rectangle covered by the cell at (row, col)."""
        return pygame.Rect(
            col * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size
        )

    def render(self, surface: pygame.Surface, snapshot: np.ndarray) -> None:
        """Draw every cell of snapshot (role codes, shape (rows, cols))."""
        height, width = snapshot.shape
        for row in range(height):
            for col in range(width):
                rect = self.cell_rect(row, col)
                color = ROLE_COLORS[CellRole(int(snapshot[row, col]))]
                surface.fill(BORDER_COLOR, rect)
                surface.fill(color, rect.inflate(-2 * BORDER_WIDTH, -2 * BORDER_WIDTH))
        self.frames += 1
