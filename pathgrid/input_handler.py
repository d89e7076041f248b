"""
Input handling abstraction to decouple Pygame input from the session.
Translates raw pygame events into session events.
"""

from __future__ import annotations
import pygame
from typing import List, Optional, Tuple

from .config import CELL_SIZE, GRID_WIDTH, GRID_HEIGHT
from .session import (
    Event,
    PlacementMode,
    PointerClick,
    PointerMove,
    RequestReset,
    RequestRun,
    SetPlacementMode,
)

_MODE_KEYS = {
    pygame.K_w: PlacementMode.WALL,
    pygame.K_s: PlacementMode.START,
    pygame.K_g: PlacementMode.GOAL,
}


class InputHandler:
    """
    Gathers pygame events each frame and exposes them as session events
    plus a quit flag.
    """

    def __init__(
        self,
        cell_size: int = CELL_SIZE,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
    ) -> None:
        self.cell_size = cell_size
        self.width = width
        self.height = height
        self._quit = False
        self._events: List[Event] = []

    def pixel_to_cell(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """Map a pixel position to a (row, col) cell, or None outside the grid."""
        x, y = pos
        if x < 0 or y < 0:
            return None
        row, col = int(y // self.cell_size), int(x // self.cell_size)
        if row >= self.height or col >= self.width:
            return None
        return (row, col)

    def process_events(self) -> None:
        """
        Poll Pygame events and translate them into session events for
        this frame.
        """
        self._quit = False
        self._events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_x:
                    self._quit = True
                elif event.key in _MODE_KEYS:
                    self._events.append(SetPlacementMode(_MODE_KEYS[event.key]))
                elif event.key == pygame.K_SPACE:
                    self._events.append(RequestRun())
                elif event.key == pygame.K_r:
                    self._events.append(RequestReset())
            elif event.type == pygame.MOUSEMOTION:
                cell = self.pixel_to_cell(event.pos)
                if cell is not None:
                    self._events.append(PointerMove(cell))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                # Clicks outside the grid are dropped here
                cell = self.pixel_to_cell(event.pos)
                if cell is not None:
                    self._events.append(PointerClick(cell))

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def events(self) -> List[Event]:
        """Return the session events gathered by the last process_events call."""
        return list(self._events)
