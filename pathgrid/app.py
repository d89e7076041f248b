from __future__ import annotations
import logging
from typing import Optional

import pygame

from .config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    FPS,
    WINDOW_CAPTION,
    STEP_DELAY_MS,
    GRID_WIDTH,
    GRID_HEIGHT,
    CELL_SIZE,
    LOAD_PRESET,
    PRESET_START,
    PRESET_GOAL,
    PRESET_WALLS,
)
from .grid import Grid
from .input_handler import InputHandler
from .renderer import Renderer
from .session import Phase, Session

logger = logging.getLogger(__name__)


class App:
    """Main application class: owns the window, session and frame loop."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        load_preset: bool = LOAD_PRESET,
    ) -> None:
        # Initialize Pygame and its subsystems
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_CAPTION)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.session = Session(Grid(GRID_WIDTH, GRID_HEIGHT))
        if load_preset:
            self.session.load_layout(PRESET_WALLS, PRESET_START, PRESET_GOAL)
        self.renderer = Renderer(CELL_SIZE)
        self.input = InputHandler(CELL_SIZE, GRID_WIDTH, GRID_HEIGHT)
        # Milliseconds accumulated toward the next search step
        self.step_timer = 0.0
        self.running = True

    def handle_events(self) -> None:
        """Process input via InputHandler and forward events to the session."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False
        for event in self.input.events():
            self.session.handle(event)

    def update(self, dt_ms: float) -> None:
        """Advance a running search, one step per STEP_DELAY_MS."""
        if self.session.phase != Phase.RUNNING:
            self.step_timer = 0.0
            return
        self.step_timer += dt_ms
        while self.step_timer >= STEP_DELAY_MS and self.session.phase == Phase.RUNNING:
            self.step_timer -= STEP_DELAY_MS
            self.session.tick()
            # Every observable step gets its own frame
            self.render()

    def render(self) -> None:
        """Draw the current grid and flip the display."""
        self.renderer.render(self.screen, self.session.grid.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, update, and render."""
        logger.info(
            "Keys: W wall, S start, G goal, SPACE run, R reset, X quit"
        )
        while self.running:
            dt_ms = self.clock.tick(self.fps)
            self.handle_events()
            self.update(dt_ms)
            self.render()
        pygame.quit()
