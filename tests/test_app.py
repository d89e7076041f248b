import logging

import pygame
import pytest

from pathgrid.config import STEP_DELAY_MS
from pathgrid.grid import CellRole
from pathgrid.session import Phase, RequestRun


@pytest.fixture(autouse=True)
def stub_pygame(monkeypatch):
    """Stub out pygame display and clock to allow App init without a window."""
    monkeypatch.setattr(pygame, "init", lambda: None)
    monkeypatch.setattr(pygame, "quit", lambda: None)
    monkeypatch.setattr(
        pygame.display,
        "set_mode",
        lambda size, *args, **kwargs: pygame.Surface(size),
    )
    monkeypatch.setattr(
        pygame.display, "set_caption", lambda *args, **kwargs: None
    )
    monkeypatch.setattr(pygame.display, "flip", lambda: None)

    # Stub clock to avoid real timing
    class DummyClock:
        def tick(self, fps):
            return 0

    monkeypatch.setattr(pygame.time, "Clock", DummyClock)


def test_app_starts_in_editing():
    from pathgrid.app import App

    app = App(load_preset=False)
    assert app.session.phase == Phase.EDITING
    assert app.session.grid.count(CellRole.EMPTY) == 100


def test_app_preset_search_animates_one_step_per_delay():
    from pathgrid.app import App

    app = App(load_preset=True)
    app.session.handle(RequestRun())
    frames = app.renderer.frames
    app.update(STEP_DELAY_MS - 1)
    assert app.renderer.frames == frames
    app.update(1)
    assert app.renderer.frames == frames + 1
    assert app.session.grid.role((2, 0)) == CellRole.START
    # Drain the rest of the run
    while app.session.phase == Phase.RUNNING:
        app.update(STEP_DELAY_MS)
    assert app.session.grid.count(CellRole.PATH) == 15


def test_app_forwards_input_events(monkeypatch):
    from pathgrid.app import App

    app = App(load_preset=False)
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_s, mod=0),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(45, 5)),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=0),
    ]
    monkeypatch.setattr(pygame.event, "get", lambda: list(events))
    app.handle_events()
    assert app.session.start == (0, 1)
    assert app.session.phase == Phase.EDITING
    assert app.session.diagnostics
    assert app.running


def test_app_run_exits_on_quit(monkeypatch):
    from pathgrid.app import App

    app = App(load_preset=False)
    monkeypatch.setattr(
        pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)]
    )
    app.run()
    assert not app.running
    assert app.renderer.frames == 1


def test_app_modules_define_loggers():
    import pathgrid.app as app_module
    import pathgrid.session as session_module

    assert isinstance(app_module.logger, logging.Logger)
    assert isinstance(session_module.logger, logging.Logger)
