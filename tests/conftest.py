# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((640, 480))

@pytest.fixture
def grid():
    from core.grid import GridConfig
    return GridConfig(32, 24)

@pytest.fixture
def store(tmp_path):
    from core.scores import ScoreStore
    return ScoreStore(str(tmp_path / "scores.txt"))

@pytest.fixture
def snake_factory(grid):
    from core.snake_rules import SnakeState
    from core.interfaces import Direction
    def make(body=None, direction=Direction.NONE, food=None, **kwargs):
        return SnakeState(kwargs.pop("grid", grid), body=body, direction=direction, food=food, **kwargs)
    return make

@pytest.fixture
def controller_factory(grid, store):
    from core.controller import GameController
    from core.food import FoodPlacer
    from core.session import GameSession
    def make(seed=0, **kwargs):
        session = GameSession(kwargs.pop("grid", grid), FoodPlacer(seed))
        return GameController(session, kwargs.pop("store", store))
    return make
