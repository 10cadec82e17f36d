import pytest
from core.errors import GridFullError
from core.food import FoodPlacer
from core.grid import GridConfig
from core.interfaces import Direction, TickResult
from core.session import GameSession

def test_reset_places_food_off_snake(grid):
    sess = GameSession(grid, FoodPlacer(0))
    snap = sess.reset()
    assert snap.snake == ((16, 12),)
    assert snap.food is not None and snap.food != (16, 12)
    assert snap.score == 0
    assert sess.direction is Direction.NONE

def test_bite_replaces_food(grid):
    sess = GameSession(grid, FoodPlacer(0))
    sess.state.food = (17, 12)
    assert sess.advance(Direction.RIGHT) is TickResult.ATE_FOOD
    assert sess.score == 10
    assert sess.state.food not in sess.state.snake

def test_reward_is_configurable(grid):
    sess = GameSession(grid, FoodPlacer(0), reward=5)
    sess.state.food = (16, 11)
    sess.advance(Direction.UP)
    assert sess.score == 5

def test_last_bite_fills_grid():
    sess = GameSession(GridConfig(2, 1), FoodPlacer(0))
    assert sess.state.food == (0, 0)  # center is (1, 0)
    with pytest.raises(GridFullError):
        sess.advance(Direction.LEFT)
    assert sess.score == 10
