# core/session.py
from __future__ import annotations
import logging
from typing import Optional
from .food import FoodPlacer
from .grid import GridConfig
from .interfaces import Direction, Snapshot, TickResult
from .snake_rules import SnakeState, SCORE_PER_FOOD

logger = logging.getLogger(__name__)


class GameSession:
    """One play-through: owns the snake, its food and the running score."""

    def __init__(self, grid: GridConfig, placer: Optional[FoodPlacer] = None,
                 reward: int = SCORE_PER_FOOD):
        self.grid = grid
        self.placer = placer or FoodPlacer()
        self.state = SnakeState(grid, reward=reward)
        self.reset()

    def reset(self) -> Snapshot:
        self.state.reset()
        self.state.food = self.placer.place(self.grid, self.state.snake)
        logger.debug("session reset: head=%s food=%s", self.state.head, self.state.food)
        return self.snapshot()

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def direction(self) -> Direction:
        return self.state.dir

    def advance(self, direction: Direction) -> TickResult:
        """Move one cell; replaces the food after a bite.

        Raises GridFullError when the snake has eaten the last free cell.
        """
        result = self.state.advance(direction)
        if result is TickResult.ATE_FOOD:
            self.state.food = self.placer.place(self.grid, self.state.snake)
        return result

    def snapshot(self) -> Snapshot:
        return self.state.snapshot()
