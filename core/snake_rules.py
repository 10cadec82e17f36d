# core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
from .grid import Cell, GridConfig
from .interfaces import Direction, Snapshot, TickResult

SCORE_PER_FOOD = 10


class SnakeState:
    """Snake body (head first), heading, current food and score.

    `advance` is the only thing that moves the snake. It never places food:
    after an ATE_FOOD result the owner is expected to set a new `food`.
    """

    def __init__(self, grid: GridConfig, body: Optional[Iterable[Cell]] = None,
                 direction: Direction = Direction.NONE, food: Optional[Cell] = None,
                 reward: int = SCORE_PER_FOOD):
        self.grid = grid
        self.reward = reward
        self.snake: List[Cell] = list(body) if body is not None else [grid.center]
        if not self.snake:
            raise ValueError("snake needs at least one cell")
        if len(set(self.snake)) != len(self.snake):
            raise ValueError(f"snake overlaps itself: {self.snake}")
        self.dir = direction
        self.food = food
        self.score = 0

    def reset(self) -> None:
        self.snake = [self.grid.center]
        self.dir = Direction.NONE
        self.food = None
        self.score = 0

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.snake)

    def __len__(self) -> int:
        return len(self.snake)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.snake

    def turn(self, direction: Direction) -> bool:
        # reversal would run the head straight into the neck
        if direction is Direction.NONE or direction is self.dir.opposite:
            return False
        self.dir = direction
        return True

    def advance(self, direction: Direction) -> TickResult:
        if direction is Direction.NONE:
            # not started yet
            return TickResult.CONTINUE
        self.turn(direction)

        new_head = self.dir.step(self.head)

        # collisions; the tail has not moved yet so it still counts
        if not self.grid.contains(new_head):
            return TickResult.COLLIDED
        if self.occupies(new_head):
            return TickResult.COLLIDED

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += self.reward
            return TickResult.ATE_FOOD
        self.snake.pop()
        return TickResult.CONTINUE

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            dir=self.dir,
            score=self.score,
            grid_w=self.grid.width,
            grid_h=self.grid.height,
        )
