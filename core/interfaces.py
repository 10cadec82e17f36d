# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Protocol, Sequence, Union, Optional
from .grid import Cell


class Direction(Enum):
    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, cell: Cell) -> Cell:
        dx, dy = self.value
        return (cell[0] + dx, cell[1] + dy)


class TickResult(Enum):
    CONTINUE = "continue"
    ATE_FOOD = "ate_food"
    COLLIDED = "collided"


class Mode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    LEADERBOARD = "leaderboard"


class MenuOption(Enum):
    START = 1
    SCORES = 2
    EXIT = 3


# input events
@dataclass(frozen=True)
class Quit:
    pass

@dataclass(frozen=True)
class MenuSelect:
    option: MenuOption

@dataclass(frozen=True)
class DirectionKey:
    direction: Direction

@dataclass(frozen=True)
class Cancel:
    pass

InputEvent = Union[Quit, MenuSelect, DirectionKey, Cancel]


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Optional[Cell]
    dir: Direction
    score: int
    grid_w: int
    grid_h: int


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs for one tick."""
    mode: Mode
    snapshot: Snapshot
    scores: Tuple[int, ...] = ()


class InputSource(Protocol):
    def poll(self) -> Sequence[InputEvent]: ...
