# core/grid.py  (pure geometry, no pygame)
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

Cell = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class GridConfig:
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")

    @classmethod
    def from_resolution(cls, screen_w: int, screen_h: int, cell: int) -> "GridConfig":
        if cell <= 0:
            raise ValueError(f"cell size must be positive, got {cell}")
        return cls(screen_w // cell, screen_h // cell)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)
