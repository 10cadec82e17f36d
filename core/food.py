# core/food.py
from __future__ import annotations
from typing import Collection, Optional, Union
import numpy as np
from .errors import GridFullError
from .grid import Cell, GridConfig

SeedLike = Union[None, int, np.random.Generator]


class FoodPlacer:
    """Rejection-samples a free cell for the next food item."""

    def __init__(self, seed: SeedLike = None):
        self.rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng = np.random.default_rng(seed)

    def place(self, grid: GridConfig, snake: Collection[Cell]) -> Cell:
        occ = set(snake)
        if len(occ) >= grid.area:
            raise GridFullError(f"snake fills the whole {grid.width}x{grid.height} grid")
        while True:
            cell = (int(self.rng.integers(grid.width)), int(self.rng.integers(grid.height)))
            if cell not in occ:
                return cell
