# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple
from core.grid import GridConfig

@dataclass(frozen=True, slots=True)
class AppConfig:
    # screen / grid
    screen_w: int = 640
    screen_h: int = 480
    cell: int = 20
    seed: Optional[int] = None

    # gameplay
    tick_ms: int = 100
    score_per_food: int = 10

    # leaderboard
    scores_path: str = "scores.txt"
    clear_scores_on_start: bool = True

    # render
    render_title: str = "Snake Game"
    render_font: Optional[str] = None
    render_font_size: int = 24
    render_show_hud: bool = True

    @property
    def grid(self) -> GridConfig:
        return GridConfig.from_resolution(self.screen_w, self.screen_h, self.cell)

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)


def parse_resolution(text: str) -> Tuple[int, int]:
    """'800x600' -> (800, 600)"""
    w, sep, h = text.strip().lower().partition("x")
    if not sep or not w.isdigit() or not h.isdigit():
        raise ValueError(f"resolution must look like WIDTHxHEIGHT, got {text!r}")
    width, height = int(w), int(h)
    if width <= 0 or height <= 0:
        raise ValueError(f"resolution must be positive, got {text!r}")
    return width, height
