# runners/run_snake.py
from __future__ import annotations
import logging
from typing import Optional
from config import AppConfig
from core.controller import GameController
from core.food import FoodPlacer
from core.interfaces import InputSource
from core.scores import ScoreStore
from core.session import GameSession
from viz.render_iface import Renderer

logger = logging.getLogger(__name__)


def build_controller(cfg: AppConfig, store: Optional[ScoreStore] = None) -> GameController:
    store = store or ScoreStore(cfg.scores_path)
    session = GameSession(cfg.grid, FoodPlacer(cfg.seed), reward=cfg.score_per_food)
    return GameController(session, store)


def run(cfg: AppConfig, ctl: GameController, rend: Renderer, kbd: InputSource,
        max_ticks: Optional[int] = None) -> int:
    """Input -> state -> draw -> wait, until quit. Returns the exit status."""
    rend.open(cfg)
    with rend:
        ticks = 0
        while ctl.running:
            frame = ctl.step(kbd.poll())
            if not ctl.running:
                break
            rend.draw(frame)
            rend.tick(cfg.tick_ms)
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
    return ctl.exit_code


def main(cfg: AppConfig) -> int:
    # imported here so the "scores" mode never touches pygame
    from viz.renderer_pygame import PygameRenderer
    from viz.keyboard import Keyboard

    store = ScoreStore(cfg.scores_path)
    if cfg.clear_scores_on_start:
        store.clear()
    ctl = build_controller(cfg, store)
    logger.info("grid %dx%d, scores in %s", cfg.grid.width, cfg.grid.height, cfg.scores_path)
    return run(cfg, ctl, PygameRenderer(), Keyboard())


def print_scores(cfg: AppConfig) -> int:
    ranked = ScoreStore(cfg.scores_path).ranked_descending()
    if not ranked:
        print("No scores yet.")
        return 0
    print("The leaderboard:")
    for place, score in enumerate(ranked, start=1):
        print(f"{place:>3}. {score}")
    return 0
