# viz/renderer_pygame.py
from __future__ import annotations
import logging
import pygame as pg
from typing import Optional, Sequence
from config import AppConfig
from core.errors import InitializationFailure
from core.interfaces import Frame, Mode, Snapshot
import viz.renderer_colors as theme

logger = logging.getLogger(__name__)

MENU_LINES = ("1. Start Game", "2. View Scores", "3. Exit")
LEADERBOARD_TITLE = "The leaderboard:"
LEADERBOARD_HINT = "To exit, press the Escape button"


class PygameRenderer:
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.font: Optional[pg.font.Font] = None
        self._auto_flip = True

    def __enter__(self) -> "PygameRenderer":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        try:
            pg.init()
            pg.display.set_caption(cfg.render_title)
            self.surf = pg.display.set_mode((cfg.screen_w, cfg.screen_h))
            self.font = pg.font.SysFont(cfg.render_font, cfg.render_font_size)
        except pg.error as e:
            self.close()
            raise InitializationFailure(f"could not open game window: {e}") from e
        self._auto_flip = True
        logger.debug("window %dx%d open", cfg.screen_w, cfg.screen_h)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into an existing surface instead of a window (no flip)."""
        if not pg.get_init():
            pg.init()
        if not pg.font.get_init():
            pg.font.init()
        self.cfg = cfg
        self.surf = surface
        self.font = pg.font.SysFont(cfg.render_font, cfg.render_font_size)
        self._auto_flip = False

    def draw(self, frame: Frame) -> None:
        assert self.surf is not None, "Renderer not opened"
        self.surf.fill(theme.BG)
        if frame.mode is Mode.MENU:
            self._draw_menu()
        elif frame.mode is Mode.PLAYING:
            self._draw_game(frame.snapshot)
        elif frame.mode is Mode.LEADERBOARD:
            self._draw_leaderboard(frame.scores)
        if self._auto_flip:
            pg.display.flip()

    def tick(self, ms: int) -> None:
        pg.time.wait(ms)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.font = None

    # internals
    def _text(self, text: str) -> pg.Surface:
        assert self.font is not None
        return self.font.render(text, True, theme.TEXT)

    def _draw_menu(self) -> None:
        surf = self.surf
        w, h = surf.get_size()
        lines = [self._text(t) for t in MENU_LINES]
        # middle line sits on the vertical centre
        y = h // 2 - lines[0].get_height()
        for img in lines:
            surf.blit(img, (w // 2 - img.get_width() // 2, y))
            y += img.get_height()

    def _draw_game(self, s: Snapshot) -> None:
        assert self.cfg is not None
        surf = self.surf
        c = self.cfg.cell

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if s.food is not None:
            fx, fy = s.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        if self.cfg.render_show_hud:
            surf.blit(self._text(f"Score: {s.score}"), (10, 10))

    def _draw_leaderboard(self, scores: Sequence[int]) -> None:
        surf = self.surf
        w, h = surf.get_size()
        title = self._text(LEADERBOARD_TITLE)
        surf.blit(title, ((w - title.get_width()) // 2, 0))

        y_frac = 0.2
        for score in scores:
            y = int(h * y_frac) + title.get_height()
            if y >= h:
                break
            surf.blit(self._text(str(score)), (w // 2, y))
            y_frac += 0.1

        hint = self._text(LEADERBOARD_HINT)
        surf.blit(hint, ((w - hint.get_width()) // 2, h - hint.get_height()))
