# core/controller.py
from __future__ import annotations
import logging
from typing import Iterable, Optional, Tuple
from .errors import GridFullError, PersistenceWriteError
from .interfaces import (
    Cancel, Direction, DirectionKey, Frame, InputEvent, MenuOption, MenuSelect,
    Mode, Quit, TickResult,
)
from .scores import ScoreStore
from .session import GameSession

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MENU = 1   # user picked "Exit" in the menu


class GameController:
    """Top-level state machine: MENU <-> PLAYING, MENU <-> LEADERBOARD.

    One call to `step` is one tick: pending input is applied, the snake moves
    (when playing) and a Frame describing the result is returned.
    """

    def __init__(self, session: GameSession, store: ScoreStore):
        self.session = session
        self.store = store
        self.mode = Mode.MENU
        self.running = True
        self.exit_code = EXIT_OK
        self.scores: Tuple[int, ...] = ()
        self._pending: Optional[Direction] = None

    # ---- input ----
    def dispatch(self, events: Iterable[InputEvent]) -> None:
        for ev in events:
            if not self.running:
                return
            self.handle(ev)

    def handle(self, ev: InputEvent) -> None:
        if isinstance(ev, Quit):
            logger.info("quit requested")
            self.running = False
            self.exit_code = EXIT_OK
        elif self.mode is Mode.MENU:
            if isinstance(ev, MenuSelect):
                self._on_menu(ev.option)
        elif self.mode is Mode.PLAYING:
            if isinstance(ev, DirectionKey):
                self._pending = ev.direction
            elif isinstance(ev, Cancel):
                # abandoned runs are not recorded
                logger.info("run abandoned at score %d", self.session.score)
                self._pending = None
                self.mode = Mode.MENU
        elif self.mode is Mode.LEADERBOARD:
            if isinstance(ev, Cancel):
                self.mode = Mode.MENU

    def _on_menu(self, option: MenuOption) -> None:
        if option is MenuOption.START:
            self.session.reset()
            self._pending = None
            self.mode = Mode.PLAYING
        elif option is MenuOption.SCORES:
            self.scores = tuple(self.store.ranked_descending())
            self.mode = Mode.LEADERBOARD
        elif option is MenuOption.EXIT:
            logger.info("exit selected from menu")
            self.running = False
            self.exit_code = EXIT_MENU
        logger.debug("menu -> %s", self.mode.value)

    # ---- time ----
    def tick(self) -> Optional[TickResult]:
        if not self.running or self.mode is not Mode.PLAYING:
            return None
        direction = self._pending or self.session.direction
        self._pending = None
        try:
            result = self.session.advance(direction)
        except GridFullError:
            logger.info("grid full, run ends with score %d", self.session.score)
            self._game_over()
            return TickResult.COLLIDED
        if result is TickResult.COLLIDED:
            self._game_over()
        return result

    def step(self, events: Iterable[InputEvent]) -> Frame:
        self.dispatch(events)
        self.tick()
        return self.frame()

    def frame(self) -> Frame:
        return Frame(mode=self.mode, snapshot=self.session.snapshot(), scores=self.scores)

    def _game_over(self) -> None:
        score = self.session.score
        logger.info("game over, score %d", score)
        try:
            self.store.append(score)
        except PersistenceWriteError as e:
            logger.warning("score %d was not saved: %s", score, e)
        self.session.reset()
        self.mode = Mode.MENU
