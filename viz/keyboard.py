# viz/keyboard.py
from __future__ import annotations
from typing import Iterable, List, Optional
import pygame as pg
from core.interfaces import (
    Cancel, Direction, DirectionKey, InputEvent, MenuOption, MenuSelect, Quit,
)

KEYMAP = {
    pg.K_1: MenuSelect(MenuOption.START),
    pg.K_KP1: MenuSelect(MenuOption.START),
    pg.K_2: MenuSelect(MenuOption.SCORES),
    pg.K_KP2: MenuSelect(MenuOption.SCORES),
    pg.K_3: MenuSelect(MenuOption.EXIT),
    pg.K_KP3: MenuSelect(MenuOption.EXIT),
    pg.K_UP: DirectionKey(Direction.UP),
    pg.K_DOWN: DirectionKey(Direction.DOWN),
    pg.K_LEFT: DirectionKey(Direction.LEFT),
    pg.K_RIGHT: DirectionKey(Direction.RIGHT),
    pg.K_ESCAPE: Cancel(),
}

def translate(e: pg.event.Event) -> Optional[InputEvent]:
    if e.type == pg.QUIT:
        return Quit()
    if e.type == pg.KEYDOWN:
        return KEYMAP.get(e.key)
    return None

class Keyboard:
    def poll(self) -> List[InputEvent]:
        return self.translate_all(pg.event.get())

    @staticmethod
    def translate_all(events: Iterable[pg.event.Event]) -> List[InputEvent]:
        out = []
        for e in events:
            ev = translate(e)
            if ev is not None:
                out.append(ev)
        return out
