# viz/renderer_headless.py
from __future__ import annotations
from typing import List
from config import AppConfig
from core.interfaces import Frame

class HeadlessRenderer:
    """No window; keeps the frames it was asked to draw."""
    def __init__(self):
        self.frames: List[Frame] = []
        self.waited_ms = 0
        self.opened = False
    def __enter__(self) -> "HeadlessRenderer":
        return self
    def __exit__(self, *exc) -> None:
        self.close()
    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.opened = True
    def draw(self, frame: Frame) -> None:
        self.frames.append(frame)
    def tick(self, ms: int) -> None:
        self.waited_ms += ms
    def close(self) -> None:
        self.opened = False
