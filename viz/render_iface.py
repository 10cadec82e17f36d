# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from config import AppConfig
from core.interfaces import Frame

class Renderer(Protocol):
    """open() acquires the backend; leaving the `with` block releases it."""
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, frame: Frame) -> None: ...
    def tick(self, ms: int) -> None: ...
    def close(self) -> None: ...
    def __enter__(self) -> "Renderer": ...
    def __exit__(self, *exc) -> None: ...
