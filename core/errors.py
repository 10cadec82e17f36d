# core/errors.py
from __future__ import annotations


class SnakeError(Exception):
    """Base class for everything the game raises on purpose."""


class InitializationFailure(SnakeError):
    """Window / font backend could not be brought up."""


class PersistenceError(SnakeError):
    pass


class PersistenceReadError(PersistenceError):
    """Score file is unreadable, or a record in it is malformed.

    `lineno` is 0 when the file as a whole could not be read.
    """
    def __init__(self, path: str, lineno: int = 0, raw: str = "", reason: str | None = None):
        if reason is None:
            reason = f"malformed score record {raw!r}"
        super().__init__(f"{path}:{lineno}: {reason}" if lineno else f"{path}: {reason}")
        self.path = path
        self.lineno = lineno
        self.raw = raw


class PersistenceWriteError(PersistenceError):
    pass


class GridFullError(SnakeError):
    """No free cell left to put food on."""
