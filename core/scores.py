# core/scores.py
from __future__ import annotations
import logging
import os
from typing import List, Optional
from .errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger(__name__)


class ScoreStore:
    """Append-only leaderboard file: one decimal score per line, no header."""

    def __init__(self, path: str):
        self.path = path

    def clear(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise PersistenceWriteError(f"could not clear {self.path}: {e}") from e
        logger.debug("cleared score file %s", self.path)

    def append(self, score: int) -> None:
        score = int(score)
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")
        parent = os.path.dirname(self.path)
        try:
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "a", encoding="ascii", newline="") as f:
                f.write(f"{score}\n")
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise PersistenceWriteError(f"could not write score to {self.path}: {e}") from e
        logger.info("saved score %d to %s", score, self.path)

    def load_all(self) -> List[int]:
        try:
            with open(self.path, "r", encoding="ascii") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(self.path, reason=str(e)) from e

        scores: List[int] = []
        for lineno, raw in enumerate(lines, start=1):
            text = raw.strip()
            if not (text.isascii() and text.isdigit()):
                raise PersistenceReadError(self.path, lineno, raw)
            scores.append(int(text))
        return scores

    def ranked_descending(self) -> List[int]:
        # sorted() is stable, so equal scores keep file order
        return sorted(self.load_all(), reverse=True)

    def best(self) -> Optional[int]:
        ranked = self.ranked_descending()
        return ranked[0] if ranked else None
