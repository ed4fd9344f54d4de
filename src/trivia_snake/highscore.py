# highscore.py
from __future__ import annotations
from pathlib import Path
from typing import Protocol, Union
import logging

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def get(self) -> int: ...
    def set(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process."""

    def __init__(self, score: int = 0):
        self.score = score
        self.writes = 0

    def get(self) -> int:
        return self.score

    def set(self, score: int) -> None:
        self.score = score
        self.writes += 1


class FileHighScoreStore:
    """
    Stores the high score as a single integer in a text file.
    A missing or unreadable file, or anything that is not a non-negative
    integer, reads as 0.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get(self) -> int:
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return 0
        except OSError as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        try:
            score = int(raw)
        except ValueError:
            logger.warning("Ignoring malformed high score %r in %s", raw, self.path)
            return 0
        if score < 0:
            logger.warning("Ignoring negative high score %d in %s", score, self.path)
            return 0
        return score

    def set(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{int(score)}\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score %d to %s: %s", score, self.path, exc)
            return
        logger.debug("Saved high score %d to %s", score, self.path)
