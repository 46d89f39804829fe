# storage.py
import json
import logging
import os
from typing import Protocol

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """Key-value home of the best score."""

    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class MemoryScoreStore:
    """Best score kept in process memory only."""

    def __init__(self, initial: int = 0):
        self.value = initial

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value


class JsonScoreStore:
    """
    Best score in a small JSON object file, under a fixed key.
    Read or write failures are logged and absorbed: a bad file loads as 0,
    a failed save is dropped.
    """

    def __init__(self, path: str, key: str = "snakeHighScore"):
        self.path = os.path.expanduser(path)
        self.key = key

    def _read(self) -> dict:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            value = int(self._read().get(self.key, 0))
        except (OSError, ValueError, TypeError, OverflowError) as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0
        return max(value, 0)

    def save(self, value: int) -> None:
        try:
            data = self._read() if os.path.exists(self.path) else {}
        except (OSError, ValueError) as e:
            logger.warning("Overwriting unreadable score file %s: %s", self.path, e)
            data = {}
        data[self.key] = int(value)

        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f)
        except OSError as e:
            logger.warning("Could not save best score to %s: %s", self.path, e)
