"""Grid snake: game state machine plus a pygame shell."""

from .config import CFG, Config, Phase
from .game import GameState, Snapshot
from .session import SnakeGame

__all__ = ["CFG", "Config", "Phase", "GameState", "Snapshot", "SnakeGame"]
