from dataclasses import dataclass
from typing import List, Optional, Tuple
import enum

# ----- Grid & window -----
GRID_SIZE = 20
CELL_SIZE = 20
BAR_HEIGHT = 36  # score bar above the arena

# ----- Timing -----
TICK_MS = 175

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (34, 34, 42)
GREEN = (80, 200, 80)
HEAD  = (150, 255, 150)
RED   = (220, 70, 120)
TEXT  = (220, 220, 230)
GOLD  = (230, 190, 80)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

DIRECTIONS = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

RESET = "RESET"

Cell = Tuple[int, int]


class Phase(enum.Enum):
    """Coarse lifecycle of a game instance."""

    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


def initial_snake(grid_size: int) -> List[Cell]:
    """Canonical three-segment body, head first, centred and facing RIGHT."""
    mid = grid_size // 2
    return [(mid, mid), (mid - 1, mid), (mid - 2, mid)]


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_MS
    initial_snake: Optional[List[Cell]] = None
    initial_heading: Cell = RIGHT
    best_score_path: str = "~/.snake/highscore.json"
    best_score_key: str = "snakeHighScore"

    def body(self) -> List[Cell]:
        if self.initial_snake is not None:
            return [tuple(c) for c in self.initial_snake]
        return initial_snake(self.grid_size)

    def validate(self) -> "Config":
        """Raise ValueError if the arena or the starting snake is unusable."""
        if self.grid_size < 3:
            raise ValueError(f"grid_size must be at least 3, got {self.grid_size}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.initial_heading not in DIRECTIONS.values():
            raise ValueError(f"Unknown heading {self.initial_heading!r}")

        body = self.body()
        if not body:
            raise ValueError("initial snake must have at least one segment")
        for x, y in body:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"initial segment {(x, y)} is outside the grid")
        if len(set(body)) != len(body):
            raise ValueError("initial snake overlaps itself")
        for (ax, ay), (bx, by) in zip(body, body[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError("initial snake segments must be grid-adjacent")

        # heading must not point straight back into the neck
        if len(body) > 1:
            hx, hy = body[0]
            dx, dy = self.initial_heading
            if (hx + dx, hy + dy) == body[1]:
                raise ValueError("initial heading points into the snake's own body")
        return self


CFG = Config()
