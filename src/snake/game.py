# game.py
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import CFG, Config, Cell, Phase

logger = logging.getLogger(__name__)

# Cell codes used by occupancy_grid()
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

# Rejection-sampling attempts before falling back to the free-cell list
MAX_FOOD_TRIES = 64


# ---------- Helpers ----------
def occupancy_grid(
    snake: List[Cell], food: Optional[Cell], grid_size: int
) -> np.ndarray:
    """N x N int8 array indexed [y, x]."""
    grid = np.zeros((grid_size, grid_size), dtype=np.int8)
    for x, y in snake[1:]:
        grid[y, x] = BODY
    if snake:
        hx, hy = snake[0]
        grid[hy, hx] = HEAD
    if food is not None:
        grid[food[1], food[0]] = FOOD
    return grid


def spawn_food(
    snake: List[Cell], grid_size: int, rng: random.Random
) -> Optional[Cell]:
    """
    Pick a uniformly random free cell, or None if the snake covers the grid.
    Samples the whole grid first; once the board is crowded enough that this
    keeps missing, draws from the complement set instead.
    """
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        return None

    for _ in range(MAX_FOOD_TRIES):
        fx = rng.randrange(grid_size)
        fy = rng.randrange(grid_size)
        if (fx, fy) not in occupied:
            return (fx, fy)

    ys, xs = np.nonzero(occupancy_grid(snake, None, grid_size) == EMPTY)
    i = rng.randrange(len(xs))
    return (int(xs[i]), int(ys[i]))


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Cell                # heading applied on the last tick
    pending: Cell                  # heading the next tick will apply
    food: Optional[Cell]
    score: int
    best_score: int
    phase: Phase
    grid_size: int
    speed_ms: int                  # current tick interval
    rng: random.Random


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, handed to renderers."""

    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    best_score: int
    phase: Phase
    grid_size: int
    speed_ms: int

    def to_array(self) -> np.ndarray:
        return occupancy_grid(list(self.snake), self.food, self.grid_size)


def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        snake=tuple(state.snake),
        food=state.food,
        score=state.score,
        best_score=state.best_score,
        phase=state.phase,
        grid_size=state.grid_size,
        speed_ms=state.speed_ms,
    )


def new_game_state(
    config: Config = CFG,
    rng: Optional[random.Random] = None,
    best_score: int = 0,
) -> GameState:
    config.validate()
    rng = rng if rng is not None else random.Random(config.seed)
    snake = config.body()
    return GameState(
        snake=snake,
        direction=config.initial_heading,
        pending=config.initial_heading,
        food=spawn_food(snake, config.grid_size, rng),
        score=0,
        best_score=best_score,
        phase=Phase.IDLE,
        grid_size=config.grid_size,
        speed_ms=config.tick_ms,
        rng=rng,
    )


def reset_game(state: GameState, config: Config = CFG) -> GameState:
    """Fresh RUNNING game; keeps best score and the random stream."""
    fresh = new_game_state(config, rng=state.rng, best_score=state.best_score)
    fresh.phase = Phase.RUNNING
    return fresh


# ---------- Tick ----------
def step_game(
    state: GameState, save_best: Optional[Callable[[int], None]] = None
) -> bool:
    """
    Advance the game by one tick. Returns True if still alive.

    A fatal move (wall or body) is never applied: the phase flips to OVER and
    the snake keeps its last valid position. Moving into the cell the tail is
    leaving this same tick is not a collision.
    """
    if state.phase is not Phase.RUNNING:
        return state.phase is not Phase.OVER

    hx, hy = state.snake[0]
    dx, dy = state.pending
    nx, ny = hx + dx, hy + dy
    n = state.grid_size

    # Wall collision
    if not (0 <= nx < n and 0 <= ny < n):
        _game_over(state, "wall", (nx, ny))
        return False

    new_head = (nx, ny)
    grows = new_head == state.food

    # Self collision; the tail only counts if it stays put this tick
    body = state.snake if grows else state.snake[:-1]
    if new_head in body:
        _game_over(state, "self", new_head)
        return False

    # Move / grow; the heading is committed only on a safe move
    state.direction = state.pending
    state.snake.insert(0, new_head)
    if grows:
        state.score += 1
        if state.score > state.best_score:
            state.best_score = state.score
            logger.info("New best score: %d", state.best_score)
            if save_best is not None:
                save_best(state.best_score)
        state.food = spawn_food(state.snake, n, state.rng)
        if state.food is None:
            _game_over(state, "board full", new_head)
            return False
    else:
        state.snake.pop()

    return True


def _game_over(state: GameState, reason: str, cell: Cell) -> None:
    state.phase = Phase.OVER
    logger.info(
        "Game over (%s) at %s, score %d, length %d",
        reason, cell, state.score, len(state.snake),
    )
