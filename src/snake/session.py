# session.py
from typing import Callable, List, Optional
import logging
import random
import time

from .config import CFG, RESET, Config, Phase
from .controls import parse_command, submit_direction
from .game import GameState, Snapshot, new_game_state, reset_game, snapshot, step_game
from .scheduler import RepeatingTask
from .storage import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class SnakeGame:
    """
    One playable game: the authoritative state, its tick timer and the
    best-score store.

    All writes go through submit(), reset() and the timer callback, which the
    host calls from a single loop, so input and ticks never interleave.
    """

    def __init__(
        self,
        config: Config = CFG,
        store: Optional[ScoreStore] = None,
        clock: Callable[[], int] = monotonic_ms,
        rng: Optional[random.Random] = None,
    ):
        self.config = config.validate()
        self.store = store if store is not None else MemoryScoreStore()
        self.clock = clock
        self.state: GameState = new_game_state(
            config,
            rng=rng if rng is not None else random.Random(config.seed),
            best_score=self.store.load(),
        )
        self.timer = RepeatingTask(self.tick, self.state.speed_ms)
        self._listeners: List[Callable[[Snapshot], None]] = []

    # ----- Observers -----
    def subscribe(self, listener: Callable[[Snapshot], None]) -> None:
        self._listeners.append(listener)

    def snapshot(self) -> Snapshot:
        return snapshot(self.state)

    def _publish(self) -> None:
        frame = self.snapshot()
        for listener in self._listeners:
            listener(frame)

    # ----- Commands -----
    def submit(self, command) -> None:
        """Handle one raw input command; unknown commands are dropped."""
        parsed = parse_command(command)
        if parsed is None:
            return
        if parsed == RESET:
            self.reset()
            return

        state = self.state
        if state.phase is Phase.OVER:
            return
        was_idle = state.phase is Phase.IDLE
        state.phase, state.pending = submit_direction(parsed, state.phase, state.direction)
        if was_idle and state.phase is Phase.RUNNING:
            logger.info("Game started")
            self.timer.start(self.clock())

    def reset(self) -> None:
        """Replace the whole state with a fresh RUNNING game, then re-arm the timer."""
        self.timer.cancel()
        self.state = reset_game(self.state, self.config)
        self.timer.interval_ms = self.state.speed_ms
        logger.info("Game reset (best score %d)", self.state.best_score)
        self.timer.start(self.clock())
        self._publish()

    def set_tick_interval(self, ms: int) -> None:
        if ms <= 0:
            raise ValueError(f"tick interval must be positive, got {ms}")
        self.state.speed_ms = ms
        self.timer.interval_ms = ms

    # ----- Time -----
    def update(self) -> bool:
        """Run a tick if one is due. Returns True if a tick ran."""
        return self.timer.poll(self.clock())

    def tick(self) -> None:
        if self.state.phase is not Phase.RUNNING:
            self.timer.cancel()
            return
        try:
            step_game(self.state, save_best=self.store.save)
        finally:
            if self.state.phase is not Phase.RUNNING:
                self.timer.cancel()
        self._publish()
