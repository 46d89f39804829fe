# controls.py
import logging
from typing import Optional, Tuple, Union

from .config import DIRECTIONS, RESET, Cell, Phase

logger = logging.getLogger(__name__)

Command = Union[str, Cell]


def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def parse_command(command: object) -> Optional[Command]:
    """
    Normalize raw input into a direction vector or the RESET command.
    Accepts a (dx, dy) vector or a case-insensitive name. Returns None for
    anything else; callers drop those silently.
    """
    if isinstance(command, str):
        name = command.strip().upper()
        if name == RESET:
            return RESET
        if name in DIRECTIONS:
            return DIRECTIONS[name]
    elif isinstance(command, tuple) and command in DIRECTIONS.values():
        return command
    logger.debug("Ignoring unrecognized command %r", command)
    return None


def submit_direction(
    requested: Cell, current_phase: Phase, current_heading: Cell
) -> Tuple[Phase, Cell]:
    """
    Apply one directional command. Returns (next_phase, next_heading).
    - IDLE: any direction starts the game.
    - OVER: ignored; only a reset changes state.
    - A request opposite to the current heading leaves the heading unchanged.
    """
    if current_phase is Phase.OVER:
        return current_phase, current_heading

    next_phase = Phase.RUNNING if current_phase is Phase.IDLE else current_phase
    if is_opposite(requested, current_heading):
        return next_phase, current_heading
    return next_phase, requested
