from snake.config import Phase, RESET, UP, DOWN, LEFT, RIGHT
from snake.controls import is_opposite, parse_command, submit_direction


def test_opposite_pairs():
    assert is_opposite(UP, DOWN) and is_opposite(LEFT, RIGHT)
    assert not is_opposite(UP, LEFT)
    assert not is_opposite(RIGHT, RIGHT)


def test_reverse_is_rejected():
    assert submit_direction(LEFT, Phase.RUNNING, RIGHT) == (Phase.RUNNING, RIGHT)
    assert submit_direction(UP, Phase.RUNNING, DOWN) == (Phase.RUNNING, DOWN)


def test_turn_is_accepted():
    assert submit_direction(UP, Phase.RUNNING, RIGHT) == (Phase.RUNNING, UP)
    assert submit_direction(RIGHT, Phase.RUNNING, RIGHT) == (Phase.RUNNING, RIGHT)


def test_idle_starts_on_any_direction():
    assert submit_direction(DOWN, Phase.IDLE, RIGHT) == (Phase.RUNNING, DOWN)
    # reversal still starts the game but keeps the heading
    assert submit_direction(LEFT, Phase.IDLE, RIGHT) == (Phase.RUNNING, RIGHT)


def test_over_ignores_input():
    assert submit_direction(UP, Phase.OVER, RIGHT) == (Phase.OVER, RIGHT)


def test_parse_command():
    assert parse_command("up") == UP
    assert parse_command(" Left ") == LEFT
    assert parse_command(DOWN) == DOWN
    assert parse_command("reset") == RESET
    assert parse_command("jump") is None
    assert parse_command((1, 1)) is None
    assert parse_command(42) is None
    assert parse_command(None) is None
