# main.py
import argparse
import logging

import pygame # type: ignore

from .config import (
    CELL_SIZE, BAR_HEIGHT, GRID_SIZE, TICK_MS,
    BG, GRID, GREEN, HEAD, RED, TEXT, GOLD,
    UP, DOWN, LEFT, RIGHT, RESET,
    Config, Phase,
)
from .game import Snapshot
from .session import SnakeGame
from .storage import JsonScoreStore, MemoryScoreStore

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
RESET_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_SPACE)


# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color) -> None:
    rect = pygame.Rect(gx * CELL_SIZE + 1, BAR_HEIGHT + gy * CELL_SIZE + 1,
                       CELL_SIZE - 2, CELL_SIZE - 2)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, frame: Snapshot) -> None:
    screen.fill(BG)
    side = frame.grid_size * CELL_SIZE
    for i in range(frame.grid_size + 1):
        pygame.draw.line(screen, GRID, (i * CELL_SIZE, BAR_HEIGHT), (i * CELL_SIZE, BAR_HEIGHT + side))
        pygame.draw.line(screen, GRID, (0, BAR_HEIGHT + i * CELL_SIZE), (side, BAR_HEIGHT + i * CELL_SIZE))
    # food
    if frame.food is not None:
        cx = frame.food[0] * CELL_SIZE + CELL_SIZE // 2
        cy = BAR_HEIGHT + frame.food[1] * CELL_SIZE + CELL_SIZE // 2
        pygame.draw.circle(screen, RED, (cx, cy), CELL_SIZE // 2 - 2)
    # snake
    for i, (x, y) in enumerate(frame.snake):
        draw_cell(screen, x, y, HEAD if i == 0 else GREEN)
    # score bar
    screen.blit(font.render(f"Score: {frame.score}", True, TEXT), (8, 8))
    best = font.render(f"High score: {frame.best_score}", True, GOLD)
    screen.blit(best, best.get_rect(topright=(side - 8, 8)))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h - BAR_HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 160))  # RGBA
    screen.blit(overlay, (0, BAR_HEIGHT))

    mid = BAR_HEIGHT + (h - BAR_HEIGHT) // 2
    top = mid - 14 * (len(lines) - 1)
    for i, (text, color) in enumerate(lines):
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(w // 2, top + 28 * i)))

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, frame: Snapshot) -> None:
    draw_game(screen, font, frame)
    if frame.phase is Phase.IDLE:
        draw_overlay(screen, font, [
            ("Press any arrow key to start", (240, 240, 250)),
            ("Use arrow keys or WASD to steer", TEXT),
        ])
    elif frame.phase is Phase.OVER:
        draw_overlay(screen, font, [
            ("GAME OVER", (240, 90, 90)),
            (f"Score: {frame.score}", TEXT),
            ("Press R to play again", TEXT),
        ])


# ---------- Input ----------
def handle_input(game: SnakeGame) -> bool:
    """Feed key presses to the game. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in KEYMAP:
                game.submit(KEYMAP[event.key])
            elif event.key in RESET_KEYS and game.state.phase is Phase.OVER:
                game.submit(RESET)
    return True


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic grid snake.")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE)
    parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                        help="milliseconds between snake moves")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--highscore-file", type=str, default=Config.best_score_path)
    parser.add_argument("--no-save", action="store_true",
                        help="keep the high score in memory only")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = Config(
            seed=args.seed,
            grid_size=args.grid_size,
            tick_ms=args.tick_ms,
            best_score_path=args.highscore_file,
        ).validate()
    except ValueError as e:
        raise SystemExit(f"snake: {e}")
    store = MemoryScoreStore() if args.no_save else JsonScoreStore(cfg.best_score_path, cfg.best_score_key)

    pygame.init()
    font = pygame.font.SysFont(None, 26)
    side = cfg.grid_size * CELL_SIZE
    screen = pygame.display.set_mode((side, side + BAR_HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = SnakeGame(cfg, store=store, clock=pygame.time.get_ticks)
    logger.info("Loaded best score %d", game.state.best_score)

    running = True
    while running:
        # 1) input
        running = handle_input(game)
        if not running:
            break

        # 2) update (movement gated by the game's own timer)
        game.update()

        # 3) render
        draw_frame(screen, font, game.snapshot())
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
