# main.py
import argparse
import logging

import pygame  # type: ignore

from .config import Config, BOARD_SIZE, INITIAL_SPEED_MS, SPEED_INCREMENT, MIN_SPEED_MS, CELL_SIZE, FPS
from .controller import GameController, InputEvent
from .render import draw_game, draw_overlay, window_size
from .scheduler import PygameTickScheduler, TICK_EVENT

logger = logging.getLogger(__name__)

KEY_EVENTS = {
    pygame.K_UP: InputEvent.MOVE_UP,
    pygame.K_DOWN: InputEvent.MOVE_DOWN,
    pygame.K_LEFT: InputEvent.MOVE_LEFT,
    pygame.K_RIGHT: InputEvent.MOVE_RIGHT,
    pygame.K_SPACE: InputEvent.TOGGLE_PAUSE,
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake on a square grid.")
    parser.add_argument("--board-size", type=int, default=BOARD_SIZE,
                        help="Cells per side of the board")
    parser.add_argument("--speed", type=int, default=INITIAL_SPEED_MS,
                        help="Starting tick interval in ms")
    parser.add_argument("--min-speed", type=int, default=MIN_SPEED_MS,
                        help="Fastest allowed tick interval in ms")
    parser.add_argument("--speed-increment", type=int, default=SPEED_INCREMENT,
                        help="How many ms each food takes off the tick interval")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="Pixels per cell")
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for food placement")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config.for_board(
        args.board_size,
        seed=args.seed,
        initial_speed_ms=args.speed,
        min_speed_ms=args.min_speed,
        speed_increment=args.speed_increment,
        cell_size=args.cell_size,
    )


def handle_key(controller: GameController, key: int) -> bool:
    """Route one key press. Return False to quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_RETURN:
        controller.start()
    elif key == pygame.K_r:
        controller.reset()
    elif key in KEY_EVENTS:
        controller.handle_event(KEY_EVENTS[key])
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = build_config(args)
    except ValueError as e:
        raise SystemExit(f"Invalid settings: {e}")

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(cfg.board_size, cfg.cell_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    controller = GameController(cfg, scheduler=PygameTickScheduler())
    logger.info("Board %dx%d, seed %d", cfg.board_size, cfg.board_size, cfg.seed)

    running = True
    while running:
        # 1) input & timer ticks, in arrival order
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = handle_key(controller, event.key)
            elif event.type == TICK_EVENT:
                controller.on_timer(getattr(event, "generation", -1))
            if not running:
                break

        # 2) render
        state = controller.get_state()
        draw_game(screen, font, state, cfg.board_size, cfg.cell_size)
        draw_overlay(screen, font, state)
        pygame.display.flip()
        clock.tick(FPS)

    controller.scheduler.cancel()
    pygame.quit()


if __name__ == "__main__":
    main()
