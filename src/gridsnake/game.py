# game.py
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Tuple
import logging
import random

from .config import Config, Direction, CFG, PLACE_FOOD_ATTEMPTS

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class Phase(Enum):
    IDLE = "idle"            # not started yet, or paused
    RUNNING = "running"
    GAME_OVER = "game_over"


# ---------- Helpers ----------
def place_food(
    snake: Iterable[Coordinate],
    board_size: int,
    rng: random.Random,
    attempts: int = PLACE_FOOD_ATTEMPTS,
) -> Optional[Coordinate]:
    """
    Pick a free cell uniformly at random. After `attempts` misses fall back to
    scanning the board row by row. Returns None only if the snake covers
    every cell.
    """
    occupied = set(snake)
    for _ in range(attempts):
        cell = (rng.randrange(board_size), rng.randrange(board_size))
        if cell not in occupied:
            return cell

    logger.debug("No free cell after %d draws, scanning the board", attempts)
    for y in range(board_size):
        for x in range(board_size):
            if (x, y) not in occupied:
                return (x, y)
    return None


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.dx == -b.dx and a.dy == -b.dy


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Coordinate, ...]   # head at index 0
    food: Optional[Coordinate]
    direction: Direction
    phase: Phase
    score: int
    speed: int                      # current tick interval (ms)

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    @property
    def is_running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER


def new_game_state(cfg: Config = CFG) -> GameState:
    return GameState(
        snake=tuple(cfg.initial_snake),
        food=cfg.initial_food,
        direction=cfg.initial_direction,
        phase=Phase.IDLE,
        score=0,
        speed=cfg.initial_speed_ms,
    )


# ---------- Update ----------
def tick(state: GameState, cfg: Config = CFG, rng: Optional[random.Random] = None) -> GameState:
    """
    Advance the game by one step and return the successor state.
    - Anything but RUNNING is left untouched.
    - Hitting a wall or any current body segment (the tail included, even
      though it would move away this step) ends the game; nothing else changes.
    - Eating grows the snake by one, scores, respawns food and speeds up.
    """
    if state.phase is not Phase.RUNNING:
        return state

    hx, hy = state.head
    nx, ny = hx + state.direction.dx, hy + state.direction.dy

    # Wall collision
    if not cfg.in_bounds(nx, ny):
        logger.info("Hit the wall at %s, final score %d", (nx, ny), state.score)
        return replace(state, phase=Phase.GAME_OVER)

    new_head = (nx, ny)

    # Self collision
    if new_head in state.snake:
        logger.info("Ran into itself at %s, final score %d", new_head, state.score)
        return replace(state, phase=Phase.GAME_OVER)

    if new_head != state.food:
        return replace(state, snake=(new_head,) + state.snake[:-1])

    # Eat & grow
    snake = (new_head,) + state.snake
    score = state.score + 1
    speed = max(cfg.min_speed_ms, state.speed - cfg.speed_increment)
    food = place_food(snake, cfg.board_size, rng or random.Random())
    logger.debug("Ate food at %s, score %d, speed %dms", new_head, score, speed)

    if food is None:
        logger.info("Board is full, final score %d", score)
        return replace(state, snake=snake, food=None, score=score, speed=speed, phase=Phase.GAME_OVER)

    return replace(state, snake=snake, food=food, score=score, speed=speed)
