# config.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


# ----- Directions (dx, dy); y grows downwards -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


# ----- Board & pacing -----
BOARD_SIZE = 20
INITIAL_SPEED_MS = 200
SPEED_INCREMENT = 5
MIN_SPEED_MS = 50

INITIAL_SNAKE: List[Tuple[int, int]] = [(10, 10), (9, 10), (8, 10)]
INITIAL_FOOD: Tuple[int, int] = (15, 15)
INITIAL_DIRECTION = Direction.RIGHT

# random draws before place_food falls back to scanning the board
PLACE_FOOD_ATTEMPTS = 1000

# ----- Window -----
CELL_SIZE = 24
HUD_HEIGHT = 32
FPS = 60

# ----- Colors -----
BG        = (17, 24, 39)
CELL_BG   = (31, 41, 55)
HEAD      = (34, 211, 238)
BODY      = (6, 182, 212)
FOOD      = (239, 68, 68)
TEXT      = (220, 220, 230)
OVERLAY   = (0, 0, 0, 140)


# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    board_size: int = BOARD_SIZE
    initial_speed_ms: int = INITIAL_SPEED_MS
    speed_increment: int = SPEED_INCREMENT
    min_speed_ms: int = MIN_SPEED_MS
    initial_snake: List[Tuple[int, int]] = field(default_factory=lambda: list(INITIAL_SNAKE))
    initial_food: Tuple[int, int] = INITIAL_FOOD
    initial_direction: Direction = INITIAL_DIRECTION
    cell_size: int = CELL_SIZE

    def __post_init__(self):
        if self.board_size < 2:
            raise ValueError(f"board_size must be at least 2, got {self.board_size}")
        if self.min_speed_ms <= 0 or self.initial_speed_ms <= 0:
            raise ValueError("speeds must be positive")
        if self.min_speed_ms > self.initial_speed_ms:
            raise ValueError(
                f"min_speed_ms ({self.min_speed_ms}) exceeds initial_speed_ms ({self.initial_speed_ms})"
            )
        if self.speed_increment < 0:
            raise ValueError("speed_increment must not be negative")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")

        snake = [tuple(p) for p in self.initial_snake]
        if not snake:
            raise ValueError("initial_snake must not be empty")
        for x, y in snake:
            if not self.in_bounds(x, y):
                raise ValueError(f"initial snake segment {(x, y)} is off the board")
        if len(set(snake)) != len(snake):
            raise ValueError("initial snake overlaps itself")
        for (ax, ay), (bx, by) in zip(snake, snake[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError(f"initial snake is not contiguous between {(ax, ay)} and {(bx, by)}")
        self.initial_snake = snake

        self.initial_food = tuple(self.initial_food)
        if not self.in_bounds(*self.initial_food):
            raise ValueError(f"initial food {self.initial_food} is off the board")
        if self.initial_food in snake:
            raise ValueError(f"initial food {self.initial_food} lies on the snake")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.board_size and 0 <= y < self.board_size

    @classmethod
    def for_board(cls, board_size: int, **overrides) -> "Config":
        """
        Build a config whose starting layout is scaled to `board_size`:
        a 3-cell snake heading right from the centre, food at the 3/4 mark.
        On the default 20x20 board this is exactly the built-in layout.
        """
        c = board_size // 2
        f = board_size * 3 // 4
        overrides.setdefault("initial_snake", [(c, c), (c - 1, c), (c - 2, c)])
        overrides.setdefault("initial_food", (f, f))
        return cls(board_size=board_size, **overrides)


CFG = Config()
