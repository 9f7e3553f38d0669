# render.py
"""
Read-only projections of a GameState: a numpy cell grid, a text board for
logs, and the pygame drawing used by the window. Nothing here feeds back
into the game.
"""
from typing import Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import CELL_SIZE, HUD_HEIGHT, BG, CELL_BG, HEAD, BODY, FOOD, TEXT, OVERLAY
from .game import GameState, Phase

# ----- Cell codes for to_grid -----
EMPTY, FOOD_CELL, BODY_CELL, HEAD_CELL = 0, 1, 2, 3

CELL_CHARS = {EMPTY: ".", FOOD_CELL: "*", BODY_CELL: "o", HEAD_CELL: "@"}
CELL_COLORS = {EMPTY: CELL_BG, FOOD_CELL: FOOD, BODY_CELL: BODY, HEAD_CELL: HEAD}


def to_grid(state: GameState, board_size: int) -> np.ndarray:
    """
    Project the state onto a (board_size, board_size) int8 array indexed
    [y, x]. Head wins over body, body over food.
    """
    grid = np.zeros((board_size, board_size), dtype=np.int8)
    if state.food is not None:
        fx, fy = state.food
        grid[fy, fx] = FOOD_CELL
    for x, y in state.snake[1:]:
        grid[y, x] = BODY_CELL
    hx, hy = state.head
    grid[hy, hx] = HEAD_CELL
    return grid


def render_text(state: GameState, board_size: int) -> str:
    """
    Text board, top row first:
    . = empty, * = food, o = body, @ = head
    """
    grid = to_grid(state, board_size)
    return "\n".join("".join(CELL_CHARS[int(c)] for c in row) for row in grid)


# ---------- pygame ----------
def window_size(board_size: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    return board_size * cell_size, board_size * cell_size + HUD_HEIGHT


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], cell_size: int) -> None:
    rect = pygame.Rect(gx * cell_size, HUD_HEIGHT + gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect.inflate(-1, -1))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState,
              board_size: int, cell_size: int = CELL_SIZE) -> None:
    screen.fill(BG)
    grid = to_grid(state, board_size)
    for (gy, gx), code in np.ndenumerate(grid):
        draw_cell(screen, gx, gy, CELL_COLORS[int(code)], cell_size)
    txt = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(txt, (8, (HUD_HEIGHT - txt.get_height()) // 2))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    """Dim the board and show what to press next; nothing is drawn while running."""
    if state.phase is Phase.RUNNING:
        return

    if state.phase is Phase.GAME_OVER:
        lines = ["GAME OVER", f"Final score: {state.score}", "Press R to play again"]
    else:
        lines = ["Press Enter to play", "Arrows to move, Space to pause"]

    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, (0, 0))

    top = height // 2 - 16 * (len(lines) - 1)
    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT)
        screen.blit(surf, surf.get_rect(center=(width // 2, top + 32 * i)))
