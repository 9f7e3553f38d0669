# src/gridsnake/__init__.py
"""Grid snake: simulation core, lifecycle controller and a pygame front end."""

from gridsnake.config import Config, Direction, CFG
from gridsnake.game import GameState, Phase, new_game_state, place_food, tick
from gridsnake.controller import GameController, InputEvent

__all__ = [
    "Config", "Direction", "CFG",
    "GameState", "Phase", "new_game_state", "place_food", "tick",
    "GameController", "InputEvent",
]
