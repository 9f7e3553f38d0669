# controller.py
from dataclasses import replace
from enum import Enum
from typing import Optional
import logging
import random

from .config import CFG, Config, Direction
from .game import GameState, Phase, new_game_state, tick, is_opposite
from .render import render_text
from .scheduler import TickScheduler, ManualTickScheduler

logger = logging.getLogger(__name__)


class InputEvent(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"


MOVES = {
    InputEvent.MOVE_UP: Direction.UP,
    InputEvent.MOVE_DOWN: Direction.DOWN,
    InputEvent.MOVE_LEFT: Direction.LEFT,
    InputEvent.MOVE_RIGHT: Direction.RIGHT,
}


class GameController:
    """
    Single owner of the game state. Every mutation goes through one of the
    commands below and replaces the state wholesale; anything invalid for
    the current phase or direction is silently ignored.

    Phases:
        IDLE --start/toggle--> RUNNING --toggle--> IDLE
        RUNNING --collision--> GAME_OVER
        any --reset--> IDLE

    While RUNNING exactly one schedule is armed on `scheduler` with the
    current speed as its interval. It is re-armed whenever the speed changes
    and cancelled as soon as the phase leaves RUNNING.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        scheduler: Optional[TickScheduler] = None,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.scheduler = scheduler if scheduler is not None else ManualTickScheduler(self.on_timer)
        self._state = new_game_state(cfg)
        self._generation = 0

    # ----- Queries -----
    def get_state(self) -> GameState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    # ----- Commands -----
    def start(self) -> None:
        if self._state.phase is not Phase.IDLE:
            return
        self._enter_running()

    def toggle_running(self) -> None:
        phase = self._state.phase
        if phase is Phase.RUNNING:
            self._stop_driver()
            self._state = self._replace(phase=Phase.IDLE)
            logger.info("Paused at score %d", self._state.score)
        elif phase is Phase.IDLE:
            self._enter_running()

    def reset(self) -> None:
        self._stop_driver()
        self._state = new_game_state(self.cfg)
        logger.info("Game reset")

    def set_direction(self, direction: Direction) -> None:
        state = self._state
        if state.is_over or is_opposite(direction, state.direction):
            return
        self._state = self._replace(direction=direction)

    def tick(self) -> GameState:
        before = self._state
        if not before.is_running:
            return before

        after = tick(before, self.cfg, self.rng)
        self._state = after

        if after.is_over:
            self._stop_driver()
            logger.info("Game over, final score %d", after.score)
            logger.debug("Final board:\n%s", render_text(after, self.cfg.board_size))
        elif after.speed != before.speed:
            self._arm_driver()
        return after

    def handle_event(self, event: InputEvent) -> None:
        if not isinstance(event, InputEvent):
            raise ValueError(f"Unknown input event: {event!r}")
        if event is InputEvent.TOGGLE_PAUSE:
            self.toggle_running()
        else:
            self.set_direction(MOVES[event])

    def on_timer(self, generation: int) -> None:
        """Scheduler callback. Ticks armed before the last re-arm/cancel are dropped."""
        if generation != self._generation:
            logger.debug("Dropping stale tick (generation %d, current %d)", generation, self._generation)
            return
        self.tick()

    # ----- Internals -----
    def _replace(self, **changes) -> GameState:
        return replace(self._state, **changes)

    def _enter_running(self) -> None:
        self._state = self._replace(phase=Phase.RUNNING)
        self._arm_driver()
        logger.info("Running at %dms per tick", self._state.speed)

    def _arm_driver(self) -> None:
        self._generation += 1
        self.scheduler.arm(self._state.speed, self._generation)

    def _stop_driver(self) -> None:
        self._generation += 1
        self.scheduler.cancel()
