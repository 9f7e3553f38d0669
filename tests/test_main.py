"""
Tests for gridsnake.main - CLI parsing and key routing (no window needed).
"""

import pygame
import pytest

from gridsnake.config import Config, Direction
from gridsnake.controller import GameController
from gridsnake.game import Phase
from gridsnake.main import parse_args, build_config, handle_key


class TestArgs:
    def test_defaults_build_default_config(self):
        assert build_config(parse_args([])) == Config()

    def test_overrides(self):
        cfg = build_config(parse_args(["--board-size", "10", "--speed", "150", "--seed", "9"]))
        assert cfg.board_size == 10
        assert cfg.initial_speed_ms == 150
        assert cfg.seed == 9

    def test_invalid_settings_raise(self):
        with pytest.raises(ValueError):
            build_config(parse_args(["--min-speed", "500"]))


class TestHandleKey:
    @pytest.fixture
    def controller(self):
        return GameController(Config())

    def test_enter_starts(self, controller):
        assert handle_key(controller, pygame.K_RETURN)
        assert controller.get_state().phase is Phase.RUNNING

    def test_space_toggles(self, controller):
        handle_key(controller, pygame.K_SPACE)
        handle_key(controller, pygame.K_SPACE)
        assert controller.get_state().phase is Phase.IDLE

    def test_arrows_steer(self, controller):
        handle_key(controller, pygame.K_UP)
        assert controller.get_state().direction is Direction.UP
        handle_key(controller, pygame.K_DOWN)
        assert controller.get_state().direction is Direction.UP

    def test_r_resets(self, controller):
        controller.start()
        controller.tick()
        handle_key(controller, pygame.K_r)
        assert controller.get_state().head == (10, 10)
        assert controller.get_state().phase is Phase.IDLE

    def test_escape_quits(self, controller):
        assert not handle_key(controller, pygame.K_ESCAPE)

    def test_other_keys_ignored(self, controller):
        before = controller.get_state()
        assert handle_key(controller, pygame.K_a)
        assert controller.get_state() is before
