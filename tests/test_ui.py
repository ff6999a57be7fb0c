"""Headless smoke test for the renderer."""

from __future__ import annotations

import pygame
import pytest

from aim import begin_aim, update_aim
from config import H, KICK_SPOT, W, WHITE
from core import apply_outcome
from ui import RESTART_RECT, draw_scene


@pytest.fixture(scope="module")
def fonts():
    pygame.font.init()
    yield pygame.font.Font(None, 25), pygame.font.Font(None, 14)
    pygame.font.quit()


@pytest.fixture
def screen():
    return pygame.Surface((W, H))


class TestDrawScene:
    def test_idle_round(self, screen, fonts, state) -> None:
        draw_scene(screen, fonts, state)

    def test_aiming_with_debug(self, screen, fonts, state) -> None:
        bx, by = KICK_SPOT
        begin_aim(state, (bx, by))
        update_aim(state, (bx + 40, by + 90))
        draw_scene(screen, fonts, state, fps=60.0, show_debug=True)

    def test_restart_button_drawn_when_visible(self, screen, fonts, state) -> None:
        apply_outcome(state, "SAVED", 0)
        state.restart_visible = True
        draw_scene(screen, fonts, state, hover_restart=True)
        assert tuple(screen.get_at(RESTART_RECT.midleft))[:3] == WHITE

    def test_outcome_banner_sits_on_dark_panel_over_goal(self, screen, fonts, state) -> None:
        apply_outcome(state, "SAVED", 0)
        draw_scene(screen, fonts, state)
        tw = fonts[0].size(state.message)[0]
        r, g, b = tuple(screen.get_at((W // 2 - tw // 2 - 8, 100)))[:3]
        assert r + g + b < 450
