"""Drag-to-shoot input handling."""

from __future__ import annotations

import math

import pytest

from aim import begin_aim, cancel_aim, power_fraction, release_aim, shot_power, update_aim
from config import KICK_SPOT


BX, BY = KICK_SPOT


class TestShotPower:
    def test_below_minimum_counts_as_minimum(self) -> None:
        assert shot_power(10) == pytest.approx(35 / 26)
        assert shot_power(0) == shot_power(35)

    def test_above_maximum_is_capped(self) -> None:
        assert shot_power(400) == pytest.approx(160 / 26)
        assert shot_power(161) == shot_power(160)

    def test_monotonic_inside_range(self) -> None:
        powers = [shot_power(d) for d in range(35, 161)]
        assert all(b >= a for a, b in zip(powers, powers[1:]))
        assert powers[0] < powers[-1]


class TestBeginAim:
    def test_accepts_pointer_near_ball(self, state) -> None:
        assert begin_aim(state, (BX + 10, BY - 5))
        assert (state.drag.x, state.drag.y) == (BX + 10, BY - 5)

    def test_rejects_pointer_outside_capture_radius(self, state) -> None:
        assert not begin_aim(state, (BX + 33, BY))
        assert state.drag is None

    def test_rejects_while_kicking(self, state) -> None:
        state.kicking = True
        assert not begin_aim(state, (BX, BY))
        assert state.drag is None

    def test_rejects_after_resolution(self, state) -> None:
        state.outcome = "MISSED"
        assert not begin_aim(state, (BX, BY))


class TestUpdateAndCancel:
    def test_update_without_drag_is_noop(self, state) -> None:
        update_aim(state, (10, 10))
        assert state.drag is None

    def test_update_overwrites_drag(self, state) -> None:
        begin_aim(state, (BX, BY))
        update_aim(state, (BX + 50, BY + 70))
        assert (state.drag.x, state.drag.y) == (BX + 50, BY + 70)

    def test_cancel_clears_without_shot(self, state) -> None:
        begin_aim(state, (BX, BY))
        cancel_aim(state)
        assert state.drag is None
        assert state.shot is None
        assert not state.kicking

    def test_cancel_without_drag_is_harmless(self, state) -> None:
        cancel_aim(state)
        assert state.drag is None


class TestReleaseAim:
    def test_release_without_drag_is_noop(self, state) -> None:
        assert release_aim(state) is None
        assert not state.kicking

    def test_short_pull_down_shoots_straight_up_at_minimum_power(self, state) -> None:
        begin_aim(state, (BX, BY + 10))
        shot = release_aim(state)
        assert shot.vx == pytest.approx(0, abs=1e-9)
        assert shot.vy == pytest.approx(-(35 / 26) * 1.29)
        assert state.kicking
        assert state.drag is None
        assert state.shot is shot
        assert not shot.resolved

    def test_diagonal_pull_uses_both_gains(self, state) -> None:
        begin_aim(state, (BX, BY))
        update_aim(state, (BX + 60, BY + 80))
        shot = release_aim(state)
        angle = math.atan2(80, 60)
        power = 100 / 26
        assert shot.vx == pytest.approx(math.cos(angle) * power * 1.31)
        assert shot.vy == pytest.approx(-math.sin(angle) * power * 1.29)

    def test_long_pull_is_capped(self, state) -> None:
        begin_aim(state, (BX, BY))
        update_aim(state, (BX, BY + 500))
        shot = release_aim(state)
        assert shot.vy == pytest.approx(-(160 / 26) * 1.29)


class TestPowerFraction:
    def test_zero_without_drag(self, state) -> None:
        assert power_fraction(state) == 0.0

    def test_proportional_then_full(self, state) -> None:
        begin_aim(state, (BX, BY))
        update_aim(state, (BX, BY + 80))
        assert power_fraction(state) == pytest.approx(0.5)
        update_aim(state, (BX, BY + 300))
        assert power_fraction(state) == 1.0
