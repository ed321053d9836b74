"""Unit tests for head turning."""

from __future__ import annotations

import random

import pytest

from avatar_bot.behaviors import BotState, HeadTurnBehavior, HeadTurnConfig, HeadTurnState
from avatar_bot.behaviors.head_turn import approach
from avatar_bot.host import SimulatedAvatar


class TestApproach:
    """Tests for the exponential approach step."""

    def test_single_step(self) -> None:
        assert approach(0.0, 30.0, 0.20) == pytest.approx(6.0)

    def test_negative_target(self) -> None:
        assert approach(10.0, -10.0, 0.5) == pytest.approx(0.0)

    def test_never_overshoots(self) -> None:
        value = 0.0
        for _ in range(100):
            value = approach(value, 30.0, 0.20)
            assert value <= 30.0


class TestHeadTurnBehavior:
    """Tests for HeadTurnBehavior state machine."""

    def test_defaults(self) -> None:
        config = HeadTurnConfig()

        assert config.chance == 0.05
        assert config.pitch_range == 30.0
        assert config.pitch_rate == 0.20
        assert config.stop_tolerance == 0.05

    def test_first_step_from_zero_to_thirty(self, scripted_rng) -> None:
        """Current 0, target 30 and rate 0.2 gives 6 after one step."""
        avatar = SimulatedAvatar(head_pitch=0.0)
        behavior = HeadTurnBehavior(avatar, scripted_rng([]))
        state = BotState(target_head_pitch=30.0, head=HeadTurnState.TURNING)

        behavior.update(state)

        assert avatar.head_pitch == pytest.approx(6.0)
        assert state.head == HeadTurnState.TURNING

    def test_monotonic_approach_and_stop(self, scripted_rng) -> None:
        """Pitch approaches the target monotonically; turning ends inside tolerance."""
        avatar = SimulatedAvatar(head_pitch=0.0)
        rng = scripted_rng([])
        behavior = HeadTurnBehavior(avatar, rng)
        state = BotState(target_head_pitch=30.0, head=HeadTurnState.TURNING)

        previous_gap = 30.0
        for _ in range(200):
            if state.head == HeadTurnState.IDLE:
                break
            behavior.update(state)
            gap = abs(avatar.head_pitch - 30.0)
            assert gap < previous_gap
            assert (state.head == HeadTurnState.TURNING) == (gap >= 0.05)
            previous_gap = gap

        assert state.head == HeadTurnState.IDLE
        assert abs(avatar.head_pitch - 30.0) < 0.05

    def test_arming_frame_does_not_move_head(self, scripted_rng) -> None:
        """The frame that picks a target leaves the head where it is."""
        avatar = SimulatedAvatar(head_pitch=3.0)
        # trigger, then uniform(-30, 30) with 0.75 -> 15
        rng = scripted_rng([0.0, 0.75])
        behavior = HeadTurnBehavior(avatar, rng)
        state = BotState()

        behavior.update(state)

        assert state.head == HeadTurnState.TURNING
        assert state.target_head_pitch == pytest.approx(15.0)
        assert avatar.head_pitch == 3.0

        behavior.update(state)

        assert avatar.head_pitch == pytest.approx(3.0 + (15.0 - 3.0) * 0.2)

    def test_no_rearm_while_turning(self, scripted_rng) -> None:
        """No random draw is taken while a turn is in progress."""
        avatar = SimulatedAvatar(head_pitch=0.0)
        rng = scripted_rng([])
        behavior = HeadTurnBehavior(avatar, rng)
        state = BotState(target_head_pitch=20.0, head=HeadTurnState.TURNING)

        behavior.update(state)

        assert rng.calls == 0
        assert state.target_head_pitch == 20.0

    def test_idle_frames_still_ease_toward_old_target(self, scripted_rng) -> None:
        """An idle frame without a trigger keeps easing toward the last target."""
        avatar = SimulatedAvatar(head_pitch=10.0)
        behavior = HeadTurnBehavior(avatar, scripted_rng([0.9]))
        state = BotState(target_head_pitch=0.0, head=HeadTurnState.IDLE)

        behavior.update(state)

        assert avatar.head_pitch == pytest.approx(8.0)
        assert state.head == HeadTurnState.IDLE

    def test_targets_within_range(self) -> None:
        avatar = SimulatedAvatar()
        behavior = HeadTurnBehavior(avatar, random.Random(5), HeadTurnConfig(chance=1.0))

        for _ in range(500):
            state = BotState()
            behavior.update(state)
            assert -30.0 <= state.target_head_pitch <= 30.0
