"""Locomotion - short random walks inside the spawn box.

The bot turns up to 70 degrees either way, picks a point ahead of it
(usually a small step, sometimes up to half the box) and glides there.
Position covers 5% and orientation 15% of the remaining distance each
frame. The right hip and knee swing with the same waveform while moving.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from avatar_bot.behaviors.math3d import UP, Quat
from avatar_bot.behaviors.motion_types import Joint, SpawnBounds, WalkState
from avatar_bot.utils.logging import get_logger

if TYPE_CHECKING:
    from avatar_bot.behaviors.motion_types import BotState
    from avatar_bot.host.interfaces import Embodiment

log = get_logger(__name__)

LEG_JOINTS = (Joint.RIGHT_HIP, Joint.RIGHT_KNEE)


@dataclass
class WalkConfig:
    """Configuration for locomotion.

    Angles in degrees, distances in world units.
    """

    chance: float = 0.005  # Per-frame probability of starting a walk
    big_move_chance: float = 0.1
    turn_range: float = 70.0
    move_range_small: float = 0.5
    move_range_big: float | None = None  # Defaults to half the larger box side

    move_rate: float = 0.05
    turn_rate: float = 0.15
    stop_tolerance: float = 0.05

    walk_frequency: float = 5.0  # rad/s
    walk_amplitude: float = 45.0


class LocomotionBehavior:
    """Picks walk targets and moves the bot toward them."""

    def __init__(
        self,
        embodiment: Embodiment,
        bounds: SpawnBounds,
        rng: random.Random,
        config: WalkConfig | None = None,
    ) -> None:
        self.embodiment = embodiment
        self.bounds = bounds
        self.rng = rng
        self.config = config or WalkConfig()
        self.walk_count = 0

    @property
    def move_range_big(self) -> float:
        if self.config.move_range_big is not None:
            return self.config.move_range_big
        return self.bounds.big_move_range

    def update(self, state: BotState) -> None:
        """Advance locomotion by one frame."""
        if not state.is_moving and self.rng.random() < self.config.chance:
            self.pick_target(state)
        elif state.is_moving:
            self.walk_step(state)

    def pick_target(self, state: BotState) -> None:
        """Choose a new heading and destination and start walking."""
        yaw = self.rng.uniform(-self.config.turn_range, self.config.turn_range)
        state.target_orientation = state.orientation * Quat.angle_axis(yaw, UP)
        front = state.target_orientation.front

        if self.rng.random() < self.config.big_move_chance:
            distance = self.rng.uniform(0.0, self.move_range_big)
        else:
            distance = self.rng.uniform(0.0, self.config.move_range_small)

        state.target_position = self.bounds.clamp(state.position + front * distance)
        state.walk = WalkState.WALKING
        self.walk_count += 1

        log.debug(
            "Walk started",
            yaw=round(yaw, 1),
            distance=round(distance, 3),
            target=state.target_position.to_dict(),
        )

    def walk_step(self, state: BotState) -> None:
        """Swing the legs and ease position and heading toward the target."""
        self.keep_walking(state.cumulative_time)

        position = state.position + (state.target_position - state.position) * self.config.move_rate
        orientation = state.orientation.mix(state.target_orientation, self.config.turn_rate)
        self.embodiment.position = position
        self.embodiment.orientation = orientation
        state.position = position
        state.orientation = orientation

        if (position - state.target_position).length() < self.config.stop_tolerance:
            state.walk = WalkState.IDLE
            self.stop_walking()
            log.debug("Walk finished", position=position.to_dict())

    def keep_walking(self, t: float) -> None:
        """Apply the leg swing for animation time ``t``.

        Hip and knee get the same pitch.
        """
        pitch = self.config.walk_amplitude * math.sin(t * self.config.walk_frequency)
        rotation = Quat.from_pitch_yaw_roll_degrees(pitch, 0.0, 0.0)
        for joint in LEG_JOINTS:
            self.embodiment.set_joint_data(joint, rotation)

    def stop_walking(self) -> None:
        """Release the leg joints. Safe to call when not walking."""
        for joint in LEG_JOINTS:
            self.embodiment.clear_joint_data(joint)
