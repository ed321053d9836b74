"""Bot state type definitions.

Core dataclasses and enums shared by the behavior modules. Each
behavior is a small Idle/Active state machine; the active-episode
data only exists while the machine is active.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from avatar_bot.behaviors.math3d import Quat, Vec3


class Joint(IntEnum):
    """Skeleton joint indices used by the behaviors."""

    RIGHT_HIP = 1
    RIGHT_KNEE = 2
    SPINE = 13
    SHOULDER = 17
    ELBOW = 18


class WaveState(str, Enum):
    """Arm wave state."""

    IDLE = "idle"
    WAVING = "waving"


class HeadTurnState(str, Enum):
    """Head pitch state."""

    IDLE = "idle"
    TURNING = "turning"


class WalkState(str, Enum):
    """Locomotion state."""

    IDLE = "idle"
    WALKING = "walking"


@dataclass(frozen=True)
class WaveEpisode:
    """Parameters of one wave, sampled once when the wave starts.

    Attributes:
        episode_id: Increments per wave; keys the stop timer.
        frequency: Wave angular frequency (rad/s), in [3, 8].
        amplitude: Shoulder swing amplitude (degrees), in [5, 65].
    """

    episode_id: int
    frequency: float
    amplitude: float


@dataclass
class SpawnBounds:
    """Axis-aligned box in the XZ plane with a fixed pelvis height."""

    x_min: float = 20.0
    x_max: float = 25.0
    z_min: float = 20.0
    z_max: float = 25.0
    y_pelvis: float = 2.5

    @property
    def big_move_range(self) -> float:
        """Half the larger side of the box."""
        return max(self.x_max - self.x_min, self.z_max - self.z_min) / 2.0

    def clamp(self, point: Vec3) -> Vec3:
        """Clamp x and z into the box and pin y to the pelvis height."""
        return Vec3(
            max(self.x_min, min(self.x_max, point.x)),
            self.y_pelvis,
            max(self.z_min, min(self.z_max, point.z)),
        )

    def random_point(self, rng: random.Random) -> Vec3:
        """Uniform random point inside the box at pelvis height."""
        return Vec3(
            rng.uniform(self.x_min, self.x_max),
            self.y_pelvis,
            rng.uniform(self.z_min, self.z_max),
        )


@dataclass
class BotState:
    """Mutable per-bot state owned by the BehaviorUpdater.

    ``position`` and ``orientation`` mirror the embodiment: they are read
    from it at the start of each frame and written back when walking.
    """

    spawn_position: Vec3 = field(default_factory=Vec3)
    position: Vec3 = field(default_factory=Vec3)
    orientation: Quat = field(default_factory=Quat.identity)

    target_position: Vec3 = field(default_factory=Vec3)
    target_orientation: Quat = field(default_factory=Quat.identity)
    target_head_pitch: float = 0.0

    cumulative_time: float = 0.0
    last_voxel_query_time: float = 0.0

    walk: WalkState = WalkState.IDLE
    head: HeadTurnState = HeadTurnState.IDLE
    wave: WaveState = WaveState.IDLE
    wave_episode: WaveEpisode | None = None
    wave_count: int = 0  # Episodes started so far

    @property
    def is_moving(self) -> bool:
        return self.walk == WalkState.WALKING

    @property
    def is_turning_head(self) -> bool:
        return self.head == HeadTurnState.TURNING

    @property
    def is_waving(self) -> bool:
        return self.wave == WaveState.WAVING

    @property
    def wave_frequency(self) -> float | None:
        return self.wave_episode.frequency if self.wave_episode else None

    @property
    def wave_amplitude(self) -> float | None:
        return self.wave_episode.amplitude if self.wave_episode else None

    def to_dict(self) -> dict[str, Any]:
        """Snapshot for logging and the CLI summary."""
        return {
            "position": self.position.to_dict(),
            "orientation": self.orientation.to_dict(),
            "target_position": self.target_position.to_dict(),
            "target_head_pitch": self.target_head_pitch,
            "cumulative_time": self.cumulative_time,
            "walk": self.walk.value,
            "head": self.head.value,
            "wave": self.wave.value,
            "wave_count": self.wave_count,
        }
