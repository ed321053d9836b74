"""Arm waving - occasional friendly wave.

A wave starts at random, runs for one to three seconds and is ended
by a one-shot host timer. While waving, the shoulder, elbow and spine
roll follow sinusoids of the bot's animation clock:

- shoulder: 60 + A * sin((t - 0.25) * f)
- elbow:    25 + A/2 * sin(t * 1.2 * f)
- spine:    60 + A/4 * sin(t * f)

Frequency ``f`` and amplitude ``A`` are sampled once per wave.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from avatar_bot.behaviors.math3d import Quat
from avatar_bot.behaviors.motion_types import Joint, WaveEpisode, WaveState
from avatar_bot.utils.logging import get_logger

if TYPE_CHECKING:
    from avatar_bot.behaviors.motion_types import BotState
    from avatar_bot.host.interfaces import Embodiment, FrameScheduler

log = get_logger(__name__)

WAVE_JOINTS = (Joint.SHOULDER, Joint.ELBOW, Joint.SPINE)


@dataclass
class WaveConfig:
    """Configuration for waving.

    Angles in degrees, durations in milliseconds.
    """

    chance: float = 0.009  # Per-frame probability of starting a wave

    frequency_range: tuple[float, float] = (3.0, 8.0)
    amplitude_range: tuple[float, float] = (5.0, 65.0)

    min_duration_ms: float = 1000.0
    duration_jitter_ms: float = 2000.0

    shoulder_bias: float = 60.0
    shoulder_phase: float = 0.25  # Shoulder lags the spine by this many seconds
    elbow_bias: float = 25.0
    elbow_frequency_scale: float = 1.2
    spine_bias: float = 60.0
    palm_out_yaw: float = 45.0  # Elbow yaw applied when the wave starts


def wave_joint_rolls(
    episode: WaveEpisode,
    t: float,
    config: WaveConfig | None = None,
) -> dict[Joint, float]:
    """Roll angle (degrees) of each wave joint at animation time ``t``."""
    config = config or WaveConfig()
    f = episode.frequency
    a = episode.amplitude
    return {
        Joint.SHOULDER: config.shoulder_bias + a * math.sin((t - config.shoulder_phase) * f),
        Joint.ELBOW: config.elbow_bias
        + a / 2.0 * math.sin(t * config.elbow_frequency_scale * f),
        Joint.SPINE: config.spine_bias + a / 4.0 * math.sin(t * f),
    }


class WaveBehavior:
    """Starts, animates and stops arm waves."""

    def __init__(
        self,
        embodiment: Embodiment,
        scheduler: FrameScheduler,
        rng: random.Random,
        config: WaveConfig | None = None,
    ) -> None:
        self.embodiment = embodiment
        self.scheduler = scheduler
        self.rng = rng
        self.config = config or WaveConfig()
        self._closed = False

    def close(self) -> None:
        """Make any pending stop timer a no-op."""
        self._closed = True

    def update(self, state: BotState) -> None:
        """Advance the wave state machine by one frame."""
        if not state.is_waving and self.rng.random() < self.config.chance:
            self.start_wave(state)
        elif state.is_waving and state.wave_episode is not None:
            rolls = wave_joint_rolls(state.wave_episode, state.cumulative_time, self.config)
            for joint, roll in rolls.items():
                self.embodiment.set_joint_data(
                    joint, Quat.from_pitch_yaw_roll_degrees(0.0, 0.0, roll)
                )

    def start_wave(self, state: BotState) -> WaveEpisode:
        """Begin a new wave episode and schedule its end."""
        state.wave_count += 1
        episode = WaveEpisode(
            episode_id=state.wave_count,
            frequency=self.rng.uniform(*self.config.frequency_range),
            amplitude=self.rng.uniform(*self.config.amplitude_range),
        )
        state.wave = WaveState.WAVING
        state.wave_episode = episode

        duration_ms = self.config.min_duration_ms + self.rng.random() * self.config.duration_jitter_ms
        self.scheduler.set_timeout(
            lambda: self.stop_wave(state, episode_id=episode.episode_id),
            duration_ms,
        )
        # Turn the palm outward before the first swing
        self.embodiment.set_joint_data(
            Joint.ELBOW,
            Quat.from_pitch_yaw_roll_degrees(0.0, self.config.palm_out_yaw, 0.0),
        )

        log.debug(
            "Wave started",
            episode=episode.episode_id,
            frequency=round(episode.frequency, 2),
            amplitude=round(episode.amplitude, 1),
            duration_ms=round(duration_ms),
        )
        return episode

    def stop_wave(self, state: BotState, episode_id: int | None = None) -> None:
        """End the wave and release the arm joints.

        Args:
            state: Bot state to update.
            episode_id: Episode the caller expects to stop. A timer from an
                older episode is ignored. None stops whatever is running.
        """
        if self._closed:
            return
        if (
            episode_id is not None
            and state.wave_episode is not None
            and state.wave_episode.episode_id != episode_id
        ):
            log.debug("Ignoring stale wave timer", episode=episode_id)
            return

        if state.is_waving:
            log.debug("Wave stopped", episode=state.wave_count)

        state.wave = WaveState.IDLE
        state.wave_episode = None
        for joint in WAVE_JOINTS:
            self.embodiment.clear_joint_data(joint)
