"""Behavior updater - the bot's per-frame brain.

The host calls ``update(delta_time)`` once per frame. Each call runs
every sub-behavior in a fixed order:

1. view refresh (voxel viewer follows the bot)
2. waving
3. random sounds
4. head turning
5. locomotion

The call never blocks: it is arithmetic plus a few host setter calls.
The only deferred work is the wave stop timer, which the host fires on
the same thread between frames.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from avatar_bot.behaviors.chatter import ChatterBehavior, SoundConfig
from avatar_bot.behaviors.head_turn import HeadTurnBehavior, HeadTurnConfig
from avatar_bot.behaviors.locomotion import LocomotionBehavior, WalkConfig
from avatar_bot.behaviors.motion_types import BotState, SpawnBounds
from avatar_bot.behaviors.view_refresh import ViewRefresh, ViewRefreshConfig
from avatar_bot.behaviors.waving import WaveBehavior, WaveConfig
from avatar_bot.utils.logging import get_logger

if TYPE_CHECKING:
    from avatar_bot.behaviors.math3d import Vec3
    from avatar_bot.host.interfaces import (
        AudioPlayer,
        Embodiment,
        FrameScheduler,
        SoundClip,
        WorldViewer,
    )

log = get_logger(__name__)


@dataclass
class BehaviorConfigs:
    """Configuration bundle for all sub-behaviors."""

    view: ViewRefreshConfig = field(default_factory=ViewRefreshConfig)
    wave: WaveConfig = field(default_factory=WaveConfig)
    sound: SoundConfig = field(default_factory=SoundConfig)
    head: HeadTurnConfig = field(default_factory=HeadTurnConfig)
    walk: WalkConfig = field(default_factory=WalkConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BehaviorConfigs:
        """Build from the ``behaviors`` section of the bot config.

        Unknown sections and keys are ignored. Values are coerced to the
        field types (a YAML list becomes a range tuple).

        Raises:
            pydantic.ValidationError: If a value has the wrong type.
        """
        return _CONFIGS_ADAPTER.validate_python(data)


_CONFIGS_ADAPTER = TypeAdapter(BehaviorConfigs)


class BehaviorUpdater:
    """Owns the bot state and drives every behavior once per frame.

    Example:
        updater = BehaviorUpdater(
            embodiment=host.avatar,
            viewer=host.viewer,
            audio=host.audio,
            scheduler=host.scheduler,
            clips=clips,
            bounds=SpawnBounds(),
            spawn_position=spawn,
        )
        host.scheduler.connect(updater.update)
    """

    def __init__(
        self,
        embodiment: Embodiment,
        viewer: WorldViewer,
        audio: AudioPlayer,
        scheduler: FrameScheduler,
        clips: Sequence[SoundClip],
        bounds: SpawnBounds,
        spawn_position: Vec3,
        rng: random.Random | None = None,
        configs: BehaviorConfigs | None = None,
    ) -> None:
        """Initialize the updater.

        Args:
            embodiment: Avatar being driven.
            viewer: World-streaming client.
            audio: Avatar sound playback.
            scheduler: Host frame scheduler (used for wave stop timers).
            clips: Sound library.
            bounds: Box the bot walks in.
            spawn_position: Where the bot was placed at startup.
            rng: Random source. A fresh unseeded one if not provided.
            configs: Behavior configuration. Uses defaults if not provided.
        """
        self.embodiment = embodiment
        self.rng = rng or random.Random()
        self.configs = configs or BehaviorConfigs()
        self.state = BotState(
            spawn_position=spawn_position,
            position=embodiment.position,
            orientation=embodiment.orientation,
        )
        self.frame_count = 0
        self._closed = False

        self.view = ViewRefresh(embodiment, viewer, self.configs.view)
        self.wave = WaveBehavior(embodiment, scheduler, self.rng, self.configs.wave)
        self.chatter = ChatterBehavior(audio, clips, self.rng, self.configs.sound)
        self.head = HeadTurnBehavior(embodiment, self.rng, self.configs.head)
        self.walk = LocomotionBehavior(embodiment, bounds, self.rng, self.configs.walk)

    @property
    def is_closed(self) -> bool:
        return self._closed

    def update(self, delta_time: float) -> None:
        """Run one frame of behavior.

        Args:
            delta_time: Seconds since the previous frame. Negative and
                non-finite values are treated as zero.
        """
        if self._closed:
            return

        state = self.state
        if not math.isfinite(delta_time) or delta_time < 0.0:
            delta_time = 0.0
        state.cumulative_time += delta_time
        self.frame_count += 1

        # A position set right after the avatar is created can be lost;
        # a bot that never walks keeps re-asserting its spawn point.
        if self.configs.walk.chance == 0.0:
            self.embodiment.position = state.spawn_position

        state.position = self.embodiment.position
        state.orientation = self.embodiment.orientation

        self.view.update(state)
        self.wave.update(state)
        self.chatter.update(state)
        self.head.update(state)
        self.walk.update(state)

    def stop_waving(self) -> None:
        """End the current wave immediately."""
        self.wave.stop_wave(self.state)

    def stop_walking(self) -> None:
        """Release the leg joints."""
        self.walk.stop_walking()

    def play_random_sound(self) -> int | None:
        """Play one random clip now (if audio is idle)."""
        return self.chatter.play_random_sound()

    def close(self) -> None:
        """Stop reacting to frames and timers."""
        if self._closed:
            return
        self._closed = True
        self.wave.close()
        log.debug("Behavior updater closed", frames=self.frame_count)

    def get_status(self) -> dict[str, Any]:
        """Get current updater status for debugging."""
        return {
            "closed": self._closed,
            "frames": self.frame_count,
            "voxel_queries": self.view.query_count,
            "walks": self.walk.walk_count,
            "waves": self.state.wave_count,
            "sounds": self.chatter.play_count,
            "head_pitch": self.embodiment.head_pitch,
            "state": self.state.to_dict(),
        }
