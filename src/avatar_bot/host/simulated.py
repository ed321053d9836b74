"""In-memory scripting host for headless runs and tests.

Provides the embodiment, voxel viewer, audio player and frame scheduler
the bot expects from the virtual-world client, driven by a virtual
clock. Frames can be stepped by hand (tests) or run in an asyncio loop
(CLI), optionally paced to wall-clock time.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import math
import time
from dataclasses import dataclass, field
from typing import Any

from avatar_bot.behaviors.math3d import Quat, Vec3
from avatar_bot.errors import ErrorCode, ErrorResponse, ParameterError
from avatar_bot.host.interfaces import TimerCallback, UpdateCallback
from avatar_bot.utils.logging import get_logger

log = get_logger(__name__)

AVERAGE_AUDIO_LENGTH_MS = 8000.0


@dataclass
class Sound:
    """Audio clip resource. Nothing is downloaded; only the URL is kept."""

    url: str
    duration_ms: float = AVERAGE_AUDIO_LENGTH_MS


@dataclass
class SimulatedAvatar:
    """Avatar embodiment with a joint override table."""

    position: Vec3 = field(default_factory=Vec3)
    orientation: Quat = field(default_factory=Quat.identity)
    head_pitch: float = 0.0

    face_model_url: str = ""
    skeleton_model_url: str = ""
    billboard_url: str = ""

    is_avatar: bool = False
    is_listening_to_audio_stream: bool = False

    joints: dict[int, Quat] = field(default_factory=dict)

    def set_joint_data(self, joint: int, rotation: Quat) -> None:
        self.joints[int(joint)] = rotation

    def clear_joint_data(self, joint: int) -> None:
        self.joints.pop(int(joint), None)


@dataclass
class SimulatedVoxelViewer:
    """Voxel viewer that records the last view and counts queries."""

    position: Vec3 = field(default_factory=Vec3)
    orientation: Quat = field(default_factory=Quat.identity)
    query_count: int = 0

    def set_position(self, position: Vec3) -> None:
        self.position = position

    def set_orientation(self, orientation: Quat) -> None:
        self.orientation = orientation

    def query_octree(self) -> None:
        self.query_count += 1


class SimulatedScheduler:
    """Virtual-clock frame loop with one-shot timers.

    Each ``step`` advances the clock, fires the timers that are due (in
    due order), then calls every connected update callback. Timers and
    updates therefore never overlap.
    """

    def __init__(self) -> None:
        self.now = 0.0  # seconds of virtual time
        self.frame_count = 0
        self._callbacks: list[UpdateCallback] = []
        self._timers: list[tuple[float, int, TimerCallback]] = []
        self._seq = itertools.count()

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def connect(self, callback: UpdateCallback) -> None:
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def disconnect(self, callback: UpdateCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def set_timeout(self, callback: TimerCallback, delay_ms: float) -> None:
        """Schedule ``callback`` to run once, ``delay_ms`` from now.

        Raises:
            ParameterError: If the delay is negative or not finite.
        """
        if not math.isfinite(delay_ms) or delay_ms < 0:
            raise ParameterError(
                "delay_ms",
                "Timer delay must be a finite, non-negative number of milliseconds",
                value=delay_ms,
                code=ErrorCode.OUT_OF_RANGE,
            )
        heapq.heappush(self._timers, (self.now + delay_ms / 1000.0, next(self._seq), callback))

    def step(self, delta_time: float) -> None:
        """Advance one frame.

        Args:
            delta_time: Seconds since the previous frame.

        Raises:
            ParameterError: If delta_time is negative.
        """
        if delta_time < 0:
            raise ParameterError(
                "delta_time",
                "Frame delta must not be negative",
                value=delta_time,
                code=ErrorCode.OUT_OF_RANGE,
            )

        self.now += delta_time
        self.frame_count += 1

        while self._timers and self._timers[0][0] <= self.now:
            _, _, callback = heapq.heappop(self._timers)
            callback()

        for callback in list(self._callbacks):
            callback(delta_time)

    async def run(
        self,
        duration_seconds: float,
        fps: float = 60.0,
        realtime: bool = False,
    ) -> int:
        """Run frames for ``duration_seconds`` of virtual time.

        Args:
            duration_seconds: Virtual time to simulate.
            fps: Frame rate.
            realtime: Sleep between frames to match wall-clock time.

        Returns:
            Number of frames run.
        """
        frame_interval = 1.0 / fps
        total_frames = int(round(duration_seconds * fps))

        log.info(
            "Frame loop started",
            fps=fps,
            frames=total_frames,
            realtime=realtime,
        )

        for _ in range(total_frames):
            frame_start = time.monotonic()

            try:
                self.step(frame_interval)
            except Exception as e:
                log.exception(
                    "Error in frame update",
                    error=ErrorResponse.from_exception(e).to_dict(),
                )

            if realtime:
                elapsed = time.monotonic() - frame_start
                await asyncio.sleep(max(0.0, frame_interval - elapsed))
            else:
                await asyncio.sleep(0)

        log.info("Frame loop finished", frames=total_frames, virtual_time=round(self.now, 3))
        return total_frames


class SimulatedAudioPlayer:
    """Avatar audio that stays busy for each clip's duration."""

    def __init__(self, scheduler: SimulatedScheduler) -> None:
        self._scheduler = scheduler
        self._busy_until = 0.0
        self.played: list[Sound] = []

    @property
    def is_playing(self) -> bool:
        return self._scheduler.now < self._busy_until

    def play(self, clip: Sound) -> None:
        duration_ms = getattr(clip, "duration_ms", AVERAGE_AUDIO_LENGTH_MS)
        self._busy_until = self._scheduler.now + duration_ms / 1000.0
        self.played.append(clip)


@dataclass
class SimulatedHost:
    """All host collaborators for one bot."""

    scheduler: SimulatedScheduler = field(default_factory=SimulatedScheduler)
    avatar: SimulatedAvatar = field(default_factory=SimulatedAvatar)
    viewer: SimulatedVoxelViewer = field(default_factory=SimulatedVoxelViewer)
    audio: SimulatedAudioPlayer = field(init=False)

    def __post_init__(self) -> None:
        self.audio = SimulatedAudioPlayer(self.scheduler)

    def load_sound(self, url: str) -> Sound:
        """Create a clip resource from a URL."""
        return Sound(url=url)

    def get_status(self) -> dict[str, Any]:
        """Snapshot of host-side counters."""
        return {
            "virtual_time": self.scheduler.now,
            "frames": self.scheduler.frame_count,
            "pending_timers": self.scheduler.pending_timers,
            "voxel_queries": self.viewer.query_count,
            "sounds_played": len(self.audio.played),
            "joint_overrides": sorted(self.avatar.joints),
        }
