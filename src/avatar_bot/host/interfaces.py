"""Capability contracts for the scripting host.

The bot only ever talks to the host through these protocols. The
real client provides them; ``host.simulated`` provides in-memory
versions for headless runs and tests.
"""

from __future__ import annotations

from typing import Callable, Protocol

from avatar_bot.behaviors.math3d import Quat, Vec3

UpdateCallback = Callable[[float], None]
TimerCallback = Callable[[], None]


class Embodiment(Protocol):
    """The avatar the bot drives."""

    position: Vec3
    orientation: Quat
    head_pitch: float  # degrees

    face_model_url: str
    skeleton_model_url: str
    billboard_url: str

    is_avatar: bool
    is_listening_to_audio_stream: bool

    def set_joint_data(self, joint: int, rotation: Quat) -> None:
        """Override a joint's local rotation."""
        ...

    def clear_joint_data(self, joint: int) -> None:
        """Hand a joint back to the default animation."""
        ...


class WorldViewer(Protocol):
    """World-streaming client (voxel viewer)."""

    def set_position(self, position: Vec3) -> None: ...

    def set_orientation(self, orientation: Quat) -> None: ...

    def query_octree(self) -> None:
        """Ask the server to stream the region visible from the current view."""
        ...


class SoundClip(Protocol):
    """An audio clip resource loaded from a URL."""

    url: str


class AudioPlayer(Protocol):
    """Avatar sound playback."""

    @property
    def is_playing(self) -> bool:
        """Whether the avatar is currently emitting a sound."""
        ...

    def play(self, clip: SoundClip) -> None: ...


class FrameScheduler(Protocol):
    """Per-frame update registration and one-shot timers."""

    def connect(self, callback: UpdateCallback) -> None:
        """Call ``callback(delta_seconds)`` once per frame."""
        ...

    def disconnect(self, callback: UpdateCallback) -> None: ...

    def set_timeout(self, callback: TimerCallback, delay_ms: float) -> None:
        """Call ``callback`` once after ``delay_ms``. No cancel handle."""
        ...


class ScriptHost(Protocol):
    """Everything the host hands a bot script."""

    avatar: Embodiment
    viewer: WorldViewer
    audio: AudioPlayer
    scheduler: FrameScheduler

    def load_sound(self, url: str) -> SoundClip:
        """Create a clip resource from a URL."""
        ...
