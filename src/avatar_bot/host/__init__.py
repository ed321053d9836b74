"""Scripting host contracts and an in-memory simulated host."""

from .interfaces import (
    AudioPlayer,
    Embodiment,
    FrameScheduler,
    ScriptHost,
    SoundClip,
    TimerCallback,
    UpdateCallback,
    WorldViewer,
)
from .simulated import (
    SimulatedAudioPlayer,
    SimulatedAvatar,
    SimulatedHost,
    SimulatedScheduler,
    SimulatedVoxelViewer,
    Sound,
)

__all__ = [
    "AudioPlayer",
    "Embodiment",
    "FrameScheduler",
    "ScriptHost",
    "SoundClip",
    "TimerCallback",
    "UpdateCallback",
    "WorldViewer",
    "SimulatedAudioPlayer",
    "SimulatedAvatar",
    "SimulatedHost",
    "SimulatedScheduler",
    "SimulatedVoxelViewer",
    "Sound",
]
