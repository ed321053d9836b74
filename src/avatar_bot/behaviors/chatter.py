"""Random conversational sound clips.

Off by default (chance 0.0). When enabled the bot occasionally plays
one clip from its library, unless it is already making a sound.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from avatar_bot.utils.logging import get_logger

if TYPE_CHECKING:
    from avatar_bot.behaviors.motion_types import BotState
    from avatar_bot.host.interfaces import AudioPlayer, SoundClip

log = get_logger(__name__)


@dataclass
class SoundConfig:
    """Configuration for random sound playback."""

    chance: float = 0.0  # Per-frame probability of trying to play a clip


class ChatterBehavior:
    """Plays a random clip from a fixed library now and then."""

    def __init__(
        self,
        audio: AudioPlayer,
        clips: Sequence[SoundClip],
        rng: random.Random,
        config: SoundConfig | None = None,
    ) -> None:
        self.audio = audio
        self.clips = list(clips)
        self.rng = rng
        self.config = config or SoundConfig()
        self.play_count = 0

    def update(self, _state: BotState) -> int | None:
        """Maybe play a sound this frame. Sound doesn't depend on bot state.

        Returns:
            Index of the clip played, or None.
        """
        if self.rng.random() < self.config.chance:
            return self.play_random_sound()
        return None

    def play_random_sound(self) -> int | None:
        """Play a uniformly chosen clip unless audio is already playing.

        Returns:
            Index in ``[0, len(clips))`` of the clip played, or None if
            the avatar is busy or the library is empty.
        """
        if self.audio.is_playing or not self.clips:
            return None

        index = int(self.rng.random() * len(self.clips)) % len(self.clips)
        self.audio.play(self.clips[index])
        self.play_count += 1
        log.debug("Playing sound", index=index, url=self.clips[index].url)
        return index
