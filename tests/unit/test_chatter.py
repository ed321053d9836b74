"""Unit tests for random sound playback."""

from __future__ import annotations

import random

import pytest

from avatar_bot.behaviors import BotState, ChatterBehavior, SoundConfig
from avatar_bot.host import SimulatedAudioPlayer, SimulatedScheduler, Sound


@pytest.fixture
def scheduler() -> SimulatedScheduler:
    return SimulatedScheduler()


@pytest.fixture
def audio(scheduler: SimulatedScheduler) -> SimulatedAudioPlayer:
    return SimulatedAudioPlayer(scheduler)


@pytest.fixture
def clips() -> list[Sound]:
    return [Sound(url=f"https://example.test/{i}.raw", duration_ms=1000.0) for i in range(5)]


class TestPlayRandomSound:
    """Tests for ChatterBehavior.play_random_sound."""

    def test_index_in_range(self, scheduler, audio, clips) -> None:
        behavior = ChatterBehavior(audio, clips, random.Random(8))

        for _ in range(1000):
            index = behavior.play_random_sound()
            assert index is not None
            assert 0 <= index < len(clips)
            # Let the clip finish before the next try
            scheduler.step(1.0)

    def test_top_of_range(self, audio, clips, scripted_rng) -> None:
        behavior = ChatterBehavior(audio, clips, scripted_rng([0.999999]))

        assert behavior.play_random_sound() == len(clips) - 1

    def test_skipped_while_playing(self, scheduler, audio, clips, scripted_rng) -> None:
        behavior = ChatterBehavior(audio, clips, scripted_rng([0.1, 0.1]))

        assert behavior.play_random_sound() == 0
        assert audio.is_playing
        assert behavior.play_random_sound() is None
        assert len(audio.played) == 1

        scheduler.step(1.0)
        assert not audio.is_playing
        assert behavior.play_random_sound() == 0

    def test_empty_library(self, audio) -> None:
        behavior = ChatterBehavior(audio, [], random.Random(1))

        assert behavior.play_random_sound() is None
        assert audio.played == []


class TestChatterUpdate:
    """Tests for the per-frame trigger."""

    def test_default_chance_is_zero(self) -> None:
        assert SoundConfig().chance == 0.0

    def test_zero_chance_never_plays(self, audio, clips, monkeypatch) -> None:
        behavior = ChatterBehavior(audio, clips, random.Random(2))
        calls = []
        monkeypatch.setattr(behavior, "play_random_sound", lambda: calls.append(1))

        state = BotState()
        for _ in range(20000):
            behavior.update(state)

        assert calls == []
        assert audio.played == []

    def test_draw_taken_every_frame(self, audio, clips, scripted_rng) -> None:
        rng = scripted_rng([])
        behavior = ChatterBehavior(audio, clips, rng)

        for _ in range(10):
            behavior.update(BotState())

        assert rng.calls == 10

    def test_trigger_plays(self, audio, clips, scripted_rng) -> None:
        # trigger below 0.5, then index draw 0.5 -> 2
        behavior = ChatterBehavior(audio, clips, scripted_rng([0.1, 0.5]), SoundConfig(chance=0.5))

        assert behavior.update(BotState()) == 2
        assert audio.played == [clips[2]]
        assert behavior.play_count == 1
