"""Pytest fixtures for avatar bot tests."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from avatar_bot.behaviors import BehaviorConfigs, BehaviorUpdater, SpawnBounds, Vec3
from avatar_bot.host import SimulatedHost
from avatar_bot.utils.config import BotConfig


class ScriptedRandom(random.Random):
    """Random source that replays a fixed list of ``random()`` draws.

    ``uniform`` is built on ``random()``, so it consumes the same list.
    Once the script runs out every draw returns ``fallback``, which by
    default is high enough that no behavior triggers.
    """

    def __init__(self, draws: Iterable[float], fallback: float = 0.999) -> None:
        super().__init__(0)
        self._draws = list(draws)
        self.fallback = fallback
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self._draws:
            return self._draws.pop(0)
        return self.fallback

    def push(self, *draws: float) -> None:
        self._draws.extend(draws)

    @property
    def remaining(self) -> int:
        return len(self._draws)


@pytest.fixture
def anyio_backend() -> str:
    """Specify async backend for pytest-asyncio."""
    return "asyncio"


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def sample_config() -> BotConfig:
    """Default configuration with a fixed seed."""
    config = BotConfig()
    config.simulation.seed = 42
    return config


@pytest.fixture
def host() -> SimulatedHost:
    """Fresh simulated host."""
    return SimulatedHost()


@pytest.fixture
def bounds() -> SpawnBounds:
    return SpawnBounds()


@pytest.fixture
def make_updater(host: SimulatedHost, bounds: SpawnBounds) -> Callable[..., BehaviorUpdater]:
    """Factory building a BehaviorUpdater wired to the simulated host."""

    def _make(
        rng: random.Random | None = None,
        configs: BehaviorConfigs | None = None,
        spawn: Vec3 | None = None,
        clips: list | None = None,
    ) -> BehaviorUpdater:
        spawn = spawn or Vec3(22.5, bounds.y_pelvis, 22.5)
        host.avatar.position = spawn
        if clips is None:
            clips = [host.load_sound(f"https://example.test/clip{i}.raw") for i in range(4)]
        return BehaviorUpdater(
            embodiment=host.avatar,
            viewer=host.viewer,
            audio=host.audio,
            scheduler=host.scheduler,
            clips=clips,
            bounds=bounds,
            spawn_position=spawn,
            rng=rng or random.Random(7),
            configs=configs,
        )

    return _make


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory with a test file."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    config_file = config_dir / "default.yaml"
    config_file.write_text("""
version: "1.0"
spawn:
  x_min: 0.0
  x_max: 10.0
assets:
  bot_number: 7
simulation:
  fps: 30.0
  seed: 99
behaviors:
  walk:
    chance: 0.02
  sound:
    chance: 0.001
""")

    return config_dir
