"""Bot script - sets up one NPC avatar and hooks it into the frame loop.

On start the script picks a bot number, dresses the avatar from the
asset catalog, marks it as an agent-controlled avatar that listens to
the audio stream, drops it at a random point in the spawn box and
connects the BehaviorUpdater to the host's per-frame callback.
"""

from __future__ import annotations

import random
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from avatar_bot.assets import BOT_NUMBER_RANGE, Appearance, resolve_appearance, sound_urls
from avatar_bot.behaviors.motion_types import SpawnBounds
from avatar_bot.behaviors.updater import BehaviorUpdater
from avatar_bot.errors import ErrorCode, HostError
from avatar_bot.host.simulated import SimulatedHost
from avatar_bot.utils.config import BotConfig
from avatar_bot.utils.logging import bind_context, get_logger, unbind_context

if TYPE_CHECKING:
    from avatar_bot.host.interfaces import ScriptHost

log = get_logger(__name__)


class BotScript:
    """One bot's lifecycle on a scripting host.

    Example usage:
        host = SimulatedHost()
        with BotScript(host, config).session() as bot:
            for _ in range(600):
                host.scheduler.step(1 / 60)
        print(bot.updater.get_status())
    """

    def __init__(
        self,
        host: ScriptHost,
        config: BotConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the bot script.

        Args:
            host: Host collaborators (avatar, viewer, audio, scheduler).
            config: Bot configuration. Uses defaults if not provided.
            rng: Random source for every decision the bot makes.
        """
        self.host = host
        self.config = config or BotConfig()
        self.rng = rng or random.Random(self.config.simulation.seed)
        self.bounds = SpawnBounds(**self.config.spawn.model_dump())
        self.appearance: Appearance | None = None
        self._updater: BehaviorUpdater | None = None

    @property
    def updater(self) -> BehaviorUpdater:
        """The running behavior updater.

        Raises:
            HostError: If the script hasn't been started.
        """
        if self._updater is None:
            raise HostError(
                "BotScript not started. Use 'with bot.session()' or call start() first.",
                code=ErrorCode.NOT_STARTED,
            )
        return self._updater

    @property
    def is_running(self) -> bool:
        return self._updater is not None and not self._updater.is_closed

    def start(self) -> BehaviorUpdater:
        """Dress and place the avatar, then start per-frame behavior.

        Safe to call multiple times.
        """
        if self.is_running:
            log.debug("Bot already running")
            return self.updater

        bot_number = self.config.assets.bot_number or self.rng.randint(*BOT_NUMBER_RANGE)
        self.appearance = resolve_appearance(bot_number, self.config.assets.base_url)
        bind_context(bot_number=bot_number)

        avatar = self.host.avatar
        avatar.face_model_url = self.appearance.face_model_url
        avatar.skeleton_model_url = self.appearance.skeleton_model_url
        avatar.billboard_url = self.appearance.billboard_url
        avatar.is_avatar = True
        avatar.is_listening_to_audio_stream = True

        spawn = self.bounds.random_point(self.rng)
        avatar.position = spawn

        clips = [self.host.load_sound(url) for url in sound_urls(self.config.assets.base_url)]
        self._updater = BehaviorUpdater(
            embodiment=avatar,
            viewer=self.host.viewer,
            audio=self.host.audio,
            scheduler=self.host.scheduler,
            clips=clips,
            bounds=self.bounds,
            spawn_position=spawn,
            rng=self.rng,
            configs=self.config.behavior_configs(),
        )
        self.host.scheduler.connect(self._updater.update)

        log.info(
            "New bot spawned",
            face=self.appearance.face_model_url,
            position=spawn.to_dict(),
            sounds=len(clips),
        )
        return self._updater

    def stop(self) -> None:
        """Disconnect from the frame loop. Pending wave timers become no-ops."""
        if not self.is_running:
            return

        updater = self.updater
        self.host.scheduler.disconnect(updater.update)
        updater.close()
        log.info("Bot stopped", frames=updater.frame_count)
        unbind_context("bot_number")

    @contextmanager
    def session(self) -> Iterator[BotScript]:
        """Context manager for a bot session.

        Yields:
            The started bot script.
        """
        try:
            self.start()
            yield self
        finally:
            self.stop()


async def run_simulation(
    config: BotConfig,
    duration_seconds: float | None = None,
    fps: float | None = None,
    realtime: bool | None = None,
) -> dict[str, Any]:
    """Run one bot against the simulated host.

    Arguments left as None fall back to the ``simulation`` config section.

    Returns:
        Summary with the bot's appearance, final state and host counters.
    """
    sim = config.simulation
    duration_seconds = sim.duration_seconds if duration_seconds is None else duration_seconds
    fps = sim.fps if fps is None else fps
    realtime = sim.realtime if realtime is None else realtime

    host = SimulatedHost()
    bot = BotScript(host, config)

    with bot.session():
        await host.scheduler.run(duration_seconds, fps=fps, realtime=realtime)
        status = bot.updater.get_status()

    return {
        "bot_number": bot.appearance.bot_number if bot.appearance else None,
        "bot": status,
        "host": host.get_status(),
    }
