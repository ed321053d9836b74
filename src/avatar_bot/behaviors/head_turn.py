"""Head pitch glances.

Now and then the bot picks a new head pitch and eases toward it,
covering 20% of the remaining angle each frame.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from avatar_bot.behaviors.motion_types import HeadTurnState
from avatar_bot.utils.logging import get_logger

if TYPE_CHECKING:
    from avatar_bot.behaviors.motion_types import BotState
    from avatar_bot.host.interfaces import Embodiment

log = get_logger(__name__)


@dataclass
class HeadTurnConfig:
    """Configuration for head turning. Angles in degrees."""

    chance: float = 0.05  # Per-frame probability of picking a new pitch
    pitch_range: float = 30.0  # Targets are uniform in [-range, range]
    pitch_rate: float = 0.20  # Fraction of remaining angle covered per frame
    stop_tolerance: float = 0.05


def approach(current: float, target: float, rate: float) -> float:
    """One step of exponential approach."""
    return current + (target - current) * rate


class HeadTurnBehavior:
    """Picks head pitch targets and eases the head toward them."""

    def __init__(
        self,
        embodiment: Embodiment,
        rng: random.Random,
        config: HeadTurnConfig | None = None,
    ) -> None:
        self.embodiment = embodiment
        self.rng = rng
        self.config = config or HeadTurnConfig()

    def update(self, state: BotState) -> None:
        """Advance head turning by one frame.

        The frame that picks a new target does not move the head. Every
        other frame eases toward the current target, whether or not a
        turn is in progress.
        """
        if not state.is_turning_head and self.rng.random() < self.config.chance:
            state.target_head_pitch = self.rng.uniform(
                -self.config.pitch_range, self.config.pitch_range
            )
            state.head = HeadTurnState.TURNING
            log.debug("Head turn started", target_pitch=round(state.target_head_pitch, 2))
            return

        pitch = approach(
            self.embodiment.head_pitch, state.target_head_pitch, self.config.pitch_rate
        )
        self.embodiment.head_pitch = pitch
        if abs(pitch - state.target_head_pitch) < self.config.stop_tolerance:
            state.head = HeadTurnState.IDLE
