"""Avatar Bot Behaviors - idle animation for a virtual-world NPC.

Every frame the BehaviorUpdater runs five independent behaviors:

- view refresh: keep the voxel viewer on the bot (60Hz cap)
- waving: occasional arm wave, ended by a host timer
- chatter: random conversational sound clips (off by default)
- head turning: ease head pitch toward random targets
- locomotion: short random walks inside the spawn box

All motion uses exponential approach: each frame covers a fixed
fraction of the remaining distance to the target.
"""

from avatar_bot.behaviors.chatter import ChatterBehavior, SoundConfig
from avatar_bot.behaviors.head_turn import HeadTurnBehavior, HeadTurnConfig
from avatar_bot.behaviors.locomotion import LocomotionBehavior, WalkConfig
from avatar_bot.behaviors.math3d import Quat, Vec3
from avatar_bot.behaviors.motion_types import (
    BotState,
    HeadTurnState,
    Joint,
    SpawnBounds,
    WalkState,
    WaveEpisode,
    WaveState,
)
from avatar_bot.behaviors.updater import BehaviorConfigs, BehaviorUpdater
from avatar_bot.behaviors.view_refresh import ViewRefresh, ViewRefreshConfig
from avatar_bot.behaviors.waving import WaveBehavior, WaveConfig, wave_joint_rolls

__all__ = [
    # Core types
    "Vec3",
    "Quat",
    "Joint",
    "BotState",
    "SpawnBounds",
    "WaveEpisode",
    "WaveState",
    "HeadTurnState",
    "WalkState",
    # Updater
    "BehaviorUpdater",
    "BehaviorConfigs",
    # Behaviors
    "ViewRefresh",
    "ViewRefreshConfig",
    "WaveBehavior",
    "WaveConfig",
    "wave_joint_rolls",
    "ChatterBehavior",
    "SoundConfig",
    "HeadTurnBehavior",
    "HeadTurnConfig",
    "LocomotionBehavior",
    "WalkConfig",
]
