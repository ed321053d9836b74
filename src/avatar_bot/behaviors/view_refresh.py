"""View-position refresh for the world-streaming client.

Keeps the voxel viewer's camera on the bot so the server streams the
region around it. Rate limited; nothing is read back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from avatar_bot.behaviors.motion_types import BotState
    from avatar_bot.host.interfaces import Embodiment, WorldViewer


@dataclass
class ViewRefreshConfig:
    """Configuration for view refresh.

    Attributes:
        enabled: Whether the bot should receive voxels at all.
        voxel_fps: Maximum refresh rate in Hz.
    """

    enabled: bool = True
    voxel_fps: float = 60.0

    @property
    def interval(self) -> float:
        return 1.0 / self.voxel_fps


class ViewRefresh:
    """Pushes the bot's pose to the world viewer at most ``voxel_fps`` times a second."""

    def __init__(
        self,
        embodiment: Embodiment,
        viewer: WorldViewer,
        config: ViewRefreshConfig | None = None,
    ) -> None:
        self.embodiment = embodiment
        self.viewer = viewer
        self.config = config or ViewRefreshConfig()
        self.query_count = 0

    def update(self, state: BotState) -> bool:
        """Refresh the view if enough time has passed.

        Returns:
            True if a query was issued this frame.
        """
        if not self.config.enabled:
            return False
        if state.cumulative_time - state.last_voxel_query_time <= self.config.interval:
            return False

        self.viewer.set_position(self.embodiment.position)
        self.viewer.set_orientation(self.embodiment.orientation)
        self.viewer.query_octree()
        state.last_voxel_query_time = state.cumulative_time
        self.query_count += 1
        return True
