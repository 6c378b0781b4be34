"""Bridge between the playback coordinator and persistent settings.

On startup ``load_initial_state`` reads the stored volumes, intervals and
mute flag for the coordinator constructor. Afterwards ``SettingsBridge``
listens to the coordinator's change signals and writes each snapshot back,
skipping writes whose contents match what is already stored.
"""

import logging
from dataclasses import dataclass, field

from PySide6.QtCore import QObject

from commonroom.core.config import ConfigManager
from commonroom.core.playback import PlaybackCoordinator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InitialState:
    """Persisted coordinator state read at startup."""

    volumes: dict[str, float] = field(default_factory=dict)
    intervals: dict[str, float] = field(default_factory=dict)
    muted: bool = False


def load_initial_state(config: ConfigManager) -> InitialState:
    """Read persisted state (never raises on corrupt data).

    Args:
        config: Settings source.

    Returns:
        Decoded volumes, intervals and mute flag.
    """
    state = InitialState(
        volumes=config.get_sound_volumes(),
        intervals=config.get_sound_intervals(),
        muted=config.get_muted(),
    )
    logger.debug(
        "Loaded settings: %d volumes, %d intervals, muted=%s",
        len(state.volumes),
        len(state.intervals),
        state.muted,
    )
    return state


class SettingsBridge(QObject):
    """Persists coordinator state changes through a ConfigManager.

    Example:
        bridge = SettingsBridge(coordinator, config)
        coordinator.set_volume(0.3, rain)  # written to QSettings
    """

    def __init__(
        self,
        coordinator: PlaybackCoordinator,
        config: ConfigManager,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config

        coordinator.volumes_changed.connect(self._on_volumes_changed)
        coordinator.intervals_changed.connect(self._on_intervals_changed)
        coordinator.muted_changed.connect(self._on_muted_changed)

    def _on_volumes_changed(self, volumes: dict[str, float]) -> None:
        if volumes != self._config.get_sound_volumes():
            self._config.set_sound_volumes(volumes)

    def _on_intervals_changed(self, intervals: dict[str, float]) -> None:
        if intervals != self._config.get_sound_intervals():
            self._config.set_sound_intervals(intervals)

    def _on_muted_changed(self, muted: bool) -> None:
        if muted != self._config.get_muted():
            self._config.set_muted(muted)
