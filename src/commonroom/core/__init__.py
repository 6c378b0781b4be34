"""Core playback logic.

This module contains the playback coordinator and the collaborators it
needs to reach the audio device and persistent settings.

Classes:
    PlaybackCoordinator: Per-sound state machine with Qt signals.
    QtAudioBackend: Qt Multimedia player factory.
    SoundLocator: Finds packaged audio resources.
    ConfigManager: QSettings wrapper for configuration.
    SettingsBridge: Persists coordinator state changes.
"""

from commonroom.core.audio_backend import QtAudioBackend
from commonroom.core.config import ConfigManager
from commonroom.core.persistence import SettingsBridge, load_initial_state
from commonroom.core.playback import PlaybackCoordinator
from commonroom.core.resources import SoundLocator

__all__ = [
    "ConfigManager",
    "PlaybackCoordinator",
    "QtAudioBackend",
    "SettingsBridge",
    "SoundLocator",
    "load_initial_state",
]
