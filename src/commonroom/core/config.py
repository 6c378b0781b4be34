"""Configuration manager using QSettings for persistent storage."""

import logging

from PySide6.QtCore import QByteArray, QSettings

from commonroom.core.settings_codec import decode_number_map, encode_number_map

logger = logging.getLogger(__name__)

# Sound settings keys
_KEY_VOLUMES = "sounds/volumes"
_KEY_INTERVALS = "sounds/intervals"
_KEY_MUTED = "sounds/muted"
_KEY_SOUNDS_DIRECTORY = "sounds/directory"


def _blob_bytes(raw: object) -> bytes:
    """Normalize a stored blob to bytes (QSettings may hand back several types)."""
    if isinstance(raw, QByteArray):
        return bytes(raw.data())
    if isinstance(raw, bytes | bytearray):
        return bytes(raw)
    if isinstance(raw, str):
        return raw.encode("utf-8")
    return b""


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    QSettings stores config in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\CommonRoom\\CommonRoom
    - macOS: ~/Library/Preferences/com.CommonRoom.CommonRoom.plist
    - Linux: ~/.config/CommonRoom/CommonRoom.conf

    Per-sound volumes and intervals are kept as encoded JSON blobs so the
    stored format stays a flat id -> number map.

    Example:
        config = ConfigManager()
        volumes = config.get_sound_volumes()
        config.set_sound_volumes({"Rain": 0.4})
    """

    def __init__(self, organization: str = "CommonRoom", application: str = "CommonRoom") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- Raw blobs -------------------------------------------------------------

    def get_volumes_blob(self) -> bytes:
        """Return the stored volume blob (empty if unset)."""
        return _blob_bytes(self._settings.value(_KEY_VOLUMES, b""))

    def get_intervals_blob(self) -> bytes:
        """Return the stored interval blob (empty if unset)."""
        return _blob_bytes(self._settings.value(_KEY_INTERVALS, b""))

    def set_volumes_blob(self, data: bytes) -> None:
        self._settings.setValue(_KEY_VOLUMES, QByteArray(data))

    def set_intervals_blob(self, data: bytes) -> None:
        self._settings.setValue(_KEY_INTERVALS, QByteArray(data))

    # -- Decoded maps ----------------------------------------------------------

    def get_sound_volumes(self) -> dict[str, float]:
        """Load saved per-sound volumes.

        Returns:
            Map of sound id to volume, or empty map if none saved or corrupt.
        """
        return decode_number_map(self.get_volumes_blob())

    def set_sound_volumes(self, volumes: dict[str, float]) -> None:
        """Persist per-sound volumes.

        Args:
            volumes: Map of sound id to volume.
        """
        self.set_volumes_blob(encode_number_map(volumes))

    def get_sound_intervals(self) -> dict[str, float]:
        """Load saved per-sound intervals in seconds.

        Returns:
            Map of sound id to interval, or empty map if none saved or corrupt.
        """
        return decode_number_map(self.get_intervals_blob())

    def set_sound_intervals(self, intervals: dict[str, float]) -> None:
        """Persist per-sound intervals.

        Args:
            intervals: Map of sound id to seconds.
        """
        self.set_intervals_blob(encode_number_map(intervals))

    # -- Flags -----------------------------------------------------------------

    def get_muted(self) -> bool:
        """Return the global mute flag (default False)."""
        return bool(self._settings.value(_KEY_MUTED, False, bool))

    def set_muted(self, muted: bool) -> None:
        self._settings.setValue(_KEY_MUTED, muted)

    def get_sounds_directory(self) -> str:
        """Return the user-configured sounds directory.

        Returns:
            Path string, or empty string for the packaged resources.
        """
        value = self._settings.value(_KEY_SOUNDS_DIRECTORY, "", str)
        return str(value) if value else ""

    def set_sounds_directory(self, path: str) -> None:
        """Set a custom sounds directory.

        Args:
            path: Directory path, or empty string for the packaged resources.
        """
        self._settings.setValue(_KEY_SOUNDS_DIRECTORY, path)

    # -- General settings ------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
