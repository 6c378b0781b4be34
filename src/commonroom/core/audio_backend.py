"""Audio device seam: player handles backed by Qt Multimedia.

The coordinator only talks to the ``AudioBackend`` and ``AudioPlayer``
protocols, so tests can substitute a recording fake for the real device.

Usage:
    backend = QtAudioBackend()
    backend.configure_session()
    player = backend.create_player(Path("rain.mp3"), looping=True)
    player.set_volume(0.5)
    player.play()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaDevices, QMediaPlayer

logger = logging.getLogger(__name__)


class PlayerCreationError(Exception):
    """Raised when the audio device or codec rejects a resource."""


class AudioSessionError(Exception):
    """Raised when the playback environment cannot be configured."""


# Called with the failing player and a reason once the device gives up on it
ErrorCallback = Callable[["AudioPlayer", str], None]


class AudioPlayer(Protocol):
    """A live handle on one playing resource."""

    def set_volume(self, volume: float) -> None: ...

    def seek_to_start(self) -> None: ...

    def play(self) -> bool: ...

    def stop(self) -> None: ...

    def release(self) -> None: ...


class AudioBackend(Protocol):
    """Factory for audio players."""

    def configure_session(self) -> None: ...

    def create_player(
        self, path: Path, *, looping: bool, on_error: ErrorCallback | None = None
    ) -> AudioPlayer: ...


class QtAudioPlayer:
    """QMediaPlayer + QAudioOutput pair playing a single local file."""

    def __init__(
        self,
        path: Path,
        *,
        looping: bool,
        on_error: ErrorCallback | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Create the player and load the source.

        Decoding runs asynchronously, so a corrupt file is usually only
        reported after control returns to the event loop. Such late errors
        are passed to ``on_error``.

        Args:
            path: Audio file to play.
            looping: Repeat forever if True, play once otherwise.
            on_error: Called with this player and a reason on playback errors.
            parent: Qt parent owning the underlying objects.

        Raises:
            PlayerCreationError: If the file is unreadable or Qt rejects it.
        """
        if not path.is_file():
            msg = f"Audio file does not exist: {path}"
            raise PlayerCreationError(msg)

        self._path = path
        self._error_callback: ErrorCallback | None = None
        self._output = QAudioOutput(parent)
        self._player = QMediaPlayer(parent)
        self._player.setAudioOutput(self._output)
        self._player.setLoops(QMediaPlayer.Loops.Infinite if looping else QMediaPlayer.Loops.Once)
        self._player.errorOccurred.connect(self._on_error)
        self._player.setSource(QUrl.fromLocalFile(str(path)))

        if self._player.error() != QMediaPlayer.Error.NoError:
            message = self._player.errorString()
            self.release()
            msg = f"Cannot open {path.name}: {message}"
            raise PlayerCreationError(msg)

        # Errors raised synchronously are reported by the constructor and play()
        self._error_callback = on_error

    @property
    def path(self) -> Path:
        """Return the file this player plays."""
        return self._path

    def set_volume(self, volume: float) -> None:
        self._output.setVolume(volume)

    def seek_to_start(self) -> None:
        self._player.setPosition(0)

    def play(self) -> bool:
        """Start playback.

        Returns:
            True unless Qt reports an error for this source.
        """
        callback, self._error_callback = self._error_callback, None
        try:
            self._player.play()
        finally:
            self._error_callback = callback
        return self._player.error() == QMediaPlayer.Error.NoError

    def stop(self) -> None:
        self._player.stop()

    def release(self) -> None:
        """Stop playback and schedule the Qt objects for deletion."""
        self._error_callback = None
        self._player.stop()
        self._player.deleteLater()
        self._output.deleteLater()

    def _on_error(self, error: QMediaPlayer.Error, message: str) -> None:
        logger.warning("Playback error for %s (%s): %s", self._path.name, error, message)
        if self._error_callback is not None:
            self._error_callback(self, f"cannot play {self._path.name}: {message}")


class QtAudioBackend:
    """Creates Qt Multimedia players parented to a single QObject."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def configure_session(self) -> None:
        """Check that audio can be mixed on the default output device.

        Qt Multimedia shares the output device with other applications by
        default, so the only thing to verify is that a device exists.

        Raises:
            AudioSessionError: If no default audio output is available.
        """
        device = QMediaDevices.defaultAudioOutput()
        if device.isNull():
            msg = "No default audio output device"
            raise AudioSessionError(msg)
        logger.debug("Using audio output: %s", device.description())

    def create_player(
        self, path: Path, *, looping: bool, on_error: ErrorCallback | None = None
    ) -> QtAudioPlayer:
        return QtAudioPlayer(path, looping=looping, on_error=on_error, parent=self._parent)
