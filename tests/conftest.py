"""Test fixtures for commonroom tests."""

from __future__ import annotations

import os
import random
from collections.abc import Iterator
from collections.abc import Callable
from pathlib import Path

import pytest

# Widgets and timers need a Qt platform even on headless CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from commonroom.core.audio_backend import PlayerCreationError  # noqa: E402
from commonroom.core.playback import PlaybackCoordinator  # noqa: E402
from commonroom.core.resources import SoundLocator  # noqa: E402
from commonroom.models.catalog import default_catalog, thunder_variants  # noqa: E402
from commonroom.models.sound import Sound  # noqa: E402


class FakePlayer:
    """Records every call the coordinator makes on a player."""

    def __init__(
        self,
        path: Path,
        *,
        looping: bool,
        play_result: bool = True,
        on_error: Callable[[FakePlayer, str], None] | None = None,
    ) -> None:
        self.path = path
        self.looping = looping
        self.volume: float | None = None
        self.playing = False
        self.released = False
        self.play_calls = 0
        self.seek_calls = 0
        self._play_result = play_result
        self._on_error = on_error

    @property
    def name(self) -> str:
        return self.path.stem

    def set_volume(self, volume: float) -> None:
        self.volume = volume

    def seek_to_start(self) -> None:
        self.seek_calls += 1

    def play(self) -> bool:
        self.play_calls += 1
        self.playing = self._play_result
        return self._play_result

    def stop(self) -> None:
        self.playing = False

    def release(self) -> None:
        self.playing = False
        self.released = True

    def fail(self, reason: str = "decoder error") -> None:
        """Report an error the way the device does after playback started."""
        if self._on_error is not None:
            self._on_error(self, reason)


class FakeBackend:
    """Audio backend creating FakePlayers instead of touching a device."""

    def __init__(self) -> None:
        self.players: list[FakePlayer] = []
        self.rejected_names: set[str] = set()
        self.play_result = True
        self.session_error: Exception | None = None
        self.session_calls = 0

    def configure_session(self) -> None:
        self.session_calls += 1
        if self.session_error is not None:
            raise self.session_error

    def create_player(
        self,
        path: Path,
        *,
        looping: bool,
        on_error: Callable[[FakePlayer, str], None] | None = None,
    ) -> FakePlayer:
        if path.stem in self.rejected_names:
            msg = f"Unsupported format: {path.name}"
            raise PlayerCreationError(msg)
        player = FakePlayer(
            path, looping=looping, play_result=self.play_result, on_error=on_error
        )
        self.players.append(player)
        return player

    @property
    def live_players(self) -> list[FakePlayer]:
        return [p for p in self.players if not p.released]


@pytest.fixture
def backend() -> FakeBackend:
    """Return a fresh fake audio backend."""
    return FakeBackend()


@pytest.fixture
def sounds_dir(tmp_path: Path) -> Path:
    """Create a sounds directory with every catalog file.

    Looping files live at the top level, thunder variants in the Sounds/
    fallback subdirectory.
    """
    for name in ("rain", "fireplace", "cafe"):
        (tmp_path / f"{name}.mp3").write_bytes(b"ID3")
    fallback = tmp_path / "Sounds"
    fallback.mkdir()
    for name in thunder_variants():
        (fallback / f"{name}.mp3").write_bytes(b"ID3")
    return tmp_path


@pytest.fixture
def locator(sounds_dir: Path) -> SoundLocator:
    """Return a locator over the test sounds directory."""
    return SoundLocator(sounds_dir)


@pytest.fixture
def catalog() -> list[Sound]:
    """Return the default catalog."""
    return default_catalog()


@pytest.fixture
def rain(catalog: list[Sound]) -> Sound:
    return catalog[0]


@pytest.fixture
def thunder(catalog: list[Sound]) -> Sound:
    return catalog[3]


@pytest.fixture
def coordinator(
    qapp: QApplication,
    catalog: list[Sound],
    backend: FakeBackend,
    locator: SoundLocator,
) -> Iterator[PlaybackCoordinator]:
    """Return a coordinator over the default catalog with a fake backend."""
    coordinator = PlaybackCoordinator(
        catalog,
        backend=backend,
        locator=locator,
        rng=random.Random(1234),
    )
    yield coordinator
    coordinator.stop_all()

