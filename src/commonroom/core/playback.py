"""Playback coordinator for ambient sounds.

The PlaybackCoordinator owns every live audio player and pending timer.
It decides per sound whether to run a continuous loop or a chain of
randomly chosen one-shot variants separated by a configurable interval,
and keeps per-sound volumes consistent with the global mute flag.

State changes are published as Qt signals so the UI and the settings
bridge can observe them without the coordinator depending on either.

All methods must be called from the Qt GUI thread. Timers are delivered
by the same event loop, so no locking is needed.

Usage:
    coordinator = PlaybackCoordinator(default_catalog(), backend=QtAudioBackend())
    coordinator.playing_changed.connect(lambda ids: print(sorted(ids)))
    coordinator.toggle(rain)
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping
from functools import partial

from PySide6.QtCore import QObject, QTimer, Signal

from commonroom.core.audio_backend import (
    AudioBackend,
    AudioPlayer,
    AudioSessionError,
    PlayerCreationError,
)
from commonroom.core.resources import ResourceNotFoundError, SoundLocator
from commonroom.models.sound import IntervalRandom, Looping, Sound

logger = logging.getLogger(__name__)

DEFAULT_VOLUME = 1.0
FALLBACK_INTERVAL = 30.0


def clamp_volume(value: float) -> float:
    """Clamp a volume into 0.0-1.0."""
    return min(max(float(value), 0.0), 1.0)


class PlaybackCoordinator(QObject):
    """Per-sound play/stop/volume/interval/mute state machine.

    Signals:
        playing_changed: Frozenset of playing sound ids, on change.
        volumes_changed: Dict snapshot of slider volumes, on change.
        intervals_changed: Dict snapshot of interval durations, on change.
        muted_changed: New global mute flag.
        playback_failed: (sound id, reason) when a sound could not play.

    Example:
        coordinator = PlaybackCoordinator(sounds, {"Rain": 0.4}, {}, False, backend=backend)
        coordinator.play(rain)
        coordinator.set_volume(0.8, rain)
        coordinator.toggle_mute()
    """

    # Note: Using object for complex types (PySide6 limitation)
    playing_changed = Signal(object)
    volumes_changed = Signal(object)
    intervals_changed = Signal(object)
    muted_changed = Signal(bool)
    playback_failed = Signal(str, str)

    def __init__(  # noqa: PLR0913
        self,
        sounds: Iterable[Sound],
        initial_volumes: Mapping[str, float] | None = None,
        initial_intervals: Mapping[str, float] | None = None,
        initial_muted: bool = False,
        *,
        backend: AudioBackend,
        locator: SoundLocator | None = None,
        rng: random.Random | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            sounds: Catalog sounds, in display order.
            initial_volumes: Persisted volumes (extra/missing keys tolerated).
            initial_intervals: Persisted intervals in seconds.
            initial_muted: Persisted global mute flag.
            backend: Factory for audio players.
            locator: Resource lookup (packaged resources if None).
            rng: Random source for variant selection.
            parent: Qt parent object.
        """
        super().__init__(parent)
        self._sounds = list(sounds)
        self._backend = backend
        self._locator = locator or SoundLocator()
        self._rng = rng or random.Random()

        volumes = initial_volumes or {}
        intervals = initial_intervals or {}

        self._playing_ids: set[str] = set()
        self._slider_volumes: dict[str, float] = {
            sound.id: clamp_volume(volumes.get(sound.id, DEFAULT_VOLUME)) for sound in self._sounds
        }
        self._interval_durations: dict[str, float] = {}
        for sound in self._sounds:
            config = sound.interval_config
            if config is not None:
                stored = intervals.get(sound.id, config.default_interval)
                self._interval_durations[sound.id] = config.clamp(stored)
        self._muted = bool(initial_muted)

        self._players: dict[str, AudioPlayer] = {}
        self._timers: dict[str, QTimer] = {}
        self._last_variant: dict[str, int] = {}

        self._configure_session()

    # -- State queries ---------------------------------------------------------

    @property
    def sounds(self) -> list[Sound]:
        """Return the catalog sounds."""
        return list(self._sounds)

    @property
    def playing_ids(self) -> frozenset[str]:
        """Return ids of all playing sounds."""
        return frozenset(self._playing_ids)

    @property
    def slider_volumes(self) -> dict[str, float]:
        """Return a snapshot of the stored slider volumes."""
        return dict(self._slider_volumes)

    @property
    def interval_durations(self) -> dict[str, float]:
        """Return a snapshot of the stored intervals."""
        return dict(self._interval_durations)

    @property
    def is_muted(self) -> bool:
        """Return the global mute flag."""
        return self._muted

    def get_sound(self, sound_id: str) -> Sound | None:
        """Look up a catalog sound by id."""
        for sound in self._sounds:
            if sound.id == sound_id:
                return sound
        return None

    def is_playing(self, sound: Sound) -> bool:
        return sound.id in self._playing_ids

    def volume(self, sound: Sound) -> float:
        """Return the stored slider volume (1.0 if unknown)."""
        return self._slider_volumes.get(sound.id, DEFAULT_VOLUME)

    def interval(self, sound: Sound) -> float:
        """Return the interval in seconds between variants of a sound.

        Falls back to the configured default, then to 30 seconds for
        sounds without an interval configuration.
        """
        if sound.id in self._interval_durations:
            return self._interval_durations[sound.id]
        config = sound.interval_config
        if config is not None:
            return config.default_interval
        return FALLBACK_INTERVAL

    def effective_volume(self, sound: Sound) -> float:
        """Return the output level: 0 when muted, else the slider volume."""
        return 0.0 if self._muted else self.volume(sound)

    def has_active_player(self, sound: Sound) -> bool:
        return sound.id in self._players

    def timer_remaining(self, sound: Sound) -> float | None:
        """Return seconds until the pending timer fires, or None if none is armed."""
        timer = self._timers.get(sound.id)
        if timer is None or not timer.isActive():
            return None
        return timer.remainingTime() / 1000

    # -- Mutating operations ---------------------------------------------------

    def toggle(self, sound: Sound) -> None:
        """Stop the sound if playing, otherwise start it."""
        if self.is_playing(sound):
            self.stop(sound)
        else:
            self.play(sound)

    def play(self, sound: Sound) -> None:
        """Start a sound.

        Failures are logged and reported via ``playback_failed``; the
        sound is then left not playing.
        """
        match sound.playback:
            case Looping(file=file):
                self._play_looping(sound, file)
            case IntervalRandom():
                self._play_interval(sound)

    def stop(self, sound: Sound) -> None:
        """Stop a sound and release its resources. Safe to call repeatedly."""
        self._cancel_timer(sound.id)
        self._release_player(sound.id)
        self._last_variant.pop(sound.id, None)
        if sound.id in self._playing_ids:
            logger.info("Stopped %s", sound.id)
            self._set_playing(sound.id, False)

    def stop_all(self) -> None:
        """Stop every playing sound."""
        for sound in self._sounds:
            self.stop(sound)

    def set_volume(self, value: float, sound: Sound) -> None:
        """Store a new slider volume and apply it to a live player.

        Args:
            value: Requested volume, clamped into 0.0-1.0.
            sound: Target sound.
        """
        clamped = clamp_volume(value)
        changed = self._slider_volumes.get(sound.id) != clamped
        self._slider_volumes[sound.id] = clamped

        player = self._players.get(sound.id)
        if player is not None:
            player.set_volume(0.0 if self._muted else clamped)

        if changed:
            self.volumes_changed.emit(self.slider_volumes)

    def set_interval(self, value: float, sound: Sound) -> None:
        """Store a new interval and re-arm a pending timer from now.

        Args:
            value: Requested seconds, clamped into the sound's range.
            sound: Target sound (ignored without interval config).
        """
        config = sound.interval_config
        if config is None:
            return

        clamped = config.clamp(value)
        changed = self._interval_durations.get(sound.id) != clamped
        self._interval_durations[sound.id] = clamped
        if changed:
            self.intervals_changed.emit(self.interval_durations)

        if self.is_playing(sound):
            self._schedule_timer(sound)

    def toggle_mute(self) -> None:
        self.set_muted(not self._muted)

    def set_muted(self, muted: bool) -> None:
        """Set the global mute flag and push effective volumes to live players."""
        if self._muted == muted:
            return
        self._muted = muted
        logger.debug("Muted: %s", muted)
        self._refresh_player_volumes()
        self.muted_changed.emit(muted)

    # -- Looping ---------------------------------------------------------------

    def _play_looping(self, sound: Sound, file: str) -> None:
        player = self._players.get(sound.id)
        if player is None:
            player = self._create_player(sound, file, looping=True)
            if player is None:
                return
            self._players[sound.id] = player

        player.seek_to_start()
        player.set_volume(self.effective_volume(sound))

        if player.play():
            logger.info("Playing %s", sound.id)
            self._set_playing(sound.id, True)
        else:
            self._release_player(sound.id)
            self._set_playing(sound.id, False)
            self._report_failure(sound, f"could not start {file}")

    # -- Interval random -------------------------------------------------------

    def _play_interval(self, sound: Sound) -> None:
        if not self._play_random_variant(sound):
            self.stop(sound)
            return
        logger.info("Playing %s every %.0fs", sound.id, self.interval(sound))
        self._set_playing(sound.id, True)
        self._schedule_timer(sound)

    def _play_random_variant(self, sound: Sound) -> bool:
        """Start one randomly chosen variant.

        Returns:
            True if a variant is now sounding.
        """
        self._release_player(sound.id)

        index = self._next_variant_index(sound)
        if index is None:
            self._report_failure(sound, "no variants available")
            return False

        file = sound.available_files[index]
        player = self._create_player(sound, file, looping=False)
        if player is None:
            return False

        player.set_volume(self.effective_volume(sound))
        player.seek_to_start()
        self._players[sound.id] = player
        if not player.play():
            self._release_player(sound.id)
            self._report_failure(sound, f"could not start {file}")
            return False

        logger.debug("%s: variant %s", sound.id, file)
        return True

    def _next_variant_index(self, sound: Sound) -> int | None:
        """Pick a variant index, never repeating the previous one.

        Returns:
            Index into the sound's files, or None if it has none.
        """
        count = len(sound.available_files)
        if count == 0:
            return None
        if count == 1:
            self._last_variant[sound.id] = 0
            return 0

        last = self._last_variant.get(sound.id)
        candidates = [i for i in range(count) if i != last]
        index = self._rng.choice(candidates)
        self._last_variant[sound.id] = index
        return index

    # -- Timers ----------------------------------------------------------------

    def _schedule_timer(self, sound: Sound) -> None:
        """Arm (or re-arm) the single-shot timer for the next variant."""
        self._cancel_timer(sound.id)

        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.timeout.connect(partial(self._on_timer_fired, sound))
        timer.start(round(self.interval(sound) * 1000))
        self._timers[sound.id] = timer

    def _cancel_timer(self, sound_id: str) -> None:
        timer = self._timers.pop(sound_id, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def _on_timer_fired(self, sound: Sound) -> None:
        """Play the next variant, or end the chain on failure."""
        # Stopped while the timer was pending
        if sound.id not in self._playing_ids:
            return

        if self._play_random_variant(sound):
            self._schedule_timer(sound)
        else:
            self.stop(sound)

    # -- Players ---------------------------------------------------------------

    def _create_player(self, sound: Sound, file: str, *, looping: bool) -> AudioPlayer | None:
        """Resolve a resource and create a player for it.

        Returns:
            The new player, or None if the resource is missing or rejected.
        """
        try:
            path = self._locator.resolve(file, sound.file_extension)
            return self._backend.create_player(
                path, looping=looping, on_error=partial(self._on_player_error, sound)
            )
        except (ResourceNotFoundError, PlayerCreationError) as e:
            self._report_failure(sound, str(e))
            return None

    def _on_player_error(self, sound: Sound, player: AudioPlayer, reason: str) -> None:
        """Stop a sound whose player failed after it started."""
        # Errors from players already released or replaced are stale
        if self._players.get(sound.id) is not player:
            return
        self.stop(sound)
        self._report_failure(sound, reason)

    def _release_player(self, sound_id: str) -> None:
        player = self._players.pop(sound_id, None)
        if player is not None:
            player.stop()
            player.seek_to_start()
            player.release()

    def _refresh_player_volumes(self) -> None:
        for sound_id, player in self._players.items():
            volume = 0.0 if self._muted else self._slider_volumes.get(sound_id, DEFAULT_VOLUME)
            player.set_volume(volume)

    # -- Helpers ---------------------------------------------------------------

    def _set_playing(self, sound_id: str, playing: bool) -> None:
        if playing == (sound_id in self._playing_ids):
            return
        if playing:
            self._playing_ids.add(sound_id)
        else:
            self._playing_ids.discard(sound_id)
        self.playing_changed.emit(self.playing_ids)

    def _report_failure(self, sound: Sound, reason: str) -> None:
        logger.warning("Cannot play %s: %s", sound.id, reason)
        self.playback_failed.emit(sound.id, reason)

    def _configure_session(self) -> None:
        try:
            self._backend.configure_session()
        except AudioSessionError as e:
            # Playback is still attempted with the default environment
            logger.debug("Audio session setup failed: %s", e)
