"""Main application window: a list of sound cards, a settings toggle and a
global mute button. The card sliders are only shown in settings mode.

Layout:
+------------------------------+
| [Rain card]                  |
| [Fireplace card]             |
| [Cafe card]                  |
| [Thunder card]               |
|                              |
| [Settings] [Mute]            |
+------------------------------+
"""

import logging

from PySide6.QtCore import Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from commonroom.core.playback import PlaybackCoordinator
from commonroom.ui.tokens import sizing, spacing
from commonroom.ui.widgets.sound_card import SoundCard

logger = logging.getLogger(__name__)

STATUS_MESSAGE_MS = 5000


class MainWindow(QMainWindow):
    """Main application window bound to a PlaybackCoordinator.

    The window forwards user intents to the coordinator and reflects its
    signals back into the cards, so the coordinator stays the single
    source of truth for play state, volumes, intervals and mute.

    Example:
        coordinator = PlaybackCoordinator(default_catalog(), backend=QtAudioBackend())
        window = MainWindow(coordinator)
        window.show()
    """

    def __init__(self, coordinator: PlaybackCoordinator) -> None:
        """Initialize the main window.

        Args:
            coordinator: Playback coordinator to control and observe.
        """
        super().__init__()
        self._coordinator = coordinator
        self._cards: dict[str, SoundCard] = {}

        self._setup_ui()
        self._connect_signals()
        self._sync_from_coordinator()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("Common Room")
        self.setMinimumWidth(sizing.window_min_width)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(spacing.xl, spacing.lg, spacing.xl, spacing.lg)
        main_layout.setSpacing(spacing.lg)

        cards_container = QWidget()
        cards_layout = QVBoxLayout(cards_container)
        cards_layout.setContentsMargins(0, 0, 0, 0)
        cards_layout.setSpacing(spacing.lg)
        for sound in self._coordinator.sounds:
            card = SoundCard(sound)
            self._cards[sound.id] = card
            cards_layout.addWidget(card)
        cards_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(cards_container)
        main_layout.addWidget(scroll)

        footer = QHBoxLayout()
        self._settings_button = QPushButton("⚙ Settings")
        self._settings_button.setCheckable(True)
        self._settings_button.toggled.connect(self._on_settings_toggled)
        footer.addWidget(self._settings_button)

        self._mute_button = QPushButton()
        self._mute_button.setCheckable(True)
        self._mute_button.clicked.connect(self._coordinator.toggle_mute)
        footer.addWidget(self._mute_button)
        footer.addStretch()
        main_layout.addLayout(footer)

    def _connect_signals(self) -> None:
        """Wire card intents to the coordinator and coordinator changes to cards."""
        for card in self._cards.values():
            card.toggled.connect(self._on_card_toggled)
            card.volume_changed.connect(self._on_card_volume_changed)
            card.interval_changed.connect(self._on_card_interval_changed)

        self._coordinator.playing_changed.connect(self._on_playing_changed)
        self._coordinator.volumes_changed.connect(self._on_volumes_changed)
        self._coordinator.intervals_changed.connect(self._on_intervals_changed)
        self._coordinator.muted_changed.connect(self._on_muted_changed)
        self._coordinator.playback_failed.connect(self._on_playback_failed)

    def _sync_from_coordinator(self) -> None:
        """Push the coordinator's current state into every widget."""
        for sound in self._coordinator.sounds:
            card = self._cards[sound.id]
            card.set_playing(self._coordinator.is_playing(sound))
            card.set_volume(self._coordinator.volume(sound))
            card.set_interval(self._coordinator.interval(sound))
        self._on_muted_changed(self._coordinator.is_muted)
        self._on_settings_toggled(self._settings_button.isChecked())

    @property
    def cards(self) -> dict[str, SoundCard]:
        """Return the sound cards keyed by sound id."""
        return dict(self._cards)

    # -- User intents ----------------------------------------------------------

    @Slot(bool)
    def _on_settings_toggled(self, visible: bool) -> None:
        for card in self._cards.values():
            card.set_controls_visible(visible)
        self._settings_button.setText("✕ Done" if visible else "⚙ Settings")

    @Slot(str)
    def _on_card_toggled(self, sound_id: str) -> None:
        sound = self._coordinator.get_sound(sound_id)
        if sound is not None:
            self._coordinator.toggle(sound)

    @Slot(str, float)
    def _on_card_volume_changed(self, sound_id: str, volume: float) -> None:
        sound = self._coordinator.get_sound(sound_id)
        if sound is not None:
            self._coordinator.set_volume(volume, sound)

    @Slot(str, float)
    def _on_card_interval_changed(self, sound_id: str, seconds: float) -> None:
        sound = self._coordinator.get_sound(sound_id)
        if sound is not None:
            self._coordinator.set_interval(seconds, sound)

    # -- Coordinator changes ---------------------------------------------------

    def _on_playing_changed(self, playing_ids: frozenset[str]) -> None:
        for sound_id, card in self._cards.items():
            card.set_playing(sound_id in playing_ids)

    def _on_volumes_changed(self, volumes: dict[str, float]) -> None:
        for sound_id, volume in volumes.items():
            card = self._cards.get(sound_id)
            if card is not None:
                card.set_volume(volume)

    def _on_intervals_changed(self, intervals: dict[str, float]) -> None:
        for sound_id, seconds in intervals.items():
            card = self._cards.get(sound_id)
            if card is not None:
                card.set_interval(seconds)

    @Slot(bool)
    def _on_muted_changed(self, muted: bool) -> None:
        self._mute_button.setChecked(muted)
        self._mute_button.setText("🔇 Muted" if muted else "🔊 Mute")

    @Slot(str, str)
    def _on_playback_failed(self, sound_id: str, reason: str) -> None:
        self.statusBar().showMessage(f"{sound_id}: {reason}", STATUS_MESSAGE_MS)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        """Stop all sounds before closing.

        Args:
            event: The close event.
        """
        self._coordinator.stop_all()
        super().closeEvent(event)
