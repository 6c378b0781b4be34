"""Sound card widget - one ambient sound with play toggle and sliders."""

import logging

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from commonroom.models.sound import Sound
from commonroom.ui.tokens import sizing, spacing, typography
from commonroom.ui.widgets.interval_slider import IntervalSlider
from commonroom.ui.widgets.volume_slider import VolumeSlider

logger = logging.getLogger(__name__)


class SoundCard(QWidget):
    """Card widget for displaying and controlling one sound.

    Shows the sound name, a play/stop toggle, a volume slider and, for
    interval sounds, a slider for the pause between variants. The card
    only forwards user intents; its displayed state is pushed in from
    outside via the ``set_*`` methods. The sliders can be hidden so the
    card shows just the toggle and name.

    Example:
        card = SoundCard(rain)
        card.toggled.connect(lambda sid: print(f"toggle {sid}"))
        card.set_playing(True)
    """

    toggled = Signal(str)  # sound_id
    volume_changed = Signal(str, float)  # sound_id, volume 0.0-1.0
    interval_changed = Signal(str, float)  # sound_id, seconds

    def __init__(self, sound: Sound) -> None:
        """Initialize the sound card.

        Args:
            sound: The sound this card controls.
        """
        super().__init__()
        self._sound = sound
        self._playing = False
        self._interval_slider: IntervalSlider | None = None

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setObjectName("SoundCard")
        self.setStyleSheet(
            f"#SoundCard {{ border: 1px solid palette(mid);"
            f" border-radius: {sizing.border_radius_lg}px; }}"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(spacing.lg, spacing.md, spacing.lg, spacing.md)
        layout.setSpacing(spacing.sm)

        header = QHBoxLayout()
        header.setSpacing(spacing.md)

        self._toggle_button = QPushButton()
        self._toggle_button.setFixedSize(sizing.control_button, sizing.control_button)
        self._toggle_button.setCheckable(True)
        self._toggle_button.clicked.connect(self._on_toggle_clicked)
        header.addWidget(self._toggle_button)

        self._name_label = QLabel(self._sound.name)
        self._name_label.setStyleSheet(f"font-weight: bold; font-size: {typography.title}pt;")
        header.addWidget(self._name_label)
        header.addStretch()
        layout.addLayout(header)

        self._volume_slider = VolumeSlider()
        self._volume_slider.volume_changed.connect(self._on_volume_changed)
        layout.addWidget(self._volume_slider)

        config = self._sound.interval_config
        if config is not None:
            self._interval_slider = IntervalSlider(config)
            self._interval_slider.interval_changed.connect(self._on_interval_changed)
            layout.addWidget(self._interval_slider)

        self._update_toggle_button()

    @property
    def sound(self) -> Sound:
        """Return the sound this card controls."""
        return self._sound

    @property
    def is_playing(self) -> bool:
        """Return the displayed play state."""
        return self._playing

    def set_controls_visible(self, visible: bool) -> None:
        """Show or hide the volume and interval sliders."""
        self._volume_slider.setVisible(visible)
        if self._interval_slider is not None:
            self._interval_slider.setVisible(visible)

    def set_playing(self, playing: bool) -> None:
        """Update the displayed play state."""
        if self._playing == playing:
            return
        self._playing = playing
        self._update_toggle_button()

    def set_volume(self, volume: float) -> None:
        """Update the volume slider (0.0-1.0) without emitting signals."""
        self._volume_slider.set_volume(round(volume * 100))

    def set_interval(self, seconds: float) -> None:
        """Update the interval slider without emitting signals."""
        if self._interval_slider is not None:
            self._interval_slider.set_interval(seconds)

    def _update_toggle_button(self) -> None:
        self._toggle_button.setChecked(self._playing)
        self._toggle_button.setText("■" if self._playing else "▶")
        self._toggle_button.setToolTip(
            f"Stop {self._sound.name}" if self._playing else f"Play {self._sound.name}"
        )

    def _on_toggle_clicked(self) -> None:
        # The coordinator decides the real state; restore until it reports back
        self._toggle_button.setChecked(self._playing)
        self.toggled.emit(self._sound.id)

    def _on_volume_changed(self, percent: int) -> None:
        self.volume_changed.emit(self._sound.id, percent / 100)

    def _on_interval_changed(self, seconds: int) -> None:
        self.interval_changed.emit(self._sound.id, float(seconds))
