"""Volume slider with percentage readout."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QSlider, QWidget

from commonroom.ui.tokens import sizing, spacing, typography


class VolumeSlider(QWidget):
    """Horizontal 0-100% slider with a percentage label.

    Example:
        slider = VolumeSlider()
        slider.volume_changed.connect(lambda vol: print(f"Volume: {vol}"))
        slider.set_volume(75)
    """

    volume_changed = Signal(int)  # New volume 0-100

    def __init__(self) -> None:
        """Initialize the volume slider at 100%."""
        super().__init__()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(spacing.sm)

        self._caption = QLabel("Volume")
        self._caption.setStyleSheet(f"font-size: {typography.caption}pt;")
        layout.addWidget(self._caption)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setMinimum(0)
        self._slider.setMaximum(100)
        self._slider.setValue(100)
        self._slider.setMinimumWidth(sizing.slider_min)
        self._slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self._slider)

        self._volume_label = QLabel("100%")
        self._volume_label.setMinimumWidth(sizing.value_label)
        self._volume_label.setStyleSheet(f"font-size: {typography.caption}pt;")
        layout.addWidget(self._volume_label)

    def _on_value_changed(self, value: int) -> None:
        """Handle slider value change.

        Args:
            value: New volume value 0-100.
        """
        self._volume_label.setText(f"{value}%")
        self.volume_changed.emit(value)

    @property
    def volume(self) -> int:
        """Return current volume."""
        return self._slider.value()

    def set_volume(self, volume: int) -> None:
        """Set the volume (0-100) without emitting signals.

        Args:
            volume: Volume value.
        """
        self._slider.blockSignals(True)
        self._slider.setValue(volume)
        self._slider.blockSignals(False)
        self._volume_label.setText(f"{self._slider.value()}%")
