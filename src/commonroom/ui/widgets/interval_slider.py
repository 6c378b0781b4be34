"""Slider for the pause between variants of an interval sound."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QSlider, QWidget

from commonroom.models.sound import IntervalConfig
from commonroom.ui.tokens import sizing, spacing, typography


class IntervalSlider(QWidget):
    """Whole-second slider bounded by an IntervalConfig.

    Example:
        slider = IntervalSlider(IntervalConfig(30, 10, 60))
        slider.interval_changed.connect(lambda sec: print(f"Every {sec}s"))
    """

    interval_changed = Signal(int)  # New interval in seconds

    def __init__(self, config: IntervalConfig) -> None:
        """Initialize the slider at the configured default.

        Args:
            config: Bounds and default of the interval.
        """
        super().__init__()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(spacing.sm)

        self._caption = QLabel("Every")
        self._caption.setStyleSheet(f"font-size: {typography.caption}pt;")
        layout.addWidget(self._caption)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setMinimum(round(config.minimum))
        self._slider.setMaximum(round(config.maximum))
        self._slider.setValue(round(config.default_interval))
        self._slider.setMinimumWidth(sizing.slider_min)
        self._slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self._slider)

        self._value_label = QLabel(f"{self._slider.value()}s")
        self._value_label.setMinimumWidth(sizing.value_label)
        self._value_label.setStyleSheet(f"font-size: {typography.caption}pt;")
        layout.addWidget(self._value_label)

    def _on_value_changed(self, value: int) -> None:
        self._value_label.setText(f"{value}s")
        self.interval_changed.emit(value)

    @property
    def interval(self) -> int:
        """Return current interval in seconds."""
        return self._slider.value()

    def set_interval(self, seconds: float) -> None:
        """Set the interval without emitting signals.

        Args:
            seconds: Interval in seconds (rounded, clamped by the slider).
        """
        self._slider.blockSignals(True)
        self._slider.setValue(round(seconds))
        self._slider.blockSignals(False)
        self._value_label.setText(f"{self._slider.value()}s")
