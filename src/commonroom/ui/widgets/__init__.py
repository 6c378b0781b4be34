"""Reusable UI widgets."""

from commonroom.ui.widgets.interval_slider import IntervalSlider
from commonroom.ui.widgets.sound_card import SoundCard
from commonroom.ui.widgets.volume_slider import VolumeSlider

__all__ = ["IntervalSlider", "SoundCard", "VolumeSlider"]
