"""Data models for ambient sounds and the sound catalog."""

from commonroom.models.catalog import default_catalog
from commonroom.models.sound import (
    IntervalConfig,
    IntervalRandom,
    Looping,
    PlaybackMode,
    Sound,
)

__all__ = [
    "IntervalConfig",
    "IntervalRandom",
    "Looping",
    "PlaybackMode",
    "Sound",
    "default_catalog",
]
