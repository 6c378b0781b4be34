"""The sounds shipped with Common Room."""

from commonroom.models.sound import IntervalConfig, IntervalRandom, Looping, Sound

THUNDER_VARIANT_COUNT = 11
THUNDER_INTERVAL = IntervalConfig(default_interval=30, minimum=10, maximum=60)


def thunder_variants(count: int = THUNDER_VARIANT_COUNT) -> tuple[str, ...]:
    """Return the numbered thunder resource names (thunder01, thunder02, ...)."""
    return tuple(f"thunder{index:02d}" for index in range(1, count + 1))


def default_catalog() -> list[Sound]:
    """Build the application catalog in display order.

    Returns:
        Rain, Fireplace and Cafe as looping sounds, Thunder as an
        interval-random sound.
    """
    return [
        Sound(name="Rain", icon="cloud.rain.fill", playback=Looping("rain")),
        Sound(name="Fireplace", icon="flame.fill", playback=Looping("fireplace")),
        Sound(name="Cafe", icon="cup.and.saucer.fill", playback=Looping("cafe")),
        Sound(
            name="Thunder",
            icon="cloud.bolt.rain.fill",
            playback=IntervalRandom(files=thunder_variants(), interval=THUNDER_INTERVAL),
        ),
    ]
