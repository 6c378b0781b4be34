"""Sound model describing an ambient track and how it is played."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class IntervalConfig:
    """Timing bounds for an interval-triggered sound.

    Attributes:
        default_interval: Seconds between variants when nothing is stored.
        minimum: Lower bound in seconds.
        maximum: Upper bound in seconds.
    """

    default_interval: float
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        """Validate that the default lies inside the range."""
        if not self.minimum <= self.default_interval <= self.maximum:
            msg = (
                f"Default interval {self.default_interval} outside "
                f"[{self.minimum}, {self.maximum}]"
            )
            raise ValueError(msg)

    def clamp(self, value: float) -> float:
        """Clamp a value into the configured range."""
        return min(max(float(value), self.minimum), self.maximum)


@dataclass(frozen=True, slots=True)
class Looping:
    """A single resource played on infinite repeat."""

    file: str


@dataclass(frozen=True, slots=True)
class IntervalRandom:
    """Randomly chosen variants separated by a configurable pause.

    Attributes:
        files: Variant resource names, in catalog order.
        interval: Timing bounds for the pause between variants.
    """

    files: tuple[str, ...]
    interval: IntervalConfig


PlaybackMode = Looping | IntervalRandom


@dataclass(frozen=True, slots=True, eq=False)
class Sound:
    """A statically defined ambient sound.

    Sounds compare and hash by ``id`` only, so a sound can be used as a
    dictionary key regardless of its display attributes.

    Attributes:
        name: Human-readable name.
        playback: How the sound is played.
        icon: Opaque UI hint (icon name).
        file_extension: Extension of every resource of this sound.
        id: Stable identifier; defaults to the name.
    """

    name: str
    playback: PlaybackMode
    icon: str = ""
    file_extension: str = "mp3"
    id: str = field(default="")

    def __post_init__(self) -> None:
        """Default the id to the display name."""
        if not self.id:
            object.__setattr__(self, "id", self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sound):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def available_files(self) -> tuple[str, ...]:
        """Return every resource name this sound may play."""
        match self.playback:
            case Looping(file=file):
                return (file,)
            case IntervalRandom(files=files):
                return files

    @property
    def interval_config(self) -> IntervalConfig | None:
        """Return the interval bounds, or None for looping sounds."""
        if isinstance(self.playback, IntervalRandom):
            return self.playback.interval
        return None
