"""Lookup of packaged audio resources by logical name."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

FALLBACK_SUBDIR = "Sounds"


class ResourceNotFoundError(LookupError):
    """Raised when an audio resource is missing from the sounds directory."""


def default_sounds_dir() -> Path:
    """Return the directory holding the audio files shipped with the package."""
    return Path(__file__).parent.parent / "resources"


class SoundLocator:
    """Resolve resource names such as ``thunder03`` to audio files.

    The base directory is searched first, then its fallback subdirectory.

    Example:
        locator = SoundLocator(Path("~/sounds").expanduser())
        path = locator.resolve("rain", "mp3")
    """

    def __init__(self, base_dir: Path | None = None, fallback_subdir: str = FALLBACK_SUBDIR) -> None:
        """Initialize the locator.

        Args:
            base_dir: Primary search directory (packaged resources if None).
            fallback_subdir: Name of the subdirectory searched second.
        """
        self._base_dir = base_dir if base_dir is not None else default_sounds_dir()
        self._fallback_subdir = fallback_subdir

    @property
    def base_dir(self) -> Path:
        """Return the primary search directory."""
        return self._base_dir

    def candidates(self, name: str, extension: str) -> list[Path]:
        """Return the paths searched for a resource, in order."""
        filename = f"{name}.{extension}" if extension else name
        return [
            self._base_dir / filename,
            self._base_dir / self._fallback_subdir / filename,
        ]

    def resolve(self, name: str, extension: str) -> Path:
        """Locate a resource.

        Args:
            name: Logical resource name without extension.
            extension: File extension without the leading dot.

        Returns:
            Path of the first existing candidate.

        Raises:
            ResourceNotFoundError: If no candidate exists.
        """
        for path in self.candidates(name, extension):
            if path.is_file():
                return path
        msg = f"Sound resource '{name}.{extension}' not found under {self._base_dir}"
        raise ResourceNotFoundError(msg)
