"""Main entry point for the Common Room application."""

import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from commonroom import __version__
from commonroom.core.audio_backend import QtAudioBackend
from commonroom.core.config import ConfigManager
from commonroom.core.persistence import SettingsBridge, load_initial_state
from commonroom.core.playback import PlaybackCoordinator
from commonroom.core.resources import SoundLocator, default_sounds_dir
from commonroom.models.catalog import default_catalog
from commonroom.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name.

    Returns:
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="commonroom",
        description="Common Room - ambient sound player",
    )
    parser.add_argument(
        "--sounds-dir", type=Path, default=None, help="directory holding the audio files",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def resolve_sounds_dir(cli_value: Path | None, config: ConfigManager) -> Path:
    """Pick the sounds directory: command line, then settings, then packaged."""
    if cli_value is not None:
        return cli_value.expanduser()
    configured = config.get_sounds_directory()
    if configured:
        return Path(configured).expanduser()
    return default_sounds_dir()


def main() -> int:
    """Run the Common Room application.

    Returns:
        Exit code (0 for success).
    """
    # Set app metadata before creating QApplication (required for macOS)
    QApplication.setApplicationName("Common Room")
    QApplication.setApplicationDisplayName("Common Room")
    QApplication.setOrganizationName("CommonRoom")

    app = QApplication(sys.argv)
    parsed = parse_args(app.arguments()[1:])

    logging.basicConfig(
        level=logging.DEBUG if parsed.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ConfigManager()
    sounds_dir = resolve_sounds_dir(parsed.sounds_dir, config)
    logger.info("Loading sounds from %s", sounds_dir)

    initial = load_initial_state(config)
    coordinator = PlaybackCoordinator(
        default_catalog(),
        initial.volumes,
        initial.intervals,
        initial.muted,
        backend=QtAudioBackend(app),
        locator=SoundLocator(sounds_dir),
    )
    SettingsBridge(coordinator, config, parent=app)

    window = MainWindow(coordinator)
    window.show()

    exit_code = app.exec()

    # Cleanup
    coordinator.stop_all()
    config.sync()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
