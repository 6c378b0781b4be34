"""Common Room - ambient sound player."""

__version__ = "0.1.0"
