"""simedit: text buffer and incremental highlighting core of a terminal line editor."""

__version__ = "0.1.0"
