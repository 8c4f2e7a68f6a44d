"""Exceptions raised by the deck builder."""

from __future__ import annotations


class BuildError(Exception):
    """Error during deck generation."""
    pass


class DeckFileError(BuildError, OSError):
    """A pack file could not be read or decoded."""
    pass


class RenderError(BuildError):
    """Pillow failed to draw a card or a sheet."""
    pass


class ConfigError(BuildError, ValueError):
    """Invalid builder or layout configuration."""
    pass
