"""Host constants and runtime settings."""

from . import constants, settings

__all__ = ["constants", "settings"]
