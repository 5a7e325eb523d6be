"""Errors raised while assembling or mutating a body."""

from __future__ import annotations

__all__ = [
    "BodyError",
    "EmptyBody",
    "TooManyParts",
    "IncompatibleBoost",
    "IndexOutOfRange",
    "NotationError",
]


class BodyError(ValueError):
    """Base class for invalid body descriptions."""


class EmptyBody(BodyError):
    """Raised when a body is built from zero parts."""


class TooManyParts(BodyError):
    """Raised when a body exceeds the maximum part count."""


class IncompatibleBoost(BodyError):
    """Raised when a compound is paired with a part category it cannot boost."""


class IndexOutOfRange(BodyError, IndexError):
    """Raised when a part index does not address a part of the body."""


class NotationError(BodyError):
    """Raised when a compact body string cannot be parsed."""
