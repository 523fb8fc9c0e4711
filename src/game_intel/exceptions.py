"""Centralized exception hierarchy for the game-intel package.

All domain-specific exceptions inherit from ``GameIntelError`` so
callers can catch the entire family with a single ``except`` clause.
"""

from __future__ import annotations


class GameIntelError(Exception):
    """Base exception for all game-intel errors."""


# ---------------------------------------------------------------------------
# Source errors
# ---------------------------------------------------------------------------


class SourceError(GameIntelError):
    """Base exception for a single source lookup."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class SourceUnavailableError(SourceError):
    """Raised when the upstream cannot be reached, times out, or errors."""


class SourcePayloadError(SourceError):
    """Raised when the upstream answers with a payload we cannot parse."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigurationError(GameIntelError):
    """Raised when the aggregator is wired with an invalid source set."""
