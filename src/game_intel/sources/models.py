"""Data models for game intelligence sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class PostRecord:
    """Reddit post kept for a game lookup."""

    title: str
    url: str
    upvotes: int
    comments: int
    subreddit: str


@dataclass(slots=True)
class VideoRecord:
    """Video search hit."""

    id: str
    title: str
    views: str
    rating: str


@dataclass(slots=True)
class StreamRecord:
    """Live stream currently broadcasting the game."""

    broadcaster: str
    title: str
    viewers: str
    url: str


@dataclass(slots=True)
class SourceSuccess:
    """Settled lookup that produced a payload.

    ``stub`` is set when the payload comes from a placeholder source and
    carries no information about the query beyond its name.
    """

    source: str
    payload: Any
    stub: bool = False


@dataclass(slots=True)
class SourceFailure:
    """Settled lookup that failed; ``message`` is diagnostic only."""

    source: str
    message: str


SourceResult = SourceSuccess | SourceFailure
