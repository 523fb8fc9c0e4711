"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from game_intel.sources.models import PostRecord, StreamRecord, VideoRecord


class GameIntelResponse(BaseModel):
    """Merged per-source payloads for one game.

    A source that failed shows up as its empty default, never as an error.
    """

    ratings: dict[str, str] = Field(default_factory=dict)
    reddit: list[PostRecord] = Field(default_factory=list)
    youtube: list[VideoRecord] = Field(default_factory=list)
    twitch: list[StreamRecord] = Field(default_factory=list)


class StatusResponse(BaseModel):
    """Liveness payload."""

    status: str


class ErrorResponse(BaseModel):
    """Generic failure payload; carries no internal detail."""

    error: str
