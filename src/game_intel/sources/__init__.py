"""Game intelligence sources queried by the aggregator."""

from __future__ import annotations

from game_intel.sources.base import SourceAdapter
from game_intel.sources.models import (
    PostRecord,
    SourceFailure,
    SourceResult,
    SourceSuccess,
    StreamRecord,
    VideoRecord,
)
from game_intel.sources.ratings import RatingsSource
from game_intel.sources.reddit import RedditSearchSource
from game_intel.sources.twitch import TwitchStreamSource
from game_intel.sources.youtube import YouTubeSearchSource

__all__ = [
    "PostRecord",
    "RatingsSource",
    "RedditSearchSource",
    "SourceAdapter",
    "SourceFailure",
    "SourceResult",
    "SourceSuccess",
    "StreamRecord",
    "TwitchStreamSource",
    "VideoRecord",
    "YouTubeSearchSource",
]
