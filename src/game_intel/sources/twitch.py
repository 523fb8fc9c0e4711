"""Live stream source (placeholder, no outbound call)."""

from __future__ import annotations

from game_intel.sources.base import SourceAdapter
from game_intel.sources.models import StreamRecord

_CHANNEL_HOST = "https://twitch.tv"

# (broadcaster, title template, viewers)
_PLACEHOLDER_STREAMS: tuple[tuple[str, str, str], ...] = (
    ("pro_gamer_1", "Playing {query}", "15,000"),
    ("streamer_pro", "{query} Chill Stream", "8,500"),
    ("gaming_channel", "{query} Tournament", "22,000"),
)


class TwitchStreamSource(SourceAdapter):
    """Three canned streams with the game name in each title."""

    name = "twitch"
    is_stub = True

    async def fetch(self, query: str) -> list[StreamRecord]:
        return [
            StreamRecord(
                broadcaster=broadcaster,
                title=template.format(query=query),
                viewers=viewers,
                url=f"{_CHANNEL_HOST}/{broadcaster}",
            )
            for broadcaster, template, viewers in _PLACEHOLDER_STREAMS
        ]

    def default(self) -> list[StreamRecord]:
        return []
