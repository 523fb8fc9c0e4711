"""YouTube video source.

Placeholder: the payload is three canned videos titled after the game.
With ``probe_search_page`` enabled the real search page is fetched first
and its video IDs and titles are counted for the debug log; a failed
probe fails the source, but probe matches never reach the payload.
"""

from __future__ import annotations

import re

import httpx
import structlog

from game_intel.config import YouTubeSettings
from game_intel.exceptions import SourceUnavailableError
from game_intel.sources.base import SourceAdapter
from game_intel.sources.models import VideoRecord

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_VIDEO_ID_RE = re.compile(r'"videoId":"([^"]+)"')
_TITLE_RE = re.compile(r'"title":\{"simpleText":"([^"]+)"')

# (video id, title template, views, rating)
_PLACEHOLDER_VIDEOS: tuple[tuple[str, str, str, str], ...] = (
    ("dQw4w9WgXcQ", "{query} Full Review", "1.2M", "4.8/5"),
    ("jNQXAC9IVRw", "{query} Gameplay", "850K", "4.7/5"),
    ("9bZkp7q19f0", "{query} Tips & Tricks", "520K", "4.9/5"),
)


class YouTubeSearchSource(SourceAdapter):
    """Three canned review videos, optionally preceded by a page probe."""

    name = "youtube"
    is_stub = True

    def __init__(
        self,
        settings: YouTubeSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or YouTubeSettings()
        self._client = client

    def default(self) -> list[VideoRecord]:
        return []

    async def fetch(self, query: str) -> list[VideoRecord]:
        if self._settings.probe_search_page:
            await self._probe(query)
        return [
            VideoRecord(
                id=video_id,
                title=template.format(query=query),
                views=views,
                rating=rating,
            )
            for video_id, template, views, rating in _PLACEHOLDER_VIDEOS
        ]

    async def _probe(self, query: str) -> None:
        params = {"search_query": f"{query} review", "hl": "en"}
        headers = {"User-Agent": self._settings.user_agent}

        try:
            if self._client is not None:
                response = await self._client.get(
                    self._settings.search_url,
                    params=params,
                    headers=headers,
                    timeout=self._settings.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self._settings.timeout) as client:
                    response = await client.get(
                        self._settings.search_url, params=params, headers=headers
                    )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise SourceUnavailableError(self.name, str(exc) or repr(exc)) from exc

        logger.debug(
            "youtube_probe_matches",
            video_ids=len(_VIDEO_ID_RE.findall(response.text)),
            titles=len(_TITLE_RE.findall(response.text)),
        )
