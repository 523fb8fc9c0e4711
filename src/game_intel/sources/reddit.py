"""Reddit search source.

Runs one relevance-sorted search over the trailing month and keeps the
posts that either live in a gaming subreddit or mention the game in
their title.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from game_intel.config import RedditSettings
from game_intel.exceptions import SourcePayloadError, SourceUnavailableError
from game_intel.sources.base import SourceAdapter
from game_intel.sources.models import PostRecord

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_GAMING_SUBREDDIT_MARKERS = ("gaming", "games")


def is_relevant_post(post: dict[str, Any], query: str) -> bool:
    """Return True when a post is worth showing for ``query``.

    Inclusive OR: a gaming subreddit qualifies on its own, and so does a
    title containing the query. Both checks are case-insensitive.
    """
    subreddit = str(post["subreddit"]).lower()
    if any(marker in subreddit for marker in _GAMING_SUBREDDIT_MARKERS):
        return True
    return query.lower() in str(post["title"]).lower()


def build_post_url(host: str, permalink: str) -> str:
    """Join ``host`` and a relative permalink with exactly one slash."""
    return f"{host.rstrip('/')}/{permalink.lstrip('/')}"


class RedditSearchSource(SourceAdapter):
    """Search Reddit and normalize the matching posts."""

    name = "reddit"

    def __init__(
        self,
        settings: RedditSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or RedditSettings()
        self._client = client

    def default(self) -> list[PostRecord]:
        return []

    async def fetch(self, query: str) -> list[PostRecord]:
        """Search Reddit for ``query`` and return at most ``max_results`` posts."""
        payload = await self._search(query)
        posts = self.extract_posts(payload, query)
        logger.debug("reddit_posts_kept", kept=len(posts))
        return posts

    def extract_posts(self, payload: Any, query: str) -> list[PostRecord]:
        """Filter, truncate and map a raw search listing.

        Raises:
            SourcePayloadError: If the listing does not have the expected shape.
        """
        try:
            children = payload["data"]["children"]
            posts: list[PostRecord] = []
            for child in children:
                post = child["data"]
                if not is_relevant_post(post, query):
                    continue
                posts.append(
                    PostRecord(
                        title=str(post["title"]),
                        url=build_post_url(
                            self._settings.link_host, str(post["permalink"])
                        ),
                        upvotes=int(post.get("ups") or 0),
                        comments=int(post.get("num_comments") or 0),
                        subreddit=str(post["subreddit"]),
                    )
                )
                if len(posts) >= self._settings.max_results:
                    break
        except (KeyError, TypeError, ValueError) as exc:
            raise SourcePayloadError(
                self.name, f"malformed search listing: {exc!r}"
            ) from exc
        return posts

    async def _search(self, query: str) -> Any:
        params = {
            "q": query,
            "type": "link",
            "sort": "relevance",
            "t": "month",
            "limit": self._settings.upstream_limit,
        }
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

        try:
            return response.json()
        except (ValueError, RecursionError) as exc:
            raise SourcePayloadError(self.name, "response is not JSON") from exc
