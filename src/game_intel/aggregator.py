"""Settle-all fan-out across game intelligence sources.

Every registered source runs concurrently with the same query. A failed
or slow source never cancels the others; it contributes its empty
default to the merged response instead.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import structlog

from game_intel.exceptions import ConfigurationError
from game_intel.sources import (
    RatingsSource,
    RedditSearchSource,
    SourceFailure,
    SourceSuccess,
    TwitchStreamSource,
    YouTubeSearchSource,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from game_intel.config import Settings
    from game_intel.sources import SourceAdapter, SourceResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_DEFAULT_SOURCE_TIMEOUT_SECONDS = 10.0


def default_sources(settings: Settings) -> list[SourceAdapter]:
    """Build the standard source set in response key order."""
    return [
        RatingsSource(),
        RedditSearchSource(settings.reddit),
        YouTubeSearchSource(settings.youtube),
        TwitchStreamSource(),
    ]


class Aggregator:
    """Collect one merged response from many independent sources."""

    def __init__(
        self,
        sources: Sequence[SourceAdapter],
        source_timeout: float = _DEFAULT_SOURCE_TIMEOUT_SECONDS,
    ) -> None:
        if not sources:
            raise ConfigurationError("aggregator needs at least one source")
        names = [source.name for source in sources]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigurationError(f"duplicate source names: {duplicates}")
        if source_timeout <= 0:
            raise ConfigurationError("source_timeout must be positive")

        self._sources = list(sources)
        self._source_timeout = source_timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> Aggregator:
        return cls(
            default_sources(settings),
            source_timeout=settings.aggregator.source_timeout_seconds,
        )

    @property
    def source_names(self) -> list[str]:
        return [source.name for source in self._sources]

    async def settle(self, query: str) -> list[SourceResult]:
        """Run every source and return one tagged outcome per source.

        Outcomes are in registration order. Ordinary exceptions and
        per-source timeouts become :class:`SourceFailure`; anything that
        is not an ``Exception`` (cancellation, interpreter exit) propagates.
        """
        outcomes = await asyncio.gather(
            *(self._run(source, query) for source in self._sources),
            return_exceptions=True,
        )

        results: list[SourceResult] = []
        for source, outcome in zip(self._sources, outcomes, strict=True):
            if isinstance(outcome, TimeoutError):
                message = f"timed out after {self._source_timeout:g}s"
            elif isinstance(outcome, Exception):
                message = str(outcome) or type(outcome).__name__
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                results.append(
                    SourceSuccess(source=source.name, payload=outcome, stub=source.is_stub)
                )
                continue

            logger.warning(
                "source_failed",
                source=source.name,
                error=message,
                error_type=type(outcome).__name__,
            )
            results.append(SourceFailure(source=source.name, message=message))
        return results

    async def collect(self, query: str) -> dict[str, Any]:
        """Return ``{source name: payload or default}`` for every source.

        The mapping always holds one key per registered source, in
        registration order, however many sources failed.
        """
        results = await self.settle(query)

        response: dict[str, Any] = {}
        for source, result in zip(self._sources, results, strict=True):
            if isinstance(result, SourceSuccess):
                response[source.name] = result.payload
            else:
                response[source.name] = source.default()

        failed = [r.source for r in results if isinstance(r, SourceFailure)]
        stubbed = [r.source for r in results if isinstance(r, SourceSuccess) and r.stub]
        logger.info(
            "aggregation_complete",
            sources=len(results),
            failed=failed,
            stubbed=stubbed,
        )
        return response

    async def _run(self, source: SourceAdapter, query: str) -> Any:
        return await asyncio.wait_for(source.fetch(query), timeout=self._source_timeout)
