"""Common interface for every game intelligence source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import structlog

from game_intel.exceptions import SourceError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SourceAdapter(ABC):
    """A single leaf lookup keyed by game name.

    Subclasses implement :meth:`fetch`, which raises a
    :class:`~game_intel.exceptions.SourceError` when the upstream cannot
    answer. :meth:`lookup` is the never-raising form used when a source is
    queried on its own; the aggregator calls :meth:`fetch` directly so it
    can record the failure before substituting :meth:`default`.
    """

    name: ClassVar[str]
    is_stub: ClassVar[bool] = False

    @abstractmethod
    async def fetch(self, query: str) -> Any:
        """Return this source's payload for ``query``."""

    @abstractmethod
    def default(self) -> Any:
        """Return a fresh empty payload used when the source fails."""

    async def lookup(self, query: str) -> Any:
        try:
            return await self.fetch(query)
        except SourceError as exc:
            logger.warning("source_failed", source=self.name, error=str(exc))
            return self.default()
