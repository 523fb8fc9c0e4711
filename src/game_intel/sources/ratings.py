"""Review score source.

Placeholder: answers with the same scores for every game until a real
review aggregator is wired in. Callers must keep treating the payload as
``provider label -> human readable score``.
"""

from __future__ import annotations

from game_intel.sources.base import SourceAdapter

_PLACEHOLDER_SCORES: dict[str, str] = {
    "Metacritic": "85/100",
    "IMDb": "8.2/10",
    "Steam": "4.5/5",
    "OpenCritic": "82",
}


class RatingsSource(SourceAdapter):
    """Fixed review scores keyed by provider name."""

    name = "ratings"
    is_stub = True

    async def fetch(self, query: str) -> dict[str, str]:
        return dict(_PLACEHOLDER_SCORES)

    def default(self) -> dict[str, str]:
        return {}
