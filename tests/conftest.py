"""Shared pytest fixtures for the game-intel test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import httpx
import pytest

from game_intel.config import Settings

if TYPE_CHECKING:
    from pathlib import Path

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# HTTP fakes
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Return a factory for ``httpx.AsyncClient`` instances backed by a handler."""

    def _factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory


# ---------------------------------------------------------------------------
# Configuration fixture
# ---------------------------------------------------------------------------


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
    """Return Settings isolated from the developer's environment and files."""
    monkeypatch.chdir(tmp_path)
    for var in ("PORT", "GAME_INTEL_PORT"):
        monkeypatch.delenv(var, raising=False)
    return Settings()
