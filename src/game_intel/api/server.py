"""Uvicorn server runner for the game-intel API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import uvicorn

from game_intel.api.app import create_app

if TYPE_CHECKING:
    from game_intel.config import Settings


def run_server(settings: Settings) -> None:
    """Run uvicorn with settings-backed host/port values."""
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.port,
        log_level=settings.logging.level.lower(),
    )
