"""FastAPI application serving merged game intelligence."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from game_intel import __version__
from game_intel.aggregator import Aggregator
from game_intel.api.models import ErrorResponse, GameIntelResponse, StatusResponse
from game_intel.config import Settings
from game_intel.logging import bind_request_context

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_ROOT_STATUS = "Game Intel backend is running"
_INTERNAL_ERROR = "Internal server error"


def create_app(
    settings: Settings | None = None,
    aggregator: Aggregator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI server app."""
    app_settings = settings or Settings.load()
    game_aggregator = aggregator or Aggregator.from_settings(app_settings)

    app = FastAPI(title="game-intel API", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = app_settings
    app.state.aggregator = game_aggregator

    @app.get("/", response_model=StatusResponse)
    async def root() -> StatusResponse:
        return StatusResponse(status=_ROOT_STATUS)

    @app.get("/health", response_model=StatusResponse)
    async def health() -> StatusResponse:
        return StatusResponse(status="ok")

    # ``:path`` keeps names containing an encoded slash (e.g. "Half-Life 2/Episode One")
    @app.get(
        "/api/game/{name:path}",
        response_model=GameIntelResponse,
        responses={404: {"description": "Empty game name"}, 500: {"model": ErrorResponse}},
    )
    async def game(name: str) -> GameIntelResponse | JSONResponse:
        # Trailing slash is not part of the name; "/api/game/Halo/" means "Halo"
        name = name.removesuffix("/")
        if not name.strip():
            raise HTTPException(status_code=404, detail="Game name is required")

        try:
            with bind_request_context(name):
                logger.info("game_lookup_start")
                payload = await game_aggregator.collect(name)
                return GameIntelResponse.model_validate(payload)
        except Exception:
            logger.exception("game_lookup_failed", game=name)
            return JSONResponse(
                status_code=500,
                content=ErrorResponse(error=_INTERNAL_ERROR).model_dump(),
            )

    return app
