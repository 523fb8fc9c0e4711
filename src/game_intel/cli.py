"""Typer CLI entry point for game-intel."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated, Any

import structlog
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from game_intel import __version__
from game_intel.aggregator import Aggregator
from game_intel.api.models import GameIntelResponse
from game_intel.api.server import run_server
from game_intel.config import Settings, format_validation_error
from game_intel.logging import bind_request_context, configure_logging

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="game-intel",
    help="Merge Reddit, YouTube, Twitch and review data for a game.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_settings(
    config_path: Path | None = None,
    **overrides: Any,
) -> Settings:
    """Load settings with error handling and user-friendly messages."""
    from pydantic import ValidationError

    try:
        return Settings.load(config_path=config_path, **overrides)
    except ValidationError as exc:
        err_console.print(
            Panel(
                format_validation_error(exc),
                title="Configuration Error",
                border_style="red",
            )
        )
        raise typer.Exit(code=1) from exc


def _configure_logging(settings: Settings) -> None:
    configure_logging(
        level=settings.logging.level,
        fmt=settings.logging.format,
        log_file=settings.logging.file,
    )


def _display_response(name: str, response: GameIntelResponse) -> None:
    """Render one table per source."""
    ratings = Table(title=f"Ratings for {name}")
    ratings.add_column("Provider", style="cyan")
    ratings.add_column("Score")
    for provider, score in response.ratings.items():
        ratings.add_row(provider, score)
    console.print(ratings)

    reddit = Table(title="Reddit")
    reddit.add_column("Subreddit", style="cyan")
    reddit.add_column("Title")
    reddit.add_column("Upvotes", justify="right")
    reddit.add_column("Comments", justify="right")
    for post in response.reddit:
        reddit.add_row(
            post.subreddit, post.title, str(post.upvotes), str(post.comments)
        )
    console.print(reddit)

    youtube = Table(title="YouTube")
    youtube.add_column("Video", style="cyan")
    youtube.add_column("Title")
    youtube.add_column("Views", justify="right")
    youtube.add_column("Rating", justify="right")
    for video in response.youtube:
        youtube.add_row(video.id, video.title, video.views, video.rating)
    console.print(youtube)

    twitch = Table(title="Twitch")
    twitch.add_column("Broadcaster", style="cyan")
    twitch.add_column("Title")
    twitch.add_column("Viewers", justify="right")
    for stream in response.twitch:
        twitch.add_row(stream.broadcaster, stream.title, stream.viewers)
    console.print(twitch)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]game-intel[/bold] {__version__}")
        raise typer.Exit


@app.callback()
def common(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """game-intel global options."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def serve(
    port: Annotated[
        int | None,
        typer.Option("--port", help="Port to bind; defaults to $PORT or 3000."),
    ] = None,
    host: Annotated[
        str | None,
        typer.Option("--host", help="Host/interface to bind the FastAPI server."),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to config YAML file."),
    ] = None,
) -> None:
    """Run the game-intel FastAPI server."""
    overrides: dict[str, Any] = {}
    if port is not None:
        overrides["PORT"] = port
    if host is not None:
        overrides["server"] = {"host": host}
    settings = _load_settings(config, **overrides)
    _configure_logging(settings)
    logger.info("server_starting", host=settings.server.host, port=settings.port)
    run_server(settings)


@app.command()
def lookup(
    name: Annotated[str, typer.Argument(help="Game name to look up.")],
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to config YAML file."),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the raw JSON response."),
    ] = False,
) -> None:
    """Run one aggregation from the terminal."""
    settings = _load_settings(config)
    _configure_logging(settings)
    aggregator = Aggregator.from_settings(settings)

    with bind_request_context(name):
        payload = asyncio.run(aggregator.collect(name))
    response = GameIntelResponse.model_validate(payload)

    if as_json:
        console.print_json(response.model_dump_json())
    else:
        _display_response(name, response)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
