"""game-intel: Multi-source game intelligence aggregator."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("game-intel")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = ["__version__"]
