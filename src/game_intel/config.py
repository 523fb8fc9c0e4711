"""Configuration with 5-layer resolution: defaults -> YAML -> .env -> env -> CLI.

Uses pydantic-settings with YamlConfigSettingsSource for layered configuration.
Supports ``.env`` file loading, ``GAME_INTEL_`` prefixed env vars, and
nested delimiter ``__`` for overriding sub-model fields. The listening port
is also read from a bare ``PORT`` variable, which is what most hosting
platforms inject.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Literal

from pydantic import AliasChoices, BaseModel, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class ServerSettings(BaseModel):
    """FastAPI server settings."""

    host: str = "0.0.0.0"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class AggregatorSettings(BaseModel):
    """Fan-out behaviour shared by every source."""

    source_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="Upper bound for a single source; exceeding it fails that source only.",
    )


class RedditSettings(BaseModel):
    """Reddit search source configuration."""

    search_url: str = "https://www.reddit.com/search.json"
    link_host: str = "https://reddit.com"
    user_agent: str = "Game-Intel-Extension/1.0"
    timeout: float = Field(default=5.0, gt=0.0, description="Request timeout in seconds.")
    upstream_limit: int = Field(default=20, gt=0, le=100)
    max_results: int = Field(default=10, gt=0)


class YouTubeSettings(BaseModel):
    """YouTube search page configuration."""

    search_url: str = "https://www.youtube.com/results"
    user_agent: str = "Mozilla/5.0"
    timeout: float = Field(default=5.0, gt=0.0, description="Request timeout in seconds.")
    probe_search_page: bool = Field(
        default=False,
        description="Fetch the search page before answering; matches are only logged.",
    )


class LoggingSettings(BaseModel):
    """Logging / observability configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json"] = "console"
    file: Path | None = None


# ---------------------------------------------------------------------------
# Main Settings (5-layer resolution)
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    """Top-level application settings.

    Resolution order (last wins):
        1. Field defaults (defined above)
        2. YAML config file (``config.yaml`` or ``--config`` path)
        3. ``.env`` file in the working directory
        4. Environment variables (prefixed ``GAME_INTEL_``, plus ``PORT``)
        5. CLI overrides (passed to :meth:`load`)
    """

    model_config = SettingsConfigDict(
        env_prefix="GAME_INTEL_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="config.yaml",
        yaml_file_encoding="utf-8",
        extra="ignore",
    )

    _config_path_override: ClassVar[Path | None] = None

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "GAME_INTEL_PORT"),
    )
    server: ServerSettings = Field(default_factory=ServerSettings)
    aggregator: AggregatorSettings = Field(default_factory=AggregatorSettings)
    reddit: RedditSettings = Field(default_factory=RedditSettings)
    youtube: YouTubeSettings = Field(default_factory=YouTubeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise settings source priority.

        Resolution order (first = highest priority):
            init_settings (CLI) > env_settings > dotenv (.env) > yaml > defaults

        Args:
            settings_cls: The settings class.
            init_settings: Init / programmatic overrides.
            env_settings: Environment variable source.
            dotenv_settings: Dotenv file source (.env).
            file_secret_settings: Secret file source (unused).

        Returns:
            Ordered tuple of settings sources (first = highest priority).
        """
        yaml_file = cls._config_path_override or settings_cls.model_config.get(
            "yaml_file", "config.yaml"
        )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
        )

    @classmethod
    def load(cls, config_path: Path | None = None, **overrides: Any) -> Settings:
        """Load settings with optional config path and CLI overrides.

        Args:
            config_path: Optional path to a YAML config file.
            **overrides: Key-value CLI overrides applied at highest priority.

        Returns:
            Fully-resolved Settings instance.

        Raises:
            ValidationError: If any setting value fails validation.
        """
        cls._config_path_override = config_path
        try:
            return cls(**overrides)
        finally:
            cls._config_path_override = None


def format_validation_error(exc: ValidationError) -> str:
    """Format a Pydantic ValidationError into a user-friendly message.

    Args:
        exc: The validation error to format.

    Returns:
        A multi-line string with each error on its own line.
    """
    lines: list[str] = []
    for error in exc.errors():
        loc = " -> ".join(str(part) for part in error["loc"])
        msg = error["msg"]
        raw_input = error.get("input")
        if raw_input is not None:
            lines.append(f"  {loc}: {msg} (got {raw_input!r})")
        else:
            lines.append(f"  {loc}: {msg}")
    return "Configuration error:\n" + "\n".join(lines)
