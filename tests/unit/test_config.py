"""Unit tests for game_intel.config - Settings loading and validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

if TYPE_CHECKING:
    from pathlib import Path

from game_intel.config import (
    AggregatorSettings,
    LoggingSettings,
    RedditSettings,
    ServerSettings,
    Settings,
    YouTubeSettings,
    format_validation_error,
)


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's env vars and config files out of the tests."""
    monkeypatch.chdir(tmp_path)
    for var in ("PORT", "GAME_INTEL_PORT", "GAME_INTEL_REDDIT__TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


# ---- Sub-model defaults ------------------------------------------------------


class TestRedditSettings:
    def test_default_values(self) -> None:
        s = RedditSettings()
        assert s.search_url == "https://www.reddit.com/search.json"
        assert s.link_host == "https://reddit.com"
        assert s.user_agent == "Game-Intel-Extension/1.0"
        assert s.timeout == 5.0
        assert s.upstream_limit == 20
        assert s.max_results == 10

    def test_zero_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RedditSettings(timeout=0)

    def test_upstream_limit_bounded(self) -> None:
        with pytest.raises(ValidationError):
            RedditSettings(upstream_limit=500)


class TestYouTubeSettings:
    def test_probe_disabled_by_default(self) -> None:
        s = YouTubeSettings()
        assert s.probe_search_page is False
        assert s.timeout == 5.0


class TestAggregatorSettings:
    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AggregatorSettings(source_timeout_seconds=-1)


class TestServerSettings:
    def test_defaults_allow_any_origin(self) -> None:
        s = ServerSettings()
        assert s.host == "0.0.0.0"
        assert s.cors_origins == ["*"]


class TestLoggingSettings:
    def test_defaults(self) -> None:
        s = LoggingSettings()
        assert s.level == "INFO"
        assert s.format == "console"
        assert s.file is None

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")  # type: ignore[arg-type]


# ---- Port resolution ---------------------------------------------------------


class TestPort:
    def test_defaults_to_3000(self) -> None:
        assert Settings().port == 3000

    def test_bare_port_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_prefixed_port_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GAME_INTEL_PORT", "9090")
        assert Settings().port == 9090

    def test_out_of_range_port_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(ValidationError):
            Settings()

    def test_non_numeric_port_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "http")
        with pytest.raises(ValidationError):
            Settings()


# ---- Layered loading ---------------------------------------------------------


class TestSettings:
    def test_nested_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GAME_INTEL_REDDIT__TIMEOUT", "2.5")
        assert Settings().reddit.timeout == 2.5

    def test_load_with_overrides(self) -> None:
        s = Settings.load(logging={"level": "DEBUG"})
        assert s.logging.level == "DEBUG"

    def test_yaml_values_override_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "custom.yaml"
        yaml_file.write_text(
            "aggregator:\n  source_timeout_seconds: 3\n"
            "youtube:\n  probe_search_page: true\n"
        )
        s = Settings.load(config_path=yaml_file)
        assert s.aggregator.source_timeout_seconds == 3.0
        assert s.youtube.probe_search_page is True
        assert s.reddit.max_results == 10

    def test_env_overrides_yaml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        yaml_file = tmp_path / "custom.yaml"
        yaml_file.write_text("reddit:\n  timeout: 1\n")
        monkeypatch.setenv("GAME_INTEL_REDDIT__TIMEOUT", "4")
        assert Settings.load(config_path=yaml_file).reddit.timeout == 4.0

    def test_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        s = Settings.load(config_path=tmp_path / "nonexistent.yaml")
        assert s.port == 3000

    def test_dotenv_file_loaded(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("PORT=4321\n")
        assert Settings().port == 4321

    def test_dotenv_overrides_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "custom.yaml"
        yaml_file.write_text("reddit:\n  timeout: 1\n")
        (tmp_path / ".env").write_text("GAME_INTEL_REDDIT__TIMEOUT=4\n")
        assert Settings.load(config_path=yaml_file).reddit.timeout == 4.0


# ---- format_validation_error --------------------------------------------------


def test_format_validation_error_lists_location() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RedditSettings(timeout=-1)
    message = format_validation_error(exc_info.value)
    assert message.startswith("Configuration error:")
    assert "timeout" in message
    assert "(got -1)" in message
