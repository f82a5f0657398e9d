"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from dnd_rules.core.config import RulesSettings, clear_settings_cache, get_settings
from dnd_rules.core.exceptions import ConfigurationError


class TestRulesSettings:
    """Tests for RulesSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults follow the standard campaign rules."""
        monkeypatch.chdir(tmp_path)

        settings = RulesSettings()

        assert settings.rules_version == "3.5-srd"
        assert settings.point_buy_budget == 28
        assert settings.point_buy_min == 8
        assert settings.point_buy_max == 18
        assert settings.ability_score_min == 1
        assert settings.ability_score_max == 50
        assert settings.max_character_level == 20
        assert settings.log_level == "INFO"
        assert settings.json_logs is False

    def test_env_overrides(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test house rules can be set through the environment."""
        monkeypatch.chdir(tmp_path)

        settings = RulesSettings()

        assert settings.point_buy_budget == 32
        assert settings.max_character_level == 30
        assert settings.log_level == "DEBUG"

    def test_point_buy_bounds_must_be_ordered(self) -> None:
        """Test that point_buy_min may not exceed point_buy_max."""
        with pytest.raises(ConfigurationError) as exc_info:
            RulesSettings(point_buy_min=15, point_buy_max=10)

        assert "point_buy_min" in str(exc_info.value)
        assert exc_info.value.details["config_key"] == "point_buy_min"

    def test_ability_bounds_must_be_ordered(self) -> None:
        """Test that ability_score_min may not exceed ability_score_max."""
        with pytest.raises(ConfigurationError):
            RulesSettings(ability_score_min=30, ability_score_max=20)

    def test_negative_budget_rejected(self) -> None:
        """Test field constraints on the point-buy budget."""
        with pytest.raises(ValidationError):
            RulesSettings(point_buy_budget=-1)


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_returns_settings_instance(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that get_settings returns a RulesSettings instance."""
        monkeypatch.chdir(tmp_path)

        settings = get_settings()

        assert isinstance(settings, RulesSettings)

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_env_wrapped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unparseable environment values surface as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DND_RULES_POINT_BUY_BUDGET", "lots")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "original_error" in exc_info.value.details
