"""Configuration management for the D&D 3.5 rules engine.

Settings are loaded with pydantic-settings from environment variables and an
optional ``.env`` file. They cover the few house-rule knobs a table may want
to change (point-buy budget, ability bounds, level cap) plus logging.

Example:
    >>> from dnd_rules.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.point_buy_budget
    28

Environment Variables:
    DND_RULES_POINT_BUY_BUDGET: Points available for point-buy generation.
    DND_RULES_ABILITY_SCORE_MAX: Absolute upper bound for ability totals.
    DND_RULES_MAX_CHARACTER_LEVEL: Highest character level accepted.
    DND_RULES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_rules.core.constants import (
    ABSOLUTE_MAX_ABILITY_SCORE,
    ABSOLUTE_MIN_ABILITY_SCORE,
    MAX_CHARACTER_LEVEL,
    POINT_BUY_BUDGET,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
)
from dnd_rules.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Engine settings.

    Attributes:
        rules_version: Identifier of the rule set the tables implement.
        point_buy_budget: Points available under point-buy generation.
        point_buy_min: Lowest purchasable base score.
        point_buy_max: Highest purchasable base score.
        ability_score_min: Absolute lower bound for any ability total.
        ability_score_max: Absolute upper bound for any ability total.
        max_character_level: Highest total character level accepted.
        log_level: Application logging level.
        json_logs: Emit JSON log lines instead of console output.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rules_version: str = Field(
        default="3.5-srd",
        description="Rule set implemented by the loaded tables",
    )
    point_buy_budget: int = Field(
        default=POINT_BUY_BUDGET,
        ge=0,
        le=200,
        description="Points available for point-buy generation",
    )
    point_buy_min: int = Field(
        default=POINT_BUY_MIN,
        ge=1,
        description="Lowest purchasable base score",
    )
    point_buy_max: int = Field(
        default=POINT_BUY_MAX,
        ge=1,
        description="Highest purchasable base score",
    )
    ability_score_min: int = Field(
        default=ABSOLUTE_MIN_ABILITY_SCORE,
        description="Absolute lower bound for ability totals",
    )
    ability_score_max: int = Field(
        default=ABSOLUTE_MAX_ABILITY_SCORE,
        description="Absolute upper bound for ability totals",
    )
    max_character_level: int = Field(
        default=MAX_CHARACTER_LEVEL,
        ge=1,
        le=60,
        description="Highest total character level accepted",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    @model_validator(mode="after")
    def validate_bounds(self) -> "RulesSettings":
        """Ensure every min/max pair is ordered.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If a lower bound exceeds its upper bound.
        """
        if self.point_buy_min > self.point_buy_max:
            raise ConfigurationError(
                f"point_buy_min ({self.point_buy_min}) must not exceed "
                f"point_buy_max ({self.point_buy_max})",
                config_key="point_buy_min",
            )
        if self.ability_score_min > self.ability_score_max:
            raise ConfigurationError(
                f"ability_score_min ({self.ability_score_min}) must not exceed "
                f"ability_score_max ({self.ability_score_max})",
                config_key="ability_score_min",
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> RulesSettings:
    """Get the engine settings singleton.

    Returns:
        The cached RulesSettings instance.

    Raises:
        ConfigurationError: If the configuration cannot be loaded.
    """
    try:
        return RulesSettings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
]
