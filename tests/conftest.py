"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the D&D 3.5 rules engine test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from dnd_rules.engine.validator import CharacterValidator
from dnd_rules.models.character import Character
from dnd_rules.models.rules import RuleTables
from dnd_rules.tables import get_rule_tables


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_caches() -> Generator[None, None, None]:
    """Reset the settings and rule table caches before and after each test."""
    from dnd_rules.core.config import clear_settings_cache
    from dnd_rules.tables import clear_rule_tables_cache

    clear_settings_cache()
    clear_rule_tables_cache()
    yield
    clear_settings_cache()
    clear_rule_tables_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up house-rule environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_RULES_POINT_BUY_BUDGET": "32",
        "DND_RULES_MAX_CHARACTER_LEVEL": "30",
        "DND_RULES_LOG_LEVEL": "DEBUG",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Rule Table Fixtures
# =============================================================================


@pytest.fixture
def tables() -> RuleTables:
    """Provide the bundled SRD rule tables."""
    return get_rule_tables()


@pytest.fixture
def validator(tables: RuleTables) -> CharacterValidator:
    """Provide a validator bound to the bundled tables."""
    return CharacterValidator(tables)


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def sample_abilities() -> dict[str, int]:
    """Provide base scores that spend exactly 28 point-buy points.

    Returns:
        Dictionary of base ability scores.
    """
    return {
        "strength": 16,
        "dexterity": 14,
        "constitution": 14,
        "intelligence": 10,
        "wisdom": 12,
        "charisma": 8,
    }


@pytest.fixture
def fighter_data(sample_abilities: dict[str, int]) -> dict[str, Any]:
    """Provide a snapshot of a 1st-level human fighter.

    Returns:
        Raw character data as the storage collaborator would supply it.
    """
    return {
        "name": "Aldric",
        "abilities": sample_abilities,
        "race_id": "human",
        "alignment": "lawful_neutral",
        "classes": [{"class_id": "fighter", "level": 1}],
    }


@pytest.fixture
def fighter(fighter_data: dict[str, Any]) -> Character:
    """Provide a 1st-level human fighter with no skills, feats or gear."""
    return Character.from_snapshot(fighter_data)


@pytest.fixture
def wizard(tables: RuleTables) -> Character:
    """Provide a 1st-level elf wizard with racial adjustments applied."""
    from dnd_rules.engine.abilities import apply_racial_adjustments

    character = Character(
        name="Elowen",
        abilities={
            "strength": 8,
            "dexterity": 14,
            "constitution": 14,
            "intelligence": 16,
            "wisdom": 12,
            "charisma": 10,
        },
        alignment="chaotic_good",
        classes=[{"class_id": "wizard", "level": 1}],
    )
    return apply_racial_adjustments(character, "elf", tables)
