"""Tests for automatic and bonus languages."""

from __future__ import annotations

from typing import Any

import pytest

from dnd_rules.engine.languages import (
    bonus_language_slots,
    is_bonus_language,
    known_languages,
    validate_languages,
)
from dnd_rules.models import Character, ErrorCode, RuleTables


def with_languages(character: Character, *languages: str) -> Character:
    return character.model_copy(update={"languages": list(languages)})


@pytest.fixture
def clever_human(fighter_data: dict[str, Any]) -> Character:
    """A human fighter with Intelligence 12, allowing one bonus language."""
    abilities = {**fighter_data["abilities"], "intelligence": 12}
    return Character.from_snapshot({**fighter_data, "abilities": abilities})


class TestKnownLanguages:
    """Tests for the derived language list."""

    def test_automatic_languages(self, wizard: Character, tables: RuleTables) -> None:
        """Test every elf speaks Common and Elven."""
        assert known_languages(wizard, tables) == ["Common", "Elven"]

    def test_bonus_languages_added(self, wizard: Character, tables: RuleTables) -> None:
        """Test chosen languages join the automatic ones, sorted and unique."""
        character = with_languages(wizard, "Sylvan", "Draconic", "Elven")

        assert known_languages(character, tables) == ["Common", "Draconic", "Elven", "Sylvan"]

    def test_no_race(self, tables: RuleTables) -> None:
        """Test a character without a race knows only what was chosen."""
        assert known_languages(Character(languages=["Orc"]), tables) == ["Orc"]


class TestBonusLanguageRules:
    """Tests for bonus language slots and lists."""

    @pytest.mark.parametrize("intelligence,slots", [(8, 0), (10, 0), (11, 0), (12, 1), (16, 3)])
    def test_slots_follow_intelligence(self, intelligence: int, slots: int) -> None:
        """Test one bonus language per point of Intelligence modifier."""
        character = Character(abilities={"intelligence": intelligence})

        assert bonus_language_slots(character) == slots

    def test_race_lists(self, tables: RuleTables) -> None:
        """Test fixed lists, open lists and secret languages."""
        assert is_bonus_language(tables.race("elf"), "Sylvan")
        assert not is_bonus_language(tables.race("elf"), "Dwarven")
        assert is_bonus_language(tables.race("human"), "Abyssal")
        assert not is_bonus_language(tables.race("human"), "Druidic")


class TestValidateLanguages:
    """Tests for bonus language validation."""

    def test_valid_choices(self, wizard: Character, tables: RuleTables) -> None:
        """Test an Int 16 elf may take three languages from the elf list."""
        character = with_languages(wizard, "Draconic", "Gnoll", "Sylvan")

        assert validate_languages(character, tables).valid

    def test_not_on_race_list(self, wizard: Character, tables: RuleTables) -> None:
        """Test a language outside the race list is out of range."""
        result = validate_languages(with_languages(wizard, "Dwarven"), tables)

        assert [issue.code for issue in result.errors] == [ErrorCode.OUT_OF_RANGE_VALUE]
        issue = result.errors[0]
        assert issue.field == "languages.Dwarven"
        assert "Sylvan" in issue.message
        assert issue.details["allowed"] == ["Draconic", "Gnoll", "Gnome", "Goblin", "Orc", "Sylvan"]

    def test_too_many(self, wizard: Character, tables: RuleTables) -> None:
        """Test the Intelligence modifier caps the number of bonus languages."""
        character = with_languages(wizard, "Draconic", "Gnoll", "Gnome", "Goblin")

        result = validate_languages(character, tables)

        assert [issue.code for issue in result.errors] == [ErrorCode.BUDGET_EXCEEDED]
        assert result.errors[0].details == {"chosen": 4, "allowed": 3}
        assert "+3" in result.errors[0].message

    def test_no_bonus_without_intelligence(
        self, fighter: Character, tables: RuleTables
    ) -> None:
        """Test an Int 10 human has no bonus languages."""
        result = validate_languages(with_languages(fighter, "Elven"), tables)

        assert [issue.code for issue in result.errors] == [ErrorCode.BUDGET_EXCEEDED]

    def test_any_language(self, clever_human: Character, tables: RuleTables) -> None:
        """Test humans pick from any language but secret ones."""
        assert validate_languages(with_languages(clever_human, "Elven"), tables).valid

        result = validate_languages(with_languages(clever_human, "Druidic"), tables)
        assert [issue.code for issue in result.errors] == [ErrorCode.OUT_OF_RANGE_VALUE]
        assert "not secret" in result.errors[0].message

    def test_automatic_language_is_free(self, fighter: Character, tables: RuleTables) -> None:
        """Test listing a racial language uses no bonus slot."""
        assert validate_languages(with_languages(fighter, "Common"), tables).valid

    def test_duplicate(self, wizard: Character, tables: RuleTables) -> None:
        """Test the same language cannot be chosen twice."""
        result = validate_languages(with_languages(wizard, "Draconic", "Draconic"), tables)

        assert [issue.code for issue in result.errors] == [ErrorCode.DUPLICATE_SELECTION]
        assert result.errors[0].field == "languages.Draconic"

    def test_no_race(self, tables: RuleTables) -> None:
        """Test nothing is checked before a race is chosen."""
        assert validate_languages(Character(languages=["Orc", "Orc"]), tables).valid
