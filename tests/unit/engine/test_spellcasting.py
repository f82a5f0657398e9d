"""Tests for the spellcasting calculator."""

from __future__ import annotations

import pytest

from dnd_rules.core.exceptions import UnknownRuleIdError
from dnd_rules.engine.spellcasting import (
    bonus_spells,
    calculate_caster_level,
    calculate_caster_levels,
    calculate_character_spells,
    calculate_spell_dc,
    get_spells_per_day,
    is_spellcaster,
)
from dnd_rules.models import CasterProgression, Character, ClassLevel, RuleTables


class TestBonusSpells:
    """Tests for bonus spells from a high casting ability."""

    @pytest.mark.parametrize(
        "modifier,expected",
        [
            (0, {}),
            (-1, {}),
            (1, {1: 1}),
            (3, {1: 1, 2: 1, 3: 1}),
            (5, {1: 2, 2: 1, 3: 1, 4: 1, 5: 1}),
        ],
    )
    def test_bonus_table(self, modifier: int, expected: dict[int, int]) -> None:
        """Test bonus spells follow the ability modifier."""
        assert bonus_spells(modifier) == expected

    def test_never_cantrips(self) -> None:
        """Test spell level 0 gets no bonus spells."""
        assert 0 not in bonus_spells(10)


class TestSpellsPerDay:
    """Tests for daily spell slots."""

    def test_first_level_wizard(self, tables: RuleTables) -> None:
        """Test the table entry with no casting bonus."""
        assert get_spells_per_day("wizard", 1, 0, tables) == {0: 3, 1: 1}

    def test_bonus_added_to_listed_levels(self, tables: RuleTables) -> None:
        """Test bonus spells only reach levels the class can cast."""
        assert get_spells_per_day("wizard", 3, 3, tables) == {0: 4, 1: 3, 2: 2}

    def test_low_score_drops_levels(self, tables: RuleTables) -> None:
        """Test levels above score - 10 are dropped."""
        slots = get_spells_per_day("wizard", 3, 0, tables, ability_score=11)

        assert slots == {0: 4, 1: 2}

    def test_zero_slot_level_gets_bonus(self, tables: RuleTables) -> None:
        """Test a 4th-level paladin with Wis 14 gets one 1st-level spell."""
        assert get_spells_per_day("paladin", 4, 0, tables) == {1: 0}
        assert get_spells_per_day("paladin", 4, 2, tables) == {1: 1}

    def test_half_caster_before_spells(self, tables: RuleTables) -> None:
        """Test a 3rd-level paladin has no slots."""
        assert get_spells_per_day("paladin", 3, 2, tables) == {}

    def test_non_caster(self, tables: RuleTables) -> None:
        """Test classes without spellcasting return nothing."""
        assert get_spells_per_day("fighter", 10, 4, tables) == {}

    def test_beyond_table_uses_last_row(self, tables: RuleTables) -> None:
        """Test levels past 20th reuse the 20th-level row."""
        assert get_spells_per_day("wizard", 25, 0, tables) == get_spells_per_day(
            "wizard", 20, 0, tables
        )

    def test_unknown_class(self, tables: RuleTables) -> None:
        """Test unknown classes abort."""
        with pytest.raises(UnknownRuleIdError):
            get_spells_per_day("psion", 1, 0, tables)


class TestSpellDC:
    """Tests for spell save DCs."""

    @pytest.mark.parametrize(
        "spell_level,modifier,focus,expected",
        [(0, 0, 0, 10), (1, 3, 0, 14), (3, 4, 1, 18), (9, 5, 2, 26)],
    )
    def test_dc(self, spell_level: int, modifier: int, focus: int, expected: int) -> None:
        """Test DC = 10 + spell level + modifier + focus."""
        assert calculate_spell_dc(spell_level, modifier, focus) == expected


class TestCasterLevel:
    """Tests for caster level."""

    @pytest.mark.parametrize(
        "class_level,progression,expected",
        [
            (5, CasterProgression.FULL, 5),
            (3, CasterProgression.HALF, 0),
            (4, CasterProgression.HALF, 2),
            (11, CasterProgression.HALF, 5),
            (10, CasterProgression.NONE, 0),
        ],
    )
    def test_progressions(
        self, class_level: int, progression: CasterProgression, expected: int
    ) -> None:
        """Test full, half and non-casters."""
        assert calculate_caster_level(class_level, progression) == expected

    def test_per_class(self, tables: RuleTables) -> None:
        """Test only casting classes appear."""
        character = Character(classes=[
            ClassLevel(class_id="fighter", level=2),
            ClassLevel(class_id="wizard", level=2),
        ])

        assert calculate_caster_levels(character, tables) == {"wizard": 2}

    def test_is_spellcaster(self, tables: RuleTables) -> None:
        """Test the class lookup."""
        assert is_spellcaster("cleric", tables)
        assert not is_spellcaster("barbarian", tables)


class TestCharacterSpells:
    """Tests for a character's spells and DCs."""

    def test_wizard(self, wizard: Character, tables: RuleTables) -> None:
        """Test an Int 16 wizard gets a bonus 1st-level spell."""
        spells_per_day, spell_dcs = calculate_character_spells(wizard, tables)

        assert spells_per_day == {"wizard": {0: 3, 1: 2}}
        assert spell_dcs == {"wizard": {0: 13, 1: 14}}

    def test_non_caster(self, fighter: Character, tables: RuleTables) -> None:
        """Test a fighter has no spell entries."""
        assert calculate_character_spells(fighter, tables) == ({}, {})
