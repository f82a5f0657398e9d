"""Tests for the character validator."""

from __future__ import annotations

from typing import Any

import pytest

from dnd_rules.core.config import RulesSettings
from dnd_rules.core.exceptions import UnknownRuleIdError
from dnd_rules.engine.validator import CharacterValidator, validate_character
from dnd_rules.models import (
    Alignment,
    Character,
    CharacterSkillState,
    ClassLevel,
    DerivedStats,
    EncumbranceLevel,
    EquippedItem,
    ErrorCode,
    RuleTables,
    SaveType,
    Severity,
    WarningCode,
)


def codes(issues: list[Any]) -> list[Any]:
    return [issue.code for issue in issues]


class TestDerive:
    """Tests for derived value calculation."""

    def test_fighter_block(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test the full derived block for a 1st-level human fighter."""
        derived = validator.derive_stats(fighter)

        assert derived.level == 1
        assert derived.base_attack_bonus == 1
        assert derived.iterative_attacks == [1]
        assert derived.saves[SaveType.FORTITUDE].total == 4
        assert derived.saves[SaveType.REFLEX].total == 2
        assert derived.saves[SaveType.WILL].total == 1
        assert derived.hit_points.maximum == 12
        assert derived.hit_points.current == 12
        assert derived.armor_class.total == 12
        assert derived.initiative == 2
        assert derived.speed == 30
        assert derived.skill_points.total == 12
        assert derived.feat_slots.total == 3
        assert derived.caster_levels == {}
        assert derived.carrying_capacity.heavy == 230
        assert derived.encumbrance.level is EncumbranceLevel.LIGHT

    def test_derive_returns_copy(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test derive leaves the input's derived block alone."""
        derived = validator.derive(fighter)

        assert derived.derived.base_attack_bonus == 1
        assert fighter.derived == DerivedStats()

    def test_idempotent(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test derivation and validation are repeatable."""
        once = validator.derive(fighter)

        assert validator.derive(once) == once
        assert (
            validator.validate(fighter).model_dump_json()
            == validator.validate(fighter).model_dump_json()
        )

    def test_feat_modifiers(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test Toughness and Improved Initiative reach the derived block."""
        character = fighter.model_copy(update={"feats": ["Toughness", "Improved Initiative"]})

        derived = validator.derive_stats(character)

        assert derived.hit_points.maximum == 15
        assert derived.initiative == 6

    def test_damage_taken(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test current hit points subtract damage."""
        character = fighter.model_copy(update={"damage_taken": 5})

        assert validator.derive_stats(character).hit_points.current == 7

    def test_spellcaster(self, validator: CharacterValidator, wizard: Character) -> None:
        """Test spell slots and DCs for an Int 16 wizard."""
        derived = validator.derive_stats(wizard)

        assert derived.caster_levels == {"wizard": 1}
        assert derived.spells_per_day == {"wizard": {0: 3, 1: 2}}
        assert derived.spell_save_dcs["wizard"][1] == 14

    def test_trained_only_skill(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test untrained trained-only skills show as unusable."""
        skills = validator.derive_stats(fighter).skills

        assert not skills["Disable Device"].usable
        assert skills["Climb"].total == 3

    @pytest.mark.parametrize(
        "race_id,armor_id,speed",
        [
            ("human", "chain_shirt", 30),
            ("human", "chainmail", 20),
            ("dwarf", "chainmail", 20),
            ("halfling", "chainmail", 15),
        ],
    )
    def test_armor_speed(
        self,
        validator: CharacterValidator,
        fighter: Character,
        race_id: str,
        armor_id: str,
        speed: int,
    ) -> None:
        """Test medium armor slows everyone except dwarves."""
        character = fighter.model_copy(update={
            "race_id": race_id,
            "equipment": [EquippedItem(item_id=armor_id)],
        })

        assert validator.derive_stats(character).speed == speed

    def test_load(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test a medium load slows and caps Dexterity."""
        character = fighter.model_copy(update={"equipment": [
            EquippedItem(item_id="full_plate"),
            EquippedItem(item_id="tent", equipped=False),
            EquippedItem(item_id="rope_hemp", equipped=False),
        ]})

        derived = validator.derive_stats(character)

        assert derived.carried_weight == 80
        assert derived.encumbrance.level is EncumbranceLevel.MEDIUM
        assert derived.speed == 20
        assert derived.armor_class.dexterity == 1

    def test_unknown_ids_abort(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test unknown ids raise instead of being reported."""
        for update in (
            {"race_id": "drow"},
            {"feats": ["Flight"]},
            {"equipment": [EquippedItem(item_id="lightsaber")]},
            {"classes": [ClassLevel(class_id="psion")]},
        ):
            with pytest.raises(UnknownRuleIdError):
                validator.validate(fighter.model_copy(update=update))


class TestValidateErrors:
    """Tests for blocking errors."""

    def test_valid_fighter(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test the sample fighter has no errors."""
        report = validator.validate(fighter)

        assert report.valid
        assert report.errors == []
        assert report.derived.base_attack_bonus == 1

    def test_empty_character(self, validator: CharacterValidator) -> None:
        """Test a blank character is missing name, race and class."""
        report = validator.validate(Character())

        assert not report.valid
        assert [(issue.code, issue.field) for issue in report.errors] == [
            (ErrorCode.MISSING_SELECTION, "name"),
            (ErrorCode.MISSING_SELECTION, "race_id"),
            (ErrorCode.MISSING_SELECTION, "classes"),
        ]

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, validator: CharacterValidator, fighter: Character, name: str) -> None:
        """Test a character must be named."""
        report = validator.validate(fighter.model_copy(update={"name": name}))

        assert [(issue.code, issue.field) for issue in report.errors] == [
            (ErrorCode.MISSING_SELECTION, "name"),
        ]

    def test_bonus_languages(self, validator: CharacterValidator, wizard: Character) -> None:
        """Test languages are derived and bonus choices are checked."""
        character = wizard.model_copy(update={"languages": ["Sylvan", "Dwarven"]})

        report = validator.validate(character)

        assert codes(report.errors) == [ErrorCode.OUT_OF_RANGE_VALUE]
        assert report.errors[0].field == "languages.Dwarven"
        assert report.derived.languages == ["Common", "Dwarven", "Elven", "Sylvan"]

    def test_point_buy_overspend(
        self, validator: CharacterValidator, fighter_data: dict[str, Any]
    ) -> None:
        """Test ability overspend is reported by the validator."""
        abilities = {ability: 14 for ability in fighter_data["abilities"]}
        character = Character.from_snapshot({**fighter_data, "abilities": abilities})

        report = validator.validate(character)

        assert codes(report.errors) == [ErrorCode.BUDGET_EXCEEDED]
        assert "36" in report.errors[0].message

    @pytest.mark.parametrize(
        "alignment,code",
        [
            (Alignment.LAWFUL_NEUTRAL, ErrorCode.ALIGNMENT_RESTRICTION),
            (None, ErrorCode.MISSING_SELECTION),
        ],
    )
    def test_alignment_restriction(
        self,
        validator: CharacterValidator,
        fighter: Character,
        alignment: Alignment | None,
        code: ErrorCode,
    ) -> None:
        """Test paladins must be lawful good."""
        character = fighter.model_copy(update={
            "classes": [ClassLevel(class_id="paladin")],
            "alignment": alignment,
        })

        report = validator.validate(character)

        assert codes(report.errors) == [code]
        assert report.errors[0].field == "alignment"

    def test_lawful_good_paladin(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test the allowed alignment passes."""
        character = fighter.model_copy(update={
            "classes": [ClassLevel(class_id="paladin")],
            "alignment": Alignment.LAWFUL_GOOD,
        })

        assert validator.validate(character).valid

    def test_level_cap(self, tables: RuleTables, fighter: Character) -> None:
        """Test the configured level cap."""
        validator = CharacterValidator(tables, RulesSettings(max_character_level=5))
        character = fighter.model_copy(update={"classes": [ClassLevel(class_id="fighter", level=6)]})

        report = validator.validate(character)

        assert ErrorCode.OUT_OF_RANGE_VALUE in codes(report.errors)

    def test_impossible_hit_die_roll(
        self, validator: CharacterValidator, fighter: Character
    ) -> None:
        """Test a roll of 11 on a d10 is reported and averaged away."""
        character = fighter.model_copy(update={
            "classes": [ClassLevel(class_id="fighter", level=2, hit_die_rolls=[11])],
        })

        report = validator.validate(character)

        issue = report.errors[0]
        assert issue.code is ErrorCode.OUT_OF_RANGE_VALUE
        assert issue.field == "classes.0.hit_die_rolls"
        assert report.derived.hit_points.maximum == 20

    def test_skill_errors(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test overspent budgets and rank ceilings."""
        character = fighter.model_copy(update={"skills": {
            "Climb": CharacterSkillState(ranks=5, is_class_skill=True),
            "Jump": CharacterSkillState(ranks=4, is_class_skill=True),
            "Hide": CharacterSkillState(ranks=2, is_class_skill=False),
        }})

        report = validator.validate(character)

        assert codes(report.errors) == [
            ErrorCode.BUDGET_EXCEEDED,
            ErrorCode.RANK_CEILING_EXCEEDED,
        ]
        assert report.errors[1].field == "skills.Climb"
        assert report.derived.skill_points.spent == 13

    def test_feat_prerequisite(
        self, validator: CharacterValidator, fighter_data: dict[str, Any]
    ) -> None:
        """Test a feat whose prerequisites are unmet is flagged."""
        abilities = {**fighter_data["abilities"], "strength": 12, "dexterity": 16}
        character = Character.from_snapshot({
            **fighter_data,
            "abilities": abilities,
            "feats": ["Power Attack"],
        })

        report = validator.validate(character)

        assert codes(report.errors) == [ErrorCode.PREREQUISITE_NOT_MET]
        assert report.errors[0].message == "Power Attack requires Strength 13 (current: 12)"

    def test_removed_dependency(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test Cleave without Power Attack is flagged."""
        character = fighter.model_copy(update={"feats": ["Cleave"]})

        report = validator.validate(character)

        assert report.errors[0].message == "Cleave requires the Power Attack feat"

    def test_feat_slots(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test too many feats and duplicates."""
        character = fighter.model_copy(update={
            "feats": ["Alertness", "Toughness", "Endurance", "Alertness"],
        })

        report = validator.validate(character)

        assert codes(report.errors) == [
            ErrorCode.DUPLICATE_SELECTION,
            ErrorCode.NO_FEAT_SLOTS_AVAILABLE,
        ]

    def test_two_suits_of_armor(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test only one armor can be worn."""
        character = fighter.model_copy(update={"equipment": [
            EquippedItem(item_id="chain_shirt"),
            EquippedItem(item_id="chainmail"),
        ]})

        report = validator.validate(character)

        assert codes(report.errors) == [ErrorCode.DUPLICATE_SELECTION]
        assert report.errors[0].details["items"] == ["chain_shirt", "chainmail"]


class TestValidateWarnings:
    """Tests for advisory warnings."""

    def test_unspent_resources(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test unspent skill points and unused feat slots."""
        report = validator.validate(fighter)

        assert codes(report.warnings) == [
            WarningCode.UNSPENT_SKILL_POINTS,
            WarningCode.UNUSED_FEAT_SLOTS,
        ]
        assert report.warnings[0].details["available"] == 12
        assert all(issue.severity is Severity.WARNING for issue in report.warnings)

    def test_encumbered(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test a medium load warns but does not block."""
        character = fighter.model_copy(update={"equipment": [
            EquippedItem(item_id="full_plate"),
            EquippedItem(item_id="tent", equipped=False),
            EquippedItem(item_id="rope_hemp", equipped=False),
        ]})

        report = validator.validate(character)

        assert report.valid
        assert WarningCode.ENCUMBERED in report.codes()

    def test_nonproficient(self, validator: CharacterValidator) -> None:
        """Test nonproficient weapons and armor warn."""
        character = Character(
            race_id="human",
            classes=[ClassLevel(class_id="wizard")],
            equipment=[EquippedItem(item_id="longsword"), EquippedItem(item_id="chain_shirt")],
        )

        report = validator.validate(character)

        assert {WarningCode.NONPROFICIENT_WEAPON, WarningCode.NONPROFICIENT_ARMOR} <= report.codes()
        assert report.derived.attacks[0].proficient is False

    def test_insufficient_experience(
        self, validator: CharacterValidator, fighter: Character
    ) -> None:
        """Test a level above the character's XP warns."""
        character = fighter.model_copy(update={
            "classes": [ClassLevel(class_id="fighter", level=3)],
            "experience_points": 1000,
        })

        report = validator.validate(character)

        assert WarningCode.INSUFFICIENT_EXPERIENCE in report.codes()
        assert report.valid

    def test_multiclass_penalty(self, validator: CharacterValidator, wizard: Character) -> None:
        """Test uneven multiclassing warns."""
        character = wizard.model_copy(update={"classes": [
            ClassLevel(class_id="fighter", level=4),
            ClassLevel(class_id="rogue", level=2),
            ClassLevel(class_id="wizard", level=1),
        ]})

        report = validator.validate(character)

        warning = next(w for w in report.warnings if w.code is WarningCode.MULTICLASS_XP_PENALTY)
        assert warning.details["penalty"] == 0.2


class TestPurity:
    """Tests that validation never mutates its input."""

    def test_input_unchanged(self, validator: CharacterValidator, fighter: Character) -> None:
        """Test the character is identical after validation."""
        before = fighter.model_dump()

        validator.validate(fighter)
        validator.derive(fighter)

        assert fighter.model_dump() == before

    def test_module_function(self, tables: RuleTables, fighter: Character) -> None:
        """Test the one-off helper matches the validator."""
        assert validate_character(fighter, tables) == CharacterValidator(tables).validate(fighter)
