"""Tests for the rule table schemas and the bundled SRD data."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from dnd_rules.core.exceptions import RuleTableError, UnknownRuleIdError
from dnd_rules.models import (
    Ability,
    AbilityAtLeast,
    ArmorRule,
    BABProgression,
    FeatType,
    GearRule,
    HasFeat,
    RuleTables,
    SaveType,
    Size,
    WeaponRule,
)
from dnd_rules.tables import build_rule_tables, get_rule_tables
from dnd_rules.tables.feats import FEATS


class TestBundledTables:
    """Tests for the SRD data shipped with the engine."""

    def test_core_content_present(self, tables: RuleTables) -> None:
        """Test every core race and class is loaded."""
        assert set(tables.races) == {
            "human", "dwarf", "elf", "gnome", "half-elf", "half-orc", "halfling",
        }
        assert len(tables.classes) == 11
        assert tables.version == "3.5-srd"

    def test_tables_cached(self) -> None:
        """Test the loader returns one shared instance."""
        assert get_rule_tables() is get_rule_tables()

    def test_class_skills_resolve(self, tables: RuleTables) -> None:
        """Test every class skill names a skill in the table."""
        for klass in tables.classes.values():
            assert klass.class_skills <= tables.skills.keys()

    def test_fighter_entry(self, tables: RuleTables) -> None:
        """Test a representative class entry."""
        fighter = tables.class_rule("fighter")

        assert fighter.hit_die == 10
        assert fighter.bab is BABProgression.FULL
        assert not fighter.spellcasting
        assert 1 in fighter.bonus_feat_levels

    def test_spell_tables(self, tables: RuleTables) -> None:
        """Test spells-per-day rows keep their 0 entries."""
        assert tables.class_rule("wizard").spells_per_day[1] == {0: 3, 1: 1}
        assert tables.class_rule("paladin").spells_per_day[4] == {1: 0}
        assert 3 not in tables.class_rule("paladin").spells_per_day

    def test_race_traits_queryable(self, tables: RuleTables) -> None:
        """Test special abilities answer trait queries."""
        assert tables.race("dwarf").has_trait("darkvision")
        assert not tables.race("human").has_trait("darkvision")
        assert tables.race("halfling").size is Size.SMALL

    def test_prerequisites_parsed(self, tables: RuleTables) -> None:
        """Test prerequisite data becomes tagged predicates."""
        cleave = tables.feat("Cleave")

        assert cleave.type is FeatType.COMBAT
        assert cleave.prerequisites[0] == AbilityAtLeast(ability="strength", value=13)
        assert cleave.prerequisites[1] == HasFeat(name="Power Attack")

    def test_item_lookup_spans_tables(self, tables: RuleTables) -> None:
        """Test item ids resolve across every equipment table."""
        assert isinstance(tables.item("longsword"), WeaponRule)
        assert isinstance(tables.item("full_plate"), ArmorRule)
        assert isinstance(tables.item("backpack"), GearRule)

    def test_tables_frozen(self, tables: RuleTables) -> None:
        """Test rule entries cannot be modified."""
        with pytest.raises(ValidationError):
            tables.race("elf").base_speed = 40

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda t: t.race("elf").ability_adjustments.__setitem__(Ability.DEX, 99),
            lambda t: t.race("gnome").modifiers.__setitem__("skill:Listen", 9),
            lambda t: t.class_rule("wizard").spells_per_day[1].__setitem__(0, 9),
            lambda t: t.class_rule("fighter").saves.__setitem__(SaveType.WILL, "good"),
            lambda t: t.feat("Toughness").modifiers.__setitem__("hit_points", 30),
            lambda t: t.races.__setitem__("drow", t.race("elf")),
            lambda t: t.weapons.__delitem__("longsword"),
        ],
    )
    def test_mappings_read_only(self, tables: RuleTables, mutate: Any) -> None:
        """Test nested table data cannot be changed in place."""
        with pytest.raises(TypeError):
            mutate(tables)

        assert tables.race("elf").ability_adjustments[Ability.DEX] == 2
        assert "drow" not in tables.races
        assert get_rule_tables().class_rule("wizard").spells_per_day[1] == {0: 3, 1: 1}


class TestLookups:
    """Tests for the lookup helpers."""

    @pytest.mark.parametrize(
        "method,rule_id",
        [
            ("race", "drow"),
            ("class_rule", "psion"),
            ("skill", "Knowledge (cheese)"),
            ("feat", "Flight"),
            ("item", "lightsaber"),
        ],
    )
    def test_unknown_id_raises(self, tables: RuleTables, method: str, rule_id: str) -> None:
        """Test unknown ids raise UnknownRuleIdError."""
        with pytest.raises(UnknownRuleIdError) as exc_info:
            getattr(tables, method)(rule_id)

        assert exc_info.value.rule_id == rule_id
        assert exc_info.value.details["tables_version"] == tables.version


class TestBuildRuleTables:
    """Tests for referential integrity checks in the loader."""

    def test_dangling_feat_prerequisite(self) -> None:
        """Test a HasFeat predicate must name a known feat."""
        feats = {
            **FEATS,
            "Whirlwind Cleave": {
                "type": "combat",
                "prerequisites": [{"kind": "has_feat", "name": "Spin Attack"}],
            },
        }

        with pytest.raises(RuleTableError) as exc_info:
            build_rule_tables(feats=feats)

        assert exc_info.value.details["entry"] == "Whirlwind Cleave"

    def test_unknown_class_skill(self) -> None:
        """Test class skills must exist."""
        classes = {
            "scout": {
                "name": "Scout",
                "hit_die": 8,
                "skill_points_per_level": 8,
                "class_skills": {"Parkour"},
                "bab": "medium",
                "saves": {"fortitude": "poor", "reflex": "good", "will": "poor"},
            },
        }

        with pytest.raises(RuleTableError, match="Parkour"):
            build_rule_tables(classes=classes, races={})

    def test_unknown_modifier_target(self) -> None:
        """Test modifiers must target a known derived value."""
        feats = {**FEATS, "Lucky": {"modifiers": {"luck": 1}}}

        with pytest.raises(RuleTableError, match="luck"):
            build_rule_tables(feats=feats)

    def test_caster_needs_spell_table(self) -> None:
        """Test spellcasting classes must define their casting data."""
        classes = {
            "adept": {
                "name": "Adept",
                "hit_die": 6,
                "skill_points_per_level": 2,
                "bab": "poor",
                "saves": {"fortitude": "poor", "reflex": "poor", "will": "good"},
                "spellcasting": True,
            },
        }

        with pytest.raises(RuleTableError, match="adept"):
            build_rule_tables(classes=classes, races={})

    def test_malformed_entry_wrapped(self) -> None:
        """Test schema violations surface as RuleTableError."""
        classes = {
            "oddball": {
                "name": "Oddball",
                "hit_die": 7,
                "skill_points_per_level": 2,
                "bab": "full",
                "saves": {"fortitude": "good", "reflex": "poor", "will": "poor"},
            },
        }

        with pytest.raises(RuleTableError) as exc_info:
            build_rule_tables(classes=classes, races={})

        assert exc_info.value.details["errors"]

    def test_version_override(self) -> None:
        """Test a house-rule table can carry its own version."""
        assert build_rule_tables(version="house-2024").version == "house-2024"
