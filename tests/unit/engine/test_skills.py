"""Tests for the skill allocator."""

from __future__ import annotations

import pytest

from dnd_rules.core.exceptions import InvalidSelectionError, UnknownRuleIdError
from dnd_rules.engine.combat import classify_encumbrance
from dnd_rules.engine.skills import (
    allocate_rank,
    calculate_skill_total,
    calculate_spent_points,
    is_class_skill,
    max_ranks,
    rank_cost,
)
from dnd_rules.models import (
    Ability,
    CarryingCapacity,
    Character,
    ClassLevel,
    EncumbranceLevel,
    EquippedItem,
    ErrorCode,
    RuleTables,
)


def buy(character: Character, skill: str, times: int, tables: RuleTables) -> Character:
    """Buy ``times`` ranks, failing the test if any purchase is refused."""
    for _ in range(times):
        result = allocate_rank(character, skill, +1, tables)
        assert result.ok, result.error
        character = result.character
    return character


class TestRankRules:
    """Tests for rank ceilings and costs."""

    @pytest.mark.parametrize(
        "level,class_skill,expected",
        [(1, True, 4), (1, False, 2), (5, False, 4), (4, False, 3), (20, True, 23)],
    )
    def test_max_ranks(self, level: int, class_skill: bool, expected: int) -> None:
        """Test class and cross-class rank ceilings."""
        assert max_ranks(level, class_skill) == expected

    def test_rank_cost(self) -> None:
        """Test cross-class ranks cost double."""
        assert rank_cost(True) == 1
        assert rank_cost(False) == 2

    def test_class_skill_from_primary_class(self, fighter: Character, tables: RuleTables) -> None:
        """Test class skills come from the class taken at 1st level."""
        assert is_class_skill(fighter, "Climb", tables)
        assert not is_class_skill(fighter, "Hide", tables)
        assert not is_class_skill(Character(), "Climb", tables)


class TestAllocateRank:
    """Tests for buying and refunding ranks."""

    def test_buy_class_skill(self, fighter: Character, tables: RuleTables) -> None:
        """Test a successful purchase updates ranks and budget together."""
        result = allocate_rank(fighter, "Climb", +1, tables)

        assert result.ok
        updated = result.character
        assert updated.skills["Climb"].ranks == 1
        assert updated.skills["Climb"].is_class_skill
        assert updated.derived.skill_points.spent == 1
        assert updated.derived.skill_points.available == 11

    def test_input_unchanged(self, fighter: Character, tables: RuleTables) -> None:
        """Test the original character is not modified."""
        allocate_rank(fighter, "Climb", +1, tables)

        assert fighter.skills == {}
        assert fighter.derived.skill_points.spent == 0

    def test_class_skill_ceiling(self, fighter: Character, tables: RuleTables) -> None:
        """Test a 1st-level class skill stops at 4 ranks."""
        character = buy(fighter, "Climb", 4, tables)

        result = allocate_rank(character, "Climb", +1, tables)

        assert not result.ok
        assert result.error.code is ErrorCode.RANK_CEILING_EXCEEDED
        assert result.error.details["maximum"] == 4
        assert result.character is character

    def test_cross_class_costs_double(self, fighter: Character, tables: RuleTables) -> None:
        """Test cross-class ranks cost two points and cap at 2."""
        character = buy(fighter, "Hide", 2, tables)

        assert character.derived.skill_points.spent == 4
        assert not character.skills["Hide"].is_class_skill
        result = allocate_rank(character, "Hide", +1, tables)
        assert result.error.code is ErrorCode.RANK_CEILING_EXCEEDED

    def test_budget_exhausted(self, fighter: Character, tables: RuleTables) -> None:
        """Test a purchase beyond the budget is refused."""
        character = buy(fighter, "Climb", 4, tables)
        character = buy(character, "Jump", 4, tables)
        character = buy(character, "Swim", 4, tables)

        result = allocate_rank(character, "Ride", +1, tables)

        assert result.error.code is ErrorCode.BUDGET_EXCEEDED
        assert result.error.details == {"cost": 1, "available": 0}

    def test_ceiling_checked_before_budget(self, fighter: Character, tables: RuleTables) -> None:
        """Test a capped skill reports the ceiling even with no points left."""
        character = buy(fighter, "Climb", 4, tables)
        character = buy(character, "Jump", 4, tables)
        character = buy(character, "Swim", 4, tables)

        result = allocate_rank(character, "Climb", +1, tables)

        assert result.error.code is ErrorCode.RANK_CEILING_EXCEEDED

    def test_refund(self, fighter: Character, tables: RuleTables) -> None:
        """Test refunding the last rank removes the skill entry."""
        character = buy(fighter, "Hide", 1, tables)

        result = allocate_rank(character, "Hide", -1, tables)

        assert result.ok
        assert "Hide" not in result.character.skills
        assert result.character.derived.skill_points.spent == 0

    def test_refund_below_zero(self, fighter: Character, tables: RuleTables) -> None:
        """Test ranks cannot go negative."""
        result = allocate_rank(fighter, "Climb", -1, tables)

        assert result.error.code is ErrorCode.OUT_OF_RANGE_VALUE

    def test_requires_class(self, tables: RuleTables) -> None:
        """Test a character without a class cannot buy ranks."""
        result = allocate_rank(Character(race_id="human"), "Climb", +1, tables)

        assert result.error.code is ErrorCode.MISSING_SELECTION

    @pytest.mark.parametrize("delta", [0, 2, -3])
    def test_invalid_delta(self, fighter: Character, tables: RuleTables, delta: int) -> None:
        """Test deltas other than one rank are programming errors."""
        with pytest.raises(InvalidSelectionError):
            allocate_rank(fighter, "Climb", delta, tables)

    def test_unknown_skill(self, fighter: Character, tables: RuleTables) -> None:
        """Test an unknown skill name aborts."""
        with pytest.raises(UnknownRuleIdError):
            allocate_rank(fighter, "Basket Weaving", +1, tables)

    def test_class_skill_status_fixed(self, fighter: Character, tables: RuleTables) -> None:
        """Test ranks keep the status they were bought with after multiclassing."""
        character = buy(fighter, "Hide", 1, tables)
        character = character.model_copy(deep=True)
        character.classes.append(ClassLevel(class_id="rogue", level=1))

        updated = buy(character, "Hide", 1, tables)

        assert not updated.skills["Hide"].is_class_skill
        assert calculate_spent_points(updated) == 4


class TestSkillTotals:
    """Tests for skill check modifiers."""

    def test_ranks_plus_ability(self, fighter: Character, tables: RuleTables) -> None:
        """Test ranks and key ability modifier add up."""
        character = buy(fighter, "Climb", 2, tables)

        total = calculate_skill_total(character, "Climb", tables)

        assert total.ranks == 2
        assert total.ability_modifier == character.ability_modifier(Ability.STR)
        assert total.total == 5

    def test_trained_only_without_ranks(self, fighter: Character, tables: RuleTables) -> None:
        """Test an untrained trained-only skill totals 0 and is unusable."""
        total = calculate_skill_total(fighter, "Disable Device", tables)

        assert not total.usable
        assert total.total == 0

    def test_racial_bonus(self, wizard: Character, tables: RuleTables) -> None:
        """Test elves get +2 on Listen."""
        total = calculate_skill_total(wizard, "Listen", tables)

        assert total.misc == 2
        assert total.total == 3

    def test_armor_check_penalty(self, fighter: Character, tables: RuleTables) -> None:
        """Test armor penalizes flagged skills only."""
        character = fighter.model_copy(update={"equipment": [EquippedItem(item_id="chainmail")]})

        assert calculate_skill_total(character, "Climb", tables).armor_check_penalty == -5
        assert calculate_skill_total(character, "Listen", tables).armor_check_penalty == 0

    def test_load_penalty_when_worse(self, fighter: Character, tables: RuleTables) -> None:
        """Test a medium load penalty replaces a smaller armor penalty."""
        character = fighter.model_copy(update={"equipment": [EquippedItem(item_id="leather")]})
        capacity = CarryingCapacity(light=10, medium=100, heavy=200)
        encumbrance = classify_encumbrance(50, capacity)

        total = calculate_skill_total(character, "Climb", tables, encumbrance)

        assert encumbrance.level is EncumbranceLevel.MEDIUM
        assert total.armor_check_penalty == -3

    def test_overloaded_cannot_attempt(self, fighter: Character, tables: RuleTables) -> None:
        """Test an overloaded character cannot use penalized skills."""
        capacity = CarryingCapacity(light=10, medium=20, heavy=30)
        encumbrance = classify_encumbrance(31, capacity)

        assert not calculate_skill_total(fighter, "Swim", tables, encumbrance).usable
        assert calculate_skill_total(fighter, "Listen", tables, encumbrance).usable
