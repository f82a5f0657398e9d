"""Skill Allocator.

Buys and refunds skill ranks one at a time. Each allocation is all or
nothing: either the rank and the skill point budget change together on a new
Character, or the input comes back untouched with the reason it was refused.

Class skill status comes from the class taken at 1st level and is fixed on a
skill when its first rank is bought.
"""

from __future__ import annotations

from dnd_rules.core.constants import CLASS_SKILL_RANK_COST, CROSS_CLASS_RANK_COST
from dnd_rules.core.exceptions import InvalidSelectionError
from dnd_rules.core.logging import get_logger
from dnd_rules.engine.combat import armor_check_penalty
from dnd_rules.engine.progression import calculate_total_skill_points
from dnd_rules.models.character import Character, CharacterSkillState
from dnd_rules.models.derived import EncumbranceResult, SkillPointBudget, SkillTotal
from dnd_rules.models.enums import ErrorCode
from dnd_rules.models.rules import SKILL_TARGET_PREFIX, RuleTables
from dnd_rules.models.validation import AllocationResult, error


logger = get_logger(__name__)


def max_ranks(level: int, is_class_skill: bool) -> int:
    """Rank ceiling for a skill at a given character level.

    Example:
        >>> max_ranks(1, True), max_ranks(1, False)
        (4, 2)
    """
    if is_class_skill:
        return level + 3
    return (level + 3) // 2


def rank_cost(is_class_skill: bool) -> int:
    """Skill points per rank."""
    return CLASS_SKILL_RANK_COST if is_class_skill else CROSS_CLASS_RANK_COST


def is_class_skill(character: Character, skill_name: str, tables: RuleTables) -> bool:
    """Whether ``skill_name`` is a class skill of the primary class."""
    if character.primary_class_id is None:
        return False
    return skill_name in tables.class_rule(character.primary_class_id).class_skills


def calculate_spent_points(character: Character) -> int:
    """Skill points spent on the ranks bought so far."""
    return sum(
        state.ranks * rank_cost(state.is_class_skill) for state in character.skills.values()
    )


def calculate_skill_budget(character: Character, tables: RuleTables) -> SkillPointBudget:
    return SkillPointBudget(
        total=calculate_total_skill_points(character, tables),
        spent=calculate_spent_points(character),
    )


def allocate_rank(
    character: Character,
    skill_name: str,
    delta: int,
    tables: RuleTables,
) -> AllocationResult:
    """Buy (+1) or refund (-1) one rank.

    Rank ceilings are checked before the budget, so a skill already at its
    cap reports ``RankCeilingExceeded`` even when points have run out.

    Raises:
        InvalidSelectionError: If ``delta`` is not +1 or -1.
        UnknownRuleIdError: If the skill, race or a class is not in the tables.
    """
    if delta not in (1, -1):
        raise InvalidSelectionError(
            f"Skill ranks change one at a time; delta must be +1 or -1, got {delta}",
            field_name="delta",
            invalid_value=delta,
        )
    tables.skill(skill_name)
    field = f"skills.{skill_name}"

    if not character.classes:
        return AllocationResult(character=character, error=error(
            ErrorCode.MISSING_SELECTION,
            "classes",
            f"Choose a class before allocating ranks to {skill_name}",
        ))

    state = character.skills.get(skill_name)
    current = state.ranks if state else 0
    class_skill = (
        state.is_class_skill if state and current else is_class_skill(character, skill_name, tables)
    )
    new_ranks = current + delta

    if new_ranks < 0:
        return AllocationResult(character=character, error=error(
            ErrorCode.OUT_OF_RANGE_VALUE,
            field,
            f"{skill_name} has no ranks to remove",
            ranks=current,
        ))

    budget = calculate_skill_budget(character, tables)
    cost = rank_cost(class_skill)
    if delta > 0:
        level = character.total_level
        ceiling = max_ranks(level, class_skill)
        if new_ranks > ceiling:
            kind = "class skill" if class_skill else "cross-class skill"
            return AllocationResult(character=character, error=error(
                ErrorCode.RANK_CEILING_EXCEEDED,
                field,
                f"{skill_name} cannot exceed {ceiling} ranks as a {kind} at level {level}",
                ranks=new_ranks,
                maximum=ceiling,
                is_class_skill=class_skill,
            ))
        if budget.spent + cost > budget.total:
            return AllocationResult(character=character, error=error(
                ErrorCode.BUDGET_EXCEEDED,
                field,
                f"A rank in {skill_name} costs {cost} skill points but only "
                f"{budget.available} remain",
                cost=cost,
                available=budget.available,
            ))

    updated = character.model_copy(deep=True)
    if new_ranks:
        updated.skills[skill_name] = CharacterSkillState(ranks=new_ranks, is_class_skill=class_skill)
    else:
        updated.skills.pop(skill_name, None)
    updated.derived = updated.derived.model_copy(update={
        "skill_points": SkillPointBudget(total=budget.total, spent=budget.spent + cost * delta),
    })

    logger.debug(
        "Skill rank allocated",
        skill=skill_name,
        ranks=new_ranks,
        cost=cost * delta,
        available=budget.available - cost * delta,
    )
    return AllocationResult(character=updated)


def skill_misc_bonus(character: Character, skill_name: str, tables: RuleTables) -> int:
    """Racial and feat bonuses to one skill."""
    target = f"{SKILL_TARGET_PREFIX}{skill_name}"
    total = 0
    if character.race_id:
        total += tables.race(character.race_id).modifiers.get(target, 0)
    for feat_name in character.feats:
        total += tables.feat(feat_name).modifiers.get(target, 0)
    return total


def calculate_skill_total(
    character: Character,
    skill_name: str,
    tables: RuleTables,
    encumbrance: EncumbranceResult | None = None,
) -> SkillTotal:
    """Check modifier for one skill.

    A trained-only skill with no ranks cannot be used at all. An overloaded
    character cannot attempt skills that take an armor check penalty.
    """
    skill = tables.skill(skill_name)
    ranks = character.skill_ranks(skill_name)
    usable = not (skill.trained_only and ranks == 0)
    penalty = 0
    if skill.armor_check_penalty:
        check_penalty = armor_check_penalty(character, tables, encumbrance)
        if check_penalty is None:
            usable = False
        else:
            penalty = check_penalty

    return SkillTotal(
        ranks=ranks,
        ability_modifier=character.ability_modifier(skill.key_ability),
        misc=skill_misc_bonus(character, skill_name, tables),
        armor_check_penalty=penalty,
        usable=usable,
    )


def calculate_skill_totals(
    character: Character,
    tables: RuleTables,
    encumbrance: EncumbranceResult | None = None,
) -> dict[str, SkillTotal]:
    """Check modifiers for every skill in the tables."""
    return {
        name: calculate_skill_total(character, name, tables, encumbrance)
        for name in tables.skills
    }


__all__ = [
    "max_ranks",
    "rank_cost",
    "is_class_skill",
    "calculate_spent_points",
    "calculate_skill_budget",
    "allocate_rank",
    "skill_misc_bonus",
    "calculate_skill_total",
    "calculate_skill_totals",
]
