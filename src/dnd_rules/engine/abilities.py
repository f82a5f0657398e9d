"""Ability Score Calculator.

Modifiers, racial adjustments and the three generation methods (point buy,
standard array, rolled). Checks return result objects listing every
violation; none of them raise for a player mistake.

Example:
    >>> result = validate_point_buy({Ability.STR: 14, Ability.DEX: 14})
    >>> result.total_cost
    16
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import assert_never

from dnd_rules.core.config import RulesSettings, get_settings
from dnd_rules.core.constants import (
    POINT_BUY_COSTS,
    ROLLED_SCORE_MAX,
    ROLLED_SCORE_MIN,
    STANDARD_ARRAY,
)
from dnd_rules.core.logging import get_logger
from dnd_rules.models.character import AbilityScore, Character, calculate_modifier
from dnd_rules.models.enums import Ability, AbilityGenerationMethod, ErrorCode
from dnd_rules.models.rules import RuleTables
from dnd_rules.models.validation import PointBuyResult, ValidationResult, error


logger = get_logger(__name__)

AbilityInput = Mapping[Ability, AbilityScore | int]


def _base_scores(abilities: AbilityInput) -> dict[Ability, int]:
    """Read base scores from AbilityScore values or plain integers."""
    return {
        Ability(ability): score.base if isinstance(score, AbilityScore) else score
        for ability, score in abilities.items()
    }


def _totals(abilities: AbilityInput) -> dict[Ability, int]:
    return {
        Ability(ability): score.total if isinstance(score, AbilityScore) else score
        for ability, score in abilities.items()
    }


# =============================================================================
# Racial Adjustments
# =============================================================================


def apply_racial_adjustments(
    character: Character,
    race_id: str | None,
    tables: RuleTables,
) -> Character:
    """Select a race and apply its ability adjustments.

    The racial adjustment of every ability is replaced by the new race's
    value, so switching races never stacks adjustments and selecting the
    same race twice changes nothing. Passing None clears the race.

    Returns:
        A new Character; the input is not modified.

    Raises:
        UnknownRuleIdError: If ``race_id`` is not in the tables.
    """
    adjustments = tables.race(race_id).ability_adjustments if race_id else {}
    updated = character.model_copy(deep=True)
    for ability in Ability:
        updated.abilities[ability] = updated.abilities[ability].model_copy(
            update={"racial_adjustment": adjustments.get(ability, 0)}
        )
    updated.race_id = race_id

    logger.debug(
        "Racial adjustments applied",
        previous_race=character.race_id,
        race=race_id,
        adjustments={a.value: v for a, v in adjustments.items()},
    )
    return updated


# =============================================================================
# Point Buy
# =============================================================================


def calculate_point_buy_cost(score: int) -> int:
    """Cost of one base score under point buy.

    Raises:
        ValueError: If the score is outside the point-buy cost table.

    Example:
        >>> calculate_point_buy_cost(15)
        8
    """
    try:
        return POINT_BUY_COSTS[score]
    except KeyError:
        raise ValueError(
            f"Score {score} has no point-buy cost; purchasable scores are "
            f"{min(POINT_BUY_COSTS)}-{max(POINT_BUY_COSTS)}"
        ) from None


def validate_point_buy(
    abilities: AbilityInput,
    budget: int | None = None,
    *,
    settings: RulesSettings | None = None,
) -> PointBuyResult:
    """Check base scores against the point-buy range and budget.

    Args:
        abilities: Ability to AbilityScore (or plain base score).
        budget: Points available; defaults to the configured budget.
        settings: Settings to read defaults from.

    Returns:
        The total cost of in-range scores, the budget, and every violation.
    """
    settings = settings or get_settings()
    budget = settings.point_buy_budget if budget is None else budget

    errors = []
    total_cost = 0
    for ability, base in _base_scores(abilities).items():
        in_range = settings.point_buy_min <= base <= settings.point_buy_max
        try:
            cost = calculate_point_buy_cost(base) if in_range else None
        except ValueError:
            cost = None
        if cost is None:
            errors.append(error(
                ErrorCode.OUT_OF_RANGE_VALUE,
                f"abilities.{ability.value}",
                f"{ability.full_name} base score {base} is outside the point-buy "
                f"range {settings.point_buy_min}-{settings.point_buy_max}",
                ability=ability.value,
                value=base,
                minimum=settings.point_buy_min,
                maximum=settings.point_buy_max,
            ))
            continue
        total_cost += cost

    if total_cost > budget:
        errors.append(error(
            ErrorCode.BUDGET_EXCEEDED,
            "abilities",
            f"Point-buy total cost {total_cost} exceeds budget of {budget}",
            total_cost=total_cost,
            budget=budget,
        ))

    logger.debug("Point buy checked", total_cost=total_cost, budget=budget, errors=len(errors))
    return PointBuyResult(errors=errors, total_cost=total_cost, budget=budget)


# =============================================================================
# Other Generation Methods
# =============================================================================


def validate_standard_array(abilities: AbilityInput) -> ValidationResult:
    """The six base scores must be a permutation of the standard array."""
    bases = sorted(_base_scores(abilities).values(), reverse=True)
    expected = sorted(STANDARD_ARRAY, reverse=True)
    if bases == expected:
        return ValidationResult()
    return ValidationResult(errors=[error(
        ErrorCode.INVALID_ABILITY_ARRAY,
        "abilities",
        f"Base scores {bases} are not an arrangement of the standard array "
        f"{list(STANDARD_ARRAY)}",
        scores=bases,
        expected=list(STANDARD_ARRAY),
    )])


def validate_rolled_scores(abilities: AbilityInput) -> ValidationResult:
    """Each base score must be a possible 4d6-drop-lowest result."""
    errors = [
        error(
            ErrorCode.OUT_OF_RANGE_VALUE,
            f"abilities.{ability.value}",
            f"{ability.full_name} base score {base} cannot be rolled on 4d6 drop "
            f"lowest ({ROLLED_SCORE_MIN}-{ROLLED_SCORE_MAX})",
            ability=ability.value,
            value=base,
            minimum=ROLLED_SCORE_MIN,
            maximum=ROLLED_SCORE_MAX,
        )
        for ability, base in _base_scores(abilities).items()
        if not ROLLED_SCORE_MIN <= base <= ROLLED_SCORE_MAX
    ]
    return ValidationResult(errors=errors)


def validate_absolute_bounds(
    abilities: AbilityInput,
    *,
    settings: RulesSettings | None = None,
) -> ValidationResult:
    """Every ability total must lie within the configured absolute bounds."""
    settings = settings or get_settings()
    errors = [
        error(
            ErrorCode.OUT_OF_RANGE_VALUE,
            f"abilities.{ability.value}",
            f"{ability.full_name} total {total} is outside the allowed range "
            f"{settings.ability_score_min}-{settings.ability_score_max}",
            ability=ability.value,
            value=total,
            minimum=settings.ability_score_min,
            maximum=settings.ability_score_max,
        )
        for ability, total in _totals(abilities).items()
        if not settings.ability_score_min <= total <= settings.ability_score_max
    ]
    return ValidationResult(errors=errors)


def validate_ability_generation(
    character: Character,
    *,
    settings: RulesSettings | None = None,
) -> ValidationResult:
    """Apply the rule for the character's generation method."""
    method = character.generation_method
    if method is AbilityGenerationMethod.POINT_BUY:
        return validate_point_buy(character.abilities, settings=settings)
    elif method is AbilityGenerationMethod.STANDARD_ARRAY:
        return validate_standard_array(character.abilities)
    elif method is AbilityGenerationMethod.ROLLED:
        return validate_rolled_scores(character.abilities)
    else:
        assert_never(method)


__all__ = [
    "calculate_modifier",
    "apply_racial_adjustments",
    "calculate_point_buy_cost",
    "validate_point_buy",
    "validate_standard_array",
    "validate_rolled_scores",
    "validate_absolute_bounds",
    "validate_ability_generation",
]
