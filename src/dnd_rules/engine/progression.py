"""Progression Calculator.

Base attack bonus, base saves, hit points, skill points, feat slots and
experience. Multiclass characters add up the per-class values; only the
class taken at 1st level gets the maximized first hit die and the 4x
first-level skill points.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from dnd_rules.core.constants import (
    FEAT_LEVEL_INTERVAL,
    FIRST_LEVEL_SKILL_MULTIPLIER,
    ITERATIVE_ATTACK_STEP,
    MAX_ITERATIVE_ATTACKS,
    MULTICLASS_XP_PENALTY,
)
from dnd_rules.core.logging import get_logger
from dnd_rules.models.character import Character, ClassLevel
from dnd_rules.models.derived import FeatSlots, SaveBreakdown
from dnd_rules.models.enums import Ability, BABProgression, SaveProgression, SaveType
from dnd_rules.models.rules import RuleTables


logger = get_logger(__name__)


# =============================================================================
# Experience (PHB Table 3-2)
# =============================================================================

XP_THRESHOLDS: dict[int, int] = {
    1: 0,
    2: 1000,
    3: 3000,
    4: 6000,
    5: 10000,
    6: 15000,
    7: 21000,
    8: 28000,
    9: 36000,
    10: 45000,
    11: 55000,
    12: 66000,
    13: 78000,
    14: 91000,
    15: 105000,
    16: 120000,
    17: 136000,
    18: 153000,
    19: 171000,
    20: 190000,
}


def experience_for_level(level: int) -> int:
    """Minimum experience for a character level.

    Beyond 20th level each level costs ``level * 1000`` more than the last.
    """
    if level < 1:
        raise ValueError(f"Character level must be at least 1, got {level}")
    if level in XP_THRESHOLDS:
        return XP_THRESHOLDS[level]
    return experience_for_level(level - 1) + (level - 1) * 1000


def level_for_experience(xp: int) -> int:
    """Highest character level (up to 20) that ``xp`` qualifies for."""
    for level in range(20, 0, -1):
        if xp >= XP_THRESHOLDS[level]:
            return level
    return 1


# =============================================================================
# Base Attack Bonus
# =============================================================================


def calculate_bab(quality: BABProgression, level: int) -> int:
    """Base attack bonus for ``level`` levels of one class.

    Example:
        >>> calculate_bab(BABProgression.MEDIUM, 5)
        3
    """
    if quality is BABProgression.FULL:
        return level
    elif quality is BABProgression.MEDIUM:
        return (3 * level) // 4
    elif quality is BABProgression.POOR:
        return level // 2
    else:
        assert_never(quality)


def calculate_total_bab(classes: Sequence[ClassLevel], tables: RuleTables) -> int:
    """Sum of per-class base attack bonuses."""
    return sum(
        calculate_bab(tables.class_rule(entry.class_id).bab, entry.level)
        for entry in classes
    )


def iterative_attacks(bab: int) -> list[int]:
    """Attack bonuses for a full attack.

    Each further attack is 5 lower; it is only gained while still positive,
    up to four attacks.

    Example:
        >>> iterative_attacks(11)
        [11, 6, 1]
    """
    attacks = [bab]
    while len(attacks) < MAX_ITERATIVE_ATTACKS:
        following = attacks[-1] - ITERATIVE_ATTACK_STEP
        if following <= 0:
            break
        attacks.append(following)
    return attacks


# =============================================================================
# Saving Throws
# =============================================================================


def calculate_save_base(quality: SaveProgression, level: int) -> int:
    """Base save bonus for ``level`` levels of one class."""
    if quality is SaveProgression.GOOD:
        return 2 + level // 2
    elif quality is SaveProgression.POOR:
        return level // 3
    else:
        assert_never(quality)


def _modifier_total(character: Character, tables: RuleTables, target: str) -> int:
    """Static race and feat modifiers for one target."""
    total = 0
    if character.race_id:
        total += tables.race(character.race_id).modifiers.get(target, 0)
    for feat_name in character.feats:
        total += tables.feat(feat_name).modifiers.get(target, 0)
    return total


def calculate_saves(character: Character, tables: RuleTables) -> dict[SaveType, SaveBreakdown]:
    """All three saving throws, itemized into base, ability and misc."""
    saves: dict[SaveType, SaveBreakdown] = {}
    for save in SaveType:
        base = sum(
            calculate_save_base(tables.class_rule(entry.class_id).saves[save], entry.level)
            for entry in character.classes
        )
        misc = _modifier_total(character, tables, save.value) + getattr(
            character.bonuses, save.value
        )
        saves[save] = SaveBreakdown(
            base=base,
            ability=character.ability_modifier(save.ability),
            misc=misc,
        )
    return saves


# =============================================================================
# Hit Points
# =============================================================================


def calculate_hit_points(
    hit_die: int,
    level: int,
    con_modifier: int,
    rolls: Sequence[int] | None = None,
    first_level: bool = True,
) -> int:
    """Hit points from ``level`` levels of one class.

    When ``first_level`` is set, the first hit die is maximized and ``rolls``
    cover the levels after it. Levels without a roll take the average,
    ``hit_die // 2 + 1``. Each level adds the Constitution modifier and the
    total never drops below one hit point per level.

    Raises:
        ValueError: If a roll is outside ``1..hit_die``.

    Example:
        >>> calculate_hit_points(10, 1, 2)
        12
    """
    rolls = list(rolls or [])
    for roll in rolls:
        if not 1 <= roll <= hit_die:
            raise ValueError(f"Hit die roll {roll} is not possible on a d{hit_die}")

    total = 0
    for index in range(level):
        if first_level and index == 0:
            gained = hit_die
        else:
            roll_index = index - 1 if first_level else index
            gained = rolls[roll_index] if roll_index < len(rolls) else hit_die // 2 + 1
        total += gained + con_modifier
    return max(total, level)


def calculate_character_hit_points(character: Character, tables: RuleTables) -> int:
    """Maximum hit points across all classes plus static bonuses.

    Raises:
        ValueError: If any stored hit-die roll is impossible.
    """
    con_modifier = character.ability_modifier(Ability.CON)
    total = sum(
        calculate_hit_points(
            tables.class_rule(entry.class_id).hit_die,
            entry.level,
            con_modifier,
            entry.hit_die_rolls,
            first_level=index == 0,
        )
        for index, entry in enumerate(character.classes)
    )
    return total + _modifier_total(character, tables, "hit_points")


# =============================================================================
# Skill Points
# =============================================================================


def calculate_skill_point_budget(
    class_points: int,
    int_modifier: int,
    level: int,
    is_first_level: bool = True,
    racial_bonus_per_level: int = 0,
) -> int:
    """Skill points earned over ``level`` levels of one class.

    Every level grants at least one point. The first character level is
    worth four times the per-level amount.

    Example:
        >>> calculate_skill_point_budget(2, 1, 1)
        12
    """
    per_level = max(1, class_points + int_modifier + racial_bonus_per_level)
    if level < 1:
        return 0
    if is_first_level:
        return per_level * FIRST_LEVEL_SKILL_MULTIPLIER + per_level * (level - 1)
    return per_level * level


def calculate_total_skill_points(character: Character, tables: RuleTables) -> int:
    """Skill points earned across all classes, using the current Int modifier."""
    racial_bonus = (
        tables.race(character.race_id).bonus_skill_points_per_level if character.race_id else 0
    )
    int_modifier = character.ability_modifier(Ability.INT)
    return sum(
        calculate_skill_point_budget(
            tables.class_rule(entry.class_id).skill_points_per_level,
            int_modifier,
            entry.level,
            is_first_level=index == 0,
            racial_bonus_per_level=racial_bonus,
        )
        for index, entry in enumerate(character.classes)
    )


# =============================================================================
# Feat Slots
# =============================================================================


def calculate_feat_slots(character: Character, tables: RuleTables) -> FeatSlots:
    """Feat slots earned and used.

    One slot at 1st level and one more every third character level, plus
    racial bonus feats and class bonus feats reached so far.
    """
    level = character.total_level
    total = 1 + level // FEAT_LEVEL_INTERVAL if level else 0
    if character.race_id and level:
        total += tables.race(character.race_id).bonus_feats
    for entry in character.classes:
        bonus_levels = tables.class_rule(entry.class_id).bonus_feat_levels
        total += sum(1 for bonus_level in bonus_levels if bonus_level <= entry.level)

    logger.debug("Feat slots calculated", level=level, total=total, used=len(character.feats))
    return FeatSlots(total=total, used=len(character.feats))


# =============================================================================
# Multiclassing
# =============================================================================


def _levels_by_class(classes: Sequence[ClassLevel]) -> dict[str, int]:
    levels: dict[str, int] = {}
    for entry in classes:
        levels[entry.class_id] = levels.get(entry.class_id, 0) + entry.level
    return levels


def calculate_multiclass_xp_penalty(character: Character, tables: RuleTables) -> float:
    """Fraction of experience lost to uneven multiclassing.

    The favored class is ignored (for races whose favored class is "any",
    the highest-level class). Every remaining class more than one level
    below the highest remaining class costs 20%.
    """
    levels = _levels_by_class(character.classes)
    if len(levels) < 2:
        return 0.0

    favored = tables.race(character.race_id).favored_class if character.race_id else None
    if favored is None:
        favored = max(levels, key=lambda class_id: levels[class_id])
    counted = {class_id: level for class_id, level in levels.items() if class_id != favored}
    if len(counted) < 2:
        return 0.0

    highest = max(counted.values())
    offending = sum(1 for level in counted.values() if highest - level > 1)
    return round(offending * MULTICLASS_XP_PENALTY, 2)


__all__ = [
    "XP_THRESHOLDS",
    "experience_for_level",
    "level_for_experience",
    "calculate_bab",
    "calculate_total_bab",
    "iterative_attacks",
    "calculate_save_base",
    "calculate_saves",
    "calculate_hit_points",
    "calculate_character_hit_points",
    "calculate_skill_point_budget",
    "calculate_total_skill_points",
    "calculate_feat_slots",
    "calculate_multiclass_xp_penalty",
]
