"""Spellcasting Calculator.

Spells per day, bonus spells for a high casting ability, spell save DCs and
caster level.
"""

from __future__ import annotations

from typing import assert_never

from dnd_rules.core.constants import BASE_SPELL_DC, HALF_CASTER_FIRST_LEVEL, MAX_SPELL_LEVEL
from dnd_rules.core.logging import get_logger
from dnd_rules.models.character import Character
from dnd_rules.models.enums import CasterProgression
from dnd_rules.models.rules import RuleTables


logger = get_logger(__name__)


def is_spellcaster(class_id: str, tables: RuleTables) -> bool:
    """Whether the class casts spells.

    Raises:
        UnknownRuleIdError: If the class is not in the tables.
    """
    return tables.class_rule(class_id).spellcasting


def bonus_spells(ability_modifier: int) -> dict[int, int]:
    """Bonus spells per day by spell level (PHB Table 1-1).

    A modifier of at least the spell level grants
    ``(modifier - spell_level) // 4 + 1`` bonus spells at that level. Spell
    level 0 never gets bonus spells. Levels without a bonus are omitted.

    Example:
        >>> bonus_spells(3)
        {1: 1, 2: 1, 3: 1}
        >>> bonus_spells(5)[1]
        2
    """
    return {
        spell_level: (ability_modifier - spell_level) // 4 + 1
        for spell_level in range(1, MAX_SPELL_LEVEL + 1)
        if ability_modifier >= spell_level
    }


def get_spells_per_day(
    class_id: str,
    level: int,
    ability_modifier: int,
    tables: RuleTables,
    *,
    ability_score: int | None = None,
) -> dict[int, int]:
    """Spells per day for ``level`` levels of a class.

    Bonus spells are added to every spell level the class table lists at
    that level, including levels listed with 0 slots. When ``ability_score``
    is given, spell levels the caster is too weak to cast (score below
    10 + spell level) are dropped.

    Returns:
        Spell level to slots; empty for non-casters.
    """
    klass = tables.class_rule(class_id)
    if not klass.spellcasting or level < 1:
        return {}

    base = klass.spells_per_day.get(min(level, max(klass.spells_per_day)), {})
    bonus = bonus_spells(ability_modifier)
    slots = {
        spell_level: count + bonus.get(spell_level, 0)
        for spell_level, count in base.items()
        if ability_score is None or ability_score >= 10 + spell_level
    }
    logger.debug("Spells per day calculated", class_id=class_id, level=level, slots=slots)
    return slots


def calculate_spell_dc(spell_level: int, ability_modifier: int, focus_bonus: int = 0) -> int:
    """Save DC of a spell: 10 + spell level + casting modifier + focus bonus."""
    return BASE_SPELL_DC + spell_level + ability_modifier + focus_bonus


def calculate_caster_level(class_level: int, progression: CasterProgression) -> int:
    """Caster level granted by ``class_level`` levels of one class.

    Half casters (paladin, ranger) cast as half their class level, starting
    at 4th level.
    """
    if progression is CasterProgression.NONE:
        return 0
    elif progression is CasterProgression.FULL:
        return class_level
    elif progression is CasterProgression.HALF:
        return class_level // 2 if class_level >= HALF_CASTER_FIRST_LEVEL else 0
    else:
        assert_never(progression)


def calculate_caster_levels(character: Character, tables: RuleTables) -> dict[str, int]:
    """Caster level per spellcasting class the character has levels in."""
    levels: dict[str, int] = {}
    for entry in character.classes:
        klass = tables.class_rule(entry.class_id)
        if klass.spellcasting:
            levels[klass.id] = calculate_caster_level(
                character.class_level(klass.id), klass.caster_progression
            )
    return levels


def calculate_character_spells(
    character: Character,
    tables: RuleTables,
) -> tuple[dict[str, dict[int, int]], dict[str, dict[int, int]]]:
    """Spells per day and spell save DCs for every casting class.

    Returns:
        Two maps keyed by class id: spell level to slots, and spell level
        to save DC.
    """
    spells_per_day: dict[str, dict[int, int]] = {}
    spell_dcs: dict[str, dict[int, int]] = {}
    for class_id in dict.fromkeys(entry.class_id for entry in character.classes):
        klass = tables.class_rule(class_id)
        if not klass.spellcasting or klass.spellcasting_ability is None:
            continue
        modifier = character.ability_modifier(klass.spellcasting_ability)
        slots = get_spells_per_day(
            class_id,
            character.class_level(class_id),
            modifier,
            tables,
            ability_score=character.ability_total(klass.spellcasting_ability),
        )
        spells_per_day[class_id] = slots
        spell_dcs[class_id] = {
            spell_level: calculate_spell_dc(spell_level, modifier) for spell_level in slots
        }
    return spells_per_day, spell_dcs


__all__ = [
    "is_spellcaster",
    "bonus_spells",
    "get_spells_per_day",
    "calculate_spell_dc",
    "calculate_caster_level",
    "calculate_caster_levels",
    "calculate_character_spells",
]
