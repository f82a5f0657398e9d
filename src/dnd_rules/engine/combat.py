"""Combat Stat Calculator.

Armor class, attack bonuses, damage expressions, carrying capacity and
encumbrance. Damage expressions are standard dice notation checked with the
``d20`` parser, so any collaborator that rolls with ``d20`` can use them as-is.
"""

from __future__ import annotations

from typing import Final

import d20

from dnd_rules.core.constants import (
    NONPROFICIENT_ATTACK_PENALTY,
    TWO_HANDED_STRENGTH_MULTIPLIER,
)
from dnd_rules.core.exceptions import RuleTableError
from dnd_rules.core.logging import get_logger
from dnd_rules.models.character import Character, EquippedItem
from dnd_rules.models.derived import (
    ACBreakdown,
    CarryingCapacity,
    EncumbranceResult,
    WeaponAttack,
)
from dnd_rules.models.enums import (
    Ability,
    ArmorCategory,
    EncumbranceLevel,
    Size,
    WeaponStyle,
)
from dnd_rules.models.rules import ArmorRule, RuleTables, ShieldRule, WeaponRule


logger = get_logger(__name__)

_roller = d20.Roller()


# =============================================================================
# Carrying Capacity (PHB Table 9-1)
# =============================================================================

CARRYING_CAPACITY: Final[dict[int, tuple[int, int, int]]] = {
    1: (3, 6, 10),
    2: (6, 13, 20),
    3: (10, 20, 30),
    4: (13, 26, 40),
    5: (16, 33, 50),
    6: (20, 40, 60),
    7: (23, 46, 70),
    8: (26, 53, 80),
    9: (30, 60, 90),
    10: (33, 66, 100),
    11: (38, 76, 115),
    12: (43, 86, 130),
    13: (50, 100, 150),
    14: (58, 116, 175),
    15: (66, 133, 200),
    16: (76, 153, 230),
    17: (86, 173, 260),
    18: (100, 200, 300),
    19: (116, 233, 350),
    20: (133, 266, 400),
    21: (153, 306, 460),
    22: (173, 346, 520),
    23: (200, 400, 600),
    24: (233, 466, 700),
    25: (266, 533, 800),
    26: (306, 613, 920),
    27: (346, 693, 1040),
    28: (400, 800, 1200),
    29: (466, 933, 1400),
}

# (speed penalty in feet, check penalty, max Dex bonus) per load band
_ENCUMBRANCE_PENALTIES: Final[dict[EncumbranceLevel, tuple[int | None, int | None, int | None]]] = {
    EncumbranceLevel.LIGHT: (0, 0, None),
    EncumbranceLevel.MEDIUM: (-10, -3, 3),
    EncumbranceLevel.HEAVY: (-10, -6, 1),
    EncumbranceLevel.OVERLOADED: (None, None, 0),
}


def calculate_carrying_capacity(strength: int, size: Size = Size.MEDIUM) -> CarryingCapacity:
    """Light, medium and heavy load limits in pounds.

    Scores above 29 use the row ten lower, times four, repeated as needed.
    The size multiplier applies last and results are rounded down.

    Example:
        >>> calculate_carrying_capacity(18).heavy
        300
    """
    if strength < 1:
        return CarryingCapacity(light=0, medium=0, heavy=0)

    multiplier = 1
    score = strength
    while score > 29:
        score -= 10
        multiplier *= 4

    light, medium, heavy = CARRYING_CAPACITY[score]
    factor = multiplier * size.carrying_multiplier
    return CarryingCapacity(
        light=int(light * factor),
        medium=int(medium * factor),
        heavy=int(heavy * factor),
    )


def classify_encumbrance(weight: float, capacity: CarryingCapacity) -> EncumbranceResult:
    """Load band for ``weight`` and the penalties it imposes."""
    if weight <= capacity.light:
        level = EncumbranceLevel.LIGHT
    elif weight <= capacity.medium:
        level = EncumbranceLevel.MEDIUM
    elif weight <= capacity.heavy:
        level = EncumbranceLevel.HEAVY
    else:
        level = EncumbranceLevel.OVERLOADED

    speed_penalty, check_penalty, max_dex = _ENCUMBRANCE_PENALTIES[level]
    return EncumbranceResult(
        level=level,
        speed_penalty=speed_penalty,
        check_penalty=check_penalty,
        max_dex_bonus=max_dex,
    )


def reduced_speed(base_speed: int) -> int:
    """Speed in medium or heavy armor or load: two thirds, rounded up to 5 ft.

    Example:
        >>> reduced_speed(30), reduced_speed(20)
        (20, 15)
    """
    return -(-(base_speed * 2) // 15) * 5


def encumbered_speed(base_speed: int, level: EncumbranceLevel) -> int:
    """Land speed under a given load."""
    if level is EncumbranceLevel.OVERLOADED:
        return 0
    if level is EncumbranceLevel.LIGHT:
        return base_speed
    return reduced_speed(base_speed)


def calculate_carried_weight(character: Character, tables: RuleTables) -> float:
    """Total weight of everything carried, equipped or packed."""
    return sum(tables.item(item.item_id).weight * item.quantity for item in character.equipment)


# =============================================================================
# Equipped Gear
# =============================================================================


def equipped_armor(character: Character, tables: RuleTables) -> tuple[ArmorRule, EquippedItem] | None:
    """The worn armor, if any."""
    for item in character.equipment:
        if item.equipped and item.item_id in tables.armor:
            return tables.armor[item.item_id], item
    return None


def equipped_shield(character: Character, tables: RuleTables) -> tuple[ShieldRule, EquippedItem] | None:
    """The carried shield, if any."""
    for item in character.equipment:
        if item.equipped and item.item_id in tables.shields:
            return tables.shields[item.item_id], item
    return None


def equipped_weapons(character: Character, tables: RuleTables) -> list[tuple[WeaponRule, EquippedItem]]:
    return [
        (tables.weapons[item.item_id], item)
        for item in character.equipment
        if item.equipped and item.item_id in tables.weapons
    ]


def armor_check_penalty(
    character: Character,
    tables: RuleTables,
    encumbrance: EncumbranceResult | None = None,
) -> int | None:
    """Check penalty from armor plus shield, or from load if that is worse.

    Returns None when the character is overloaded and cannot attempt
    penalized checks at all.
    """
    gear_penalty = 0
    if armor := equipped_armor(character, tables):
        gear_penalty += armor[0].armor_check_penalty
    if shield := equipped_shield(character, tables):
        gear_penalty += shield[0].armor_check_penalty
    if encumbrance is None:
        return gear_penalty
    if encumbrance.check_penalty is None:
        return None
    return min(gear_penalty, encumbrance.check_penalty)


# =============================================================================
# Armor Class
# =============================================================================


def calculate_armor_class(
    dex_modifier: int,
    armor: ArmorRule | None = None,
    shield: ShieldRule | None = None,
    size_modifier: int = 0,
    natural_armor: int = 0,
    deflection: int = 0,
    misc: int = 0,
    *,
    armor_enhancement: int = 0,
    shield_enhancement: int = 0,
    encumbrance_max_dex: int | None = None,
) -> ACBreakdown:
    """Armor class with every term itemized.

    The Dexterity modifier is capped by the tightest of the armor's, the
    shield's and the load's maximum Dexterity bonus. Without any cap it is
    unbounded.
    """
    caps = [
        cap
        for cap in (
            armor.max_dex_bonus if armor else None,
            shield.max_dex_bonus if shield else None,
            encumbrance_max_dex,
        )
        if cap is not None
    ]
    max_dex = min(caps) if caps else None
    dexterity = dex_modifier if max_dex is None else min(dex_modifier, max_dex)

    return ACBreakdown(
        dexterity=dexterity,
        armor=armor.armor_bonus + armor_enhancement if armor else 0,
        shield=shield.shield_bonus + shield_enhancement if shield else 0,
        size=size_modifier,
        natural=natural_armor,
        deflection=deflection,
        misc=misc,
        max_dex_bonus=max_dex,
    )


def calculate_character_armor_class(
    character: Character,
    tables: RuleTables,
    encumbrance: EncumbranceResult | None = None,
) -> ACBreakdown:
    """Armor class from the character's worn gear, race and bonuses."""
    armor = equipped_armor(character, tables)
    shield = equipped_shield(character, tables)
    size = tables.race(character.race_id).size if character.race_id else Size.MEDIUM
    return calculate_armor_class(
        character.ability_modifier(Ability.DEX),
        armor[0] if armor else None,
        shield[0] if shield else None,
        size.modifier,
        character.bonuses.natural_armor,
        character.bonuses.deflection,
        character.bonuses.armor_class_misc,
        armor_enhancement=armor[1].enhancement_bonus if armor else 0,
        shield_enhancement=shield[1].enhancement_bonus if shield else 0,
        encumbrance_max_dex=encumbrance.max_dex_bonus if encumbrance else None,
    )


# =============================================================================
# Proficiency
# =============================================================================


def is_weapon_proficient(weapon: WeaponRule, character: Character, tables: RuleTables) -> bool:
    """Proficiency from any class, the race or a feat."""
    for entry in character.classes:
        klass = tables.class_rule(entry.class_id)
        if weapon.category in klass.weapon_categories or weapon.id in klass.weapon_ids:
            return True
    if character.race_id and weapon.id in tables.race(character.race_id).weapon_ids:
        return True
    return any(
        weapon.category in tables.feat(name).grants_weapon_categories
        for name in character.feats
    )


def is_armor_proficient(armor: ArmorRule, character: Character, tables: RuleTables) -> bool:
    granted: set[ArmorCategory] = set()
    for entry in character.classes:
        granted |= tables.class_rule(entry.class_id).armor_categories
    for name in character.feats:
        granted |= tables.feat(name).grants_armor_categories
    return armor.category in granted


def is_shield_proficient(shield: ShieldRule, character: Character, tables: RuleTables) -> bool:
    for entry in character.classes:
        if shield.category in tables.class_rule(entry.class_id).shield_categories:
            return True
    return any(
        shield.category in tables.feat(name).grants_shield_categories
        for name in character.feats
    )


def proficiency_penalty(weapon: WeaponRule, character: Character, tables: RuleTables) -> int:
    """Attack penalty for wielding ``weapon``: -4 when not proficient."""
    if is_weapon_proficient(weapon, character, tables):
        return 0
    return NONPROFICIENT_ATTACK_PENALTY


# =============================================================================
# Attacks
# =============================================================================


def calculate_attack_bonus(
    bab: int,
    ability_modifier: int,
    size_modifier: int = 0,
    weapon_enhancement: int = 0,
    proficiency_penalty: int = 0,
) -> int:
    """Attack bonus: the plain sum of its terms."""
    return bab + ability_modifier + size_modifier + weapon_enhancement + proficiency_penalty


def strength_damage_bonus(weapon: WeaponRule, strength_modifier: int) -> int:
    """Strength contribution to damage for one weapon.

    Two-handed weapons add one and a half times a Strength bonus. Ranged
    weapons (other than thrown ones) add no bonus but still take a penalty.
    """
    if weapon.style is WeaponStyle.RANGED:
        return min(0, strength_modifier)
    if weapon.style is WeaponStyle.TWO_HANDED and strength_modifier > 0:
        return int(strength_modifier * TWO_HANDED_STRENGTH_MULTIPLIER)
    return strength_modifier


def calculate_damage_expression(
    weapon: WeaponRule,
    size: Size,
    strength_modifier: int,
    enhancement: int = 0,
) -> str:
    """Damage in dice notation, e.g. ``1d8+3``.

    Raises:
        RuleTableError: If the weapon's damage dice do not parse.

    Example:
        >>> calculate_damage_expression(greatsword, Size.MEDIUM, 3)
        '2d6+4'
    """
    small_or_smaller = size.modifier >= Size.SMALL.modifier
    dice = weapon.damage_small if small_or_smaller else weapon.damage_medium
    bonus = strength_damage_bonus(weapon, strength_modifier) + enhancement
    if bonus > 0:
        expression = f"{dice}+{bonus}"
    elif bonus < 0:
        expression = f"{dice}{bonus}"
    else:
        expression = dice

    try:
        _roller.parse(expression)
    except d20.RollSyntaxError as exc:
        raise RuleTableError(
            f"Weapon {weapon.id} has unparseable damage {dice!r}",
            table="weapons",
            entry=weapon.id,
        ) from exc
    return expression


def calculate_weapon_attacks(character: Character, tables: RuleTables, bab: int) -> list[WeaponAttack]:
    """One attack line per equipped weapon.

    Melee attacks use Strength (or Dexterity with Weapon Finesse and a light
    weapon); ranged and thrown attacks use Dexterity.
    """
    size = tables.race(character.race_id).size if character.race_id else Size.MEDIUM
    strength = character.ability_modifier(Ability.STR)
    dexterity = character.ability_modifier(Ability.DEX)
    finesse = "Weapon Finesse" in character.feats

    attacks = []
    for weapon, item in equipped_weapons(character, tables):
        if weapon.style in (WeaponStyle.RANGED, WeaponStyle.THROWN):
            ability_modifier = dexterity
        elif weapon.style is WeaponStyle.LIGHT and finesse:
            ability_modifier = max(strength, dexterity)
        else:
            ability_modifier = strength
        penalty = proficiency_penalty(weapon, character, tables)
        attacks.append(WeaponAttack(
            item_id=weapon.id,
            name=weapon.name,
            attack_bonus=calculate_attack_bonus(
                bab, ability_modifier, size.modifier, item.enhancement_bonus, penalty
            ),
            damage=calculate_damage_expression(weapon, size, strength, item.enhancement_bonus),
            critical=weapon.critical,
            proficient=penalty == 0,
        ))
    return attacks


__all__ = [
    "CARRYING_CAPACITY",
    "calculate_carrying_capacity",
    "classify_encumbrance",
    "reduced_speed",
    "encumbered_speed",
    "calculate_carried_weight",
    "equipped_armor",
    "equipped_shield",
    "equipped_weapons",
    "armor_check_penalty",
    "calculate_armor_class",
    "calculate_character_armor_class",
    "is_weapon_proficient",
    "is_armor_proficient",
    "is_shield_proficient",
    "proficiency_penalty",
    "calculate_attack_bonus",
    "strength_damage_bonus",
    "calculate_damage_expression",
    "calculate_weapon_attacks",
]
