"""Enumeration types for the D&D 3.5 rules engine.

Progression qualities are closed enums. Every calculator that branches on
one of them handles each member explicitly and ends in ``assert_never``, so
a new member cannot silently fall through to a zero value.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """The six ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability (e.g. 'Strength')."""
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation (e.g. 'STR')."""
        return self.name


class Size(StrEnum):
    """Creature size categories."""

    FINE = "fine"
    DIMINUTIVE = "diminutive"
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"
    GARGANTUAN = "gargantuan"
    COLOSSAL = "colossal"

    @property
    def modifier(self) -> int:
        """Size modifier applied to armor class and attack rolls."""
        return _SIZE_MODIFIERS[self]

    @property
    def carrying_multiplier(self) -> float:
        """Carrying capacity multiplier for bipedal creatures."""
        return _SIZE_CARRYING_MULTIPLIERS[self]


_SIZE_MODIFIERS: dict[Size, int] = {
    Size.FINE: 8,
    Size.DIMINUTIVE: 4,
    Size.TINY: 2,
    Size.SMALL: 1,
    Size.MEDIUM: 0,
    Size.LARGE: -1,
    Size.HUGE: -2,
    Size.GARGANTUAN: -4,
    Size.COLOSSAL: -8,
}

_SIZE_CARRYING_MULTIPLIERS: dict[Size, float] = {
    Size.FINE: 1 / 8,
    Size.DIMINUTIVE: 1 / 4,
    Size.TINY: 1 / 2,
    Size.SMALL: 3 / 4,
    Size.MEDIUM: 1,
    Size.LARGE: 2,
    Size.HUGE: 4,
    Size.GARGANTUAN: 8,
    Size.COLOSSAL: 16,
}


class BABProgression(StrEnum):
    """Base attack bonus progression quality."""

    FULL = "full"
    MEDIUM = "medium"
    POOR = "poor"


class SaveProgression(StrEnum):
    """Base saving throw progression quality."""

    GOOD = "good"
    POOR = "poor"


class SaveType(StrEnum):
    """The three saving throws."""

    FORTITUDE = "fortitude"
    REFLEX = "reflex"
    WILL = "will"

    @property
    def ability(self) -> Ability:
        """Ability whose modifier is added to this save."""
        return {
            SaveType.FORTITUDE: Ability.CON,
            SaveType.REFLEX: Ability.DEX,
            SaveType.WILL: Ability.WIS,
        }[self]


class CasterProgression(StrEnum):
    """How class levels translate into caster level."""

    NONE = "none"
    FULL = "full"
    HALF = "half"


class FeatType(StrEnum):
    """Feat categories."""

    GENERAL = "general"
    COMBAT = "combat"
    METAMAGIC = "metamagic"
    ITEM_CREATION = "item_creation"
    EPIC = "epic"


class WeaponCategory(StrEnum):
    """Weapon proficiency categories."""

    SIMPLE = "simple"
    MARTIAL = "martial"
    EXOTIC = "exotic"


class WeaponStyle(StrEnum):
    """How a weapon is wielded, which decides the Strength bonus to damage."""

    LIGHT = "light"
    ONE_HANDED = "one_handed"
    TWO_HANDED = "two_handed"
    RANGED = "ranged"
    THROWN = "thrown"


class ArmorCategory(StrEnum):
    """Armor proficiency categories."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class ShieldCategory(StrEnum):
    """Shield proficiency categories."""

    BUCKLER = "buckler"
    LIGHT = "light"
    HEAVY = "heavy"
    TOWER = "tower"


class EncumbranceLevel(StrEnum):
    """Carried-weight bands."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    OVERLOADED = "overloaded"


class AbilityGenerationMethod(StrEnum):
    """How the base ability scores were produced."""

    POINT_BUY = "point_buy"
    STANDARD_ARRAY = "standard_array"
    ROLLED = "rolled"


class Alignment(StrEnum):
    """The nine alignments."""

    LAWFUL_GOOD = "lawful_good"
    NEUTRAL_GOOD = "neutral_good"
    CHAOTIC_GOOD = "chaotic_good"
    LAWFUL_NEUTRAL = "lawful_neutral"
    TRUE_NEUTRAL = "true_neutral"
    CHAOTIC_NEUTRAL = "chaotic_neutral"
    LAWFUL_EVIL = "lawful_evil"
    NEUTRAL_EVIL = "neutral_evil"
    CHAOTIC_EVIL = "chaotic_evil"

    @property
    def display_name(self) -> str:
        """Get human-readable alignment name (e.g. 'Lawful Good')."""
        return self.value.replace("_", " ").title()

    @property
    def is_lawful(self) -> bool:
        return self.value.startswith("lawful")

    @property
    def is_chaotic(self) -> bool:
        return self.value.startswith("chaotic")

    @property
    def is_good(self) -> bool:
        return self.value.endswith("good")

    @property
    def is_evil(self) -> bool:
        return self.value.endswith("evil")

    @property
    def is_neutral(self) -> bool:
        """True when either axis is neutral (the druid requirement)."""
        return "neutral" in self.value


class ErrorCode(StrEnum):
    """Codes carried by blocking validation issues."""

    OUT_OF_RANGE_VALUE = "OutOfRangeValue"
    BUDGET_EXCEEDED = "BudgetExceeded"
    RANK_CEILING_EXCEEDED = "RankCeilingExceeded"
    PREREQUISITE_NOT_MET = "PrerequisiteNotMet"
    NO_FEAT_SLOTS_AVAILABLE = "NoFeatSlotsAvailable"
    MISSING_SELECTION = "MissingSelection"
    UNKNOWN_RULE_ID = "UnknownRuleId"
    DUPLICATE_SELECTION = "DuplicateSelection"
    ALIGNMENT_RESTRICTION = "AlignmentRestriction"
    INVALID_ABILITY_ARRAY = "InvalidAbilityArray"


class WarningCode(StrEnum):
    """Codes carried by advisory validation issues."""

    UNSPENT_SKILL_POINTS = "UnspentSkillPoints"
    UNUSED_FEAT_SLOTS = "UnusedFeatSlots"
    MULTICLASS_XP_PENALTY = "MulticlassXPPenalty"
    ENCUMBERED = "Encumbered"
    NONPROFICIENT_WEAPON = "NonproficientWeapon"
    NONPROFICIENT_ARMOR = "NonproficientArmor"
    INSUFFICIENT_EXPERIENCE = "InsufficientExperience"


class Severity(StrEnum):
    """Whether an issue blocks finalization."""

    ERROR = "error"
    WARNING = "warning"


__all__ = [
    "Ability",
    "Size",
    "BABProgression",
    "SaveProgression",
    "SaveType",
    "CasterProgression",
    "FeatType",
    "WeaponCategory",
    "WeaponStyle",
    "ArmorCategory",
    "ShieldCategory",
    "EncumbranceLevel",
    "AbilityGenerationMethod",
    "Alignment",
    "ErrorCode",
    "WarningCode",
    "Severity",
]
