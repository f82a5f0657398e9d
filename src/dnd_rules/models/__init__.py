"""Pydantic V2 schemas for the D&D 3.5 rules engine.

Submodules:
    enums: Enumeration types (Ability, Size, BABProgression, ErrorCode, etc.)
    rules: Rule table entries and the RuleTables container
    character: The Character aggregate and its raw selections
    derived: Blocks of values the validator derives
    validation: Validation issues and result types

Example:
    >>> from dnd_rules.models import Character, Ability
    >>> character = Character(abilities={"strength": 16})
    >>> character.ability_modifier(Ability.STR)
    3
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from dnd_rules.models.enums import (
    Ability,
    AbilityGenerationMethod,
    Alignment,
    ArmorCategory,
    BABProgression,
    CasterProgression,
    EncumbranceLevel,
    ErrorCode,
    FeatType,
    SaveProgression,
    SaveType,
    Severity,
    ShieldCategory,
    Size,
    WarningCode,
    WeaponCategory,
    WeaponStyle,
)

# =============================================================================
# Rule Tables
# =============================================================================
from dnd_rules.models.rules import (
    AbilityAtLeast,
    ArmorRule,
    BABAtLeast,
    CasterLevelAtLeast,
    CharacterLevelAtLeast,
    ClassRule,
    FeatRule,
    GearRule,
    HasFeat,
    IsClass,
    IsSpellcaster,
    ItemRule,
    Prerequisite,
    RaceRule,
    RuleTables,
    ShieldRule,
    SkillRanksAtLeast,
    SkillRule,
    WeaponRule,
)

# =============================================================================
# Character
# =============================================================================
from dnd_rules.models.character import (
    AbilityScore,
    Character,
    CharacterBonuses,
    CharacterSkillState,
    ClassLevel,
    EquippedItem,
    calculate_modifier,
)
from dnd_rules.models.derived import (
    ACBreakdown,
    CarryingCapacity,
    DerivedStats,
    EncumbranceResult,
    FeatSlots,
    HitPoints,
    SaveBreakdown,
    SkillPointBudget,
    SkillTotal,
    WeaponAttack,
)

# =============================================================================
# Validation Results
# =============================================================================
from dnd_rules.models.validation import (
    AllocationResult,
    FeatSelectionResult,
    PointBuyResult,
    PrerequisiteResult,
    ValidationIssue,
    ValidationReport,
    ValidationResult,
)


__all__ = [
    # Enums
    "Ability",
    "AbilityGenerationMethod",
    "Alignment",
    "ArmorCategory",
    "BABProgression",
    "CasterProgression",
    "EncumbranceLevel",
    "ErrorCode",
    "FeatType",
    "SaveProgression",
    "SaveType",
    "Severity",
    "ShieldCategory",
    "Size",
    "WarningCode",
    "WeaponCategory",
    "WeaponStyle",
    # Rule tables
    "AbilityAtLeast",
    "ArmorRule",
    "BABAtLeast",
    "CasterLevelAtLeast",
    "CharacterLevelAtLeast",
    "ClassRule",
    "FeatRule",
    "GearRule",
    "HasFeat",
    "IsClass",
    "IsSpellcaster",
    "ItemRule",
    "Prerequisite",
    "RaceRule",
    "RuleTables",
    "ShieldRule",
    "SkillRanksAtLeast",
    "SkillRule",
    "WeaponRule",
    # Character
    "AbilityScore",
    "Character",
    "CharacterBonuses",
    "CharacterSkillState",
    "ClassLevel",
    "EquippedItem",
    "calculate_modifier",
    # Derived
    "ACBreakdown",
    "CarryingCapacity",
    "DerivedStats",
    "EncumbranceResult",
    "FeatSlots",
    "HitPoints",
    "SaveBreakdown",
    "SkillPointBudget",
    "SkillTotal",
    "WeaponAttack",
    # Validation
    "AllocationResult",
    "FeatSelectionResult",
    "PointBuyResult",
    "PrerequisiteResult",
    "ValidationIssue",
    "ValidationReport",
    "ValidationResult",
]
