"""dnd_rules - D&D 3.5 Character Rules & Validation Engine.

A deterministic rules core for building and checking D&D 3.5 characters.

RULES ENGINE CONTRACT:
- Rule tables are immutable data, loaded once and shared by reference
- Characters store raw selections and rule ids; everything else is derived
- Player mistakes come back as structured issues, never as exceptions
- No operation modifies its input; every update returns a new Character

Example:
    >>> from dnd_rules import Character, get_rule_tables, validate_character
    >>>
    >>> tables = get_rule_tables()
    >>> hero = Character.from_snapshot({
    ...     "name": "Thorin",
    ...     "abilities": {"strength": 15, "constitution": 14},
    ...     "race_id": "dwarf",
    ...     "classes": [{"class_id": "fighter", "level": 1}],
    ... })
    >>> report = validate_character(hero, tables)
    >>> report.derived.hit_points.maximum
    12

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for rule entries, characters and results.
    tables: Bundled SRD rule data and the cached RuleTables loader.
    engine: Calculators, allocators and the character validator.
"""

from __future__ import annotations

# Core
from dnd_rules.core.config import RulesSettings, get_settings
from dnd_rules.core.exceptions import (
    InvalidSelectionError,
    RulesEngineError,
    RuleTableError,
    UnknownRuleIdError,
)
from dnd_rules.core.logging import configure_logging, get_logger

# Models
from dnd_rules.models import (
    Ability,
    AbilityGenerationMethod,
    Alignment,
    Character,
    ClassLevel,
    DerivedStats,
    EquippedItem,
    ErrorCode,
    RuleTables,
    ValidationIssue,
    ValidationReport,
    WarningCode,
)

# Rule data
from dnd_rules.tables import build_rule_tables, clear_rule_tables_cache, get_rule_tables

# Engine
from dnd_rules.engine import (
    CharacterValidator,
    allocate_rank,
    apply_racial_adjustments,
    available_feats,
    select_feat,
    validate_character,
    validate_languages,
    validate_point_buy,
    validate_prerequisites,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "RulesEngineError",
    "UnknownRuleIdError",
    "RuleTableError",
    "InvalidSelectionError",
    "RulesSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Ability",
    "AbilityGenerationMethod",
    "Alignment",
    "Character",
    "ClassLevel",
    "DerivedStats",
    "EquippedItem",
    "ErrorCode",
    "RuleTables",
    "ValidationIssue",
    "ValidationReport",
    "WarningCode",
    # Rule data
    "build_rule_tables",
    "get_rule_tables",
    "clear_rule_tables_cache",
    # Engine
    "CharacterValidator",
    "allocate_rank",
    "apply_racial_adjustments",
    "available_feats",
    "select_feat",
    "validate_character",
    "validate_languages",
    "validate_point_buy",
    "validate_prerequisites",
]
