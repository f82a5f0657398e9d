"""Rules constants for the D&D 3.5 engine.

Values here are fixed by the System Reference Document. Anything a table
might house-rule is exposed again through ``RulesSettings``.
"""

from __future__ import annotations

# =============================================================================
# Ability Scores
# =============================================================================

ABSOLUTE_MIN_ABILITY_SCORE = 1
"""Lowest ability total the engine accepts."""

ABSOLUTE_MAX_ABILITY_SCORE = 50
"""Highest ability total the engine accepts."""

DEFAULT_ABILITY_SCORE = 10
"""Score given to every ability of a fresh character."""

# =============================================================================
# Point Buy (DMG p.169)
# =============================================================================

POINT_BUY_BUDGET = 28
"""Default point-buy budget for a standard campaign."""

POINT_BUY_MIN = 8
"""Minimum purchasable score."""

POINT_BUY_MAX = 18
"""Maximum purchasable score."""

POINT_BUY_COSTS: dict[int, int] = {
    8: 0,
    9: 1,
    10: 2,
    11: 3,
    12: 4,
    13: 5,
    14: 6,
    15: 8,
    16: 10,
    17: 13,
    18: 16,
}

# =============================================================================
# Other Generation Methods
# =============================================================================

STANDARD_ARRAY: tuple[int, ...] = (15, 14, 13, 12, 10, 8)
"""Standard array, assigned to abilities in any order."""

ROLLED_SCORE_MIN = 3
"""Lowest result of 4d6 drop lowest."""

ROLLED_SCORE_MAX = 18
"""Highest result of 4d6 drop lowest."""

# =============================================================================
# Character Progression
# =============================================================================

MIN_CHARACTER_LEVEL = 1
MAX_CHARACTER_LEVEL = 20

FIRST_LEVEL_SKILL_MULTIPLIER = 4
"""Skill points at 1st level are four times the per-level amount."""

CROSS_CLASS_RANK_COST = 2
CLASS_SKILL_RANK_COST = 1

FEAT_LEVEL_INTERVAL = 3
"""A general feat slot is gained at 1st level and every third level."""

MAX_ITERATIVE_ATTACKS = 4
ITERATIVE_ATTACK_STEP = 5

MULTICLASS_XP_PENALTY = 0.2
"""Experience penalty per multiclass imbalance."""

# =============================================================================
# Combat
# =============================================================================

BASE_ARMOR_CLASS = 10
NONPROFICIENT_ATTACK_PENALTY = -4
TWO_HANDED_STRENGTH_MULTIPLIER = 1.5

# =============================================================================
# Spellcasting
# =============================================================================

BASE_SPELL_DC = 10
MAX_SPELL_LEVEL = 9
HALF_CASTER_FIRST_LEVEL = 4
"""Paladins and rangers gain spells (and a caster level) at 4th level."""


__all__ = [
    "ABSOLUTE_MIN_ABILITY_SCORE",
    "ABSOLUTE_MAX_ABILITY_SCORE",
    "DEFAULT_ABILITY_SCORE",
    "POINT_BUY_BUDGET",
    "POINT_BUY_MIN",
    "POINT_BUY_MAX",
    "POINT_BUY_COSTS",
    "STANDARD_ARRAY",
    "ROLLED_SCORE_MIN",
    "ROLLED_SCORE_MAX",
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "FIRST_LEVEL_SKILL_MULTIPLIER",
    "CROSS_CLASS_RANK_COST",
    "CLASS_SKILL_RANK_COST",
    "FEAT_LEVEL_INTERVAL",
    "MAX_ITERATIVE_ATTACKS",
    "ITERATIVE_ATTACK_STEP",
    "MULTICLASS_XP_PENALTY",
    "BASE_ARMOR_CLASS",
    "NONPROFICIENT_ATTACK_PENALTY",
    "TWO_HANDED_STRENGTH_MULTIPLIER",
    "BASE_SPELL_DC",
    "MAX_SPELL_LEVEL",
    "HALF_CASTER_FIRST_LEVEL",
]
