"""Rules engine calculators for D&D 3.5 characters.

Each submodule is a set of pure functions over a Character and the rule
tables. The validator runs them in dependency order.

Submodules:
    abilities: Modifiers, racial adjustments and ability generation checks
    progression: BAB, saves, hit points, skill points, feat slots, experience
    skills: Skill rank allocation and skill totals
    feats: Feat prerequisites and feat selection
    languages: Automatic and bonus languages
    spellcasting: Spells per day, bonus spells, spell DCs, caster level
    combat: Armor class, attacks, damage, carrying capacity, encumbrance
    validator: Full derivation and validation of a character

Example:
    >>> from dnd_rules.engine import allocate_rank, select_feat
    >>> result = allocate_rank(character, "Climb", +1, tables)
    >>> result.ok
    True
"""

from __future__ import annotations

# =============================================================================
# Abilities
# =============================================================================
from dnd_rules.engine.abilities import (
    apply_racial_adjustments,
    calculate_modifier,
    calculate_point_buy_cost,
    validate_ability_generation,
    validate_absolute_bounds,
    validate_point_buy,
    validate_rolled_scores,
    validate_standard_array,
)

# =============================================================================
# Progression
# =============================================================================
from dnd_rules.engine.progression import (
    calculate_bab,
    calculate_character_hit_points,
    calculate_feat_slots,
    calculate_hit_points,
    calculate_multiclass_xp_penalty,
    calculate_save_base,
    calculate_saves,
    calculate_skill_point_budget,
    calculate_total_bab,
    calculate_total_skill_points,
    experience_for_level,
    iterative_attacks,
    level_for_experience,
)

# =============================================================================
# Skills
# =============================================================================
from dnd_rules.engine.skills import (
    allocate_rank,
    calculate_skill_total,
    calculate_spent_points,
    is_class_skill,
    max_ranks,
    rank_cost,
)

# =============================================================================
# Feats
# =============================================================================
from dnd_rules.engine.feats import (
    PrerequisiteContext,
    available_feats,
    build_prerequisite_context,
    check_prerequisite,
    remove_feat,
    select_feat,
    validate_prerequisites,
)

# =============================================================================
# Languages
# =============================================================================
from dnd_rules.engine.languages import (
    bonus_language_slots,
    is_bonus_language,
    known_languages,
    validate_languages,
)

# =============================================================================
# Spellcasting
# =============================================================================
from dnd_rules.engine.spellcasting import (
    bonus_spells,
    calculate_caster_level,
    calculate_spell_dc,
    get_spells_per_day,
    is_spellcaster,
)

# =============================================================================
# Combat
# =============================================================================
from dnd_rules.engine.combat import (
    calculate_armor_class,
    calculate_attack_bonus,
    calculate_carried_weight,
    calculate_carrying_capacity,
    calculate_damage_expression,
    classify_encumbrance,
    encumbered_speed,
    proficiency_penalty,
)

# =============================================================================
# Validator
# =============================================================================
from dnd_rules.engine.validator import CharacterValidator, validate_character


__all__ = [
    # Abilities
    "apply_racial_adjustments",
    "calculate_modifier",
    "calculate_point_buy_cost",
    "validate_ability_generation",
    "validate_absolute_bounds",
    "validate_point_buy",
    "validate_rolled_scores",
    "validate_standard_array",
    # Progression
    "calculate_bab",
    "calculate_character_hit_points",
    "calculate_feat_slots",
    "calculate_hit_points",
    "calculate_multiclass_xp_penalty",
    "calculate_save_base",
    "calculate_saves",
    "calculate_skill_point_budget",
    "calculate_total_bab",
    "calculate_total_skill_points",
    "experience_for_level",
    "iterative_attacks",
    "level_for_experience",
    # Skills
    "allocate_rank",
    "calculate_skill_total",
    "calculate_spent_points",
    "is_class_skill",
    "max_ranks",
    "rank_cost",
    # Feats
    "PrerequisiteContext",
    "available_feats",
    "build_prerequisite_context",
    "check_prerequisite",
    "remove_feat",
    "select_feat",
    "validate_prerequisites",
    # Languages
    "bonus_language_slots",
    "is_bonus_language",
    "known_languages",
    "validate_languages",
    # Spellcasting
    "bonus_spells",
    "calculate_caster_level",
    "calculate_spell_dc",
    "get_spells_per_day",
    "is_spellcaster",
    # Combat
    "calculate_armor_class",
    "calculate_attack_bonus",
    "calculate_carried_weight",
    "calculate_carrying_capacity",
    "calculate_damage_expression",
    "classify_encumbrance",
    "encumbered_speed",
    "proficiency_penalty",
    # Validator
    "CharacterValidator",
    "validate_character",
]
