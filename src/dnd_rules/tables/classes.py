"""D&D 3.5 SRD Class Data.

The eleven core classes: hit die, skill points, class skills, progressions,
proficiencies, alignment restrictions and spells per day.

Spells-per-day rows are written the way the class tables print them: one row
per class level, one column per spell level. A 0 means the class only gets
bonus spells at that spell level.
"""

from __future__ import annotations

from typing import Any

from dnd_rules.tables.skills import ALL_KNOWLEDGE


def _slots(
    rows: list[list[int]],
    *,
    first_class_level: int = 1,
    first_spell_level: int = 0,
) -> dict[int, dict[int, int]]:
    """Turn printed spells-per-day rows into class level -> spell level -> slots."""
    return {
        class_level: {
            first_spell_level + offset: slots for offset, slots in enumerate(row)
        }
        for class_level, row in enumerate(rows, start=first_class_level)
    }


# =============================================================================
# Spells per Day
# =============================================================================

BARD_SPELLS: dict[int, dict[int, int]] = _slots([
    [2],
    [3, 0],
    [3, 1],
    [3, 2, 0],
    [3, 3, 1],
    [3, 3, 2],
    [3, 3, 2, 0],
    [3, 3, 3, 1],
    [3, 3, 3, 2],
    [3, 3, 3, 2, 0],
    [3, 3, 3, 3, 1],
    [3, 3, 3, 3, 2],
    [3, 3, 3, 3, 2, 0],
    [4, 3, 3, 3, 3, 1],
    [4, 4, 3, 3, 3, 2],
    [4, 4, 4, 3, 3, 2, 0],
    [4, 4, 4, 4, 3, 3, 1],
    [4, 4, 4, 4, 4, 3, 2],
    [4, 4, 4, 4, 4, 4, 3],
    [4, 4, 4, 4, 4, 4, 4],
])

# Shared by clerics (before domain slots) and druids.
DIVINE_SPELLS: dict[int, dict[int, int]] = _slots([
    [3, 1],
    [4, 2],
    [4, 2, 1],
    [5, 3, 2],
    [5, 3, 2, 1],
    [5, 3, 3, 2],
    [6, 4, 3, 2, 1],
    [6, 4, 3, 3, 2],
    [6, 4, 4, 3, 2, 1],
    [6, 4, 4, 3, 3, 2],
    [6, 5, 4, 4, 3, 2, 1],
    [6, 5, 4, 4, 3, 3, 2],
    [6, 5, 5, 4, 4, 3, 2, 1],
    [6, 5, 5, 4, 4, 3, 3, 2],
    [6, 5, 5, 5, 4, 4, 3, 2, 1],
    [6, 5, 5, 5, 4, 4, 3, 3, 2],
    [6, 5, 5, 5, 5, 4, 4, 3, 2, 1],
    [6, 5, 5, 5, 5, 4, 4, 3, 3, 2],
    [6, 5, 5, 5, 5, 5, 4, 4, 3, 3],
    [6, 5, 5, 5, 5, 5, 4, 4, 4, 4],
])

# Paladins and rangers cast from 4th level, starting at spell level 1.
HALF_CASTER_SPELLS: dict[int, dict[int, int]] = _slots(
    [
        [0],
        [0],
        [1],
        [1],
        [1, 0],
        [1, 0],
        [1, 1],
        [1, 1, 0],
        [1, 1, 1],
        [1, 1, 1],
        [2, 1, 1, 0],
        [2, 1, 1, 1],
        [2, 2, 1, 1],
        [2, 2, 2, 1],
        [3, 2, 2, 1],
        [3, 3, 3, 2],
        [3, 3, 3, 3],
    ],
    first_class_level=4,
    first_spell_level=1,
)

SORCERER_SPELLS: dict[int, dict[int, int]] = _slots([
    [5, 3],
    [6, 4],
    [6, 5],
    [6, 6, 3],
    [6, 6, 4],
    [6, 6, 5, 3],
    [6, 6, 6, 4],
    [6, 6, 6, 5, 3],
    [6, 6, 6, 6, 4],
    [6, 6, 6, 6, 5, 3],
    [6, 6, 6, 6, 6, 4],
    [6, 6, 6, 6, 6, 5, 3],
    [6, 6, 6, 6, 6, 6, 4],
    [6, 6, 6, 6, 6, 6, 5, 3],
    [6, 6, 6, 6, 6, 6, 6, 4],
    [6, 6, 6, 6, 6, 6, 6, 5, 3],
    [6, 6, 6, 6, 6, 6, 6, 6, 4],
    [6, 6, 6, 6, 6, 6, 6, 6, 5, 3],
    [6, 6, 6, 6, 6, 6, 6, 6, 6, 4],
    [6, 6, 6, 6, 6, 6, 6, 6, 6, 6],
])

WIZARD_SPELLS: dict[int, dict[int, int]] = _slots([
    [3, 1],
    [4, 2],
    [4, 2, 1],
    [4, 3, 2],
    [4, 3, 2, 1],
    [4, 3, 3, 2],
    [4, 4, 3, 2, 1],
    [4, 4, 3, 3, 2],
    [4, 4, 4, 3, 2, 1],
    [4, 4, 4, 3, 3, 2],
    [4, 4, 4, 4, 3, 2, 1],
    [4, 4, 4, 4, 3, 3, 2],
    [4, 4, 4, 4, 4, 3, 2, 1],
    [4, 4, 4, 4, 4, 3, 3, 2],
    [4, 4, 4, 4, 4, 4, 3, 2, 1],
    [4, 4, 4, 4, 4, 4, 3, 3, 2],
    [4, 4, 4, 4, 4, 4, 4, 3, 2, 1],
    [4, 4, 4, 4, 4, 4, 4, 3, 3, 2],
    [4, 4, 4, 4, 4, 4, 4, 4, 3, 3],
    [4, 4, 4, 4, 4, 4, 4, 4, 4, 4],
])


# =============================================================================
# Alignment Restrictions
# =============================================================================

NONLAWFUL: frozenset[str] = frozenset({
    "neutral_good",
    "chaotic_good",
    "true_neutral",
    "chaotic_neutral",
    "neutral_evil",
    "chaotic_evil",
})

LAWFUL: frozenset[str] = frozenset({"lawful_good", "lawful_neutral", "lawful_evil"})

# Druids must be neutral on at least one axis.
DRUID_ALIGNMENTS: frozenset[str] = frozenset({
    "neutral_good",
    "lawful_neutral",
    "true_neutral",
    "chaotic_neutral",
    "neutral_evil",
})

ALL_SHIELDS_BUT_TOWER: frozenset[str] = frozenset({"buckler", "light", "heavy"})


# =============================================================================
# Classes (PHB Chapter 3)
# =============================================================================

CLASSES: dict[str, dict[str, Any]] = {
    "barbarian": {
        "name": "Barbarian",
        "hit_die": 12,
        "skill_points_per_level": 4,
        "class_skills": {
            "Climb", "Craft", "Handle Animal", "Intimidate", "Jump",
            "Listen", "Ride", "Survival", "Swim",
        },
        "bab": "full",
        "saves": {"fortitude": "good", "reflex": "poor", "will": "poor"},
        "weapon_categories": {"simple", "martial"},
        "armor_categories": {"light", "medium"},
        "shield_categories": ALL_SHIELDS_BUT_TOWER,
        "allowed_alignments": NONLAWFUL,
    },
    "bard": {
        "name": "Bard",
        "hit_die": 6,
        "skill_points_per_level": 6,
        "class_skills": {
            "Appraise", "Balance", "Bluff", "Climb", "Concentration", "Craft",
            "Decipher Script", "Diplomacy", "Disguise", "Escape Artist",
            "Gather Information", "Hide", "Jump", "Listen", "Move Silently",
            "Perform", "Profession", "Sense Motive", "Sleight of Hand",
            "Spellcraft", "Swim", "Tumble", "Use Magic Device",
        } | ALL_KNOWLEDGE,
        "bab": "medium",
        "saves": {"fortitude": "poor", "reflex": "good", "will": "good"},
        "spellcasting": True,
        "caster_progression": "full",
        "spellcasting_ability": "charisma",
        "spells_per_day": BARD_SPELLS,
        "weapon_categories": {"simple"},
        "weapon_ids": {"longsword", "rapier", "sap", "short_sword", "shortbow", "whip"},
        "armor_categories": {"light"},
        "shield_categories": ALL_SHIELDS_BUT_TOWER,
        "allowed_alignments": NONLAWFUL,
    },
    "cleric": {
        "name": "Cleric",
        "hit_die": 8,
        "skill_points_per_level": 2,
        "class_skills": {
            "Concentration", "Craft", "Diplomacy", "Heal",
            "Knowledge (arcana)", "Knowledge (history)", "Knowledge (religion)",
            "Knowledge (the planes)", "Profession", "Spellcraft",
        },
        "bab": "medium",
        "saves": {"fortitude": "good", "reflex": "poor", "will": "good"},
        "spellcasting": True,
        "caster_progression": "full",
        "spellcasting_ability": "wisdom",
        "spells_per_day": DIVINE_SPELLS,
        "weapon_categories": {"simple"},
        "armor_categories": {"light", "medium", "heavy"},
        "shield_categories": ALL_SHIELDS_BUT_TOWER,
    },
    "druid": {
        "name": "Druid",
        "hit_die": 8,
        "skill_points_per_level": 4,
        "class_skills": {
            "Concentration", "Craft", "Diplomacy", "Handle Animal", "Heal",
            "Knowledge (nature)", "Listen", "Profession", "Ride", "Spellcraft",
            "Spot", "Survival", "Swim",
        },
        "bab": "medium",
        "saves": {"fortitude": "good", "reflex": "poor", "will": "good"},
        "spellcasting": True,
        "caster_progression": "full",
        "spellcasting_ability": "wisdom",
        "spells_per_day": DIVINE_SPELLS,
        "weapon_ids": {
            "club", "dagger", "dart", "quarterstaff", "scimitar", "sickle",
            "shortspear", "sling", "spear",
        },
        "armor_categories": {"light", "medium"},
        "shield_categories": {"light", "heavy"},
        "allowed_alignments": DRUID_ALIGNMENTS,
    },
    "fighter": {
        "name": "Fighter",
        "hit_die": 10,
        "skill_points_per_level": 2,
        "class_skills": {
            "Climb", "Craft", "Handle Animal", "Intimidate", "Jump", "Ride", "Swim",
        },
        "bab": "full",
        "saves": {"fortitude": "good", "reflex": "poor", "will": "poor"},
        "bonus_feat_levels": {1, *range(2, 21, 2)},
        "weapon_categories": {"simple", "martial"},
        "armor_categories": {"light", "medium", "heavy"},
        "shield_categories": {"buckler", "light", "heavy", "tower"},
    },
    "monk": {
        "name": "Monk",
        "hit_die": 8,
        "skill_points_per_level": 4,
        "class_skills": {
            "Balance", "Climb", "Concentration", "Craft", "Diplomacy",
            "Escape Artist", "Hide", "Jump", "Knowledge (arcana)",
            "Knowledge (religion)", "Listen", "Move Silently", "Perform",
            "Profession", "Sense Motive", "Spot", "Swim", "Tumble",
        },
        "bab": "medium",
        "saves": {"fortitude": "good", "reflex": "good", "will": "good"},
        "bonus_feat_levels": {1, 2, 6},
        "weapon_ids": {
            "club", "light_crossbow", "heavy_crossbow", "dagger", "handaxe",
            "javelin", "kama", "nunchaku", "quarterstaff", "sai", "shuriken",
            "siangham", "sling",
        },
        "allowed_alignments": LAWFUL,
    },
    "paladin": {
        "name": "Paladin",
        "hit_die": 10,
        "skill_points_per_level": 2,
        "class_skills": {
            "Concentration", "Craft", "Diplomacy", "Handle Animal", "Heal",
            "Knowledge (nobility and royalty)", "Knowledge (religion)",
            "Profession", "Ride", "Sense Motive",
        },
        "bab": "full",
        "saves": {"fortitude": "good", "reflex": "poor", "will": "poor"},
        "spellcasting": True,
        "caster_progression": "half",
        "spellcasting_ability": "wisdom",
        "spells_per_day": HALF_CASTER_SPELLS,
        "weapon_categories": {"simple", "martial"},
        "armor_categories": {"light", "medium", "heavy"},
        "shield_categories": ALL_SHIELDS_BUT_TOWER,
        "allowed_alignments": {"lawful_good"},
    },
    "ranger": {
        "name": "Ranger",
        "hit_die": 8,
        "skill_points_per_level": 6,
        "class_skills": {
            "Climb", "Concentration", "Craft", "Handle Animal", "Heal", "Hide",
            "Jump", "Knowledge (dungeoneering)", "Knowledge (geography)",
            "Knowledge (nature)", "Listen", "Move Silently", "Profession",
            "Ride", "Search", "Spot", "Survival", "Swim", "Use Rope",
        },
        "bab": "full",
        "saves": {"fortitude": "good", "reflex": "good", "will": "poor"},
        "spellcasting": True,
        "caster_progression": "half",
        "spellcasting_ability": "wisdom",
        "spells_per_day": HALF_CASTER_SPELLS,
        "weapon_categories": {"simple", "martial"},
        "armor_categories": {"light"},
        "shield_categories": ALL_SHIELDS_BUT_TOWER,
    },
    "rogue": {
        "name": "Rogue",
        "hit_die": 6,
        "skill_points_per_level": 8,
        "class_skills": {
            "Appraise", "Balance", "Bluff", "Climb", "Craft", "Decipher Script",
            "Diplomacy", "Disable Device", "Disguise", "Escape Artist",
            "Forgery", "Gather Information", "Hide", "Intimidate", "Jump",
            "Knowledge (local)", "Listen", "Move Silently", "Open Lock",
            "Perform", "Profession", "Search", "Sense Motive",
            "Sleight of Hand", "Spot", "Swim", "Tumble", "Use Magic Device",
            "Use Rope",
        },
        "bab": "medium",
        "saves": {"fortitude": "poor", "reflex": "good", "will": "poor"},
        "weapon_categories": {"simple"},
        "weapon_ids": {"hand_crossbow", "rapier", "sap", "shortbow", "short_sword"},
        "armor_categories": {"light"},
    },
    "sorcerer": {
        "name": "Sorcerer",
        "hit_die": 4,
        "skill_points_per_level": 2,
        "class_skills": {
            "Bluff", "Concentration", "Craft", "Knowledge (arcana)",
            "Profession", "Spellcraft",
        },
        "bab": "poor",
        "saves": {"fortitude": "poor", "reflex": "poor", "will": "good"},
        "spellcasting": True,
        "caster_progression": "full",
        "spellcasting_ability": "charisma",
        "spells_per_day": SORCERER_SPELLS,
        "weapon_categories": {"simple"},
    },
    "wizard": {
        "name": "Wizard",
        "hit_die": 4,
        "skill_points_per_level": 2,
        "class_skills": {
            "Concentration", "Craft", "Decipher Script", "Profession", "Spellcraft",
        } | ALL_KNOWLEDGE,
        "bab": "poor",
        "saves": {"fortitude": "poor", "reflex": "poor", "will": "good"},
        "spellcasting": True,
        "caster_progression": "full",
        "spellcasting_ability": "intelligence",
        "spells_per_day": WIZARD_SPELLS,
        "bonus_feat_levels": {5, 10, 15, 20},
        "weapon_ids": {"club", "dagger", "heavy_crossbow", "light_crossbow", "quarterstaff"},
    },
}


__all__ = [
    "BARD_SPELLS",
    "DIVINE_SPELLS",
    "HALF_CASTER_SPELLS",
    "SORCERER_SPELLS",
    "WIZARD_SPELLS",
    "CLASSES",
]
