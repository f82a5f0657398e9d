"""D&D 3.5 SRD Equipment Data.

Weapons, armor, shields and the adventuring gear that matters for carried
weight. Damage is listed for Small and Medium wielders; weights are the
Medium-size weights in pounds; costs are in gold pieces.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Weapons (PHB Table 7-5)
# =============================================================================

WEAPONS: dict[str, dict[str, Any]] = {
    # Simple light melee
    "gauntlet": {
        "name": "Gauntlet",
        "category": "simple",
        "style": "light",
        "damage_small": "1d2",
        "damage_medium": "1d3",
        "weight": 1,
        "cost_gp": 2,
    },
    "dagger": {
        "name": "Dagger",
        "category": "simple",
        "style": "light",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "critical": "19-20/x2",
        "weight": 1,
        "cost_gp": 2,
    },
    "punching_dagger": {
        "name": "Punching Dagger",
        "category": "simple",
        "style": "light",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "critical": "x3",
        "weight": 1,
        "cost_gp": 2,
    },
    "light_mace": {
        "name": "Light Mace",
        "category": "simple",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 4,
        "cost_gp": 5,
    },
    "sickle": {
        "name": "Sickle",
        "category": "simple",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 2,
        "cost_gp": 6,
    },
    # Simple one-handed melee
    "club": {
        "name": "Club",
        "category": "simple",
        "style": "one_handed",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 3,
        "cost_gp": 0,
    },
    "heavy_mace": {
        "name": "Heavy Mace",
        "category": "simple",
        "style": "one_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "weight": 8,
        "cost_gp": 12,
    },
    "morningstar": {
        "name": "Morningstar",
        "category": "simple",
        "style": "one_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "weight": 6,
        "cost_gp": 8,
    },
    "shortspear": {
        "name": "Shortspear",
        "category": "simple",
        "style": "one_handed",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 3,
        "cost_gp": 1,
    },
    # Simple two-handed melee
    "longspear": {
        "name": "Longspear",
        "category": "simple",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "x3",
        "weight": 9,
        "cost_gp": 5,
    },
    "quarterstaff": {
        "name": "Quarterstaff",
        "category": "simple",
        "style": "two_handed",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 4,
        "cost_gp": 0,
    },
    "spear": {
        "name": "Spear",
        "category": "simple",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "x3",
        "weight": 6,
        "cost_gp": 2,
    },
    # Simple ranged
    "heavy_crossbow": {
        "name": "Heavy Crossbow",
        "category": "simple",
        "style": "ranged",
        "damage_small": "1d8",
        "damage_medium": "1d10",
        "critical": "19-20/x2",
        "weight": 8,
        "cost_gp": 50,
    },
    "light_crossbow": {
        "name": "Light Crossbow",
        "category": "simple",
        "style": "ranged",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "19-20/x2",
        "weight": 4,
        "cost_gp": 35,
    },
    "dart": {
        "name": "Dart",
        "category": "simple",
        "style": "thrown",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "weight": 0.5,
        "cost_gp": 0.5,
    },
    "javelin": {
        "name": "Javelin",
        "category": "simple",
        "style": "thrown",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 2,
        "cost_gp": 1,
    },
    "sling": {
        "name": "Sling",
        "category": "simple",
        "style": "ranged",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "weight": 0,
        "cost_gp": 0,
    },
    # Martial light melee
    "handaxe": {
        "name": "Handaxe",
        "category": "martial",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "critical": "x3",
        "weight": 3,
        "cost_gp": 6,
    },
    "kukri": {
        "name": "Kukri",
        "category": "martial",
        "style": "light",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "critical": "18-20/x2",
        "weight": 2,
        "cost_gp": 8,
    },
    "light_hammer": {
        "name": "Light Hammer",
        "category": "martial",
        "style": "light",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "weight": 2,
        "cost_gp": 1,
    },
    "light_pick": {
        "name": "Light Pick",
        "category": "martial",
        "style": "light",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "critical": "x4",
        "weight": 3,
        "cost_gp": 4,
    },
    "sap": {
        "name": "Sap",
        "category": "martial",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 2,
        "cost_gp": 1,
    },
    "short_sword": {
        "name": "Short Sword",
        "category": "martial",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "critical": "19-20/x2",
        "weight": 2,
        "cost_gp": 10,
    },
    # Martial one-handed melee
    "battleaxe": {
        "name": "Battleaxe",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "x3",
        "weight": 6,
        "cost_gp": 10,
    },
    "flail": {
        "name": "Flail",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "weight": 5,
        "cost_gp": 8,
    },
    "longsword": {
        "name": "Longsword",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "19-20/x2",
        "weight": 4,
        "cost_gp": 15,
    },
    "heavy_pick": {
        "name": "Heavy Pick",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "critical": "x4",
        "weight": 6,
        "cost_gp": 8,
    },
    "rapier": {
        "name": "Rapier",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "critical": "18-20/x2",
        "weight": 2,
        "cost_gp": 20,
    },
    "scimitar": {
        "name": "Scimitar",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "critical": "18-20/x2",
        "weight": 4,
        "cost_gp": 15,
    },
    "trident": {
        "name": "Trident",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "weight": 4,
        "cost_gp": 15,
    },
    "warhammer": {
        "name": "Warhammer",
        "category": "martial",
        "style": "one_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "x3",
        "weight": 5,
        "cost_gp": 12,
    },
    # Martial two-handed melee
    "falchion": {
        "name": "Falchion",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "2d4",
        "critical": "18-20/x2",
        "weight": 8,
        "cost_gp": 75,
    },
    "glaive": {
        "name": "Glaive",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d8",
        "damage_medium": "1d10",
        "critical": "x3",
        "weight": 10,
        "cost_gp": 8,
    },
    "greataxe": {
        "name": "Greataxe",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d10",
        "damage_medium": "1d12",
        "critical": "x3",
        "weight": 12,
        "cost_gp": 20,
    },
    "greatclub": {
        "name": "Greatclub",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d8",
        "damage_medium": "1d10",
        "weight": 8,
        "cost_gp": 5,
    },
    "heavy_flail": {
        "name": "Heavy Flail",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d8",
        "damage_medium": "1d10",
        "critical": "19-20/x2",
        "weight": 10,
        "cost_gp": 15,
    },
    "greatsword": {
        "name": "Greatsword",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d10",
        "damage_medium": "2d6",
        "critical": "19-20/x2",
        "weight": 8,
        "cost_gp": 50,
    },
    "guisarme": {
        "name": "Guisarme",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "2d4",
        "critical": "x3",
        "weight": 12,
        "cost_gp": 9,
    },
    "halberd": {
        "name": "Halberd",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d8",
        "damage_medium": "1d10",
        "critical": "x3",
        "weight": 12,
        "cost_gp": 10,
    },
    "lance": {
        "name": "Lance",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "x3",
        "weight": 10,
        "cost_gp": 10,
    },
    "ranseur": {
        "name": "Ranseur",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "2d4",
        "critical": "x3",
        "weight": 12,
        "cost_gp": 10,
    },
    "scythe": {
        "name": "Scythe",
        "category": "martial",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "2d4",
        "critical": "x4",
        "weight": 10,
        "cost_gp": 18,
    },
    # Martial ranged
    "longbow": {
        "name": "Longbow",
        "category": "martial",
        "style": "ranged",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "x3",
        "weight": 3,
        "cost_gp": 75,
    },
    "composite_longbow": {
        "name": "Composite Longbow",
        "category": "martial",
        "style": "ranged",
        "damage_small": "1d6",
        "damage_medium": "1d8",
        "critical": "x3",
        "weight": 3,
        "cost_gp": 100,
    },
    "shortbow": {
        "name": "Shortbow",
        "category": "martial",
        "style": "ranged",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "critical": "x3",
        "weight": 2,
        "cost_gp": 30,
    },
    "composite_shortbow": {
        "name": "Composite Shortbow",
        "category": "martial",
        "style": "ranged",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "critical": "x3",
        "weight": 2,
        "cost_gp": 75,
    },
    "throwing_axe": {
        "name": "Throwing Axe",
        "category": "martial",
        "style": "thrown",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 2,
        "cost_gp": 8,
    },
    # Exotic
    "kama": {
        "name": "Kama",
        "category": "exotic",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 2,
        "cost_gp": 2,
    },
    "nunchaku": {
        "name": "Nunchaku",
        "category": "exotic",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 2,
        "cost_gp": 2,
    },
    "sai": {
        "name": "Sai",
        "category": "exotic",
        "style": "light",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "weight": 1,
        "cost_gp": 1,
    },
    "siangham": {
        "name": "Siangham",
        "category": "exotic",
        "style": "light",
        "damage_small": "1d4",
        "damage_medium": "1d6",
        "weight": 1,
        "cost_gp": 3,
    },
    "bastard_sword": {
        "name": "Bastard Sword",
        "category": "exotic",
        "style": "one_handed",
        "damage_small": "1d8",
        "damage_medium": "1d10",
        "critical": "19-20/x2",
        "weight": 6,
        "cost_gp": 35,
    },
    "dwarven_waraxe": {
        "name": "Dwarven Waraxe",
        "category": "exotic",
        "style": "one_handed",
        "damage_small": "1d8",
        "damage_medium": "1d10",
        "critical": "x3",
        "weight": 8,
        "cost_gp": 30,
    },
    "whip": {
        "name": "Whip",
        "category": "exotic",
        "style": "one_handed",
        "damage_small": "1d2",
        "damage_medium": "1d3",
        "weight": 2,
        "cost_gp": 1,
    },
    "spiked_chain": {
        "name": "Spiked Chain",
        "category": "exotic",
        "style": "two_handed",
        "damage_small": "1d6",
        "damage_medium": "2d4",
        "weight": 10,
        "cost_gp": 25,
    },
    "hand_crossbow": {
        "name": "Hand Crossbow",
        "category": "exotic",
        "style": "ranged",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "critical": "19-20/x2",
        "weight": 2,
        "cost_gp": 100,
    },
    "shuriken": {
        "name": "Shuriken",
        "category": "exotic",
        "style": "thrown",
        "damage_small": "1",
        "damage_medium": "1d2",
        "weight": 0.5,
        "cost_gp": 1,
    },
    "bolas": {
        "name": "Bolas",
        "category": "exotic",
        "style": "thrown",
        "damage_small": "1d3",
        "damage_medium": "1d4",
        "weight": 2,
        "cost_gp": 5,
    },
}


# =============================================================================
# Armor (PHB Table 7-6)
# =============================================================================

ARMOR: dict[str, dict[str, Any]] = {
    # Light
    "padded": {
        "name": "Padded",
        "category": "light",
        "armor_bonus": 1,
        "max_dex_bonus": 8,
        "armor_check_penalty": 0,
        "arcane_spell_failure": 5,
        "weight": 10,
        "cost_gp": 5,
    },
    "leather": {
        "name": "Leather",
        "category": "light",
        "armor_bonus": 2,
        "max_dex_bonus": 6,
        "armor_check_penalty": 0,
        "arcane_spell_failure": 10,
        "weight": 15,
        "cost_gp": 10,
    },
    "studded_leather": {
        "name": "Studded Leather",
        "category": "light",
        "armor_bonus": 3,
        "max_dex_bonus": 5,
        "armor_check_penalty": -1,
        "arcane_spell_failure": 15,
        "weight": 20,
        "cost_gp": 25,
    },
    "chain_shirt": {
        "name": "Chain Shirt",
        "category": "light",
        "armor_bonus": 4,
        "max_dex_bonus": 4,
        "armor_check_penalty": -2,
        "arcane_spell_failure": 20,
        "weight": 25,
        "cost_gp": 100,
    },
    # Medium
    "hide": {
        "name": "Hide",
        "category": "medium",
        "armor_bonus": 3,
        "max_dex_bonus": 4,
        "armor_check_penalty": -3,
        "arcane_spell_failure": 20,
        "weight": 25,
        "cost_gp": 15,
    },
    "scale_mail": {
        "name": "Scale Mail",
        "category": "medium",
        "armor_bonus": 4,
        "max_dex_bonus": 3,
        "armor_check_penalty": -4,
        "arcane_spell_failure": 25,
        "weight": 30,
        "cost_gp": 50,
    },
    "chainmail": {
        "name": "Chainmail",
        "category": "medium",
        "armor_bonus": 5,
        "max_dex_bonus": 2,
        "armor_check_penalty": -5,
        "arcane_spell_failure": 30,
        "weight": 40,
        "cost_gp": 150,
    },
    "breastplate": {
        "name": "Breastplate",
        "category": "medium",
        "armor_bonus": 5,
        "max_dex_bonus": 3,
        "armor_check_penalty": -4,
        "arcane_spell_failure": 25,
        "weight": 30,
        "cost_gp": 200,
    },
    # Heavy
    "splint_mail": {
        "name": "Splint Mail",
        "category": "heavy",
        "armor_bonus": 6,
        "max_dex_bonus": 0,
        "armor_check_penalty": -7,
        "arcane_spell_failure": 40,
        "weight": 45,
        "cost_gp": 200,
    },
    "banded_mail": {
        "name": "Banded Mail",
        "category": "heavy",
        "armor_bonus": 6,
        "max_dex_bonus": 1,
        "armor_check_penalty": -6,
        "arcane_spell_failure": 35,
        "weight": 35,
        "cost_gp": 250,
    },
    "half_plate": {
        "name": "Half-Plate",
        "category": "heavy",
        "armor_bonus": 7,
        "max_dex_bonus": 0,
        "armor_check_penalty": -7,
        "arcane_spell_failure": 40,
        "weight": 50,
        "cost_gp": 600,
    },
    "full_plate": {
        "name": "Full Plate",
        "category": "heavy",
        "armor_bonus": 8,
        "max_dex_bonus": 1,
        "armor_check_penalty": -6,
        "arcane_spell_failure": 35,
        "weight": 50,
        "cost_gp": 1500,
    },
}


SHIELDS: dict[str, dict[str, Any]] = {
    "buckler": {
        "name": "Buckler",
        "category": "buckler",
        "shield_bonus": 1,
        "armor_check_penalty": -1,
        "weight": 5,
        "cost_gp": 15,
    },
    "light_wooden_shield": {
        "name": "Light Wooden Shield",
        "category": "light",
        "shield_bonus": 1,
        "armor_check_penalty": -1,
        "weight": 5,
        "cost_gp": 3,
    },
    "light_steel_shield": {
        "name": "Light Steel Shield",
        "category": "light",
        "shield_bonus": 1,
        "armor_check_penalty": -1,
        "weight": 6,
        "cost_gp": 9,
    },
    "heavy_wooden_shield": {
        "name": "Heavy Wooden Shield",
        "category": "heavy",
        "shield_bonus": 2,
        "armor_check_penalty": -2,
        "weight": 10,
        "cost_gp": 7,
    },
    "heavy_steel_shield": {
        "name": "Heavy Steel Shield",
        "category": "heavy",
        "shield_bonus": 2,
        "armor_check_penalty": -2,
        "weight": 15,
        "cost_gp": 20,
    },
    "tower_shield": {
        "name": "Tower Shield",
        "category": "tower",
        "shield_bonus": 4,
        "max_dex_bonus": 2,
        "armor_check_penalty": -10,
        "weight": 45,
        "cost_gp": 30,
    },
}


# =============================================================================
# Adventuring Gear (PHB Table 7-8)
# =============================================================================

GEAR: dict[str, dict[str, Any]] = {
    "arrows": {"name": "Arrows (20)", "weight": 3, "cost_gp": 1},
    "backpack": {"name": "Backpack", "weight": 2, "cost_gp": 2},
    "bedroll": {"name": "Bedroll", "weight": 5, "cost_gp": 0.1},
    "blanket": {"name": "Blanket, winter", "weight": 3, "cost_gp": 0.5},
    "bolts": {"name": "Crossbow Bolts (10)", "weight": 1, "cost_gp": 1},
    "crowbar": {"name": "Crowbar", "weight": 5, "cost_gp": 2},
    "flint_and_steel": {"name": "Flint and Steel", "weight": 0, "cost_gp": 1},
    "grappling_hook": {"name": "Grappling Hook", "weight": 4, "cost_gp": 1},
    "hammer": {"name": "Hammer", "weight": 2, "cost_gp": 0.5},
    "healers_kit": {"name": "Healer's Kit", "weight": 1, "cost_gp": 50},
    "holy_symbol_wooden": {"name": "Holy Symbol, wooden", "weight": 0, "cost_gp": 1},
    "holy_symbol_silver": {"name": "Holy Symbol, silver", "weight": 1, "cost_gp": 25},
    "hooded_lantern": {"name": "Lantern, hooded", "weight": 2, "cost_gp": 7},
    "oil_flask": {"name": "Oil (1-pint flask)", "weight": 1, "cost_gp": 0.1},
    "piton": {"name": "Piton", "weight": 0.5, "cost_gp": 0.1},
    "rations": {"name": "Trail Rations (per day)", "weight": 1, "cost_gp": 0.5},
    "rope_hemp": {"name": "Rope, hemp (50 ft.)", "weight": 10, "cost_gp": 1},
    "rope_silk": {"name": "Rope, silk (50 ft.)", "weight": 5, "cost_gp": 10},
    "sack": {"name": "Sack", "weight": 0.5, "cost_gp": 0.1},
    "sling_bullets": {"name": "Sling Bullets (10)", "weight": 5, "cost_gp": 0.1},
    "spell_component_pouch": {"name": "Spell Component Pouch", "weight": 2, "cost_gp": 5},
    "spellbook": {"name": "Spellbook, wizard's (blank)", "weight": 3, "cost_gp": 15},
    "tent": {"name": "Tent", "weight": 20, "cost_gp": 10},
    "thieves_tools": {"name": "Thieves' Tools", "weight": 1, "cost_gp": 30},
    "torch": {"name": "Torch", "weight": 1, "cost_gp": 0.01},
    "waterskin": {"name": "Waterskin", "weight": 4, "cost_gp": 1},
}


__all__ = ["WEAPONS", "ARMOR", "SHIELDS", "GEAR"]
