"""D&D 3.5 SRD Race Data.

The seven core races. Only unconditional racial bonuses appear under
``modifiers``; situational ones (e.g. a dwarf's save bonus against poison)
are listed as special abilities for the sheet to display.
"""

from __future__ import annotations

from typing import Any


RACES: dict[str, dict[str, Any]] = {
    "human": {
        "name": "Human",
        "size": "medium",
        "base_speed": 30,
        "ability_adjustments": {},
        "special_abilities": (
            "1 extra feat at 1st level",
            "4 extra skill points at 1st level and 1 extra skill point at each additional level",
            "Favored class: any",
        ),
        "automatic_languages": {"Common"},
        "bonus_languages": {"Any"},
        "favored_class": None,
        "bonus_feats": 1,
        "bonus_skill_points_per_level": 1,
    },
    "dwarf": {
        "name": "Dwarf",
        "size": "medium",
        "base_speed": 20,
        "ability_adjustments": {"constitution": 2, "charisma": -2},
        "special_abilities": (
            "Darkvision 60 ft.",
            "Stonecunning",
            "Weapon familiarity: dwarven waraxe and dwarven urgrosh are martial weapons",
            "Stability: +4 bonus against bull rush and trip",
            "+2 racial bonus on saves against poison",
            "+2 racial bonus on saves against spells and spell-like effects",
            "+1 racial bonus on attack rolls against orcs and goblinoids",
            "+4 dodge bonus to AC against giants",
            "Speed is not reduced by medium or heavy armor or load",
        ),
        "automatic_languages": {"Common", "Dwarven"},
        "bonus_languages": {"Giant", "Gnome", "Goblin", "Orc", "Terran", "Undercommon"},
        "favored_class": "fighter",
    },
    "elf": {
        "name": "Elf",
        "size": "medium",
        "base_speed": 30,
        "ability_adjustments": {"dexterity": 2, "constitution": -2},
        "special_abilities": (
            "Immunity to magic sleep effects",
            "+2 racial bonus on saves against enchantment spells or effects",
            "Low-light vision",
            "Weapon proficiency: longsword, rapier, longbow and shortbow",
            "Automatic Search check when passing within 5 ft. of a secret door",
        ),
        "automatic_languages": {"Common", "Elven"},
        "bonus_languages": {"Draconic", "Gnoll", "Gnome", "Goblin", "Orc", "Sylvan"},
        "favored_class": "wizard",
        "weapon_ids": {"longsword", "rapier", "longbow", "shortbow"},
        "modifiers": {"skill:Listen": 2, "skill:Search": 2, "skill:Spot": 2},
    },
    "gnome": {
        "name": "Gnome",
        "size": "small",
        "base_speed": 20,
        "ability_adjustments": {"constitution": 2, "strength": -2},
        "special_abilities": (
            "Low-light vision",
            "Weapon familiarity: gnome hooked hammer is a martial weapon",
            "+2 racial bonus on saves against illusions",
            "+1 to the save DC of illusion spells cast",
            "+1 racial bonus on attack rolls against kobolds and goblinoids",
            "+4 dodge bonus to AC against giants",
            "+2 racial bonus on Craft (alchemy) checks",
            "Spell-like abilities: speak with animals, dancing lights, ghost sound, prestidigitation",
        ),
        "automatic_languages": {"Common", "Gnome"},
        "bonus_languages": {"Draconic", "Dwarven", "Elven", "Giant", "Goblin", "Orc"},
        "favored_class": "bard",
        "modifiers": {"skill:Listen": 2},
    },
    "half-elf": {
        "name": "Half-Elf",
        "size": "medium",
        "base_speed": 30,
        "ability_adjustments": {},
        "special_abilities": (
            "Immunity to magic sleep effects",
            "+2 racial bonus on saves against enchantment spells or effects",
            "Low-light vision",
            "Elven blood: counts as an elf for effects related to race",
        ),
        "automatic_languages": {"Common", "Elven"},
        "bonus_languages": {"Any"},
        "favored_class": None,
        "modifiers": {
            "skill:Listen": 1,
            "skill:Search": 1,
            "skill:Spot": 1,
            "skill:Diplomacy": 2,
            "skill:Gather Information": 2,
        },
    },
    "half-orc": {
        "name": "Half-Orc",
        "size": "medium",
        "base_speed": 30,
        "ability_adjustments": {"strength": 2, "intelligence": -2, "charisma": -2},
        "special_abilities": (
            "Darkvision 60 ft.",
            "Orc blood: counts as an orc for effects related to race",
        ),
        "automatic_languages": {"Common", "Orc"},
        "bonus_languages": {"Draconic", "Giant", "Gnoll", "Goblin", "Abyssal"},
        "favored_class": "barbarian",
    },
    "halfling": {
        "name": "Halfling",
        "size": "small",
        "base_speed": 20,
        "ability_adjustments": {"dexterity": 2, "strength": -2},
        "special_abilities": (
            "+1 racial bonus on all saving throws",
            "+2 morale bonus on saves against fear",
            "+1 racial bonus on attack rolls with thrown weapons and slings",
            "+2 racial bonus on Climb, Jump, Listen and Move Silently checks",
        ),
        "automatic_languages": {"Common", "Halfling"},
        "bonus_languages": {"Dwarven", "Elven", "Gnome", "Goblin", "Orc"},
        "favored_class": "rogue",
        "modifiers": {
            "fortitude": 1,
            "reflex": 1,
            "will": 1,
            "skill:Climb": 2,
            "skill:Jump": 2,
            "skill:Listen": 2,
            "skill:Move Silently": 2,
        },
    },
}


__all__ = ["RACES"]
