"""D&D 3.5 SRD Skill Data.

Key ability, trained-only flag and armor check penalty flag for every skill.
Knowledge is split into its ten fields. Craft, Perform and Profession are
listed once; sub-specialties share ranks.
"""

from __future__ import annotations

from typing import Any


KNOWLEDGE_FIELDS: tuple[str, ...] = (
    "arcana",
    "architecture and engineering",
    "dungeoneering",
    "geography",
    "history",
    "local",
    "nature",
    "nobility and royalty",
    "religion",
    "the planes",
)

ALL_KNOWLEDGE: frozenset[str] = frozenset(
    f"Knowledge ({field})" for field in KNOWLEDGE_FIELDS
)


SKILLS: dict[str, dict[str, Any]] = {
    "Appraise": {"key_ability": "intelligence"},
    "Balance": {"key_ability": "dexterity", "armor_check_penalty": True},
    "Bluff": {"key_ability": "charisma"},
    "Climb": {"key_ability": "strength", "armor_check_penalty": True},
    "Concentration": {"key_ability": "constitution"},
    "Craft": {"key_ability": "intelligence"},
    "Decipher Script": {"key_ability": "intelligence", "trained_only": True},
    "Diplomacy": {"key_ability": "charisma"},
    "Disable Device": {"key_ability": "intelligence", "trained_only": True},
    "Disguise": {"key_ability": "charisma"},
    "Escape Artist": {"key_ability": "dexterity", "armor_check_penalty": True},
    "Forgery": {"key_ability": "intelligence"},
    "Gather Information": {"key_ability": "charisma"},
    "Handle Animal": {"key_ability": "charisma", "trained_only": True},
    "Heal": {"key_ability": "wisdom"},
    "Hide": {"key_ability": "dexterity", "armor_check_penalty": True},
    "Intimidate": {"key_ability": "charisma"},
    "Jump": {"key_ability": "strength", "armor_check_penalty": True},
    **{
        name: {"key_ability": "intelligence", "trained_only": True}
        for name in sorted(ALL_KNOWLEDGE)
    },
    "Listen": {"key_ability": "wisdom"},
    "Move Silently": {"key_ability": "dexterity", "armor_check_penalty": True},
    "Open Lock": {"key_ability": "dexterity", "trained_only": True},
    "Perform": {"key_ability": "charisma"},
    "Profession": {"key_ability": "wisdom", "trained_only": True},
    "Ride": {"key_ability": "dexterity"},
    "Search": {"key_ability": "intelligence"},
    "Sense Motive": {"key_ability": "wisdom"},
    "Sleight of Hand": {
        "key_ability": "dexterity",
        "trained_only": True,
        "armor_check_penalty": True,
    },
    "Spellcraft": {"key_ability": "intelligence", "trained_only": True},
    "Spot": {"key_ability": "wisdom"},
    "Survival": {"key_ability": "wisdom"},
    "Swim": {"key_ability": "strength", "armor_check_penalty": True},
    "Tumble": {
        "key_ability": "dexterity",
        "trained_only": True,
        "armor_check_penalty": True,
    },
    "Use Magic Device": {"key_ability": "charisma", "trained_only": True},
    "Use Rope": {"key_ability": "dexterity"},
}


__all__ = ["KNOWLEDGE_FIELDS", "ALL_KNOWLEDGE", "SKILLS"]
