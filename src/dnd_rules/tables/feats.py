"""D&D 3.5 SRD Feat Data.

Feats from the core rules with their prerequisites written as predicate
data. Feats that require a choice (Weapon Focus, Spell Focus ...) are listed
once; the choice itself is not modelled.

Only unconditional bonuses appear under ``modifiers``. Everything else lives
in the benefit text.
"""

from __future__ import annotations

from typing import Any


def _ability(ability: str, value: int) -> dict[str, Any]:
    return {"kind": "ability_at_least", "ability": ability, "value": value}


def _feat(name: str) -> dict[str, Any]:
    return {"kind": "has_feat", "name": name}


def _bab(value: int) -> dict[str, Any]:
    return {"kind": "bab_at_least", "value": value}


def _ranks(skill: str, ranks: int) -> dict[str, Any]:
    return {"kind": "skill_ranks_at_least", "skill": skill, "ranks": ranks}


def _class(name: str, level: int = 1) -> dict[str, Any]:
    return {"kind": "is_class", "name": name, "level": level}


def _caster_level(level: int) -> dict[str, Any]:
    return {"kind": "caster_level_at_least", "level": level}


SPELLCASTER: dict[str, Any] = {"kind": "is_spellcaster"}


def _skill_bonus(*skills: str, bonus: int = 2) -> dict[str, int]:
    return {f"skill:{skill}": bonus for skill in skills}


# =============================================================================
# General Feats
# =============================================================================

GENERAL_FEATS: dict[str, dict[str, Any]] = {
    "Acrobatic": {
        "benefit": "+2 bonus on Jump and Tumble checks.",
        "modifiers": _skill_bonus("Jump", "Tumble"),
    },
    "Agile": {
        "benefit": "+2 bonus on Balance and Escape Artist checks.",
        "modifiers": _skill_bonus("Balance", "Escape Artist"),
    },
    "Alertness": {
        "benefit": "+2 bonus on Listen and Spot checks.",
        "modifiers": _skill_bonus("Listen", "Spot"),
    },
    "Animal Affinity": {
        "benefit": "+2 bonus on Handle Animal and Ride checks.",
        "modifiers": _skill_bonus("Handle Animal", "Ride"),
    },
    "Athletic": {
        "benefit": "+2 bonus on Climb and Swim checks.",
        "modifiers": _skill_bonus("Climb", "Swim"),
    },
    "Deceitful": {
        "benefit": "+2 bonus on Disguise and Forgery checks.",
        "modifiers": _skill_bonus("Disguise", "Forgery"),
    },
    "Deft Hands": {
        "benefit": "+2 bonus on Sleight of Hand and Use Rope checks.",
        "modifiers": _skill_bonus("Sleight of Hand", "Use Rope"),
    },
    "Diligent": {
        "benefit": "+2 bonus on Appraise and Decipher Script checks.",
        "modifiers": _skill_bonus("Appraise", "Decipher Script"),
    },
    "Investigator": {
        "benefit": "+2 bonus on Gather Information and Search checks.",
        "modifiers": _skill_bonus("Gather Information", "Search"),
    },
    "Magical Aptitude": {
        "benefit": "+2 bonus on Spellcraft and Use Magic Device checks.",
        "modifiers": _skill_bonus("Spellcraft", "Use Magic Device"),
    },
    "Negotiator": {
        "benefit": "+2 bonus on Diplomacy and Sense Motive checks.",
        "modifiers": _skill_bonus("Diplomacy", "Sense Motive"),
    },
    "Nimble Fingers": {
        "benefit": "+2 bonus on Disable Device and Open Lock checks.",
        "modifiers": _skill_bonus("Disable Device", "Open Lock"),
    },
    "Persuasive": {
        "benefit": "+2 bonus on Bluff and Intimidate checks.",
        "modifiers": _skill_bonus("Bluff", "Intimidate"),
    },
    "Self-Sufficient": {
        "benefit": "+2 bonus on Heal and Survival checks.",
        "modifiers": _skill_bonus("Heal", "Survival"),
    },
    "Stealthy": {
        "benefit": "+2 bonus on Hide and Move Silently checks.",
        "modifiers": _skill_bonus("Hide", "Move Silently"),
    },
    "Great Fortitude": {
        "benefit": "+2 bonus on Fortitude saving throws.",
        "modifiers": {"fortitude": 2},
    },
    "Iron Will": {
        "benefit": "+2 bonus on Will saving throws.",
        "modifiers": {"will": 2},
    },
    "Lightning Reflexes": {
        "benefit": "+2 bonus on Reflex saving throws.",
        "modifiers": {"reflex": 2},
    },
    "Toughness": {
        "benefit": "+3 hit points.",
        "modifiers": {"hit_points": 3},
    },
    "Endurance": {
        "benefit": "+4 bonus on checks to resist nonlethal damage and fatigue; sleep in light or medium armor.",
    },
    "Diehard": {
        "prerequisites": [_feat("Endurance")],
        "benefit": "Automatically stabilize and remain conscious below 0 hit points.",
    },
    "Run": {
        "benefit": "Run at five times normal speed; +4 bonus on running jumps.",
    },
    "Track": {
        "benefit": "Use Survival to follow tracks.",
    },
    "Leadership": {
        "prerequisites": [{"kind": "character_level_at_least", "level": 6}],
        "benefit": "Attract a cohort and followers.",
    },
    "Skill Focus": {
        "benefit": "+3 bonus on checks with one chosen skill.",
    },
    "Armor Proficiency (Light)": {
        "benefit": "No armor check penalty on attack rolls with light armor.",
        "grants_armor_categories": {"light"},
    },
    "Armor Proficiency (Medium)": {
        "prerequisites": [_feat("Armor Proficiency (Light)")],
        "benefit": "No armor check penalty on attack rolls with medium armor.",
        "grants_armor_categories": {"medium"},
    },
    "Armor Proficiency (Heavy)": {
        "prerequisites": [
            _feat("Armor Proficiency (Light)"),
            _feat("Armor Proficiency (Medium)"),
        ],
        "benefit": "No armor check penalty on attack rolls with heavy armor.",
        "grants_armor_categories": {"heavy"},
    },
    "Shield Proficiency": {
        "benefit": "Use bucklers, light and heavy shields without attack penalties.",
        "grants_shield_categories": {"buckler", "light", "heavy"},
    },
    "Tower Shield Proficiency": {
        "prerequisites": [_feat("Shield Proficiency")],
        "benefit": "Use a tower shield without attack penalties.",
        "grants_shield_categories": {"tower"},
    },
    "Simple Weapon Proficiency": {
        "benefit": "Make attack rolls with simple weapons normally.",
        "grants_weapon_categories": {"simple"},
    },
    "Martial Weapon Proficiency": {
        "benefit": "Make attack rolls with martial weapons normally.",
        "grants_weapon_categories": {"martial"},
    },
    "Exotic Weapon Proficiency": {
        "prerequisites": [_bab(1)],
        "benefit": "Make attack rolls with exotic weapons normally.",
        "grants_weapon_categories": {"exotic"},
    },
    "Spell Focus": {
        "benefit": "+1 to the save DC of spells from one chosen school.",
    },
    "Greater Spell Focus": {
        "prerequisites": [_feat("Spell Focus")],
        "benefit": "+1 to the save DC of spells from the chosen school, stacking with Spell Focus.",
    },
    "Spell Penetration": {
        "benefit": "+2 bonus on caster level checks to beat spell resistance.",
    },
    "Greater Spell Penetration": {
        "prerequisites": [_feat("Spell Penetration")],
        "benefit": "+2 more on caster level checks to beat spell resistance.",
    },
    "Spell Mastery": {
        "prerequisites": [_class("wizard")],
        "benefit": "Prepare chosen spells without a spellbook.",
    },
    "Augment Summoning": {
        "prerequisites": [_feat("Spell Focus")],
        "benefit": "Summoned creatures gain +4 Strength and +4 Constitution.",
    },
    "Combat Casting": {
        "benefit": "+4 bonus on Concentration checks to cast defensively.",
    },
    "Eschew Materials": {
        "benefit": "Cast spells without cheap material components.",
    },
    "Extra Turning": {
        "prerequisites": [_class("cleric")],
        "benefit": "Turn or rebuke undead four more times per day.",
    },
    "Improved Turning": {
        "prerequisites": [_class("cleric")],
        "benefit": "Turn or rebuke undead as a cleric one level higher.",
    },
    "Natural Spell": {
        "prerequisites": [_ability("wisdom", 13), _class("druid", 5)],
        "benefit": "Cast spells while in wild shape.",
    },
}


# =============================================================================
# Combat (Fighter Bonus) Feats
# =============================================================================

COMBAT_FEATS: dict[str, dict[str, Any]] = {
    "Improved Initiative": {
        "benefit": "+4 bonus on initiative checks.",
        "modifiers": {"initiative": 4},
    },
    "Power Attack": {
        "prerequisites": [_ability("strength", 13)],
        "benefit": "Trade attack bonus for damage on melee attacks.",
    },
    "Cleave": {
        "prerequisites": [_ability("strength", 13), _feat("Power Attack")],
        "benefit": "Extra melee attack after dropping a foe.",
    },
    "Great Cleave": {
        "prerequisites": [
            _ability("strength", 13),
            _feat("Power Attack"),
            _feat("Cleave"),
            _bab(4),
        ],
        "benefit": "No limit on Cleave attacks per round.",
    },
    "Improved Bull Rush": {
        "prerequisites": [_ability("strength", 13), _feat("Power Attack")],
        "benefit": "+4 bonus on bull rush attempts without provoking.",
    },
    "Improved Overrun": {
        "prerequisites": [_ability("strength", 13), _feat("Power Attack")],
        "benefit": "+4 bonus on overrun attempts; target cannot avoid.",
    },
    "Improved Sunder": {
        "prerequisites": [_ability("strength", 13), _feat("Power Attack")],
        "benefit": "+4 bonus on sunder attempts without provoking.",
    },
    "Combat Expertise": {
        "prerequisites": [_ability("intelligence", 13)],
        "benefit": "Trade attack bonus for AC.",
    },
    "Improved Disarm": {
        "prerequisites": [_ability("intelligence", 13), _feat("Combat Expertise")],
        "benefit": "+4 bonus on disarm attempts without provoking.",
    },
    "Improved Feint": {
        "prerequisites": [_ability("intelligence", 13), _feat("Combat Expertise")],
        "benefit": "Feint as a move action.",
    },
    "Improved Trip": {
        "prerequisites": [_ability("intelligence", 13), _feat("Combat Expertise")],
        "benefit": "+4 bonus on trip attempts and a free attack after a trip.",
    },
    "Dodge": {
        "prerequisites": [_ability("dexterity", 13)],
        "benefit": "+1 dodge bonus to AC against one designated opponent.",
    },
    "Mobility": {
        "prerequisites": [_ability("dexterity", 13), _feat("Dodge")],
        "benefit": "+4 dodge bonus to AC against attacks of opportunity from movement.",
    },
    "Spring Attack": {
        "prerequisites": [
            _ability("dexterity", 13),
            _feat("Dodge"),
            _feat("Mobility"),
            _bab(4),
        ],
        "benefit": "Move both before and after a melee attack.",
    },
    "Whirlwind Attack": {
        "prerequisites": [
            _ability("dexterity", 13),
            _ability("intelligence", 13),
            _feat("Combat Expertise"),
            _feat("Dodge"),
            _feat("Mobility"),
            _feat("Spring Attack"),
            _bab(4),
        ],
        "benefit": "One melee attack against every opponent within reach.",
    },
    "Point Blank Shot": {
        "benefit": "+1 bonus on ranged attack and damage rolls within 30 ft.",
    },
    "Far Shot": {
        "prerequisites": [_feat("Point Blank Shot")],
        "benefit": "Increase range increments by half.",
    },
    "Precise Shot": {
        "prerequisites": [_feat("Point Blank Shot")],
        "benefit": "No penalty for shooting into melee.",
    },
    "Rapid Shot": {
        "prerequisites": [_ability("dexterity", 13), _feat("Point Blank Shot")],
        "benefit": "One extra ranged attack per round at -2 on all attacks.",
    },
    "Manyshot": {
        "prerequisites": [
            _ability("dexterity", 17),
            _feat("Point Blank Shot"),
            _feat("Rapid Shot"),
            _bab(6),
        ],
        "benefit": "Shoot two or more arrows simultaneously.",
    },
    "Shot on the Run": {
        "prerequisites": [
            _ability("dexterity", 13),
            _feat("Dodge"),
            _feat("Mobility"),
            _feat("Point Blank Shot"),
            _bab(4),
        ],
        "benefit": "Move both before and after a ranged attack.",
    },
    "Improved Precise Shot": {
        "prerequisites": [
            _ability("dexterity", 19),
            _feat("Point Blank Shot"),
            _feat("Precise Shot"),
            _bab(11),
        ],
        "benefit": "Ignore anything less than total cover or concealment.",
    },
    "Two-Weapon Fighting": {
        "prerequisites": [_ability("dexterity", 15)],
        "benefit": "Reduce two-weapon fighting penalties.",
    },
    "Two-Weapon Defense": {
        "prerequisites": [_ability("dexterity", 15), _feat("Two-Weapon Fighting")],
        "benefit": "+1 shield bonus to AC when fighting with two weapons.",
    },
    "Improved Two-Weapon Fighting": {
        "prerequisites": [
            _ability("dexterity", 17),
            _feat("Two-Weapon Fighting"),
            _bab(6),
        ],
        "benefit": "Second off-hand attack at -5.",
    },
    "Greater Two-Weapon Fighting": {
        "prerequisites": [
            _ability("dexterity", 19),
            _feat("Two-Weapon Fighting"),
            _feat("Improved Two-Weapon Fighting"),
            _bab(11),
        ],
        "benefit": "Third off-hand attack at -10.",
    },
    "Weapon Finesse": {
        "prerequisites": [_bab(1)],
        "benefit": "Use Dexterity instead of Strength on attack rolls with light weapons.",
    },
    "Weapon Focus": {
        "prerequisites": [_bab(1)],
        "benefit": "+1 bonus on attack rolls with one chosen weapon.",
    },
    "Weapon Specialization": {
        "prerequisites": [_feat("Weapon Focus"), _class("fighter", 4)],
        "benefit": "+2 bonus on damage rolls with the chosen weapon.",
    },
    "Greater Weapon Focus": {
        "prerequisites": [_feat("Weapon Focus"), _class("fighter", 8)],
        "benefit": "+1 more on attack rolls with the chosen weapon.",
    },
    "Greater Weapon Specialization": {
        "prerequisites": [
            _feat("Weapon Focus"),
            _feat("Greater Weapon Focus"),
            _feat("Weapon Specialization"),
            _class("fighter", 12),
        ],
        "benefit": "+2 more on damage rolls with the chosen weapon.",
    },
    "Improved Critical": {
        "prerequisites": [_bab(8)],
        "benefit": "Double the threat range of one chosen weapon.",
    },
    "Improved Unarmed Strike": {
        "benefit": "Unarmed strikes do not provoke and may deal lethal damage.",
    },
    "Deflect Arrows": {
        "prerequisites": [_ability("dexterity", 13), _feat("Improved Unarmed Strike")],
        "benefit": "Deflect one ranged attack per round.",
    },
    "Snatch Arrows": {
        "prerequisites": [
            _ability("dexterity", 15),
            _feat("Deflect Arrows"),
            _feat("Improved Unarmed Strike"),
        ],
        "benefit": "Catch a deflected weapon.",
    },
    "Improved Grapple": {
        "prerequisites": [_ability("dexterity", 13), _feat("Improved Unarmed Strike")],
        "benefit": "+4 bonus on grapple checks without provoking.",
    },
    "Stunning Fist": {
        "prerequisites": [
            _ability("dexterity", 13),
            _ability("wisdom", 13),
            _feat("Improved Unarmed Strike"),
            _bab(8),
        ],
        "benefit": "Stun an opponent with an unarmed strike.",
    },
    "Combat Reflexes": {
        "benefit": "Additional attacks of opportunity equal to Dexterity bonus.",
    },
    "Blind-Fight": {
        "benefit": "Reroll miss chance for concealment.",
    },
    "Quick Draw": {
        "prerequisites": [_bab(1)],
        "benefit": "Draw a weapon as a free action.",
    },
    "Rapid Reload": {
        "benefit": "Reload crossbows more quickly.",
    },
    "Improved Shield Bash": {
        "prerequisites": [_feat("Shield Proficiency")],
        "benefit": "Keep the shield bonus to AC when shield bashing.",
    },
    "Mounted Combat": {
        "prerequisites": [_ranks("Ride", 1)],
        "benefit": "Negate hits on the mount with a Ride check.",
    },
    "Mounted Archery": {
        "prerequisites": [_ranks("Ride", 1), _feat("Mounted Combat")],
        "benefit": "Halve the penalty for ranged attacks while mounted.",
    },
    "Ride-By Attack": {
        "prerequisites": [_ranks("Ride", 1), _feat("Mounted Combat")],
        "benefit": "Move before and after a mounted charge.",
    },
    "Spirited Charge": {
        "prerequisites": [
            _ranks("Ride", 1),
            _feat("Mounted Combat"),
            _feat("Ride-By Attack"),
        ],
        "benefit": "Double damage with a mounted charge.",
    },
    "Trample": {
        "prerequisites": [_ranks("Ride", 1), _feat("Mounted Combat")],
        "benefit": "Mounted overrun cannot be avoided.",
    },
}


# =============================================================================
# Metamagic Feats
# =============================================================================

METAMAGIC_FEATS: dict[str, dict[str, Any]] = {
    "Empower Spell": {"benefit": "Variable numeric effects are increased by one-half (+2 levels)."},
    "Enlarge Spell": {"benefit": "Double the spell's range (+1 level)."},
    "Extend Spell": {"benefit": "Double the spell's duration (+1 level)."},
    "Heighten Spell": {"benefit": "Cast a spell as a higher-level spell."},
    "Maximize Spell": {"benefit": "Maximize the spell's variable numeric effects (+3 levels)."},
    "Quicken Spell": {"benefit": "Cast the spell as a free action (+4 levels)."},
    "Silent Spell": {"benefit": "Cast the spell without verbal components (+1 level)."},
    "Still Spell": {"benefit": "Cast the spell without somatic components (+1 level)."},
    "Widen Spell": {"benefit": "Double the spell's area (+3 levels)."},
}


# =============================================================================
# Item Creation Feats
# =============================================================================

ITEM_CREATION_FEATS: dict[str, dict[str, Any]] = {
    "Scribe Scroll": {
        "prerequisites": [_caster_level(1)],
        "benefit": "Create magic scrolls.",
    },
    "Brew Potion": {
        "prerequisites": [_caster_level(3)],
        "benefit": "Create magic potions.",
    },
    "Craft Wondrous Item": {
        "prerequisites": [_caster_level(3)],
        "benefit": "Create wondrous items.",
    },
    "Craft Magic Arms and Armor": {
        "prerequisites": [_caster_level(5)],
        "benefit": "Create magic weapons, armor and shields.",
    },
    "Craft Wand": {
        "prerequisites": [_caster_level(5)],
        "benefit": "Create magic wands.",
    },
    "Craft Rod": {
        "prerequisites": [_caster_level(9)],
        "benefit": "Create magic rods.",
    },
    "Craft Staff": {
        "prerequisites": [_caster_level(12)],
        "benefit": "Create magic staffs.",
    },
    "Forge Ring": {
        "prerequisites": [_caster_level(12)],
        "benefit": "Create magic rings.",
    },
}


def _typed(feats: dict[str, dict[str, Any]], feat_type: str) -> dict[str, dict[str, Any]]:
    return {name: {"type": feat_type, **data} for name, data in feats.items()}


FEATS: dict[str, dict[str, Any]] = {
    **_typed(GENERAL_FEATS, "general"),
    **_typed(COMBAT_FEATS, "combat"),
    **{
        name: {"type": "metamagic", "prerequisites": [SPELLCASTER], **data}
        for name, data in METAMAGIC_FEATS.items()
    },
    **_typed(ITEM_CREATION_FEATS, "item_creation"),
}


__all__ = [
    "GENERAL_FEATS",
    "COMBAT_FEATS",
    "METAMAGIC_FEATS",
    "ITEM_CREATION_FEATS",
    "FEATS",
]
