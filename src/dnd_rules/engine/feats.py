"""Feat Validator.

Evaluates feat prerequisites (a conjunction of predicate data) against a
character and applies feat selections. Every unmet predicate is reported,
not just the first, so a UI can explain exactly why a feat is locked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import assert_never

from dnd_rules.core.logging import get_logger
from dnd_rules.engine.progression import calculate_feat_slots, calculate_total_bab
from dnd_rules.engine.spellcasting import calculate_caster_levels
from dnd_rules.models.character import Character
from dnd_rules.models.enums import Ability, ErrorCode
from dnd_rules.models.rules import (
    AbilityAtLeast,
    BABAtLeast,
    CasterLevelAtLeast,
    CharacterLevelAtLeast,
    FeatRule,
    HasFeat,
    IsClass,
    IsSpellcaster,
    Prerequisite,
    RuleTables,
    SkillRanksAtLeast,
)
from dnd_rules.models.validation import FeatSelectionResult, PrerequisiteResult, error


logger = get_logger(__name__)


@dataclass(frozen=True)
class PrerequisiteContext:
    """The character facts that feat prerequisites can test.

    Attributes:
        ability_totals: Total score per ability.
        skill_ranks: Ranks per skill name.
        base_attack_bonus: Total base attack bonus.
        feats: Feats already selected.
        class_levels: Levels per class id.
        spellcaster: Whether any class casts spells.
        character_level: Total character level.
        caster_level: Highest caster level across classes.
    """

    ability_totals: dict[Ability, int] = field(default_factory=dict)
    skill_ranks: dict[str, int] = field(default_factory=dict)
    base_attack_bonus: int = 0
    feats: frozenset[str] = frozenset()
    class_levels: dict[str, int] = field(default_factory=dict)
    spellcaster: bool = False
    character_level: int = 0
    caster_level: int = 0


def build_prerequisite_context(character: Character, tables: RuleTables) -> PrerequisiteContext:
    """Collect everything prerequisite predicates read from a character."""
    class_levels: dict[str, int] = {}
    for entry in character.classes:
        class_levels[entry.class_id] = class_levels.get(entry.class_id, 0) + entry.level
    caster_levels = calculate_caster_levels(character, tables)

    return PrerequisiteContext(
        ability_totals={ability: character.ability_total(ability) for ability in Ability},
        skill_ranks={name: state.ranks for name, state in character.skills.items()},
        base_attack_bonus=calculate_total_bab(character.classes, tables),
        feats=frozenset(character.feats),
        class_levels=class_levels,
        spellcaster=any(tables.class_rule(class_id).spellcasting for class_id in class_levels),
        character_level=character.total_level,
        caster_level=max(caster_levels.values(), default=0),
    )


def check_prerequisite(predicate: Prerequisite, context: PrerequisiteContext) -> str | None:
    """Evaluate one predicate.

    Returns:
        None when the predicate holds, otherwise a description of the
        requirement and the character's current value.
    """
    if isinstance(predicate, AbilityAtLeast):
        current = context.ability_totals.get(predicate.ability, 0)
        if current >= predicate.value:
            return None
        return f"{predicate.describe()} (current: {current})"
    elif isinstance(predicate, SkillRanksAtLeast):
        current = context.skill_ranks.get(predicate.skill, 0)
        if current >= predicate.ranks:
            return None
        return f"{predicate.describe()} (current: {current})"
    elif isinstance(predicate, BABAtLeast):
        if context.base_attack_bonus >= predicate.value:
            return None
        return f"{predicate.describe()} (current: +{context.base_attack_bonus})"
    elif isinstance(predicate, HasFeat):
        return None if predicate.name in context.feats else predicate.describe()
    elif isinstance(predicate, IsClass):
        current = context.class_levels.get(predicate.name, 0)
        if current >= predicate.level:
            return None
        return f"{predicate.describe()} (current: {current})"
    elif isinstance(predicate, IsSpellcaster):
        return None if context.spellcaster else predicate.describe()
    elif isinstance(predicate, CharacterLevelAtLeast):
        if context.character_level >= predicate.level:
            return None
        return f"{predicate.describe()} (current: {context.character_level})"
    elif isinstance(predicate, CasterLevelAtLeast):
        if context.caster_level >= predicate.level:
            return None
        return f"{predicate.describe()} (current: {context.caster_level})"
    else:
        assert_never(predicate)


def validate_prerequisites(
    character: Character,
    feat: FeatRule | str,
    tables: RuleTables,
    context: PrerequisiteContext | None = None,
) -> PrerequisiteResult:
    """Check every prerequisite of a feat.

    Raises:
        UnknownRuleIdError: If the feat name is not in the tables.

    Example:
        >>> result = validate_prerequisites(weakling, "Power Attack", tables)
        >>> result.unmet
        ['Power Attack requires Strength 13 (current: 12)']
    """
    feat_rule = tables.feat(feat) if isinstance(feat, str) else feat
    context = context or build_prerequisite_context(character, tables)

    unmet = []
    for predicate in feat_rule.prerequisites:
        missing = check_prerequisite(predicate, context)
        if missing is not None:
            unmet.append(f"{feat_rule.name} requires {missing}")

    errors = [
        error(
            ErrorCode.PREREQUISITE_NOT_MET,
            f"feats.{feat_rule.name}",
            message,
            feat=feat_rule.name,
        )
        for message in unmet
    ]
    return PrerequisiteResult(feat=feat_rule.name, unmet=unmet, errors=errors)


def select_feat(character: Character, feat_name: str, tables: RuleTables) -> FeatSelectionResult:
    """Add a feat if it is new, a slot is free and its prerequisites hold.

    Returns:
        The updated copy on success, otherwise the unchanged input and every
        reason the feat was refused.

    Raises:
        UnknownRuleIdError: If the feat is not in the tables.
    """
    feat = tables.feat(feat_name)
    field_name = f"feats.{feat.name}"

    if feat.name in character.feats:
        return FeatSelectionResult(character=character, errors=[error(
            ErrorCode.DUPLICATE_SELECTION,
            field_name,
            f"{feat.name} has already been selected",
            feat=feat.name,
        )])

    errors = []
    slots = calculate_feat_slots(character, tables)
    if slots.available <= 0:
        errors.append(error(
            ErrorCode.NO_FEAT_SLOTS_AVAILABLE,
            "feats",
            f"No feat slot is free for {feat.name} ({slots.used} of {slots.total} used)",
            total=slots.total,
            used=slots.used,
        ))
    errors.extend(validate_prerequisites(character, feat, tables).errors)

    if errors:
        logger.debug("Feat selection refused", feat=feat.name, reasons=len(errors))
        return FeatSelectionResult(character=character, errors=errors)

    updated = character.model_copy(deep=True)
    updated.feats.append(feat.name)
    updated.derived = updated.derived.model_copy(update={
        "feat_slots": slots.model_copy(update={"used": slots.used + 1}),
    })
    logger.debug("Feat selected", feat=feat.name)
    return FeatSelectionResult(character=updated)


def remove_feat(character: Character, feat_name: str) -> Character:
    """Drop a feat. Feats that depended on it are left for the validator to flag."""
    updated = character.model_copy(deep=True)
    updated.feats = [name for name in updated.feats if name != feat_name]
    return updated


def available_feats(character: Character, tables: RuleTables) -> list[FeatRule]:
    """Feats not yet taken whose prerequisites all hold, sorted by name."""
    context = build_prerequisite_context(character, tables)
    taken = set(character.feats)
    return sorted(
        (
            feat
            for feat in tables.feats.values()
            if feat.name not in taken
            and all(check_prerequisite(p, context) is None for p in feat.prerequisites)
        ),
        key=lambda feat: feat.name,
    )


__all__ = [
    "PrerequisiteContext",
    "build_prerequisite_context",
    "check_prerequisite",
    "validate_prerequisites",
    "select_feat",
    "remove_feat",
    "available_feats",
]
