"""Character Validator.

Orchestrates the calculators. ``derive`` rebuilds every derived value from
the raw selections; ``validate`` does the same and then checks the character
against every rule, returning errors and warnings as data.

Neither method modifies its input, and running either twice on the same
character gives identical output.

Example:
    >>> validator = CharacterValidator(get_rule_tables())
    >>> report = validator.validate(character)
    >>> report.valid, [issue.code for issue in report.errors]
    (False, [<ErrorCode.MISSING_SELECTION: 'MissingSelection'>])
"""

from __future__ import annotations

from collections import Counter

from dnd_rules.core.config import RulesSettings, get_settings
from dnd_rules.core.logging import bound_context, get_logger
from dnd_rules.engine.abilities import validate_absolute_bounds, validate_ability_generation
from dnd_rules.engine.combat import (
    calculate_carried_weight,
    calculate_carrying_capacity,
    calculate_character_armor_class,
    calculate_weapon_attacks,
    classify_encumbrance,
    equipped_armor,
    equipped_shield,
    equipped_weapons,
    is_armor_proficient,
    is_shield_proficient,
    is_weapon_proficient,
    reduced_speed,
)
from dnd_rules.engine.feats import build_prerequisite_context, validate_prerequisites
from dnd_rules.engine.languages import known_languages, validate_languages
from dnd_rules.engine.progression import (
    calculate_character_hit_points,
    calculate_feat_slots,
    calculate_multiclass_xp_penalty,
    calculate_saves,
    calculate_total_bab,
    experience_for_level,
    iterative_attacks,
)
from dnd_rules.engine.skills import calculate_skill_budget, calculate_skill_totals, max_ranks
from dnd_rules.engine.spellcasting import calculate_caster_levels, calculate_character_spells
from dnd_rules.models.character import Character
from dnd_rules.models.derived import DerivedStats, EncumbranceResult, HitPoints
from dnd_rules.models.enums import (
    Ability,
    ArmorCategory,
    EncumbranceLevel,
    ErrorCode,
    Size,
    WarningCode,
)
from dnd_rules.models.rules import RuleTables
from dnd_rules.models.validation import ValidationIssue, ValidationReport, error, warning
from dnd_rules.tables import get_rule_tables


logger = get_logger(__name__)

DEFAULT_BASE_SPEED = 30

# Racial trait that keeps medium/heavy armor and load from reducing speed.
UNHINDERED_SPEED_TRAIT = "speed is not reduced"


class CharacterValidator:
    """Derives and validates characters against one set of rule tables.

    Attributes:
        tables: The rule tables every id resolves against.
        settings: House-rule knobs (point-buy budget, bounds, level cap).
    """

    def __init__(
        self,
        tables: RuleTables | None = None,
        settings: RulesSettings | None = None,
    ) -> None:
        self.tables = tables or get_rule_tables()
        self.settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def _resolve_references(self, character: Character) -> None:
        """Resolve every id up front so unknown ids abort before any work.

        Raises:
            UnknownRuleIdError: On the first id missing from the tables.
        """
        if character.race_id is not None:
            self.tables.race(character.race_id)
        for entry in character.classes:
            self.tables.class_rule(entry.class_id)
        for skill_name in character.skills:
            self.tables.skill(skill_name)
        for feat_name in character.feats:
            self.tables.feat(feat_name)
        for item in character.equipment:
            self.tables.item(item.item_id)

    def _hit_points(self, character: Character) -> HitPoints:
        try:
            maximum = calculate_character_hit_points(character, self.tables)
        except ValueError:
            # Impossible rolls are reported by validate(); derive with averages.
            averaged = character.model_copy(deep=True)
            for entry in averaged.classes:
                entry.hit_die_rolls = []
            maximum = calculate_character_hit_points(averaged, self.tables)
        return HitPoints(maximum=maximum, current=maximum - character.damage_taken)

    def _speed(self, character: Character, encumbrance: EncumbranceResult) -> int:
        race = self.tables.race(character.race_id) if character.race_id else None
        base = race.base_speed if race else DEFAULT_BASE_SPEED
        if encumbrance.level is EncumbranceLevel.OVERLOADED:
            return 0

        armor = equipped_armor(character, self.tables)
        hindered = encumbrance.level is not EncumbranceLevel.LIGHT or (
            armor is not None and armor[0].category is not ArmorCategory.LIGHT
        )
        unhindered = race is not None and race.has_trait(UNHINDERED_SPEED_TRAIT)
        speed = reduced_speed(base) if hindered and not unhindered else base

        modifier = race.modifiers.get("speed", 0) if race else 0
        modifier += sum(self.tables.feat(name).modifiers.get("speed", 0) for name in character.feats)
        return max(0, speed + modifier)

    def _initiative(self, character: Character) -> int:
        total = character.ability_modifier(Ability.DEX) + character.bonuses.initiative
        if character.race_id:
            total += self.tables.race(character.race_id).modifiers.get("initiative", 0)
        for name in character.feats:
            total += self.tables.feat(name).modifiers.get("initiative", 0)
        return total

    def derive_stats(self, character: Character) -> DerivedStats:
        """Compute every derived value for ``character``.

        Raises:
            UnknownRuleIdError: If the character references an unknown id.
        """
        self._resolve_references(character)
        tables = self.tables

        size = tables.race(character.race_id).size if character.race_id else Size.MEDIUM
        capacity = calculate_carrying_capacity(character.ability_total(Ability.STR), size)
        carried = calculate_carried_weight(character, tables)
        encumbrance = classify_encumbrance(carried, capacity)

        bab = calculate_total_bab(character.classes, tables)
        spells_per_day, spell_dcs = calculate_character_spells(character, tables)

        return DerivedStats(
            level=character.total_level,
            ability_totals={ability: character.ability_total(ability) for ability in Ability},
            ability_modifiers={ability: character.ability_modifier(ability) for ability in Ability},
            base_attack_bonus=bab,
            iterative_attacks=iterative_attacks(bab) if character.classes else [],
            saves=calculate_saves(character, tables),
            hit_points=self._hit_points(character),
            armor_class=calculate_character_armor_class(character, tables, encumbrance),
            initiative=self._initiative(character),
            speed=self._speed(character, encumbrance),
            skill_points=calculate_skill_budget(character, tables),
            skills=calculate_skill_totals(character, tables, encumbrance),
            feat_slots=calculate_feat_slots(character, tables),
            caster_levels=calculate_caster_levels(character, tables),
            spells_per_day=spells_per_day,
            spell_save_dcs=spell_dcs,
            carrying_capacity=capacity,
            carried_weight=carried,
            encumbrance=encumbrance,
            attacks=calculate_weapon_attacks(character, tables, bab),
            languages=known_languages(character, tables),
        )

    def derive(self, character: Character) -> Character:
        """A copy of ``character`` with its derived block rebuilt."""
        updated = character.model_copy(deep=True)
        updated.derived = self.derive_stats(character)
        return updated

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def _check_abilities(self, character: Character) -> list[ValidationIssue]:
        issues = list(validate_ability_generation(character, settings=self.settings).errors)
        issues.extend(validate_absolute_bounds(character.abilities, settings=self.settings).errors)
        return issues

    def _check_classes(self, character: Character) -> list[ValidationIssue]:
        issues = []
        if not character.name.strip():
            issues.append(error(ErrorCode.MISSING_SELECTION, "name", "Enter a character name"))
        if character.race_id is None:
            issues.append(error(ErrorCode.MISSING_SELECTION, "race_id", "Choose a race"))
        if not character.classes:
            issues.append(error(ErrorCode.MISSING_SELECTION, "classes", "Choose a class"))
            return issues

        level = character.total_level
        if level > self.settings.max_character_level:
            issues.append(error(
                ErrorCode.OUT_OF_RANGE_VALUE,
                "classes",
                f"Character level {level} exceeds the maximum of "
                f"{self.settings.max_character_level}",
                level=level,
                maximum=self.settings.max_character_level,
            ))

        for index, entry in enumerate(character.classes):
            hit_die = self.tables.class_rule(entry.class_id).hit_die
            for roll in entry.hit_die_rolls:
                if not 1 <= roll <= hit_die:
                    issues.append(error(
                        ErrorCode.OUT_OF_RANGE_VALUE,
                        f"classes.{index}.hit_die_rolls",
                        f"Hit die roll {roll} is not possible on a d{hit_die}",
                        value=roll,
                        minimum=1,
                        maximum=hit_die,
                    ))

        for class_id in dict.fromkeys(entry.class_id for entry in character.classes):
            klass = self.tables.class_rule(class_id)
            if klass.allowed_alignments is None:
                continue
            if character.alignment is None:
                issues.append(error(
                    ErrorCode.MISSING_SELECTION,
                    "alignment",
                    f"Choose an alignment; {klass.name} has alignment restrictions",
                    class_id=class_id,
                ))
            elif character.alignment not in klass.allowed_alignments:
                allowed = sorted(a.display_name for a in klass.allowed_alignments)
                issues.append(error(
                    ErrorCode.ALIGNMENT_RESTRICTION,
                    "alignment",
                    f"{klass.name} cannot be {character.alignment.display_name}; "
                    f"allowed: {', '.join(allowed)}",
                    class_id=class_id,
                    alignment=character.alignment.value,
                ))
        return issues

    def _check_skills(self, character: Character, derived: DerivedStats) -> list[ValidationIssue]:
        issues = []
        budget = derived.skill_points
        if budget.spent > budget.total:
            issues.append(error(
                ErrorCode.BUDGET_EXCEEDED,
                "skills",
                f"Skill ranks cost {budget.spent} points but only {budget.total} "
                "have been earned",
                spent=budget.spent,
                total=budget.total,
            ))
        level = character.total_level
        for name, state in character.skills.items():
            ceiling = max_ranks(level, state.is_class_skill)
            if state.ranks > ceiling:
                kind = "class skill" if state.is_class_skill else "cross-class skill"
                issues.append(error(
                    ErrorCode.RANK_CEILING_EXCEEDED,
                    f"skills.{name}",
                    f"{name} has {state.ranks} ranks but a {kind} at level {level} "
                    f"allows at most {ceiling}",
                    ranks=state.ranks,
                    maximum=ceiling,
                ))
        return issues

    def _check_feats(self, character: Character, derived: DerivedStats) -> list[ValidationIssue]:
        issues = []
        for name, count in Counter(character.feats).items():
            if count > 1:
                issues.append(error(
                    ErrorCode.DUPLICATE_SELECTION,
                    f"feats.{name}",
                    f"{name} is selected {count} times",
                    feat=name,
                ))

        context = build_prerequisite_context(character, self.tables)
        for name in dict.fromkeys(character.feats):
            issues.extend(validate_prerequisites(character, name, self.tables, context).errors)

        slots = derived.feat_slots
        if slots.used > slots.total:
            issues.append(error(
                ErrorCode.NO_FEAT_SLOTS_AVAILABLE,
                "feats",
                f"{slots.used} feats are selected but only {slots.total} slots are available",
                used=slots.used,
                total=slots.total,
            ))
        return issues

    def _check_equipment(self, character: Character) -> tuple[list[ValidationIssue], list[ValidationIssue]]:
        errors = []
        warnings = []
        for table, label in ((self.tables.armor, "suit of armor"), (self.tables.shields, "shield")):
            worn = [item.item_id for item in character.equipment if item.equipped and item.item_id in table]
            if len(worn) > 1:
                errors.append(error(
                    ErrorCode.DUPLICATE_SELECTION,
                    "equipment",
                    f"Only one {label} can be equipped; found {', '.join(worn)}",
                    items=worn,
                ))

        for weapon, _ in equipped_weapons(character, self.tables):
            if not is_weapon_proficient(weapon, character, self.tables):
                warnings.append(warning(
                    WarningCode.NONPROFICIENT_WEAPON,
                    f"equipment.{weapon.id}",
                    f"Not proficient with {weapon.name}: -4 on attack rolls",
                    item_id=weapon.id,
                ))
        armor = equipped_armor(character, self.tables)
        if armor and not is_armor_proficient(armor[0], character, self.tables):
            warnings.append(warning(
                WarningCode.NONPROFICIENT_ARMOR,
                f"equipment.{armor[0].id}",
                f"Not proficient with {armor[0].name}: its armor check penalty applies "
                "to attack rolls",
                item_id=armor[0].id,
            ))
        shield = equipped_shield(character, self.tables)
        if shield and not is_shield_proficient(shield[0], character, self.tables):
            warnings.append(warning(
                WarningCode.NONPROFICIENT_ARMOR,
                f"equipment.{shield[0].id}",
                f"Not proficient with {shield[0].name}: its armor check penalty applies "
                "to attack rolls",
                item_id=shield[0].id,
            ))
        return errors, warnings

    def _advisories(self, character: Character, derived: DerivedStats) -> list[ValidationIssue]:
        warnings = []
        encumbrance = derived.encumbrance
        if encumbrance is not None and encumbrance.level is not EncumbranceLevel.LIGHT:
            if encumbrance.immobilized:
                message = (
                    f"Carrying {derived.carried_weight:g} lb. exceeds the heavy load limit; "
                    "the character cannot move"
                )
            else:
                message = (
                    f"Carrying {derived.carried_weight:g} lb. is a {encumbrance.level.value} "
                    f"load: check penalty {encumbrance.check_penalty}, "
                    f"max Dex bonus +{encumbrance.max_dex_bonus}"
                )
            warnings.append(warning(
                WarningCode.ENCUMBERED,
                "equipment",
                message,
                level=encumbrance.level.value,
                weight=derived.carried_weight,
            ))

        if character.classes and derived.skill_points.available > 0:
            warnings.append(warning(
                WarningCode.UNSPENT_SKILL_POINTS,
                "skills",
                f"{derived.skill_points.available} skill points are unspent",
                available=derived.skill_points.available,
            ))
        if character.classes and derived.feat_slots.available > 0:
            warnings.append(warning(
                WarningCode.UNUSED_FEAT_SLOTS,
                "feats",
                f"{derived.feat_slots.available} feat slots are unused",
                available=derived.feat_slots.available,
            ))

        penalty = calculate_multiclass_xp_penalty(character, self.tables)
        if penalty > 0:
            warnings.append(warning(
                WarningCode.MULTICLASS_XP_PENALTY,
                "classes",
                f"Uneven multiclassing costs {penalty:.0%} of experience earned",
                penalty=penalty,
            ))

        if character.experience_points is not None and character.classes:
            required = experience_for_level(character.total_level)
            if character.experience_points < required:
                warnings.append(warning(
                    WarningCode.INSUFFICIENT_EXPERIENCE,
                    "experience_points",
                    f"Level {character.total_level} requires {required} XP; "
                    f"the character has {character.experience_points}",
                    required=required,
                    experience_points=character.experience_points,
                ))
        return warnings

    def validate(self, character: Character) -> ValidationReport:
        """Derive and check a character.

        Raises:
            UnknownRuleIdError: If the character references an unknown id.
        """
        with bound_context(character=character.name):
            derived = self.derive_stats(character)

            errors = self._check_abilities(character)
            errors.extend(self._check_classes(character))
            errors.extend(validate_languages(character, self.tables).errors)
            errors.extend(self._check_skills(character, derived))
            errors.extend(self._check_feats(character, derived))
            equipment_errors, warnings = self._check_equipment(character)
            errors.extend(equipment_errors)
            warnings.extend(self._advisories(character, derived))

            logger.info(
                "Character validated",
                level=derived.level,
                errors=len(errors),
                warnings=len(warnings),
            )
            return ValidationReport(errors=errors, warnings=warnings, derived=derived)


def validate_character(
    character: Character,
    tables: RuleTables | None = None,
    settings: RulesSettings | None = None,
) -> ValidationReport:
    """Validate with a one-off validator."""
    return CharacterValidator(tables, settings).validate(character)


__all__ = [
    "CharacterValidator",
    "validate_character",
]
