"""Rule table entry schemas.

Every entry is a frozen pydantic model: rule data is loaded once, shared by
reference between characters and never modified afterwards. Characters only
store ids that resolve through ``RuleTables``.

Feat prerequisites are data, not code. A feat carries a tuple of tagged
predicates (``AbilityAtLeast``, ``HasFeat`` ...), discriminated on ``kind``,
which the feat validator evaluates as a conjunction.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dnd_rules.core.exceptions import RuleTableError, UnknownRuleIdError
from dnd_rules.models.enums import (
    Ability,
    Alignment,
    ArmorCategory,
    BABProgression,
    CasterProgression,
    FeatType,
    SaveProgression,
    SaveType,
    ShieldCategory,
    Size,
    WeaponCategory,
    WeaponStyle,
)


MODIFIER_TARGETS: frozenset[str] = frozenset(
    {"fortitude", "reflex", "will", "initiative", "hit_points", "speed"}
)
"""Derived values a race or feat modifier may adjust, besides ``skill:<name>``."""

SKILL_TARGET_PREFIX = "skill:"


def _read_only(value: Any) -> Any:
    """Wrap a mapping, and any mappings nested in it, in read-only proxies."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _read_only(item) for key, item in value.items()})
    return value


class RuleEntry(BaseModel):
    """Base class for all rule table entries.

    ``frozen`` only blocks attribute assignment, so mapping fields are also
    swapped for read-only views once validated. Writing to any of them
    raises ``TypeError``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def freeze_mappings(self) -> "RuleEntry":
        for name in type(self).model_fields:
            value = self.__dict__[name]
            if isinstance(value, Mapping) and not isinstance(value, MappingProxyType):
                self.__dict__[name] = _read_only(value)
        return self


# =============================================================================
# Prerequisite Predicates
# =============================================================================


class AbilityAtLeast(RuleEntry):
    """Total ability score must reach a threshold."""

    kind: Literal["ability_at_least"] = "ability_at_least"
    ability: Ability
    value: int = Field(ge=1)

    def describe(self) -> str:
        return f"{self.ability.full_name} {self.value}"


class SkillRanksAtLeast(RuleEntry):
    """Ranks in a skill must reach a threshold."""

    kind: Literal["skill_ranks_at_least"] = "skill_ranks_at_least"
    skill: str
    ranks: int = Field(ge=1)

    def describe(self) -> str:
        return f"{self.skill} {self.ranks} ranks"


class BABAtLeast(RuleEntry):
    """Total base attack bonus must reach a threshold."""

    kind: Literal["bab_at_least"] = "bab_at_least"
    value: int = Field(ge=1)

    def describe(self) -> str:
        return f"base attack bonus +{self.value}"


class HasFeat(RuleEntry):
    """Another feat must already be selected."""

    kind: Literal["has_feat"] = "has_feat"
    name: str

    def describe(self) -> str:
        return f"the {self.name} feat"


class IsClass(RuleEntry):
    """The character must have levels in a class."""

    kind: Literal["is_class"] = "is_class"
    name: str
    level: int = Field(default=1, ge=1)

    def describe(self) -> str:
        if self.level == 1:
            return f"at least one level of {self.name}"
        return f"{self.name} level {self.level}"


class IsSpellcaster(RuleEntry):
    """At least one of the character's classes must cast spells."""

    kind: Literal["is_spellcaster"] = "is_spellcaster"

    def describe(self) -> str:
        return "the ability to cast spells"


class CharacterLevelAtLeast(RuleEntry):
    """Total character level must reach a threshold."""

    kind: Literal["character_level_at_least"] = "character_level_at_least"
    level: int = Field(ge=1)

    def describe(self) -> str:
        return f"character level {self.level}"


class CasterLevelAtLeast(RuleEntry):
    """Highest caster level must reach a threshold."""

    kind: Literal["caster_level_at_least"] = "caster_level_at_least"
    level: int = Field(ge=1)

    def describe(self) -> str:
        return f"caster level {self.level}"


Prerequisite = Annotated[
    Union[
        AbilityAtLeast,
        SkillRanksAtLeast,
        BABAtLeast,
        HasFeat,
        IsClass,
        IsSpellcaster,
        CharacterLevelAtLeast,
        CasterLevelAtLeast,
    ],
    Field(discriminator="kind"),
]


# =============================================================================
# Races, Classes, Skills, Feats
# =============================================================================


class RaceRule(RuleEntry):
    """A playable race.

    Attributes:
        id: Table key (e.g. 'half-orc').
        name: Display name.
        size: Size category.
        base_speed: Land speed in feet.
        ability_adjustments: Signed adjustments per ability (may be empty).
        special_abilities: Racial trait descriptors.
        automatic_languages: Languages every member speaks.
        bonus_languages: Languages available for high Intelligence.
        favored_class: Class id, or None for "highest-level class".
        bonus_feats: Extra feat slots at 1st level.
        bonus_skill_points_per_level: Extra skill points per level.
        weapon_ids: Weapons every member is proficient with.
        modifiers: Racial bonuses keyed by modifier target.
    """

    id: str
    name: str
    size: Size = Size.MEDIUM
    base_speed: int = Field(default=30, ge=0)
    ability_adjustments: Mapping[Ability, int] = Field(default_factory=dict)
    special_abilities: tuple[str, ...] = ()
    automatic_languages: frozenset[str] = frozenset()
    bonus_languages: frozenset[str] = frozenset()
    favored_class: str | None = None
    bonus_feats: int = Field(default=0, ge=0)
    bonus_skill_points_per_level: int = Field(default=0, ge=0)
    weapon_ids: frozenset[str] = frozenset()
    modifiers: Mapping[str, int] = Field(default_factory=dict)

    def has_trait(self, query: str) -> bool:
        """Check whether any special ability mentions ``query``.

        Example:
            >>> dwarf.has_trait("darkvision")
            True
        """
        needle = query.casefold()
        return any(needle in trait.casefold() for trait in self.special_abilities)


class ClassRule(RuleEntry):
    """A character class.

    ``spells_per_day`` maps class level to spell level to slots. A slot count
    of 0 means the class gets only bonus spells at that spell level; a missing
    spell level means the class cannot cast spells of that level yet.
    """

    id: str
    name: str
    hit_die: Literal[4, 6, 8, 10, 12]
    skill_points_per_level: int = Field(ge=0)
    class_skills: frozenset[str] = frozenset()
    bab: BABProgression
    saves: Mapping[SaveType, SaveProgression]
    spellcasting: bool = False
    caster_progression: CasterProgression = CasterProgression.NONE
    spellcasting_ability: Ability | None = None
    spells_per_day: Mapping[int, Mapping[int, int]] = Field(default_factory=dict)
    bonus_feat_levels: frozenset[int] = frozenset()
    weapon_categories: frozenset[WeaponCategory] = frozenset()
    weapon_ids: frozenset[str] = frozenset()
    armor_categories: frozenset[ArmorCategory] = frozenset()
    shield_categories: frozenset[ShieldCategory] = frozenset()
    allowed_alignments: frozenset[Alignment] | None = None

    @model_validator(mode="after")
    def validate_spellcasting(self) -> "ClassRule":
        """Spellcasting classes need an ability, a progression and a table."""
        if set(self.saves) != set(SaveType):
            raise RuleTableError(
                f"Class {self.id} must define a progression for every save",
                table="classes",
                entry=self.id,
            )
        if not self.spellcasting:
            return self
        if (
            self.spellcasting_ability is None
            or self.caster_progression is CasterProgression.NONE
            or not self.spells_per_day
        ):
            raise RuleTableError(
                f"Spellcasting class {self.id} is missing its casting ability, "
                "caster progression or spells-per-day table",
                table="classes",
                entry=self.id,
            )
        return self


class SkillRule(RuleEntry):
    """A skill."""

    name: str
    key_ability: Ability
    trained_only: bool = False
    armor_check_penalty: bool = False


class FeatRule(RuleEntry):
    """A feat.

    Attributes:
        name: Feat name, also its table key.
        type: Feat category.
        prerequisites: Conjunction of predicates that must all hold.
        benefit: Rules text summary.
        modifiers: Static bonuses keyed by modifier target.
        grants_weapon_categories: Weapon proficiencies granted.
        grants_armor_categories: Armor proficiencies granted.
        grants_shield_categories: Shield proficiencies granted.
    """

    name: str
    type: FeatType = FeatType.GENERAL
    prerequisites: tuple[Prerequisite, ...] = ()
    benefit: str = ""
    modifiers: Mapping[str, int] = Field(default_factory=dict)
    grants_weapon_categories: frozenset[WeaponCategory] = frozenset()
    grants_armor_categories: frozenset[ArmorCategory] = frozenset()
    grants_shield_categories: frozenset[ShieldCategory] = frozenset()


# =============================================================================
# Equipment
# =============================================================================


class WeaponRule(RuleEntry):
    """A weapon. Damage dice are listed for Small and Medium wielders."""

    kind: Literal["weapon"] = "weapon"
    id: str
    name: str
    category: WeaponCategory
    style: WeaponStyle
    damage_small: str
    damage_medium: str
    critical: str = "x2"
    weight: float = Field(default=0, ge=0)
    cost_gp: float = Field(default=0, ge=0)


class ArmorRule(RuleEntry):
    """A suit of armor."""

    kind: Literal["armor"] = "armor"
    id: str
    name: str
    category: ArmorCategory
    armor_bonus: int = Field(ge=0)
    max_dex_bonus: int = Field(ge=0)
    armor_check_penalty: int = Field(default=0, le=0)
    arcane_spell_failure: int = Field(default=0, ge=0, le=100)
    weight: float = Field(default=0, ge=0)
    cost_gp: float = Field(default=0, ge=0)


class ShieldRule(RuleEntry):
    """A shield. Only tower shields cap Dexterity."""

    kind: Literal["shield"] = "shield"
    id: str
    name: str
    category: ShieldCategory
    shield_bonus: int = Field(ge=0)
    max_dex_bonus: int | None = None
    armor_check_penalty: int = Field(default=0, le=0)
    weight: float = Field(default=0, ge=0)
    cost_gp: float = Field(default=0, ge=0)


class GearRule(RuleEntry):
    """Adventuring gear that only matters for carried weight."""

    kind: Literal["gear"] = "gear"
    id: str
    name: str
    weight: float = Field(default=0, ge=0)
    cost_gp: float = Field(default=0, ge=0)


ItemRule = Union[WeaponRule, ArmorRule, ShieldRule, GearRule]


# =============================================================================
# Rule Tables
# =============================================================================


class RuleTables(RuleEntry):
    """The complete, immutable rule data set.

    Construct once at startup (see ``dnd_rules.tables.get_rule_tables``) and
    pass by reference into every calculator.
    """

    version: str
    races: Mapping[str, RaceRule]
    classes: Mapping[str, ClassRule]
    skills: Mapping[str, SkillRule]
    feats: Mapping[str, FeatRule]
    weapons: Mapping[str, WeaponRule] = Field(default_factory=dict)
    armor: Mapping[str, ArmorRule] = Field(default_factory=dict)
    shields: Mapping[str, ShieldRule] = Field(default_factory=dict)
    gear: Mapping[str, GearRule] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_references(self) -> "RuleTables":
        """Check that every cross-reference resolves inside the tables.

        Raises:
            RuleTableError: On the first dangling reference found.
        """
        for race in self.races.values():
            if race.favored_class is not None and race.favored_class not in self.classes:
                raise RuleTableError(
                    f"Race {race.id} favors unknown class {race.favored_class!r}",
                    table="races",
                    entry=race.id,
                )
            self._check_modifiers("races", race.id, race.modifiers)
            unknown_weapons = sorted(race.weapon_ids - self.weapons.keys())
            if unknown_weapons:
                raise RuleTableError(
                    f"Race {race.id} is proficient with unknown weapons: "
                    f"{', '.join(unknown_weapons)}",
                    table="races",
                    entry=race.id,
                )

        for klass in self.classes.values():
            missing = sorted(klass.class_skills - self.skills.keys())
            if missing:
                raise RuleTableError(
                    f"Class {klass.id} lists unknown class skills: {', '.join(missing)}",
                    table="classes",
                    entry=klass.id,
                )
            unknown_weapons = sorted(klass.weapon_ids - self.weapons.keys())
            if unknown_weapons:
                raise RuleTableError(
                    f"Class {klass.id} is proficient with unknown weapons: "
                    f"{', '.join(unknown_weapons)}",
                    table="classes",
                    entry=klass.id,
                )

        for feat in self.feats.values():
            self._check_modifiers("feats", feat.name, feat.modifiers)
            for prereq in feat.prerequisites:
                if isinstance(prereq, HasFeat) and prereq.name not in self.feats:
                    dangling = prereq.name
                elif isinstance(prereq, IsClass) and prereq.name not in self.classes:
                    dangling = prereq.name
                elif isinstance(prereq, SkillRanksAtLeast) and prereq.skill not in self.skills:
                    dangling = prereq.skill
                else:
                    continue
                raise RuleTableError(
                    f"Feat {feat.name} has a prerequisite on unknown entry {dangling!r}",
                    table="feats",
                    entry=feat.name,
                )

        item_ids = [*self.weapons, *self.armor, *self.shields, *self.gear]
        duplicates = sorted({item_id for item_id in item_ids if item_ids.count(item_id) > 1})
        if duplicates:
            raise RuleTableError(
                f"Item ids are not unique across equipment tables: {', '.join(duplicates)}",
                table="equipment",
            )
        return self

    def _check_modifiers(self, table: str, entry: str, modifiers: Mapping[str, int]) -> None:
        for target in modifiers:
            if target in MODIFIER_TARGETS:
                continue
            if target.startswith(SKILL_TARGET_PREFIX):
                if target.removeprefix(SKILL_TARGET_PREFIX) in self.skills:
                    continue
            raise RuleTableError(
                f"Unknown modifier target {target!r}",
                table=table,
                entry=entry,
            )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def race(self, race_id: str) -> RaceRule:
        """Resolve a race id, raising UnknownRuleIdError if absent."""
        try:
            return self.races[race_id]
        except KeyError:
            raise UnknownRuleIdError("race", race_id, tables_version=self.version) from None

    def class_rule(self, class_id: str) -> ClassRule:
        """Resolve a class id, raising UnknownRuleIdError if absent."""
        try:
            return self.classes[class_id]
        except KeyError:
            raise UnknownRuleIdError("class", class_id, tables_version=self.version) from None

    def skill(self, name: str) -> SkillRule:
        """Resolve a skill name, raising UnknownRuleIdError if absent."""
        try:
            return self.skills[name]
        except KeyError:
            raise UnknownRuleIdError("skill", name, tables_version=self.version) from None

    def feat(self, name: str) -> FeatRule:
        """Resolve a feat name, raising UnknownRuleIdError if absent."""
        try:
            return self.feats[name]
        except KeyError:
            raise UnknownRuleIdError("feat", name, tables_version=self.version) from None

    def item(self, item_id: str) -> ItemRule:
        """Resolve an equipment id across all equipment tables."""
        for table in (self.weapons, self.armor, self.shields, self.gear):
            if item_id in table:
                return table[item_id]
        raise UnknownRuleIdError("item", item_id, tables_version=self.version)


__all__ = [
    "MODIFIER_TARGETS",
    "SKILL_TARGET_PREFIX",
    "RuleEntry",
    "AbilityAtLeast",
    "SkillRanksAtLeast",
    "BABAtLeast",
    "HasFeat",
    "IsClass",
    "IsSpellcaster",
    "CharacterLevelAtLeast",
    "CasterLevelAtLeast",
    "Prerequisite",
    "RaceRule",
    "ClassRule",
    "SkillRule",
    "FeatRule",
    "WeaponRule",
    "ArmorRule",
    "ShieldRule",
    "GearRule",
    "ItemRule",
    "RuleTables",
]
