"""The Character aggregate.

A Character is the mutable working document a collaborator (the creation
wizard) edits. It holds only raw selections plus a ``derived`` block that the
validator recomputes wholesale; nothing in ``derived`` is ever patched
incrementally or trusted from storage.

Rule-table entries are referenced by id. A character never embeds a copy of a
race, class, feat or item.

Example:
    >>> character = Character.from_snapshot({
    ...     "name": "Thorin",
    ...     "abilities": {"strength": 15, "constitution": 14},
    ...     "race_id": "dwarf",
    ...     "classes": [{"class_id": "fighter", "level": 1}],
    ... })
    >>> character.abilities[Ability.STR].modifier
    2
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from dnd_rules.core.constants import DEFAULT_ABILITY_SCORE
from dnd_rules.models.derived import DerivedStats
from dnd_rules.models.enums import Ability, AbilityGenerationMethod, Alignment


def calculate_modifier(total: int) -> int:
    """Calculate the ability modifier from an ability total.

    The modifier is ``floor((total - 10) / 2)``, rounding toward negative
    infinity, so a total of 9 yields -1.

    Example:
        >>> calculate_modifier(18)
        4
        >>> calculate_modifier(9)
        -1
    """
    return (total - 10) // 2


class AbilityScore(BaseModel):
    """One ability score.

    The base score is not range-checked here: an out-of-range score is a
    normal player mistake that the validator reports, not a parse failure.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    base: int = DEFAULT_ABILITY_SCORE
    racial_adjustment: int = 0
    enhancement_bonus: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total(self) -> int:
        return self.base + self.racial_adjustment + self.enhancement_bonus

    @computed_field
    @property
    def modifier(self) -> int:
        return calculate_modifier(self.total)


class ClassLevel(BaseModel):
    """Levels taken in one class.

    ``hit_die_rolls`` are supplied by the dice collaborator, one per level
    after the maximized first hit die. Levels without a roll use the average.
    """

    model_config = ConfigDict(extra="forbid")

    class_id: str
    level: int = Field(default=1, ge=1)
    hit_die_rolls: list[int] = Field(default_factory=list)


class CharacterSkillState(BaseModel):
    """Ranks bought in a skill.

    ``is_class_skill`` is fixed when ranks are first bought, so that a later
    multiclass level cannot reprice ranks already paid for.
    """

    model_config = ConfigDict(extra="forbid")

    ranks: int = Field(default=0, ge=0)
    is_class_skill: bool = False


class EquippedItem(BaseModel):
    """A carried item. ``equipped`` distinguishes worn/wielded from packed."""

    model_config = ConfigDict(extra="forbid")

    item_id: str
    equipped: bool = True
    enhancement_bonus: int = Field(default=0, ge=0, le=10)
    quantity: int = Field(default=1, ge=1)


class CharacterBonuses(BaseModel):
    """Magic and miscellaneous modifiers supplied by the collaborator."""

    model_config = ConfigDict(extra="forbid")

    natural_armor: int = 0
    deflection: int = 0
    armor_class_misc: int = 0
    fortitude: int = 0
    reflex: int = 0
    will: int = 0
    initiative: int = 0


def _default_abilities() -> dict[Ability, AbilityScore]:
    return {ability: AbilityScore() for ability in Ability}


class Character(BaseModel):
    """The aggregate root: raw selections plus derived statistics.

    Attributes:
        name: Character name.
        abilities: All six ability scores.
        generation_method: How base scores were generated.
        race_id: Selected race, or None mid-wizard.
        classes: Class levels in the order taken; the first is the primary class.
        skills: Skill name to purchased ranks.
        feats: Selected feat names, in the order taken.
        equipment: Carried items.
        languages: Chosen bonus languages; automatic racial languages are derived.
        alignment: Selected alignment, if any.
        experience_points: Current experience, if tracked.
        damage_taken: Hit points lost, used to derive current hit points.
        bonuses: Magic and miscellaneous modifiers.
        derived: Values computed by the validator.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = ""
    abilities: dict[Ability, AbilityScore] = Field(default_factory=_default_abilities)
    generation_method: AbilityGenerationMethod = AbilityGenerationMethod.POINT_BUY
    race_id: str | None = None
    classes: list[ClassLevel] = Field(default_factory=list)
    skills: dict[str, CharacterSkillState] = Field(default_factory=dict)
    feats: list[str] = Field(default_factory=list)
    equipment: list[EquippedItem] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    alignment: Alignment | None = None
    experience_points: int | None = Field(default=None, ge=0)
    damage_taken: int = Field(default=0, ge=0)
    bonuses: CharacterBonuses = Field(default_factory=CharacterBonuses)
    derived: DerivedStats = Field(default_factory=DerivedStats)

    @field_validator("abilities", mode="before")
    @classmethod
    def coerce_abilities(cls, value: Any) -> Any:
        """Accept plain integers as base scores and fill in missing abilities."""
        if not isinstance(value, dict):
            return value
        coerced: dict[Any, Any] = {ability: AbilityScore() for ability in Ability}
        for key, score in value.items():
            if isinstance(score, int):
                score = {"base": score}
            elif isinstance(score, dict):
                # totals and modifiers are always recomputed
                score = {k: v for k, v in score.items() if k not in ("total", "modifier")}
            coerced[Ability(key)] = score
        return coerced

    # -------------------------------------------------------------------------
    # Convenience accessors
    # -------------------------------------------------------------------------

    @property
    def total_level(self) -> int:
        """Sum of all class levels."""
        return sum(entry.level for entry in self.classes)

    @property
    def primary_class_id(self) -> str | None:
        """Class taken at 1st level."""
        return self.classes[0].class_id if self.classes else None

    def class_level(self, class_id: str) -> int:
        """Levels held in ``class_id`` (0 if none)."""
        return sum(entry.level for entry in self.classes if entry.class_id == class_id)

    def ability_total(self, ability: Ability) -> int:
        return self.abilities[ability].total

    def ability_modifier(self, ability: Ability) -> int:
        return self.abilities[ability].modifier

    def skill_ranks(self, skill_name: str) -> int:
        state = self.skills.get(skill_name)
        return state.ranks if state else 0

    # -------------------------------------------------------------------------
    # Collaborator views
    # -------------------------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        """Raw selections as plain data for the storage collaborator."""
        return self.model_dump(mode="json", exclude={"derived"})

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> Character:
        """Rebuild a character from stored data, discarding any derived values."""
        raw = {key: value for key, value in data.items() if key != "derived"}
        return cls.model_validate(raw)

    def portrait_view(self) -> dict[str, Any]:
        """The fields the portrait collaborator is allowed to read."""
        return {
            "race": self.race_id,
            "class": self.primary_class_id,
            "level": self.total_level,
            "equipped": [item.item_id for item in self.equipment if item.equipped],
        }


__all__ = [
    "calculate_modifier",
    "AbilityScore",
    "ClassLevel",
    "CharacterSkillState",
    "EquippedItem",
    "CharacterBonuses",
    "Character",
]
