"""Derived statistic blocks.

These models hold values the engine computes from a character's raw
selections. They are rebuilt wholesale on every validation run and are never
read back from storage. Totals are ``computed_field`` properties so that a
total can never disagree with the terms it is built from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dnd_rules.core.constants import BASE_ARMOR_CLASS
from dnd_rules.models.enums import Ability, EncumbranceLevel, SaveType


class DerivedBlock(BaseModel):
    """Base class for derived blocks."""

    model_config = ConfigDict(frozen=True)


class SaveBreakdown(DerivedBlock):
    """One saving throw, itemized."""

    base: int = 0
    ability: int = 0
    misc: int = 0

    @computed_field
    @property
    def total(self) -> int:
        return self.base + self.ability + self.misc


class HitPoints(DerivedBlock):
    """Maximum and current hit points."""

    maximum: int = 0
    current: int = 0


class ACBreakdown(DerivedBlock):
    """Armor class with every contributing term.

    Attributes:
        dexterity: Dexterity modifier after every max-Dex cap was applied.
        max_dex_bonus: The tightest cap that applied, or None if unbounded.
    """

    base: int = BASE_ARMOR_CLASS
    dexterity: int = 0
    armor: int = 0
    shield: int = 0
    size: int = 0
    natural: int = 0
    deflection: int = 0
    misc: int = 0
    max_dex_bonus: int | None = None

    @computed_field
    @property
    def total(self) -> int:
        return (
            self.base
            + self.dexterity
            + self.armor
            + self.shield
            + self.size
            + self.natural
            + self.deflection
            + self.misc
        )

    @computed_field
    @property
    def touch(self) -> int:
        """AC against touch attacks: armor, shield and natural armor do not count."""
        return self.base + self.dexterity + self.size + self.deflection + self.misc

    @computed_field
    @property
    def flat_footed(self) -> int:
        """AC when caught flat-footed: a positive Dexterity bonus is lost."""
        return self.total - max(0, self.dexterity)


class CarryingCapacity(DerivedBlock):
    """Load thresholds in pounds."""

    light: int
    medium: int
    heavy: int

    @computed_field
    @property
    def lift_over_head(self) -> int:
        return self.heavy

    @computed_field
    @property
    def lift_off_ground(self) -> int:
        return self.heavy * 2

    @computed_field
    @property
    def push_or_drag(self) -> int:
        return self.heavy * 5


class EncumbranceResult(DerivedBlock):
    """Penalties for the current load band.

    ``speed_penalty`` and ``check_penalty`` are None when overloaded: the
    character cannot move and cannot attempt penalized checks at all.
    ``max_dex_bonus`` is None when the load does not cap Dexterity.
    """

    level: EncumbranceLevel
    speed_penalty: int | None = 0
    check_penalty: int | None = 0
    max_dex_bonus: int | None = None

    @computed_field
    @property
    def immobilized(self) -> bool:
        return self.level is EncumbranceLevel.OVERLOADED


class SkillPointBudget(DerivedBlock):
    """Skill points earned and spent."""

    total: int = 0
    spent: int = 0

    @computed_field
    @property
    def available(self) -> int:
        return self.total - self.spent


class FeatSlots(DerivedBlock):
    """Feat slots earned and used."""

    total: int = 0
    used: int = 0

    @computed_field
    @property
    def available(self) -> int:
        return self.total - self.used


class SkillTotal(DerivedBlock):
    """A skill's check modifier.

    Trained-only skills with no ranks have a total of 0 and are flagged as
    unusable rather than penalized.
    """

    ranks: int = 0
    ability_modifier: int = 0
    misc: int = 0
    armor_check_penalty: int = 0
    usable: bool = True

    @computed_field
    @property
    def total(self) -> int:
        if not self.usable:
            return 0
        return self.ranks + self.ability_modifier + self.misc + self.armor_check_penalty


class WeaponAttack(DerivedBlock):
    """Attack line for one equipped weapon."""

    item_id: str
    name: str
    attack_bonus: int
    damage: str
    critical: str
    proficient: bool


class DerivedStats(DerivedBlock):
    """Everything the validator derives for a character."""

    level: int = 0
    ability_totals: dict[Ability, int] = Field(default_factory=dict)
    ability_modifiers: dict[Ability, int] = Field(default_factory=dict)
    base_attack_bonus: int = 0
    iterative_attacks: list[int] = Field(default_factory=list)
    saves: dict[SaveType, SaveBreakdown] = Field(default_factory=dict)
    hit_points: HitPoints = Field(default_factory=HitPoints)
    armor_class: ACBreakdown = Field(default_factory=ACBreakdown)
    initiative: int = 0
    speed: int = 0
    skill_points: SkillPointBudget = Field(default_factory=SkillPointBudget)
    skills: dict[str, SkillTotal] = Field(default_factory=dict)
    feat_slots: FeatSlots = Field(default_factory=FeatSlots)
    caster_levels: dict[str, int] = Field(default_factory=dict)
    spells_per_day: dict[str, dict[int, int]] = Field(default_factory=dict)
    spell_save_dcs: dict[str, dict[int, int]] = Field(default_factory=dict)
    carrying_capacity: CarryingCapacity | None = None
    carried_weight: float = 0
    encumbrance: EncumbranceResult | None = None
    attacks: list[WeaponAttack] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)


__all__ = [
    "SaveBreakdown",
    "HitPoints",
    "ACBreakdown",
    "CarryingCapacity",
    "EncumbranceResult",
    "SkillPointBudget",
    "FeatSlots",
    "SkillTotal",
    "WeaponAttack",
    "DerivedStats",
]
