"""Languages.

Every member of a race speaks its automatic languages. A character with an
Intelligence bonus may also pick one bonus language per point of modifier,
from the race's bonus language list. Races whose list is ``{"Any"}`` (humans,
half-elves) may pick any language except a secret one such as Druidic.

``Character.languages`` holds only the chosen bonus languages; the automatic
ones are derived from the race.
"""

from __future__ import annotations

from collections import Counter

from dnd_rules.core.logging import get_logger
from dnd_rules.models.character import Character
from dnd_rules.models.enums import Ability, ErrorCode
from dnd_rules.models.rules import RaceRule, RuleTables
from dnd_rules.models.validation import ValidationResult, error


logger = get_logger(__name__)

ANY_LANGUAGE = "Any"
SECRET_LANGUAGES: frozenset[str] = frozenset({"Druidic"})


def bonus_language_slots(character: Character) -> int:
    """Bonus languages allowed by the Intelligence modifier."""
    return max(0, character.ability_modifier(Ability.INT))


def is_bonus_language(race: RaceRule, language: str) -> bool:
    """Whether members of ``race`` may learn ``language`` as a bonus language."""
    if language in SECRET_LANGUAGES:
        return False
    return ANY_LANGUAGE in race.bonus_languages or language in race.bonus_languages


def known_languages(character: Character, tables: RuleTables) -> list[str]:
    """Automatic racial languages plus chosen bonus languages, sorted.

    Raises:
        UnknownRuleIdError: If the character's race is not in the tables.
    """
    automatic = tables.race(character.race_id).automatic_languages if character.race_id else ()
    return sorted({*automatic, *character.languages})


def validate_languages(character: Character, tables: RuleTables) -> ValidationResult:
    """Check chosen bonus languages against the race list and Intelligence.

    Choosing a language the race already speaks costs nothing and is not
    reported. Without a race there is nothing to check against.

    Raises:
        UnknownRuleIdError: If the character's race is not in the tables.
    """
    if character.race_id is None:
        return ValidationResult()
    race = tables.race(character.race_id)

    errors = []
    for language, count in Counter(character.languages).items():
        if count > 1:
            errors.append(error(
                ErrorCode.DUPLICATE_SELECTION,
                f"languages.{language}",
                f"{language} is selected {count} times",
                language=language,
            ))

    chosen = [
        language
        for language in dict.fromkeys(character.languages)
        if language not in race.automatic_languages
    ]
    for language in chosen:
        if not is_bonus_language(race, language):
            allowed = sorted(race.bonus_languages - {ANY_LANGUAGE})
            if ANY_LANGUAGE in race.bonus_languages:
                options = "any language that is not secret"
            else:
                options = ", ".join(allowed) or "none"
            errors.append(error(
                ErrorCode.OUT_OF_RANGE_VALUE,
                f"languages.{language}",
                f"{race.name} characters cannot learn {language} as a bonus language; "
                f"choose from: {options}",
                language=language,
                allowed=allowed,
            ))

    slots = bonus_language_slots(character)
    if len(chosen) > slots:
        modifier = character.ability_modifier(Ability.INT)
        errors.append(error(
            ErrorCode.BUDGET_EXCEEDED,
            "languages",
            f"{len(chosen)} bonus languages are chosen but an Intelligence modifier "
            f"of {modifier:+d} allows {slots}",
            chosen=len(chosen),
            allowed=slots,
        ))

    logger.debug("Languages checked", race=race.id, chosen=chosen, slots=slots, errors=len(errors))
    return ValidationResult(errors=errors)


__all__ = [
    "ANY_LANGUAGE",
    "SECRET_LANGUAGES",
    "bonus_language_slots",
    "is_bonus_language",
    "known_languages",
    "validate_languages",
]
