"""Static SRD rule data and the loader that validates it.

The data modules hold plain dicts. ``build_rule_tables`` turns them into a
frozen ``RuleTables`` instance, checking every cross-reference on the way;
``get_rule_tables`` caches the result for the life of the process.

Example:
    >>> from dnd_rules.tables import get_rule_tables
    >>> tables = get_rule_tables()
    >>> tables.class_rule("fighter").hit_die
    10
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from dnd_rules.core.config import get_settings
from dnd_rules.core.exceptions import RuleTableError
from dnd_rules.core.logging import get_logger
from dnd_rules.models.rules import RuleTables
from dnd_rules.tables.classes import CLASSES
from dnd_rules.tables.equipment import ARMOR, GEAR, SHIELDS, WEAPONS
from dnd_rules.tables.feats import FEATS
from dnd_rules.tables.races import RACES
from dnd_rules.tables.skills import SKILLS


logger = get_logger(__name__)


def _keyed(entries: dict[str, dict[str, Any]], key: str) -> dict[str, dict[str, Any]]:
    """Copy each entry with its table key under ``key``."""
    return {entry_id: {key: entry_id, **data} for entry_id, data in entries.items()}


def build_rule_tables(
    *,
    version: str | None = None,
    races: dict[str, dict[str, Any]] | None = None,
    classes: dict[str, dict[str, Any]] | None = None,
    skills: dict[str, dict[str, Any]] | None = None,
    feats: dict[str, dict[str, Any]] | None = None,
    weapons: dict[str, dict[str, Any]] | None = None,
    armor: dict[str, dict[str, Any]] | None = None,
    shields: dict[str, dict[str, Any]] | None = None,
    gear: dict[str, dict[str, Any]] | None = None,
) -> RuleTables:
    """Validate raw rule data into a ``RuleTables`` instance.

    Every argument defaults to the bundled SRD data, so a house-rule table
    can override a single section.

    Raises:
        RuleTableError: If an entry is malformed or a reference dangles.
    """
    try:
        tables = RuleTables.model_validate({
            "version": version or get_settings().rules_version,
            "races": _keyed(RACES if races is None else races, "id"),
            "classes": _keyed(CLASSES if classes is None else classes, "id"),
            "skills": _keyed(SKILLS if skills is None else skills, "name"),
            "feats": _keyed(FEATS if feats is None else feats, "name"),
            "weapons": _keyed(WEAPONS if weapons is None else weapons, "id"),
            "armor": _keyed(ARMOR if armor is None else armor, "id"),
            "shields": _keyed(SHIELDS if shields is None else shields, "id"),
            "gear": _keyed(GEAR if gear is None else gear, "id"),
        })
    except ValidationError as e:
        raise RuleTableError(
            "Rule table data failed validation",
            details={"errors": e.errors(include_url=False)},
        ) from e

    logger.debug(
        "Rule tables loaded",
        version=tables.version,
        races=len(tables.races),
        classes=len(tables.classes),
        feats=len(tables.feats),
    )
    return tables


@lru_cache(maxsize=1)
def get_rule_tables() -> RuleTables:
    """Get the cached SRD rule tables.

    Raises:
        RuleTableError: If the bundled data is inconsistent.
    """
    return build_rule_tables()


def clear_rule_tables_cache() -> None:
    """Drop the cached tables so the next call rebuilds them."""
    get_rule_tables.cache_clear()


__all__ = [
    "build_rule_tables",
    "get_rule_tables",
    "clear_rule_tables_cache",
]
