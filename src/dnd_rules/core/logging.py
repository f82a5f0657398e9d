"""Structured logging for the rules engine.

The engine logs through structlog. Calculators emit debug events carrying
the numbers they derived; the validator emits one info event per run with
the character name bound as context. Nothing is configured on import: a host
application calls :func:`configure_logging` once, or leaves structlog's
defaults in place.

Example:
    >>> from dnd_rules.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Character validated", errors=0, warnings=2)
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from dnd_rules.core.config import RulesSettings, get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


class EngineContext:
    """Processor that stamps every event with the engine and rule set.

    Attributes:
        rules_version: Identifier of the rule tables in use.
    """

    def __init__(self, rules_version: str) -> None:
        self.rules_version = rules_version

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("engine", "dnd_rules")
        event_dict.setdefault("rules_version", self.rules_version)
        return event_dict


def build_processors(*, json_format: bool, rules_version: str) -> list[Processor]:
    """Processor chain for console or JSON output."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        EngineContext(rules_version),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
    settings: RulesSettings | None = None,
) -> None:
    """Configure structlog for the engine.

    Arguments left as None fall back to ``DND_RULES_LOG_LEVEL`` and
    ``DND_RULES_JSON_LOGS``.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output one JSON object per line.
        settings: Settings to read defaults from instead of the cached ones.
    """
    settings = settings or get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    use_json = settings.json_logs if json_format is None else json_format

    structlog.configure(
        processors=build_processors(json_format=use_json, rules_version=settings.rules_version),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("dnd_rules").setLevel(numeric_level)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent logs.

    Example:
        >>> bind_context(character="Thorin")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def bound_context(**kwargs: Any) -> AbstractContextManager[None]:
    """Bind context variables for the duration of a ``with`` block.

    On exit the previous values are restored, so context the host bound
    (a request or session id) survives.

    Example:
        >>> with bound_context(character="Thorin"):
        ...     logger.info("Character validated")
    """
    return structlog.contextvars.bound_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "EngineContext",
    "build_processors",
    "configure_logging",
    "get_logger",
    "bind_context",
    "bound_context",
    "clear_context",
]
