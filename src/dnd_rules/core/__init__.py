"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        RulesEngineError: Base exception for all engine errors.
        UnknownRuleIdError: A rule id is missing from the loaded tables.
        RuleTableError: Rule table data is inconsistent.
        InvalidSelectionError: A collaborator passed malformed arguments.
        ConfigurationError: Configuration-related errors.

    Configuration:
        RulesSettings: Engine settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up engine logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        bound_context: Add context for the duration of a with block.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dnd_rules.core.config import RulesSettings, clear_settings_cache, get_settings
from dnd_rules.core.exceptions import (
    ConfigurationError,
    InvalidSelectionError,
    RulesEngineError,
    RuleTableError,
    UnknownRuleIdError,
)
from dnd_rules.core.logging import (
    bind_context,
    bound_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "RulesEngineError",
    "UnknownRuleIdError",
    "RuleTableError",
    "InvalidSelectionError",
    "ConfigurationError",
    # Configuration
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "bound_context",
    "clear_context",
]
