"""Custom exception hierarchy for the D&D 3.5 rules engine.

Expected player mistakes (overspent point buy, a locked feat, a skill over
its rank cap) are never raised: they come back as structured
``ValidationIssue`` values. The exceptions below are reserved for conditions
that abort processing, such as a character that references a rule id the
loaded rule tables do not contain.

Example:
    >>> from dnd_rules.core.exceptions import UnknownRuleIdError
    >>> raise UnknownRuleIdError("race", "drow")
"""

from __future__ import annotations

from typing import Any


class RulesEngineError(Exception):
    """Base exception for all rules engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = dict(details or {})
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Rule Table Exceptions
# =============================================================================


class UnknownRuleIdError(RulesEngineError):
    """Raised when a character references an id missing from the rule tables.

    This always indicates that the character snapshot and the loaded rule
    tables come from incompatible versions, so processing stops.
    """

    def __init__(
        self,
        rule_kind: str,
        rule_id: str,
        *,
        tables_version: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the kind of rule entry and the missing id.

        Args:
            rule_kind: Table that was searched (race, class, feat, skill, item).
            rule_id: The id that could not be resolved.
            tables_version: Version string of the rule tables searched.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        combined_details["rule_kind"] = rule_kind
        combined_details["rule_id"] = rule_id
        if tables_version:
            combined_details["tables_version"] = tables_version
        self.rule_kind = rule_kind
        self.rule_id = rule_id
        super().__init__(
            f"Unknown {rule_kind} id {rule_id!r} is not present in the rule tables",
            details=combined_details,
        )


class RuleTableError(RulesEngineError):
    """Raised when rule table data is internally inconsistent.

    Examples are a class skill list naming a skill that does not exist or a
    feat prerequisite pointing at a feat that is not in the table.
    """

    def __init__(
        self,
        message: str,
        *,
        table: str | None = None,
        entry: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize rule table error with table context.

        Args:
            message: Human-readable error description.
            table: Name of the offending table.
            entry: Id of the offending entry.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if table:
            combined_details["table"] = table
        if entry:
            combined_details["entry"] = entry
        super().__init__(message, details=combined_details)


# =============================================================================
# Selection Exceptions
# =============================================================================


class InvalidSelectionError(RulesEngineError):
    """Raised when a collaborator calls the engine with malformed arguments.

    This is a programming error on the caller's side (for instance a skill
    allocation delta other than +1 or -1), not a player mistake.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize selection error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the argument or field that was rejected.
            invalid_value: The value that was rejected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(RulesEngineError):
    """Raised when engine configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "RulesEngineError",
    "UnknownRuleIdError",
    "RuleTableError",
    "InvalidSelectionError",
    "ConfigurationError",
]
