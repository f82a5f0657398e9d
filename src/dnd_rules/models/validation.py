"""Validation result types.

Player mistakes are reported as ``ValidationIssue`` values, never raised.
Each issue names the offending field and the rule it broke in a message that
a UI can show verbatim.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dnd_rules.models.character import Character
from dnd_rules.models.derived import DerivedStats
from dnd_rules.models.enums import ErrorCode, Severity, WarningCode


class ValidationIssue(BaseModel):
    """A single error or warning.

    Attributes:
        code: Machine-readable error or warning code.
        field: Dotted path of the offending field (e.g. 'abilities.strength').
        message: Self-contained, human-readable description.
        severity: Whether the issue blocks finalization.
        details: Structured context (limits, current values, unmet predicates).
    """

    model_config = ConfigDict(frozen=True)

    code: ErrorCode | WarningCode
    field: str
    message: str
    severity: Severity = Severity.ERROR
    details: dict[str, Any] = Field(default_factory=dict)


def error(code: ErrorCode, field: str, message: str, **details: Any) -> ValidationIssue:
    """Build a blocking issue."""
    return ValidationIssue(code=code, field=field, message=message, details=details)


def warning(code: WarningCode, field: str, message: str, **details: Any) -> ValidationIssue:
    """Build an advisory issue."""
    return ValidationIssue(
        code=code,
        field=field,
        message=message,
        severity=Severity.WARNING,
        details=details,
    )


class ValidationResult(BaseModel):
    """Outcome of one focused check."""

    model_config = ConfigDict(frozen=True)

    errors: list[ValidationIssue] = Field(default_factory=list)

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors


class PointBuyResult(ValidationResult):
    """Point-buy check with the spend summary."""

    total_cost: int = 0
    budget: int = 0

    @computed_field
    @property
    def remaining(self) -> int:
        return self.budget - self.total_cost


class PrerequisiteResult(ValidationResult):
    """Feat prerequisite check.

    ``unmet`` holds one description per failed predicate, so a UI can explain
    why a feat is locked.
    """

    feat: str
    unmet: list[str] = Field(default_factory=list)


class AllocationResult(BaseModel):
    """Outcome of a skill rank allocation.

    On success ``character`` is the updated copy; on failure it is the
    unchanged input and ``error`` says why.
    """

    model_config = ConfigDict(frozen=True)

    character: Character
    error: ValidationIssue | None = None

    @computed_field
    @property
    def ok(self) -> bool:
        return self.error is None


class FeatSelectionResult(BaseModel):
    """Outcome of selecting a feat."""

    model_config = ConfigDict(frozen=True)

    character: Character
    errors: list[ValidationIssue] = Field(default_factory=list)

    @computed_field
    @property
    def ok(self) -> bool:
        return not self.errors


class ValidationReport(BaseModel):
    """Full validation of a character.

    The report is advisory data. Errors block finalization; warnings do not.
    """

    model_config = ConfigDict(frozen=True)

    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    derived: DerivedStats = Field(default_factory=DerivedStats)

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors

    def codes(self) -> set[ErrorCode | WarningCode]:
        """All codes present in the report."""
        return {issue.code for issue in (*self.errors, *self.warnings)}


__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "PointBuyResult",
    "PrerequisiteResult",
    "AllocationResult",
    "FeatSelectionResult",
    "ValidationReport",
    "error",
    "warning",
]
