"""Tests for the exception hierarchy."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from dnd_rules.core.exceptions import (
    ConfigurationError,
    InvalidSelectionError,
    RulesEngineError,
    RuleTableError,
    UnknownRuleIdError,
)


class TestRulesEngineError:
    """Tests for the base RulesEngineError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = RulesEngineError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = RulesEngineError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(RulesEngineError("Test", details={"x": 1}))
        assert "RulesEngineError" in repr_str
        assert "Test" in repr_str


class TestUnknownRuleIdError:
    """Tests for unknown rule ids."""

    def test_names_kind_and_id(self) -> None:
        """Test the message and details identify the missing entry."""
        exc = UnknownRuleIdError("race", "drow", tables_version="3.5-srd")

        assert exc.rule_kind == "race"
        assert exc.rule_id == "drow"
        assert "Unknown race id 'drow'" in str(exc)
        assert exc.details["tables_version"] == "3.5-srd"

    def test_version_optional(self) -> None:
        """Test that the tables version is only recorded when given."""
        exc = UnknownRuleIdError("feat", "Flight")
        assert "tables_version" not in exc.details


class TestContextualErrors:
    """Tests for exceptions that carry extra context."""

    def test_rule_table_error_context(self) -> None:
        """Test RuleTableError with table and entry."""
        exc = RuleTableError("Dangling reference", table="feats", entry="Cleave")
        assert exc.details == {"table": "feats", "entry": "Cleave"}

    def test_invalid_selection_context(self) -> None:
        """Test InvalidSelectionError keeps a falsy invalid value."""
        exc = InvalidSelectionError("Bad delta", field_name="delta", invalid_value=0)
        assert exc.details == {"field_name": "delta", "invalid_value": 0}

    def test_configuration_error_context(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad budget", config_key="point_buy_budget")
        assert exc.details["config_key"] == "point_buy_budget"

    @pytest.mark.parametrize(
        "build",
        [
            lambda details: RulesEngineError("Base", details=details),
            lambda details: UnknownRuleIdError("race", "drow", tables_version="x", details=details),
            lambda details: RuleTableError("Bad table", table="feats", details=details),
            lambda details: InvalidSelectionError("Bad input", field_name="delta", details=details),
            lambda details: ConfigurationError("Bad config", config_key="budget", details=details),
        ],
    )
    def test_caller_details_not_modified(
        self, build: Callable[[dict[str, Any]], RulesEngineError]
    ) -> None:
        """Test the details dict passed in is copied, not written to."""
        details = {"source": "house rules"}

        exc = build(details)

        assert details == {"source": "house rules"}
        assert exc.details is not details
        assert exc.details["source"] == "house rules"

    @pytest.mark.parametrize(
        "exc",
        [
            UnknownRuleIdError("class", "psion"),
            RuleTableError("Bad table"),
            InvalidSelectionError("Bad input"),
            ConfigurationError("Bad config"),
        ],
    )
    def test_inheritance(self, exc: RulesEngineError) -> None:
        """Test every engine exception derives from RulesEngineError."""
        assert isinstance(exc, RulesEngineError)
        assert isinstance(exc, Exception)
