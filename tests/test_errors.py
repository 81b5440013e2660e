"""Tests for the userpatterns error hierarchy."""

from __future__ import annotations

import re

import pytest

from userpatterns.errors import (
    ConfigError,
    ConfigNotFoundError,
    EngineError,
    ErrorCodes,
    InvalidPatternError,
    PatternError,
)


class TestPatternError:
    def test_str_includes_code_and_message(self) -> None:
        err = PatternError(code="SOME_CODE", message="something failed")
        assert str(err) == "[SOME_CODE] something failed"

    def test_defaults(self) -> None:
        err = PatternError(code="X", message="y")
        assert err.details == {}
        assert err.cause is None
        assert err.timestamp


class TestInvalidPatternError:
    def test_reason_preserved_verbatim(self) -> None:
        err = InvalidPatternError("rejecting empty part", pattern="@:x")
        assert err.reason == "rejecting empty part"
        assert err.pattern == "@:x"
        assert err.message == "Invalid pattern: rejecting empty part"
        assert err.code == ErrorCodes.INVALID_PATTERN

    def test_is_pattern_error(self) -> None:
        assert isinstance(InvalidPatternError("r"), PatternError)


class TestEngineError:
    def test_wraps_cause(self) -> None:
        cause = re.error("unbalanced parenthesis")
        err = EngineError(cause, expression="^(@a:b$")
        assert err.cause is cause
        assert err.expression == "^(@a:b$"
        assert err.message == "Regex error: unbalanced parenthesis"
        assert err.code == ErrorCodes.PATTERN_ENGINE_ERROR


class TestConfigErrors:
    def test_config_not_found(self) -> None:
        err = ConfigNotFoundError(config_path="/missing.yaml")
        assert err.code == ErrorCodes.CONFIG_NOT_FOUND
        assert err.details["config_path"] == "/missing.yaml"

    def test_config_error(self) -> None:
        assert ConfigError("bad").code == ErrorCodes.CONFIG_INVALID


class TestErrorCodes:
    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().INVALID_PATTERN = "OTHER"
