"""Error hierarchy for userpatterns."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PatternError",
    "InvalidPatternError",
    "EngineError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class PatternError(Exception):
    """Base error for all userpatterns errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidPatternError(PatternError):
    """Raised when a wildcard pattern is structurally malformed."""

    def __init__(self, reason: str, pattern: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATTERN",
            message=f"Invalid pattern: {reason}",
            details={"reason": reason, "pattern": pattern},
            **kwargs,
        )

    @property
    def reason(self) -> str:
        """The validation rule that failed."""
        return self.details["reason"]

    @property
    def pattern(self) -> str | None:
        """The raw pattern that was rejected, when known."""
        return self.details["pattern"]


class EngineError(PatternError):
    """Raised when the regex engine rejects an assembled expression."""

    def __init__(self, cause: Exception, expression: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="PATTERN_ENGINE_ERROR",
            message=f"Regex error: {cause}",
            details={"expression": expression},
            cause=cause,
            **kwargs,
        )

    @property
    def expression(self) -> str | None:
        """The regular expression the engine refused to compile."""
        return self.details["expression"]


class ConfigNotFoundError(PatternError):
    """Raised when an allow-list file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PatternError):
    """Raised when an allow-list file is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_PATTERN:
            reject_config()
    """

    INVALID_PATTERN = "INVALID_PATTERN"
    PATTERN_ENGINE_ERROR = "PATTERN_ENGINE_ERROR"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
