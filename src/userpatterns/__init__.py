"""userpatterns - Wildcard allow-lists for fully-qualified user identifiers."""

from __future__ import annotations

# Core
from userpatterns.compiler import CompiledMatcher, PatternSet, compile_many, compile_one
from userpatterns.matcher import first_match, is_allowed
from userpatterns.utils.pattern import translate

# AllowList
from userpatterns.allowlist import AllowList

# Config
from userpatterns.config import AllowListConfig, load_config

# Errors
from userpatterns.errors import (
    ConfigError,
    ConfigNotFoundError,
    EngineError,
    ErrorCodes,
    InvalidPatternError,
    PatternError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "CompiledMatcher",
    "PatternSet",
    "compile_one",
    "compile_many",
    "translate",
    "is_allowed",
    "first_match",
    # AllowList
    "AllowList",
    # Config
    "AllowListConfig",
    "load_config",
    # Errors
    "ErrorCodes",
    "PatternError",
    "InvalidPatternError",
    "EngineError",
    "ConfigError",
    "ConfigNotFoundError",
]
