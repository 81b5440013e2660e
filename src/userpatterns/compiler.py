"""Compilation of fully-qualified wildcard patterns into anchored matchers.

A pattern has the shape ``@localpart:domain``. Either half may contain
``*`` wildcards, which match within that half only.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from userpatterns.errors import EngineError, InvalidPatternError
from userpatterns.utils.pattern import translate

__all__ = ["CompiledMatcher", "PatternSet", "compile_one", "compile_many"]

_logger = logging.getLogger("userpatterns.compiler")


@dataclass(frozen=True)
class CompiledMatcher:
    """An immutable, anchored matcher built from one raw pattern.

    Two matchers compiled from the same raw pattern compare equal.
    """

    pattern: str
    regex: re.Pattern[str]

    @property
    def expression(self) -> str:
        """The anchored regular expression backing this matcher."""
        return self.regex.pattern

    def matches(self, candidate: str) -> bool:
        """Return True if the whole candidate string matches."""
        return self.regex.fullmatch(candidate) is not None


PatternSet = tuple[CompiledMatcher, ...]


def compile_one(pattern: str) -> CompiledMatcher:
    """Compile a single ``@localpart:domain`` wildcard pattern.

    Args:
        pattern: The raw pattern, e.g. ``@bot.*:example.com``.

    Returns:
        A CompiledMatcher accepting only identifiers that match the
        pattern end to end.

    Raises:
        InvalidPatternError: If the pattern does not start with '@',
            contains another '@', does not split into exactly two parts
            on ':', or has an empty part.
        EngineError: If the regex engine rejects the assembled expression.
    """
    if not pattern.startswith("@"):
        raise InvalidPatternError(
            "patterns need to be fully-qualified, starting with a @", pattern=pattern
        )

    rest = pattern[1:]
    if "@" in rest:
        raise InvalidPatternError(
            "patterns cannot contain more than one @", pattern=pattern
        )

    parts = rest.split(":")
    if len(parts) != 2:
        raise InvalidPatternError(
            "expected exactly 2 parts in the pattern, separated by :", pattern=pattern
        )

    localpart, domain = parts
    expression = f"^@{translate(localpart, pattern)}:{translate(domain, pattern)}$"

    try:
        regex = re.compile(expression)
    except re.error as e:
        raise EngineError(e, expression=expression) from e

    _logger.debug("Compiled pattern %s -> %s", pattern, expression)
    return CompiledMatcher(pattern=pattern, regex=regex)


def compile_many(patterns: Iterable[str]) -> PatternSet:
    """Compile patterns in order, failing on the first invalid one.

    Args:
        patterns: Raw patterns to compile.

    Returns:
        The compiled matchers, in input order.

    Raises:
        InvalidPatternError: For the first malformed pattern by index.
        EngineError: If the regex engine rejects an assembled expression.
    """
    matchers = tuple(compile_one(pattern) for pattern in patterns)
    _logger.debug("Compiled %d patterns", len(matchers))
    return matchers
