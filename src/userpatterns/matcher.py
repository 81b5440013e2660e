"""Membership checks of identifiers against compiled pattern sets."""

from __future__ import annotations

from collections.abc import Iterable

from userpatterns.compiler import CompiledMatcher

__all__ = ["is_allowed", "first_match"]


def first_match(candidate: str, patterns: Iterable[CompiledMatcher]) -> CompiledMatcher | None:
    """Return the first matcher that accepts candidate, or None."""
    for matcher in patterns:
        if matcher.matches(candidate):
            return matcher
    return None


def is_allowed(candidate: str, patterns: Iterable[CompiledMatcher]) -> bool:
    """Tell whether candidate is accepted by any of the given matchers.

    An empty pattern set allows nothing.
    """
    return first_match(candidate, patterns) is not None
