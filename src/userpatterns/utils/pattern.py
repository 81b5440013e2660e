"""Wildcard-to-regex translation for identifier segments."""

from __future__ import annotations

import re

from userpatterns.errors import InvalidPatternError

__all__ = ["WILDCARD", "WILDCARD_FRAGMENT", "translate"]

WILDCARD = "*"

# Never crosses the @ or : separators.
WILDCARD_FRAGMENT = "([^:@]*)"


def translate(segment: str, pattern: str | None = None) -> str:
    """Translate one localpart or domain segment into a regex fragment.

    Each '*' becomes a wildcard matching zero or more characters other
    than '@' and ':'. Every other character is escaped and matched
    literally, so 'example.com' never matches 'exampleXcom'.

    Args:
        segment: The localpart or domain half of a pattern.
        pattern: The full raw pattern, reported in errors.

    Returns:
        The regex fragment for the segment, unanchored.

    Raises:
        InvalidPatternError: If the segment is empty.
    """
    if not segment:
        raise InvalidPatternError("rejecting empty part", pattern=pattern)

    fragments: list[str] = []
    for char in segment:
        if char == WILDCARD:
            fragments.append(WILDCARD_FRAGMENT)
        else:
            fragments.append(re.escape(char))
    return "".join(fragments)
