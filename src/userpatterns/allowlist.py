"""AllowList: a reloadable set of compiled identifier patterns.

Wraps a PatternSet with YAML loading and logged access decisions.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from userpatterns.compiler import CompiledMatcher, PatternSet, compile_many, compile_one
from userpatterns.config import AllowListConfig, load_config
from userpatterns.errors import ConfigError
from userpatterns.matcher import first_match

__all__ = ["AllowList"]


class AllowList:
    """Disjunctive allow-list of ``@localpart:domain`` wildcard patterns.

    The compiled PatternSet is never edited in place. ``add``, ``remove``
    and ``reload`` build a new tuple and swap it in.

    Thread safety:
        Internally synchronized. Readers match against a snapshot of the
        current PatternSet, so checks never block on each other.
    """

    def __init__(self, patterns: Iterable[str | CompiledMatcher] = ()) -> None:
        """Initialize from raw patterns and/or already compiled matchers.

        Raises:
            InvalidPatternError: If any raw pattern is malformed.
        """
        self._patterns: PatternSet = tuple(
            p if isinstance(p, CompiledMatcher) else compile_one(p) for p in patterns
        )
        self._yaml_path: str | None = None
        self._logger: logging.Logger = logging.getLogger("userpatterns.allowlist")
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: AllowListConfig) -> AllowList:
        """Build an AllowList from a validated configuration."""
        return cls(compile_many(config.patterns))

    @classmethod
    def load(cls, yaml_path: str) -> AllowList:
        """Load an allow-list from a YAML file.

        Args:
            yaml_path: Path to a file with a ``patterns`` list.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not a valid allow-list config.
            InvalidPatternError: If any listed pattern is malformed.
        """
        allowlist = cls.from_config(load_config(yaml_path))
        allowlist._yaml_path = yaml_path
        allowlist._logger.info(
            "Loaded %d patterns from %s", len(allowlist), yaml_path
        )
        return allowlist

    @property
    def patterns(self) -> PatternSet:
        """The current compiled patterns, in insertion order."""
        with self._lock:
            return self._patterns

    def match(self, user_id: str) -> CompiledMatcher | None:
        """Return the first matcher accepting user_id, or None."""
        return first_match(user_id, self.patterns)

    def check(self, user_id: str) -> bool:
        """Check whether user_id is allowed by any pattern."""
        matcher = self.match(user_id)
        if matcher is None:
            self._logger.debug("Allow-list check: user=%s decision=deny", user_id)
            return False
        self._logger.debug(
            "Allow-list check: user=%s decision=allow pattern=%s",
            user_id,
            matcher.pattern,
        )
        return True

    def add(self, pattern: str) -> CompiledMatcher:
        """Compile pattern and append it to the allow-list.

        Raises:
            InvalidPatternError: If the pattern is malformed.
        """
        matcher = compile_one(pattern)
        with self._lock:
            self._patterns = self._patterns + (matcher,)
        return matcher

    def remove(self, pattern: str) -> bool:
        """Remove the first matcher compiled from pattern.

        Returns:
            True if a matcher was removed, False otherwise.
        """
        with self._lock:
            for i, matcher in enumerate(self._patterns):
                if matcher.pattern == pattern:
                    self._patterns = self._patterns[:i] + self._patterns[i + 1 :]
                    return True
            return False

    def reload(self) -> None:
        """Re-read patterns from the original YAML file.

        The current patterns are kept if the file fails to load.

        Raises:
            ConfigError: If the AllowList was not created by ``load``.
        """
        with self._lock:
            yaml_path = self._yaml_path
        if yaml_path is None:
            raise ConfigError("Cannot reload: AllowList was not loaded from a YAML file")
        reloaded = AllowList.load(yaml_path)
        with self._lock:
            self._patterns = reloaded._patterns

    def __contains__(self, user_id: object) -> bool:
        return isinstance(user_id, str) and self.check(user_id)

    def __iter__(self) -> Iterator[CompiledMatcher]:
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)

    def __repr__(self) -> str:
        return f"AllowList({[m.pattern for m in self.patterns]!r})"
