"""Shared test fixtures for the userpatterns test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from userpatterns.compiler import PatternSet, compile_many


@pytest.fixture
def multi_rule_set() -> PatternSet:
    """A bot wildcard rule followed by an exact-user rule."""
    return compile_many(["@bot.*:*.com", "@someone:example.com"])


@pytest.fixture
def allowlist_yaml(tmp_path: Path) -> str:
    """Write a sample allow-list YAML file and return its path."""
    content = """
version: "1.0"
description: "bots and one human"
patterns:
  - "@bot.*:*.com"
  - "@someone:example.com"
"""
    yaml_file = tmp_path / "allowlist.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)
