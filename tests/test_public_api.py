"""Tests for the userpatterns public API surface."""

import userpatterns


class TestPublicAPIImports:
    """Every public component must be importable from ``import userpatterns``."""

    def test_compile_functions_importable(self):
        from userpatterns import compile_many, compile_one, translate

        assert callable(compile_one)
        assert callable(compile_many)
        assert callable(translate)

    def test_matcher_functions_importable(self):
        from userpatterns import first_match, is_allowed

        assert callable(is_allowed)
        assert callable(first_match)

    def test_allowlist_importable(self):
        from userpatterns import AllowList, AllowListConfig

        assert AllowList is not None
        assert AllowListConfig is not None

    def test_errors_importable(self):
        from userpatterns import EngineError, InvalidPatternError, PatternError

        assert issubclass(InvalidPatternError, PatternError)
        assert issubclass(EngineError, PatternError)


class TestAll:
    def test_all_names_resolve(self):
        for name in userpatterns.__all__:
            assert hasattr(userpatterns, name), name

    def test_version(self):
        assert userpatterns.__version__ == "0.1.0"
