"""Tests for composite exclusion rules."""

import pytest

from lingest.exclusion_rules.base_rules import BaseExclusionRules
from lingest.exclusion_rules.composite_rules import CompositeExclusionRules
from lingest.exclusion_rules.glob_rules import GlobExclusionRules


class TestCompositeExclusionRules:
    """Test CompositeExclusionRules functionality."""

    def test_init_with_empty_rules(self):
        """Test initialization with empty rules list raises ValueError."""
        with pytest.raises(ValueError, match="At least one exclusion rule must be provided"):
            CompositeExclusionRules([])

    def test_init_with_invalid_rule_type(self):
        """Test initialization with invalid rule type raises TypeError."""
        with pytest.raises(TypeError, match="Rule at index 1 must implement BaseExclusionRules"):
            CompositeExclusionRules([GlobExclusionRules(), "not a rule"])

    def test_exclude_is_logical_or(self):
        """A path is excluded when any constituent excludes it."""
        composite = CompositeExclusionRules([GlobExclusionRules(["*.log"]), GlobExclusionRules(["**/dist"])])

        assert composite.exclude("server.log")
        assert composite.exclude("web/dist/app.js")
        assert not composite.exclude("web/src/app.js")

    def test_exclude_short_circuits(self):
        """Later rules are not consulted once a rule excludes the path."""

        class CountingRules(BaseExclusionRules):
            def __init__(self):
                self.calls = 0

            def exclude(self, path: str) -> bool:
                self.calls += 1
                return False

        counting = CountingRules()
        composite = CompositeExclusionRules([GlobExclusionRules(["*.log"]), counting])

        assert composite.exclude("a.log")
        assert counting.calls == 0
        assert not composite.exclude("a.txt")
        assert counting.calls == 1

    def test_has_rules(self):
        assert not CompositeExclusionRules([GlobExclusionRules(), GlobExclusionRules()]).has_rules()
        assert CompositeExclusionRules([GlobExclusionRules(), GlobExclusionRules(["*.log"])]).has_rules()

    def test_get_rules_returns_copy(self):
        rule = GlobExclusionRules(["*.log"])
        composite = CompositeExclusionRules([rule])

        rules = composite.get_rules()
        rules.clear()

        assert composite.get_rules() == [rule]

    def test_base_rules_optional_capabilities(self):
        """Rule types without file or single-rule support raise NotImplementedError."""
        composite = CompositeExclusionRules([GlobExclusionRules()])

        with pytest.raises(NotImplementedError):
            composite.add_rule("*.log")
        with pytest.raises(NotImplementedError):
            composite.load_rules("rules.txt")
