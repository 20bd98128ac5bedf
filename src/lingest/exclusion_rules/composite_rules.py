"""Composite exclusion rules for combining multiple rule sets."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule sets.

    A path is excluded if ANY of the constituent rules excludes it. Because the
    combination is a plain logical OR, the order of the constituents only affects
    how soon evaluation short-circuits, never the outcome.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from lingest.exclusion_rules.glob_rules import GlobExclusionRules
        >>> composite = CompositeExclusionRules([GlobExclusionRules(["*.log"]), GlobExclusionRules(["dist"])])
        >>> composite.exclude("app.log")
        True
        >>> composite.exclude("dist/app.js")
        True
        >>> composite.exclude("src/app.js")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Args:
            path: File or directory path to check.

        Returns:
            True if ANY of the constituent rules excludes the path.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
