"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .defaults import DEFAULT_IGNORE_PATTERNS
from .glob_rules import GlobExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DEFAULT_IGNORE_PATTERNS",
    "GlobExclusionRules",
]
