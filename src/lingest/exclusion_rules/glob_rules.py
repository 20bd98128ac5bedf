"""Glob pattern rules using gitignore-style wildmatch syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern

from lingest.exceptions import InvalidPatternError
from lingest.types import PathType

from .base_rules import BaseExclusionRules


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules matching root-relative paths against glob patterns.

    Patterns use the wildmatch syntax of .gitignore files, evaluated through the
    pathspec library:

    - ``*`` matches within one path component, ``**`` across components
    - A pattern without a slash matches a name at any depth (``*.md``)
    - A pattern also matches everything below a matching directory
      (``**/build`` excludes ``build/out/app.js``)
    - A trailing slash restricts a pattern to directories (``build/``)

    Unlike .gitignore files, patterns combine as a plain logical OR: a path is
    matched if any pattern matches it, independent of order. Negated patterns
    (``!pattern``) would make the result depend on order and are rejected.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GlobExclusionRules(["**/b/**", "**/b"])
        >>> rules.exclude("b")
        True
        >>> rules.exclude("b/c.txt")
        True
        >>> rules.exclude("bc.txt")
        False

    Note:
        The paths provided to exclude() should use forward slashes (/) as path
        separators, even on Windows systems.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        """Initialize GlobExclusionRules with an optional set of patterns.

        Args:
            patterns: Glob patterns to start with.

        Raises:
            InvalidPatternError: If a pattern is negated or cannot be compiled.
        """
        self._patterns: List[str] = []
        self._compiled: List[GitWildMatchPattern] = []
        self.spec = PathSpec([])

        if patterns is not None:
            self._extend(patterns)

    @property
    def patterns(self) -> List[str]:
        """The raw patterns in the order they were added."""
        return list(self._patterns)

    def exclude(self, path: str) -> bool:
        """Check if a path matches any of the loaded patterns.

        Args:
            path: Root-relative path with forward slashes.

        Returns:
            bool: True if any pattern matches the path.
        """
        return self.spec.match_file(path)

    def match(self, path: str) -> bool:
        """Alias of exclude() for rule sets used to admit paths rather than drop them."""
        return self.exclude(path)

    def has_rules(self) -> bool:
        return bool(self._patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern.

        Blank patterns and ``#`` comments are accepted and have no effect.

        Args:
            rule: A single glob pattern such as ``*.pyc`` or ``**/node_modules``.

        Raises:
            InvalidPatternError: If the pattern is negated or cannot be compiled.

        Example:
            >>> rules = GlobExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.exclude("test.pyc")
            True
            >>> rules.add_rule("!important.pyc")
            Traceback (most recent call last):
                ...
            lingest.exceptions.InvalidPatternError: Negated patterns are not supported: !important.pyc
        """
        self._extend([rule])

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load patterns from one or more files, one pattern per line.

        Blank lines and lines starting with ``#`` are skipped.

        Args:
            rules_files: Path(s) to file(s) containing glob patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            InvalidPatternError: If any line holds a negated or malformed pattern.

        Example:
            >>> import tempfile
            >>> import os
            >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
            ...     _ = f.write('# build output\\n*.o\\n\\nbuild/\\n')
            >>> rules = GlobExclusionRules()
            >>> rules.load_rules(f.name)
            >>> rules.patterns
            ['*.o', 'build/']
            >>> os.unlink(f.name)
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self._extend(f.read().splitlines())

    def _extend(self, rules: Iterable[str]) -> None:
        """Compile and append patterns, then rebuild the matcher once.

        Nothing is added if any of the patterns is rejected.
        """
        patterns: List[str] = []
        compiled: List[GitWildMatchPattern] = []
        for rule in rules:
            rule = rule.strip()
            if not rule or rule.startswith("#"):
                continue
            if rule.startswith("!"):
                raise InvalidPatternError(rule)

            try:
                compiled.append(GitWildMatchPattern(rule))
            except ValueError as e:
                raise InvalidPatternError(rule, f"Invalid pattern ({e})") from e

            patterns.append(rule)

        self._patterns.extend(patterns)
        self._compiled.extend(compiled)
        self.spec = PathSpec(self._compiled)
