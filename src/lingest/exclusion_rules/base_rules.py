from abc import ABC, abstractmethod
from typing import Sequence, Union

from lingest.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Implementations decide whether a path relative to the processed root should be
    left out of both the tree and the file contents. Loading rules from files and
    adding individual rules are optional capabilities that depend on the rule type.

    Example:
        >>> from lingest.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The file or directory path to check, relative to the root of
                the directory being processed and using forward slashes.

        Returns:
            bool: True if the path should be excluded, False if it should be kept.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that don't support file operations use this default
        implementation, which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, e.g. a glob pattern like "*.pyc".

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Return whether any rule is configured."""
        return True
