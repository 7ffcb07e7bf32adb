from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    An exclusion rule is a matcher over candidate paths. When a rule matches, the
    traverser drops that entry and its entire subtree before statting, listing or
    attributing anything beneath it. All implementations must provide ``exclude``;
    file loading and individual rule addition are optional capabilities.

    Example:
        >>> from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
        >>> rules = RegexExclusionRules(r"node_modules")
        >>> rules.exclude("project/node_modules/left-pad")
        True
        >>> rules.add_rule(r"\\.pyc$")
        >>> rules.exclude("project/main.pyc")
        True
        >>> rules.exclude("project/main.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The candidate path exactly as the traverser built it, before
                any separator normalization.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def exclude_directory(self, path: str) -> bool:
        """
        Determine if a path already known to be a directory should be excluded.

        The traverser calls this in addition to ``exclude`` once an entry has been
        stat'ed as a directory. Rule types with directory-only patterns override it;
        the default matches nothing.

        Args:
            path (str): The directory path, as passed to ``exclude``.

        Returns:
            bool: True if the directory should be excluded.
        """
        return False

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation,
        which raises NotImplementedError.

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
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (a regular expression, a gitignore pattern, ...).

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """Check whether any rule is configured. Rule types without state always report True."""
        return True
