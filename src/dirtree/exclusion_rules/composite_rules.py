"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules determines it should be
    excluded. Rules are consulted in the order given and evaluation short-circuits
    on the first match.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
        >>> composite = CompositeExclusionRules([RegexExclusionRules("another_dir"), RegexExclusionRules("some_dir_2")])
        >>> composite.exclude("test_data/some_dir_2")
        True
        >>> composite.exclude("test_data/some_dir")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def exclude_directory(self, path: str) -> bool:
        return any(rule.exclude_directory(path) for rule in self.rules)
