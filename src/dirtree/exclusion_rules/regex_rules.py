"""Exclusion rules backed by regular expressions."""

import re
from typing import List, Optional, Pattern, Sequence, Union

from .base_rules import BaseExclusionRules

RegexType = Union[str, Pattern[str]]


class RegexExclusionRules(BaseExclusionRules):
    """Exclusion rules that match paths against regular expressions.

    Each pattern is applied with ``re.search`` semantics, so it may match anywhere in
    the path. A path is excluded when ANY pattern matches. Patterns may be given as
    strings, which are compiled, or as already compiled ``re.Pattern`` objects, which
    keep their own flags.

    Attributes:
        patterns (List[Pattern[str]]): The compiled patterns, in the order added.

    Example:
        >>> rules = RegexExclusionRules([r"another_dir", re.compile(r"SOME_DIR_2", re.IGNORECASE)])
        >>> rules.exclude("test_data/another_dir/another_file.txt")
        True
        >>> rules.exclude("test_data/some_dir_2")
        True
        >>> rules.exclude("test_data/some_dir/file_a.txt")
        False
    """

    def __init__(self, patterns: Optional[Union[RegexType, Sequence[RegexType]]] = None):
        """Initialize RegexExclusionRules.

        Args:
            patterns: A single pattern or a sequence of patterns. Defaults to no patterns.

        Raises:
            re.error: If a string pattern is not a valid regular expression.
            TypeError: If a pattern is neither a string nor a compiled pattern.
        """
        self.patterns: List[Pattern[str]] = []

        if patterns is None:
            return
        if isinstance(patterns, (str, re.Pattern)):
            patterns = [patterns]
        for pattern in patterns:
            self._add_pattern(pattern)

    def _add_pattern(self, pattern: RegexType) -> None:
        if isinstance(pattern, re.Pattern):
            self.patterns.append(pattern)
        elif isinstance(pattern, str):
            self.patterns.append(re.compile(pattern))
        else:
            raise TypeError(f"Pattern must be a string or compiled regular expression, got {type(pattern)}")

    def exclude(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single regular expression.

        Args:
            rule: The regular expression source to compile and add.
        """
        self._add_pattern(rule)

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"RegexExclusionRules({[p.pattern for p in self.patterns]!r})"
