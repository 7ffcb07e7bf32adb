"""Implementation of exclusion rules using .gitignore pattern syntax."""

import os
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class matches paths using the pathspec library, the same way Git does.
    Standard .gitignore syntax is supported: globs, directory patterns ending in
    ``/``, negation with ``!``, ``**`` and comment lines.

    The traverser hands rules the path it built, which starts with the root path.
    Gitignore patterns are meant for root-relative paths, so when ``root`` is set the
    candidate is first made relative to it; the root itself is never excluded.
    Directory patterns such as ``build/`` only match the directory node itself through
    ``exclude_directory``, which the traverser calls once the entry is known to be a
    directory, so a regular file named ``build`` is kept.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.
        root (Optional[str]): Directory that candidate paths are made relative to.

    Example:
        >>> rules = GitIgnoreExclusionRules(root="project")
        >>> rules.add_rule("*.pyc")
        >>> rules.add_rule("build/")
        >>> rules.exclude("project/pkg/module.pyc")
        True
        >>> rules.exclude("project/build"), rules.exclude_directory("project/build")
        (False, True)
        >>> rules.exclude("project/pkg/module.py")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        root: Optional[PathType] = None,
    ):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
            root: Directory the patterns are relative to, normally the tree root.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])
        self.root = os.fspath(root) if root is not None else None

        if rules_files is not None:
            self.load_rules(rules_files)

    def _relative(self, path: str) -> Optional[str]:
        if self.root is None:
            return path.replace("\\", "/")
        relative = os.path.relpath(path, self.root)
        if relative == os.curdir:
            return None
        return relative.replace("\\", "/")

    def exclude(self, path: str) -> bool:
        relative = self._relative(path)
        if relative is None:
            return False
        return bool(self.spec.match_file(relative))

    def exclude_directory(self, path: str) -> bool:
        relative = self._relative(path)
        if relative is None or relative.endswith("/"):
            return False
        return bool(self.spec.match_file(relative + "/"))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Later patterns may override earlier ones, especially negations with ``!``.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                gitignore_content = f.read().splitlines()

            new_patterns = PathSpec.from_lines(GitWildMatchPattern, gitignore_content).patterns

            # Ensure patterns is a list that supports extend
            if not hasattr(self.spec.patterns, "extend"):
                self.spec.patterns = list(self.spec.patterns)

            self.spec.patterns.extend(new_patterns)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g. "*.pyc", "node_modules/", "!keep.txt").
        """
        new_pattern = GitWildMatchPattern(rule)

        if not hasattr(self.spec.patterns, "append"):
            self.spec.patterns = list(self.spec.patterns)

        self.spec.patterns.append(new_pattern)

    def has_rules(self) -> bool:
        return bool(self.spec.patterns)
