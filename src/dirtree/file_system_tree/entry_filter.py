"""Inclusion and exclusion decisions for candidate entries."""

from typing import Optional, Pattern

from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.tree_options import TreeOptions


class EntryFilter:
    """Decides which entries make it into the tree.

    Exclusion is checked first, against the path as the traverser built it, and
    prunes directories as well as files. Rules that only apply to directories are
    checked separately, once an entry is known to be one. Extension filtering only ever applies to
    files: a directory passes regardless of the files beneath it.

    Example:
        >>> entry_filter = EntryFilter.from_options(TreeOptions(extensions=r"\\.txt$", exclude="another_dir"))
        >>> entry_filter.should_exclude("test_data/another_dir")
        True
        >>> entry_filter.should_include_file("file_a.txt"), entry_filter.should_include_file("file_b.md")
        (True, False)
    """

    def __init__(
        self,
        extensions: Optional[Pattern[str]] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.extensions = extensions
        self.exclusion_rules = exclusion_rules

    @classmethod
    def from_options(cls, options: TreeOptions) -> "EntryFilter":
        return cls(options.extensions, options.exclude)

    def should_exclude(self, path: str) -> bool:
        if self.exclusion_rules is None:
            return False
        return self.exclusion_rules.exclude(path)

    def should_exclude_directory(self, path: str) -> bool:
        if self.exclusion_rules is None:
            return False
        return self.exclusion_rules.exclude_directory(path)

    def should_include_file(self, name: str) -> bool:
        if self.extensions is None:
            return True
        return self.extensions.search(name) is not None
