"""Immutable configuration for a single tree build."""

import dataclasses
import re
from dataclasses import dataclass
from typing import Any, Optional, Pattern, Sequence, Tuple, Union

from dirtree.exceptions import SIZE_WITH_DEPTH_MESSAGE, ConfigurationError
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.types import Attribute

ExcludeType = Union[str, Pattern[str], BaseExclusionRules]


def _coerce_exclusion_rules(
    exclude: Optional[Union[ExcludeType, Sequence[ExcludeType]]],
) -> Optional[BaseExclusionRules]:
    if exclude is None:
        return None
    if isinstance(exclude, BaseExclusionRules):
        return exclude
    if isinstance(exclude, (str, re.Pattern)):
        return RegexExclusionRules(exclude)

    patterns = []
    rules = []
    for item in exclude:
        if isinstance(item, BaseExclusionRules):
            rules.append(item)
        elif isinstance(item, (str, re.Pattern)):
            patterns.append(item)
        else:
            raise ConfigurationError(f"unsupported exclusion pattern: {item!r}")

    if patterns:
        rules.insert(0, RegexExclusionRules(patterns))
    if not rules:
        return None
    if len(rules) == 1:
        return rules[0]
    return CompositeExclusionRules(rules)


def _coerce_attributes(attributes: Sequence[Union[str, Attribute]]) -> Tuple[Attribute, ...]:
    if isinstance(attributes, (str, Attribute)):
        attributes = [attributes]
    coerced = []
    for name in attributes:
        try:
            attribute = Attribute(name)
        except ValueError:
            raise ConfigurationError(f"unknown attribute: {name!r}") from None
        if attribute not in coerced:
            coerced.append(attribute)
    return tuple(coerced)


@dataclass(frozen=True)
class TreeOptions:
    """Options controlling how a directory tree is built.

    Options are validated on construction, before the filesystem is touched, and
    never change afterwards. Derived forms of ``extensions``, ``exclude`` and
    ``attributes`` replace the raw values so the traverser only sees compiled
    patterns, exclusion rule objects and ``Attribute`` members.

    Attributes:
        extensions: Regular expression a file name must match to be included.
            Directories are never filtered by it.
        exclude: A regular expression, an exclusion rules object, or a sequence of
            either. Any match prunes the entry and its whole subtree.
        attributes: Optional node attributes to compute (``size``, ``type``,
            ``extension``, ``mtime``, ``ctime`` and raw stat fields).
        depth: Maximum number of levels below the root. ``None`` means unlimited.
        follow_symlinks: Dereference symbolic links. Unfollowed links are omitted.
        normalize_path: Render node paths with forward slashes.
        permission_action: What to do when an entry below the root is inaccessible.

    Example:
        >>> options = TreeOptions(extensions=r"\\.txt$", attributes=["size", "type"])
        >>> options.extensions.pattern
        '\\\\.txt$'
        >>> [attribute.value for attribute in options.attributes]
        ['size', 'type']
        >>> TreeOptions(depth=2, attributes=["size"])
        Traceback (most recent call last):
        ...
        dirtree.exceptions.ConfigurationError: usage of size attribute with depth option is prohibited
    """

    extensions: Optional[Pattern[str]] = None
    exclude: Optional[BaseExclusionRules] = None
    attributes: Tuple[Attribute, ...] = ()
    depth: Optional[int] = None
    follow_symlinks: bool = True
    normalize_path: bool = False
    permission_action: PermissionAction = PermissionAction.IGNORE

    def __post_init__(self) -> None:
        extensions: Any = self.extensions
        if isinstance(extensions, str):
            try:
                extensions = re.compile(extensions)
            except re.error as e:
                raise ConfigurationError(f"invalid extensions pattern {self.extensions!r}: {e}") from e
        elif extensions is not None and not isinstance(extensions, re.Pattern):
            raise ConfigurationError(f"extensions must be a regular expression, got {type(extensions)}")

        try:
            exclude = _coerce_exclusion_rules(self.exclude)
        except re.error as e:
            raise ConfigurationError(f"invalid exclusion pattern: {e}") from e

        attributes = _coerce_attributes(self.attributes or ())

        depth = self.depth
        if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int) or depth < 0):
            raise ConfigurationError(f"depth must be a non-negative integer, got {depth!r}")
        if depth is not None and Attribute.SIZE in attributes:
            raise ConfigurationError(SIZE_WITH_DEPTH_MESSAGE)

        try:
            permission_action = PermissionAction(self.permission_action)
        except ValueError:
            raise ConfigurationError(f"unknown permission action: {self.permission_action!r}") from None

        object.__setattr__(self, "extensions", extensions)
        object.__setattr__(self, "exclude", exclude)
        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "permission_action", permission_action)

    def replace(self, **changes: Any) -> "TreeOptions":
        """Return a copy of these options with the given fields changed."""
        return dataclasses.replace(self, **changes)
