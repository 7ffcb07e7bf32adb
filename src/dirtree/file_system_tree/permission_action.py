"""Permission action enum for handling inaccessible entries below the tree root."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when an entry below the root cannot be stat'ed or listed.

    The root itself is always best effort: an inaccessible root yields no tree,
    whichever action is configured.

    Values:
        IGNORE: Skip the entry and its subtree, continue traversal (default behavior)
        RAISE: Abort the build with a PermissionError/OSError naming the entry
    """

    IGNORE = "ignore"
    RAISE = "raise"
