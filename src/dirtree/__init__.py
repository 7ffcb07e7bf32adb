"""Directory tree construction utilities.

This package builds in-memory tree representations of filesystem directories,
with optional extension filtering, exclusion patterns, depth limiting, computed
attributes and per-node callbacks.
"""

from importlib.metadata import PackageNotFoundError, version

from dirtree.directory_tree import DirectoryTree, directory_tree
from dirtree.exceptions import ConfigurationError
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.tree_options import TreeOptions
from dirtree.types import Attribute, FileType

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "Attribute",
    "ConfigurationError",
    "DirectoryTree",
    "FileType",
    "PermissionAction",
    "TreeNode",
    "TreeOptions",
    "directory_tree",
]
