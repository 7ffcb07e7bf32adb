"""Depth-first construction of a directory tree.

The traverser walks the filesystem recursively, and for every entry decides in
turn: whether it is excluded, what it is (following symlinks or not), whether
it passes the extension filter, and how deep to descend. Nodes are attributed
and reported to the callbacks as they are completed, files immediately and
directories once all of their children are in place.
"""

import logging
import os
import stat
from typing import Optional, Set

from dirtree.file_system_tree.attribute_collector import AttributeCollector
from dirtree.file_system_tree.callback_dispatcher import CallbackDispatcher
from dirtree.file_system_tree.entry_filter import EntryFilter
from dirtree.file_system_tree.file_identifier import FileIdentifier
from dirtree.file_system_tree.file_system import FileSystem, OSFileSystem
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.paths import normalize_path
from dirtree.tree_options import TreeOptions
from dirtree.types import FileType

logger = logging.getLogger(__name__)


def entry_name(path: str) -> str:
    """Return the display name of ``path``, ignoring trailing separators.

    Example:
        >>> entry_name("test/test_data/")
        'test_data'
        >>> entry_name("/")
        '/'
    """
    stripped = path.rstrip("/" + os.sep)
    return os.path.basename(stripped) or path


class Traverser:
    """Recursive depth-first walker that builds ``TreeNode`` trees.

    A traverser holds the per-build state (the directories on the current branch,
    used for symlink cycle detection), so each build uses its own instance.

    Symbolic Link Behavior:
        With ``follow_symlinks`` on, a link is described by its target's stat
        information while keeping its own name, and is flagged ``is_symlink``. A link
        that leads back to a directory already on the current branch is skipped.
        With ``follow_symlinks`` off, a link is described by its own metadata, which
        makes it neither a file nor a directory, so it is left out.

    Permission Handling:
        An inaccessible root always produces ``None``. Below the root,
        ``PermissionAction.IGNORE`` skips the entry and its subtree while
        ``PermissionAction.RAISE`` aborts the build.

    Attributes:
        options (TreeOptions): The validated build options.
        file_system (FileSystem): Where stat and listing calls go.
        entry_filter (EntryFilter): Exclusion and extension decisions.
        attribute_collector (AttributeCollector): Computes requested attributes.
        dispatcher (CallbackDispatcher): Reports completed nodes to the caller.
    """

    def __init__(
        self,
        options: TreeOptions,
        file_system: Optional[FileSystem] = None,
        dispatcher: Optional[CallbackDispatcher] = None,
    ) -> None:
        self.options = options
        self.file_system = file_system if file_system is not None else OSFileSystem()
        self.entry_filter = EntryFilter.from_options(options)
        self.attribute_collector = AttributeCollector(options.attributes)
        self.dispatcher = dispatcher if dispatcher is not None else CallbackDispatcher()
        self._branch: Set[FileIdentifier] = set()

    def visit(self, path: str, depth_remaining: Optional[int], is_root: bool = False) -> Optional[TreeNode]:
        """Build the node for ``path`` and, for directories, its descendants.

        Args:
            path: The entry to visit.
            depth_remaining: How many further levels may be listed below this entry,
                or None for no limit.
            is_root: Whether this is the entry the build started from.

        Returns:
            The completed node, or None if the entry is excluded, filtered out,
            inaccessible, a symlink cycle, or neither a file nor a directory.

        Raises:
            PermissionError: If an entry below the root is inaccessible and the
                permission action is RAISE.
            Exception: Anything raised by a callback, unchanged.
        """
        if self.entry_filter.should_exclude(path):
            return None

        try:
            stat_result = self.file_system.stat_entry(path, follow_symlinks=False)
            is_symlink = stat.S_ISLNK(stat_result.st_mode)
            if is_symlink and self.options.follow_symlinks:
                stat_result = self.file_system.stat_entry(path, follow_symlinks=True)
        except OSError as e:
            self._access_failed(path, e, is_root)
            return None

        if stat.S_ISREG(stat_result.st_mode):
            return self._visit_file(path, stat_result, is_symlink)
        if stat.S_ISDIR(stat_result.st_mode):
            return self._visit_directory(path, stat_result, is_symlink, depth_remaining, is_root)

        logger.debug("Skipping %s: not a regular file or directory", path)
        return None

    def _visit_file(self, path: str, stat_result: os.stat_result, is_symlink: bool) -> Optional[TreeNode]:
        name = entry_name(path)
        if not self.entry_filter.should_include_file(name):
            return None

        node = self._create_node(path, name, FileType.FILE, is_symlink)
        node.attributes = self.attribute_collector.attributes_for(node, stat_result)
        self.dispatcher.file_visited(node, node.file_path)
        return node

    def _visit_directory(
        self,
        path: str,
        stat_result: os.stat_result,
        is_symlink: bool,
        depth_remaining: Optional[int],
        is_root: bool,
    ) -> Optional[TreeNode]:
        if self.entry_filter.should_exclude_directory(path):
            return None

        file_id = FileIdentifier.from_stat(stat_result)
        if file_id in self._branch:
            logger.debug("Skipping %s: symlink loop detected", path)
            return None

        try:
            entries = self.file_system.list_entries(path)
        except OSError as e:
            self._access_failed(path, e, is_root)
            return None

        node = self._create_node(path, entry_name(path), FileType.DIRECTORY, is_symlink)

        if depth_remaining is None or depth_remaining > 0:
            child_depth = None if depth_remaining is None else depth_remaining - 1
            self._branch.add(file_id)
            try:
                children = []
                for entry in entries:
                    child = self.visit(os.path.join(path, entry), child_depth)
                    if child is not None:
                        children.append(child)
                node.children = children
            finally:
                self._branch.discard(file_id)

        node.attributes = self.attribute_collector.attributes_for(node, stat_result)
        self.dispatcher.directory_visited(node, node.file_path)
        return node

    def _create_node(self, path: str, name: str, node_type: FileType, is_symlink: bool) -> TreeNode:
        symlink_target = None
        if is_symlink:
            try:
                symlink_target = self.file_system.resolve_symlink(path)
            except OSError as e:
                logger.debug("Could not read symlink target of %s: %s", path, e)

        file_path = normalize_path(path) if self.options.normalize_path else path
        return TreeNode(name, file_path, node_type, is_symlink=is_symlink, symlink_target=symlink_target)

    def _access_failed(self, path: str, error: OSError, is_root: bool) -> None:
        if is_root:
            logger.debug("Cannot access root %s: %s", path, error)
            return

        if isinstance(error, PermissionError):
            message = f"Access denied to {path}: {error}"
        else:
            message = f"Error accessing {path}: {error}"

        if self.options.permission_action == PermissionAction.RAISE:
            if isinstance(error, PermissionError):
                raise PermissionError(message) from error
            raise OSError(message) from error

        # Records carrying skipped_entry let callers report what was left out
        logger.debug("%s, skipping", message, extra={"skipped_entry": message})
