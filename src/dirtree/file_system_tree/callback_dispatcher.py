"""Invocation of the caller's per-node callbacks."""

from typing import Optional

from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.types import NodeCallback


class CallbackDispatcher:
    """Calls ``on_file``/``on_directory`` once for every node kept in the tree.

    Either callback may be absent. Callbacks run synchronously on the traversal's
    call stack and nothing here catches what they raise: an exception aborts the
    build and reaches the caller as the very same object.

    Attributes:
        on_file (Optional[NodeCallback]): Called as ``on_file(node, path)`` per file.
        on_directory (Optional[NodeCallback]): Called as ``on_directory(node, path)``
            per directory, including the root.
    """

    def __init__(self, on_file: Optional[NodeCallback] = None, on_directory: Optional[NodeCallback] = None) -> None:
        self.on_file = on_file
        self.on_directory = on_directory

    def file_visited(self, node: TreeNode, path: str) -> None:
        if self.on_file is not None:
            self.on_file(node, path)

    def directory_visited(self, node: TreeNode, path: str) -> None:
        if self.on_directory is not None:
            self.on_directory(node, path)
