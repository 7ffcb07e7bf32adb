"""Public entry points for building directory trees."""

import os
from typing import Any, Optional

from dirtree.file_system_tree.callback_dispatcher import CallbackDispatcher
from dirtree.file_system_tree.file_system import FileSystem, OSFileSystem
from dirtree.file_system_tree.traverser import Traverser
from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.tree_options import TreeOptions
from dirtree.types import NodeCallback, PathType


class DirectoryTree:
    """Builds in-memory trees mirroring a directory on disk.

    Each call to ``build`` walks the filesystem again and returns a new,
    independent tree, so repeated builds reflect the current state of the
    directory. Nothing is shared between builds.

    Attributes:
        root_path (str): The path the tree is built from, as given.
        options (TreeOptions): Options applied to every build.
        file_system (FileSystem): Filesystem access layer.

    Example:
        >>> tree = DirectoryTree("src", TreeOptions(extensions=r"\\.py$"))  # doctest: +SKIP
        >>> root = tree.build(on_file=lambda node, path: print(path))  # doctest: +SKIP
        src/dirtree/__init__.py
        src/dirtree/paths.py
    """

    def __init__(
        self,
        root_path: PathType,
        options: Optional[TreeOptions] = None,
        file_system: Optional[FileSystem] = None,
    ) -> None:
        self.root_path = os.fspath(root_path)
        self.options = options if options is not None else TreeOptions()
        self.file_system = file_system if file_system is not None else OSFileSystem()

    def build(
        self,
        on_file: Optional[NodeCallback] = None,
        on_directory: Optional[NodeCallback] = None,
    ) -> Optional[TreeNode]:
        """Build the tree.

        Args:
            on_file: Called as ``on_file(node, path)`` once per file kept in the tree.
            on_directory: Called as ``on_directory(node, path)`` once per directory kept
                in the tree, after its children.

        Returns:
            The root node, or None if the root cannot be accessed or is itself
            excluded or filtered out.

        Raises:
            PermissionError: If an entry below the root is inaccessible and the
                permission action is RAISE.
            Exception: Anything raised by a callback, unchanged.
        """
        traverser = Traverser(self.options, self.file_system, CallbackDispatcher(on_file, on_directory))
        return traverser.visit(self.root_path, self.options.depth, is_root=True)


def directory_tree(
    root_path: PathType,
    options: Optional[TreeOptions] = None,
    on_file: Optional[NodeCallback] = None,
    on_directory: Optional[NodeCallback] = None,
    **kwargs: Any,
) -> Optional[TreeNode]:
    """Build a tree for ``root_path`` in one call.

    Options can be given as a ``TreeOptions`` object, as keyword arguments, or both,
    in which case the keyword arguments override the object's fields. Options are
    validated before the filesystem is touched.

    Args:
        root_path: Directory (or file) to build the tree from.
        options: Prepared options.
        on_file: Per-file callback, see ``DirectoryTree.build``.
        on_directory: Per-directory callback, see ``DirectoryTree.build``.
        **kwargs: Any ``TreeOptions`` field.

    Returns:
        The root node, or None if the root is inaccessible.

    Raises:
        ConfigurationError: If the options are invalid, for example when ``size`` is
            requested together with ``depth``.

    Example:
        >>> directory_tree("test/test_data", extensions=r"\\.txt$", follow_symlinks=False)  # doctest: +SKIP
        TreeNode('/test_data', file_path='test/test_data', ...)
        >>> directory_tree("/nonexistent") is None
        True
    """
    if options is None:
        options = TreeOptions(**kwargs)
    elif kwargs:
        options = options.replace(**kwargs)
    return DirectoryTree(root_path, options).build(on_file, on_directory)
