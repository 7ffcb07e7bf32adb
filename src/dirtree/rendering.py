"""Text renderings and summaries of built trees."""

from typing import Dict, Iterator

from anytree import PreOrderIter
from humanfriendly import format_size

from dirtree.file_system_tree.tree_node import TreeNode


def _label(node: TreeNode) -> str:
    label = node.name
    if node.is_dir:
        label += "/"
    if node.is_symlink:
        label += f" → {node.symlink_target} [symlink]" if node.symlink_target else " [symlink]"
    if "size" in node.attributes:
        label += f" ({format_size(node.attributes['size'])})"
    return label


def stream_tree_representation(root: TreeNode) -> Iterator[str]:
    """Generate a tree representation one line at a time.

    Output resembles the Unix ``tree`` command. Within a directory, subdirectories
    come first, then files, both alphabetically. Sizes are shown in human-readable
    form when the tree was built with the ``size`` attribute.

    Yields:
        Lines of the tree representation, including the connecting lines.

    Example:
        >>> from dirtree.types import FileType
        >>> root = TreeNode("src", "src", FileType.DIRECTORY)
        >>> utils = TreeNode("utils", "src/utils", FileType.DIRECTORY, parent=root)
        >>> _ = TreeNode("main.py", "src/main.py", FileType.FILE, parent=root)
        >>> _ = TreeNode("helpers.py", "src/utils/helpers.py", FileType.FILE, parent=utils)
        >>> print("\\n".join(stream_tree_representation(root)))
        src/
        ├── utils/
        │   └── helpers.py
        └── main.py
    """

    def write_node(node: TreeNode, prefix: str, is_last: bool) -> Iterator[str]:
        connector = "└── " if is_last else "├── "
        yield f"{prefix}{connector}{_label(node)}"

        child_prefix = prefix + ("    " if is_last else "│   ")
        yield from write_children(node, child_prefix)

    def write_children(node: TreeNode, prefix: str) -> Iterator[str]:
        sorted_children = sorted(node.children, key=lambda n: (not n.is_dir, n.name.lower()))
        for i, child in enumerate(sorted_children):
            yield from write_node(child, prefix, i == len(sorted_children) - 1)

    yield _label(root)
    yield from write_children(root, "")


def get_tree_representation(root: TreeNode) -> str:
    """Get a complete string representation of the tree."""
    return "\n".join(stream_tree_representation(root))


def summarize(root: TreeNode) -> Dict[str, int]:
    """Count the directories (excluding the root), files and followed symlinks in a tree.

    Example:
        >>> from dirtree.types import FileType
        >>> root = TreeNode("src", "src", FileType.DIRECTORY)
        >>> _ = TreeNode("main.py", "src/main.py", FileType.FILE, parent=root)
        >>> summarize(root)
        {'directories': 0, 'files': 1, 'symlinks': 0}
    """
    counts = {"directories": 0, "files": 0, "symlinks": 0}
    for node in PreOrderIter(root):
        if node.is_symlink:
            counts["symlinks"] += 1
        if node.is_dir:
            if node is not root:
                counts["directories"] += 1
        else:
            counts["files"] += 1
    return counts
