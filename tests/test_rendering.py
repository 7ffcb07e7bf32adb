"""Tests for text renderings of built trees."""

from dirtree.directory_tree import directory_tree
from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.rendering import get_tree_representation, summarize
from dirtree.types import FileType


def test_tree_representation(test_data):
    tree = directory_tree(test_data, follow_symlinks=False)
    assert get_tree_representation(tree).splitlines() == [
        "test_data/",
        "├── some_dir/",
        "│   ├── another_dir/",
        "│   │   ├── file_a.txt",
        "│   │   └── file_b.txt",
        "│   ├── file_a.txt",
        "│   └── file_b.txt",
        "├── some_dir_2/",
        "│   └── .gitkeep",
        "├── file_a.txt",
        "└── file_b.txt",
    ]


def test_tree_representation_with_sizes(test_data):
    tree = directory_tree(test_data, extensions=r"\.txt$", attributes=["size"])
    lines = get_tree_representation(tree).splitlines()
    assert lines[0] == "test_data/ (12 KB)"
    assert "└── file_b.txt (2 KB)" in lines


def test_symlink_marker():
    root = TreeNode("root", "root", FileType.DIRECTORY)
    TreeNode("alias", "root/alias", FileType.DIRECTORY, parent=root, is_symlink=True, symlink_target="root/target")
    assert get_tree_representation(root).splitlines() == ["root/", "└── alias/ → root/target [symlink]"]


def test_summarize(test_data):
    tree = directory_tree(test_data, follow_symlinks=False)
    assert summarize(tree) == {"directories": 3, "files": 7, "symlinks": 0}
