"""Node representation for files and directories in the tree."""

from typing import Any, Dict, Optional

from anytree import Node

from dirtree.types import FileType


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in a built tree.

    Extends anytree.Node, so the usual anytree navigation (``children``,
    ``descendants``, ``leaves``, iterators and renderers) works on built trees.
    anytree already owns ``path``, ``depth`` and ``size`` as tree properties, so the
    filesystem path is kept in ``file_path`` and the requested attributes in the
    ``attributes`` mapping.

    Attributes:
        name (str): The entry name. For a followed symlink this is the link's name.
        file_path (str): The entry path, normalized if the build asked for it.
        node_type (FileType): Whether the node is a file or a directory.
        is_symlink (bool): True if the entry is a symbolic link that was followed.
        symlink_target (Optional[str]): Where the followed link points.
        attributes (Dict[str, Any]): Requested attributes only. An attribute that was
            not requested is absent, never None or zero.

    Example:
        >>> root = TreeNode("test_data", "test_data", FileType.DIRECTORY)
        >>> leaf = TreeNode("file_a.txt", "test_data/file_a.txt", FileType.FILE, parent=root,
        ...                 attributes={"size": 12, "extension": ".txt"})
        >>> root.is_dir, leaf.is_dir
        (True, False)
        >>> root.to_dict()
        {'path': 'test_data', 'name': 'test_data', 'children': [{'path': 'test_data/file_a.txt', \
'name': 'file_a.txt', 'size': 12, 'extension': '.txt'}]}
    """

    def __init__(
        self,
        name: str,
        file_path: str,
        node_type: FileType,
        parent: Optional["TreeNode"] = None,
        is_symlink: bool = False,
        symlink_target: Optional[str] = None,
        attributes: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.file_path = file_path
        self.node_type = node_type
        self.is_symlink = is_symlink
        self.symlink_target = symlink_target
        self.attributes: Dict[str, Any] = dict(attributes or {})

    @property
    def is_dir(self) -> bool:
        return self.node_type is FileType.DIRECTORY

    def to_dict(self) -> Dict[str, Any]:
        """Convert this node and its descendants into plain nested dictionaries.

        Directories always carry a ``children`` list, empty at the depth ceiling.
        Enum values are rendered as their string values so the result can be passed
        straight to ``json.dumps``.
        """
        data: Dict[str, Any] = {"path": self.file_path, "name": self.name}
        for key, value in self.attributes.items():
            data[key] = value.value if isinstance(value, FileType) else value
        if self.is_symlink:
            data["is_symlink"] = True
        if self.is_dir:
            data["children"] = [child.to_dict() for child in self.children]
        return data
