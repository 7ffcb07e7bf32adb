from enum import Enum
from os import PathLike
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from dirtree.file_system_tree.tree_node import TreeNode

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(str, Enum):
    """Enumeration of node types produced during traversal.

    Symbolic links never get a type of their own: a followed link takes the type
    of its target, and an unfollowed link is left out of the tree.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"


class Attribute(str, Enum):
    """Optional node attributes that can be requested for a tree.

    SIZE, TYPE, EXTENSION, MTIME and CTIME are the primary attributes. The
    remaining members expose raw ``os.stat_result`` fields under their short names.

    Example:
        >>> Attribute("size") is Attribute.SIZE
        True
        >>> Attribute.MTIME.stat_field
        'st_mtime'
    """

    SIZE = "size"
    TYPE = "type"
    EXTENSION = "extension"
    MTIME = "mtime"
    CTIME = "ctime"
    ATIME = "atime"
    MODE = "mode"
    INO = "ino"
    DEV = "dev"
    NLINK = "nlink"
    UID = "uid"
    GID = "gid"

    @property
    def stat_field(self) -> str:
        """Name of the ``os.stat_result`` field backing this attribute."""
        return f"st_{self.value}"


# Signature shared by on_file and on_directory callbacks: (node, path) -> None
NodeCallback = Callable[["TreeNode", str], None]
