"""File identifier for uniquely identifying directories by device and inode."""

import os
from typing import NamedTuple


class FileIdentifier(NamedTuple):
    """Device and inode pair that uniquely identifies a file or directory.

    The traverser keeps the identifiers of the directories on the current branch
    so that a followed symlink pointing back at an ancestor is recognised as a
    cycle instead of being descended into forever.

    Note:
        On Windows, st_ino might not be as reliable as on Unix systems, but Python's
        os.stat implementation provides reasonable values for loop detection.

    Example:
        >>> FileIdentifier(2049, 131) == FileIdentifier(2049, 131)
        True
        >>> FileIdentifier(2049, 131) in {FileIdentifier(2049, 132)}
        False
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)
