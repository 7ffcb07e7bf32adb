"""Narrow filesystem access layer used by the traverser.

The traverser never calls ``os`` directly. Everything it needs from the
filesystem goes through a ``FileSystem`` object, which keeps the traversal
logic independent of where entries come from and lets tests substitute their
own implementation.
"""

import os
from abc import ABC, abstractmethod
from typing import List


class FileSystem(ABC):
    """Read-only view of a filesystem.

    Implementations raise ``OSError`` (or a subclass such as ``PermissionError``)
    when an entry cannot be accessed. They must not swallow errors: deciding
    whether a failure is fatal belongs to the traverser.
    """

    @abstractmethod
    def stat_entry(self, path: str, follow_symlinks: bool = True) -> os.stat_result:
        """Return stat information for ``path``.

        Args:
            path: The entry to inspect.
            follow_symlinks: When False, describe a symbolic link itself instead of
                its target.
        """

    @abstractmethod
    def list_entries(self, path: str) -> List[str]:
        """Return the names of the entries in directory ``path``, in listing order."""

    @abstractmethod
    def resolve_symlink(self, path: str) -> str:
        """Return the path a symbolic link points to."""


class OSFileSystem(FileSystem):
    """``FileSystem`` backed by the local operating system.

    Example:
        >>> import tempfile
        >>> fs = OSFileSystem()
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     open(os.path.join(tmpdir, "a.txt"), "w").close()
        ...     fs.list_entries(tmpdir)
        ['a.txt']
    """

    def stat_entry(self, path: str, follow_symlinks: bool = True) -> os.stat_result:
        return os.stat(path, follow_symlinks=follow_symlinks)

    def list_entries(self, path: str) -> List[str]:
        return os.listdir(path)

    def resolve_symlink(self, path: str) -> str:
        target = os.readlink(path)
        if os.path.isabs(target):
            return target
        return os.path.join(os.path.dirname(path), target)
