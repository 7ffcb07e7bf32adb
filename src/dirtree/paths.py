"""Path string helpers."""

import re

_BACKSLASHES = re.compile(r"\\\\?")


def normalize_path(path: str) -> str:
    """Convert Windows-style separators to forward slashes.

    Single and doubled backslashes both collapse to one ``/``. This is a pure string
    transform and never touches the filesystem.

    Args:
        path: The path string to normalize.

    Returns:
        The path with every backslash run of length one or two replaced by ``/``.

    Example:
        >>> normalize_path("test\\\\test_data\\\\file_a.txt")
        'test/test_data/file_a.txt'
        >>> normalize_path("C:\\\\\\\\Users\\\\\\\\me")
        'C:/Users/me'
        >>> normalize_path("already/posix")
        'already/posix'
    """
    return _BACKSLASHES.sub("/", path)
