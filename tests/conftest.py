"""Test configuration and fixtures for dirtree."""

import os

import pytest

# Every .txt file gets this many bytes, so the six of them add up to 12000
TXT_FILE_SIZE = 2000


@pytest.fixture
def test_data(tmp_path):
    """Create the reference directory tree.

    test_data/
    ├── file_a.txt
    ├── file_b.txt
    ├── some_dir/
    │   ├── file_a.txt
    │   ├── file_b.txt
    │   └── another_dir/
    │       ├── file_a.txt
    │       └── file_b.txt
    └── some_dir_2/
        └── .gitkeep

    Four directories including the root, seven files, six of them .txt.
    """
    root = tmp_path / "test_data"
    (root / "some_dir" / "another_dir").mkdir(parents=True)
    (root / "some_dir_2").mkdir()
    for directory in (root, root / "some_dir", root / "some_dir" / "another_dir"):
        (directory / "file_a.txt").write_text("a" * TXT_FILE_SIZE)
        (directory / "file_b.txt").write_text("b" * TXT_FILE_SIZE)
    (root / "some_dir_2" / ".gitkeep").write_text("")
    return root


@pytest.fixture
def test_data_with_symlinks(test_data):
    """Add symlinks to the reference tree: one to a file, one to a directory, one loop.

    Returns:
        The tree root, or skips the test where symlinks cannot be created.
    """
    try:
        os.symlink(test_data / "file_a.txt", test_data / "link_to_file.txt")
        os.symlink(test_data / "some_dir" / "another_dir", test_data / "some_dir_2" / "link_to_dir")
        os.symlink(test_data / "some_dir", test_data / "some_dir" / "another_dir" / "loop")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    return test_data
