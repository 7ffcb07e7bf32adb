"""Tests for the CLI main entry point."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from dirtree.cli.main import TRAVERSER_LOGGER, format_counts, main


def run_main(argv):
    """Run main() with the given arguments and return its exit code (0 if it returned)."""
    with patch("sys.argv", ["dirtree", *argv]):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def test_json_output(test_data, capsys):
    assert run_main(["-x", r"\.txt$", "-a", "size,type", "--no-follow-symlinks", str(test_data)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "test_data"
    assert data["type"] == "directory"
    assert data["size"] == 12000
    assert len(data["children"]) == 4


def test_tree_output(test_data, capsys):
    assert run_main(["-f", "tree", "-e", "another_dir", str(test_data)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("test_data/\n")
    assert "another_dir" not in out
    assert "some_dir_2/" in out


def test_gitignore_patterns(test_data, capsys):
    assert run_main(["-i", "some_dir/", "-f", "tree", str(test_data)]) == 0
    out = capsys.readouterr().out
    assert "some_dir/" not in out
    assert "some_dir_2/" in out


def test_output_file(test_data, tmp_path):
    output = tmp_path / "tree.json"
    assert run_main(["-o", str(output), "-d", "0", str(test_data)]) == 0
    assert json.loads(output.read_text())["children"] == []


def test_summary(test_data, capsys):
    assert run_main(["-s", "-a", "size", "--no-follow-symlinks", str(test_data)]) == 0
    err = capsys.readouterr().err
    assert "Directories: 3" in err
    assert "Files: 7" in err
    assert "(12000 bytes)" in err


def test_size_with_depth_is_an_error(test_data, capsys):
    assert run_main(["-a", "size", "-d", "1", str(test_data)]) == 1
    assert "usage of size attribute with depth option is prohibited" in capsys.readouterr().err


def test_inaccessible_root(tmp_path, capsys):
    assert run_main([str(tmp_path / "missing")]) == 1
    assert "Error: cannot access" in capsys.readouterr().err


ROOT_IGNORES_PERMISSIONS = not hasattr(os, "geteuid") or os.geteuid() == 0


@pytest.mark.skipif(ROOT_IGNORES_PERMISSIONS, reason="root ignores permissions")
def test_permission_fail(test_data, capsys):
    locked = test_data / "some_dir"
    os.chmod(locked, 0)
    try:
        assert run_main(["-P", "fail", str(test_data)]) == 126
    finally:
        os.chmod(locked, 0o755)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Access denied to")


@pytest.mark.skipif(ROOT_IGNORES_PERMISSIONS, reason="root ignores permissions")
def test_permission_warn_keeps_tree(test_data, capsys):
    locked = test_data / "some_dir"
    os.chmod(locked, 0)
    try:
        assert run_main(["-P", "warn", "-f", "tree", str(test_data)]) == 0
    finally:
        os.chmod(locked, 0o755)
    captured = capsys.readouterr()
    assert captured.out.startswith("test_data/\n")
    assert "some_dir_2/" in captured.out
    assert "some_dir/" not in captured.out
    assert "file_a.txt" in captured.out
    warnings = captured.err.splitlines()
    assert len(warnings) == 1
    assert warnings[0].startswith("Warning: Access denied to")
    assert "some_dir" in warnings[0]


def test_permission_warn_reports_dangling_symlink(test_data, capsys):
    os.symlink(test_data / "missing", test_data / "dangling")
    assert run_main(["-P", "warn", str(test_data)]) == 0
    captured = capsys.readouterr()
    data = json.loads(captured.out)
    names = [child["name"] for child in data["children"]]
    assert "dangling" not in names
    assert "some_dir" in names
    assert captured.err.startswith("Warning: Error accessing")
    assert "dangling" in captured.err


def test_permission_ignore_is_silent(test_data, capsys):
    os.symlink(test_data / "missing", test_data / "dangling")
    assert run_main(["-P", "ignore", str(test_data)]) == 0
    assert capsys.readouterr().err == ""


def test_warn_handler_is_removed_after_build(test_data, capsys):
    traverser_logger = logging.getLogger(TRAVERSER_LOGGER)
    handlers = list(traverser_logger.handlers)
    level = traverser_logger.level
    assert run_main(["-P", "warn", str(test_data)]) == 0
    assert traverser_logger.handlers == handlers
    assert traverser_logger.level == level


def test_format_counts_with_size():
    output = format_counts({"directories": 1, "files": 2, "symlinks": 0}, 2000)
    assert output.splitlines()[-1] == "Size: 2 KB (2000 bytes)"
