"""Unit tests for the argument parser module in dirtree CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from dirtree.cli.argparser import create_ignore_action, create_parser, parse_attributes, validate_args
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock GitIgnoreExclusionRules object."""
    return MagicMock(spec=GitIgnoreExclusionRules)


def test_create_ignore_action():
    """Test creation of IgnoreRulesAction class."""
    IgnoreAction = create_ignore_action(MagicMock())
    assert issubclass(IgnoreAction, argparse.Action)

    action = IgnoreAction(option_strings=["-i", "--ignore"], dest="ignore", help="test help")
    assert action.option_strings == ["-i", "--ignore"]
    assert action.dest == "ignore"


def test_defaults():
    args = create_parser(GitIgnoreExclusionRules()).parse_args(["some/dir"])
    assert args.directory == Path("some/dir")
    assert args.extensions is None
    assert args.exclude is None
    assert args.attributes is None
    assert args.depth is None
    assert args.follow_symlinks is True
    assert args.normalize_path is False
    assert args.format == "json"
    assert args.permission_action == "ignore"
    assert not args.summary


def test_all_options(tmp_path):
    args = create_parser(GitIgnoreExclusionRules()).parse_args(
        [
            "-x",
            r"\.txt$",
            "-e",
            "another_dir",
            "-e",
            "some_dir_2",
            "-a",
            "type,extension",
            "-a",
            "mtime",
            "-d",
            "2",
            "--no-follow-symlinks",
            "-n",
            "-f",
            "tree",
            "-o",
            str(tmp_path / "out.txt"),
            "-P",
            "fail",
            "-s",
            "-v",
            "dir",
        ]
    )
    assert args.extensions == r"\.txt$"
    assert args.exclude == ["another_dir", "some_dir_2"]
    assert parse_attributes(args.attributes) == ["type", "extension", "mtime"]
    assert args.depth == 2
    assert args.follow_symlinks is False
    assert args.normalize_path is True
    assert args.format == "tree"
    assert args.output == tmp_path / "out.txt"
    assert args.permission_action == "fail"
    assert args.summary and args.verbose


def test_ignore_options_update_rules_in_order(mock_exclusion_rules, tmp_path):
    ignore_file = tmp_path / ".gitignore"
    ignore_file.write_text("*.log\n")
    parser = create_parser(mock_exclusion_rules)
    args = parser.parse_args(["-i", "*.pyc", "-I", str(ignore_file), "-i", "!keep.pyc", "dir"])

    mock_exclusion_rules.add_rule.assert_any_call("*.pyc")
    mock_exclusion_rules.add_rule.assert_any_call("!keep.pyc")
    mock_exclusion_rules.load_rules.assert_called_once_with(ignore_file)
    assert args.ignore == ["*.pyc", str(ignore_file), "!keep.pyc"]


def test_ignore_patterns_reach_real_rules():
    rules = GitIgnoreExclusionRules()
    create_parser(rules).parse_args(["-i", "*.pyc", "dir"])
    assert rules.exclude("module.pyc")


def test_invalid_format():
    with pytest.raises(SystemExit):
        create_parser(GitIgnoreExclusionRules()).parse_args(["-f", "xml", "dir"])


def test_validate_args_rejects_negative_depth():
    args = create_parser(GitIgnoreExclusionRules()).parse_args(["-d", "-1", "dir"])
    with pytest.raises(ValueError, match="--depth"):
        validate_args(args)
