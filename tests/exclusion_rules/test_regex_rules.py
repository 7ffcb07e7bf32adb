import re

import pytest

from dirtree.exclusion_rules.regex_rules import RegexExclusionRules


@pytest.mark.parametrize(
    "path,expected",
    [
        ("test_data/some_dir/another_dir", True),
        ("test_data/some_dir/another_dir/file_a.txt", True),
        ("test_data/some_dir", False),
        ("test_data/build.log", True),
        ("test_data/build.log.txt", False),
    ],
)
def test_regex_exclusion_rules(path, expected):
    rules = RegexExclusionRules([r"another_dir", re.compile(r"\.log$")])
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_single_pattern():
    rules = RegexExclusionRules(r"node_modules")
    assert rules.exclude("web/node_modules")
    assert rules.has_rules()


def test_compiled_pattern_keeps_flags():
    rules = RegexExclusionRules(re.compile(r"BUILD", re.IGNORECASE))
    assert rules.exclude("project/build")


def test_empty_rules_exclude_nothing():
    rules = RegexExclusionRules()
    assert not rules.has_rules()
    assert not rules.exclude("anything")


def test_add_rule():
    rules = RegexExclusionRules()
    rules.add_rule(r"\.pyc$")
    assert rules.exclude("module.pyc")
    assert not rules.exclude("module.py")


def test_invalid_pattern_type():
    with pytest.raises(TypeError):
        RegexExclusionRules([42])


def test_load_rules_not_supported():
    with pytest.raises(NotImplementedError):
        RegexExclusionRules().load_rules("rules.txt")
