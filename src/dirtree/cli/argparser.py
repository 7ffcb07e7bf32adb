"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirtree import __version__
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.types import Attribute


def create_ignore_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling gitignore-style exclusions.

    The action updates the provided exclusion rules object as arguments are
    processed, which preserves the order in which -i/--ignore patterns and
    -I/--ignore-file files appear on the command line. That order matters for
    negation patterns.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class IgnoreRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-I", "--ignore-file"):
                exclusion_rules.load_rules(Path(str(values)))
            else:
                exclusion_rules.add_rule(str(values))

            recorded = getattr(namespace, self.dest, None) or []
            recorded.append(values)
            setattr(namespace, self.dest, recorded)

    return IgnoreRulesAction


def parse_attributes(values: Optional[Sequence[str]]) -> List[str]:
    """Flatten repeated and comma-separated -a/--attributes values.

    Example:
        >>> parse_attributes(["size,type", "extension"])
        ['size', 'type', 'extension']
        >>> parse_attributes(None)
        []
    """
    names: List[str] = []
    for value in values or []:
        names.extend(name.strip() for name in value.split(",") if name.strip())
    return names


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The gitignore-style rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: build a tree of a directory's contents and print it as JSON or as a text tree.

    Key Features:
    - Extension filtering for files, regex and gitignore-style exclusions
    - Optional attributes: size (aggregated for directories), type, extension, timestamps
    - Depth limiting
    - Symbolic link following with loop detection
    - Configurable permission error handling
    """

    attribute_names = ", ".join(attribute.value for attribute in Attribute)
    epilog = f"""
    Attributes:
      {attribute_names}

    Examples:
      # JSON tree of a directory
      dirtree /path/to/project

      # Only .txt files, with aggregated sizes, as a text tree
      dirtree -x '\\.txt$' -a size -f tree /path/to/project

      # Exclude by regular expression and by gitignore-style pattern
      dirtree -e node_modules -i '*.pyc' -I .gitignore /path/to/project

      # Two levels deep, with types and extensions
      dirtree -d 2 -a type,extension /path/to/project

      # Stop on the first inaccessible entry
      dirtree -P fail /path/to/project
    """

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    IgnoreAction = create_ignore_action(exclusion_rules)

    parser.add_argument("directory", type=Path, help="The directory to build the tree from.")
    parser.add_argument(
        "-x",
        "--extensions",
        metavar="REGEX",
        help="Regular expression file names must match to be included. Directories are never filtered by it.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="REGEX",
        action="append",
        help="Regular expression matched against each path; matches are pruned with their subtree (repeatable).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        dest="ignore",
        action=IgnoreAction,
        help="Gitignore-style pattern, relative to DIRECTORY, to exclude (repeatable).",
    )
    parser.add_argument(
        "-I",
        "--ignore-file",
        metavar="FILE",
        dest="ignore",
        action=IgnoreAction,
        help="Gitignore-style exclusion file (e.g., .gitignore) (repeatable).",
    )
    parser.add_argument(
        "-a",
        "--attributes",
        metavar="NAME[,NAME...]",
        action="append",
        help="Attributes to compute for each node (repeatable, comma-separated).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        metavar="N",
        help="Maximum depth below the root. Cannot be combined with the size attribute.",
    )
    parser.add_argument(
        "--no-follow-symlinks",
        dest="follow_symlinks",
        action="store_false",
        help="Do not follow symbolic links; links are left out of the tree.",
    )
    parser.add_argument(
        "-n",
        "--normalize-path",
        action="store_true",
        help="Render node paths with forward slashes.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "tree"],
        default="json",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle inaccessible entries below the root. 'warn' skips them with a warning on "
        "stderr, 'fail' aborts (default: ignore).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory, file and symlink counts to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and symlink loops to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse can handle.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.depth is not None and args.depth < 0:
        raise ValueError("--depth must be a non-negative integer")
