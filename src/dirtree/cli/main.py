"""Command-line interface for dirtree.

This module provides the command-line interface for dirtree, building a tree of
a directory and writing it as JSON or as a Unix ``tree``-style listing.

Exit Codes:
    0: Successful completion
    1: Runtime or configuration error, or inaccessible root directory
    2: Command-line syntax error
    126: Permission denied below the root with --permission-action fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe while writing output

Example:
    # JSON tree of the current directory
    $ dirtree .

    # Text tree of .py files with sizes
    $ dirtree -x '\\.py$' -a size -f tree src
"""

import json
import logging
import sys
from typing import Optional, TextIO

from humanfriendly import format_size

from dirtree.cli.argparser import create_parser, parse_attributes, validate_args
from dirtree.directory_tree import DirectoryTree
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.tree_node import TreeNode
from dirtree.rendering import stream_tree_representation, summarize
from dirtree.tree_options import TreeOptions
from dirtree.types import PathType

TRAVERSER_LOGGER = "dirtree.file_system_tree.traverser"


class SkippedEntryHandler(logging.Handler):
    """Logging handler that reports entries the traverser skipped as warnings.

    Only records carrying a ``skipped_entry`` message are written; other traverser
    diagnostics are left to whatever logging configuration is in place.
    """

    def __init__(self, stream: TextIO) -> None:
        super().__init__(logging.DEBUG)
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        message = getattr(record, "skipped_entry", None)
        if message is None:
            return
        print(f"Warning: {message}", file=self.stream)


def build_tree(directory: PathType, options: TreeOptions, warn: bool) -> Optional[TreeNode]:
    """Build the tree, printing a warning for each skipped entry when ``warn`` is set."""
    if not warn:
        return DirectoryTree(directory, options).build()

    traverser_logger = logging.getLogger(TRAVERSER_LOGGER)
    handler = SkippedEntryHandler(sys.stderr)
    previous_level = traverser_logger.level
    traverser_logger.addHandler(handler)
    traverser_logger.setLevel(logging.DEBUG)
    try:
        return DirectoryTree(directory, options).build()
    finally:
        traverser_logger.removeHandler(handler)
        traverser_logger.setLevel(previous_level)


def format_counts(counts: dict, total_size: Optional[int] = None) -> str:
    """Format the counts into a human-readable string.

    Example:
        >>> print(format_counts({"directories": 3, "files": 7, "symlinks": 1}))
        Directories: 3
        Files: 7
        Symlinks: 1
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Symlinks: {counts['symlinks']}",
    ]
    if total_size is not None:
        result.append(f"Size: {format_size(total_size)} ({total_size} bytes)")
    return "\n".join(result)


def write_tree(root: TreeNode, output_format: str, stream: TextIO) -> None:
    if output_format == "json":
        stream.write(json.dumps(root.to_dict(), indent=2, default=str))
        stream.write("\n")
    else:
        for line in stream_tree_representation(root):
            stream.write(line + "\n")


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime or configuration error, or inaccessible root directory
        2: Command-line syntax error
        126: Permission denied with --permission-action fail
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe while writing output
    """
    try:
        # Populated by -i/-I while the arguments are parsed
        ignore_rules = GitIgnoreExclusionRules()

        parser = create_parser(ignore_rules)
        args = parser.parse_args()
        validate_args(args)

        if args.verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

        exclude = list(args.exclude or [])
        if ignore_rules.has_rules():
            ignore_rules.root = str(args.directory)
            exclude.append(ignore_rules)

        # Map CLI permission actions to internal enum
        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.IGNORE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        options = TreeOptions(
            extensions=args.extensions,
            exclude=exclude or None,
            attributes=parse_attributes(args.attributes),
            depth=args.depth,
            follow_symlinks=args.follow_symlinks,
            normalize_path=args.normalize_path,
            permission_action=perm_action,
        )

        try:
            root = build_tree(args.directory, options, warn=args.permission_action == "warn")
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

        if root is None:
            print(f"Error: cannot access {args.directory}", file=sys.stderr)
            sys.exit(1)

        try:
            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    write_tree(root, args.format, f)
            else:
                write_tree(root, args.format, sys.stdout)
                sys.stdout.flush()
        except BrokenPipeError:
            # Output consumer went away (e.g. piped into head)
            sys.stderr.close()
            sys.exit(141)

        if args.summary:
            print(format_counts(summarize(root), root.attributes.get("size")), file=sys.stderr)

    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
