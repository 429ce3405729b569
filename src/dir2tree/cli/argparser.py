"""Command-line argument parsing for dir2tree.

This module defines the command-line interface for dir2tree,
handling argument parsing, validation and translation into TreeOptions.
"""

import argparse
from pathlib import Path

from dir2tree import __version__
from dir2tree.options import TreeOptions

# Directory match paths end with "/", so this pattern selects directories only
DIRECTORY_PATTERN = "*/"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dir2tree's options.
    """
    description = """
    dir2tree: A utility for rendering directory hierarchies as indented ASCII trees.

    Key Features:
    - Tree-style directory visualization with box-drawing connectors
    - Include and exclude patterns (simple wildcard or substring matching)
    - Optional file sizes and modification dates
    - Depth limiting and directory-first sorting
    - Output to the console or to a file

    Pattern Matching:
    Patterns are matched against the path relative to the root directory, for
    example "src/utils/helpers.py". Directory paths end with "/".
    - A pattern containing * must match the whole path, with * matching any
      sequence of characters: "*.py", "src/*", "*/"
    - A pattern without * matches any path that contains it: "node_modules"
    - Matching is case-sensitive. Brace expansion ("*.{js,ts}") and character
      classes are not supported; use one pattern per extension instead.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      dir2tree

      # Tree of a specific directory, two levels deep
      dir2tree -L 2 /path/to/project

      # Include hidden entries and show sizes and dates
      dir2tree -a -s -t /path/to/project

      # Exclude dependencies and logs
      dir2tree -I node_modules -I "*.log" /path/to/project

      # Show Python files along with all directories
      dir2tree -d -P "*.py" /path/to/project

      # Show only directories
      dir2tree -d /path/to/project

      # Save the tree to a file
      dir2tree -o tree.txt /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dir2tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2tree {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to generate the tree from (default: current directory).",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="show_hidden",
        action="store_true",
        help="Show hidden files and directories (names starting with '.').",
    )

    kind_group = parser.add_mutually_exclusive_group()
    kind_group.add_argument(
        "-d",
        "--dirs-only",
        action="store_true",
        help=f"Show only directories (adds the include pattern '{DIRECTORY_PATTERN}').",
    )
    kind_group.add_argument(
        "-f",
        "--files-only",
        action="store_true",
        help=f"Show only files, skipping directories (adds the exclude pattern '{DIRECTORY_PATTERN}').",
    )

    parser.add_argument(
        "-L",
        "--level",
        type=int,
        metavar="N",
        help="Maximum display depth of the tree. 0 shows only the root.",
    )
    parser.add_argument(
        "-s",
        "--size",
        dest="show_size",
        action="store_true",
        help="Show file sizes in human-readable format (B, KB, MB, GB, TB).",
    )
    parser.add_argument(
        "-t",
        "--time",
        dest="show_date",
        action="store_true",
        help="Show last modification dates (YYYY-MM-DD, UTC).",
    )
    parser.add_argument(
        "-I",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude entries matching the pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-P",
        "--pattern",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Include only entries matching the pattern (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--no-sort",
        dest="sort",
        action="store_false",
        help="Do not sort entries (directories first, then by name).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and unreadable directories to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.level is not None and args.level < 0:
        raise ValueError(f"-L/--level must be a non-negative integer, got {args.level}")


def build_options(args: argparse.Namespace) -> TreeOptions:
    """Translate parsed arguments into TreeOptions.

    --dirs-only and --files-only are expressed as an implicit include or exclude
    pattern, appended after the user's own patterns.

    Args:
        args: Parsed and validated command-line arguments.

    Returns:
        The options for a single tree-generation call.
    """
    exclude_patterns = list(args.ignore)
    include_patterns = list(args.pattern)
    if args.dirs_only:
        include_patterns.append(DIRECTORY_PATTERN)
    if args.files_only:
        exclude_patterns.append(DIRECTORY_PATTERN)

    return TreeOptions(
        max_depth=args.level,
        show_hidden=args.show_hidden,
        show_size=args.show_size,
        show_date=args.show_date,
        exclude_patterns=tuple(exclude_patterns),
        include_patterns=tuple(include_patterns),
        sort=args.sort,
    )
