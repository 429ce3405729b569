"""Command-line interface for dir2tree.

This module provides the command-line entry point for dir2tree, which renders a
directory hierarchy as an indented ASCII tree and prints it or writes it to a file.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (e.g. the root path does not exist)
    2: Command-line syntax error
    141: Broken pipe (e.g. when piping to `head`)

Example:
    # Basic usage
    $ dir2tree /path/to/dir

    # Two levels deep, with sizes, saved to a file
    $ dir2tree -L 2 -s -o tree.txt /path/to/dir
"""

import logging
import os
import sys
from pathlib import Path

from dir2tree.cli.argparser import build_options, create_parser, validate_args
from dir2tree.file_system_tree.tree_builder import TreeBuilder

OUTPUT_ERRORS = "backslashreplace"


def configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when verbose output is requested."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s", stream=sys.stderr)


def main() -> None:
    """Main entry point for the dir2tree command-line interface.

    The tree is rendered completely before anything is written, so a failure never
    leaves partial output behind.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        141: Broken pipe
    """
    try:
        parser = create_parser()
        args = parser.parse_args()

        # Perform additional validation beyond what argparse supports directly
        validate_args(args)
        configure_logging(args.verbose)

        builder = TreeBuilder(build_options(args))
        tree = builder.build_tree(args.path)

        # Names that are not valid in the filesystem encoding arrive as lone surrogates
        if args.output:
            output_path = Path(os.path.abspath(args.output))
            output_path.write_text(tree, encoding="utf-8", errors=OUTPUT_ERRORS)
            print(f"Tree output written to: {output_path}")
        else:
            if hasattr(sys.stdout, "reconfigure"):
                sys.stdout.reconfigure(errors=OUTPUT_ERRORS)
            sys.stdout.write(tree)
            sys.stdout.flush()

    except BrokenPipeError:
        # Keep the interpreter from complaining about stdout again during shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
