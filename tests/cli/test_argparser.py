"""Unit tests for the argument parser module in dir2tree CLI."""

from pathlib import Path

import pytest

from dir2tree.cli.argparser import DIRECTORY_PATTERN, build_options, create_parser, validate_args
from dir2tree.options import TreeOptions


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])
    assert args.path == "."
    assert args.level is None
    assert args.ignore == []
    assert args.pattern == []
    assert args.output is None
    assert args.sort
    assert not args.verbose
    assert build_options(args) == TreeOptions()


def test_all_flags(parser):
    args = parser.parse_args(
        ["project", "-a", "-L", "3", "-s", "-t", "-I", "*.log", "-I", "dist", "-P", "*.py"]
        + ["-o", "out.txt", "--no-sort"]
    )
    assert args.path == "project"
    assert args.output == Path("out.txt")

    options = build_options(args)
    assert options == TreeOptions(
        max_depth=3,
        show_hidden=True,
        show_size=True,
        show_date=True,
        exclude_patterns=("*.log", "dist"),
        include_patterns=("*.py",),
        sort=False,
    )


def test_long_flags(parser):
    args = parser.parse_args(["--all", "--level", "0", "--size", "--time", "--ignore", "x", "--pattern", "y"])
    options = build_options(args)
    assert options.max_depth == 0
    assert options.show_hidden and options.show_size and options.show_date
    assert options.exclude_patterns == ("x",)
    assert options.include_patterns == ("y",)


def test_dirs_only_adds_include_pattern(parser):
    options = build_options(parser.parse_args(["-d", "-P", "*.py"]))
    assert options.include_patterns == ("*.py", DIRECTORY_PATTERN)
    assert options.exclude_patterns == ()


def test_files_only_adds_exclude_pattern(parser):
    options = build_options(parser.parse_args(["-f", "-I", "*.log"]))
    assert options.exclude_patterns == ("*.log", DIRECTORY_PATTERN)
    assert options.include_patterns == ()


def test_dirs_only_and_files_only_conflict(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-d", "-f"])
    assert exc_info.value.code == 2


def test_level_must_be_integer(parser):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-L", "two"])
    assert exc_info.value.code == 2


def test_validate_args_rejects_negative_level(parser):
    args = parser.parse_args(["-L", "-1"])
    with pytest.raises(ValueError, match="non-negative"):
        validate_args(args)


def test_validate_args_accepts_valid_args(parser):
    validate_args(parser.parse_args(["-L", "0"]))
    validate_args(parser.parse_args([]))


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("dir2tree ")
