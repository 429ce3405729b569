"""Unit tests for the CLI main module."""

import logging
import os
from unittest.mock import patch

import pytest

from dir2tree.cli.main import configure_logging, main

EXPECTED_TREE = "└── root/\n    ├── sub/\n    │   └── b.txt\n    └── a.txt\n"


def run_main(*argv):
    with patch("sys.argv", ["dir2tree", *argv]):
        main()


def test_main_prints_tree(sample_tree, capsys):
    run_main(str(sample_tree))
    captured = capsys.readouterr()
    assert captured.out == EXPECTED_TREE
    assert captured.err == ""


def test_main_defaults_to_current_directory(sample_tree, capsys, monkeypatch):
    monkeypatch.chdir(sample_tree)
    run_main("-L", "0")
    assert capsys.readouterr().out == "└── root/\n"


def test_main_applies_options(sample_tree, capsys):
    run_main(str(sample_tree), "-f", "-s")
    assert capsys.readouterr().out == "└── root/\n    └── a.txt [5 B]\n"


def test_main_dirs_only(sample_tree, capsys):
    run_main(str(sample_tree), "-d")
    assert capsys.readouterr().out == "└── root/\n    └── sub/\n"


def test_main_missing_path(capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main("/does/not/exist")
    assert exc_info.value.code == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Path does not exist: /does/not/exist\n"


def test_main_negative_level(sample_tree, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main(str(sample_tree), "-L", "-2")
    assert exc_info.value.code == 1
    assert "Error: -L/--level must be a non-negative integer" in capsys.readouterr().err


def test_main_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_main("--no-such-flag")
    assert exc_info.value.code == 2


def test_main_writes_output_file(sample_tree, tmp_path, capsys):
    output_file = tmp_path / "tree.txt"
    run_main(str(sample_tree), "-o", str(output_file))

    assert output_file.read_text(encoding="utf-8") == EXPECTED_TREE
    assert capsys.readouterr().out == f"Tree output written to: {output_file}\n"


def test_main_missing_path_leaves_no_output_file(tmp_path, capsys):
    output_file = tmp_path / "tree.txt"
    with pytest.raises(SystemExit):
        run_main(str(tmp_path / "missing"), "-o", str(output_file))
    assert not output_file.exists()


def test_configure_logging_verbose():
    with patch("logging.basicConfig") as mock_config:
        configure_logging(True)
    mock_config.assert_called_once()
    assert mock_config.call_args.kwargs["level"] == logging.DEBUG


def test_configure_logging_quiet():
    with patch("logging.basicConfig") as mock_config:
        configure_logging(False)
    mock_config.assert_not_called()


@pytest.fixture
def undecodable_tree(tmp_path):
    """Create a directory holding a file whose name is not valid UTF-8."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "ok.txt").write_text("ok")
    try:
        (root / os.fsdecode(b"bad\xff.txt")).write_text("bad")
    except (OSError, UnicodeError):
        pytest.skip("The filesystem does not accept undecodable file names")
    return root


UNDECODABLE_TREE = "└── root/\n    ├── bad\\udcff.txt\n    └── ok.txt\n"


def test_main_prints_undecodable_names(undecodable_tree, capsys):
    run_main(str(undecodable_tree))
    captured = capsys.readouterr()
    assert captured.out == UNDECODABLE_TREE
    assert captured.err == ""


def test_main_writes_undecodable_names(undecodable_tree, tmp_path, capsys):
    output_file = tmp_path / "tree.txt"
    run_main(str(undecodable_tree), "-o", str(output_file))

    assert output_file.read_text(encoding="utf-8") == UNDECODABLE_TREE
    assert capsys.readouterr().err == ""
