"""Tests for the console entry point."""

import subprocess
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalk.cli import main

EXPECTED_LINES = [
    "beginning depth first search",
    "visiting node 'root'",
    "visiting node 'a'",
    "visiting node 'c'",
    "visiting node 'd'",
    "visiting node 'e'",
    "visiting node 'b'",
    "visiting node 'f'",
    "finished depth first search",
]


@pytest.mark.parametrize("argv", [[], ["--iterative"]])
def test_main_output(capsys, argv):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == EXPECTED_LINES
    assert captured.err == ""


def test_main_verbose(capsys):
    assert main(["--verbose", "--iterative"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == EXPECTED_LINES
    assert captured.err.startswith("[dfs_pre_iterative] visited 7 nodes")


def test_unknown_flag_exits_with_usage(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2


def test_python_dash_m():
    result = subprocess.run(
        [sys.executable, "-m", "treewalk"],
        cwd=Path(__file__).parent.parent,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout.splitlines() == EXPECTED_LINES
