"""Tests for the high-level API and the example program output."""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalk import (
    BinaryNode,
    ConfigurationError,
    NameCollector,
    TraversalConfig,
    TraversalStrategy,
    build_example_tree,
    count_nodes,
    depth_first_search,
    run_example,
    visit_order,
)

EXPECTED_OUTPUT = """\
beginning depth first search
visiting node 'root'
visiting node 'a'
visiting node 'c'
visiting node 'd'
visiting node 'e'
visiting node 'b'
visiting node 'f'
finished depth first search
"""


@pytest.mark.parametrize("strategy", ["dfs_pre", "dfs_pre_iterative"])
def test_run_example_output(strategy):
    stream = io.StringIO()
    stats = run_example(stream, strategy=strategy)
    assert stream.getvalue() == EXPECTED_OUTPUT
    assert stats.visits == 7


def test_run_example_defaults_to_stdout(capsys):
    run_example()
    captured = capsys.readouterr()
    assert captured.out == EXPECTED_OUTPUT
    assert captured.err == ""


def test_verbose_summary_goes_to_stderr(capsys):
    run_example(verbose=True)
    captured = capsys.readouterr()
    assert captured.out == EXPECTED_OUTPUT
    assert captured.err == "[dfs_pre] visited 7 nodes, 8 absent references, height 4\n"


def test_depth_first_search_prints_by_default(capsys):
    depth_first_search(BinaryNode("solo"))
    assert capsys.readouterr().out == "visiting node 'solo'\n"


def test_depth_first_search_with_custom_visit():
    collector = NameCollector()
    stats = depth_first_search(build_example_tree(), visit=collector)
    assert collector.names == ["root", "a", "c", "d", "e", "b", "f"]
    assert stats.absent_checks == 8


def test_depth_first_search_absent_root(capsys):
    stats = depth_first_search(None)
    assert stats.visits == 0
    assert capsys.readouterr().out == ""


def test_config_overrides_keywords():
    config = TraversalConfig.iterative(max_nodes=10)
    stats = depth_first_search(build_example_tree(), visit=lambda n: None,
                               strategy="dfs_pre", config=config)
    assert stats.visits == 7


def test_invalid_config_raises():
    with pytest.raises(ConfigurationError, match="max_nodes must be positive"):
        depth_first_search(build_example_tree(), visit=lambda n: None, max_nodes=0)


def test_unknown_strategy_string():
    with pytest.raises(ValueError):
        depth_first_search(build_example_tree(), strategy="bfs")


def test_visit_order():
    assert visit_order(build_example_tree()) == ["root", "a", "c", "d", "e", "b", "f"]
    assert visit_order(None) == []
    assert (visit_order(build_example_tree(), TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE)
            == visit_order(build_example_tree()))


def test_count_nodes():
    assert count_nodes(build_example_tree()) == 7
    assert count_nodes(None) == 0
    assert count_nodes(BinaryNode("x")) == 1


def test_deep_tree_with_iterative_strategy():
    depth = sys.getrecursionlimit() * 3
    root = None
    for i in reversed(range(depth)):
        root = BinaryNode(f"n{i}", left=root)

    stats = depth_first_search(root, visit=lambda n: None, strategy="iterative")
    assert stats.visits == depth
    assert stats.height == depth
    assert count_nodes(root) == depth
