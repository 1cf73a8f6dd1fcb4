"""High-level API for TreeWalk.

Simple functional wrappers around the traversers, plus the example program
that prints the visit sequence of the seven-node tree.
"""

import sys
from typing import List, Optional, TextIO, Union

from .config import TraversalConfig, TraversalStrategy, parse_strategy
from .core.builder import build_example_tree
from .core.node import BinaryNode
from .core.traverser import TraversalStats, create_traverser
from .core.visitor import NameCollector, PrintVisitor, Visit
from .errors import ConfigurationError

BEGIN_MESSAGE = "beginning depth first search"
END_MESSAGE = "finished depth first search"


def depth_first_search(
    root: Optional[BinaryNode],
    visit: Optional[Visit] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_nodes: Optional[int] = None,
    verbose: bool = False,
    config: Optional[TraversalConfig] = None,
) -> TraversalStats:
    """Visit every node reachable from ``root`` in pre-order.

    The default strategy recurses once per level, so a tree taller than
    the interpreter recursion limit raises RecursionError. Pass
    ``strategy="iterative"`` for deep or unbalanced trees.

    Args:
        root: Starting node; None visits nothing
        visit: Visit action (defaults to PrintVisitor on stdout)
        strategy: Traversal strategy (dfs_pre, dfs_pre_iterative or an
            alias from STRATEGY_ALIASES in treewalk.config)
        max_nodes: Optional visit limit
        verbose: Print a summary line to stderr when done
        config: Full configuration; overrides the keyword arguments above

    Returns:
        Statistics for the traversal

    Raises:
        ConfigurationError: If the configuration does not validate

    Example:
        >>> root = build_example_tree()
        >>> stats = depth_first_search(root, visit=lambda n: None)
        >>> stats.visits
        7
    """
    if config is None:
        config = TraversalConfig(
            strategy=parse_strategy(strategy),
            max_nodes=max_nodes,
            verbose=verbose,
        )

    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )

    if visit is None:
        visit = PrintVisitor()

    traverser = create_traverser(config.strategy, max_nodes=config.max_nodes)
    stats = traverser.walk(root, visit)

    if config.verbose:
        print(f"[{config.strategy.value}] {stats.summary()}", file=sys.stderr)

    return stats


def visit_order(
    root: Optional[BinaryNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> List[str]:
    """Return node names in pre-order.

    Example:
        >>> visit_order(build_example_tree())
        ['root', 'a', 'c', 'd', 'e', 'b', 'f']
    """
    collector = NameCollector()
    depth_first_search(root, visit=collector, strategy=strategy)
    return collector.names


def count_nodes(root: Optional[BinaryNode]) -> int:
    """Count the nodes reachable from ``root``.

    Uses the iterative traversal so tree height does not matter.
    """
    stats = depth_first_search(
        root,
        visit=_ignore,
        strategy=TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE,
    )
    return stats.visits


def run_example(
    stream: Optional[TextIO] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    verbose: bool = False,
) -> TraversalStats:
    """Build the example tree and print its depth-first visit sequence.

    Output::

        beginning depth first search
        visiting node 'root'
        ...
        finished depth first search

    Args:
        stream: Where to write; defaults to sys.stdout
        strategy: Traversal strategy
        verbose: Print a summary line to stderr when done

    Returns:
        Statistics for the traversal
    """
    if stream is None:
        stream = sys.stdout

    root = build_example_tree()

    print(BEGIN_MESSAGE, file=stream)
    stats = depth_first_search(
        root,
        visit=PrintVisitor(stream),
        strategy=strategy,
        verbose=verbose,
    )
    print(END_MESSAGE, file=stream)
    return stats


def _ignore(node: BinaryNode) -> None:
    pass
