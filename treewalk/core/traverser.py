"""Depth-first pre-order traversal for TreeWalk.

Pre-order visits a node, then its whole left subtree, then its whole right
subtree. An absent reference is the terminal case, not an error.

Two strategies are provided. The recursive one mirrors the textbook
definition; its call depth grows with the tree height. The iterative one
keeps an explicit stack, so height is bounded only by memory.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy, parse_strategy
from ..errors import NodeLimitExceededError
from .node import BinaryNode
from .visitor import Visit


def dfs(node: Optional[BinaryNode], visit: Visit) -> None:
    """Visit ``node`` and its subtrees in pre-order.

    Args:
        node: Subtree root; None means there is nothing to do
        visit: Called once per node
    """
    if node is None:
        return

    visit(node)
    dfs(node.left, visit)
    dfs(node.right, visit)


@dataclass
class TraversalStats:
    """Counters gathered during one traversal.

    ``absent_checks`` counts the missing child references reached, which is
    N+1 for any binary tree of N nodes (1 for an absent root).
    ``height`` is the number of nodes on the longest root-to-leaf path.
    """
    visits: int = 0
    absent_checks: int = 0
    height: int = 0

    def summary(self) -> str:
        return (f"visited {self.visits} nodes, "
                f"{self.absent_checks} absent references, "
                f"height {self.height}")


class TreeTraverser(ABC):
    """Abstract base class for pre-order traversal strategies.

    ``traverse`` returns an iterator of ``(node, depth)`` tuples with the
    root at depth 0. Calling it resets ``stats`` right away; the counters
    are complete once the iterator is exhausted.
    """

    def __init__(self, max_nodes: Optional[int] = None):
        """Initialize traverser.

        Args:
            max_nodes: Stop with NodeLimitExceededError past this many
                visits (None = unlimited)
        """
        self.max_nodes = max_nodes
        self.stats = TraversalStats()

    @abstractmethod
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node; None yields nothing

        Yields:
            Tuples of (node, depth) in pre-order
        """
        pass

    def walk(self, root: Optional[BinaryNode], visit: Visit) -> TraversalStats:
        """Run a full traversal, calling ``visit`` on every node.

        Returns:
            Statistics for this traversal
        """
        for node, _ in self.traverse(root):
            visit(node)
        return self.stats

    def _record_visit(self, node: BinaryNode, depth: int) -> None:
        if self.max_nodes is not None and self.stats.visits >= self.max_nodes:
            raise NodeLimitExceededError(
                f"Traversal exceeded {self.max_nodes} nodes at {node.name!r}"
            )
        self.stats.visits += 1
        self.stats.height = max(self.stats.height, depth + 1)


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Recursive pre-order traversal.

    Recursion depth equals tree height, so very deep trees can hit the
    interpreter recursion limit. Use IterativePreOrderTraverser for those.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        # Reset now, not on the first next()
        self.stats = TraversalStats()

        def _traverse_recursive(node: Optional[BinaryNode], depth: int) -> Iterator[Tuple[BinaryNode, int]]:
            if node is None:
                self.stats.absent_checks += 1
                return

            self._record_visit(node, depth)
            yield (node, depth)
            yield from _traverse_recursive(node.left, depth + 1)
            yield from _traverse_recursive(node.right, depth + 1)

        return _traverse_recursive(root, 0)


class IterativePreOrderTraverser(TreeTraverser):
    """Pre-order traversal with an explicit stack.

    Right is pushed before left so the left subtree is popped first,
    giving the same order as the recursive version.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        self.stats = TraversalStats()
        return self._traverse_stack(root)

    def _traverse_stack(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        stack: List[Tuple[Optional[BinaryNode], int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            if node is None:
                self.stats.absent_checks += 1
                continue

            self._record_visit(node, depth)
            yield (node, depth)

            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))


def create_traverser(strategy: Union[TraversalStrategy, str],
                     max_nodes: Optional[int] = None) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or one of its names (see
            STRATEGY_ALIASES in treewalk.config)
        max_nodes: Optional visit limit passed to the traverser

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    traversers = {
        TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
        TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE: IterativePreOrderTraverser,
    }
    return traversers[parse_strategy(strategy)](max_nodes=max_nodes)
