"""TreeWalk - depth-first traversal of a small binary tree.

Builds a fixed tree of seven named nodes and visits it in pre-order
(node, left subtree, right subtree), printing one line per visit.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treewalk import build_example_tree, depth_first_search

    depth_first_search(build_example_tree())
━━━━━━━━━━━━━━━━━━━━━━━━━━

Or from the shell: ``python -m treewalk``.
"""

__version__ = "0.1.0"

# Core components
from .core.node import BinaryNode
from .core.builder import TreeBuilder, Side, build_example_tree
from .core.traverser import (
    dfs,
    TraversalStats,
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    IterativePreOrderTraverser,
    create_traverser,
)
from .core.visitor import PrintVisitor, NameCollector

# Configuration and errors
from .config import TraversalConfig, TraversalStrategy, STRATEGY_ALIASES, parse_strategy
from .errors import (
    TreeWalkError,
    TreeStructureError,
    DuplicateNodeError,
    UnknownNodeError,
    SlotOccupiedError,
    ConfigurationError,
    NodeLimitExceededError,
)

# High-level API
from .api import (
    depth_first_search,
    visit_order,
    count_nodes,
    run_example,
)

__all__ = [
    '__version__',
    # Core
    'BinaryNode',
    'TreeBuilder',
    'Side',
    'build_example_tree',
    'dfs',
    'TraversalStats',
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'IterativePreOrderTraverser',
    'create_traverser',
    'PrintVisitor',
    'NameCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'STRATEGY_ALIASES',
    'parse_strategy',
    # Errors
    'TreeWalkError',
    'TreeStructureError',
    'DuplicateNodeError',
    'UnknownNodeError',
    'SlotOccupiedError',
    'ConfigurationError',
    'NodeLimitExceededError',
    # API
    'depth_first_search',
    'visit_order',
    'count_nodes',
    'run_example',
]
