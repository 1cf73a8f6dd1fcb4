"""Core building blocks: nodes, construction, traversal and visit actions."""

from .node import BinaryNode
from .builder import TreeBuilder, Side, build_example_tree
from .traverser import (
    dfs,
    TraversalStats,
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    IterativePreOrderTraverser,
    create_traverser,
)
from .visitor import PrintVisitor, NameCollector

__all__ = [
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
]
