"""Console entry point for TreeWalk.

Usage:
    treewalk                # Recursive depth-first search of the example tree
    treewalk --iterative    # Same output, explicit-stack traversal
    treewalk --verbose      # Also print traversal statistics to stderr
"""

import argparse
import sys
from typing import List, Optional

from .api import run_example
from .config import TraversalStrategy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treewalk",
        description="Depth-first (pre-order) search of a fixed seven-node binary tree",
    )
    parser.add_argument("--iterative", action="store_true",
                        help="Use an explicit stack instead of recursion")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print traversal statistics to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the example traversal and return the exit status."""
    args = build_parser().parse_args(argv)

    strategy = (TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE if args.iterative
                else TraversalStrategy.DEPTH_FIRST_PRE)
    run_example(sys.stdout, strategy=strategy, verbose=args.verbose)
    return 0
