"""Configuration system for TreeWalk.

This module defines how callers choose a traversal strategy and the few
knobs that go with it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class TraversalStrategy(Enum):
    """How to walk the tree.

    Both strategies visit nodes in the same pre-order.
    """
    DEPTH_FIRST_PRE = "dfs_pre"                      # Recursive
    DEPTH_FIRST_PRE_ITERATIVE = "dfs_pre_iterative"  # Explicit stack


# Every name accepted where a strategy can be given as a string
STRATEGY_ALIASES = {
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'recursive': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre_iterative': TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE,
    'depth_first_pre_iterative': TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE,
    'iterative': TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not in STRATEGY_ALIASES
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = str(strategy).lower()
    if strategy_lower not in STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(STRATEGY_ALIASES.keys())}"
        )

    return STRATEGY_ALIASES[strategy_lower]


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal."""

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    max_nodes: Optional[int] = None  # Visit limit (None = unlimited)
    verbose: bool = False            # Print a summary to stderr when done

    @classmethod
    def recursive(cls, **kwargs) -> 'TraversalConfig':
        """Config for the recursive traversal."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST_PRE, **kwargs)

    @classmethod
    def iterative(cls, **kwargs) -> 'TraversalConfig':
        """Config for the explicit-stack traversal, for deep trees."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST_PRE_ITERATIVE, **kwargs)

    def validate(self) -> List[str]:
        """Check the configuration for problems.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.max_nodes is not None:
            if isinstance(self.max_nodes, bool) or not isinstance(self.max_nodes, int):
                errors.append(f"max_nodes must be an integer, got {self.max_nodes!r}")
            elif self.max_nodes <= 0:
                errors.append(f"max_nodes must be positive, got {self.max_nodes}")

        return errors
