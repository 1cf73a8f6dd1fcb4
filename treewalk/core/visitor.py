"""Visit actions for TreeWalk.

A visit action is anything callable with a single node. The traversal calls
it once per node, in visit order.
"""

import sys
from typing import Callable, List, Optional, TextIO

from .node import BinaryNode

Visit = Callable[[BinaryNode], None]


class PrintVisitor:
    """Writes one line per visited node.

    The line format is ``visiting node '<name>'``. Nothing else is written
    and no state is kept.
    """

    MESSAGE = "visiting node '{name}'"

    def __init__(self, stream: Optional[TextIO] = None):
        """Initialize the visitor.

        Args:
            stream: Where to write; defaults to sys.stdout at call time
        """
        self.stream = stream

    def __call__(self, node: BinaryNode) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        print(self.MESSAGE.format(name=node.name), file=stream)


class NameCollector:
    """Records the names of visited nodes, in order."""

    def __init__(self):
        self.names: List[str] = []

    def __call__(self, node: BinaryNode) -> None:
        self.names.append(node.name)

    def __len__(self) -> int:
        return len(self.names)
