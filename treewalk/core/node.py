"""BinaryNode abstraction for TreeWalk.

A BinaryNode is a passive data holder: a name plus up to two child
references. Navigation is done by the traversers, which only ever follow
``left`` and ``right``.
"""

from typing import Iterator, Optional


class BinaryNode:
    """A vertex in a binary tree.

    Each node owns its children through plain references. There is no
    parent back-reference, so the only way to reach a node is from above.
    Acyclicity is established when the tree is wired together (see
    ``TreeBuilder``); traversers rely on it and never check for cycles.

    Equality is identity: two distinct nodes carrying the same name are
    still two different vertices.
    """

    __slots__ = ("_name", "left", "right")

    def __init__(self,
                 name: str,
                 left: Optional["BinaryNode"] = None,
                 right: Optional["BinaryNode"] = None):
        """Create a node.

        Args:
            name: Label of the node, fixed for its whole lifetime
            left: Optional left child
            right: Optional right child
        """
        self._name = name
        self.left = left
        self.right = right

    @property
    def name(self) -> str:
        """Label given at construction time."""
        return self._name

    def identifier(self) -> str:
        """Return the node label; used in messages and collectors."""
        return self._name

    def is_leaf(self) -> bool:
        """Check if both child references are absent.

        Returns:
            True if the node has no children
        """
        return self.left is None and self.right is None

    def children(self) -> Iterator["BinaryNode"]:
        """Yield the present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        left = self.left.name if self.left is not None else None
        right = self.right.name if self.right is not None else None
        return f"{self.__class__.__name__}({self._name!r}, left={left!r}, right={right!r})"
