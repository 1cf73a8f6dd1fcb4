"""Tree construction for TreeWalk.

The builder creates named nodes and wires them together, refusing any link
that would make a node reachable twice or reachable from itself. Once a tree
has been built this way, traversal can assume it is acyclic and finite.
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Union

from ..errors import (
    DuplicateNodeError,
    SlotOccupiedError,
    TreeStructureError,
    UnknownNodeError,
)
from .node import BinaryNode


class Side(Enum):
    """Which child slot of a parent to link."""
    LEFT = "left"
    RIGHT = "right"


NodeRef = Union[str, BinaryNode]
Edge = Tuple[str, Union[Side, str], str]


class TreeBuilder:
    """Creates named nodes and links them into a binary tree.

    Each slot can be linked once, each node can become a child once, and a
    node can never be linked below itself. Those three rules are enough to
    keep the result a tree.

    Example:
        >>> builder = TreeBuilder()
        >>> builder.add("root"); builder.add("a")
        >>> builder.link("root", "a", Side.LEFT)
        >>> builder.root("root").left.name
        'a'
    """

    def __init__(self):
        self._nodes: Dict[str, BinaryNode] = {}
        self._parents: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: str) -> bool:
        return name in self._nodes

    def add(self, name: str) -> BinaryNode:
        """Create a childless node.

        Args:
            name: Unique label for the node

        Returns:
            The new node

        Raises:
            DuplicateNodeError: If a node with this name already exists
        """
        if name in self._nodes:
            raise DuplicateNodeError(f"Node {name!r} already exists")
        node = BinaryNode(name)
        self._nodes[name] = node
        return node

    def node(self, name: str) -> BinaryNode:
        """Look up a created node by name.

        Raises:
            UnknownNodeError: If no node has this name
        """
        try:
            return self._nodes[name]
        except KeyError:
            raise UnknownNodeError(f"Unknown node {name!r}") from None

    def link(self, parent: NodeRef, child: NodeRef, side: Union[Side, str]) -> None:
        """Attach ``child`` to one slot of ``parent``.

        Args:
            parent: Parent node or its name
            child: Child node or its name
            side: Side.LEFT / Side.RIGHT, or "left" / "right"

        Raises:
            UnknownNodeError: If either node was not created by this builder
            SlotOccupiedError: If the slot is already linked
            TreeStructureError: If the link would create a cycle or give
                the child a second parent
        """
        side = _parse_side(side)
        parent_node = self._resolve(parent)
        child_node = self._resolve(child)

        if child_node is parent_node:
            raise TreeStructureError(f"Node {child_node.name!r} cannot be its own child")
        if child_node.name in self._parents:
            raise TreeStructureError(
                f"Node {child_node.name!r} is already a child of "
                f"{self._parents[child_node.name]!r}"
            )
        if self._is_ancestor(child_node.name, parent_node.name):
            raise TreeStructureError(
                f"Linking {child_node.name!r} under {parent_node.name!r} would create a cycle"
            )

        current = getattr(parent_node, side.value)
        if current is not None:
            raise SlotOccupiedError(
                f"{side.value} slot of {parent_node.name!r} already holds {current.name!r}"
            )

        setattr(parent_node, side.value, child_node)
        self._parents[child_node.name] = parent_node.name

    def root(self, name: str) -> BinaryNode:
        """Return the named node as the root of a tree.

        Raises:
            UnknownNodeError: If no node has this name
            TreeStructureError: If the node has a parent
        """
        node = self.node(name)
        if name in self._parents:
            raise TreeStructureError(
                f"Node {name!r} is a child of {self._parents[name]!r} and cannot be a root"
            )
        return node

    def parent_of(self, name: str) -> Optional[str]:
        """Name of the node's parent, or None for an unlinked node."""
        self.node(name)
        return self._parents.get(name)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], names: Iterable[str] = ()) -> "TreeBuilder":
        """Build from ``(parent, side, child)`` tuples.

        Nodes mentioned in ``names`` or in any edge are created on first use,
        in order of appearance.

        Args:
            edges: Iterable of (parent_name, side, child_name)
            names: Extra node names to create, even if never linked

        Returns:
            A populated TreeBuilder
        """
        builder = cls()
        for name in names:
            builder._ensure(name)
        for parent, side, child in edges:
            builder._ensure(parent)
            builder._ensure(child)
            builder.link(parent, child, side)
        return builder

    def _ensure(self, name: str) -> BinaryNode:
        if name in self._nodes:
            return self._nodes[name]
        return self.add(name)

    def _resolve(self, ref: NodeRef) -> BinaryNode:
        if isinstance(ref, BinaryNode):
            node = self.node(ref.name)
            if node is not ref:
                raise UnknownNodeError(f"Node {ref.name!r} was not created by this builder")
            return node
        return self.node(ref)

    def _is_ancestor(self, candidate: str, name: str) -> bool:
        """Check if ``candidate`` is ``name`` or lies above it."""
        current: Optional[str] = name
        while current is not None:
            if current == candidate:
                return True
            current = self._parents.get(current)
        return False


def _parse_side(side: Union[Side, str]) -> Side:
    if isinstance(side, Side):
        return side
    try:
        return Side(side.lower())
    except (ValueError, AttributeError):
        raise ValueError(
            f"Unknown side: {side!r}. Choose from: {', '.join(s.value for s in Side)}"
        ) from None


EXAMPLE_NODE_NAMES = ("root", "a", "b", "c", "d", "e", "f")

EXAMPLE_EDGES = (
    ("root", Side.LEFT, "a"),
    ("root", Side.RIGHT, "b"),
    ("a", Side.LEFT, "c"),
    ("a", Side.RIGHT, "d"),
    ("d", Side.LEFT, "e"),
    ("b", Side.RIGHT, "f"),
)


def build_example_tree() -> BinaryNode:
    """Build the seven-node example tree and return its root.

    Shape::

        root
        ├── left:  a
        │          ├── left:  c
        │          └── right: d
        │                      └── left: e
        └── right: b
                   └── right: f
    """
    builder = TreeBuilder.from_edges(EXAMPLE_EDGES, names=EXAMPLE_NODE_NAMES)
    return builder.root("root")
