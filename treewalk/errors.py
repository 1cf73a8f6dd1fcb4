"""Exceptions raised by TreeWalk.

Traversal itself cannot fail: an absent child is a normal terminal case.
These exceptions only cover misuse while wiring a tree together or while
configuring a traversal.
"""


class TreeWalkError(Exception):
    """Base class for all TreeWalk errors."""
    pass


class TreeStructureError(TreeWalkError):
    """Raised when a link would break the tree shape (cycle or shared child)."""
    pass


class DuplicateNodeError(TreeStructureError):
    """Raised when two nodes are created with the same name."""
    pass


class UnknownNodeError(TreeStructureError, KeyError):
    """Raised when a name does not refer to a created node."""
    
    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""


class SlotOccupiedError(TreeStructureError):
    """Raised when a left/right slot is linked a second time."""
    pass


class ConfigurationError(TreeWalkError):
    """Raised when a TraversalConfig does not validate."""
    pass


class NodeLimitExceededError(TreeWalkError):
    """Raised when a traversal visits more nodes than the configured limit."""
    pass
