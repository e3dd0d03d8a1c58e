"""Node shapes for DazzleDSA.

Nodes are intentionally kept as plain data containers. All navigation and
ordering logic lives in the traversers, which only ever follow child
references - nodes have no parent pointers.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(eq=False)
class BinaryNode:
    """Binary tree node.

    Equality is identity: two distinct nodes holding the same value are
    different nodes. Traversal algorithms rely on this when they compare
    a node against a child reference.

    Attributes:
        value: Payload carried by the node
        left: Left child, or None
        right: Right child, or None
    """

    value: Any
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None

    def is_leaf(self) -> bool:
        """Check if this node has neither a left nor a right child."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"


@dataclass(eq=False)
class NAryNode:
    """N-ary tree node with an ordered list of children.

    Children order is significant and preserved by every traversal.
    """

    value: Any
    children: List["NAryNode"] = field(default_factory=list)

    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(value={self.value!r}, "
            f"children={len(self.children)})"
        )
