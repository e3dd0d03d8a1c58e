"""Test fixtures for DazzleDSA consumers.

Helpers to turn traversal output into plain values and to build trees
with known shapes, for use in test suites of projects that consume
DazzleDSA as well as in its own tests.
"""

from typing import Any, Iterable, List, Optional

from ..core.node import BinaryNode, NAryNode


def node_values(nodes: Iterable) -> List[Any]:
    """Return the values of a flat traversal result.

    Example:
        assert node_values(traverser.pre_order(root)) == [1, 2, 3]
    """
    return [node.value for node in nodes]


def level_values(levels: Iterable[Iterable]) -> List[List[Any]]:
    """Return the values of a level-order traversal result."""
    return [[node.value for node in level] for level in levels]


def mirror_binary_tree(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
    """Return a new tree with left and right swapped at every node.

    The original tree is left untouched. Iterative, so deep trees are fine.
    """
    if node is None:
        return None

    mirrored_root = BinaryNode(node.value)
    stack = [(node, mirrored_root)]
    while stack:
        original, mirrored = stack.pop()
        if original.left is not None:
            mirrored.right = BinaryNode(original.left.value)
            stack.append((original.left, mirrored.right))
        if original.right is not None:
            mirrored.left = BinaryNode(original.right.value)
            stack.append((original.right, mirrored.left))

    return mirrored_root


def skewed_binary_tree(depth: int, side: str = "left") -> BinaryNode:
    """Build a degenerate binary tree, values 1..depth from the root down.

    Args:
        depth: Number of nodes (>= 1)
        side: "left", "right" or "zigzag" (left, right, left, ...)

    Raises:
        ValueError: If depth < 1 or side is unknown
    """
    if depth < 1:
        raise ValueError("depth must be at least 1")
    if side not in ("left", "right", "zigzag"):
        raise ValueError(f"Unknown side: {side}")

    root = BinaryNode(1)
    current = root
    for value in range(2, depth + 1):
        child = BinaryNode(value)
        go_left = side == "left" or (side == "zigzag" and value % 2 == 0)
        if go_left:
            current.left = child
        else:
            current.right = child
        current = child

    return root


def skewed_nary_tree(depth: int) -> NAryNode:
    """Build an n-ary chain, every node holding a single child."""
    if depth < 1:
        raise ValueError("depth must be at least 1")

    root = NAryNode(1)
    current = root
    for value in range(2, depth + 1):
        child = NAryNode(value)
        current.children.append(child)
        current = child

    return root
