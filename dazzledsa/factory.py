"""Tree factories for DazzleDSA.

Build binary and n-ary trees from flat level-order lists, the format
commonly used to write test trees by hand.

Binary format: values are read level by level; each parent consumes two
slots (left, right) and ``None`` marks an absent child::

    [1, 2, 7, 3, 4, None, 8]

        1
       / \\
      2   7
     / \\   \\
    3   4   8

N-ary format: the root value is followed by ``None``; afterwards every
parent, in breadth-first order, lists its children and closes the group
with ``None``::

    [1, None, 2, 3, None, None, 4]

        1
       / \\
      2   3
          |
          4
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Optional, Sequence

from .core.node import BinaryNode, NAryNode

logger = logging.getLogger(__name__)


def binary_tree_from_level_order(
    values: Sequence[Optional[Any]],
    node_factory: Callable[[Any], BinaryNode] = BinaryNode,
) -> Optional[BinaryNode]:
    """Build a binary tree from a level-order list.

    Args:
        values: Level-order values, None for absent children
        node_factory: Callable creating a node from a value

    Returns:
        Root node, or None for an empty list or ``[None]``
    """
    if not values or values[0] is None:
        return None

    root = node_factory(values[0])
    queue: Deque[BinaryNode] = deque([root])

    index = 1  # Root value already consumed
    while index < len(values):
        if not queue:
            raise ValueError(
                f"Malformed level-order list: value at index {index} has no parent"
            )
        parent = queue.popleft()

        if values[index] is not None:
            parent.left = node_factory(values[index])
            queue.append(parent.left)
        index += 1

        # Right slot may be missing on the last parent
        if index < len(values) and values[index] is not None:
            parent.right = node_factory(values[index])
            queue.append(parent.right)
        index += 1

    logger.debug("Built binary tree from %d level-order slots", len(values))
    return root


def nary_tree_from_level_order(
    values: Sequence[Optional[Any]],
    node_factory: Callable[[Any], NAryNode] = NAryNode,
) -> Optional[NAryNode]:
    """Build an n-ary tree from a level-order list with None separators.

    Args:
        values: Level-order values; None closes the current parent's children
        node_factory: Callable creating a node from a value

    Returns:
        Root node, or None for an empty list or ``[None]``

    Raises:
        ValueError: If the root is not followed by None, or a value is
            left without a parent
    """
    if not values or values[0] is None:
        return None

    if len(values) > 1 and values[1] is not None:
        raise ValueError(
            f"Malformed level-order list: index 1 must be None after the root, "
            f"got {values[1]!r}"
        )

    root = node_factory(values[0])
    queue: Deque[NAryNode] = deque([root])

    # Index 1 holds the None closing the root "level"
    for index, value in enumerate(values[2:], start=2):
        if not queue:
            raise ValueError(
                f"Malformed level-order list: value at index {index} has no parent"
            )
        if value is not None:
            child = node_factory(value)
            queue[0].children.append(child)
            queue.append(child)
        else:
            # No more children for the current parent
            queue.popleft()

    logger.debug("Built n-ary tree from %d level-order slots", len(values))
    return root
