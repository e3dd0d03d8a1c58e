"""High-level API for DazzleDSA.

This module provides simple, functional interfaces for common tree traversal
operations. These functions wrap the traverser classes and TraversalPlan for
ease of use in simple cases.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Union

from .config import TraversalConfig, TraversalMethod, TraversalOrder
from .planning import Node, TraversalPlan

logger = logging.getLogger(__name__)


def traverse_tree(
    root: Node,
    order: Union[TraversalOrder, str] = TraversalOrder.PRE_ORDER,
    method: Union[TraversalMethod, str] = TraversalMethod.ITERATIVE,
    reversed: bool = False,
    lazy: bool = True,
) -> Union[Iterator, List]:
    """Simple interface for tree traversal.

    This is the primary high-level function for traversing trees. The
    node shape (binary or n-ary) is picked from the root's type.

    Args:
        root: Root node of the tree
        order: Traversal order (pre, in, post, level, bfs)
        method: Implementation (iterative, recursive)
        reversed: Visit right / last child first
        lazy: Return a generator (True) or a list (False)

    Returns:
        Generator or list of nodes; for level-order, of lists of nodes

    Raises:
        MissingRootError: If root is None
        CapabilityMismatchError: If the combination is not available
        ValueError: If order or method names are unknown

    Example:
        >>> root = binary_tree_from_level_order([1, 2, 3])
        >>> [node.value for node in traverse_tree(root, order="in")]
        [2, 1, 3]
    """
    # `reversed` shadows the builtin in this body; keep it to keyword use only
    config = TraversalConfig(
        order=_parse_order(order),
        method=_parse_method(method),
        reversed=reversed,
        lazy=lazy,
    )

    # Plan is built eagerly so invalid requests fail at call time
    plan = TraversalPlan(config, root)

    if config.lazy:
        return plan.execute()
    return plan.execute_eager()


def collect_values(root: Node, **kwargs) -> List[Any]:
    """Traverse a tree and collect node values.

    Args:
        root: Root node of the tree
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        List of values, or list of per-level value lists for level-order

    Example:
        >>> collect_values(root, order="level")
        [[1], [2, 3]]
    """
    kwargs['lazy'] = True
    result = traverse_tree(root, **kwargs)

    if _parse_order(kwargs.get('order', TraversalOrder.PRE_ORDER)) == TraversalOrder.LEVEL_ORDER:
        return [[node.value for node in level] for level in result]
    return [node.value for node in result]


def count_nodes(root: Node, **kwargs) -> int:
    """Count nodes in a tree.

    Args:
        root: Root node of the tree
        **kwargs: Traversal options (see traverse_tree); order defaults to BFS

    Returns:
        Number of nodes
    """
    kwargs.setdefault('order', TraversalOrder.BFS)
    if _parse_order(kwargs['order']) == TraversalOrder.LEVEL_ORDER:
        kwargs['order'] = TraversalOrder.BFS

    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: Node,
    predicate: Callable[[Node], bool],
    **kwargs
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Args:
        root: Root node of the tree
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate, in traversal order

    Example:
        >>> evens = find_nodes(root, lambda n: n.value % 2 == 0)
    """
    if _parse_order(kwargs.get('order', TraversalOrder.PRE_ORDER)) == TraversalOrder.LEVEL_ORDER:
        raise ValueError("find_nodes yields single nodes; use order='bfs' instead of 'level'")

    kwargs['lazy'] = True
    nodes = traverse_tree(root, **kwargs)
    return (node for node in nodes if predicate(node))


def get_leaf_nodes(root: Node, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree, in traversal order.

    Args:
        root: Root node of the tree
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Leaf nodes (nodes with no children)
    """
    return find_nodes(root, lambda node: node.is_leaf(), **kwargs)


def get_tree_stats(root: Node, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Root node of the tree
        **kwargs: Traversal options (method only; order is always level)

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(root)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    kwargs['order'] = TraversalOrder.LEVEL_ORDER
    kwargs['reversed'] = False

    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'max_width': 0,
        'depths': {}
    }

    for depth, level in enumerate(traverse_tree(root, **kwargs)):
        stats['total_nodes'] += len(level)
        stats['leaf_nodes'] += sum(1 for node in level if node.is_leaf())
        stats['height'] = depth
        stats['max_width'] = max(stats['max_width'], len(level))
        stats['depths'][depth] = len(level)

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    logger.debug("Collected stats for %d nodes", stats['total_nodes'])
    return stats


# Helper functions

def _parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        TraversalOrder enum value
    """
    if isinstance(order, TraversalOrder):
        return order

    # Map string names to enum values
    order_map = {
        'pre': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'preorder': TraversalOrder.PRE_ORDER,
        'in': TraversalOrder.IN_ORDER,
        'in_order': TraversalOrder.IN_ORDER,
        'inorder': TraversalOrder.IN_ORDER,
        'post': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'postorder': TraversalOrder.POST_ORDER,
        'level': TraversalOrder.LEVEL_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
        'bfs': TraversalOrder.BFS,
        'breadth_first': TraversalOrder.BFS,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(f"Unknown traversal order: {order}")


def _parse_method(method: Union[TraversalMethod, str]) -> TraversalMethod:
    """Parse method from string or enum."""
    if isinstance(method, TraversalMethod):
        return method

    try:
        return TraversalMethod(method.lower())
    except (AttributeError, ValueError):
        raise ValueError(f"Unknown traversal method: {method}") from None
