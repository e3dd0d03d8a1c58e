"""DazzleDSA - Tree traversal and search algorithms.

DazzleDSA walks binary and n-ary trees in every classic order (pre-, in-,
post-, level-order, BFS and their right-to-left mirrors), each available
both as an iterative stack/queue algorithm and as a recursive one.

Pick a traverser directly:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzledsa.binary_tree import IterativeTraverser
    IterativeTraverser().post_order(root)

Or let the high-level API choose:
    from dazzledsa import traverse_tree
    traverse_tree(root, order="post", method="recursive")
━━━━━━━━━━━━━━━━━━━━━━━━━━

Companion helpers: level-order tree factories, a binary search family
(find / lower_bound / upper_bound) and an in-place list insertion.
"""

__version__ = "0.1.0"

# Core components
from .core.node import BinaryNode, NAryNode
from .core.traverser import (
    BinaryTreeTraverser,
    NAryTreeTraverser,
    UnsupportedTraversalError,
    MissingRootError,
    create_traverser,
)

# Configuration and planning
from .config import TraversalConfig, TraversalOrder, TraversalMethod, TreeShape
from .planning import TraversalPlan, CapabilityMismatchError

# High-level API
from .api import (
    traverse_tree,
    collect_values,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

# Companion algorithms
from .factory import binary_tree_from_level_order, nary_tree_from_level_order
from .search import find, lower_bound, upper_bound
from .helpers import insert_at

__all__ = [
    "__version__",
    # Core
    "BinaryNode",
    "NAryNode",
    "BinaryTreeTraverser",
    "NAryTreeTraverser",
    "UnsupportedTraversalError",
    "MissingRootError",
    "create_traverser",
    # Config
    "TraversalConfig",
    "TraversalOrder",
    "TraversalMethod",
    "TreeShape",
    "TraversalPlan",
    "CapabilityMismatchError",
    # API
    "traverse_tree",
    "collect_values",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
    # Companions
    "binary_tree_from_level_order",
    "nary_tree_from_level_order",
    "find",
    "lower_bound",
    "upper_bound",
    "insert_at",
]
