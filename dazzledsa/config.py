"""Configuration system for DazzleDSA.

This module defines how users specify a traversal: which order, which
implementation flavour, mirrored or not, and whether results should be
produced lazily.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalOrder(Enum):
    """Order in which nodes are emitted.

    Different orders suit different jobs: pre-order for copying,
    post-order for bottom-up aggregation, level-order for anything
    depth related.
    """
    PRE_ORDER = "pre"        # Node before children
    IN_ORDER = "in"          # Node between left and right (binary only)
    POST_ORDER = "post"      # Children before node
    LEVEL_ORDER = "level"    # Grouped by level
    BFS = "bfs"              # Level by level, flat


class TraversalMethod(Enum):
    """How the traversal keeps track of pending nodes."""
    ITERATIVE = "iterative"  # Explicit stack / queue on the heap
    RECURSIVE = "recursive"  # Python call stack


class TreeShape(Enum):
    """Supported node shapes."""
    BINARY = "binary"
    NARY = "nary"


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    Attributes:
        order: Traversal order
        method: Iterative or recursive implementation
        reversed: Visit right / last child first
        lazy: Return a generator (True) or a materialized list (False)
    """

    order: TraversalOrder = TraversalOrder.PRE_ORDER
    method: TraversalMethod = TraversalMethod.ITERATIVE
    reversed: bool = False
    lazy: bool = True

    def is_grouped(self) -> bool:
        """Check if results come as one list per level."""
        return self.order == TraversalOrder.LEVEL_ORDER

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Only checks that do not depend on the tree shape live here; shape
        specific checks happen in TraversalPlan.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if not isinstance(self.method, TraversalMethod):
            errors.append(f"method must be a TraversalMethod, got {self.method!r}")

        if self.reversed and self.order == TraversalOrder.LEVEL_ORDER:
            errors.append(
                "reversed level-order is not provided; "
                "reverse the level-order result instead"
            )

        return errors
