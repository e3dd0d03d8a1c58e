"""Execution planning for DazzleDSA.

The TraversalPlan validates that a TraversalConfig can be satisfied for a
given root node and picks the traverser that will run it.
"""

import logging
from typing import Iterator, List, Union

from .config import TraversalConfig, TraversalMethod, TraversalOrder, TreeShape
from .core.node import BinaryNode, NAryNode
from .core.traverser import (
    create_traverser,
    require_root,
    shape_of,
)

logger = logging.getLogger(__name__)

Node = Union[BinaryNode, NAryNode]


class CapabilityMismatchError(Exception):
    """Raised when configuration requirements can't be met by a traverser."""
    pass


class TraversalPlan:
    """Validated execution plan for a tree traversal.

    The plan is the bridge between user intent (TraversalConfig) and the
    concrete traverser. Everything is checked before the first node is
    touched, so an impossible request fails at plan time rather than
    halfway through a lazy sequence.
    """

    def __init__(self, config: TraversalConfig, root: Node):
        """Create and validate a traversal plan.

        Args:
            config: User's traversal configuration
            root: Root node of the tree to traverse

        Raises:
            MissingRootError: If root is None
            TypeError: If root is not a supported node type
            CapabilityMismatchError: If the config can't be satisfied
        """
        require_root(root)

        self.config = config
        self.root = root
        self.shape = TreeShape(shape_of(root))

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = create_traverser(
            self.shape.value,
            config.method.value,
            config.reversed,
        )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Traverser limitations: {'; '.join(capability_issues)}"
            )

        logger.debug(
            "Planned %s traversal of %s tree with %s",
            config.order.value,
            self.shape.value,
            self.traverser.__class__.__name__,
        )

    def _validate_capabilities(self) -> List[str]:
        """Validate the selected traverser can run the configured order.

        Returns:
            List of capability issues (empty if all satisfied)
        """
        issues = []

        if self.config.order == TraversalOrder.IN_ORDER and self.shape == TreeShape.NARY:
            issues.append("in-order traversal is only defined for binary trees")

        if self.config.is_grouped() and not self.traverser.supports_level_order():
            issues.append(
                f"{self.traverser.__class__.__name__} does not provide level-order"
            )

        return issues

    def execute(self) -> Iterator:
        """Run the traversal lazily.

        Yields:
            Nodes, or lists of nodes for level-order
        """
        generators = {
            TraversalOrder.PRE_ORDER: self.traverser.pre_order_generator,
            TraversalOrder.IN_ORDER: self.traverser.in_order_generator,
            TraversalOrder.POST_ORDER: self.traverser.post_order_generator,
            TraversalOrder.LEVEL_ORDER: self.traverser.level_order_generator,
            TraversalOrder.BFS: self.traverser.bfs_generator,
        }
        yield from generators[self.config.order](self.root)

    def execute_eager(self) -> List:
        """Run the traversal and materialize the result."""
        return list(self.execute())

    def get_execution_summary(self) -> dict:
        """Get a summary of the execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'shape': self.shape.value,
            'order': self.config.order.value,
            'method': self.config.method.value,
            'reversed': self.config.reversed,
            'lazy': self.config.lazy,
            'traverser': self.traverser.__class__.__name__,
            'recursive': self.config.method == TraversalMethod.RECURSIVE,
        }

