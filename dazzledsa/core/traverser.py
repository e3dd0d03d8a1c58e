"""Traverser contracts for DazzleDSA.

Traversers implement the algorithms for walking a tree in a given order.
Each concrete traverser exposes every order twice: as a lazy generator
(``*_generator``) and as an eager list built from that generator.

Binary and n-ary trees get separate base classes since in-order only makes
sense for a fixed left/right pair.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from cachetools import LRUCache, cached

from .node import BinaryNode, NAryNode


class UnsupportedTraversalError(NotImplementedError):
    """Raised when a traverser is asked for an order it does not provide."""
    pass


class MissingRootError(ValueError):
    """Raised when a traversal is started without a root node."""
    pass


def require_root(node) -> None:
    """Fail fast on an absent root.

    An empty result would be indistinguishable from a real traversal,
    so every entry point refuses ``None`` instead of returning ``[]``.
    """
    if node is None:
        raise MissingRootError("Traversal requires a root node, got None")


class BinaryTreeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies.

    Subclasses implement one ``_iter_*`` generator per order. The public
    ``*_generator`` methods are plain methods: they check the root when
    called, before any node is pulled, and hand back the subclass
    generator. The eager list variants materialize those.
    """

    # Capability flags - traversers declare what they support

    def is_reversed(self) -> bool:
        """Check if this traverser visits right before left."""
        return False

    def supports_level_order(self) -> bool:
        """Check if grouped level-order is available.

        Returns:
            True if level_order() can be called
        """
        return False

    @abstractmethod
    def _iter_pre_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Yield nodes parent first."""
        pass

    @abstractmethod
    def _iter_in_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Yield nodes with the parent between its two subtrees."""
        pass

    @abstractmethod
    def _iter_post_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Yield nodes parent last."""
        pass

    @abstractmethod
    def _iter_bfs(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Yield nodes level by level as a single flat sequence."""
        pass

    def _iter_level_order(self, node: BinaryNode) -> Iterator[List[BinaryNode]]:
        raise UnsupportedTraversalError(
            f"{self.__class__.__name__} does not provide a level-order generator"
        )

    def pre_order_generator(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Lazy pre-order.

        Raises:
            MissingRootError: If node is None, at call time
        """
        require_root(node)
        return self._iter_pre_order(node)

    def in_order_generator(self, node: BinaryNode) -> Iterator[BinaryNode]:
        require_root(node)
        return self._iter_in_order(node)

    def post_order_generator(self, node: BinaryNode) -> Iterator[BinaryNode]:
        require_root(node)
        return self._iter_post_order(node)

    def bfs_generator(self, node: BinaryNode) -> Iterator[BinaryNode]:
        require_root(node)
        return self._iter_bfs(node)

    def level_order_generator(self, node: BinaryNode) -> Iterator[List[BinaryNode]]:
        """Lazy level-order, one list of nodes per level.

        Raises:
            MissingRootError: If node is None
            UnsupportedTraversalError: If level grouping is not provided
        """
        require_root(node)
        return self._iter_level_order(node)

    def pre_order(self, node: BinaryNode) -> List[BinaryNode]:
        return list(self.pre_order_generator(node))

    def in_order(self, node: BinaryNode) -> List[BinaryNode]:
        return list(self.in_order_generator(node))

    def post_order(self, node: BinaryNode) -> List[BinaryNode]:
        return list(self.post_order_generator(node))

    def bfs(self, node: BinaryNode) -> List[BinaryNode]:
        return list(self.bfs_generator(node))

    def level_order(self, node: BinaryNode) -> List[List[BinaryNode]]:
        """Return the tree as a list of levels, top to bottom.

        Raises:
            UnsupportedTraversalError: If level grouping is not provided
        """
        return list(self.level_order_generator(node))


class NAryTreeTraverser(ABC):
    """Abstract base class for n-ary tree traversal strategies.

    Same split as BinaryTreeTraverser: subclasses implement ``_iter_*``,
    the public generators check the root first.
    """

    def is_reversed(self) -> bool:
        """Check if this traverser visits children last to first."""
        return False

    def supports_level_order(self) -> bool:
        return False

    @abstractmethod
    def _iter_pre_order(self, node: NAryNode) -> Iterator[NAryNode]:
        pass

    @abstractmethod
    def _iter_post_order(self, node: NAryNode) -> Iterator[NAryNode]:
        pass

    @abstractmethod
    def _iter_bfs(self, node: NAryNode) -> Iterator[NAryNode]:
        pass

    def _iter_level_order(self, node: NAryNode) -> Iterator[List[NAryNode]]:
        raise UnsupportedTraversalError(
            f"{self.__class__.__name__} does not provide a level-order generator"
        )

    def pre_order_generator(self, node: NAryNode) -> Iterator[NAryNode]:
        require_root(node)
        return self._iter_pre_order(node)

    def post_order_generator(self, node: NAryNode) -> Iterator[NAryNode]:
        require_root(node)
        return self._iter_post_order(node)

    def bfs_generator(self, node: NAryNode) -> Iterator[NAryNode]:
        require_root(node)
        return self._iter_bfs(node)

    def in_order_generator(self, node: NAryNode) -> Iterator[NAryNode]:
        """In-order has no meaning for an arbitrary number of children."""
        require_root(node)
        raise UnsupportedTraversalError(
            f"{self.__class__.__name__} cannot traverse an n-ary tree in-order"
        )

    def level_order_generator(self, node: NAryNode) -> Iterator[List[NAryNode]]:
        require_root(node)
        return self._iter_level_order(node)

    def pre_order(self, node: NAryNode) -> List[NAryNode]:
        return list(self.pre_order_generator(node))

    def post_order(self, node: NAryNode) -> List[NAryNode]:
        return list(self.post_order_generator(node))

    def bfs(self, node: NAryNode) -> List[NAryNode]:
        return list(self.bfs_generator(node))

    def in_order(self, node: NAryNode) -> List[NAryNode]:
        return list(self.in_order_generator(node))

    def level_order(self, node: NAryNode) -> List[List[NAryNode]]:
        return list(self.level_order_generator(node))


# Factory function for creating traversers by shape and flavour
def create_traverser(shape: str,
                     method: str = "iterative",
                     reversed: bool = False):
    """Get the traverser for a shape and flavour.

    Traversers keep no state between walks, so a single instance per
    flavour is built and then shared by every caller.

    Args:
        shape: Tree shape name (binary, nary)
        method: Implementation flavour (iterative, recursive)
        reversed: Mirror the visiting order (right/last child first)

    Returns:
        BinaryTreeTraverser or NAryTreeTraverser instance

    Raises:
        ValueError: If shape or method is not recognized
    """
    # `reversed` shadows the builtin here; it matches TraversalConfig.reversed
    return _shared_traverser(shape.lower(), method.lower(), bool(reversed))


@cached(cache=LRUCache(maxsize=8))
def _shared_traverser(shape: str, method: str, mirrored: bool):
    # Imported here: concrete traversers import this module
    from ..binary_tree import traversal as binary_iterative
    from ..binary_tree import recursive as binary_recursive
    from ..binary_tree import reversed_traversal as binary_reversed
    from ..binary_tree import recursive_reversed as binary_recursive_reversed
    from ..nary_tree import traversal as nary_iterative
    from ..nary_tree import recursive as nary_recursive

    traversers = {
        ('binary', 'iterative', False): binary_iterative.IterativeTraverser,
        ('binary', 'recursive', False): binary_recursive.RecursiveTraverser,
        ('binary', 'iterative', True): binary_reversed.ReversedIterativeTraverser,
        ('binary', 'recursive', True): binary_recursive_reversed.ReversedRecursiveTraverser,
        ('nary', 'iterative', False): nary_iterative.IterativeTraverser,
        ('nary', 'recursive', False): nary_recursive.RecursiveTraverser,
        ('nary', 'iterative', True): nary_iterative.ReversedIterativeTraverser,
        ('nary', 'recursive', True): nary_recursive.ReversedRecursiveTraverser,
    }

    key = (shape, method, mirrored)
    if key not in traversers:
        raise ValueError(
            f"Unknown traverser: shape={shape!r}, method={method!r}. "
            f"Choose shape from: binary, nary; method from: iterative, recursive"
        )

    return traversers[key]()


def shape_of(node: Optional[object]) -> str:
    """Return the shape name matching a root node's type.

    Raises:
        TypeError: If node is neither a BinaryNode nor an NAryNode
    """
    if isinstance(node, BinaryNode):
        return 'binary'
    if isinstance(node, NAryNode):
        return 'nary'
    raise TypeError(f"Unsupported node type: {type(node).__name__}")
