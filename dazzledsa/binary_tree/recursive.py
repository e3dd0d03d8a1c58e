"""Recursive binary tree traversal.

Each recursive call adds a frame to the Python call stack, so a tree
deeper than ``sys.getrecursionlimit()`` raises ``RecursionError``. That
is a known ceiling, not something handled here; use
:class:`dazzledsa.binary_tree.traversal.IterativeTraverser` for
pathologically skewed trees.
"""

from typing import Iterator, List

from ..core.node import BinaryNode
from ..core.traverser import BinaryTreeTraverser


class RecursiveTraverser(BinaryTreeTraverser):
    """Binary tree traversal relying on recursive generators."""

    def supports_level_order(self) -> bool:
        return True

    def _iter_pre_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Pre-order: N -> L -> R."""
        yield node

        if node.left is not None:
            yield from self._iter_pre_order(node.left)
        if node.right is not None:
            yield from self._iter_pre_order(node.right)

    def _iter_in_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """In-order: L -> N -> R."""
        if node.left is not None:
            yield from self._iter_in_order(node.left)

        yield node

        if node.right is not None:
            yield from self._iter_in_order(node.right)

    def _iter_post_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Post-order: L -> R -> N."""
        if node.left is not None:
            yield from self._iter_post_order(node.left)
        if node.right is not None:
            yield from self._iter_post_order(node.right)

        yield node

    def _iter_level_order(self, node: BinaryNode) -> Iterator[List[BinaryNode]]:
        """Level-order: one list per level, left to right.

        There is no natural recursive generator for this order, so the
        whole tree is walked once while filling the level lists.
        TC O(n), SC O(n).
        """
        levels: List[List[BinaryNode]] = []
        self._level_order_helper(node, levels)
        yield from levels

    def _iter_bfs(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """BFS: flattened level-order."""
        for level in self._iter_level_order(node):
            yield from level

    def _level_order_helper(self,
                            node: BinaryNode,
                            levels: List[List[BinaryNode]],
                            depth: int = 0) -> None:
        if depth == len(levels):
            levels.append([])

        levels[depth].append(node)
        if node.left is not None:
            self._level_order_helper(node.left, levels, depth + 1)
        if node.right is not None:
            self._level_order_helper(node.right, levels, depth + 1)
