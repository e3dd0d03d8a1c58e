"""Reversed recursive binary tree traversal.

Recursive counterpart of
:class:`dazzledsa.binary_tree.reversed_traversal.ReversedIterativeTraverser`.
Grouped level-order is not provided, for the same reason.
"""

from typing import Iterator, List

from ..core.node import BinaryNode
from ..core.traverser import BinaryTreeTraverser


class ReversedRecursiveTraverser(BinaryTreeTraverser):
    """Right-to-left binary tree traversal relying on recursive generators."""

    def is_reversed(self) -> bool:
        return True

    def _iter_pre_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed pre-order: N -> R -> L."""
        yield node

        if node.right is not None:
            yield from self._iter_pre_order(node.right)
        if node.left is not None:
            yield from self._iter_pre_order(node.left)

    def _iter_in_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed in-order: R -> N -> L."""
        if node.right is not None:
            yield from self._iter_in_order(node.right)

        yield node

        if node.left is not None:
            yield from self._iter_in_order(node.left)

    def _iter_post_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed post-order: R -> L -> N."""
        if node.right is not None:
            yield from self._iter_post_order(node.right)
        if node.left is not None:
            yield from self._iter_post_order(node.left)

        yield node

    def _iter_bfs(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed BFS: level by level, right to left.

        Built from a mirrored per-depth walk, so the whole tree is
        visited before the first node is yielded.
        """
        levels: List[List[BinaryNode]] = []
        self._mirrored_levels(node, levels)
        for level in levels:
            yield from level

    def _mirrored_levels(self,
                         node: BinaryNode,
                         levels: List[List[BinaryNode]],
                         depth: int = 0) -> None:
        if depth == len(levels):
            levels.append([])

        levels[depth].append(node)
        if node.right is not None:
            self._mirrored_levels(node.right, levels, depth + 1)
        if node.left is not None:
            self._mirrored_levels(node.left, levels, depth + 1)
