"""Recursive n-ary tree traversal.

Recursion depth equals tree height; trees deeper than the interpreter
recursion limit raise ``RecursionError``. See
:mod:`dazzledsa.nary_tree.traversal` for the iterative implementations.
"""

from typing import Iterator, List

from ..core.node import NAryNode
from ..core.traverser import NAryTreeTraverser


class RecursiveTraverser(NAryTreeTraverser):
    """N-ary tree traversal relying on recursive generators."""

    def supports_level_order(self) -> bool:
        return True

    def _iter_pre_order(self, node: NAryNode) -> Iterator[NAryNode]:
        """Pre-order: node, then its children from left to right."""
        yield node

        for child in node.children:
            yield from self._iter_pre_order(child)

    def _iter_post_order(self, node: NAryNode) -> Iterator[NAryNode]:
        """Post-order: children from left to right, then node."""
        for child in node.children:
            yield from self._iter_post_order(child)

        yield node

    def _iter_level_order(self, node: NAryNode) -> Iterator[List[NAryNode]]:
        """Level-order: one list per level.

        A recursive BFS has to walk the full tree while remembering each
        node's depth. TC O(n), SC O(n).
        """
        levels: List[List[NAryNode]] = []
        self._level_order_helper(node, levels)
        yield from levels

    def _iter_bfs(self, node: NAryNode) -> Iterator[NAryNode]:
        for level in self._iter_level_order(node):
            yield from level

    def _level_order_helper(self,
                            node: NAryNode,
                            levels: List[List[NAryNode]],
                            depth: int = 0) -> None:
        if depth == len(levels):
            levels.append([])

        levels[depth].append(node)
        for child in node.children:
            self._level_order_helper(child, levels, depth + 1)


class ReversedRecursiveTraverser(NAryTreeTraverser):
    """N-ary tree traversal visiting children from right to left, recursively."""

    def is_reversed(self) -> bool:
        return True

    def _iter_pre_order(self, node: NAryNode) -> Iterator[NAryNode]:
        yield node

        for child in reversed(node.children):
            yield from self._iter_pre_order(child)

    def _iter_post_order(self, node: NAryNode) -> Iterator[NAryNode]:
        for child in reversed(node.children):
            yield from self._iter_post_order(child)

        yield node

    def _iter_bfs(self, node: NAryNode) -> Iterator[NAryNode]:
        """Reversed BFS: level by level, right to left."""
        levels: List[List[NAryNode]] = []
        self._mirrored_levels(node, levels)
        for level in levels:
            yield from level

    def _mirrored_levels(self,
                         node: NAryNode,
                         levels: List[List[NAryNode]],
                         depth: int = 0) -> None:
        if depth == len(levels):
            levels.append([])

        levels[depth].append(node)
        for child in reversed(node.children):
            self._mirrored_levels(child, levels, depth + 1)
