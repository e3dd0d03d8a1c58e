"""Reversed iterative binary tree traversal.

Mirror image of :class:`dazzledsa.binary_tree.traversal.IterativeTraverser`:
every decision point takes the right child before the left one.

Reversed level-order is not provided. Detecting the last level means
looking at every node anyway (TC and SC O(n) whatever the approach), so
callers should take the ordinary level-order result and walk it from the
end, or reverse it.
"""

from collections import deque
from typing import Deque, Iterator, List

from ..core.node import BinaryNode
from ..core.traverser import BinaryTreeTraverser


class ReversedIterativeTraverser(BinaryTreeTraverser):
    """Right-to-left binary tree traversal using explicit stacks and queues."""

    def is_reversed(self) -> bool:
        return True

    def _iter_pre_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed pre-order: N -> R -> L."""
        stack: List[BinaryNode] = [node]

        while stack:
            current = stack.pop()

            yield current

            if current.left is not None:
                stack.append(current.left)
            if current.right is not None:
                stack.append(current.right)

    def _iter_in_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed in-order: R -> N -> L."""
        stack: List[BinaryNode] = []
        current = node

        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.right

            current = stack.pop()

            yield current

            current = current.left

    def _iter_post_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed post-order: R -> L -> N.

        Same deferred emission as the left-to-right version, with the
        left child parked under each node while descending right.
        """
        stack: List[BinaryNode] = []
        current = node

        while current is not None or stack:
            while current is not None:
                if current.left is not None:
                    stack.append(current.left)
                stack.append(current)
                current = current.right

            current = stack.pop()

            if stack and stack[-1] is current.left:
                stack.pop()
                stack.append(current)
                current = current.left
            else:
                yield current

                current = None

    def _iter_bfs(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Reversed BFS: level by level, right to left."""
        queue: Deque[BinaryNode] = deque([node])

        while queue:
            level_size = len(queue)
            for _ in range(level_size):
                current = queue.popleft()

                yield current

                if current.right is not None:
                    queue.append(current.right)
                if current.left is not None:
                    queue.append(current.left)
