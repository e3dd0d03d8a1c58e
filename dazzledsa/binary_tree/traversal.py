"""Iterative binary tree traversal.

Depth-first orders use an explicit stack (a plain list), breadth-first
orders an explicit FIFO queue. Output is identical to
:mod:`dazzledsa.binary_tree.recursive` but memory use is bounded by the
heap rather than the interpreter recursion limit.

Complexity, with n the node count, h the tree height (h = n for a skewed
tree) and m the size of the widest level:

- pre/in/post-order: TC O(n), SC O(h)
- BFS/level-order: TC O(n), SC O(m)
"""

from collections import deque
from typing import Deque, Iterator, List

from ..core.node import BinaryNode
from ..core.traverser import BinaryTreeTraverser


class IterativeTraverser(BinaryTreeTraverser):
    """Binary tree traversal using explicit stacks and queues.

    See RecursiveTraverser for the call-stack based equivalent.
    """

    def supports_level_order(self) -> bool:
        return True

    def _iter_pre_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Pre-order: N -> L -> R.

        Right is pushed before left so that left is popped first.
        """
        stack: List[BinaryNode] = [node]

        while stack:
            current = stack.pop()

            yield current

            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)

    def _iter_in_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """In-order: L -> N -> R."""
        stack: List[BinaryNode] = []
        current = node

        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left

            # Leftmost node not yet emitted (or current itself if it has no left)
            current = stack.pop()

            yield current

            # Left side is done, continue with the right subtree
            current = current.right

    def _iter_post_order(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Post-order: L -> R -> N.

        While descending left, each node's right child is pushed right
        below the node itself. When a popped node finds its own right
        child on top of the stack, that subtree has not been walked yet:
        the child is swapped out, the node goes back on the stack and the
        walk descends into the child. Only a node whose right child is not
        waiting on the stack is emitted.
        """
        stack: List[BinaryNode] = []
        current = node

        while current is not None or stack:
            while current is not None:
                if current.right is not None:
                    stack.append(current.right)
                stack.append(current)
                current = current.left

            current = stack.pop()

            if stack and stack[-1] is current.right:
                # Right child becomes the cursor, node waits for it
                stack.pop()
                stack.append(current)
                current = current.right
            else:
                yield current

                current = None

    def _iter_level_order(self, node: BinaryNode) -> Iterator[List[BinaryNode]]:
        """Level-order: one list per level, left to right.

        The level size is taken before draining since enqueued children
        change the live queue length.
        """
        queue: Deque[BinaryNode] = deque([node])

        while queue:
            level: List[BinaryNode] = []
            level_size = len(queue)
            for _ in range(level_size):
                current = queue.popleft()

                level.append(current)

                if current.left is not None:
                    queue.append(current.left)
                if current.right is not None:
                    queue.append(current.right)

            yield level

    def _iter_bfs(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """BFS: level by level, left to right, as one flat sequence."""
        queue: Deque[BinaryNode] = deque([node])

        while queue:
            level_size = len(queue)
            for _ in range(level_size):
                current = queue.popleft()

                yield current

                if current.left is not None:
                    queue.append(current.left)
                if current.right is not None:
                    queue.append(current.right)
