"""Iterative n-ary tree traversal.

Complexity, with n the node count and m the size of the widest level:

- pre-order: TC O(n), SC O(n) worst case. Each pop pushes every child, so
  a tree whose first node on each level has many children keeps almost
  all nodes on the stack at once.
- post-order: TC O(n), SC O(n), same reasoning; pending parents also stay
  on the stack underneath their children.
- BFS/level-order: TC O(n), SC O(m).
"""

from collections import deque
from typing import Deque, Iterator, List, Optional

from ..core.node import NAryNode
from ..core.traverser import NAryTreeTraverser


class IterativeTraverser(NAryTreeTraverser):
    """N-ary tree traversal using explicit stacks and queues."""

    def supports_level_order(self) -> bool:
        return True

    def _iter_pre_order(self, node: NAryNode) -> Iterator[NAryNode]:
        """Pre-order: node, then its children from left to right."""
        stack: List[NAryNode] = [node]

        while stack:
            current = stack.pop()

            yield current

            # Last child first, so that the leftmost one is popped next
            stack.extend(reversed(current.children))

    def _iter_post_order(self, node: NAryNode) -> Iterator[NAryNode]:
        """Post-order: children from left to right, then node.

        The stack top is only peeked at. It is emitted when it has no
        children, or when the node emitted just before it is its last
        child, which means its whole subtree is done. Otherwise its
        children are pushed on top of it and it stays where it is.

        The completion check compares identities: a sibling subtree with
        the same value must not be mistaken for the last child.
        """
        stack: List[NAryNode] = [node]
        last_emitted: Optional[NAryNode] = None

        while stack:
            current = stack[-1]

            if not current.children or last_emitted is current.children[-1]:
                yield current
                stack.pop()
                last_emitted = current
            else:
                stack.extend(reversed(current.children))

    def _iter_level_order(self, node: NAryNode) -> Iterator[List[NAryNode]]:
        """Level-order: one list per level, left to right."""
        queue: Deque[NAryNode] = deque([node])

        while queue:
            level: List[NAryNode] = []
            level_size = len(queue)
            for _ in range(level_size):
                current = queue.popleft()

                level.append(current)

                queue.extend(current.children)

            yield level

    def _iter_bfs(self, node: NAryNode) -> Iterator[NAryNode]:
        """BFS: level by level, left to right, as one flat sequence."""
        queue: Deque[NAryNode] = deque([node])

        while queue:
            level_size = len(queue)
            for _ in range(level_size):
                current = queue.popleft()

                yield current

                queue.extend(current.children)


class ReversedIterativeTraverser(NAryTreeTraverser):
    """N-ary tree traversal visiting children from right to left.

    Reversed level-order is not provided; reverse the ordinary
    level-order result instead.
    """

    def is_reversed(self) -> bool:
        return True

    def _iter_pre_order(self, node: NAryNode) -> Iterator[NAryNode]:
        """Reversed pre-order: node, then its children from right to left."""
        stack: List[NAryNode] = [node]

        while stack:
            current = stack.pop()

            yield current

            stack.extend(current.children)

    def _iter_post_order(self, node: NAryNode) -> Iterator[NAryNode]:
        """Reversed post-order: children from right to left, then node.

        The first child is the last one walked, so it is the completion
        signal here.
        """
        stack: List[NAryNode] = [node]
        last_emitted: Optional[NAryNode] = None

        while stack:
            current = stack[-1]

            if not current.children or last_emitted is current.children[0]:
                yield current
                stack.pop()
                last_emitted = current
            else:
                stack.extend(current.children)

    def _iter_bfs(self, node: NAryNode) -> Iterator[NAryNode]:
        """Reversed BFS: level by level, right to left."""
        queue: Deque[NAryNode] = deque([node])

        while queue:
            level_size = len(queue)
            for _ in range(level_size):
                current = queue.popleft()

                yield current

                queue.extend(reversed(current.children))
