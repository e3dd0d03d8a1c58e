"""Binary tree traversal implementations."""

from .traversal import IterativeTraverser
from .recursive import RecursiveTraverser
from .reversed_traversal import ReversedIterativeTraverser
from .recursive_reversed import ReversedRecursiveTraverser

__all__ = [
    "IterativeTraverser",
    "RecursiveTraverser",
    "ReversedIterativeTraverser",
    "ReversedRecursiveTraverser",
]
