"""N-ary tree traversal implementations."""

from .traversal import IterativeTraverser, ReversedIterativeTraverser
from .recursive import RecursiveTraverser, ReversedRecursiveTraverser

__all__ = [
    "IterativeTraverser",
    "ReversedIterativeTraverser",
    "RecursiveTraverser",
    "ReversedRecursiveTraverser",
]
