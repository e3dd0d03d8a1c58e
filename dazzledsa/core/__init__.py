"""Core abstractions for DazzleDSA.

This module contains the node shapes and the abstract traverser
contracts every traversal implementation follows.
"""

from .node import BinaryNode, NAryNode
from .traverser import (
    BinaryTreeTraverser,
    NAryTreeTraverser,
    UnsupportedTraversalError,
    MissingRootError,
    create_traverser,
)

__all__ = [
    "BinaryNode",
    "NAryNode",
    "BinaryTreeTraverser",
    "NAryTreeTraverser",
    "UnsupportedTraversalError",
    "MissingRootError",
    "create_traverser",
]
