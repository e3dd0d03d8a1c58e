"""Testing utilities for DazzleDSA consumers."""

from .fixtures import (
    node_values,
    level_values,
    mirror_binary_tree,
    skewed_binary_tree,
    skewed_nary_tree,
)

__all__ = [
    'node_values',
    'level_values',
    'mirror_binary_tree',
    'skewed_binary_tree',
    'skewed_nary_tree',
]
