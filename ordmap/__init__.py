"""
Self-balancing ordered map.

This package provides an in-memory ordered key-value container with:
- insert(key, value) / upsert(key, value) - O(log N)
- search(key) - O(log N)
- delete(key) - O(log N)
- minimum() / maximum() - O(log N)
- traverse() / iterator(start, end) - lazy in-order iteration

Balancing is pluggable: AVL (height-based) or Red-Black (color-based).
"""

from ordmap.interfaces import BalancePolicy, SortedContainer
from ordmap.models.exceptions import (
    EmptyTreeError,
    InvariantViolationError,
    KeyNotFoundError,
    RotationError,
)
from ordmap.models.sortedcontainers import AVLTree, OrderedTree, RedBlackTree
from ordmap.policies import AVLPolicy, RedBlackPolicy

__all__ = [
    "OrderedTree",
    "AVLTree",
    "RedBlackTree",
    "BalancePolicy",
    "AVLPolicy",
    "RedBlackPolicy",
    "SortedContainer",
    "EmptyTreeError",
    "InvariantViolationError",
    "KeyNotFoundError",
    "RotationError",
]
