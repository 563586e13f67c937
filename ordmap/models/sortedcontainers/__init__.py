"""
Sorted container implementations.
"""

from ordmap.models.sortedcontainers.ordered_tree import AVLTree, OrderedTree, RedBlackTree

__all__ = ["OrderedTree", "AVLTree", "RedBlackTree"]
