"""
Balance policies pluggable into OrderedTree.
"""

from ordmap.policies.avl import AVLPolicy
from ordmap.policies.red_black import RedBlackPolicy

__all__ = ["AVLPolicy", "RedBlackPolicy"]
