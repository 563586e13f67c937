"""
Data models for the ordered map.
"""

from ordmap.models.node import AVLNode, Color, Node, RBNode
from ordmap.models.stats import TreeStats

__all__ = [
    "Node",
    "AVLNode",
    "RBNode",
    "Color",
    "TreeStats",
]
