"""
Tree node types.

Nodes own their children through the left/right links. There are no parent
links: fix-up walks use the ancestor path recorded during descent.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """Plain binary search tree node."""

    key: Any
    value: Any = None
    left: "Node | None" = field(default=None, repr=False)
    right: "Node | None" = field(default=None, repr=False)


@dataclass(eq=False)
class AVLNode(Node):
    """Node in an AVL tree. A new leaf has height 1."""

    height: int = 1


@dataclass(eq=False)
class RBNode(Node):
    """Node in a Red-Black tree. New nodes are red."""

    color: Color = Color.RED


def make_sentinel() -> RBNode:
    """Create the black, keyless nil leaf shared by one Red-Black tree."""
    return RBNode(key=None, color=Color.BLACK)
