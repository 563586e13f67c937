"""
Rotation primitives shared by every balance policy.

Rotations are purely structural: they never read or write height or color.
The calling policy recomputes its metadata afterwards.
"""

from ordmap.models.exceptions import RotationError
from ordmap.models.node import Node


def rotate_left(pivot: Node, nil: Node | None = None) -> Node:
    """
    Rotate the subtree rooted at pivot to the left.

         P               R
        / \\             / \\
       a   R    ->     P   c
          / \\         / \\
         b   c       a   b

    Args:
        pivot: Root of the subtree to rotate.
        nil: The tree's absent-child marker (None or a sentinel).

    Returns:
        The new subtree root (pivot's former right child).

    Raises:
        RotationError: If pivot has no right child.
    """
    right_child = pivot.right
    if right_child is nil or right_child is None:
        raise RotationError("left", pivot.key)

    pivot.right = right_child.left
    right_child.left = pivot
    return right_child


def rotate_right(pivot: Node, nil: Node | None = None) -> Node:
    """
    Rotate the subtree rooted at pivot to the right. Mirror of rotate_left().

    Raises:
        RotationError: If pivot has no left child.
    """
    left_child = pivot.left
    if left_child is nil or left_child is None:
        raise RotationError("right", pivot.key)

    pivot.left = left_child.right
    left_child.right = pivot
    return left_child


def replace_child(
    root: Node | None, parent: Node | None, old: Node, new: Node | None
) -> Node | None:
    """
    Hand ownership of a subtree back to the slot that held old.

    Args:
        root: Current tree root.
        parent: Owner of old, or None when old is the root.
        old: Subtree root being replaced. Must be a real node.
        new: Replacement subtree root.

    Returns:
        The tree root after relinking.
    """
    if parent is None:
        return new
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new
    return root
