"""
Tests for the rotation primitives.
"""

import pytest

from ordmap.engine.rotations import replace_child, rotate_left, rotate_right
from ordmap.models.exceptions import RotationError
from ordmap.models.node import AVLNode, Node, RBNode, make_sentinel


def build(key, left=None, right=None):
    return Node(key=key, left=left, right=right)


def in_order(node, nil=None):
    keys = []
    stack = []
    while stack or node is not nil:
        while node is not nil:
            stack.append(node)
            node = node.left
        node = stack.pop()
        keys.append(node.key)
        node = node.right
    return keys


class TestRotateLeft:
    """Tests for rotate_left."""

    def test_rotate_left(self):
        """Test the right child becomes the subtree root."""
        a, b, c = build("a"), build("c"), build("e")
        pivot = build("b", a, build("d", b, c))

        new_root = rotate_left(pivot)

        assert new_root.key == "d"
        assert new_root.left is pivot
        assert pivot.left is a
        assert pivot.right is b
        assert new_root.right is c
        assert in_order(new_root) == ["a", "b", "c", "d", "e"]

    def test_rotate_left_without_right_child(self):
        """Test rotating left with no right child is a programming error."""
        with pytest.raises(RotationError, match="no right child"):
            rotate_left(build(1, build(0)))

    def test_rotate_left_with_sentinel(self):
        """Test the sentinel counts as an absent child."""
        nil = make_sentinel()
        pivot = RBNode(key=1, left=nil, right=nil)
        with pytest.raises(RotationError):
            rotate_left(pivot, nil)

    def test_metadata_untouched(self):
        """Test rotations do not touch heights."""
        pivot = AVLNode(key=1, height=2, right=AVLNode(key=2, height=1))

        new_root = rotate_left(pivot)

        assert (new_root.height, pivot.height) == (1, 2)


class TestRotateRight:
    """Tests for rotate_right."""

    def test_rotate_right(self):
        """Test the left child becomes the subtree root."""
        a, b, c = build("a"), build("c"), build("e")
        pivot = build("d", build("b", a, b), c)

        new_root = rotate_right(pivot)

        assert new_root.key == "b"
        assert new_root.right is pivot
        assert pivot.left is b
        assert in_order(new_root) == ["a", "b", "c", "d", "e"]

    def test_rotate_right_without_left_child(self):
        """Test rotating right with no left child is a programming error."""
        with pytest.raises(RotationError) as exc_info:
            rotate_right(build(1, None, build(2)))
        assert exc_info.value.direction == "right"
        assert exc_info.value.pivot_key == 1

    def test_round_trip(self):
        """Test a left rotation undone by a right rotation restores the shape."""
        a, b, c = build(1), build(3), build(5)
        child = build(4, b, c)
        pivot = build(2, a, child)

        restored = rotate_right(rotate_left(pivot))

        assert restored is pivot
        assert pivot.left is a
        assert pivot.right is child
        assert child.left is b


class TestReplaceChild:
    """Tests for replace_child."""

    def test_replace_root(self):
        """Test replacing with no parent yields the new root."""
        old, new = build(1), build(2)
        assert replace_child(old, None, old, new) is new

    def test_replace_left_and_right(self):
        """Test the correct slot under the parent is relinked."""
        left, right = build(1), build(3)
        parent = build(2, left, right)
        new_left, new_right = build(0), build(4)

        assert replace_child(parent, parent, left, new_left) is parent
        assert replace_child(parent, parent, right, new_right) is parent
        assert parent.left is new_left
        assert parent.right is new_right
