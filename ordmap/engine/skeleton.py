"""
BSTSkeleton - balance-oblivious binary search tree mutation logic.
"""

from typing import Any

from ordmap.engine.rotations import replace_child
from ordmap.interfaces.balance_policy import BalancePolicy
from ordmap.models.exceptions import EmptyTreeError
from ordmap.models.node import Node


class BSTSkeleton:
    """
    Ordinary binary search tree search/insert/delete.

    Descents are iterative and record the ancestor path, which is handed to
    the active policy's fix-up hook after every structural change. Every
    mutating method takes the current root and returns the new one.
    """

    def __init__(self, policy: BalancePolicy) -> None:
        self._policy = policy
        self._nil = policy.nil

    def find(self, root: Node | None, key: Any) -> Node | None:
        """Find node by key. Returns nil if absent."""
        nil = self._nil
        current = root
        while current is not nil:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return nil

    def insert(
        self, root: Node | None, key: Any, value: Any, overwrite: bool = False
    ) -> tuple[Node, bool]:
        """
        Insert key unless present. O(log N)

        Args:
            root: Current tree root.
            key: Key to insert.
            value: Value to associate.
            overwrite: Replace the value of an existing key instead of
                leaving it untouched.

        Returns:
            (new root, True if a node was created).
        """
        nil = self._nil
        path: list[Node] = []
        current = root

        while current is not nil:
            if key < current.key:
                path.append(current)
                current = current.left
            elif key > current.key:
                path.append(current)
                current = current.right
            else:
                if overwrite:
                    current.value = value
                return root, False

        new_node = self._policy.make_node(key, value)
        if not path:
            root = new_node
        elif key < path[-1].key:
            path[-1].left = new_node
        else:
            path[-1].right = new_node

        return self._policy.after_insert(root, path, new_node), True

    def delete(
        self, root: Node | None, key: Any
    ) -> tuple[Node | None, tuple[Any, Any] | None]:
        """
        Remove key if present. O(log N)

        Returns:
            (new root, removed (key, value) pair or None if key was absent).
        """
        nil = self._nil
        path: list[Node] = []
        node = root

        while node is not nil:
            if key < node.key:
                path.append(node)
                node = node.left
            elif key > node.key:
                path.append(node)
                node = node.right
            else:
                break
        else:
            return root, None

        removed = (node.key, node.value)

        if node.left is not nil and node.right is not nil:
            # Node has two children - splice out the successor instead
            path.append(node)
            successor = node.right
            while successor.left is not nil:
                path.append(successor)
                successor = successor.left

            node.key = successor.key
            node.value = successor.value
            node = successor

        # Node has at most one child
        child = node.left if node.left is not nil else node.right
        parent = path[-1] if path else None
        is_left = parent is not None and parent.left is node

        root = replace_child(root, parent, node, child)
        node.left = nil
        node.right = nil

        return self._policy.after_delete(root, path, is_left, node), removed

    def minimum(self, root: Node | None) -> Node:
        """Return the leftmost node. Raises EmptyTreeError on an empty tree."""
        if root is self._nil:
            raise EmptyTreeError("minimum")
        return self._leftmost(root)

    def maximum(self, root: Node | None) -> Node:
        """Return the rightmost node. Raises EmptyTreeError on an empty tree."""
        if root is self._nil:
            raise EmptyTreeError("maximum")
        return self._rightmost(root)

    def successor(self, root: Node | None, key: Any) -> Node | None:
        """Node with the smallest key strictly greater than key, or nil."""
        nil = self._nil
        best = nil
        current = root
        while current is not nil:
            if key < current.key:
                best = current
                current = current.left
            else:
                current = current.right
        return best

    def predecessor(self, root: Node | None, key: Any) -> Node | None:
        """Node with the largest key strictly less than key, or nil."""
        nil = self._nil
        best = nil
        current = root
        while current is not nil:
            if key > current.key:
                best = current
                current = current.right
            else:
                current = current.left
        return best

    def ceiling(self, root: Node | None, key: Any) -> Node | None:
        """Node with the smallest key >= key, or nil."""
        found = self.find(root, key)
        if found is not self._nil:
            return found
        return self.successor(root, key)

    def floor(self, root: Node | None, key: Any) -> Node | None:
        """Node with the largest key <= key, or nil."""
        found = self.find(root, key)
        if found is not self._nil:
            return found
        return self.predecessor(root, key)

    def height(self, root: Node | None) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        nil = self._nil
        if root is nil:
            return 0
        best = 0
        stack = [(root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not nil:
                stack.append((node.left, depth + 1))
            if node.right is not nil:
                stack.append((node.right, depth + 1))
        return best

    def _leftmost(self, node: Node) -> Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _rightmost(self, node: Node) -> Node:
        while node.right is not self._nil:
            node = node.right
        return node
