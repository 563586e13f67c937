"""
BalancePolicy abstract base class for tree rebalancing strategies.
"""

from abc import ABC, abstractmethod
from typing import Any

from ordmap.engine.rotations import rotate_left, rotate_right
from ordmap.models.node import Node
from ordmap.models.stats import TreeStats


class BalancePolicy(ABC):
    """
    Fix-up hooks invoked by the BST skeleton after each structural mutation.

    A policy instance belongs to exactly one tree: it owns the tree's
    absent-child marker and its mutation counters.

    Implementations:
    - AVLPolicy: height-based rotations
    - RedBlackPolicy: color-based recoloring and rotations
    """

    name: str = ""

    def __init__(self) -> None:
        self.stats = TreeStats()
        self._bound = False

    def bind(self) -> None:
        """Claim this policy for a tree. Raises ValueError if already claimed."""
        if self._bound:
            raise ValueError(
                f"{type(self).__name__} instance is already bound to a tree"
            )
        self._bound = True

    @property
    @abstractmethod
    def nil(self) -> Node | None:
        """Marker stored in every absent-child position (and the empty root)."""
        pass

    @abstractmethod
    def make_node(self, key: Any, value: Any) -> Node:
        """
        Create a fresh leaf carrying the policy's initial metadata.

        Args:
            key: The key to store.
            value: The associated value.

        Returns:
            A detached node whose children are nil.
        """
        pass

    @abstractmethod
    def after_insert(self, root: Node, path: list[Node], node: Node) -> Node:
        """
        Restore balance after a leaf was linked into the tree.

        Args:
            root: Current tree root.
            path: Ancestors of the new leaf, root first. Consumed by the hook.
            node: The new leaf.

        Returns:
            The tree root after fix-up.
        """
        pass

    @abstractmethod
    def after_delete(
        self, root: Node | None, path: list[Node], is_left: bool, removed: Node
    ) -> Node | None:
        """
        Restore balance after a node with at most one child was spliced out.

        Args:
            root: Current tree root (nil if the tree became empty).
            path: Ancestors of the spliced position, root first. Consumed.
            is_left: Whether the replacement sits in its parent's left slot.
                Meaningless when path is empty.
            removed: The detached node, with its metadata intact.

        Returns:
            The tree root after fix-up.
        """
        pass

    @abstractmethod
    def validate(self, root: Node | None) -> int:
        """
        Check the policy's structural invariants.

        Returns:
            A policy-specific measure (AVL height, Red-Black black-height).

        Raises:
            InvariantViolationError: If any invariant is broken.
        """
        pass

    def rotate_left(self, pivot: Node) -> Node:
        self.stats.rotations += 1
        return rotate_left(pivot, self.nil)

    def rotate_right(self, pivot: Node) -> Node:
        self.stats.rotations += 1
        return rotate_right(pivot, self.nil)
