"""
Red-Black balance policy.

Optimized for write-heavy workloads: fewer rotations than AVL per mutation.

Properties maintained:
1. Every node is either red or black
2. Root is always black
3. Absent children are black (the shared nil sentinel)
4. Red nodes cannot have red children
5. Every path from a node to a descendant leaf has the same number of black nodes
"""

import logging
from typing import Any

from ordmap.engine.rotations import replace_child
from ordmap.interfaces.balance_policy import BalancePolicy
from ordmap.models.exceptions import InvariantViolationError
from ordmap.models.node import Color, RBNode, make_sentinel

logger = logging.getLogger(__name__)


class RedBlackPolicy(BalancePolicy):
    """
    Color-based rebalancing with a per-tree black sentinel for absent children.

    Parents and grandparents come from the ancestor path recorded by the
    skeleton, so nodes carry no parent links.
    """

    name = "red_black"

    def __init__(self) -> None:
        super().__init__()
        self._nil = make_sentinel()

    @property
    def nil(self) -> RBNode:
        return self._nil

    def make_node(self, key: Any, value: Any) -> RBNode:
        return RBNode(key=key, value=value, left=self._nil, right=self._nil)

    def after_insert(self, root: RBNode, path: list[RBNode], node: RBNode) -> RBNode:
        """Fix Red-Black Tree properties after insert."""
        while path and path[-1].color == Color.RED:
            parent = path.pop()
            # A red parent is never the root, so the grandparent exists
            grandparent = path.pop()
            great = path[-1] if path else None

            if parent is grandparent.left:
                uncle = grandparent.right

                if uncle.color == Color.RED:
                    # Case 1: Uncle is red
                    logger.debug(f"RB insert recolor at {grandparent.key!r}")
                    self._paint(parent, Color.BLACK)
                    self._paint(uncle, Color.BLACK)
                    self._paint(grandparent, Color.RED)
                    node = grandparent
                    continue

                self.stats.rebalances += 1
                if node is parent.right:
                    # Case 2: Node is right child
                    logger.debug(f"RB insert left-right rotation at {grandparent.key!r}")
                    grandparent.left = self.rotate_left(parent)
                    node, parent = parent, node
                else:
                    logger.debug(f"RB insert left-left rotation at {grandparent.key!r}")

                # Case 3: Node is left child
                self._paint(parent, Color.BLACK)
                self._paint(grandparent, Color.RED)
                root = replace_child(
                    root, great, grandparent, self.rotate_right(grandparent)
                )
                break
            else:
                uncle = grandparent.left

                if uncle.color == Color.RED:
                    logger.debug(f"RB insert recolor at {grandparent.key!r}")
                    self._paint(parent, Color.BLACK)
                    self._paint(uncle, Color.BLACK)
                    self._paint(grandparent, Color.RED)
                    node = grandparent
                    continue

                self.stats.rebalances += 1
                if node is parent.left:
                    logger.debug(f"RB insert right-left rotation at {grandparent.key!r}")
                    grandparent.right = self.rotate_right(parent)
                    node, parent = parent, node
                else:
                    logger.debug(f"RB insert right-right rotation at {grandparent.key!r}")

                self._paint(parent, Color.BLACK)
                self._paint(grandparent, Color.RED)
                root = replace_child(
                    root, great, grandparent, self.rotate_left(grandparent)
                )
                break

        root.color = Color.BLACK
        return root

    def after_delete(
        self,
        root: RBNode,
        path: list[RBNode],
        is_left: bool,
        removed: RBNode,
    ) -> RBNode:
        """Fix Red-Black Tree properties after delete (double-black resolution)."""
        if removed.color == Color.RED:
            return root

        # The replacement carries the black deficit; it may be the sentinel
        if path:
            node = path[-1].left if is_left else path[-1].right
        else:
            node = root

        while path and node.color == Color.BLACK:
            parent = path[-1]
            grandparent = path[-2] if len(path) > 1 else None

            if is_left:
                sibling = parent.right

                if sibling.color == Color.RED:
                    # Red sibling: rotate so the deficit gets a black sibling
                    logger.debug(f"RB delete red-sibling rotation at {parent.key!r}")
                    self._paint(sibling, Color.BLACK)
                    self._paint(parent, Color.RED)
                    root = replace_child(root, grandparent, parent, self.rotate_left(parent))
                    path.insert(-1, sibling)
                    grandparent = sibling
                    sibling = parent.right

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    # Black sibling with black children: push deficit upward
                    self._paint(sibling, Color.RED)
                    node = path.pop()
                    is_left = bool(path) and path[-1].left is node
                    continue

                self.stats.rebalances += 1
                if sibling.right.color == Color.BLACK:
                    # Near child red, far child black: turn it into the far case
                    logger.debug(f"RB delete near-child rotation at {sibling.key!r}")
                    self._paint(sibling.left, Color.BLACK)
                    self._paint(sibling, Color.RED)
                    parent.right = self.rotate_right(sibling)
                    sibling = parent.right

                # Far child red: terminal rotation
                logger.debug(f"RB delete far-child rotation at {parent.key!r}")
                self._paint(sibling, parent.color)
                self._paint(parent, Color.BLACK)
                self._paint(sibling.right, Color.BLACK)
                root = replace_child(root, grandparent, parent, self.rotate_left(parent))
                node = root
                break
            else:
                sibling = parent.left

                if sibling.color == Color.RED:
                    logger.debug(f"RB delete red-sibling rotation at {parent.key!r}")
                    self._paint(sibling, Color.BLACK)
                    self._paint(parent, Color.RED)
                    root = replace_child(root, grandparent, parent, self.rotate_right(parent))
                    path.insert(-1, sibling)
                    grandparent = sibling
                    sibling = parent.left

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    self._paint(sibling, Color.RED)
                    node = path.pop()
                    is_left = bool(path) and path[-1].left is node
                    continue

                self.stats.rebalances += 1
                if sibling.left.color == Color.BLACK:
                    logger.debug(f"RB delete near-child rotation at {sibling.key!r}")
                    self._paint(sibling.right, Color.BLACK)
                    self._paint(sibling, Color.RED)
                    parent.left = self.rotate_left(sibling)
                    sibling = parent.left

                logger.debug(f"RB delete far-child rotation at {parent.key!r}")
                self._paint(sibling, parent.color)
                self._paint(parent, Color.BLACK)
                self._paint(sibling.left, Color.BLACK)
                root = replace_child(root, grandparent, parent, self.rotate_right(parent))
                node = root
                break

        node.color = Color.BLACK
        return root

    def validate(self, root: RBNode) -> int:
        """Check all five Red-Black properties. Returns the root's black-height."""
        nil = self._nil
        if nil.color != Color.BLACK:
            raise InvariantViolationError("rb-nil-black", None, "sentinel is red")
        if root is nil:
            return 0
        if root.color != Color.BLACK:
            raise InvariantViolationError("rb-root-black", root.key)

        # Post-order: black-height of each node from its children
        black_heights: dict[int, int] = {}
        stack: list[tuple[RBNode, bool]] = [(root, False)]
        while stack:
            node, children_done = stack.pop()
            if not children_done:
                if node.color not in (Color.RED, Color.BLACK):
                    raise InvariantViolationError(
                        "rb-color", node.key, f"unknown color {node.color!r}"
                    )
                stack.append((node, True))
                for child in (node.left, node.right):
                    if child is not nil:
                        if node.color == Color.RED and child.color == Color.RED:
                            raise InvariantViolationError(
                                "rb-red-child", node.key, f"red child {child.key!r}"
                            )
                        stack.append((child, False))
                continue

            left = self._black_height_below(node.left, black_heights)
            right = self._black_height_below(node.right, black_heights)
            if left != right:
                raise InvariantViolationError(
                    "rb-black-height", node.key, f"left {left}, right {right}"
                )
            black_heights[id(node)] = left

        return black_heights[id(root)]

    def _black_height_below(self, child: RBNode, black_heights: dict[int, int]) -> int:
        if child is self._nil:
            return 0
        return black_heights[id(child)] + (1 if child.color == Color.BLACK else 0)

    def _paint(self, node: RBNode, color: Color) -> None:
        if node.color != color:
            node.color = color
            self.stats.recolors += 1
