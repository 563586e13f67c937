"""
TreeValidator - full structural invariant check.
"""

import logging
from typing import Any

from ordmap.interfaces.balance_policy import BalancePolicy
from ordmap.models.exceptions import InvariantViolationError
from ordmap.models.node import Node

logger = logging.getLogger(__name__)


class TreeValidator:
    """
    Checks BST ordering and node count, then the active policy's invariants.

    Runs in O(N) time with an explicit stack; intended for tests and the
    check_invariants debug mode, not for hot paths.
    """

    def __init__(self, policy: BalancePolicy) -> None:
        self._policy = policy
        self._nil = policy.nil

    def validate(self, root: Node | None, expected_size: int) -> None:
        """
        Validate the whole tree.

        Args:
            root: Tree root.
            expected_size: Entry count the owning container believes it holds.

        Raises:
            InvariantViolationError: On the first broken invariant found.
        """
        try:
            count = self._check_order(root)
            if count != expected_size:
                raise InvariantViolationError(
                    "size", None, f"counted {count} nodes, expected {expected_size}"
                )
            self._policy.validate(root)
        except InvariantViolationError as e:
            logger.critical(f"Tree validation failed ({self._policy.name}): {e}")
            raise

    def _check_order(self, root: Node | None) -> int:
        """In-order walk asserting strictly ascending keys. Returns node count."""
        nil = self._nil
        stack: list[Node] = []
        node = root
        previous: Any = None
        count = 0

        while stack or node is not nil:
            while node is not nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            if count and not previous < node.key:
                raise InvariantViolationError(
                    "bst-order", node.key, f"follows {previous!r} in order"
                )
            previous = node.key
            count += 1
            node = node.right

        return count
