"""
OrderedTree - self-balancing ordered map with a pluggable balance policy.
"""

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

from ordmap.engine.range_iterator import AsyncRangeIterator, RangeIterator
from ordmap.engine.skeleton import BSTSkeleton
from ordmap.engine.validator import TreeValidator
from ordmap.interfaces.balance_policy import BalancePolicy
from ordmap.interfaces.sorted_container import SortedContainer
from ordmap.models.exceptions import KeyNotFoundError
from ordmap.models.node import Node
from ordmap.models.stats import TreeStats
from ordmap.policies import AVLPolicy, RedBlackPolicy

logger = logging.getLogger(__name__)


class OrderedTree(SortedContainer):
    """
    Ordered key-value container backed by a balanced binary search tree.

    Provides:
    - insert(key, value): Insert unless present (duplicates are a no-op)
    - upsert(key, value): Insert or replace
    - search(key): Retrieve a value by key
    - delete(key): Remove a key
    - minimum() / maximum(): Smallest / largest entry
    - traverse() / iterator(start, end): Lazy ascending iteration

    Architecture:
    - The tree owns the root and the chosen BalancePolicy
    - BSTSkeleton performs the structural mutation
    - The policy's fix-up hook restores balance after each mutation

    Not thread-safe: callers sharing a tree must provide their own locking,
    and must not mutate the tree while iterating it.
    """

    # Policy used when none is given
    DEFAULT_POLICY = "red_black"

    POLICIES: dict[str, type[BalancePolicy]] = {
        "avl": AVLPolicy,
        "red_black": RedBlackPolicy,
        "redblack": RedBlackPolicy,
        "rb": RedBlackPolicy,
    }

    def __init__(
        self,
        policy: str | BalancePolicy | type[BalancePolicy] = DEFAULT_POLICY,
        *,
        check_invariants: bool = False,
    ) -> None:
        """
        Initialize an empty tree.

        Args:
            policy: Policy name ("avl", "red_black"), a BalancePolicy subclass,
                or a fresh BalancePolicy instance not used by another tree.
            check_invariants: Validate the whole tree after every mutation.
                O(N) per call; meant for debugging.
        """
        self._policy = self._resolve_policy(policy)
        self._policy.bind()

        self._skeleton = BSTSkeleton(self._policy)
        self._validator = TreeValidator(self._policy)
        self._check_invariants = check_invariants

        self._nil: Node | None = self._policy.nil
        self._root: Node | None = self._nil
        self._size: int = 0

        logger.debug(
            f"Created {type(self).__name__} with {self._policy.name} policy "
            f"(check_invariants={check_invariants})"
        )

    @classmethod
    def _resolve_policy(
        cls, policy: str | BalancePolicy | type[BalancePolicy]
    ) -> BalancePolicy:
        if isinstance(policy, BalancePolicy):
            return policy
        if isinstance(policy, type) and issubclass(policy, BalancePolicy):
            return policy()
        if isinstance(policy, str):
            policy_cls = cls.POLICIES.get(policy.strip().lower().replace("-", "_"))
            if policy_cls is None:
                raise ValueError(
                    f"Unknown balance policy: {policy!r}. "
                    f"Expected one of {sorted(set(cls.POLICIES))}"
                )
            return policy_cls()
        raise TypeError(
            f"policy must be a name, BalancePolicy subclass or instance, "
            f"got {type(policy).__name__}"
        )

    @property
    def policy(self) -> str:
        return self._policy.name

    @property
    def stats(self) -> TreeStats:
        return self._policy.stats

    def insert(self, key: Any, value: Any = None) -> bool:
        """Insert unless key exists. O(log N)"""
        return self._put(key, value, overwrite=False)

    def upsert(self, key: Any, value: Any) -> bool:
        """Insert or replace the value of an existing key. O(log N)"""
        return self._put(key, value, overwrite=True)

    def search(self, key: Any, default: Any = None) -> Any:
        """Retrieve value by key. O(log N)"""
        node = self._skeleton.find(self._root, key)
        return default if node is self._nil else node.value

    def has(self, key: Any) -> bool:
        return self._skeleton.find(self._root, key) is not self._nil

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        return self._remove(key) is not None

    def pop(self, key: Any, *default: Any) -> Any:
        """
        Remove key and return its value.

        Args:
            key: The key to remove.
            default: Optional value returned when key is absent.

        Raises:
            KeyNotFoundError: If key is absent and no default was given.
        """
        if len(default) > 1:
            raise TypeError(f"pop expected at most 2 arguments, got {1 + len(default)}")

        removed = self._remove(key)
        if removed is not None:
            return removed[1]
        if default:
            return default[0]
        raise KeyNotFoundError(key)

    def minimum(self) -> tuple[Any, Any]:
        node = self._skeleton.minimum(self._root)
        return (node.key, node.value)

    def maximum(self) -> tuple[Any, Any]:
        node = self._skeleton.maximum(self._root)
        return (node.key, node.value)

    def successor(self, key: Any) -> tuple[Any, Any] | None:
        """Entry with the smallest key strictly greater than key."""
        return self._entry(self._skeleton.successor(self._root, key))

    def predecessor(self, key: Any) -> tuple[Any, Any] | None:
        """Entry with the largest key strictly less than key."""
        return self._entry(self._skeleton.predecessor(self._root, key))

    def ceiling(self, key: Any) -> tuple[Any, Any] | None:
        """Entry with the smallest key >= key."""
        return self._entry(self._skeleton.ceiling(self._root, key))

    def floor(self, key: Any) -> tuple[Any, Any] | None:
        """Entry with the largest key <= key."""
        return self._entry(self._skeleton.floor(self._root, key))

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return self._skeleton.height(self._root)

    def clear(self) -> None:
        """Drop every entry. Nodes are released with the old root."""
        logger.debug(f"Clearing {self._size} entries from {self._policy.name} tree")
        self._root = self._nil
        self._size = 0

    def validate(self) -> None:
        """
        Check every structural invariant.

        Raises:
            InvariantViolationError: If the tree is corrupt.
        """
        self._validator.validate(self._root, self._size)

    def traverse(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def keys(self) -> Iterator[Any]:
        return (key for key, _ in self.iterator())

    def values(self) -> Iterator[Any]:
        return (value for _, value in self.iterator())

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return RangeIterator(self._root, start, end, self._nil)

    def reversed_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return RangeIterator(self._root, start, end, self._nil, reverse=True)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return AsyncRangeIterator(self._root, start, end, self._nil)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(policy={self._policy.name!r}, size={self._size})"

    def _put(self, key: Any, value: Any, overwrite: bool) -> bool:
        self._root, inserted = self._skeleton.insert(
            self._root, key, value, overwrite=overwrite
        )
        if inserted:
            self._size += 1
            self._after_mutation()
        return inserted

    def _remove(self, key: Any) -> tuple[Any, Any] | None:
        self._root, removed = self._skeleton.delete(self._root, key)
        if removed is not None:
            self._size -= 1
            self._after_mutation()
        return removed

    def _after_mutation(self) -> None:
        if self._check_invariants:
            self.validate()

    def _entry(self, node: Node | None) -> tuple[Any, Any] | None:
        if node is self._nil:
            return None
        return (node.key, node.value)


class AVLTree(OrderedTree):
    """
    OrderedTree using AVL balancing.

    Optimized for read-heavy workloads: height stays within 1.44 log2(N).
    """

    def __init__(self, *, check_invariants: bool = False) -> None:
        super().__init__(AVLPolicy(), check_invariants=check_invariants)


class RedBlackTree(OrderedTree):
    """
    OrderedTree using Red-Black balancing.

    Optimized for write-heavy workloads: at most two rotations per insert and
    three per delete.
    """

    def __init__(self, *, check_invariants: bool = False) -> None:
        super().__init__(RedBlackPolicy(), check_invariants=check_invariants)
