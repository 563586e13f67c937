"""
In-order range iterators over a binary search tree.

Both iterators walk the tree with an explicit stack of at most O(h) nodes,
so deep trees never touch the interpreter's recursion limit. Neither takes a
snapshot: the tree must not be mutated while an iterator is live.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

from ordmap.models.node import Node


class _InOrderWalk:
    """Stack-driven bounded walk shared by the sync and async iterators."""

    def __init__(
        self,
        root: Node | None,
        start: Any | None,
        end: Any | None,
        nil: Node | None = None,
        reverse: bool = False,
    ) -> None:
        self._stack: list[Node] = []
        self._start = start
        self._end = end
        self._nil = nil
        self._reverse = reverse

        if reverse:
            self._push_right_path(root)
        else:
            self._push_left_path(root)

    def _advance(self) -> tuple[Any, Any] | None:
        if not self._stack:
            return None

        node = self._stack.pop()

        if self._reverse:
            # Check start bound
            if self._start is not None and node.key < self._start:
                self._stack.clear()
                return None
            self._push_right_path(node.left)
        else:
            # Check end bound
            if self._end is not None and node.key >= self._end:
                self._stack.clear()
                return None
            self._push_left_path(node.right)

        return (node.key, node.value)

    def _push_left_path(self, node: Node | None) -> None:
        """Push leftmost path to stack, skipping keys below start."""
        while node is not self._nil:
            if self._start is not None and node.key < self._start:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left

    def _push_right_path(self, node: Node | None) -> None:
        """Push rightmost path to stack, skipping keys at or above end."""
        while node is not self._nil:
            if self._end is not None and node.key >= self._end:
                node = node.left
            else:
                self._stack.append(node)
                node = node.right


class RangeIterator(_InOrderWalk, Iterator[tuple[Any, Any]]):
    """Iterator for range queries. start is inclusive, end exclusive."""

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        result = self._advance()
        if result is None:
            raise StopIteration
        return result


class AsyncRangeIterator(_InOrderWalk, AsyncIterator[tuple[Any, Any]]):
    """Async iterator for range queries (in-memory, never suspends)."""

    def __aiter__(self) -> "AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        result = self._advance()
        if result is None:
            raise StopAsyncIteration
        return result
