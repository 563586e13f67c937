"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from collections.abc import Iterator
from typing import Any

from ordmap.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-value containers.

    Provides O(log N) operations for insert, search, and delete.
    Inherits range iteration capabilities from RangeIterable.

    Keys must be unique and totally ordered by < and >.
    """

    @abstractmethod
    def insert(self, key: Any, value: Any = None) -> bool:
        """
        Insert a key-value pair unless the key already exists.

        Args:
            key: The key to insert.
            value: The value to associate with the key.

        Returns:
            True if inserted, False if the key existed (the old value is kept).

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def upsert(self, key: Any, value: Any) -> bool:
        """
        Insert a key-value pair, replacing the value of an existing key.

        Returns:
            True if a new key was inserted, False if a value was replaced.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, key: Any, default: Any = None) -> Any:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.
            default: Returned when the key is absent.

        Returns:
            The value if found, default otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def minimum(self) -> tuple[Any, Any]:
        """
        Return the (key, value) pair with the smallest key.

        Raises:
            EmptyTreeError: If the container is empty.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def maximum(self) -> tuple[Any, Any]:
        """
        Return the (key, value) pair with the largest key.

        Raises:
            EmptyTreeError: If the container is empty.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def traverse(self) -> Iterator[tuple[Any, Any]]:
        """
        Return a lazy ascending sequence of all (key, value) pairs.

        Time complexity: O(N) total, O(log N) auxiliary space
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0
