"""
Custom exceptions for the ordered map.
"""

from typing import Any


class KeyNotFoundError(KeyError):
    """
    Raised by pop() when the key is absent and no default was given.

    search() and delete() report absence through their return value instead.
    """

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found: {self.key!r}"


class EmptyTreeError(LookupError):
    """
    Raised when an operation needs at least one entry but the tree is empty.

    Callers can avoid it by checking is_empty() first.
    """

    def __init__(self, operation: str):
        """
        Initialize empty tree error.

        Args:
            operation: Name of the operation that was attempted.
        """
        self.operation = operation
        super().__init__(f"{operation}() called on an empty tree")


class RotationError(RuntimeError):
    """
    Raised when a rotation is requested on a pivot lacking the rotated-into child.

    This is a programming error in the calling policy: case analysis must have
    established the child's presence before rotating. It is never caught.
    """

    def __init__(self, direction: str, pivot_key: Any):
        self.direction = direction
        self.pivot_key = pivot_key
        child = "right" if direction == "left" else "left"
        super().__init__(
            f"Cannot rotate {direction} at key {pivot_key!r}: no {child} child"
        )


class InvariantViolationError(AssertionError):
    """
    Raised by validate() when the tree structure breaks an invariant.
    """

    def __init__(self, invariant: str, key: Any, detail: str = ""):
        """
        Initialize invariant violation error.

        Args:
            invariant: Short name of the broken invariant (e.g. "bst-order").
            key: Key of the node where the violation was detected.
            detail: Optional human readable explanation.
        """
        self.invariant = invariant
        self.key = key
        message = f"Invariant '{invariant}' violated at key {key!r}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
