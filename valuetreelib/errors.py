"""Exceptions raised by ValueTreeLib.

Every error is detected before the tree is touched, so a failed operation
leaves the tree exactly as it was. All exceptions derive from TreeError and
also from the closest builtin, so callers can catch either.
"""

from typing import Any


class TreeError(Exception):
    """Base class for all tree errors."""
    pass


class DuplicateValueError(TreeError, ValueError):
    """Raised when inserting a value that is already in the tree."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Value {value!r} is already in the tree")


class NotFoundError(TreeError, LookupError):
    """Raised when a value that must exist in the tree is absent."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"No node found for value {value!r}")


class SlotOccupiedError(TreeError, ValueError):
    """Raised when adding to a binary slot that already holds a subtree."""

    def __init__(self, parent: Any, side: str, occupant: Any):
        self.parent = parent
        self.side = side
        self.occupant = occupant
        super().__init__(
            f"The {side} slot of {parent!r} is already occupied by {occupant!r}"
        )


class InvalidMoveError(TreeError, ValueError):
    """Raised when a move would detach the root or create a cycle."""
    pass


class InvalidValueError(TreeError, TypeError):
    """Raised for values the identity index cannot hold (None, unhashable)."""
    pass


class CapabilityMismatchError(TreeError):
    """Raised when configuration requirements can't be met by the tree."""
    pass
