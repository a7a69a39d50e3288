"""Exception hierarchy for the linked list package.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class LinkedListError(Exception):
    """Base exception for all linked list errors."""
    pass


class InvalidPositionError(LinkedListError, IndexError):
    """Raised when an insert position cannot be reached.

    The list is left unmodified whenever this is raised.
    """

    def __init__(self, position: int, size: int) -> None:
        super().__init__(f"Invalid insert position {position} for list of size {size}")
        self.position = position
        self.size = size


class ConfigError(LinkedListError):
    """Raised when a configuration file has unknown keys or bad values."""
    pass
