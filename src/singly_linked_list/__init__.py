"""Singly linked list of integers with an interactive test menu."""

from .core.config import MenuConfig, load_config
from .core.errors import ConfigError, InvalidPositionError, LinkedListError
from .core.types import Position, Value
from .linkedlist import LinkedList, Node

__all__ = [
    "LinkedList",
    "Node",
    "MenuConfig",
    "load_config",
    "LinkedListError",
    "InvalidPositionError",
    "ConfigError",
    "Value",
    "Position",
]
