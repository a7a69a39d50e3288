"""Shared types, errors and configuration."""

from .config import MenuConfig, load_config
from .errors import ConfigError, InvalidPositionError, LinkedListError

__all__ = [
    "MenuConfig",
    "load_config",
    "LinkedListError",
    "InvalidPositionError",
    "ConfigError",
]
