"""Configuration for the menu driver.

Defines the tunable parameters of the interactive menu and loads them
from TOML.
"""

from __future__ import annotations

import logging
import tomllib  # Python 3.11+
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigError


@dataclass
class MenuConfig:
    """Configuration parameters for the menu driver.

    Attributes:
        separator_char: Character repeated to draw the print separator
        separator_width: Number of separator characters per line
        title: Banner text shown above the menu
        log_level: Name of the logging level used by the CLI
    """

    separator_char: str = "-"
    separator_width: int = 41
    title: str = "Linked List Manager"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.separator_char, str) or len(self.separator_char) != 1:
            raise ConfigError(f"separator_char must be a single character, got {self.separator_char!r}")
        if isinstance(self.separator_width, bool) or not isinstance(self.separator_width, int):
            raise ConfigError(f"separator_width must be an integer, got {self.separator_width!r}")
        if self.separator_width < 0:
            raise ConfigError(f"separator_width must be >= 0, got {self.separator_width}")
        if not isinstance(self.title, str):
            raise ConfigError(f"title must be a string, got {self.title!r}")
        level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        self.log_level = level

    @property
    def separator(self) -> str:
        return self.separator_char * self.separator_width

    def with_overrides(self, **overrides: Any) -> "MenuConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "MenuConfig":
        if "menu" in d:
            extra = sorted(k for k in d if k != "menu")
            if extra:
                raise ConfigError(f"Keys outside [menu]: {', '.join(extra)}")
            data = d["menu"]
        else:
            data = d
        if not isinstance(data, dict):
            raise ConfigError("[menu] must be a table")
        known = {f.name for f in fields(MenuConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return MenuConfig(**data)


def load_config(path: Path) -> MenuConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
        data = tomllib.loads(raw)
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    return MenuConfig.from_dict(data)
