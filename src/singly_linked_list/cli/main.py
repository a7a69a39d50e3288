# Minimal CLI using argparse that runs the linked list menu on stdin/stdout.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from singly_linked_list.core.config import MenuConfig, load_config
from singly_linked_list.core.errors import ConfigError
from singly_linked_list.cli.menu import MenuSession


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sll-menu", description="Interactive singly linked list manager"
    )
    p.add_argument("--config", type=Path, help="TOML file with menu settings")
    p.add_argument(
        "--log-level",
        type=str,
        help="Logging level written to stderr (default: WARNING)",
    )
    p.add_argument(
        "--separator-width",
        type=int,
        help="Width of the separator line around printed lists",
    )
    return p


def setup_logging(level: str) -> None:
    """Send log records to stderr so the menu output stays clean."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else MenuConfig()
        config = config.with_overrides(
            log_level=args.log_level, separator_width=args.separator_width
        )
    except (OSError, ConfigError) as e:
        print(f"Error loading config: {e}")
        return 2

    setup_logging(config.log_level)
    logging.getLogger(__name__).debug("Starting menu with %s", config)

    return MenuSession(sys.stdin, sys.stdout, config).run()


if __name__ == "__main__":
    raise SystemExit(main())
