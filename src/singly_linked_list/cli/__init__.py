"""Command line front end for the linked list."""

from .main import build_parser, main
from .menu import MenuSession, TokenReader, format_list

__all__ = ["build_parser", "main", "MenuSession", "TokenReader", "format_list"]
