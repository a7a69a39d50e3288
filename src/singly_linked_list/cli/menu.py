"""Interactive text menu driving a LinkedList.

Input is consumed as whitespace-separated tokens, so a choice and its
operands may share a line (``3 42 2``) or be spread over several.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from typing import Callable, TextIO

from ..core.config import MenuConfig
from ..core.errors import InvalidPositionError
from ..linkedlist import LinkedList

logger = logging.getLogger(__name__)

MENU_TEXT = (
    "1. Insert First\n2. Insert Last\n3. Insert Middle\n"
    "4. Delete First\n5. Delete Last\n6. Delete Middle\n"
    "7. Print Size\n8. Print List\n9. Exit\n"
)
EXIT_CHOICE = 9
INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class EndOfInput(Exception):
    """Raised when the input stream is exhausted mid-command."""
    pass


class TokenReader:
    """Reads whitespace-separated tokens lazily, one line at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next_token(self) -> str | None:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()


def parse_int(token: str) -> int | None:
    """Plain ASCII decimal with an optional sign, as `cin >> int` reads it."""
    if INT_TOKEN.fullmatch(token) is None:
        return None
    return int(token)


def format_list(linked: LinkedList, config: MenuConfig) -> str:
    """Values space-separated between two separator lines."""
    body = "".join(f"{value} " for value in linked.traverse())
    return f"{config.separator}\n{body}\n{config.separator}\n"


class MenuSession:
    """One run of the menu loop over a single list.

    The session owns the list for its whole lifetime and clears it
    when the loop ends.
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        config: MenuConfig | None = None,
        linked: LinkedList | None = None,
    ) -> None:
        self.config = config if config is not None else MenuConfig()
        self.linked = linked if linked is not None else LinkedList()
        self._reader = TokenReader(stdin)
        self._out = stdout
        self._handlers: dict[int, Callable[[], None]] = {
            1: self._insert_first,
            2: self._insert_last,
            3: self._insert_middle,
            4: self._delete_first,
            5: self._delete_last,
            6: self._delete_middle,
            7: self._print_size,
            8: self._print_list,
        }

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_operand(self) -> int | None:
        """Next integer operand; None (after reporting) if malformed."""
        token = self._reader.next_token()
        if token is None:
            raise EndOfInput()
        value = parse_int(token)
        if value is None:
            self._write(f"Invalid number: {token}\n")
            logger.info("Rejected operand %r", token)
        return value

    def _insert_first(self) -> None:
        self._write("Enter value: ")
        value = self._read_operand()
        if value is not None:
            self.linked.insert_first(value)

    def _insert_last(self) -> None:
        self._write("Enter value: ")
        value = self._read_operand()
        if value is not None:
            self.linked.insert_last(value)

    def _insert_middle(self) -> None:
        self._write("Enter value and position: ")
        value = self._read_operand()
        if value is None:
            return
        pos = self._read_operand()
        if pos is None:
            return
        try:
            self.linked.insert_middle(value, pos)
        except InvalidPositionError:
            self._write("Invalid Insert Position!\n")

    def _delete_first(self) -> None:
        self.linked.delete_first()
        self._write("Deleted first node.\n")

    def _delete_last(self) -> None:
        self.linked.delete_last()
        self._write("Deleted last node.\n")

    def _delete_middle(self) -> None:
        self._write("Enter position to delete: ")
        pos = self._read_operand()
        if pos is not None:
            self.linked.delete_middle(pos)

    def _print_size(self) -> None:
        self._write(f"Current Size: {self.linked.size()}\n")

    def _print_list(self) -> None:
        self._write(format_list(self.linked, self.config))

    def _show_menu(self) -> None:
        self._write(f"\n--- {self.config.title} ---\n{MENU_TEXT}Enter choice: ")

    def run(self) -> int:
        """Run until exit, end of input, or a non-numeric choice."""
        try:
            while True:
                self._show_menu()
                token = self._reader.next_token()
                choice = parse_int(token) if token is not None else None
                if choice is None:
                    logger.debug("Stopping on choice token %r", token)
                    break
                if choice == EXIT_CHOICE:
                    break
                handler = self._handlers.get(choice)
                if handler is None:
                    self._write("Invalid choice! Please try again.\n")
                    continue
                handler()
        except EndOfInput:
            logger.debug("Input ended while reading an operand")
        finally:
            self.linked.clear()
        return 0
