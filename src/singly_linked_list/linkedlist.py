"""
A singly linked list of integers.

The list only holds a reference to its first node. Length and tail are
recomputed by traversal, so:

Time Complexity:
insert_first / delete_first: O(1)
insert_last / delete_last / size: O(n)
insert_middle / delete_middle: O(pos)
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from .core.errors import InvalidPositionError
from .core.types import Position, Value

logger = logging.getLogger(__name__)


class Node:
    """
    A node is a container which contains an integer value
    and the next node it is linked to.
    """

    __slots__ = ("data", "next")

    def __init__(self, data: Value, next: Optional[Node] = None) -> None:
        self.data: Value = data
        self.next: Optional[Node] = next

    def __repr__(self) -> str:
        return f"[Node] {self.data}"


class LinkedList:
    """
    LinkedList owns the first node of a chain of Nodes.

    Each node is owned by exactly one predecessor (the list owns the head),
    and positions are 1-based: position 1 is the current first element.
    """

    def __init__(self, values: Optional[Iterable[Value]] = None) -> None:
        self.head: Optional[Node] = None
        if values is not None:
            tail: Optional[Node] = None
            for value in values:
                node = Node(value)
                if tail is None:
                    self.head = node
                else:
                    tail.next = node
                tail = node

    def __repr__(self) -> str:
        if self.head is None:
            return ""
        return "[Head] " + " -> ".join(str(v) for v in self.traverse()) + " [Tail]"

    def __iter__(self) -> Iterator[Value]:
        return self.traverse()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def is_empty(self) -> bool:
        return self.head is None

    def traverse(self) -> Iterator[Value]:
        """Yields every value from head to tail without modifying the list."""
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def size(self) -> int:
        """Returns the number of elements in the linked list"""
        count = 0
        for _ in self.traverse():
            count += 1
        return count

    def insert_first(self, value: Value) -> None:
        """
        Inserts a new element at the head of the linked list.
        O(1) since no scanning is involved.
        """
        self.head = Node(value, self.head)
        logger.debug("insert_first %d", value)

    def insert_last(self, value: Value) -> None:
        """
        Appends a new element after the current tail.
        O(n) since the tail has to be found first.
        """
        new_node = Node(value)
        if self.head is None:
            self.head = new_node
        else:
            current = self.head
            while current.next is not None:
                current = current.next
            current.next = new_node
        logger.debug("insert_last %d", value)

    def insert_middle(self, value: Value, pos: Position) -> None:
        """
        Inserts a new element so that it ends up at position pos.

        pos == size() + 1 appends after the tail. Any position that cannot
        be reached raises InvalidPositionError and leaves the list as is.
        """
        if pos < 1:
            logger.info("insert_middle rejected position %d", pos)
            raise InvalidPositionError(pos, self.size())

        if pos == 1:
            self.insert_first(value)
            return

        # Walk to the future predecessor at pos - 1
        prior = self.head
        for _ in range(pos - 2):
            if prior is None:
                break
            prior = prior.next

        if prior is None:
            logger.info("insert_middle rejected position %d", pos)
            raise InvalidPositionError(pos, self.size())

        prior.next = Node(value, prior.next)
        logger.debug("insert_middle %d at %d", value, pos)

    def delete_first(self) -> bool:
        """
        Removes the head. Returns False if the list was already empty.
        """
        if self.head is None:
            return False

        removed = self.head
        self.head = removed.next
        removed.next = None
        logger.debug("delete_first %d", removed.data)
        return True

    def delete_last(self) -> bool:
        """
        Removes the tail. Returns False if the list was already empty.
        O(n) since the second-to-last node has to be found.
        """
        if self.head is None:
            return False

        if self.head.next is None:
            logger.debug("delete_last %d", self.head.data)
            self.head = None
            return True

        prior = self.head
        while prior.next is not None and prior.next.next is not None:
            prior = prior.next

        removed = prior.next
        prior.next = None
        logger.debug("delete_last %d", removed.data)
        return True

    def delete_middle(self, pos: Position) -> bool:
        """
        Removes the element at position pos.

        Positions below 1 or past the tail are silently ignored and
        False is returned.
        """
        if self.head is None or pos <= 0:
            return False

        if pos == 1:
            return self.delete_first()

        prior: Optional[Node] = None
        current: Optional[Node] = self.head
        for _ in range(pos - 1):
            if current is None:
                break
            prior = current
            current = current.next

        if current is None or prior is None:
            logger.debug("delete_middle ignored position %d", pos)
            return False

        prior.next = current.next
        current.next = None
        logger.debug("delete_middle %d at %d", current.data, pos)
        return True

    def clear(self) -> None:
        """
        Releases every node. Links are cut one at a time so a long
        chain is never torn down recursively.
        """
        current = self.head
        self.head = None
        while current is not None:
            next = current.next
            current.next = None
            current = next
