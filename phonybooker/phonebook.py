"""A fixed-size phone book that overwrites its oldest entry when full."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import astuple

from .contact import Contact

DEFAULT_CAPACITY = 8
COLUMN_WIDTH = 10


class PhoneBook:
    """Stores up to ``capacity`` contacts in a ring of slots."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots = [Contact() for _ in range(capacity)]
        self._next = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def add(self, contact: Contact) -> None:
        """Store ``contact``, replacing the oldest one once the book is full."""
        if not all(astuple(contact)):
            raise ValueError("every field of a contact must be non-empty")
        self._slots[self._next] = contact
        self._next = (self._next + 1) % len(self._slots)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Contact]:
        for contact in self._slots:
            if contact.is_empty():
                return
            yield contact

    def __getitem__(self, index: int) -> Contact:
        if not 0 <= index < len(self):
            raise IndexError("index is out of range")
        return self._slots[index]


def format_column(text: str) -> str:
    """Fit ``text`` into a column, marking truncation with a dot."""
    if len(text) > COLUMN_WIDTH:
        return text[: COLUMN_WIDTH - 1] + "."
    return text


def format_row(index: int, contact: Contact) -> str:
    """Render one line of the search table."""
    cells = [
        str(index),
        format_column(contact.first_name),
        format_column(contact.last_name),
        format_column(contact.nickname),
    ]
    return "|".join(f"{cell:>{COLUMN_WIDTH}}" for cell in cells)