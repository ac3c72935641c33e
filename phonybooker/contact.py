"""A single phone book entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Contact:
    """Everything stored about one person."""

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    phone_number: str = ""
    darkest_secret: str = ""

    def is_empty(self) -> bool:
        """An entry without a first name counts as an unused slot."""
        return not self.first_name