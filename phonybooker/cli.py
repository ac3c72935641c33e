"""Interactive command loop for the phone book."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from .contact import Contact
from .phonebook import PhoneBook, format_row

BANNER = (
    "************************\n"
    "* PhonyBooker V042.420 *\n"
    "************************\n"
    "\n"
)
FAREWELL = "\nThank you for using PhonyBooker V042.420! \\^o_o^/\n"

_COMMANDS = (
    ("ADD", "save a new contact"),
    ("SEARCH", "search for a contact"),
    ("EXIT", "exit PhonyBooker"),
)

_PROMPTS = (
    ("first_name", "Enter first name: "),
    ("last_name", "Enter last name: "),
    ("nickname", "Enter nickname: "),
    ("phone_number", "Enter phone number: "),
    ("darkest_secret", "Enter darkest secret: "),
)

_DETAILS = (
    ("first_name", "\nFirst name:"),
    ("last_name", "Last name:"),
    ("nickname", "Nickname:"),
    ("phone_number", "Phone number:"),
    ("darkest_secret", "Darkest secret:"),
)

_INTEGER = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


class _EndOfInput(Exception):
    """Raised when the input stream runs dry."""


class Session:
    """Reads commands from ``stdin`` and drives a phone book."""

    def __init__(
        self,
        phonebook: PhoneBook | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.phonebook = phonebook if phonebook is not None else PhoneBook()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def run(self) -> None:
        """Run the command loop until EXIT or end of input."""
        self._write(BANNER)
        self._print_hint()
        exited = False
        try:
            while True:
                command = self._ask("Enter command > ")
                if command == "EXIT":
                    exited = True
                    break
                if command == "ADD":
                    self._add()
                elif command == "SEARCH":
                    self._search()
                else:
                    self._write("\nERROR: command not found\n\n")
                    self._print_hint()
        except _EndOfInput:
            pass
        if not exited:
            self._write("\n")
        self._write(FAREWELL)
        self.stdout.flush()

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line[:-1] if line.endswith("\n") else line

    def _print_hint(self) -> None:
        self._write("Recognized commands:\n------------------\n")
        for name, description in _COMMANDS:
            self._write(f"{name:>10} -> {description}\n")
        self._write("\n")

    def _ask_non_empty(self, prompt: str) -> str:
        while True:
            answer = self._ask(prompt)
            if answer:
                return answer
            self._write("ERROR: field must be non empty\n")

    def _add(self) -> None:
        self._write("\n")
        values = {field: self._ask_non_empty(prompt) for field, prompt in _PROMPTS}
        self.phonebook.add(Contact(**values))
        self._write("\n")

    def _search(self) -> None:
        count = 0
        for index, contact in enumerate(self.phonebook):
            self._write(format_row(index, contact) + "\n")
            count += 1
        if count == 0:
            self._write("\nPhonebook is empty\n\n")
            return
        contact = self.phonebook[self._ask_index(count)]
        for field, label in _DETAILS:
            self._write(f"{label:>20}{getattr(contact, field)}\n")
        self._write("\n")

    def _ask_index(self, count: int) -> int:
        while True:
            answer = self._ask("\nEnter index > ")
            match = _INTEGER.match(answer)
            value = int(match.group(1)) if match else None
            if value is None or not _INT_MIN <= value <= _INT_MAX:
                self._write("\nERROR: bad input\n")
                continue
            if not 0 <= value < count:
                self._write("\nERROR: index is out of range\n")
                continue
            return value


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive phone book session on the standard streams."""
    Session().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())