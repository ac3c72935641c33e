"""Echo command-line words back in upper case."""

from __future__ import annotations

import string
import sys
from collections.abc import Iterable, Sequence

FEEDBACK_NOISE = "* LOUD AND UNBEARABLE FEEDBACK NOISE *"

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def shout(words: Iterable[str]) -> str:
    """Join ``words`` with no separator and upper-case ASCII letters.

    With no words at all, return the feedback noise instead.
    """
    words = list(words)
    if not words:
        return FEEDBACK_NOISE
    return "".join(word.translate(_ASCII_UPPER) for word in words)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shouted form of the command-line arguments."""
    if argv is None:
        argv = sys.argv[1:]
    print(shout(argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())