"""Input validation and currency formatting helpers."""

from __future__ import annotations

from typing import TextIO

_DIGITS = frozenset("0123456789")

CHOICE_PROMPT = "\nPilih opsi: "
INVALID_CHOICE_MESSAGE = (
    "⛔️ERROR: Pilihan tidak valid, Harap masukkan nomor yang valid\n"
)


def is_number(text: str) -> bool:
    """Return True when every character of ``text`` is an ASCII digit.

    An empty string counts as a number, since it holds no non-digit.
    """
    return all(ch in _DIGITS for ch in text)


def format_currency(amount: int) -> str:
    """Format ``amount`` with a dot between every group of three digits."""
    digits = str(amount)
    length = len(digits)
    parts: list[str] = []
    for position, ch in enumerate(digits):
        if position and (length - position) % 3 == 0:
            parts.append(".")
        parts.append(ch)
    return "".join(parts)


def get_valid_choice(reader: TextIO, writer: TextIO) -> int:
    """Prompt until a line made only of digits is read and return it as an int.

    Raises EOFError when the input ends first.
    """
    while True:
        writer.write(CHOICE_PROMPT)
        line = reader.readline()
        if not line:
            raise EOFError("input ended before a valid choice was given")
        text = line.rstrip("\r\n")
        if text and is_number(text):
            return int(text)
        writer.write(INVALID_CHOICE_MESSAGE)