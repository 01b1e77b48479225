"""Interactive menu for the employee payroll application."""

from __future__ import annotations

import re
import subprocess
import sys
from typing import Optional, Sequence, TextIO

from payroll.employee import (
    EmployeeRegistry,
    input_employee,
    input_overtime,
    list_employees,
)

MENU_PROMPT = "\nPilih opsi: "
MIN_CHOICE = 0
MAX_CHOICE = 3

_RULE = "=" * 48
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

MENU = (
    f"\n{_RULE}\n"
    "              Aplikasi Pegawai - Tim 1         \n"
    f"{_RULE}\n"
    "1. Input Data Pegawai\n"
    "2. Input Lembur\n"
    "3. Daftar Pegawai\n"
    "0. Keluar\n"
)

FAREWELL = (
    "\n🙏Terima kasih telah menggunakan Program Aplikasi Pegawai - Tim 1\n"
    "Keluar dari program...\n\n"
)


def clear_input_buffer(reader: TextIO) -> str:
    """Discard the rest of the current input line and return what was dropped."""
    return reader.readline()


def get_valid_menu_choice(reader: TextIO, writer: TextIO) -> int:
    """Prompt until a line starting with an integer from 0 to 3 is read.

    Text after the leading integer is ignored. Raises EOFError when the
    input ends first.
    """
    while True:
        writer.write(MENU_PROMPT)
        line = reader.readline()
        if not line:
            raise EOFError("input ended before a menu choice was given")
        match = _LEADING_INT.match(line)
        if match is None:
            writer.write("⛔️ERROR: Input tidak valid, harap masukkan angka.\n")
            continue
        choice = int(match.group(1))
        if MIN_CHOICE <= choice <= MAX_CHOICE:
            return choice
        writer.write(
            "⛔️ERROR: Pilihan tidak valid, silahkan masukkan angka antara 0 dan 3.\n"
        )


def clear_screen() -> None:
    """Clear the terminal by running the ``clear`` command, if available."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def run(registry: EmployeeRegistry, reader: TextIO, writer: TextIO) -> None:
    """Show the main menu and dispatch choices until the user picks 0.

    The data-entry screens consume whole input lines, so nothing is left
    over on the current line after them.
    """
    actions = {
        1: lambda: input_employee(registry, reader, writer),
        2: lambda: input_overtime(registry, reader, writer),
        3: lambda: list_employees(registry, writer),
    }
    while True:
        writer.write(MENU)
        choice = get_valid_menu_choice(reader, writer)
        if choice == 0:
            writer.write(FAREWELL)
            return
        writer.flush()
        clear_screen()
        actions[choice]()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the payroll menu on standard input and output."""
    registry = EmployeeRegistry()
    try:
        run(registry, sys.stdin, sys.stdout)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())