"""Employee records, salary rules and the interactive data-entry screens."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO, Union

from payroll.utils import format_currency, is_number

MAX_EMPLOYEES = 10
MAX_NIP_LENGTH = 8
MAX_PHONE_LENGTH = 14
MAX_OVERTIME_HOURS = 48

_RULE = "=" * 48


class Grade(str, enum.Enum):
    """Employee pay grade."""

    D1 = "D1"
    D2 = "D2"
    D3 = "D3"


_BASE_SALARIES = {Grade.D1: 2500000, Grade.D2: 2000000, Grade.D3: 1500000}
_OVERTIME_RATES = {Grade.D1: 10000, Grade.D2: 5000, Grade.D3: 2500}

GradeLike = Union[Grade, str]


def _parse_grade(value: object) -> Optional[Grade]:
    if isinstance(value, Grade):
        return value
    if isinstance(value, str):
        try:
            return Grade(value.upper())
        except ValueError:
            return None
    return None


def is_valid_grade(grade: GradeLike) -> bool:
    """Return True when ``grade`` names D1, D2 or D3, in any letter case."""
    return _parse_grade(grade) is not None


def base_salary(grade: GradeLike) -> int:
    """Return the monthly base salary for ``grade``, or 0 if it is unknown."""
    parsed = _parse_grade(grade)
    return _BASE_SALARIES[parsed] if parsed else 0


def overtime_rate(grade: GradeLike) -> int:
    """Return the pay per overtime hour for ``grade``, or 0 if it is unknown."""
    parsed = _parse_grade(grade)
    return _OVERTIME_RATES[parsed] if parsed else 0


@dataclass
class Employee:
    """One employee's personal and salary data."""

    nip: str
    name: str
    address: str
    phone: str
    position: str
    grade: Grade
    base_salary: Optional[int] = None
    overtime_hours: int = 0
    total_salary: Optional[int] = None

    def __post_init__(self) -> None:
        grade = _parse_grade(self.grade)
        if grade is None:
            raise ValueError(f"invalid grade: {self.grade!r}")
        self.grade = grade
        if self.base_salary is None:
            self.base_salary = base_salary(grade)
        if self.total_salary is None:
            self.total_salary = self.base_salary


def calculate_total_salary(employee: Employee, overtime_hours: int) -> int:
    """Return the base salary plus overtime pay at the employee's grade rate."""
    return employee.base_salary + overtime_hours * overtime_rate(employee.grade)


def display_error(message: str, writer: TextIO) -> None:
    """Write ``message`` as an error line."""
    writer.write(f"⛔️ERROR: {message}\n")


class RegistryFullError(Exception):
    """Raised when an employee is added to a full registry."""


class EmployeeNotFoundError(LookupError):
    """Raised when no employee has the requested NIP."""


class EmployeeRegistry:
    """A bounded, ordered collection of employees."""

    def __init__(self, capacity: int = MAX_EMPLOYEES) -> None:
        self.capacity = capacity
        self._employees: list[Employee] = []

    def add(self, employee: Employee) -> None:
        """Append ``employee``; raise RegistryFullError when at capacity."""
        if self.is_full():
            raise RegistryFullError(
                f"registry already holds {self.capacity} employees"
            )
        self._employees.append(employee)

    def find(self, nip: str) -> Employee:
        """Return the first employee with ``nip``."""
        for employee in self._employees:
            if employee.nip == nip:
                return employee
        raise EmployeeNotFoundError(nip)

    def record_overtime(
        self, nip: str, grade: GradeLike, overtime_hours: int
    ) -> Employee:
        """Set grade and overtime for an employee and recompute the salary."""
        employee = self.find(nip)
        parsed = _parse_grade(grade)
        if parsed is None:
            raise ValueError(f"invalid grade: {grade!r}")
        if not 0 <= overtime_hours <= MAX_OVERTIME_HOURS:
            raise ValueError(
                f"overtime hours must be between 0 and {MAX_OVERTIME_HOURS}"
            )
        employee.grade = parsed
        employee.base_salary = base_salary(parsed)
        employee.overtime_hours = overtime_hours
        employee.total_salary = calculate_total_salary(employee, overtime_hours)
        return employee

    def is_full(self) -> bool:
        """Return True when no further employee can be added."""
        return len(self._employees) >= self.capacity

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)


def _next_nonblank_line(reader: TextIO) -> str:
    while True:
        line = reader.readline()
        if not line:
            raise EOFError("input ended unexpectedly")
        if line.strip():
            return line.rstrip("\r\n")


def _read_token(reader: TextIO) -> str:
    """Return the first word of the next non-blank line."""
    return _next_nonblank_line(reader).split()[0]


def _read_text(reader: TextIO) -> str:
    """Return the next non-blank line without its leading whitespace."""
    return _next_nonblank_line(reader).lstrip()


def _banner(title: str) -> str:
    return f"\n{_RULE}\n{title}\n{_RULE}\n"


def _prompt_grade(reader: TextIO, writer: TextIO) -> Grade:
    while True:
        writer.write("Golongan (D1/D2/D3): ")
        grade = _parse_grade(_read_token(reader))
        if grade is not None:
            return grade
        display_error("Golongan tidak valid! Masukkan D1, D2, atau D3.\n", writer)


def input_employee(
    registry: EmployeeRegistry, reader: TextIO, writer: TextIO
) -> Optional[Employee]:
    """Read a new employee from ``reader`` and add it to ``registry``.

    Each answer consumes whole lines of input. Returns the new employee,
    or None when the registry is already full.
    """
    if registry.is_full():
        display_error("Tidak dapat menambah pegawai, batas sudah tercapai.\n", writer)
        return None

    writer.write(_banner("         Silakan Masukkan Data Pegawai 👤   "))

    while True:
        writer.write("\nID Pegawai (NIP): ")
        nip = _read_token(reader)
        if is_number(nip) and len(nip) <= MAX_NIP_LENGTH:
            break
        display_error("NIP hanya boleh berisi angka dan maksimal 8 karakter.", writer)

    writer.write("Nama: ")
    name = _read_text(reader)
    writer.write("Alamat: ")
    address = _read_text(reader)

    while True:
        writer.write("Nomor Telepon: ")
        phone = _read_token(reader)
        if is_number(phone) and len(phone) <= MAX_PHONE_LENGTH:
            break
        display_error(
            "Nomor telepon hanya boleh berisi angka dan maksimal 14 karakter.\n",
            writer,
        )

    writer.write("Jabatan: ")
    position = _read_text(reader)
    grade = _prompt_grade(reader, writer)

    employee = Employee(nip, name, address, phone, position, grade)
    writer.write(f"\nGaji Pokok: Rp{format_currency(employee.base_salary)}\n")
    registry.add(employee)
    return employee


def input_overtime(
    registry: EmployeeRegistry, reader: TextIO, writer: TextIO
) -> Optional[Employee]:
    """Read overtime data for an existing employee and update the salary.

    Each answer consumes whole lines of input. Returns the updated employee,
    or None when no employee has the NIP given.
    """
    writer.write(_banner("          Silakan Masukkan Data Lembur       "))

    while True:
        writer.write("\nID Pegawai (NIP): ")
        nip = _read_token(reader)
        if is_number(nip):
            break
        display_error("NIP hanya boleh berisi angka.", writer)

    try:
        registry.find(nip)
    except EmployeeNotFoundError:
        writer.write("\nNama: ⛔️ERROR: (Data pegawai tidak ditemukan)\n")
        return None

    grade = _prompt_grade(reader, writer)

    while True:
        writer.write("Jumlah Jam Lembur: ")
        text = _read_token(reader)
        if not is_number(text):
            display_error("Input jam lembur harus berupa angka.\n", writer)
            continue
        hours = int(text)
        if hours > MAX_OVERTIME_HOURS:
            display_error("Jumlah jam lembur harus antara 0 - 48 jam.\n", writer)
            continue
        break

    employee = registry.record_overtime(nip, grade, hours)

    writer.write(f"\nNIP: {employee.nip}\n")
    writer.write(f"Nama: {employee.name}\n")
    writer.write(f"Golongan: {employee.grade.value}\n")
    writer.write(f"Lembur: {hours} jam\n")
    writer.write(f"Gaji Pokok: Rp{format_currency(employee.base_salary)}\n")
    writer.write(
        f"Total Gaji Bulan Ini: Rp{format_currency(employee.total_salary)}\n"
    )
    return employee


def list_employees(registry: EmployeeRegistry, writer: TextIO) -> None:
    """Write every employee in ``registry`` with salary details."""
    writer.write(_banner("            Daftar Pegawai                     "))

    if not len(registry):
        writer.write("\n⛔️ERROR: Tidak ada pegawai yang ditemukan.\n")
        return

    for number, employee in enumerate(registry, start=1):
        total = employee.total_salary or employee.base_salary
        writer.write(f"\nPegawai {number}\n")
        writer.write(f"NIP: {employee.nip}\n")
        writer.write(f"Nama: {employee.name}\n")
        writer.write(f"Jabatan: {employee.position}\n")
        writer.write(f"Golongan: {employee.grade.value}\n")
        writer.write(f"Gaji Pokok: Rp{format_currency(employee.base_salary)}\n")
        writer.write(f"Jam Lembur: {employee.overtime_hours} jam\n")
        writer.write(f"Total Gaji: Rp{format_currency(total)}\n")