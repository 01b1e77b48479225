# payroll

A small interactive console program that keeps a list of employees and
works out their monthly pay. The prompts and messages are in Indonesian.

## Installing

```
pip install .
```

## Running

```
payroll
```

`python -m payroll.cli` starts the same menu. The menu offers these options:

1. **Input Data Pegawai**: register an employee. You enter the NIP (digits
   only, at most 8), name, address, phone number (digits only, at most 14),
   position and grade (`D1`, `D2` or `D3`, in any letter case). The base
   salary for the grade is shown afterwards.
2. **Input Lembur**: record overtime for an employee who is already
   registered, looked up by NIP. You confirm or change the grade and enter
   0 to 48 overtime hours. The base salary and total pay for the month are
   shown afterwards.
3. **Daftar Pegawai**: list every registered employee with position, grade,
   base salary, overtime hours and total pay.
0. **Keluar**: quit.

Invalid answers are reported and asked for again. Every answer uses whole
lines: for the NIP, phone number, grade and hours, only the first word on
the line counts. Before each screen the program runs the `clear` command,
where it is available. The session also ends when the input ends or on
Ctrl-C.

## Pay rules

| Grade | Base salary  | Overtime per hour |
|-------|--------------|-------------------|
| D1    | Rp2.500.000  | Rp10.000          |
| D2    | Rp2.000.000  | Rp5.000           |
| D3    | Rp1.500.000  | Rp2.500           |

Total pay is the base salary plus the overtime hours times the hourly rate
for the grade. Amounts are shown with a dot as the thousands separator.

## Using it as a library

```python
from payroll.employee import Employee, EmployeeRegistry
from payroll.utils import format_currency

registry = EmployeeRegistry()
registry.add(Employee("12345678", "Budi", "Jl. Contoh 1", "0000", "Staf", "d2"))
employee = registry.record_overtime("12345678", "D2", 10)
print(format_currency(employee.total_salary))  # 2.050.000
```

- `payroll.employee` holds `Grade`, `Employee`, `EmployeeRegistry` (with
  `add`, `find`, `record_overtime`, `is_full`, `len()` and iteration), the
  salary helpers `is_valid_grade`, `base_salary`, `overtime_rate` and
  `calculate_total_salary`, and the screens `input_employee`,
  `input_overtime` and `list_employees`. `add` raises `RegistryFullError`
  when the registry is full, `find` and `record_overtime` raise
  `EmployeeNotFoundError` for an unknown NIP, and `record_overtime` raises
  `ValueError` for an invalid grade or hours outside 0 to 48.
- `payroll.utils` holds `is_number`, `format_currency` and
  `get_valid_choice`.
- `payroll.cli.run(registry, reader, writer)` runs the menu loop against any
  text streams, which is handy for scripting and tests.

## What it does not do

- It keeps at most 10 employees per registry by default (set another
  `capacity` on `EmployeeRegistry` when using it as a library).
- Nothing is saved to disk: the employee list is gone when the program ends.
- Employees cannot be edited apart from grade and overtime, and cannot be
  removed.

## Tests

```
pip install ".[test]"
pytest
```