import io
from unittest import mock

import pytest

from payroll.cli import (
    FAREWELL,
    MENU,
    clear_input_buffer,
    clear_screen,
    get_valid_menu_choice,
    main,
    run,
)
from payroll.employee import (
    Employee,
    EmployeeRegistry,
    base_salary,
    calculate_total_salary,
)
from payroll.utils import format_currency


def _run(registry, text):
    reader = io.StringIO(text)
    writer = io.StringIO()
    with mock.patch("payroll.cli.subprocess.run") as fake:
        run(registry, reader, writer)
    return writer.getvalue(), fake


def test_clear_input_buffer_drops_rest_of_line():
    reader = io.StringIO("leftover\nnext\n")
    assert clear_input_buffer(reader) == "leftover\n"
    assert reader.readline() == "next\n"


def test_clear_input_buffer_at_eof():
    assert clear_input_buffer(io.StringIO("")) == ""


@pytest.mark.parametrize("line,expected", [("0\n", 0), ("1\n", 1), ("3\n", 3), (" 2xyz\n", 2)])
def test_menu_choice_accepts_valid(line, expected):
    writer = io.StringIO()
    assert get_valid_menu_choice(io.StringIO(line), writer) == expected
    assert "ERROR" not in writer.getvalue()


def test_menu_choice_out_of_range_retries():
    writer = io.StringIO()
    assert get_valid_menu_choice(io.StringIO("5\n-1\n1\n"), writer) == 1
    assert writer.getvalue().count("antara 0 dan 3") == 2


def test_menu_choice_not_a_number_retries():
    writer = io.StringIO()
    assert get_valid_menu_choice(io.StringIO("abc\n0\n"), writer) == 0
    assert "Input tidak valid, harap masukkan angka." in writer.getvalue()


def test_menu_choice_eof_raises():
    with pytest.raises(EOFError):
        get_valid_menu_choice(io.StringIO(""), io.StringIO())


def test_clear_screen_runs_clear():
    with mock.patch("payroll.cli.subprocess.run") as fake:
        result = clear_screen()
    assert result is None
    assert fake.call_count == 1
    assert fake.call_args.args[0] == ["clear"]


def test_clear_screen_ignores_missing_command():
    with mock.patch("payroll.cli.subprocess.run", side_effect=FileNotFoundError) as fake:
        assert clear_screen() is None
    assert fake.call_count == 1


def test_run_exit_immediately():
    registry = EmployeeRegistry()
    output, fake = _run(registry, "0\n")
    assert output.startswith(MENU)
    assert output.endswith(FAREWELL)
    assert fake.call_count == 0
    assert len(registry) == 0


def test_run_adds_employee():
    registry = EmployeeRegistry()
    text = "1\n12345\nBudi\nJl. Mawar\n0812\nStaf\nd2\n0\n"
    output, fake = _run(registry, text)
    assert len(registry) == 1
    employee = registry.find("12345")
    assert employee.name == "Budi"
    assert employee.base_salary == base_salary("D2")
    assert f"Gaji Pokok: Rp{format_currency(base_salary('D2'))}" in output
    assert fake.call_count == 1


def test_run_records_overtime():
    registry = EmployeeRegistry()
    registry.add(Employee("777", "Sari", "Jl. Melati", "0811", "Kasir", "D3"))
    output, _ = _run(registry, "2\n777\nD1\n10\n0\n")
    employee = registry.find("777")
    assert employee.overtime_hours == 10
    assert employee.total_salary == calculate_total_salary(employee, 10)
    assert f"Total Gaji Bulan Ini: Rp{format_currency(employee.total_salary)}" in output


def test_run_lists_employees():
    registry = EmployeeRegistry()
    registry.add(Employee("1", "Andi", "Jl. A", "0812", "Manajer", "D1"))
    output, _ = _run(registry, "3\n0\n")
    assert "Pegawai 1\n" in output
    assert "Nama: Andi\n" in output
    assert output.count(MENU) == 2


def test_run_eof_propagates():
    with pytest.raises(EOFError):
        _run(EmployeeRegistry(), "1\n")


def test_main_exits_on_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Keluar dari program..." in capsys.readouterr().out


def test_main_handles_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 0
    assert "Pilih opsi" in capsys.readouterr().out