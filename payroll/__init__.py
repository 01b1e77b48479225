"""Console payroll manager: employees, grades, overtime and monthly pay."""

__version__ = "0.1.0"
__all__ = ["__version__"]