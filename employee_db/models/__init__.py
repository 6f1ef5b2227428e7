"""Employee record and form field contract."""
from .employee import Employee, FIELD_NAMES
from .schemas import EmployeeFields

__all__ = [
    "Employee",
    "EmployeeFields",
    "FIELD_NAMES",
]
