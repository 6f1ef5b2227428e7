"""
Employee Database - in-memory employee records with a small tkinter front-end.

Records live only as long as the process does; nothing is written to disk.
"""

__version__ = "1.0.0"

from .models import Employee, EmployeeFields
from .store import EmployeeStore, IdStrategy

__all__ = [
    "Employee",
    "EmployeeFields",
    "EmployeeStore",
    "IdStrategy",
]
