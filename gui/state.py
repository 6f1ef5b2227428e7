"""Application state container.

Pure Python, no Tk: the widgets read from these objects and push change
events back into them, so everything here runs in headless tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from pydantic import ValidationError

from employee_db.models import Employee, EmployeeFields, FIELD_NAMES
from employee_db.store import EmployeeStore
from gui.utils.logging import log

FIELD_LABELS = {
    "name": "Enter name",
    "address": "Enter Address",
    "date_of_birth": "Enter DOB (DD-MM-YYYY)",
    "gender": "Enter Gender",
    "role": "Enter Role",
}


class DialogMode(Enum):
    CLOSED = "closed"
    ADD = "add"
    EDIT = "edit"


def _empty_fields() -> Dict[str, str]:
    return {name: "" for name in FIELD_NAMES}


@dataclass
class FormDialogState:
    """Add/edit form: closed, open-for-add, or open-for-edit(target_id)."""

    mode: DialogMode = DialogMode.CLOSED
    target_id: Optional[int] = None
    fields: Dict[str, str] = field(default_factory=_empty_fields)
    verbose: bool = False

    @property
    def is_open(self) -> bool:
        return self.mode is not DialogMode.CLOSED

    @property
    def confirm_label(self) -> str:
        return "UPDATE" if self.mode is DialogMode.EDIT else "SAVE"

    @property
    def title(self) -> str:
        return "Edit Employee" if self.mode is DialogMode.EDIT else "Add Employee"

    def open_for_add(self) -> bool:
        """closed -> add; ignored while the form is already open."""
        if self.is_open:
            return False
        self.mode = DialogMode.ADD
        self.target_id = None
        self.fields = _empty_fields()
        self._trace("Form opened for add")
        return True

    def open_for_edit(self, employee: Employee) -> bool:
        """closed -> edit(employee.id); ignored while the form is already open."""
        if self.is_open:
            return False
        self.mode = DialogMode.EDIT
        self.target_id = employee.id
        self.fields = employee.fields()
        self._trace(f"Form opened for edit of id={employee.id}")
        return True

    def set_field(self, name: str, value: str) -> None:
        if name not in self.fields:
            raise KeyError(f"Unknown employee field: {name}")
        self.fields[name] = value

    def blank_fields(self) -> List[str]:
        return EmployeeFields.blank_fields(self.fields)

    def cancel(self) -> None:
        self._close()
        self._trace("Form dismissed")

    def commit(self, store: EmployeeStore) -> bool:
        """Apply the pending fields to ``store``.

        Returns False and leaves the form open when a field is blank. The
        form is closed before the store notifies its listeners, so a failing
        listener cannot leave it open for a second commit.
        """
        if not self.is_open:
            return False
        try:
            values = EmployeeFields(**self.fields).model_dump()
        except ValidationError:
            log(f"Commit refused, blank fields: {', '.join(self.blank_fields())}", logging.DEBUG)
            return False

        mode, target_id = self.mode, self.target_id
        self._close()
        if mode is DialogMode.EDIT and target_id is not None:
            store.update(target_id, values)
            self._trace(f"Updated id={target_id}")
        else:
            employee = store.create(values)
            self._trace(f"Saved id={employee.id}")
        return True

    def _close(self) -> None:
        self.mode = DialogMode.CLOSED
        self.target_id = None
        self.fields = _empty_fields()

    def _trace(self, message: str) -> None:
        log(message, logging.INFO if self.verbose else logging.DEBUG)


@dataclass
class AppState:
    """Holds the employee list and the form dialog for one window."""

    store: EmployeeStore = field(default_factory=EmployeeStore)
    dialog: FormDialogState = field(default_factory=FormDialogState)

    @property
    def employees(self):
        return self.store.employees
