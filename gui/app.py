"""Main GUI application object.

Actions (open/commit/cancel the form, delete a row) only touch AppState, so
they work with or without a Tk root. ``run`` builds the window and keeps it
in sync with the state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from employee_db.config import Settings, get_settings
from employee_db.models import Employee
from employee_db.store import EmployeeStore, IdStrategy
from employee_db.utils.logger import setup_logging
from gui.state import AppState, FIELD_LABELS, FormDialogState
from gui.theme import Theme, get_theme
from gui.utils.logging import log


@dataclass
class EmployeeDatabaseApp:
    """Application root: owns the state and wires it to the views."""

    settings: Settings = field(default_factory=get_settings)
    state: Optional[AppState] = None
    theme: Optional[Theme] = None

    root: Any = field(default=None, init=False, repr=False)
    view: Any = field(default=None, init=False, repr=False)
    form: Any = field(default=None, init=False, repr=False)
    _unsubscribe: Optional[Callable[[], None]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.state is None:
            self.state = AppState(
                store=EmployeeStore(IdStrategy.parse(self.settings.id_strategy)),
                dialog=FormDialogState(verbose=self.settings.verbose),
            )
        if self.theme is None:
            self.theme = get_theme(self.settings.theme)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EmployeeDatabaseApp":
        return cls(settings=settings or get_settings())

    # ------------------- Actions -------------------------------------
    def open_add_dialog(self) -> None:
        if self.state.dialog.open_for_add():
            self._sync_form()

    def open_edit_dialog(self, employee: Employee) -> None:
        if self.state.dialog.open_for_edit(employee):
            self._sync_form()

    def delete_employee(self, employee: Employee) -> None:
        self.state.store.remove(employee.id)

    def commit_dialog(self) -> bool:
        try:
            committed = self.state.dialog.commit(self.state.store)
        finally:
            self._sync_form()
        if not committed and self.state.dialog.is_open and self.settings.show_validation:
            self._warn_incomplete(self.state.dialog.blank_fields())
        return committed

    def cancel_dialog(self) -> None:
        self.state.dialog.cancel()
        self._sync_form()

    # ------------------- Tk wiring -----------------------------------
    def attach_view(self, view) -> None:
        """Render ``view`` now and again on every store change."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        self.view = view
        view.render(self.state.employees)
        self._unsubscribe = self.state.store.subscribe(view.render)

    def run(self) -> None:  # pragma: no cover - UI code
        import tkinter as tk
        from tkinter import ttk

        from gui.views.employees import EmployeesView

        self.root = tk.Tk()
        self.root.title(self.settings.window_title)
        self.root.geometry(self.settings.window_geometry)
        self.theme.apply(ttk.Style(self.root), self.root)

        view = EmployeesView(self.root, self)
        view.pack(fill=tk.BOTH, expand=True)
        self.attach_view(view)

        log(f"Starting {self.settings.window_title} ({self.state.store.id_strategy.value} ids)")
        try:
            self.root.mainloop()
        finally:
            self._unsubscribe()
            self._unsubscribe = None

    def _sync_form(self) -> None:
        """Show or hide the form widget to match the dialog state."""
        if self.root is None:
            return
        if self.state.dialog.is_open and self.form is None:  # pragma: no cover - UI code
            from gui.views.employee_form import EmployeeFormDialog

            self.form = EmployeeFormDialog(self.root, self, self.state.dialog)
        elif not self.state.dialog.is_open and self.form is not None:
            self.form.close()
            self.form = None

    def _warn_incomplete(self, blank) -> None:
        log(f"Form incomplete: {', '.join(blank)}", logging.WARNING)
        if self.root is None:
            return
        from tkinter import messagebox  # pragma: no cover - UI code

        labels = "\n".join(FIELD_LABELS[name] for name in blank)
        messagebox.showwarning("Incomplete form", f"Please fill in:\n{labels}", parent=self.form)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    EmployeeDatabaseApp.from_settings(settings).run()


if __name__ == "__main__":
    main()
