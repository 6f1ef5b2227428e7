import tkinter as tk
from tkinter import ttk
from typing import Callable, List

from employee_db.models import Employee
from gui.theme import Theme
from gui.utils.tooltips import ToolTip

# Icon glyphs standing in for the account/edit/delete icons.
DETAILS_ICON = "\U0001F464"
EDIT_ICON = "✎"
DELETE_ICON = "\U0001F5D1"


def summary_text(employee: Employee) -> str:
    """Two-line row caption: name over role."""
    return f"{employee.name}\n{employee.role}"


def detail_lines(employee: Employee) -> List[str]:
    """Lines of the read-only details modal."""
    return [
        f"Name: {employee.name} ,   {employee.gender}",
        f"ID: {employee.id}  , DOB: {employee.date_of_birth}",
        f"Role: {employee.role}",
        f"Address: {employee.address}",
    ]


class EmployeeRow(ttk.Frame):
    """
    One bordered list row.

    Shows name and role, plus Details / Edit / Delete icon buttons. Edit and
    Delete are handed back to the parent through callbacks; the details
    modal is owned by the row itself.
    """

    def __init__(self, parent, employee: Employee,
                 on_edit: Callable[[Employee], None],
                 on_delete: Callable[[Employee], None],
                 theme: Theme = None):
        super().__init__(parent, style="Row.TFrame", padding=10)
        self.employee = employee
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.theme = theme
        self.details_open = False
        self._details_dialog = None

        self.columnconfigure(0, weight=1)
        ttk.Label(self, text=summary_text(employee), justify=tk.LEFT).grid(
            row=0, column=0, sticky="w", padx=(0, 10))

        actions = [
            (DETAILS_ICON, "Details", self.show_details),
            (EDIT_ICON, "Edit", lambda: self.on_edit(self.employee)),
            (DELETE_ICON, "Delete", lambda: self.on_delete(self.employee)),
        ]
        for col, (icon, tip, command) in enumerate(actions, start=1):
            btn = ttk.Button(self, text=icon, style="Icon.TButton", command=command)
            btn.grid(row=0, column=col, padx=2)
            ToolTip(btn, tip, theme)

    def show_details(self):
        if self.details_open:
            return
        self.details_open = True

        dialog = tk.Toplevel(self)
        dialog.title("Employee Details")
        dialog.transient(self.winfo_toplevel())
        dialog.resizable(False, False)
        dialog.protocol("WM_DELETE_WINDOW", self.close_details)
        self._details_dialog = dialog

        body = ttk.Frame(dialog, style="Main.TFrame", padding=16)
        body.pack(fill=tk.BOTH, expand=True)
        ttk.Label(body, text="Employee Details", style="Header.TLabel").pack(anchor="w", pady=(0, 8))
        for line in detail_lines(self.employee):
            ttk.Label(body, text=line, wraplength=320, justify=tk.LEFT).pack(anchor="w", pady=1)
        ttk.Button(body, text="Close", style="Accent.TButton",
                   command=self.close_details).pack(anchor="e", pady=(12, 0))
        dialog.wait_visibility()
        dialog.grab_set()

    def close_details(self):
        self.details_open = False
        dialog, self._details_dialog = self._details_dialog, None
        if dialog is not None:
            dialog.grab_release()
            dialog.destroy()
