import tkinter as tk
from tkinter import ttk

from employee_db.models import FIELD_NAMES
from gui.state import FIELD_LABELS, FormDialogState


class EmployeeFormDialog(tk.Toplevel):
    """Modal add/edit form.

    The Entry widgets never own the values: each keystroke is forwarded to
    FormDialogState.set_field, and the inputs are filled from the state when
    the dialog opens.
    """

    def __init__(self, parent, app, dialog_state: FormDialogState):
        super().__init__(parent)
        self.app = app
        self.dialog_state = dialog_state

        self.title(dialog_state.title)
        self.transient(parent)
        self.resizable(False, False)
        self.protocol("WM_DELETE_WINDOW", lambda: self.app.cancel_dialog())
        self.bind("<Escape>", lambda _e: self.app.cancel_dialog())
        self.configure(bg=app.theme.background_color)

        body = ttk.Frame(self, style="Main.TFrame", padding=16)
        body.pack(fill=tk.BOTH, expand=True)
        body.columnconfigure(0, weight=1)
        ttk.Label(body, text=dialog_state.title, style="Header.TLabel").grid(
            row=0, column=0, sticky="w", pady=(0, 8))

        self.vars = {}
        self.entries = {}
        row = 1
        for name in FIELD_NAMES:
            ttk.Label(body, text=FIELD_LABELS[name], style="Muted.TLabel").grid(
                row=row, column=0, sticky="w", padx=8)
            var = tk.StringVar(value=dialog_state.fields[name])
            var.trace_add("write", lambda *_a, n=name, v=var: self.dialog_state.set_field(n, v.get()))
            entry = ttk.Entry(body, textvariable=var, width=36)
            entry.grid(row=row + 1, column=0, sticky="ew", padx=8, pady=(0, 8))
            self.vars[name] = var
            self.entries[name] = entry
            row += 2

        actions = ttk.Frame(body, style="Main.TFrame", padding=5)
        actions.grid(row=row, column=0, sticky="ew")
        ttk.Button(actions, text=dialog_state.confirm_label, style="Accent.TButton",
                   command=lambda: self.app.commit_dialog()).pack(side=tk.LEFT)
        ttk.Button(actions, text="CANCEL",
                   command=lambda: self.app.cancel_dialog()).pack(side=tk.RIGHT)

        self.entries[FIELD_NAMES[0]].focus_set()
        self.wait_visibility()
        self.grab_set()

    def close(self):  # pragma: no cover - UI code
        self.grab_release()
        self.destroy()
