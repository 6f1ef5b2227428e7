import tkinter as tk
from tkinter import ttk

from gui.components.employee_row import EmployeeRow
from gui.views.base import BaseView

WHEEL_EVENTS = ("<MouseWheel>", "<Button-4>", "<Button-5>")


def wheel_units(event) -> int:
    """Scroll step for a wheel event: negative scrolls up."""
    # X11 reports the wheel as buttons 4 (up) and 5 (down)
    num = getattr(event, "num", None)
    if num == 4:
        return -1
    if num == 5:
        return 1
    delta = getattr(event, "delta", 0) or 0
    # Windows sends multiples of 120, macOS small raw deltas
    return int(-delta / 120) or (-1 if delta > 0 else 1 if delta < 0 else 0)


class EmployeesView(BaseView):
    """Header, ADD trigger and the scrollable list of employee rows."""

    def _build(self):  # pragma: no cover - UI code
        ttk.Label(self, text="Employee Database".upper(), style="Header.TLabel").pack(pady=(20, 20))
        ttk.Button(self, text="ADD", style="Accent.TButton",
                   command=lambda: self.call("open_add_dialog")).pack()

        body = ttk.Frame(self, style="Main.TFrame")
        body.pack(fill=tk.BOTH, expand=True, pady=(10, 0))
        body.rowconfigure(0, weight=1)
        body.columnconfigure(0, weight=1)

        self.canvas = tk.Canvas(body, highlightthickness=0, borderwidth=0,
                                background=self.app.theme.background_color)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        scroll = ttk.Scrollbar(body, orient=tk.VERTICAL, command=self.canvas.yview)
        scroll.grid(row=0, column=1, sticky="ns")
        self.canvas.configure(yscrollcommand=scroll.set)

        self.rows_frame = ttk.Frame(self.canvas, style="Main.TFrame")
        self._window = self.canvas.create_window((0, 0), window=self.rows_frame, anchor="nw")
        self.rows_frame.bind("<Configure>", self._on_rows_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)
        # Rows sit on top of the canvas, so the wheel is bound globally only
        # while the pointer is over the list.
        self.canvas.bind("<Enter>", self._bind_wheel)
        self.canvas.bind("<Leave>", self._unbind_wheel)

        self.rows = []

    def render(self, employees):
        """Rebuild the rows from an employee snapshot."""
        for row in self.rows:
            row.destroy()
        self.rows = []
        for employee in employees:
            row = EmployeeRow(
                self.rows_frame,
                employee,
                on_edit=lambda e: self.call("open_edit_dialog", e),
                on_delete=lambda e: self.call("delete_employee", e),
                theme=self.app.theme,
            )
            row.pack(fill=tk.X, padx=10, pady=10)
            self.rows.append(row)

    # ------------------- Scrolling -----------------------------------
    def _on_rows_configure(self, _event=None):  # pragma: no cover - UI code
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_canvas_configure(self, event):  # pragma: no cover - UI code
        self.canvas.itemconfigure(self._window, width=event.width)

    def _bind_wheel(self, _event=None):
        for sequence in WHEEL_EVENTS:
            self.canvas.bind_all(sequence, self._on_mousewheel)

    def _unbind_wheel(self, _event=None):
        # <Leave> also fires when the pointer moves onto a row inside the canvas
        under = self.canvas.winfo_containing(*self.canvas.winfo_pointerxy())
        if under is not None and str(under).startswith(str(self.canvas)):
            return
        for sequence in WHEEL_EVENTS:
            self.canvas.unbind_all(sequence)

    def _on_mousewheel(self, event):
        self.canvas.yview_scroll(wheel_units(event), "units")
