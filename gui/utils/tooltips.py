import tkinter as tk

from gui.theme import Theme


class ToolTip:
    """Hover label for the icon-only row actions.

    The label is drawn in the theme's inverted colours so it stands out from
    the row behind it.

    Usage:
        ToolTip(button, "Delete", theme)
    """

    def __init__(self, widget: tk.Widget, text: str, theme: Theme = None, delay: int = 400):
        theme = theme or Theme()
        self.widget = widget
        self.text = text
        self.delay = delay
        self.background = theme.text_color
        self.foreground = theme.background_color
        self.font = (theme.font_family, 9)
        self.tipwindow = None
        self._after_id = None
        for sequence, handler in (("<Enter>", self._schedule),
                                  ("<Leave>", self._hide),
                                  ("<ButtonPress>", self._hide)):
            self.widget.bind(sequence, handler, add="+")

    def _schedule(self, _event=None):
        self._cancel()
        self._after_id = self.widget.after(self.delay, self._show)

    def _cancel(self):
        if self._after_id:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def _show(self):  # pragma: no cover - UI code
        if self.tipwindow or not self.text:
            return
        # Just below the button, nudged right of its left edge
        x = self.widget.winfo_rootx() + 4
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 4
        self.tipwindow = tk.Toplevel(self.widget)
        self.tipwindow.wm_overrideredirect(True)
        self.tipwindow.wm_geometry(f"+{x}+{y}")
        tk.Label(
            self.tipwindow,
            text=self.text,
            font=self.font,
            background=self.background,
            foreground=self.foreground,
            relief=tk.SOLID,
            borderwidth=1,
            padx=4,
            pady=2,
        ).pack()

    def _hide(self, _event=None):
        self._cancel()
        tw, self.tipwindow = self.tipwindow, None
        if tw:
            tw.destroy()
