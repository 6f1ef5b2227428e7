"""Base class for GUI views.

A view is a ttk.Frame that builds its widgets in ``_build`` and routes
user actions to the application through ``call``.
"""

from tkinter import ttk


class BaseView(ttk.Frame):
    def __init__(self, parent, app, **kwargs):
        kwargs.setdefault("style", "Main.TFrame")
        super().__init__(parent, **kwargs)
        self.app = app
        self._build()

    def _build(self):
        raise NotImplementedError

    def call(self, action: str, *args):
        """Invoke the app action named ``action``."""
        return getattr(self.app, action)(*args)
