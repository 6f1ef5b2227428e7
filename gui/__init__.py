"""Tkinter front-end for the in-memory employee list.

`gui.state` and `gui.app`'s actions are plain Python and import without a
display server; only the views and components build Tk widgets.
"""
