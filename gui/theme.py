"""Theme primitives for the employee screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gui.utils.logging import log


@dataclass(frozen=True)
class Theme:
    """Base theme definition (light)."""

    name: str = "light"
    background_color: str = "#ffffff"
    surface_color: str = "#f3f4f6"  # gray-100
    text_color: str = "#111827"  # gray-900
    muted_color: str = "#6b7280"  # gray-500
    accent_color: str = "#6750a4"  # material purple
    border_color: str = "#000000"
    font_family: str = "Helvetica"

    def apply(self, style, root) -> None:
        """Register the ttk styles the views refer to."""
        style.theme_use("clam")
        style.configure("TFrame", background=self.background_color)
        style.configure("Main.TFrame", background=self.background_color)
        style.configure(
            "Row.TFrame",
            background=self.background_color,
            bordercolor=self.border_color,
            relief="solid",
            borderwidth=1,
        )
        style.configure("TLabel", background=self.background_color, foreground=self.text_color)
        style.configure(
            "Header.TLabel",
            background=self.background_color,
            foreground=self.text_color,
            font=(self.font_family, 14, "bold"),
        )
        style.configure("Muted.TLabel", background=self.background_color, foreground=self.muted_color)
        style.configure("TButton", padding=6)
        style.configure("Accent.TButton", background=self.accent_color, foreground="#ffffff")
        style.map("Accent.TButton", background=[("active", self.accent_color)])
        style.configure("Icon.TButton", padding=2, width=3)
        root.configure(bg=self.background_color)


@dataclass(frozen=True)
class DarkTheme(Theme):
    """Dark variant."""

    name: str = "dark"
    background_color: str = "#1e1e2e"
    surface_color: str = "#313244"
    text_color: str = "#cdd6f4"
    muted_color: str = "#a6adc8"
    accent_color: str = "#89b4fa"
    border_color: str = "#45475a"


THEMES = {"light": Theme, "dark": DarkTheme}


def get_theme(name: str) -> Theme:
    theme_cls = THEMES.get(name.strip().lower())
    if theme_cls is None:
        log(f"Unknown theme {name!r}, using light", logging.WARNING)
        theme_cls = Theme
    return theme_cls()
