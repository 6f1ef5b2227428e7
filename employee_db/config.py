"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Values are read when Settings() is built,
so tests can monkeypatch the environment before calling get_settings().
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # Window
    window_title: str = field(
        default_factory=lambda: _env("EMPLOYEE_DB_WINDOW_TITLE", "Employee Database")
    )
    window_geometry: str = field(
        default_factory=lambda: _env("EMPLOYEE_DB_GEOMETRY", "420x760")
    )
    theme: str = field(default_factory=lambda: _env("EMPLOYEE_DB_THEME", "light"))

    # Records: "length" keeps len(list) + 1 ids, "counter" never reuses an id
    id_strategy: str = field(
        default_factory=lambda: _env("EMPLOYEE_DB_ID_STRATEGY", "length")
    )

    # Show a warning listing blank fields when SAVE/UPDATE is refused
    show_validation: bool = field(
        default_factory=lambda: _env_flag("EMPLOYEE_DB_SHOW_VALIDATION")
    )

    # Logging
    log_level: str = field(default_factory=lambda: _env("EDB_LOG_LEVEL", "INFO"))
    verbose: bool = field(default_factory=lambda: _env_flag("EDB_VERBOSE"))


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
