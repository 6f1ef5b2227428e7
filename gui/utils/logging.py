"""Logging helpers for the GUI.

Avoids configuring global logging in tests; entry points call
employee_db.utils.logger.setup_logging() themselves.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("employee_db.gui")


def log(message: str, level: int = logging.INFO) -> None:
    logger.log(level, message)
