"""Employee record held in the in-memory list."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict

# Form order, also the order the dialog shows its inputs in.
FIELD_NAMES = ("name", "address", "date_of_birth", "gender", "role")


@dataclass(frozen=True)
class Employee:
    id: int
    name: str
    gender: str
    date_of_birth: str
    address: str
    role: str

    def with_fields(self, fields: Dict[str, Any]) -> "Employee":
        """Return a copy carrying ``fields``; the id never changes."""
        return replace(self, **{k: v for k, v in fields.items() if k in FIELD_NAMES})

    def fields(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in FIELD_NAMES}


__all__ = ["Employee", "FIELD_NAMES"]
