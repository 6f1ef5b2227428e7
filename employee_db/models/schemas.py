"""Pydantic contract for the five editable employee fields.

The form dialog validates through this model before anything reaches the
store, so a record with a blank field is never committed. Values are kept
exactly as typed; only the blank check looks past whitespace.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, field_validator

from .employee import FIELD_NAMES


class EmployeeFields(BaseModel):
    name: str
    address: str
    date_of_birth: str  # shown as DD-MM-YYYY, never parsed
    gender: str
    role: str

    @field_validator(*FIELD_NAMES)
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v

    @staticmethod
    def blank_fields(values: Dict[str, Any]) -> List[str]:
        """Names of the blank fields in ``values``, in form order."""
        return [
            name
            for name in FIELD_NAMES
            if not str(values.get(name) or "").strip()
        ]
