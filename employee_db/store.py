"""In-memory employee list with change notification.

The list is a tuple that gets replaced as a whole on every mutation, so a
listener always receives a complete snapshot and never sees a half-applied
change. Views subscribe and re-render from the snapshot they are handed.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from employee_db.models import Employee
from employee_db.utils.logger import get_logger

logger = get_logger(__name__)

Listener = Callable[[Tuple[Employee, ...]], None]


class IdStrategy(str, Enum):
    """How ids are handed out to newly created records."""

    # len(list) + 1: ids repeat once a record has been deleted
    LENGTH = "length"
    # monotonically increasing, never reused
    COUNTER = "counter"

    @classmethod
    def parse(cls, value: str) -> "IdStrategy":
        try:
            return cls(value.strip().lower())
        except ValueError:
            logger.warning("Unknown id strategy %r, using %s", value, cls.LENGTH.value)
            return cls.LENGTH


class EmployeeStore:
    """Ordered employee records plus subscribe/notify."""

    def __init__(self, id_strategy: IdStrategy = IdStrategy.LENGTH):
        self.id_strategy = id_strategy
        self._employees: Tuple[Employee, ...] = ()
        self._last_issued_id = 0
        self._listeners: List[Listener] = []

    # ------------------- Read access ---------------------------------
    @property
    def employees(self) -> Tuple[Employee, ...]:
        return self._employees

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def get(self, employee_id: int) -> Optional[Employee]:
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    # ------------------- Mutations -----------------------------------
    def next_id(self) -> int:
        if self.id_strategy is IdStrategy.COUNTER:
            return self._last_issued_id + 1
        return len(self._employees) + 1

    def create(self, fields: Dict[str, str]) -> Employee:
        """Build a record with the next id and append it."""
        employee = Employee(id=self.next_id(), **fields)
        self.add(employee)
        return employee

    def add(self, employee: Employee) -> None:
        self._last_issued_id = max(self._last_issued_id, employee.id)
        self._replace(self._employees + (employee,))
        logger.debug("Added employee id=%s (%d total)", employee.id, len(self._employees))

    def update(self, employee_id: int, fields: Dict[str, str]) -> None:
        """Rewrite every record whose id matches; unknown ids are ignored."""
        if self.get(employee_id) is None:
            logger.debug("Update skipped, no employee with id=%s", employee_id)
            return
        self._replace(
            tuple(
                e.with_fields(fields) if e.id == employee_id else e
                for e in self._employees
            )
        )
        logger.debug("Updated employee id=%s", employee_id)

    def remove(self, employee_id: int) -> None:
        """Drop every record whose id matches; unknown ids are ignored."""
        remaining = tuple(e for e in self._employees if e.id != employee_id)
        removed = len(self._employees) - len(remaining)
        if not removed:
            logger.debug("Remove skipped, no employee with id=%s", employee_id)
            return
        self._replace(remaining)
        logger.debug("Removed %d employee(s) with id=%s", removed, employee_id)

    # ------------------- Notification --------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _replace(self, employees: Tuple[Employee, ...]) -> None:
        self._employees = employees
        for listener in list(self._listeners):
            listener(employees)
