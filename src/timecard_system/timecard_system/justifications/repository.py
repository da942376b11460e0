from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Justification


class JustificationRepository(Protocol):
    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[Justification]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[Justification]:
        raise NotImplementedError

    def upsert(self, justification: Justification) -> None:
        """Create or replace the record identified by (employee_id, work_date)."""

        raise NotImplementedError

    def delete(self, *, employee_id: str, work_date: date) -> bool:
        raise NotImplementedError
