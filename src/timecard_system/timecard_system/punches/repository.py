from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Punch


class PunchRepository(Protocol):
    def list_for_employee(self, *, employee_id: str, start: date, end: date) -> Sequence[Punch]:
        """Punches of one employee with start <= day <= end, in storage order."""

        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Sequence[Punch]:
        raise NotImplementedError

    def get_by_id(self, punch_id: str) -> Optional[Punch]:
        raise NotImplementedError

    def upsert(self, punch: Punch) -> None:
        raise NotImplementedError

    def delete(self, punch_id: str) -> bool:
        raise NotImplementedError
