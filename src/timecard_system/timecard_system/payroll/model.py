from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import DailyOutcome


@dataclass(frozen=True)
class MonthlySummary:
    """Tổng hợp chấm công theo tháng của một nhân viên (dùng cho bảng lương)."""

    employee_id: str
    year_month: str
    total_worked: float = 0.0
    total_overtime: float = 0.0
    days_worked: int = 0
    late_count: int = 0
    absence_count: int = 0
    ferie_count: int = 0
    malattia_count: int = 0
    festivo_count: int = 0
    congedo_count: int = 0
    permesso_hours: float = 0.0
    days: tuple[DailyOutcome, ...] = field(default=(), repr=False, compare=False)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "month": self.year_month,
            "total_worked": self.total_worked,
            "total_overtime": self.total_overtime,
            "days_worked": self.days_worked,
            "late_count": self.late_count,
            "absence_count": self.absence_count,
            "ferie_count": self.ferie_count,
            "malattia_count": self.malattia_count,
            "festivo_count": self.festivo_count,
            "congedo_count": self.congedo_count,
            "permesso_hours": self.permesso_hours,
        }
