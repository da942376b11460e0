"""Example: compute a month of payroll figures without Flask or a database.

The engine only needs snapshots of punches, justifications and a schedule.
"""

from datetime import date, datetime

from src.timecard_system.timecard_system.core.enums import JustificationType, PunchKind
from src.timecard_system.timecard_system.employees.model import Employee
from src.timecard_system.timecard_system.justifications.model import Justification
from src.timecard_system.timecard_system.payroll.aggregator import aggregate
from src.timecard_system.timecard_system.payroll.service import PayrollReportService
from src.timecard_system.timecard_system.punches.model import Punch


def main():
    employee = Employee(employee_id="wk-1", full_name="Demo Workshop", department="Workshop")
    punches = [
        Punch("p1", "wk-1", datetime(2026, 3, 2, 8, 35), PunchKind.IN),
        Punch("p2", "wk-1", datetime(2026, 3, 2, 12, 31), PunchKind.OUT),
        Punch("p3", "wk-1", datetime(2026, 3, 2, 13, 28), PunchKind.IN),
        Punch("p4", "wk-1", "2026-03-02T18:45:00", PunchKind.OUT),
        Punch("p5", "wk-1", datetime(2026, 3, 3, 9, 10), PunchKind.IN),
    ]
    justifications = [Justification("wk-1", date(2026, 3, 4), JustificationType.MALATTIA)]

    summary = aggregate(
        employee_id=employee.employee_id,
        year_month="2026-03",
        punches=punches,
        justifications=justifications,
        schedule=employee.schedule,
        today=date(2026, 4, 1),
    )
    print(PayrollReportService.summary_row(summary, employee))
    for day in summary.days[:5]:
        print(PayrollReportService.timecard_row(day))


if __name__ == "__main__":
    main()
