from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .justifications.mysql_justification_repository import MySQLJustificationRepository
from .justifications.repository import JustificationRepository
from .justifications.service import JustificationService
from .payroll.calculator.explicit_calculator import ExplicitPermissionCalculator
from .payroll.calculator.standard_calculator import StandardPermissionCalculator
from .payroll.service import PayrollReportService
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .settings.model import SnapSettings
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    punches_repo: PunchRepository
    justifications_repo: JustificationRepository
    settings_repo: SettingsRepository

    settings_service: SettingsService
    attendance_service: AttendanceService
    justification_service: JustificationService
    payroll_report_service: PayrollReportService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    punches_repo: PunchRepository,
    justifications_repo: JustificationRepository,
    settings_repo: SettingsRepository,
    snap_defaults: SnapSettings | None = None,
    implicit_permission_hours: bool = True,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    """Wire services on top of any repository implementation."""

    settings_service = SettingsService(settings_repo, defaults=snap_defaults)
    calculator = StandardPermissionCalculator() if implicit_permission_hours else ExplicitPermissionCalculator()

    attendance_service = AttendanceService(
        punches_repo,
        justifications_repo,
        employees_repo,
        settings_service,
        clock=clock,
    )
    justification_service = JustificationService(justifications_repo, employees_repo)
    payroll_report_service = PayrollReportService(
        employees_repo,
        punches_repo,
        justifications_repo,
        settings_service,
        calculator=calculator,
        clock=clock,
    )

    return Container(
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        justifications_repo=justifications_repo,
        settings_repo=settings_repo,
        settings_service=settings_service,
        attendance_service=attendance_service,
        justification_service=justification_service,
        payroll_report_service=payroll_report_service,
    )


def build_container(
    *,
    db_config: dict,
    snap_defaults: SnapSettings | None = None,
    implicit_permission_hours: bool = True,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        justifications_repo=MySQLJustificationRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        snap_defaults=snap_defaults,
        implicit_permission_hours=implicit_permission_hours,
    )
