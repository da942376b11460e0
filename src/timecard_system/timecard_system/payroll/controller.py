from __future__ import annotations

import logging

from flask import Flask

from ..common.responses import fail, ok
from ..common.validators import require_year_month
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/<month>", methods=["GET"], endpoint="api_payroll_month")
    def api_payroll_month(month: str):
        try:
            month = require_year_month(month)
            report = container.payroll_report_service.build_payroll_report(month)
            return ok(
                {
                    "month": month,
                    "summaries": [s.to_dict() for s in report.summaries],
                    "rows": report.rows,
                }
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("payroll report failed", extra={"month": month})
            return fail("Internal error while building the payroll report", 500)

    @app.route("/api/payroll/<month>/employees/<employee_id>", methods=["GET"], endpoint="api_payroll_employee")
    def api_payroll_employee(month: str, employee_id: str):
        try:
            summary = container.payroll_report_service.monthly_summary(employee_id, require_year_month(month))
            return ok({"summary": summary.to_dict()})
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("employee payroll failed", extra={"month": month, "employee_id": employee_id})
            return fail("Internal error while building the payroll summary", 500)
