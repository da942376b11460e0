from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, request

from ..common.datetime_utils import coerce_datetime
from ..common.responses import fail, ok
from ..common.validators import require_iso_date, require_non_empty, require_year_month
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..payroll.service import PayrollReportService

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/days/<day>", methods=["GET"], endpoint="api_daily_outcome")
    def api_daily_outcome(employee_id: str, day: str):
        try:
            outcome = container.attendance_service.daily_outcome(employee_id, require_iso_date(day))
            return ok({"day": outcome.to_dict()})
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("daily outcome failed", extra={"employee_id": employee_id, "day": day})
            return fail("Internal error while computing the day", 500)

    @app.route("/api/employees/<employee_id>/timecard", methods=["GET"], endpoint="api_timecard")
    def api_timecard(employee_id: str):
        try:
            month = require_year_month(request.args.get("month") or datetime.now().strftime("%Y-%m"))
            days = container.attendance_service.timecard(employee_id, month)
            return ok(
                {
                    "month": month,
                    "days": [d.to_dict() for d in days],
                    "rows": PayrollReportService.timecard_rows(days),
                }
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("timecard failed", extra={"employee_id": employee_id})
            return fail("Internal error while building the timecard", 500)

    @app.route("/api/punches", methods=["POST"], endpoint="api_record_punch")
    def api_record_punch():
        """Kiosk punch: {"employee_id", "kind": "IN"|"OUT", "timestamp"?, "is_offline_sync"?}"""
        try:
            data = request.get_json(silent=True) or {}
            employee_id = require_non_empty(data.get("employee_id", ""), "employee_id")
            at = None
            if data.get("timestamp"):
                at = coerce_datetime(str(data["timestamp"]))
                if at is None:
                    raise ValidationError("timestamp must be ISO formatted (YYYY-MM-DDTHH:MM)")
            punch = container.attendance_service.record_punch(
                employee_id,
                data.get("kind", ""),
                at=at,
                is_offline_sync=bool(data.get("is_offline_sync", False)),
            )
            return ok(
                {
                    "punch": {
                        "punch_id": punch.punch_id,
                        "employee_id": punch.employee_id,
                        "timestamp": punch.at.strftime("%Y-%m-%dT%H:%M"),
                        "kind": punch.kind.value,
                    }
                },
                201,
            )
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("record punch failed")
            return fail("Internal error while recording the punch", 500)

    @app.route(
        "/api/employees/<employee_id>/days/<day>/slots/<slot>",
        methods=["PUT"],
        endpoint="api_correct_slot",
    )
    def api_correct_slot(employee_id: str, day: str, slot: str):
        """Timecard correction: {"time": "HH:MM" | "", "punch_id"?}"""
        try:
            data = request.get_json(silent=True) or {}
            outcome = container.attendance_service.correct_slot(
                employee_id=employee_id,
                work_date=require_iso_date(day),
                slot=slot,
                new_time=data.get("time"),
                punch_id=data.get("punch_id") or None,
            )
            return ok({"day": outcome.to_dict()})
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("slot correction failed", extra={"employee_id": employee_id, "day": day})
            return fail("Internal error while correcting the timecard", 500)

    @app.route("/api/punches/<punch_id>", methods=["DELETE"], endpoint="api_delete_punch")
    def api_delete_punch(punch_id: str):
        try:
            container.attendance_service.delete_punch(punch_id)
            return ok()
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("delete punch failed", extra={"punch_id": punch_id})
            return fail("Internal error while deleting the punch", 500)
