from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import fail, ok
from ..common.validators import require_iso_date
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _to_dict(j) -> dict:
    return {
        "justification_id": j.justification_id,
        "employee_id": j.employee_id,
        "date": j.work_date.strftime("%Y-%m-%d"),
        "type": j.type.value,
        "hours_offset": j.hours_offset,
        "notes": j.notes or "",
    }


def register(app: Flask, container: Container) -> None:
    @app.route(
        "/api/employees/<employee_id>/justifications/<day>",
        methods=["PUT"],
        endpoint="api_set_justification",
    )
    def api_set_justification(employee_id: str, day: str):
        """{"type": "FERIE"|..., "hours_offset"?, "notes"?}"""
        try:
            data = request.get_json(silent=True) or {}
            justification = container.justification_service.set_for_day(
                employee_id=employee_id,
                work_date=require_iso_date(day),
                type=data.get("type"),
                hours_offset=data.get("hours_offset", 0),
                notes=data.get("notes"),
            )
            return ok({"justification": _to_dict(justification)})
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("set justification failed", extra={"employee_id": employee_id, "day": day})
            return fail("Internal error while saving the justification", 500)

    @app.route(
        "/api/employees/<employee_id>/justifications/<day>",
        methods=["DELETE"],
        endpoint="api_clear_justification",
    )
    def api_clear_justification(employee_id: str, day: str):
        try:
            justification = container.justification_service.clear_for_day(
                employee_id=employee_id,
                work_date=require_iso_date(day),
            )
            return ok({"justification": _to_dict(justification)})
        except ValidationError as e:
            return fail(str(e), 400)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("clear justification failed", extra={"employee_id": employee_id, "day": day})
            return fail("Internal error while clearing the justification", 500)
