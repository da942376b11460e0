from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import fail, ok
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/snap", methods=["GET"], endpoint="api_get_snap_settings")
    def api_get_snap_settings():
        return ok({"settings": container.settings_service.current().to_dict()})

    @app.route("/api/settings/snap", methods=["PUT"], endpoint="api_update_snap_settings")
    def api_update_snap_settings():
        try:
            data = request.get_json(silent=True) or {}
            updated = container.settings_service.update(
                overtime_snap_minutes=data.get("overtime_snap_minutes"),
                permesso_snap_minutes=data.get("permesso_snap_minutes"),
            )
            logger.info("snap settings updated", extra=updated.to_dict())
            return ok({"settings": updated.to_dict()})
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("update snap settings failed")
            return fail("Internal error while saving settings", 500)
