from __future__ import annotations

import logging

from flask import Flask, session

from ..common.class_ids import safe_class_id
from ..common.validators import require_non_empty
from ..common.web import (
    SESSION_CLASS_ID,
    SESSION_VIEW_MODE,
    api_view,
    class_required,
    json_ok,
    request_data,
)
from ..container import Container
from ..core.enums import ViewMode

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/enter", methods=["POST"], endpoint="enter_class")
    @api_view
    def enter_class():
        class_id = require_non_empty(str(request_data().get("class_id") or ""), "클래스 코드")

        session.clear()
        session[SESSION_CLASS_ID] = class_id
        session[SESSION_VIEW_MODE] = ViewMode.ADMIN.value
        logger.info("entered class %s", class_id)
        return json_ok({"class_id": class_id, "class_key": safe_class_id(class_id)})

    @app.route("/api/classes/leave", methods=["POST"], endpoint="leave_class")
    def leave_class():
        session.clear()
        return json_ok()

    @app.route("/api/classes/current", methods=["GET"], endpoint="current_class")
    @class_required
    def current_class():
        class_id = session[SESSION_CLASS_ID]
        return json_ok(
            {
                "class_id": class_id,
                "class_key": safe_class_id(class_id),
                "view_mode": session.get(SESSION_VIEW_MODE),
            }
        )
