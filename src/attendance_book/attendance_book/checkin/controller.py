from __future__ import annotations

import logging

from flask import Flask, request, session

from ..common.validators import require_non_empty, require_slot
from ..common.web import (
    SESSION_CLASS_ID,
    SESSION_QR_DAY,
    SESSION_QR_SLOT,
    SESSION_VIEW_MODE,
    api_view,
    current_class_id,
    json_ok,
    member_required,
    request_data,
)
from ..container import Container
from ..core.enums import ViewMode
from ..qr.links import parse_member_link

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _today():
        return container.clock().date()

    def _member_view(class_id: str, day: str, slot: str):
        return json_ok(
            {
                "view_mode": ViewMode.MEMBER.value,
                "class_id": class_id,
                "day": day,
                "slot": slot,
                "date": _today().isoformat(),
                "members": container.checkin_service.roster_status(class_id, slot, _today()),
            }
        )

    @app.route("/", methods=["GET"], endpoint="index")
    @api_view
    def index():
        """Entry point; QR links land here with ?mode=member&classId=..&day=..&slot=.."""

        qr = parse_member_link(request.args)
        if qr:
            require_slot(qr.slot)
            session.clear()
            session[SESSION_CLASS_ID] = qr.class_id
            session[SESSION_VIEW_MODE] = ViewMode.MEMBER.value
            session[SESSION_QR_DAY] = qr.day
            session[SESSION_QR_SLOT] = qr.slot
            logger.info("member view opened for class=%s day=%s slot=%s", qr.class_id, qr.day, qr.slot)
            return _member_view(qr.class_id, qr.day, qr.slot)

        return json_ok(
            {
                "app": "attendance-book",
                "class_id": session.get(SESSION_CLASS_ID),
                "view_mode": session.get(SESSION_VIEW_MODE),
            }
        )

    @app.route("/api/member/roster", methods=["GET"], endpoint="member_roster")
    @member_required
    @api_view
    def member_roster():
        return _member_view(current_class_id(), session.get(SESSION_QR_DAY, ""), session[SESSION_QR_SLOT])

    @app.route("/api/member/checkin", methods=["POST"], endpoint="member_checkin")
    @member_required
    @api_view
    def member_checkin():
        data = request_data()
        result = container.checkin_service.check_in(
            current_class_id(),
            session[SESSION_QR_SLOT],
            require_non_empty(str(data.get("member_id") or ""), "회원"),
            _today(),
            cancel=bool(data.get("cancel")),
        )
        return json_ok(result.to_dict())

    @app.route("/api/member/register", methods=["POST"], endpoint="member_register")
    @member_required
    @api_view
    def member_register():
        result = container.checkin_service.register_and_check_in(
            current_class_id(),
            session[SESSION_QR_SLOT],
            str(request_data().get("name") or ""),
            _today(),
        )
        return json_ok(result.to_dict(), 201)

    # Member mode is a view toggle, not an access boundary: there are no
    # accounts, so anyone holding the class id may return to the dashboard.
    @app.route("/api/member/exit", methods=["POST"], endpoint="member_exit")
    def member_exit():
        """Leave the member view; returns to the dashboard of the same class."""
        for key in (SESSION_QR_DAY, SESSION_QR_SLOT):
            session.pop(key, None)
        session[SESSION_VIEW_MODE] = ViewMode.ADMIN.value
        return json_ok({"view_mode": ViewMode.ADMIN.value})
