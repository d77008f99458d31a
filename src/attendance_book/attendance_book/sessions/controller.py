from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import month_of, parse_iso_date, parse_month
from ..common.web import admin_required, api_view, current_class_id, json_error, json_ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sessions", methods=["GET"], endpoint="list_sessions")
    @admin_required
    @api_view
    def list_sessions():
        month = request.args.get("month")
        if month:
            sessions = container.attendance_service.list_month(current_class_id(), parse_month(month))
        else:
            sessions = container.attendance_service.list_sessions(current_class_id())
        return json_ok({"sessions": [s.to_dict() for s in sessions]})

    @app.route("/api/sessions/<work_date>/<slot>", methods=["GET"], endpoint="get_session")
    @admin_required
    @api_view
    def get_session(work_date: str, slot: str):
        s = container.attendance_service.get_session(current_class_id(), parse_iso_date(work_date), slot)
        return json_ok({"session": s.to_dict()})

    @app.route("/api/sessions/<work_date>/<slot>", methods=["PUT"], endpoint="set_session")
    @admin_required
    @api_view
    def set_session(work_date: str, slot: str):
        present_ids = request_data().get("present_ids")
        if not isinstance(present_ids, list):
            return json_error("present_ids 목록이 필요합니다", 400)

        s = container.attendance_service.set_attendance(
            current_class_id(), parse_iso_date(work_date), slot, present_ids
        )
        return json_ok({"session": s.to_dict()})

    @app.route("/api/sessions/<work_date>/<slot>/toggle", methods=["POST"], endpoint="toggle_session_member")
    @admin_required
    @api_view
    def toggle_session_member(work_date: str, slot: str):
        member_id = str(request_data().get("member_id") or "")
        s = container.attendance_service.toggle_member(
            current_class_id(), parse_iso_date(work_date), slot, member_id
        )
        return json_ok({"session": s.to_dict(), "present": s.is_present(member_id)})

    @app.route("/api/sessions/<work_date>/<slot>/reset", methods=["POST"], endpoint="reset_session")
    @admin_required
    @api_view
    def reset_session(work_date: str, slot: str):
        day = parse_iso_date(work_date)
        service = container.attendance_service

        if not request_data().get("confirm"):
            count = service.get_session(current_class_id(), day, slot).present_count
            if count:
                return json_error(
                    f"{work_date} {slot} 출석 기록({count}명)을 모두 삭제하시겠습니까?",
                    409,
                    confirm_required=True,
                    present_count=count,
                )

        cleared = service.reset_session(current_class_id(), day, slot)
        return json_ok({"cleared": cleared, "month": month_of(day), "message": "기록이 초기화되었습니다."})
