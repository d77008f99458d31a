from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, api_view, current_class_id, json_ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/members", methods=["GET"], endpoint="list_members")
    @admin_required
    @api_view
    def list_members():
        members = container.member_service.list_members(current_class_id())
        return json_ok({"members": [m.to_dict() for m in members]})

    @app.route("/api/members", methods=["POST"], endpoint="add_member")
    @admin_required
    @api_view
    def add_member():
        member = container.member_service.add_member(current_class_id(), str(request_data().get("name") or ""))
        return json_ok({"member": member.to_dict(), "message": f"{member.name} 회원이 등록되었습니다."}, 201)

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="delete_member")
    @admin_required
    @api_view
    def delete_member(member_id: str):
        member = container.member_service.delete_member(current_class_id(), member_id)
        return json_ok({"message": f"{member.name} 회원이 삭제되었습니다."})
