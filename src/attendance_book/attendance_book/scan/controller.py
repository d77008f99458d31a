from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.web import admin_required, api_view, current_class_id, json_ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/scan", methods=["POST"], endpoint="scan_ingest")
    @admin_required
    @api_view
    def scan_ingest():
        data = request_data()
        result = container.scan_service.ingest(
            current_class_id(),
            parse_iso_date(str(data.get("date") or "")),
            str(data.get("slot") or ""),
            str(data.get("text") or ""),
        )
        return json_ok({**result.to_dict(), "message": "종이 명단 스캔 데이터 적재 완료"})
