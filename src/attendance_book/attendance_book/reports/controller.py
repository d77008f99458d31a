from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import month_of, parse_month
from ..common.web import admin_required, api_view, current_class_id, json_error, json_ok
from ..container import Container
from ..core.enums import ReportView
from .exporter import XLSX_MIMETYPE, export_filename, to_csv_bytes, to_xlsx_bytes


def register(app: Flask, container: Container) -> None:
    def _report(view: str):
        try:
            report_view = ReportView(view)
        except ValueError:
            return None
        month = parse_month(request.args.get("month") or month_of(container.clock().date()))
        return container.report_service.build(current_class_id(), month, report_view)

    @app.route("/api/reports/<view>", methods=["GET"], endpoint="report")
    @admin_required
    @api_view
    def report(view: str):
        data = _report(view)
        if data is None:
            return json_error("알 수 없는 리포트입니다", 404)
        return json_ok(
            {
                "month": data.month,
                "view": data.view.value,
                "session_count": data.session_count,
                "rows": data.rows,
            }
        )

    @app.route("/reports/<view>.csv", methods=["GET"], endpoint="report_csv")
    @admin_required
    @api_view
    def report_csv(view: str):
        data = _report(view)
        if data is None:
            return json_error("알 수 없는 리포트입니다", 404)
        return app.response_class(
            to_csv_bytes(data),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export_filename(data, 'csv')}"},
        )

    @app.route("/reports/<view>.xlsx", methods=["GET"], endpoint="report_xlsx")
    @admin_required
    @api_view
    def report_xlsx(view: str):
        data = _report(view)
        if data is None:
            return json_error("알 수 없는 리포트입니다", 404)
        return app.response_class(
            to_xlsx_bytes(data),
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={export_filename(data, 'xlsx')}"},
        )
