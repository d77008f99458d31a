from __future__ import annotations

import io

from flask import Flask, request, send_file, session

from ..common.validators import require_non_empty
from ..common.web import (
    SESSION_BASE_URL,
    SESSION_QR_DAY,
    SESSION_QR_SLOT,
    SESSION_VIEW_MODE,
    admin_required,
    api_view,
    current_class_id,
    json_ok,
    request_data,
)
from ..container import Container
from ..core.enums import ViewMode


def register(app: Flask, container: Container) -> None:
    def _base_url() -> str:
        return container.qr_service.resolve_base_url(session.get(SESSION_BASE_URL), request.url_root)

    def _template_from_args():
        day = require_non_empty(request.args.get("day", ""), "요일")
        slot = require_non_empty(request.args.get("slot", ""), "차수")
        return container.qr_service.build_template(current_class_id(), day, slot, base_url=_base_url())

    @app.route("/api/qr/base-url", methods=["GET"], endpoint="get_base_url")
    @admin_required
    def get_base_url():
        return json_ok({"custom_base_url": session.get(SESSION_BASE_URL, ""), "effective_base_url": _base_url()})

    @app.route("/api/qr/base-url", methods=["PUT"], endpoint="set_base_url")
    @admin_required
    def set_base_url():
        session[SESSION_BASE_URL] = str(request_data().get("base_url") or "").strip()
        return json_ok({"custom_base_url": session[SESSION_BASE_URL], "effective_base_url": _base_url()})

    @app.route("/api/qr/templates", methods=["GET"], endpoint="qr_templates")
    @admin_required
    @api_view
    def qr_templates():
        templates = container.qr_service.weekly_templates(current_class_id(), base_url=_base_url())
        return json_ok({"templates": [t.to_dict() for t in templates]})

    @app.route("/api/qr/link", methods=["GET"], endpoint="qr_link")
    @admin_required
    @api_view
    def qr_link():
        return json_ok({"template": _template_from_args().to_dict()})

    @app.route("/qr.png", methods=["GET"], endpoint="qr_png")
    @admin_required
    @api_view
    def qr_png():
        png = container.qr_service.render_png(_template_from_args().link)
        return send_file(io.BytesIO(png), mimetype="image/png")

    @app.route("/api/qr/simulate", methods=["POST"], endpoint="qr_simulate")
    @admin_required
    @api_view
    def qr_simulate():
        """Open the member view for a day/slot without scanning."""
        data = request_data()
        template = container.qr_service.build_template(
            current_class_id(),
            str(data.get("day") or ""),
            str(data.get("slot") or ""),
            base_url=_base_url(),
        )
        session[SESSION_VIEW_MODE] = ViewMode.MEMBER.value
        session[SESSION_QR_DAY] = template.day
        session[SESSION_QR_SLOT] = template.slot
        return json_ok({"template": template.to_dict()})
