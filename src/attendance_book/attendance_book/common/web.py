"""Helpers shared by the feature controllers (JSON responses, guards, parsing)."""
from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.enums import ViewMode
from ..core.exceptions import AlreadyCheckedInError, ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

SESSION_CLASS_ID = "class_id"
SESSION_VIEW_MODE = "view_mode"
SESSION_QR_DAY = "qr_day"
SESSION_QR_SLOT = "qr_slot"
SESSION_BASE_URL = "base_url"


def json_ok(payload: dict | None = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def json_error(message: str, status: int, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status


def request_data() -> dict:
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def current_class_id() -> str:
    return str(session[SESSION_CLASS_ID])


def api_view(view):
    """Map domain errors onto JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except AlreadyCheckedInError as e:
            return json_error(str(e), 409, already_checked_in=True)
        except ConflictError as e:
            return json_error(str(e), 409)
        except Exception:
            logger.exception("unhandled error in %s", request.path)
            return json_error("서버 오류가 발생했습니다", 500)

    return wrapper


def class_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if SESSION_CLASS_ID not in session:
            return json_error("클래스 코드를 먼저 입력해주세요", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    """Selected class and admin (dashboard) mode."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if SESSION_CLASS_ID not in session:
            return json_error("클래스 코드를 먼저 입력해주세요", 401)
        if session.get(SESSION_VIEW_MODE) != ViewMode.ADMIN.value:
            return json_error("관리자 화면에서만 사용할 수 있습니다", 403)
        return view(*args, **kwargs)

    return wrapper


def member_required(view):
    """Opened through a QR link: class and slot are in the session."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if SESSION_CLASS_ID not in session or SESSION_QR_SLOT not in session:
            return json_error("QR 코드로 접속해주세요", 401)
        return view(*args, **kwargs)

    return wrapper
