from __future__ import annotations

from datetime import date
from functools import wraps
from typing import Optional

from flask import current_app, jsonify, request, session

from ..core.exceptions import AuthorizationError, ValidationError
from ..members.roles import require_report_access
from .datetime_utils import parse_iso_date


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session or "organization_id" not in session:
            return jsonify({"error": "Please sign in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def reports_required(view):
    """Allow supervisors and above; everyone else gets 403."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            require_report_access(session.get("role"))
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403

        return view(*args, **kwargs)

    return login_required(wrapper)


def date_arg(name: str, default: Optional[date] = None) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return default
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"Invalid {name} date: {value}") from None


def csv_response(payload: str, filename: str):
    return current_app.response_class(
        payload.encode("utf-8-sig"),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
