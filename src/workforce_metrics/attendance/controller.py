from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local
from ..common.web import csv_response, date_arg, reports_required
from ..core.exceptions import ValidationError
from ..container import Container
from .aggregator import AttendanceFilter

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _build_report():
        local_date = date_arg("date", now_local().date())
        filters = AttendanceFilter(
            role=request.args.get("role") or None,
            search=request.args.get("search") or None,
            status=request.args.get("status") or None,
        )
        return container.attendance_report_service.build_daily_report(
            str(session["organization_id"]),
            local_date,
            filters=filters,
        )

    @app.route("/reports/attendance", methods=["GET"], endpoint="attendance_report")
    @reports_required
    def attendance_report():
        try:
            report = _build_report()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(report.as_dict())

    @app.route("/reports/attendance.csv", methods=["GET"], endpoint="attendance_report_csv")
    @reports_required
    def attendance_report_csv():
        try:
            report = _build_report()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        rows = container.attendance_report_service.export_rows(report)
        exported = {}

        def sink(payload: str, filename: str) -> None:
            exported["payload"] = payload
            exported["filename"] = filename

        if container.report_exporter.export(rows, f"attendance_report_{report.local_date.isoformat()}", sink) is None:
            return "", 204

        logger.info("Attendance export for %s: %s rows", report.local_date, len(rows))
        return csv_response(exported["payload"], exported["filename"])
