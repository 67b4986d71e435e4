from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local
from ..common.web import csv_response, date_arg, reports_required
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import ValidationError
from ..container import Container
from .model import DateRange, ReportFilters

EXPORT_NAMES = {
    "users": "user-performance-report",
    "projects": "project-performance-report",
    "team": "team-performance-report",
}


def register(app: Flask, container: Container) -> None:
    service = container.performance_report_service

    def _filters() -> ReportFilters:
        today = now_local().date()
        end = date_arg("end", today)
        start = date_arg("start", end - timedelta(days=DEFAULT_REPORT_DAYS))
        if start > end:
            raise ValidationError("start must not be after end")

        return ReportFilters(
            date_range=DateRange.from_dates(start, end),
            user_id=request.args.get("user_id") or None,
            project_id=request.args.get("project_id") or None,
            team_id=request.args.get("team_id") or None,
        )

    @app.route("/reports/performance", methods=["GET"], endpoint="performance_report")
    @reports_required
    def performance_report():
        try:
            filters = _filters()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        report = service.generate_report(str(session["organization_id"]), filters)
        return jsonify(report.as_dict())

    @app.route("/reports/performance/<section>.csv", methods=["GET"], endpoint="performance_report_csv")
    @reports_required
    def performance_report_csv(section: str):
        if section not in EXPORT_NAMES:
            return jsonify({"error": f"Unknown report section: {section}"}), 404
        try:
            filters = _filters()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        organization_id = str(session["organization_id"])
        if section == "users":
            metrics = service.get_user_performance(organization_id, filters.date_range, filters.user_id)
        elif section == "projects":
            metrics = service.get_project_performance(organization_id, filters.date_range, filters.project_id)
        else:
            metrics = service.get_team_performance(organization_id, filters.date_range)

        exported = {}

        def sink(payload: str, filename: str) -> None:
            exported["payload"] = payload
            exported["filename"] = filename

        rows = [m.as_dict() for m in metrics]
        if container.report_exporter.export(rows, EXPORT_NAMES[section], sink) is None:
            return "", 204
        return csv_response(exported["payload"], exported["filename"])

    @app.route("/projects/<project_id>/health", methods=["GET"], endpoint="project_health")
    @reports_required
    def project_health(project_id: str):
        summary = service.get_project_health(project_id)
        return jsonify({"project_id": project_id, **summary.as_dict()})
