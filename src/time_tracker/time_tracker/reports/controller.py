from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_enum
from ..common.web import current_user, login_required
from ..container import Container
from ..core.enums import ReportPeriod
from ..store.codec import task_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports", methods=["GET"], endpoint="reports")
    @login_required
    def reports():
        period = require_enum(ReportPeriod, request.args.get("period", ReportPeriod.ALL.value), "period")

        report = container.report_service.build(current_user(), period)
        return jsonify(
            {
                "period": report.period.value,
                "projectHours": report.project_hours,
                "memberHours": report.member_hours,
                "taskHours": report.task_hours,
                "totalSeconds": report.total_seconds,
                "totalTime": report.total_time,
                "completedTasks": [task_to_dict(t) for t in report.completed_tasks],
            }
        )
