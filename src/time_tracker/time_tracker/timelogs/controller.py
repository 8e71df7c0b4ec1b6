from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_clock
from ..common.web import current_user_id, error, is_admin_session, login_required
from ..container import Container
from ..core.exceptions import AuthorizationError
from ..store.codec import time_log_to_dict


def register(app: Flask, container: Container) -> None:
    timer = container.timer_service

    def owned_log(log_id: str):
        log = container.time_logs_repo.get_by_id(log_id)
        if log and log.user_id != current_user_id():
            raise AuthorizationError("This timer belongs to another user")
        return log

    def transition(log_id: str, action):
        if not owned_log(log_id):
            return error("Time log not found", 404)
        log = action(log_id)
        if not log:
            return error("Timer cannot do that from its current state", 409)
        return jsonify(time_log_to_dict(log))

    @app.route("/api/timelogs", methods=["GET"], endpoint="list_time_logs")
    @login_required
    def list_time_logs():
        if is_admin_session():
            logs = timer.list_time_logs()
        else:
            logs = timer.list_time_logs_for_user(current_user_id())
        return jsonify([time_log_to_dict(log) for log in logs])

    @app.route("/api/tasks/<task_id>/timer", methods=["GET"], endpoint="active_timer")
    @login_required
    def active_timer(task_id: str):
        log = timer.get_active_log(task_id, current_user_id())
        seconds = timer.session_seconds(log) if log else 0
        return jsonify(
            {
                "log": time_log_to_dict(log) if log else None,
                "sessionSeconds": seconds,
                "display": format_clock(seconds),
            }
        )

    @app.route("/api/tasks/<task_id>/timer/start", methods=["POST"], endpoint="start_timer")
    @login_required
    def start_timer(task_id: str):
        if not container.task_service.get_task(task_id):
            return error("Task not found", 404)
        log = timer.start(task_id, current_user_id())
        return jsonify(time_log_to_dict(log)), 201

    @app.route("/api/timelogs/<log_id>/pause", methods=["POST"], endpoint="pause_timer")
    @login_required
    def pause_timer(log_id: str):
        return transition(log_id, timer.pause)

    @app.route("/api/timelogs/<log_id>/resume", methods=["POST"], endpoint="resume_timer")
    @login_required
    def resume_timer(log_id: str):
        return transition(log_id, timer.resume)

    @app.route("/api/timelogs/<log_id>/stop", methods=["POST"], endpoint="stop_timer")
    @login_required
    def stop_timer(log_id: str):
        return transition(log_id, timer.stop)
