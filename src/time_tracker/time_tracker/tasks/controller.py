from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import (
    admin_required,
    current_user_id,
    error,
    is_admin_session,
    json_body,
    login_required,
    parse_entity,
)
from ..container import Container
from ..core.exceptions import AuthorizationError
from ..store.codec import task_from_dict, task_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", methods=["GET"], endpoint="list_tasks")
    @login_required
    def list_tasks():
        if is_admin_session():
            tasks = container.task_service.list_tasks()
        else:
            tasks = container.task_service.list_tasks_for_user(current_user_id())
        return jsonify([task_to_dict(t) for t in tasks])

    @app.route("/api/tasks/<task_id>", methods=["GET"], endpoint="get_task")
    @login_required
    def get_task(task_id: str):
        task = container.task_service.get_task(task_id)
        if not task:
            return error("Task not found", 404)
        if not is_admin_session() and task.assignee_id != current_user_id():
            raise AuthorizationError("This task is assigned to another user")
        return jsonify(task_to_dict(task))

    @app.route("/api/tasks", methods=["POST"], endpoint="add_task")
    @admin_required
    def add_task():
        data = dict(json_body())
        data["id"] = ""
        task = container.task_service.add_task(parse_entity(task_from_dict, data))
        return jsonify(task_to_dict(task)), 201

    @app.route("/api/tasks/<task_id>", methods=["PUT"], endpoint="update_task")
    @admin_required
    def update_task(task_id: str):
        existing = container.task_service.get_task(task_id)
        if not existing:
            return error("Task not found", 404)
        data = task_to_dict(existing)
        data.update(json_body())
        data["id"] = task_id
        updated = container.task_service.update_task(parse_entity(task_from_dict, data))
        if not updated:
            return error("Task not found", 404)
        return jsonify(task_to_dict(updated))

    @app.route("/api/tasks/<task_id>", methods=["DELETE"], endpoint="delete_task")
    @admin_required
    def delete_task(task_id: str):
        if not container.task_service.delete_task(task_id):
            return error("Task not found", 404)
        return jsonify({"success": True})
