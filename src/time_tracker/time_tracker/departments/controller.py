from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, error, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @login_required
    def list_departments():
        return jsonify(list(container.department_service.list_departments()))

    @app.route("/api/departments", methods=["POST"], endpoint="add_department")
    @admin_required
    def add_department():
        name = container.department_service.add_department(str(json_body().get("name", "")))
        return jsonify({"name": name}), 201

    @app.route("/api/departments/<path:name>", methods=["DELETE"], endpoint="delete_department")
    @admin_required
    def delete_department(name: str):
        if not container.department_service.delete_department(name):
            return error("Department not found", 404)
        return jsonify({"success": True})
