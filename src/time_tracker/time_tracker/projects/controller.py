from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, error, json_body, login_required, parse_entity
from ..container import Container
from ..store.codec import project_from_dict, project_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    @login_required
    def list_projects():
        return jsonify([project_to_dict(p) for p in container.project_service.list_projects()])

    @app.route("/api/projects/<project_id>", methods=["GET"], endpoint="get_project")
    @login_required
    def get_project(project_id: str):
        project = container.project_service.get_project(project_id)
        if not project:
            return error("Project not found", 404)
        return jsonify(project_to_dict(project))

    @app.route("/api/projects", methods=["POST"], endpoint="add_project")
    @admin_required
    def add_project():
        data = dict(json_body())
        data["id"] = ""
        project = container.project_service.add_project(parse_entity(project_from_dict, data))
        return jsonify(project_to_dict(project)), 201

    @app.route("/api/projects/<project_id>", methods=["PUT"], endpoint="update_project")
    @admin_required
    def update_project(project_id: str):
        existing = container.project_service.get_project(project_id)
        if not existing:
            return error("Project not found", 404)
        data = project_to_dict(existing)
        data.update(json_body())
        data["id"] = project_id
        updated = container.project_service.update_project(parse_entity(project_from_dict, data))
        if not updated:
            return error("Project not found", 404)
        return jsonify(project_to_dict(updated))

    @app.route("/api/projects/<project_id>", methods=["DELETE"], endpoint="delete_project")
    @admin_required
    def delete_project(project_id: str):
        if not container.project_service.delete_project(project_id):
            return error("Project not found", 404)
        return jsonify({"success": True})
