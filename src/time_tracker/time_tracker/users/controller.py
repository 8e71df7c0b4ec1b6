from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import admin_required, current_user, error, json_body, login_required, parse_entity
from ..container import Container
from ..store.codec import user_from_dict, user_to_dict
from .model import User


def _out(user: User) -> dict:
    return user_to_dict(user, include_password=False)


def _merge(existing: User, changes: dict) -> User:
    """Apply a partial JSON update on top of the stored record (password excluded)."""
    data = user_to_dict(existing, include_password=False)
    data.update(changes)
    data["id"] = existing.user_id
    return parse_entity(user_from_dict, data)


def register(app: Flask, container: Container) -> None:
    def remember(user: User) -> None:
        session["user_id"] = user.user_id
        session["name"] = user.name

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        user = container.auth_service.login(str(body.get("email", "")), str(body.get("password", "")))
        if not user:
            return error("Invalid email or password", 401)
        session.clear()
        remember(user)
        return jsonify(_out(user))

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify(_out(current_user()))

    @app.route("/api/me", methods=["PUT"], endpoint="update_profile")
    @login_required
    def update_profile():
        updated = container.user_service.update_profile(_merge(current_user(), json_body()))
        if not updated:
            return error("User not found", 404)
        remember(updated)
        return jsonify(_out(updated))

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @admin_required
    def list_users():
        return jsonify([_out(u) for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="add_member")
    @admin_required
    def add_member():
        data = dict(json_body())
        data["id"] = ""
        member = container.user_service.add_member(parse_entity(user_from_dict, data))
        return jsonify(_out(member)), 201

    @app.route("/api/users/<user_id>", methods=["PUT"], endpoint="update_member")
    @admin_required
    def update_member(user_id: str):
        existing = container.user_service.get_user(user_id)
        if not existing:
            return error("User not found", 404)
        updated = container.user_service.update_member(_merge(existing, json_body()))
        if not updated:
            return error("Cannot demote the last admin", 409)
        return jsonify(_out(updated))

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="delete_member")
    @admin_required
    def delete_member(user_id: str):
        if not container.user_service.get_user(user_id):
            return error("User not found", 404)
        if not container.user_service.delete_member(user_id):
            return error("Cannot delete the last admin", 409)
        return jsonify({"success": True})
