from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import current_user_id, json_body, login_required, role_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember"))
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value

        app.logger.info("User user_id=%s logged in", s_user.user_id)
        return jsonify(container.user_service.get(s_user.user_id).to_public_dict())

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/api/user", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        return jsonify(container.user_service.get(current_user_id()).to_public_dict())

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @role_required(Role.ADMIN)
    def list_users():
        return jsonify([u.to_public_dict() for u in container.user_service.list_users()])

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @role_required(Role.ADMIN)
    def create_user():
        data = json_body()
        user = container.user_service.create_account(
            name=data.get("name", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            password_confirmation=data.get("password_confirmation", ""),
            role=data.get("role", ""),
        )
        return jsonify(user.to_public_dict()), 201

    @app.route("/api/users/<int:user_id>/role", methods=["PUT"], endpoint="change_user_role")
    @role_required(Role.ADMIN)
    def change_user_role(user_id: int):
        user = container.user_service.change_role(user_id=user_id, role=json_body().get("role", ""))
        return jsonify(user.to_public_dict())

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @role_required(Role.ADMIN)
    def delete_user(user_id: int):
        container.user_service.delete_user(user_id=user_id)
        if user_id == current_user_id():
            session.clear()
        return jsonify({"message": "User deleted successfully"})
