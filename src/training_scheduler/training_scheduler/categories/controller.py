from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, login_required, role_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/training-categories", methods=["GET"], endpoint="list_categories")
    @login_required
    def list_categories():
        return jsonify([c.to_dict() for c in container.category_service.list_categories()])

    @app.route("/api/training-categories", methods=["POST"], endpoint="create_category")
    @role_required(Role.ADMIN)
    def create_category():
        data = json_body()
        category = container.category_service.create(
            name=data.get("name", ""),
            description=data.get("description"),
            color=data.get("color"),
        )
        return jsonify(category.to_dict()), 201

    @app.route("/api/training-categories/<int:category_id>", methods=["PUT"], endpoint="update_category")
    @role_required(Role.ADMIN)
    def update_category(category_id: int):
        data = json_body()
        category = container.category_service.update(
            category_id=category_id,
            name=data.get("name", ""),
            description=data.get("description"),
            color=data.get("color"),
        )
        return jsonify(category.to_dict())

    @app.route("/api/training-categories/<int:category_id>", methods=["DELETE"], endpoint="delete_category")
    @role_required(Role.ADMIN)
    def delete_category(category_id: int):
        container.category_service.delete(category_id)
        return jsonify({"message": "Training category deleted successfully"})
