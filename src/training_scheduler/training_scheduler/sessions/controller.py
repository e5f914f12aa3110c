from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_user_id, json_body, login_required, role_required
from ..container import Container
from ..core.enums import Role

_SESSION_FIELDS = ("start_time", "end_time", "max_participants", "notes", "category_id")


def _session_fields(data: dict) -> dict:
    return {name: data.get(name) for name in _SESSION_FIELDS}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/training-sessions", methods=["GET"], endpoint="list_training_sessions")
    @login_required
    def list_training_sessions():
        sessions = container.session_service.list_sessions()
        categories = container.category_service.list_categories()
        return jsonify(
            {
                "sessions": [v.to_dict() for v in sessions],
                "categories": [c.to_dict() for c in categories],
            }
        )

    @app.route("/api/training-sessions/<int:session_id>", methods=["GET"], endpoint="get_training_session")
    @login_required
    def get_training_session(session_id: int):
        return jsonify(container.session_service.get_view(session_id).to_dict())

    @app.route("/api/training-sessions", methods=["POST"], endpoint="create_training_session")
    @role_required(Role.TRAINER, Role.ADMIN)
    def create_training_session():
        view = container.session_service.create(trainer_id=current_user_id(), **_session_fields(json_body()))
        return jsonify(view.to_dict()), 201

    @app.route("/api/training-sessions/<int:session_id>", methods=["PUT"], endpoint="update_training_session")
    @login_required
    def update_training_session(session_id: int):
        view = container.session_service.update(
            session_id=session_id,
            acting_user_id=current_user_id(),
            **_session_fields(json_body()),
        )
        return jsonify(view.to_dict())

    @app.route("/api/training-sessions/<int:session_id>", methods=["DELETE"], endpoint="delete_training_session")
    @login_required
    def delete_training_session(session_id: int):
        container.session_service.delete(session_id=session_id, acting_user_id=current_user_id())
        return jsonify({"message": "Training session deleted successfully"})

    @app.route("/api/training-sessions/<int:session_id>/register", methods=["POST"], endpoint="register_for_session")
    @login_required
    def register_for_session(session_id: int):
        view = container.registration_service.register(session_id=session_id, user_id=current_user_id())
        return jsonify(view.to_dict())

    @app.route(
        "/api/training-sessions/<int:session_id>/register",
        methods=["DELETE"],
        endpoint="unregister_from_session",
    )
    @login_required
    def unregister_from_session(session_id: int):
        view = container.registration_service.unregister(session_id=session_id, user_id=current_user_id())
        return jsonify(view.to_dict())
