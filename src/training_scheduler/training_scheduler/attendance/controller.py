from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_user_id, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance-records/<int:record_id>", methods=["PUT"], endpoint="update_attendance_record")
    @login_required
    def update_attendance_record(record_id: int):
        updated = container.attendance_service.set_status(
            record_id=record_id,
            new_status=json_body().get("status"),
            acting_user_id=current_user_id(),
        )
        return jsonify(updated.to_dict())

    @app.route("/api/attendance/heatmap", methods=["GET"], endpoint="attendance_heatmap")
    @login_required
    def attendance_heatmap():
        return jsonify(container.attendance_service.heatmap(current_user_id()))

    @app.route("/api/attendance/attended-trainings", methods=["GET"], endpoint="attended_trainings")
    @login_required
    def attended_trainings():
        sessions = container.attendance_service.attended_sessions(current_user_id())
        return jsonify([s.to_dict() for s in sessions])
