from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/training-analytics", methods=["GET"], endpoint="training_analytics")
    @login_required
    def training_analytics():
        summary = container.analytics_service.summary()
        return jsonify(
            {
                "totalSessions": summary.total_sessions,
                "totalParticipants": summary.total_participants,
                "averageAttendance": summary.average_attendance,
                "upcomingSessions": summary.upcoming_sessions,
            }
        )
