from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.auth import admin_required, current_user_id, login_required
from ..core.exceptions import DomainError
from ..container import Container
from .model import MarkResult
from .service import format_hours

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/mark-in", methods=["POST"], endpoint="attendance_mark_in")
    @login_required
    def mark_in():
        try:
            outcome = service.mark_in(current_user_id())
        except DomainError as e:
            return jsonify({"msg": str(e)}), e.status_code
        except Exception as e:
            logger.exception("Error saving attendance for employee %s", session.get("user_id"))
            return jsonify({"error": str(e)}), 500

        if outcome.result == MarkResult.ALREADY_MARKED:
            return jsonify({"msg": "Already marked in."}), 200
        return jsonify({"msg": "Login time recorded", "attendance": service.to_payload(outcome.record)}), 201

    @app.route("/api/attendance/mark-out", methods=["POST"], endpoint="attendance_mark_out")
    @login_required
    def mark_out():
        try:
            outcome = service.mark_out(current_user_id())
        except DomainError as e:
            return jsonify({"msg": str(e)}), e.status_code
        except Exception as e:
            logger.exception("Error marking out employee %s", session.get("user_id"))
            return jsonify({"error": str(e)}), 500

        if outcome.result == MarkResult.ALREADY_MARKED:
            return jsonify({"msg": "Already marked out"}), 200
        return (
            jsonify(
                {
                    "msg": "Logout time recorded",
                    "attendance": service.to_payload(outcome.record),
                    "status": outcome.status.value,
                    "hoursWorked": format_hours(outcome.hours_worked),
                }
            ),
            200,
        )

    @app.route("/api/attendance/my", methods=["GET"], endpoint="attendance_my")
    @login_required
    def my_attendance():
        try:
            records = service.list_mine(current_user_id())
        except DomainError as e:
            return jsonify({"msg": str(e)}), e.status_code
        except Exception:
            logger.exception("Error fetching attendance for employee %s", session.get("user_id"))
            return jsonify({"message": "Error fetching your attendance"}), 500
        return jsonify([service.to_payload(r) for r in records])

    @app.route("/api/attendance/all", methods=["GET"], endpoint="attendance_all")
    @admin_required
    def all_attendance():
        try:
            records = service.list_all()
        except Exception as e:
            logger.exception("Error fetching attendance")
            return jsonify({"error": str(e)}), 500
        return jsonify([service.to_payload(r) for r in records]), 200
