from __future__ import annotations

import json
import logging

from flask import Flask, Response, jsonify, request, stream_with_context

from ..common.auth import current_user_id, login_required
from ..common.validators import require_int
from ..core.exceptions import DomainError
from ..container import Container
from .connection import QueueConnection

logger = logging.getLogger(__name__)


def _sse(event: str, payload: dict) -> str:
    return f"event: {event}\ndata: {json.dumps(payload)}\n\n"


def register(app: Flask, container: Container) -> None:
    relay = container.notification_relay

    @app.route("/api/notifications", methods=["POST"], endpoint="notifications_send")
    @login_required
    def send_notification():
        data = request.get_json(silent=True) or {}
        try:
            receiver_id = require_int(data.get("receiverId"), "receiverId")
            delivery = relay.send(receiver_id, data.get("message", ""), data.get("type"))
        except DomainError as e:
            return jsonify({"msg": str(e)}), e.status_code
        except Exception as e:
            logger.exception("Error saving/sending notification")
            return jsonify({"error": str(e)}), 500
        return jsonify({"notification": delivery.notification.to_payload(), "delivered": delivery.delivered}), 201

    @app.route("/api/notifications", methods=["GET"], endpoint="notifications_mine")
    @login_required
    def my_notifications():
        try:
            items = relay.list_for_user(current_user_id())
        except DomainError as e:
            return jsonify({"msg": str(e)}), e.status_code
        except Exception as e:
            logger.exception("Error fetching notifications")
            return jsonify({"error": str(e)}), 500
        return jsonify([n.to_payload() for n in items])

    @app.route("/api/notifications/<int:notification_id>/read", methods=["PATCH"], endpoint="notifications_read")
    @login_required
    def mark_read(notification_id: int):
        try:
            relay.mark_read(notification_id, current_user_id())
        except DomainError as e:
            return jsonify({"msg": str(e)}), e.status_code
        except Exception as e:
            logger.exception("Error updating notification %s", notification_id)
            return jsonify({"error": str(e)}), 500
        return jsonify({"msg": "Marked as read"})

    @app.route("/api/notifications/stream", methods=["GET"], endpoint="notifications_stream")
    @login_required
    def stream():
        try:
            user_id = current_user_id()
        except DomainError as e:
            return jsonify({"msg": str(e)}), e.status_code
        keepalive = float(app.config.get("NOTIFICATION_KEEPALIVE_SECONDS", 15))
        connection = QueueConnection()

        # Register on first read; an unread body (HEAD, early close) must not leave a mapping.
        def generate():
            try:
                relay.register(user_id, connection)
                yield _sse("registered", {"userId": user_id})
                for item in connection.events(timeout=keepalive):
                    if item is None:
                        yield ": keepalive\n\n"
                    else:
                        yield _sse(*item)
            finally:
                connection.close()
                relay.disconnect(connection)

        return Response(stream_with_context(generate()), mimetype="text/event-stream")
