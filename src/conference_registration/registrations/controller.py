from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_timestamp
from ..common.http import json_body
from ..container import Container
from ..sessions.controller import session_json


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "")

    @app.route(f"{prefix}/registrations", methods=["POST"], endpoint="create_registration")
    def create_registration():
        data = json_body()
        # Accept both snake_case and camelCase keys.
        attendee_id = data.get("attendee_id", data.get("attendeeId"))
        session_id = data.get("session_id", data.get("sessionId"))

        r = container.registration_service.register(attendee_id, session_id)
        return jsonify({
            "id": r.registration_id,
            "attendee_id": r.attendee_id,
            "session_id": r.session_id,
            "registration_date": format_timestamp(r.registration_date),
            "message": "Successfully registered for session",
        }), 201

    @app.route(
        f"{prefix}/registrations/<int:attendee_id>/<int:session_id>",
        methods=["DELETE"],
        endpoint="delete_registration",
    )
    def delete_registration(attendee_id: int, session_id: int):
        container.registration_service.unregister(attendee_id, session_id)
        return jsonify({"message": "Successfully unregistered from session"})

    @app.route(f"{prefix}/sessions/<int:session_id>/registrations", methods=["GET"], endpoint="session_registrations")
    def session_registrations(session_id: int):
        rows = container.registration_service.list_for_session(session_id)
        return jsonify([
            {
                "id": r.registration_id,
                "attendee_id": r.attendee_id,
                "session_id": r.session_id,
                "registration_date": format_timestamp(r.registration_date),
                "attendee_name": r.attendee_name,
                "attendee_email": r.attendee_email,
            }
            for r in rows
        ])

    @app.route(f"{prefix}/attendees/<int:attendee_id>/registrations", methods=["GET"], endpoint="attendee_registrations")
    def attendee_registrations(attendee_id: int):
        rows = container.registration_service.list_for_attendee(attendee_id)
        return jsonify([
            {
                "id": r.registration_id,
                "attendee_id": r.attendee_id,
                "session_id": r.session_id,
                "registration_date": format_timestamp(r.registration_date),
                "session_title": r.session_title,
                "speaker": r.speaker,
                "time": r.time,
                "location": r.location,
            }
            for r in rows
        ])

    @app.route(f"{prefix}/sessions/<int:session_id>/details", methods=["GET"], endpoint="session_details")
    def session_details(session_id: int):
        details = container.registration_service.session_details(session_id)
        return jsonify({
            **session_json(details.session),
            "registered": details.registered,
            "available": details.available,
        })
