from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_timestamp
from ..common.http import json_body
from ..container import Container
from .model import Attendee


def attendee_json(a: Attendee) -> dict:
    return {
        "id": a.attendee_id,
        "name": a.name,
        "email": a.email,
        "phone": a.phone,
        "registration_date": format_timestamp(a.registration_date),
    }


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "")

    @app.route(f"{prefix}/attendees", methods=["POST"], endpoint="create_attendee")
    def create_attendee():
        data = json_body()
        attendee = container.attendee_service.create(
            name=data.get("name"),
            email=data.get("email"),
            phone=data.get("phone"),
        )
        return jsonify({**attendee_json(attendee), "message": "Attendee created successfully"}), 201

    @app.route(f"{prefix}/attendees", methods=["GET"], endpoint="list_attendees")
    def list_attendees():
        return jsonify([attendee_json(a) for a in container.attendee_service.list()])

    @app.route(f"{prefix}/attendees/<int:attendee_id>", methods=["GET"], endpoint="get_attendee")
    def get_attendee(attendee_id: int):
        return jsonify(attendee_json(container.attendee_service.get(attendee_id)))

    @app.route(f"{prefix}/attendees/<int:attendee_id>", methods=["PUT"], endpoint="update_attendee")
    def update_attendee(attendee_id: int):
        data = json_body()
        attendee = container.attendee_service.update(
            attendee_id,
            name=data.get("name"),
            email=data.get("email"),
            phone=data.get("phone"),
        )
        return jsonify({**attendee_json(attendee), "message": "Attendee updated successfully"})

    @app.route(f"{prefix}/attendees/<int:attendee_id>", methods=["DELETE"], endpoint="delete_attendee")
    def delete_attendee(attendee_id: int):
        container.attendee_service.delete(attendee_id)
        return jsonify({"message": "Attendee deleted successfully"})
