from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .model import Session

_FIELDS = ("title", "speaker", "time", "location", "description", "capacity")


def session_json(s: Session) -> dict:
    return {
        "id": s.session_id,
        "title": s.title,
        "speaker": s.speaker,
        "time": s.time,
        "location": s.location,
        "description": s.description,
        "capacity": s.capacity,
    }


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "")

    def _fields() -> dict:
        data = json_body()
        return {k: data.get(k) for k in _FIELDS}

    @app.route(f"{prefix}/sessions", methods=["POST"], endpoint="create_session")
    def create_session():
        session = container.session_service.create(**_fields())
        return jsonify({**session_json(session), "message": "Session created successfully"}), 201

    @app.route(f"{prefix}/sessions", methods=["GET"], endpoint="list_sessions")
    def list_sessions():
        return jsonify([session_json(s) for s in container.session_service.list()])

    @app.route(f"{prefix}/sessions/<int:session_id>", methods=["GET"], endpoint="get_session")
    def get_session(session_id: int):
        return jsonify(session_json(container.session_service.get(session_id)))

    @app.route(f"{prefix}/sessions/<int:session_id>", methods=["PUT"], endpoint="update_session")
    def update_session(session_id: int):
        session = container.session_service.update(session_id, **_fields())
        return jsonify({**session_json(session), "message": "Session updated successfully"})

    @app.route(f"{prefix}/sessions/<int:session_id>", methods=["DELETE"], endpoint="delete_session")
    def delete_session(session_id: int):
        container.session_service.delete(session_id)
        return jsonify({"message": "Session deleted successfully"})
