from __future__ import annotations

import base64
import binascii

from flask import Flask, jsonify, request

from ..common.web import handle_domain_errors
from ..container import Container
from ..core.exceptions import InvalidInput
from ..geo.model import GeoPoint


def _decode_photo(value) -> bytes:
    """Accept raw base64 or a ``data:image/...;base64,`` URL."""
    if not value:
        return b""
    text = str(value)
    if text.startswith("data:"):
        text = text.split(",", 1)[-1]
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidInput("Photo is not valid base64")


def _parse_point(data: dict):
    lat, lng = data.get("lat"), data.get("lng")
    if lat is None or lng is None:
        return None
    try:
        return GeoPoint(float(lat), float(lng))
    except (TypeError, ValueError):
        raise InvalidInput("Coordinates must be numbers")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events", methods=["POST"], endpoint="submit_event")
    @handle_domain_errors
    def submit_event():
        data = request.get_json(silent=True) or {}
        event = container.attendance_service.submit_event(
            data.get("employee_id"),
            data.get("kind", ""),
            _decode_photo(data.get("photo")),
            _parse_point(data),
        )
        return jsonify({"success": True, "event": event.to_dict()}), 201

    @app.route("/api/events/history", methods=["GET"], endpoint="event_history")
    @handle_domain_errors
    def event_history():
        employee_id = (request.args.get("employee_id") or "").strip()
        if not employee_id:
            raise InvalidInput("employee_id is required")
        events = container.attendance_service.list_for_employee(employee_id, limit=request.args.get("limit", 15, type=int))
        return jsonify({"success": True, "events": [e.to_dict() for e in events]})

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify({"success": True, "employees": [e.to_dict() for e in container.employee_service.list_employees()]})
