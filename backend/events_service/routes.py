"""
Events service routes: create, list, update and delete events.
Errors raised by the service are turned into JSON responses by the
gateway's error handlers.
"""

from typing import Any, Dict, Tuple

from flask import Blueprint, Response, current_app, jsonify, request

from backend.events_service.service import EventService

events_bp = Blueprint("events", __name__)


def get_service() -> EventService:
    """Return the EventService attached to the running app."""
    return current_app.extensions["event_service"]


def get_body() -> Dict[str, Any]:
    """
    Parse the JSON request body.

    A missing, malformed or non-object body is treated as ``{}``.
    """
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@events_bp.route("", methods=["POST"], strict_slashes=False)
def create_event() -> Tuple[Response, int]:
    """
    Create an event.

    Returns:
        201: The created event.
        400: eventName, date or location missing.
        409: Same eventName and date already stored.
    """
    event = get_service().create_event(get_body())
    return jsonify(event), 201


@events_bp.route("", methods=["GET"], strict_slashes=False)
def list_events() -> Tuple[Response, int]:
    """Return every stored event (possibly an empty list)."""
    return jsonify(get_service().list_events()), 200


@events_bp.route("/<event_id>", methods=["PUT"])
def update_event(event_id: str) -> Tuple[Response, int]:
    """
    Update location, description, date and/or tags of an event.

    Returns:
        200: The updated event.
        400: No updatable field, or an attempt to change eventName/id.
        404: Event not found.
    """
    event = get_service().update_event(event_id, get_body())
    return jsonify(event), 200


@events_bp.route("/<event_id>", methods=["DELETE"])
def delete_event(event_id: str) -> Tuple[Response, int]:
    get_service().delete_event(event_id)
    return jsonify({"message": "Event deleted successfully."}), 200
