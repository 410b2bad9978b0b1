"""
Event CRUD logic on top of the JSON document store.
Validates request bodies before touching storage, then runs a full
read-modify-write cycle for each mutation.
"""

import logging
import threading
import uuid
from typing import Any, Dict, List, Optional

from backend.events_service.errors import DuplicateError, NotFoundError, ValidationError
from backend.events_service.store import JsonEventStore

logger = logging.getLogger(__name__)

# --- REQUEST SCHEMA ---
REQUIRED_FIELDS = ["eventName", "date", "location"]
UPDATABLE_FIELDS = ["location", "description", "tags", "date"]

MISSING_FIELDS_MSG = "eventName, date, and location are required."
DUPLICATE_MSG = "An event with the same eventName and date already exists."
EVENT_NAME_IMMUTABLE_MSG = "eventName cannot be updated for an existing event."
ID_IMMUTABLE_MSG = "id cannot be modified for an existing event."
NO_UPDATE_FIELDS_MSG = "Provide at least one field to update: location, description, tags, or date."
NOT_FOUND_MSG = "Event not found."


def normalize_tags(tags: Any) -> List[Any]:
    """Lists pass through, any other truthy value becomes a one-item list."""
    if isinstance(tags, list):
        return tags
    return [tags] if tags else []


def validate_create(data: Dict[str, Any]) -> None:
    if any(not data.get(field) for field in REQUIRED_FIELDS):
        raise ValidationError(MISSING_FIELDS_MSG)


def validate_update(data: Dict[str, Any]) -> None:
    if "eventName" in data:
        raise ValidationError(EVENT_NAME_IMMUTABLE_MSG)
    if "id" in data:
        raise ValidationError(ID_IMMUTABLE_MSG)
    if not any(field in data for field in UPDATABLE_FIELDS):
        raise ValidationError(NO_UPDATE_FIELDS_MSG)


def _find_index(events: List[Dict[str, Any]], event_id: str) -> int:
    for index, event in enumerate(events):
        if event.get("id") == event_id:
            return index
    raise NotFoundError(NOT_FOUND_MSG)


class EventService:
    """
    Create, list, update and delete events.

    All access to the store goes through one lock so that concurrent
    requests in this process cannot lose each other's writes.
    """

    def __init__(self, store: Optional[JsonEventStore] = None):
        self.store = store or JsonEventStore()
        self.lock = threading.Lock()

    def _new_id(self, events: List[Dict[str, Any]]) -> str:
        taken = {event.get("id") for event in events}
        event_id = uuid.uuid4().hex
        while event_id in taken:
            event_id = uuid.uuid4().hex
        return event_id

    def list_events(self) -> List[Dict[str, Any]]:
        with self.lock:
            return self.store.load_all()

    def create_event(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add a new event and return it.

        Raises:
            ValidationError: eventName, date or location missing or empty.
            DuplicateError: An event with the same eventName and date exists.
        """
        validate_create(data)

        with self.lock:
            events = self.store.load_all()

            for event in events:
                if event.get("eventName") == data["eventName"] and event.get("date") == data["date"]:
                    logger.info("Rejected duplicate event '%s' on %s", data["eventName"], data["date"])
                    raise DuplicateError(DUPLICATE_MSG)

            new_event = {
                "id": self._new_id(events),
                "eventName": data["eventName"],
                "date": data["date"],
                "location": data["location"],
                "description": data.get("description") or "",
                "tags": normalize_tags(data.get("tags")),
            }
            events.append(new_event)
            self.store.save_all(events)

        logger.info("Created event %s ('%s')", new_event["id"], new_event["eventName"])
        return new_event

    def update_event(self, event_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update. Only fields present in ``data`` change;
        ``tags`` replaces the stored list.
        """
        validate_update(data)

        with self.lock:
            events = self.store.load_all()
            index = _find_index(events, event_id)
            event = events[index]

            for field in UPDATABLE_FIELDS:
                if field not in data:
                    continue
                if field == "tags" and not isinstance(data["tags"], list):
                    event["tags"] = [data["tags"]]
                else:
                    event[field] = data[field]

            self.store.save_all(events)

        logger.info("Updated event %s", event_id)
        return event

    def delete_event(self, event_id: str) -> None:
        # Deleting an already deleted id reports not found again
        with self.lock:
            events = self.store.load_all()
            _find_index(events, event_id)
            remaining = [event for event in events if event.get("id") != event_id]
            self.store.save_all(remaining)

        logger.info("Deleted event %s", event_id)
