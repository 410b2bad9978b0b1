"""
JSON file datastore for events.
The whole collection lives in a single JSON array document.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from backend.events_service.errors import StorageCorruptionError, StorageError

load_dotenv()

logger = logging.getLogger(__name__)

# Default location of the events document, relative to the working directory
DEFAULT_DATA_FILE = os.getenv("EVENTS_DATA_FILE", os.path.join("data", "events.json"))

READ_ERROR = "Failed to read events data (file may be corrupted)."
WRITE_ERROR = "Failed to write events data."


class JsonEventStore:
    """
    Loads and saves the full events collection.

    A missing or empty file reads as an empty collection. Every save
    rewrites the whole document.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_DATA_FILE

    def load_all(self) -> List[Dict[str, Any]]:
        """
        Read every event from the document, in file order.

        Raises:
            StorageCorruptionError: The file exists but cannot be parsed.
            StorageError: The file exists but cannot be read.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = f.read()
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as e:
            logger.error("Events document %s is not valid UTF-8: %s", self.path, e)
            raise StorageCorruptionError(READ_ERROR) from e
        except OSError as e:
            logger.error("Could not read %s: %s", self.path, e)
            raise StorageError(READ_ERROR) from e

        if not data.strip():
            return []

        try:
            events = json.loads(data)
        except ValueError as e:
            logger.error("Events document %s is not valid JSON: %s", self.path, e)
            raise StorageCorruptionError(READ_ERROR) from e

        if not isinstance(events, list) or not all(isinstance(event, dict) for event in events):
            logger.error("Events document %s does not hold a JSON array of objects", self.path)
            raise StorageCorruptionError(READ_ERROR)
        return events

    def save_all(self, events: List[Dict[str, Any]]) -> None:
        """Overwrite the document with the given collection."""
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(events, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error("Could not write %s: %s", self.path, e)
            raise StorageError(WRITE_ERROR) from e
