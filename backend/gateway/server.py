"""
API gateway: builds the Flask app around the events blueprint.
This is the local entrypoint for development.
"""

import logging
import os
from typing import Any, Dict, Optional, Tuple

from dotenv import load_dotenv
from flask import Flask, Response, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from backend.events_service.errors import EventServiceError
from backend.events_service.routes import events_bp
from backend.events_service.service import EventService
from backend.events_service.store import DEFAULT_DATA_FILE, JsonEventStore

load_dotenv()

# Basic console logging during API requests
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="[%(levelname)s] %(asctime)s - %(message)s",
)

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        config (dict, optional): Overrides for app.config, e.g. EVENTS_DATA_FILE.

    Returns:
        Flask: The configured Flask application.
    """
    app = Flask(__name__)
    app.config["EVENTS_DATA_FILE"] = DEFAULT_DATA_FILE
    if config:
        app.config.update(config)

    CORS(app)

    app.extensions["event_service"] = EventService(JsonEventStore(app.config["EVENTS_DATA_FILE"]))
    app.register_blueprint(events_bp, url_prefix="/api/events")
    logger.info("Events stored in %s", app.config["EVENTS_DATA_FILE"])

    # --- ERROR HANDLERS ---
    @app.errorhandler(EventServiceError)
    def handle_service_error(error: EventServiceError) -> Tuple[Response, int]:
        if error.status_code >= 500:
            logger.error("Events service failure: %s", error.message, exc_info=error)
        return jsonify({"error": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException) -> Tuple[Response, int]:
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception) -> Tuple[Response, int]:
        logger.error("Unhandled error: %s", error, exc_info=error)
        return jsonify({"error": "Internal Server Error"}), 500

    # --- BASIC HEALTH CHECKPOINTS ---
    @app.route("/")
    def index():
        """
        Root URL identifying the service.
        """
        return jsonify({"message": "Advanced Event Management API"}), 200

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


def main() -> None:
    app = create_app()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", DEFAULT_PORT))
    logger.info("Server running on port %s", port)
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
