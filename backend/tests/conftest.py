import pytest

from backend.gateway.server import create_app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "events.json"


@pytest.fixture
def app(data_file):
    app = create_app({"TESTING": True, "EVENTS_DATA_FILE": str(data_file)})
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(app):
    return app.extensions["event_service"]


@pytest.fixture
def sample_event():
    """
    A complete create payload.
    """
    return {
        "eventName": "Tech Meetup",
        "date": "2025-05-01",
        "location": "Room 101",
        "description": "Monthly meetup",
        "tags": ["tech", "networking"],
    }
