import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app


def make_settings(**overrides) -> Settings:
    values = {
        "EVENTBRITE_TOKEN": "eb-token",
        "GOOGLE_API_KEY": "g-key",
        "HTTP_TIMEOUT_SECONDS": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client_without_credentials():
    bare = make_settings(EVENTBRITE_TOKEN=None, GOOGLE_API_KEY=None)
    app.dependency_overrides[get_settings] = lambda: bare
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
