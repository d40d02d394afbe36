"""
Album API testing configuration.

Every test gets a freshly built application with its own album
collection, so creates in one test never leak into another.
"""
import pytest
from fastapi.testclient import TestClient

from album_api.app.core.config import Settings
from album_api.app.main import create_app
from album_api.app.services.album_service import AlbumService


@pytest.fixture
def settings():
    """Default settings, independent of the developer's environment."""
    return Settings(
        project_name="Album API",
        api_version="1.0.0",
        debug=False,
        log_level="INFO",
        log_file="",
        access_log=True,
        host="localhost",
        port=8080,
        indent_json=True,
        seed_albums=True,
    )


@pytest.fixture
def album_service():
    return AlbumService()


@pytest.fixture
def app(settings, album_service):
    return create_app(settings=settings, album_service=album_service)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_album():
    return {"id": "4", "title": "Test", "artist": "Tester", "price": 10.5}
