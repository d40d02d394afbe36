"""
Tests for the load scenario's settings and response checks.

Checks run against real responses from the application; a small
recorder adds the ``success``/``failure`` marks locust responses carry.
"""
import importlib.util
from pathlib import Path

import pytest

CHECKS = Path(__file__).resolve().parent.parent / "loadtest" / "checks.py"


@pytest.fixture(scope="module")
def checks():
    spec = importlib.util.spec_from_file_location("album_load_checks", CHECKS)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class RecordedResponse:

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.text = response.text
        self.failures = []
        self.succeeded = False

    def json(self):
        return self._response.json()

    def failure(self, message):
        self.failures.append(message)

    def success(self):
        self.succeeded = True


class TestLoadSettings:

    def test_default_host_follows_server_settings(self, checks, settings):
        settings.host = "127.0.0.1"
        settings.port = 9090

        assert checks.default_host(settings) == "http://127.0.0.1:9090"

    def test_weights(self, checks, monkeypatch):
        for name in ("LOAD_LIST_WEIGHT", "LOAD_CREATE_WEIGHT", "LOAD_LOOKUP_WEIGHT", "LOAD_MISS_WEIGHT"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("LOAD_LOOKUP_WEIGHT", "7")

        load_settings = checks.LoadSettings()

        assert load_settings.lookup_weight == 7
        assert load_settings.list_weight == 3
        assert load_settings.create_weight == 1
        assert load_settings.miss_weight == 1


class TestResponseChecks:

    def test_list(self, checks, client):
        r = RecordedResponse(client.get("/albums"))

        assert checks.check_list(r)
        assert r.failures == []

    def test_created_album_lookup(self, checks, client, new_album):
        created = RecordedResponse(client.post("/albums", json=new_album))
        lookup = RecordedResponse(client.get("/albums/4"))

        assert checks.check_created(created)
        assert checks.check_lookup(lookup, "4")
        assert created.failures == lookup.failures == []

    def test_rejected_create_is_reported(self, checks, client):
        r = RecordedResponse(client.post("/albums", json={"id": 4}))

        assert not checks.check_created(r)
        assert r.failures == ["POST /albums failed: 400"]

    def test_lost_album_is_reported(self, checks, client):
        r = RecordedResponse(client.get("/albums/never-stored"))

        assert not checks.check_lookup(r, "never-stored")
        assert r.failures == ["GET /albums/never-stored failed: 404"]

    def test_missing_album_counts_as_success(self, checks, client):
        r = RecordedResponse(client.get("/albums/missing-1"))

        assert checks.check_miss(r, "missing-1")
        assert r.failures == []
        assert r.succeeded

    def test_existing_album_is_not_a_miss(self, checks, client):
        r = RecordedResponse(client.get("/albums/1"))

        assert not checks.check_miss(r, "1")
        assert r.failures == ["GET /albums/1 expected 404, got 200"]
        assert not r.succeeded
