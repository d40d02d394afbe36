"""Settings and response checks for the Album API load scenario.

Kept free of locust imports so the checks can run in the test suite.
Each check takes a locust-style response (``status_code``, ``json()``,
``text``, ``success()``, ``failure()``) and marks it.
"""
import os
from dataclasses import dataclass, field

from album_api.app.core.config import Settings

ALBUM_NOT_FOUND = {"message": "album not found"}


@dataclass
class LoadSettings:
    """Task weights loaded from environment variables."""

    list_weight: int = field(default_factory=lambda: int(os.getenv("LOAD_LIST_WEIGHT", "3")))
    create_weight: int = field(default_factory=lambda: int(os.getenv("LOAD_CREATE_WEIGHT", "1")))
    lookup_weight: int = field(default_factory=lambda: int(os.getenv("LOAD_LOOKUP_WEIGHT", "2")))
    miss_weight: int = field(default_factory=lambda: int(os.getenv("LOAD_MISS_WEIGHT", "1")))


def default_host(settings: Settings) -> str:
    """Base URL of the server the given settings would start."""
    return f"http://{settings.host}:{settings.port}"


def check_list(r) -> bool:
    if r.status_code != 200:
        r.failure(f"GET /albums failed: {r.status_code}")
        return False
    return True


def check_created(r) -> bool:
    if r.status_code != 201:
        r.failure(f"POST /albums failed: {r.status_code}")
        return False
    return True


def check_lookup(r, album_id: str) -> bool:
    if r.status_code != 200:
        r.failure(f"GET /albums/{album_id} failed: {r.status_code}")
        return False
    returned = r.json().get("id")
    if returned != album_id:
        r.failure(f"GET /albums/{album_id} returned album {returned!r}")
        return False
    return True


def check_miss(r, album_id: str) -> bool:
    if r.status_code != 404:
        r.failure(f"GET /albums/{album_id} expected 404, got {r.status_code}")
        return False
    if r.json() != ALBUM_NOT_FOUND:
        r.failure(f"GET /albums/{album_id} returned unexpected body {r.text!r}")
        return False
    # Expected miss; locust would otherwise count the 404 as a failure.
    r.success()
    return True
