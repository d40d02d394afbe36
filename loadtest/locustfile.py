"""Locust load test for the Album API.

Each simulated user lists the catalogue, creates albums with unique
ids, fetches the albums it created (expecting 200 and the same id) and
fetches ids that were never created (expecting 404 and the
``album not found`` message).  The target defaults to the address the
server binds to (``HOST``/``PORT``); task weights come from
``LOAD_*_WEIGHT`` variables.  Run with::

    locust -f loadtest/locustfile.py
"""
import random
import time

from locust import HttpUser, between, task

from album_api.app.core.config import Settings
from checks import (
    LoadSettings,
    check_created,
    check_list,
    check_lookup,
    check_miss,
    default_host,
)

load_settings = LoadSettings()


class AlbumsUser(HttpUser):
    host = default_host(Settings())
    wait_time = between(0.0, 0.0)

    def on_start(self):
        self.created_ids = []

    @task(load_settings.list_weight)
    def list_albums(self):
        with self.client.get("/albums", name="GET /albums", catch_response=True) as r:
            check_list(r)

    @task(load_settings.create_weight)
    def create_album(self):
        album_id = str(time.time_ns())
        payload = {
            "id": album_id,
            "title": "Load Test Album",
            "artist": "Locust",
            "price": 10.00,
        }
        with self.client.post("/albums", json=payload, name="POST /albums", catch_response=True) as r:
            if check_created(r):
                self.created_ids.append(album_id)

    @task(load_settings.lookup_weight)
    def get_created_album(self):
        if not self.created_ids:
            return
        album_id = random.choice(self.created_ids)
        with self.client.get(f"/albums/{album_id}", name="GET /albums/{id}", catch_response=True) as r:
            check_lookup(r, album_id)

    @task(load_settings.miss_weight)
    def get_missing_album(self):
        album_id = f"missing-{time.time_ns()}"
        with self.client.get(f"/albums/{album_id}", name="GET /albums/{id} (missing)", catch_response=True) as r:
            check_miss(r, album_id)
