"""Album API client.

A thin wrapper around the Album API using the ``requests`` library.
The client exposes one method per operation:

* :meth:`AlbumAPIClient.list_albums` – return every album.
* :meth:`AlbumAPIClient.get_album` – fetch a single album by its identifier.
* :meth:`AlbumAPIClient.create_album` – add a new album.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

ErrorInfo = Dict[str, Any]


class AlbumAPIClient:
    """Client for interacting with a running Album API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ErrorInfo]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/albums``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Album operations
    # ------------------------------------------------------------------
    def list_albums(self) -> Tuple[List[Dict[str, Any]], Optional[ErrorInfo]]:
        """Retrieve all albums in the order the server stores them."""
        data, error = self._request("GET", "/albums")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_album(self, album_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ErrorInfo]]:
        """Retrieve a single album by ID.

        A missing album is reported as an error with ``status_code``
        404 and the server's ``album not found`` message.
        """
        return self._request("GET", f"/albums/{quote(str(album_id), safe='')}")

    def create_album(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ErrorInfo]]:
        """Create an album.

        Args:
            payload: Album fields ``id``, ``title``, ``artist`` and ``price``.
        Returns:
            A tuple ``(album, error)`` where ``album`` echoes the stored record.
        """
        return self._request("POST", "/albums", json_body=payload)
