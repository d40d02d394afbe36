"""
Business logic for albums.

``AlbumService`` owns the in-memory album collection.  One instance is
created per application by ``create_app`` and handed to the route
handlers through the ``get_album_service`` dependency, so every
application (and every test) works on its own collection.

The collection is an ordered list: albums keep their insertion order,
duplicate identifiers are allowed, and lookups scan from the front so
the first album with a given ``id`` wins.  A lock guards every read
and append.
"""

import logging
import threading
from typing import Iterable, List, Optional

from fastapi import Request

from ..schemas.album import Album

logger = logging.getLogger(__name__)

SEED_ALBUMS = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)


class AlbumService:
    """Service for listing, looking up and creating albums."""

    def __init__(self, albums: Optional[Iterable[Album]] = None) -> None:
        self._lock = threading.Lock()
        self._seed = list(SEED_ALBUMS if albums is None else albums)
        self._albums: List[Album] = [album.model_copy() for album in self._seed]

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._albums)

    async def list_albums(self) -> List[Album]:
        """Return a snapshot of every album in insertion order."""
        with self._lock:
            return list(self._albums)

    async def get_album(self, album_id: str) -> Optional[Album]:
        """Return the first album whose ``id`` equals ``album_id``.

        Comparison is exact and case sensitive.  Returns ``None`` when
        no album matches.
        """
        with self._lock:
            for album in self._albums:
                if album.id == album_id:
                    return album
        logger.debug("Album %r not found", album_id)
        return None

    async def create_album(self, album: Album) -> Album:
        """Append ``album`` to the collection and return it unchanged.

        The identifier is taken as given; no uniqueness check is made.
        """
        with self._lock:
            self._albums.append(album)
            size = len(self._albums)
        logger.info("Created album %r (%d albums stored)", album.id, size)
        return album

    def reset(self) -> None:
        """Restore the collection to the albums it was created with."""
        with self._lock:
            self._albums = [album.model_copy() for album in self._seed]
        logger.info("Album collection reset to %d albums", len(self._seed))


def get_album_service(request: Request) -> AlbumService:
    """FastAPI dependency returning the application's ``AlbumService``."""
    return request.app.state.album_service
