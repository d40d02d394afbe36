"""
Album endpoints.

These routes list every album, fetch a single album by its identifier
and create new albums.  The album collection lives in the
application's ``AlbumService``; handlers obtain it via dependency
injection.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from album_api.app.schemas.album import Album, Message, ValidationErrorMessage
from album_api.app.services.album_service import AlbumService, get_album_service

router = APIRouter()

ALBUM_NOT_FOUND = "album not found"


@router.get("", response_model=List[Album])
async def list_albums(service: AlbumService = Depends(get_album_service)) -> List[Album]:
    """Return every album in insertion order."""
    return await service.list_albums()


@router.get(
    "/{album_id}",
    response_model=Album,
    responses={status.HTTP_404_NOT_FOUND: {"model": Message}},
)
async def get_album(album_id: str, service: AlbumService = Depends(get_album_service)) -> Album:
    """Retrieve a single album by its ID.

    When several albums share the ID the earliest one is returned.
    Raises HTTP 404 if no album matches.
    """
    album = await service.get_album(album_id)
    if album is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ALBUM_NOT_FOUND)
    return album


@router.post(
    "",
    response_model=Album,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorMessage}},
)
async def create_album(album: Album, service: AlbumService = Depends(get_album_service)) -> Album:
    """Add an album from the JSON request body and echo it back."""
    return await service.create_album(album)
