"""
Top-level API router.

Aggregates the domain routers under their path prefixes.  Album routes
are served from ``/albums`` at the root, the paths existing clients
already call.
"""

from fastapi import APIRouter

from .endpoints import albums

router = APIRouter()

router.include_router(albums.router, prefix="/albums", tags=["albums"])
