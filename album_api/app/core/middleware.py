"""
HTTP middleware.

``log_requests`` writes one access line per request with the method,
path, status code and handling time, similar to the request logger
that the original album server's router installed by default.
Requests whose handler raised are logged with status 500, the status
the catch-all exception handler answers with.
"""

import logging
import time

from fastapi import Request, status

from .logging_config import ACCESS_LOGGER

logger = logging.getLogger(ACCESS_LOGGER)


def _log_access(request: Request, status_code: int, started: float) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        status_code,
        elapsed_ms,
    )


async def log_requests(request: Request, call_next):
    """Log every request after its response has been produced."""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _log_access(request, status.HTTP_500_INTERNAL_SERVER_ERROR, started)
        raise
    _log_access(request, response.status_code, started)
    return response
