"""
Configuration management for the Album API.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on
``localhost:8080`` like the original album server.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Each field reads its variable when a ``Settings`` instance is
    created, so tests can set variables and build a fresh instance.
    """

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Album API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Optional path of a log file.  Empty means console logging only.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))
    # Per-request access lines from the request middleware.
    access_log: bool = field(default_factory=lambda: _env_bool("ACCESS_LOG", "true"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    # Pretty-print JSON responses with four-space indentation.
    indent_json: bool = field(default_factory=lambda: _env_bool("INDENT_JSON", "true"))

    # Start with the three seed albums.  Disable to start empty.
    seed_albums: bool = field(default_factory=lambda: _env_bool("SEED_ALBUMS", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
