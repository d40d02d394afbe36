"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, responses, middleware),
``schemas`` (pydantic models), ``services`` (the album collection) and
``api`` (routers and endpoints).
"""

from .main import app, create_app  # noqa: F401
