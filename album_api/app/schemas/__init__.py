"""
Pydantic schema definitions for API payloads.
"""

from .album import Album, Message, ValidationErrorMessage  # noqa: F401
