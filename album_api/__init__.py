"""
Top-level package for the Album API.

The HTTP service lives under ``app``; ``client`` holds a small
``requests``-based client for talking to a running service.
"""

__all__ = []
