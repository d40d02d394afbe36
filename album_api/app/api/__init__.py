"""
API package containing the HTTP routes.

``router`` in ``router.py`` includes every endpoint module; the
application factory mounts it.
"""
