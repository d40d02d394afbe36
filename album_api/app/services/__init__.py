"""
Service layer abstraction.

Services encapsulate business logic so that the in-memory collection
used here could be swapped for a database without changing API
handlers.
"""
