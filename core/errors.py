"""
Domain errors shared by the store, the HTTP layer and the client.
"""
from __future__ import annotations


class StoreFailure(Exception):
    """The record store could not be queried (unavailable or malformed query)."""


class NotFound(Exception):
    """A single record was requested but no record with that id exists."""


__all__ = ["StoreFailure", "NotFound"]
