"""
Type definitions for files-manager-lib.

This module defines enums shared by the document store and key-value clients.
"""

from enum import Enum


class CollectionName(str, Enum):
    """
    Document collections exposed by the document store client.

    Attributes
    ----------
        USERS: Registered users
        FILES: File and folder metadata

    """

    USERS = "users"
    """Registered users collection."""

    FILES = "files"
    """File and folder metadata collection."""


class ConnectionState(str, Enum):
    """Last known state of a store connection."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    @property
    def is_alive(self) -> bool:
        """True when the state counts as reachable."""
        return self is ConnectionState.CONNECTED
