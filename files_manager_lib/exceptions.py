"""
Exception classes for files-manager-lib.

Driver exceptions (pymongo, redis) never leak out of the client wrappers. They are
re-raised as one of the classes below, with the original exception chained as the
``__cause__``, so callers can catch library failures without importing driver code.

All exceptions follow the naming convention Store*Error.
"""


class StoreError(Exception):
    """
    Base exception for all files-manager-lib errors.

    Catching StoreError catches every failure raised by the document store and
    key-value clients without catching unrelated Python errors.
    """

    pass


class StoreConnectionError(StoreError):
    """
    Raised when the underlying transport reports a connection failure.

    Example:
    -------
        The MongoDB server is down when a count is requested:
        >>> await db_client.count_users()
        StoreConnectionError: Document store unreachable while counting 'users'...

    """

    pass


class StoreQueryError(StoreError):
    """
    Raised when a data operation (count, get, set, delete) is rejected by the store.

    The connection itself is fine; the command failed (wrong type, invalid expiry, etc.).
    """

    pass


class StoreConfigurationError(StoreError):
    """Raised when store settings cannot be parsed (e.g. a non-numeric DB_PORT)."""

    pass
