"""
Protocol definitions for files-manager-lib.

These protocols describe the contracts of the two store clients so application
code can depend on them and tests can substitute fakes.

All protocols follow PEP 544 (Structural Subtyping / Protocol).
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentStore(Protocol):
    """
    Protocol for the document store client.

    Implementation:
    - clients/mongo.py - DBClient (motor)
    """

    def is_alive(self) -> bool:
        """Report the last known connection state (advisory, never blocks)."""
        ...

    async def count_users(self) -> int:
        """Count documents in the users collection."""
        ...

    async def count_files(self) -> int:
        """Count documents in the files collection."""
        ...

    def users_collection(self) -> Any:
        """Return a handle to the users collection."""
        ...

    def files_collection(self) -> Any:
        """Return a handle to the files collection."""
        ...


@runtime_checkable
class KeyValueStore(Protocol):
    """
    Protocol for the key-value store client.

    Implementation:
    - clients/redis.py - RedisClient (redis.asyncio)
    """

    def is_alive(self) -> bool:
        """Report the last observed connection state (advisory, never blocks)."""
        ...

    async def get(self, key: str) -> str | None:
        """
        Get the value stored under a key.

        Returns
        -------
            Stored value, or None if the key does not exist

        """
        ...

    async def set(self, key: str, value: str | int | float | bool, expiry_seconds: int | None = None) -> None:
        """Store a value, optionally expiring after ``expiry_seconds``."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key (no error if it does not exist)."""
        ...
