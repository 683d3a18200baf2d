"""
Redis client wrapper for the files manager key-value store.

The wrapper owns one ``redis.asyncio`` client and exposes get / set (with an
optional store-side TTL) / delete. Liveness is tracked from driver events: every
socket the pool opens reports "connect" on success and "error" on failure, so
``is_alive()`` never makes a round trip.

Example:
    import asyncio

    from files_manager_lib.clients import RedisClient

    async def main():
        redis = RedisClient()  # localhost:6379/0
        await redis.set("auth_abc", "user-id", 24 * 3600)
        print(await redis.get("auth_abc"))
        await redis.delete("auth_abc")
        await redis.close()

    asyncio.run(main())

"""

from collections.abc import Awaitable
from typing import Any, TypeVar

from redis.asyncio import ConnectionPool, Redis
from redis.asyncio.connection import Connection
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from files_manager_lib.clients._status import ConnectionStatus
from files_manager_lib.config import KeyValueStoreConfig
from files_manager_lib.exceptions import StoreConnectionError, StoreQueryError
from files_manager_lib.log import get_logger
from files_manager_lib.types import ConnectionState

LOGGER = get_logger("files_manager_lib.clients.redis")

T = TypeVar("T")


class NotifyingConnection(Connection):
    """
    Redis connection that reports socket-level connect/error events.

    The pool builds connections from its connection kwargs, so ``status`` is passed
    through ``ConnectionPool(..., status=...)``.
    """

    def __init__(self, *, status: ConnectionStatus | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.status = status

    async def _connect(self) -> None:
        try:
            await super()._connect()
        except Exception as e:
            if self.status is not None:
                self.status.on_error(e)
            raise
        if self.status is not None:
            self.status.on_connect()


def _encode_value(value: str | int | float | bool) -> str | int | float:
    # redis-py refuses bools; store them the way they print in JSON
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class RedisClient:
    """
    Key-value store client backed by redis.asyncio.

    Args:
    ----
        config: Connection settings. Driver defaults (localhost:6379/0) when omitted.
        client: Pre-built redis.asyncio client (or a test double). When given,
                connect events only come from command failures.

    Note:
    ----
        ``is_alive()`` starts True before any event has fired and may misreport
        during startup. Callers must treat it as advisory.

    """

    def __init__(self, config: KeyValueStoreConfig | None = None, *, client: Any = None) -> None:
        self.config = config if config is not None else KeyValueStoreConfig()
        self._status = ConnectionStatus("Key-value store", initial=ConnectionState.CONNECTED)
        self._pool: ConnectionPool | None = None

        if client is None:
            self._pool = ConnectionPool(
                connection_class=NotifyingConnection,
                status=self._status,
                host=self.config.host,
                port=self.config.port,
                db=self.config.db,
                decode_responses=True,  # Automatically decode bytes to strings
            )
            client = Redis(connection_pool=self._pool)
            LOGGER.info(f"Key-value store client ready for {self.config.host}:{self.config.port}/{self.config.db}")

        self._client = client

    @property
    def client(self) -> Any:
        """Underlying driver client."""
        return self._client

    def is_alive(self) -> bool:
        """Return the last observed connection state."""
        return self._status.is_alive

    async def _execute(self, command: str, key: str, call: Awaitable[T]) -> T:
        try:
            return await call
        except (RedisConnectionError, RedisTimeoutError) as e:
            if self._status.is_alive:
                self._status.on_error(e)
            raise StoreConnectionError(f"Key-value store unreachable during {command} '{key}': {e}") from e
        except RedisError as e:
            raise StoreQueryError(f"{command} '{key}' failed: {e}") from e

    async def get(self, key: str) -> str | None:
        """
        Get the value stored under ``key``.

        Returns
        -------
            The stored value, or None if the key does not exist (or has expired)

        Raises
        ------
            StoreConnectionError: If the store cannot be reached
            StoreQueryError: If the command is rejected (e.g. key holds a list)

        """
        return await self._execute("GET", key, self._client.get(key))

    async def set(self, key: str, value: str | int | float | bool, expiry_seconds: int | None = None) -> None:
        """
        Store ``value`` under ``key``.

        Args:
        ----
            key: Key to set
            value: Value to store; booleans are stored as "true"/"false"
            expiry_seconds: Store-side TTL. A falsy value (None or 0) stores
                            the key without expiry.

        Raises:
        ------
            StoreConnectionError: If the store cannot be reached
            StoreQueryError: If the command is rejected (e.g. negative expiry)

        """
        value = _encode_value(value)
        if expiry_seconds:
            await self._execute("SETEX", key, self._client.setex(key, expiry_seconds, value))
        else:
            await self._execute("SET", key, self._client.set(key, value))

    async def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is not an error."""
        await self._execute("DEL", key, self._client.delete(key))

    async def close(self) -> None:
        """Close the client and disconnect the pool it owns."""
        await self._client.aclose()
        if self._pool is not None:
            await self._pool.disconnect()
        self._status.on_close()
        LOGGER.info("Key-value store client closed")
