"""
MongoDB client wrapper for the files manager document store.

The wrapper owns one motor client and mediates read access to the two fixed
collections (users, files). Construction never blocks: the driver connects in the
background, and the liveness flag follows the driver's server heartbeats.

Example:
    import asyncio

    from files_manager_lib.clients import DBClient

    async def main():
        db = DBClient()  # reads DB_HOST / DB_PORT / DB_DATABASE
        print(db.is_alive())  # False until the first heartbeat succeeds
        print(await db.count_users())
        users = db.users_collection()
        print(await users.find_one({"email": "bob@dylan.com"}))

    asyncio.run(main())

"""

from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import monitoring
from pymongo.errors import ConnectionFailure, PyMongoError

from files_manager_lib.clients._status import ConnectionStatus
from files_manager_lib.config import DocumentStoreSettings, load_document_store_settings
from files_manager_lib.exceptions import StoreConnectionError, StoreQueryError
from files_manager_lib.log import get_logger
from files_manager_lib.types import CollectionName, ConnectionState

LOGGER = get_logger("files_manager_lib.clients.mongo")


class HeartbeatMonitor(monitoring.ServerHeartbeatListener):
    """Feeds pymongo server heartbeats into a ConnectionStatus."""

    def __init__(self, status: ConnectionStatus) -> None:
        self.status = status

    def started(self, event: monitoring.ServerHeartbeatStartedEvent) -> None:
        pass

    def succeeded(self, event: monitoring.ServerHeartbeatSucceededEvent) -> None:
        self.status.on_connect()

    def failed(self, event: monitoring.ServerHeartbeatFailedEvent) -> None:
        self.status.on_error(event.reply)


class DBClient:
    """
    Document store client backed by motor.

    Args:
    ----
        settings: Connection settings. Loaded from the environment when omitted.
        client: Pre-built motor client (or a test double). When given, no
                connection is opened and heartbeats are not registered.

    Note:
    ----
        ``is_alive()`` is advisory. It starts False and may report a false
        negative until the first heartbeat has been processed.

    """

    def __init__(self, settings: DocumentStoreSettings | None = None, *, client: Any = None) -> None:
        self.settings = settings if settings is not None else load_document_store_settings()
        self._status = ConnectionStatus("Document store", initial=ConnectionState.DISCONNECTED)
        self.monitor = HeartbeatMonitor(self._status)

        if client is None:
            # motor defaults to connect=False; open the topology now so heartbeats start
            client = AsyncIOMotorClient(self.settings.url, connect=True, event_listeners=[self.monitor])
            LOGGER.info(
                f"Connecting to document store at {self.settings.host}:{self.settings.port}/{self.settings.database}"
            )

        self._client = client
        self._db = client.get_default_database()

    @property
    def client(self) -> Any:
        """Underlying driver client."""
        return self._client

    def is_alive(self) -> bool:
        """Check whether the driver currently reports a live connection."""
        return self._status.is_alive

    def collection(self, name: CollectionName) -> AsyncIOMotorCollection:
        """Resolve a collection handle. Liveness is not checked."""
        return self._db[CollectionName(name).value]

    async def count(self, name: CollectionName) -> int:
        """
        Count every document in a collection.

        Raises
        ------
            StoreConnectionError: If no server is reachable
            StoreQueryError: If the count command fails

        """
        name = CollectionName(name)
        try:
            return await self.collection(name).count_documents({})
        except ConnectionFailure as e:
            raise StoreConnectionError(f"Document store unreachable while counting '{name.value}': {e}") from e
        except PyMongoError as e:
            raise StoreQueryError(f"Counting '{name.value}' failed: {e}") from e

    async def count_users(self) -> int:
        """Number of documents in the users collection."""
        return await self.count(CollectionName.USERS)

    async def count_files(self) -> int:
        """Number of documents in the files collection."""
        return await self.count(CollectionName.FILES)

    def users_collection(self) -> AsyncIOMotorCollection:
        """Handle to the users collection."""
        return self.collection(CollectionName.USERS)

    def files_collection(self) -> AsyncIOMotorCollection:
        """Handle to the files collection."""
        return self.collection(CollectionName.FILES)

    def close(self) -> None:
        """Close the driver client and its monitor threads."""
        self._client.close()
        self._status.on_close()
        LOGGER.info("Document store client closed")
