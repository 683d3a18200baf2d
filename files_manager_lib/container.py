"""
Dependency injection container for files-manager-lib.

Holds the process-wide store clients as singletons. Each client is built the first
time it is requested and reused afterwards, so every caller shares one physical
connection per store. Tests override the providers instead of patching globals.
"""

from dependency_injector import containers, providers

from files_manager_lib.clients import DBClient, RedisClient
from files_manager_lib.config import KeyValueStoreConfig, load_document_store_settings
from files_manager_lib.protocols import DocumentStore, KeyValueStore


class StoreIoCContainer(containers.DeclarativeContainer):
    """
    Inversion of Control (IoC) container for the store clients.

    Example:
    -------
        ```python
        from files_manager_lib.container import StoreIoCContainer

        container = StoreIoCContainer()
        db = container.db_client()          # singleton
        assert db is container.db_client()

        # Override in tests
        container.redis_client.override(fake_redis)
        ```

    """

    # Environment name used to pick the dotenv file (None -> $FILES_MANAGER_ENV)
    environment = providers.Object(None)

    document_store_settings = providers.Singleton(load_document_store_settings, environment=environment)
    key_value_store_config = providers.Singleton(KeyValueStoreConfig)

    db_client = providers.Singleton(DBClient, settings=document_store_settings)
    redis_client = providers.Singleton(RedisClient, config=key_value_store_config)


# Global singleton container instance
container = StoreIoCContainer()


def get_db_client() -> DocumentStore:
    """
    Get the shared document store client (singleton).

    Example:
    -------
        ```python
        from files_manager_lib.container import get_db_client

        db = get_db_client()
        users = await db.count_users()
        ```

    """
    return container.db_client()


def get_redis_client() -> KeyValueStore:
    """
    Get the shared key-value store client (singleton).

    Example:
    -------
        ```python
        from files_manager_lib.container import get_redis_client

        redis = get_redis_client()
        await redis.set("auth_token", "user-id", 86400)
        ```

    """
    return container.redis_client()


def reset_container() -> None:
    """Drop cached singletons so the next request builds fresh clients."""
    container.db_client.reset()
    container.redis_client.reset()
    container.document_store_settings.reset()
    container.key_value_store_config.reset()
