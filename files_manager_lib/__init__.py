"""
files-manager-lib - Store clients for the files manager services.

This library provides the two data-access clients shared by the files manager
API and workers:
- DBClient: MongoDB document store (users and files collections)
- RedisClient: Redis key-value store with store-side TTL
- IoC Container: one shared client per store, overridable in tests
- Configuration from DB_* environment variables and dotenv files
"""

from files_manager_lib.clients import DBClient, RedisClient
from files_manager_lib.exceptions import (
    StoreConfigurationError,
    StoreConnectionError,
    StoreError,
    StoreQueryError,
)
from files_manager_lib.types import CollectionName, ConnectionState

try:
    from files_manager_lib._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

__all__ = [
    # Clients
    "DBClient",
    "RedisClient",
    # Exceptions
    "StoreError",
    "StoreConnectionError",
    "StoreQueryError",
    "StoreConfigurationError",
    # Types
    "CollectionName",
    "ConnectionState",
    # Version
    "__version__",
]
