"""files-manager-lib store clients for MongoDB and Redis."""

from files_manager_lib.clients.mongo import DBClient, HeartbeatMonitor
from files_manager_lib.clients.redis import NotifyingConnection, RedisClient

__all__ = ["DBClient", "HeartbeatMonitor", "NotifyingConnection", "RedisClient"]
