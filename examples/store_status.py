#!/usr/bin/env python3
"""
Example: Report store liveness and counts, the way the files manager /status
and /stats endpoints do.

Requirements:
- MongoDB reachable at DB_HOST:DB_PORT (defaults: localhost:27017)
- Redis reachable at localhost:6379

Usage:
    python examples/store_status.py
"""

import asyncio

from files_manager_lib import StoreError
from files_manager_lib.container import get_db_client, get_redis_client
from files_manager_lib.log import configure_logging


async def main() -> None:
    configure_logging(level="INFO")

    db = get_db_client()
    redis = get_redis_client()

    # Heartbeats arrive in the background; give the driver a moment
    await asyncio.sleep(1)
    print(f"status: redis={redis.is_alive()} db={db.is_alive()}")

    try:
        print(f"stats: users={await db.count_users()} files={await db.count_files()}")
    except StoreError as e:
        print(f"stats unavailable: {e}")

    try:
        await redis.set("example:greeting", "hello", 10)
        print(f"example:greeting -> {await redis.get('example:greeting')}")
        await redis.delete("example:greeting")
    except StoreError as e:
        print(f"redis unavailable: {e}")
    finally:
        db.close()
        await redis.close()


if __name__ == "__main__":
    asyncio.run(main())
