"""Pytest configuration and fixtures for files-manager-lib tests."""

from collections.abc import Iterator
from typing import Any

import pytest
from redis.exceptions import ResponseError

from files_manager_lib.container import reset_container


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRedis:
    """
    In-memory stand-in for ``redis.asyncio.Redis`` with decode_responses=True.

    Only the commands the client wrapper uses are implemented. Expiry is enforced
    against the injected clock, the same way the server enforces TTLs.
    """

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.data: dict[str, str] = {}
        self.expires_at: dict[str, float] = {}
        self.closed = False

    def _purge(self, key: str) -> None:
        deadline = self.expires_at.get(key)
        if deadline is not None and self.clock() >= deadline:
            self.data.pop(key, None)
            self.expires_at.pop(key, None)

    async def get(self, name: str) -> str | None:
        self._purge(name)
        return self.data.get(name)

    async def set(self, name: str, value: Any) -> bool:
        self.data[name] = str(value)
        self.expires_at.pop(name, None)
        return True

    async def setex(self, name: str, time: int, value: Any) -> bool:
        if time <= 0:
            raise ResponseError("invalid expire time in 'setex' command")
        self.data[name] = str(value)
        self.expires_at[name] = self.clock() + time
        return True

    async def delete(self, *names: str) -> int:
        removed = 0
        for name in names:
            self._purge(name)
            if self.data.pop(name, None) is not None:
                removed += 1
            self.expires_at.pop(name, None)
        return removed

    async def ttl(self, name: str) -> int:
        self._purge(name)
        if name not in self.data:
            return -2
        if name not in self.expires_at:
            return -1
        return int(self.expires_at[name] - self.clock())

    async def aclose(self) -> None:
        self.closed = True


class FakeCollection:
    """Minimal async collection holding documents in a list."""

    def __init__(self, name: str, documents: list[dict] | None = None) -> None:
        self.name = name
        self.documents = list(documents or [])

    async def count_documents(self, filter: dict) -> int:
        return sum(1 for doc in self.documents if all(doc.get(k) == v for k, v in filter.items()))

    async def insert_many(self, documents: list[dict]) -> None:
        self.documents.extend(documents)


class FakeDatabase:
    """Dict-style database that creates empty collections on first access."""

    def __init__(self, name: str = "files_manager") -> None:
        self.name = name
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    def seed(self, name: str, count: int) -> None:
        self[name].documents.extend({"_id": i, "name": f"{name}-{i}"} for i in range(count))


class FakeMotorClient:
    """Stand-in for AsyncIOMotorClient with a default database."""

    def __init__(self, database: FakeDatabase | None = None) -> None:
        self.database = database or FakeDatabase()
        self.closed = False

    def get_default_database(self) -> FakeDatabase:
        return self.database

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_redis(clock: FakeClock) -> FakeRedis:
    return FakeRedis(clock)


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def fake_motor(fake_db: FakeDatabase) -> FakeMotorClient:
    return FakeMotorClient(fake_db)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Run with no DB_* variables and an empty working directory (no dotenv files)."""
    for var in ("DB_HOST", "DB_PORT", "DB_DATABASE", "FILES_MANAGER_ENV"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def _reset_global_container() -> Iterator[None]:
    yield
    reset_container()
