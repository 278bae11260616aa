"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import mongomock
import pymongo.errors
import pytest

from txnstats.api.database.Database import Database
from txnstats.api.database.DatabaseConfig import DatabaseConfig

TEST_DATABASE = "juju_test"


def pytest_configure(config):
    for marker in ("unit", "integration", "stats", "database", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def mongomock_config_dict() -> dict:
    """Minimal valid txnstats configuration dict backed by mongomock."""
    return {
        "database": {
            "type": "mongomock",
            "name": TEST_DATABASE,
            "data": {},
        },
        "scan": {
            "concurrency": 4,
            "batch_size": 2,
        },
    }


@pytest.fixture(name="mongomock_config_dict")
def mongomock_config_dict_fixture() -> dict:
    return mongomock_config_dict()


@pytest.fixture
def database_config() -> DatabaseConfig:
    return DatabaseConfig(**mongomock_config_dict()["database"])


@pytest.fixture(autouse=True)
def fresh_mongomock_client(monkeypatch) -> mongomock.MongoClient:
    """Give every test its own in-memory server."""
    from txnstats.api.database._mongomock import _client

    client = mongomock.MongoClient()
    monkeypatch.setattr(_client, "_shared_mongomock_client", client)
    return client


@pytest.fixture
def mock_db(fresh_mongomock_client: mongomock.MongoClient):
    """The raw mongomock database the tests seed."""
    return fresh_mongomock_client[TEST_DATABASE]


@pytest.fixture
def database(database_config: DatabaseConfig):
    """An open txnstats Database over the mongomock server."""
    with Database(database_config) as db:
        yield db


@pytest.fixture
def config_file(tmp_path: Path, mongomock_config_dict: dict) -> Path:
    """Write the mongomock config to a file and return its path."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps(mongomock_config_dict), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point TXNSTATS_HOME at an empty directory so no user config leaks in."""
    home = tmp_path / ".txnstats"
    monkeypatch.setenv("TXNSTATS_HOME", str(home))
    monkeypatch.delenv("TXNSTATS_PASSWORD", raising=False)
    return home


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers installed by setup_logging so they never outlive captured streams."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


# =============================================================================
# Seeding Helpers
# =============================================================================


def seed_queues(db, collection_name: str, queue_lengths: Iterable[int]) -> None:
    """Insert one document per queue length, with that many pending tokens."""
    docs = [
        {"_id": f"{collection_name}-{i}", "txn-queue": [f"5a0b{i:04d}{j:04d}_0badf00d" for j in range(length)]}
        for i, length in enumerate(queue_lengths)
    ]
    if docs:
        db[collection_name].insert_many(docs)
    else:
        db.create_collection(collection_name)


def seed_txns(db, states: Iterable[int], ops_per_txn: Iterable[int] | None = None, collection_name: str = "txns") -> None:
    """Insert one transaction document per state code."""
    states = list(states)
    ops = list(ops_per_txn) if ops_per_txn is not None else [0] * len(states)
    docs = [
        {
            "_id": f"txn-{i}",
            "s": state,
            "o": [{"c": "charms", "d": f"doc-{k}", "a": {"$exists": True}} for k in range(n_ops)],
            "n": "0badf00d",
        }
        for i, (state, n_ops) in enumerate(zip(states, ops))
    ]
    if docs:
        db[collection_name].insert_many(docs)


def seed_log(db, count: int, collection_name: str = "txns.log") -> None:
    docs = [{"_id": f"txn-{i}", "charms": {"d": [f"doc-{i}"], "r": [i]}} for i in range(count)]
    if docs:
        db[collection_name].insert_many(docs)


# =============================================================================
# Failure Injection
# =============================================================================


class FailingCursor:
    """Cursor that yields ``fail_after`` documents and then raises ``error``."""

    def __init__(self, documents: Any, fail_after: int, error: Exception):
        self._documents = iter(documents)
        self._remaining = fail_after
        self._error = error
        self.batch: int | None = None
        self.closed = False

    def batch_size(self, batch_size: int) -> "FailingCursor":
        self.batch = batch_size
        return self

    def __iter__(self):
        return self

    def __next__(self):
        if self._remaining <= 0:
            raise self._error
        self._remaining -= 1
        return next(self._documents)

    def close(self) -> None:
        self.closed = True


class FailingCollection:
    """Wrap a collection so reads fail part-way with a driver error."""

    def __init__(self, collection: Any, fail_after: int = 1, error: Exception | None = None):
        self._collection = collection
        self.fail_after = fail_after
        self.error = error or pymongo.errors.AutoReconnect("connection reset by peer")
        self.cursors: list[FailingCursor] = []
        self.projections: list[Any] = []

    @property
    def name(self) -> str:
        return self._collection.name

    def find(self, filter=None, projection=None):
        self.projections.append(dict(projection) if projection is not None else None)
        cursor = FailingCursor(self._collection.find(filter or {}, projection), self.fail_after, self.error)
        self.cursors.append(cursor)
        return cursor

    def count_documents(self, filter):
        raise self.error


def patch_failing_collections(
    monkeypatch, failing: dict[str, int], error: Exception | None = None
) -> dict[str, FailingCollection]:
    """Make ``Database.collection`` hand out failing wrappers for the named collections.

    Returns:
        Mapping of collection name to the wrapper handed out for it
    """
    original = Database.collection
    wrappers: dict[str, FailingCollection] = {}

    def collection(self, collection_name: str):
        handle = original(self, collection_name)
        if collection_name in failing:
            wrappers[collection_name] = FailingCollection(handle, failing[collection_name], error)
            return wrappers[collection_name]
        return handle

    monkeypatch.setattr(Database, "collection", collection)
    return wrappers


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
