import os
import sys
from types import SimpleNamespace

import pytest
from bson import ObjectId


PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Keep tests away from any real database configured in a local .env
os.environ["MONGODB_URI"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")


class FakeCursor:
    def __init__(self, docs):
        self._docs = list(docs)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._docs:
            raise StopAsyncIteration
        return self._docs.pop(0)


class FakeCollection:
    """In-memory stand-in for the few motor collection calls the repository makes."""

    def __init__(self):
        self.docs = []
        self.calls = []
        self.fail_with = None

    def _record(self, name):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def find(self, query):
        self._record("find")
        return FakeCursor(dict(d) for d in self.docs)

    async def insert_one(self, doc):
        self._record("insert_one")
        stored = dict(doc, _id=ObjectId())
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    async def delete_one(self, query):
        self._record("delete_one")
        for i, doc in enumerate(self.docs):
            if doc["_id"] == query["_id"]:
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeConnection:
    def __init__(self, collection=None, error=None):
        self.collection = collection
        self.error = error
        self.requests = 0
        self.closed = False

    async def get_collection(self):
        self.requests += 1
        if self.error is not None:
            raise self.error
        return self.collection

    def close(self):
        self.closed = True


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def connection(collection):
    return FakeConnection(collection)


@pytest.fixture
def client(connection):
    from fastapi.testclient import TestClient
    from holiday_api.main import create_app

    with TestClient(create_app(connection)) as test_client:
        yield test_client
