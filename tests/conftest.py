import copy

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from customer_api.app.core.config import Settings
from customer_api.app.core.db import WriteOutcome
from customer_api.app.main import create_app
from customer_api.app.schemas.customer import Customer


class InMemoryCustomerStore:
    """Store double with the same interface as ``CustomerStore``."""

    def __init__(self):
        self.docs = []
        self.acknowledge = True
        self.error = None
        self.closed = False

    def _check(self):
        if self.error is not None:
            raise self.error

    def list_all(self):
        self._check()
        return [Customer(**doc) for doc in self.docs]

    def find_by_id(self, customer_id):
        self._check()
        for doc in self.docs:
            if doc["id"] == customer_id:
                return Customer(**doc)
        return None

    def insert(self, customer):
        self._check()
        if not self.acknowledge:
            return WriteOutcome(acknowledged=False)
        self.docs.append(customer.model_dump())
        return WriteOutcome(acknowledged=True, affected_count=1)

    def replace_by_id(self, customer_id, customer):
        self._check()
        if not self.acknowledge:
            return WriteOutcome(acknowledged=False)
        for index, doc in enumerate(self.docs):
            if doc["id"] == customer_id:
                new_doc = customer.model_dump()
                modified = int(new_doc != doc)
                self.docs[index] = new_doc
                return WriteOutcome(acknowledged=True, matched_count=1, affected_count=modified)
        return WriteOutcome(acknowledged=True)

    def delete_by_id(self, customer_id):
        self._check()
        if not self.acknowledge:
            return WriteOutcome(acknowledged=False)
        for index, doc in enumerate(self.docs):
            if doc["id"] == customer_id:
                del self.docs[index]
                return WriteOutcome(acknowledged=True, matched_count=1, affected_count=1)
        return WriteOutcome(acknowledged=True)

    def snapshot(self):
        return copy.deepcopy(self.docs)

    def close(self):
        self.closed = True


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    return InMemoryCustomerStore()


@pytest.fixture
def test_settings():
    return Settings(mongo_url="mongodb://unused:27017", log_level="WARNING")


@pytest.fixture
def app(store, test_settings):
    return create_app(settings=test_settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_store(store):
    store.error = PyMongoError("connection refused")
    return store


@pytest.fixture
def ada():
    return {"id": "c1", "name": "Ada", "number": "555"}
