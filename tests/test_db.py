from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from customer_api.app.core.config import Settings
from customer_api.app.core.db import CustomerStore, WriteOutcome, open_store
from customer_api.app.schemas.customer import Customer


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def mongo_store(collection):
    return CustomerStore(collection)


def test_list_all_hides_internal_id(mongo_store, collection):
    collection.find.return_value = [
        {"id": "c1", "name": "Ada", "number": "555"},
        {"id": "c2", "name": "Bob", "number": "777"},
    ]
    result = mongo_store.list_all()
    collection.find.assert_called_once_with({}, {"_id": False})
    assert [c.id for c in result] == ["c1", "c2"]


def test_find_by_id_queries_application_id(mongo_store, collection):
    collection.find_one.return_value = {"id": "c1", "name": "Ada", "number": "555"}
    assert mongo_store.find_by_id("c1") == Customer(id="c1", name="Ada", number="555")
    collection.find_one.assert_called_once_with({"id": "c1"}, {"_id": False})


def test_find_by_id_missing(mongo_store, collection):
    collection.find_one.return_value = None
    assert mongo_store.find_by_id("nope") is None


def test_insert_passes_plain_document(mongo_store, collection):
    collection.insert_one.return_value = MagicMock(acknowledged=True)
    outcome = mongo_store.insert(Customer(id="c1", name="Ada", number="555"))
    collection.insert_one.assert_called_once_with({"id": "c1", "name": "Ada", "number": "555"})
    assert outcome == WriteOutcome(acknowledged=True, matched_count=0, affected_count=1)


def test_insert_unacknowledged(mongo_store, collection):
    collection.insert_one.return_value = MagicMock(acknowledged=False)
    assert mongo_store.insert(Customer(id="c1", name="Ada", number="555")).acknowledged is False


def test_replace_reports_counts(mongo_store, collection):
    collection.replace_one.return_value = MagicMock(acknowledged=True, matched_count=1, modified_count=0)
    customer = Customer(id="c1", name="Ada", number="555")
    outcome = mongo_store.replace_by_id("c1", customer)
    collection.replace_one.assert_called_once_with({"id": "c1"}, customer.model_dump())
    assert outcome == WriteOutcome(acknowledged=True, matched_count=1, affected_count=0)


def test_replace_unacknowledged_does_not_read_counts(mongo_store, collection):
    result = MagicMock(acknowledged=False)
    type(result).matched_count = PropertyMock(side_effect=AssertionError("counts read"))
    collection.replace_one.return_value = result
    outcome = mongo_store.replace_by_id("c1", Customer(id="c1", name="Ada", number="555"))
    assert outcome == WriteOutcome(acknowledged=False)


def test_delete_reports_count(mongo_store, collection):
    collection.delete_one.return_value = MagicMock(acknowledged=True, deleted_count=1)
    outcome = mongo_store.delete_by_id("c1")
    collection.delete_one.assert_called_once_with({"id": "c1"})
    assert outcome.affected_count == 1


def test_close_closes_owned_client(collection):
    client = MagicMock()
    CustomerStore(collection, client=client).close()
    client.close.assert_called_once_with()


def test_open_store_uses_settings():
    settings = Settings(mongo_url="mongodb://db:27017", mongo_database="CUSTOMERDATA", mongo_collection="customer")
    with patch("customer_api.app.core.db.MongoClient") as mongo_client:
        store = open_store(settings)
    mongo_client.assert_called_once_with("mongodb://db:27017")
    client = mongo_client.return_value
    client.__getitem__.assert_called_once_with("CUSTOMERDATA")
    client.__getitem__.return_value.__getitem__.assert_called_once_with("customer")
    assert store.client is client
    assert store.collection is client.__getitem__.return_value.__getitem__.return_value
