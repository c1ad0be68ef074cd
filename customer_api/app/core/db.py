"""
MongoDB storage adapter for customer records.

This module wraps a single ``pymongo`` collection and exposes the five
operations the API needs: list, find by id, insert, replace by id and
delete by id.  Documents are matched on the application level ``id``
field, never on MongoDB's internal ``_id``, which is projected out of
every read.

The adapter performs no retries and no uniqueness checks.  Driver
errors (``pymongo.errors.PyMongoError``) propagate to the caller
unchanged.  All calls are blocking; see ``CustomerService`` for how
they are kept off the event loop.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from .config import Settings
from ..schemas.customer import Customer

logger = logging.getLogger(__name__)

# Exclude the internal document key from results.
_PROJECTION = {"_id": False}


@dataclass(frozen=True)
class WriteOutcome:
    """Result of a write operation.

    ``matched_count`` is the number of documents the filter selected and
    ``affected_count`` the number actually inserted, modified or
    deleted.  Both are zero when the write was not acknowledged.
    """

    acknowledged: bool
    matched_count: int = 0
    affected_count: int = 0


class CustomerStore:
    """Customer collection adapter."""

    def __init__(self, collection: Collection, client: Optional[MongoClient] = None) -> None:
        self.collection = collection
        self.client = client

    def list_all(self) -> List[Customer]:
        """Return every customer in database-native order."""
        return [Customer(**doc) for doc in self.collection.find({}, _PROJECTION)]

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Return the first customer whose ``id`` equals ``customer_id``."""
        doc = self.collection.find_one({"id": customer_id}, _PROJECTION)
        if doc is None:
            return None
        return Customer(**doc)

    def insert(self, customer: Customer) -> WriteOutcome:
        """Insert ``customer`` without checking for an existing id."""
        result = self.collection.insert_one(customer.model_dump())
        if not result.acknowledged:
            return WriteOutcome(acknowledged=False)
        return WriteOutcome(acknowledged=True, matched_count=0, affected_count=1)

    def replace_by_id(self, customer_id: str, customer: Customer) -> WriteOutcome:
        """Replace the whole document matching ``customer_id``."""
        result = self.collection.replace_one({"id": customer_id}, customer.model_dump())
        if not result.acknowledged:
            return WriteOutcome(acknowledged=False)
        return WriteOutcome(
            acknowledged=True,
            matched_count=result.matched_count,
            affected_count=result.modified_count,
        )

    def delete_by_id(self, customer_id: str) -> WriteOutcome:
        """Delete one document matching ``customer_id``."""
        result = self.collection.delete_one({"id": customer_id})
        if not result.acknowledged:
            return WriteOutcome(acknowledged=False)
        return WriteOutcome(
            acknowledged=True,
            matched_count=result.deleted_count,
            affected_count=result.deleted_count,
        )

    def close(self) -> None:
        """Close the underlying client, if this store owns one."""
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")


def open_store(settings: Settings) -> CustomerStore:
    """Create a client for ``settings.mongo_url`` and return the store.

    ``MongoClient`` connects lazily, so an unreachable server surfaces
    on the first request rather than here.  An invalid connection
    string raises immediately.
    """
    client: MongoClient = MongoClient(settings.mongo_url)
    collection = client[settings.mongo_database][settings.mongo_collection]
    logger.info(
        "Using MongoDB database %s, collection %s",
        settings.mongo_database,
        settings.mongo_collection,
    )
    return CustomerStore(collection, client=client)
