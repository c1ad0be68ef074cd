"""
Service layer for customers.

``CustomerService`` wraps a ``CustomerStore`` and exposes async
methods for the HTTP handlers.  pymongo is a blocking driver, so every
store call is dispatched to the worker thread pool with
``run_in_threadpool``; the event loop only waits for the database
round trip.

Lookups that find nothing return ``None`` or ``False``.  Driver
failures, and stored documents that do not decode into a ``Customer``,
are re-raised as ``StoreError`` with a message naming the
operation, and writes the server did not acknowledge raise a
``CustomerAPIError`` of kind ``NOT_ACKNOWLEDGED``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from customer_api.app.core.db import CustomerStore
from customer_api.app.core.errors import CustomerAPIError, ErrorKind, StoreError
from customer_api.app.schemas.customer import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """Service class for managing customers."""

    def __init__(self, store: CustomerStore) -> None:
        self.store = store

    async def list_customers(self) -> List[Customer]:
        """Return all customers."""
        try:
            return await run_in_threadpool(self.store.list_all)
        except (PyMongoError, ValidationError) as exc:
            raise StoreError(f"Error retrieving customers: {exc}") from exc

    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Retrieve a single customer by ``id``."""
        try:
            return await run_in_threadpool(self.store.find_by_id, customer_id)
        except (PyMongoError, ValidationError) as exc:
            raise StoreError(f"Error retrieving customer: {exc}") from exc

    async def create_customer(self, customer: Customer) -> None:
        """Insert a new customer.

        Duplicate ids are not rejected.
        """
        try:
            outcome = await run_in_threadpool(self.store.insert, customer)
        except PyMongoError as exc:
            raise StoreError(f"Error creating customer: {exc}") from exc
        if not outcome.acknowledged:
            raise CustomerAPIError(ErrorKind.NOT_ACKNOWLEDGED, "Error creating customer.")
        logger.info("Created customer %s", customer.id)

    async def update_customer(self, customer_id: str, customer: Customer) -> bool:
        """Replace the customer stored under ``customer_id``.

        Returns ``True`` if a document was modified, ``False`` otherwise.
        A matching document whose content is already identical to
        ``customer`` is not modified and so reports ``False``.
        """
        try:
            outcome = await run_in_threadpool(self.store.replace_by_id, customer_id, customer)
        except PyMongoError as exc:
            raise StoreError(f"Error updating customer: {exc}") from exc
        if not outcome.acknowledged:
            raise CustomerAPIError(ErrorKind.NOT_ACKNOWLEDGED, "Error updating customer.")
        if outcome.affected_count:
            logger.info("Updated customer %s", customer_id)
        return outcome.affected_count > 0

    async def delete_customer(self, customer_id: str) -> bool:
        """Delete a customer by ``id``.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        try:
            outcome = await run_in_threadpool(self.store.delete_by_id, customer_id)
        except PyMongoError as exc:
            raise StoreError(f"Error deleting customer: {exc}") from exc
        if not outcome.acknowledged:
            raise CustomerAPIError(ErrorKind.NOT_ACKNOWLEDGED, "Error deleting customer.")
        if outcome.affected_count:
            logger.info("Deleted customer %s", customer_id)
        return outcome.affected_count > 0
