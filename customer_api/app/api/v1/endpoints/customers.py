"""
Customer endpoints for API v1.

These routes expose a CRUD API for customer records.  The collection
is listed under ``/customers`` while single records are created under
``/customer`` and addressed as ``/customer/{id}``.  The id segment is
matched as a path, so ids may contain ``/`` (sent URL-encoded); an
empty id is rejected with 400.  Updates replace the whole record.  No
authentication is performed.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from customer_api.app.api.deps import customer_id_param, get_customer_service
from customer_api.app.core.errors import CustomerAPIError, ErrorKind
from customer_api.app.schemas.customer import Customer, MessageResponse
from customer_api.app.services.customer_service import CustomerService

router = APIRouter()

NOT_FOUND_MESSAGE = "Customer not found."


@router.get("/customers", response_model=List[Customer])
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> List[Customer]:
    """Return every customer.  No pagination; order is unspecified."""
    return await service.list_customers()


@router.get("/customer/{id:path}", response_model=Customer)
async def get_customer(
    customer_id: str = Depends(customer_id_param),
    service: CustomerService = Depends(get_customer_service),
) -> Customer:
    """Retrieve a single customer by ID.

    Returns HTTP 404 if no customer has this ID.  If several share it,
    the first one the database yields is returned.
    """
    customer = await service.get_customer(customer_id)
    if customer is None:
        raise CustomerAPIError(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
    return customer


@router.post("/customer", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: Customer,
    service: CustomerService = Depends(get_customer_service),
) -> MessageResponse:
    """Create a new customer."""
    await service.create_customer(customer_in)
    return MessageResponse(message="Customer created successfully.")


@router.put("/customer/{id:path}", response_model=MessageResponse)
async def update_customer(
    customer_in: Customer,
    customer_id: str = Depends(customer_id_param),
    service: CustomerService = Depends(get_customer_service),
) -> MessageResponse:
    """Replace an existing customer with the request body."""
    updated = await service.update_customer(customer_id, customer_in)
    if not updated:
        raise CustomerAPIError(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
    return MessageResponse(message="Customer updated successfully.")


@router.delete("/customer/{id:path}", response_model=MessageResponse)
async def delete_customer(
    customer_id: str = Depends(customer_id_param),
    service: CustomerService = Depends(get_customer_service),
) -> MessageResponse:
    """Delete a customer by ID."""
    deleted = await service.delete_customer(customer_id)
    if not deleted:
        raise CustomerAPIError(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
    return MessageResponse(message="Customer deleted successfully.")
