"""
Request dependencies shared by the API routers.
"""

from fastapi import Path, Request

from customer_api.app.core.errors import CustomerAPIError, ErrorKind
from customer_api.app.services.customer_service import CustomerService


def get_customer_service(request: Request) -> CustomerService:
    """Build a ``CustomerService`` around the application's store.

    The store is opened by the startup hook (or injected through
    ``create_app``) and kept on ``app.state``.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Customer store is not initialised")
    return CustomerService(store)


def customer_id_param(id: str = Path(..., description="Customer identifier")) -> str:
    """Return the ``id`` path parameter, rejecting blank values with 400."""
    if not id.strip():
        raise CustomerAPIError(ErrorKind.BAD_REQUEST, "Missing or invalid ID.")
    return id
