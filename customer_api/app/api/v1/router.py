"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  When new domains are
introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

# The customers router defines both ``/customers`` and ``/customer``
# paths itself, so it is included without a prefix.
router.include_router(customers.router, tags=["customers"])
