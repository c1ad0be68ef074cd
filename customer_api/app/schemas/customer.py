"""
Pydantic schemas for customer records.

A customer is identified by its application level ``id``, which is
distinct from the document key MongoDB assigns internally.  Updates
replace the whole record, so the same schema is used for creating,
replacing and reading customers.
"""

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """A customer record."""

    id: str = Field(..., description="External identifier used for lookup, update and delete")
    name: str = Field(..., description="Customer name")
    number: str = Field(..., description="Phone or account number")


class MessageResponse(BaseModel):
    """Confirmation message returned by write endpoints."""

    message: str
