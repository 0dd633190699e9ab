"""
Pydantic schemas for the orders API.

The request schema only enforces shape (a JSON object of strings).
Presence and format rules belong to the domain validator so that the
caller always gets the first failed rule's message.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class OrderSubmissionRequest(BaseModel):
    """Request schema for the order submission endpoint.

    Every field is optional here; a missing field is reported as
    "All fields are required." by the validator.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr | None = Field(default=None, description="Customer name")
    email: StrictStr | None = Field(default=None, description="Customer email")
    phone: StrictStr | None = Field(default=None, description="Customer phone")
    service: StrictStr | None = Field(default=None, description="Requested service")
    details: StrictStr | None = Field(default=None, description="Order details")


class OrderSubmittedResponse(BaseModel):
    """Response schema for an order that was stored."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
