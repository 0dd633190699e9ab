"""
Data Transfer Objects for the orders application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

SUCCESS_MESSAGE = "Order submitted successfully!"
CUSTOMER_CONFIRMATION_FAILED_MESSAGE = (
    "Order saved, but failed to send customer confirmation."
)


@dataclass(frozen=True)
class SubmitOrderCommand:
    """Input DTO carrying the raw order-form fields.

    Attributes:
        name: Customer name.
        email: Customer email address.
        phone: Customer phone number, separators allowed.
        service: Requested service.
        details: Free-text order details.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    service: Optional[str] = None
    details: Optional[str] = None


@dataclass(frozen=True)
class SubmissionOutcome:
    """Output DTO for an order that was stored.

    Attributes:
        order_id: Id generated by the store. For logging only.
        message: Message to return to the caller.
        admin_notified: Whether the admin email was accepted by the mail server.
        customer_notified: Whether the customer confirmation was accepted,
            or None when customer confirmation is disabled.
    """

    order_id: int
    message: str
    admin_notified: bool
    customer_notified: Optional[bool] = None

    @property
    def degraded(self) -> bool:
        """True when the order was stored but the customer confirmation failed."""
        return self.customer_notified is False
