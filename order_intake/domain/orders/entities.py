"""
Domain entities for the orders bounded context.

Entities represent the order as it moves through intake:
raw submission, sanitized order, and the persisted record.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

ORDER_FIELDS = ("name", "email", "phone", "service", "details")


@dataclass(frozen=True)
class OrderSubmission:
    """Raw order-form fields exactly as submitted.

    Any field may be missing (None) at this stage; presence is
    enforced by validation, not by construction.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    service: Optional[str] = None
    details: Optional[str] = None


@dataclass(frozen=True)
class SanitizedOrder:
    """Order fields after HTML sanitization.

    The only form of an order that is ever stored or
    interpolated into an email.
    """

    name: str
    email: str
    phone: str
    service: str
    details: str


@dataclass(frozen=True)
class StoredOrder:
    """An order persisted by the store, with its generated identity."""

    id: int
    name: str
    email: str
    phone: str
    service: str
    details: str
    created_at: datetime


@dataclass(frozen=True)
class Valid:
    """Validation passed."""


@dataclass(frozen=True)
class Invalid:
    """Validation failed on the first violated rule."""

    reason: str


ValidationResult = Union[Valid, Invalid]


@dataclass(frozen=True)
class OutgoingEmail:
    """A plain-text email ready to hand to the mailer."""

    to: str
    subject: str
    body: str
