"""
Order-form validation and sanitization.

Validation rules are checked in a fixed order and the first
violated rule is the one reported:
    1. presence of all five fields
    2. name format
    3. email format
    4. phone format

Sanitization strips all markup from every field so the result is
safe to store, display and paste verbatim into plain-text emails.
Pure functions, no IO.
"""

import re

import nh3

from order_intake.domain.orders.entities import (
    ORDER_FIELDS,
    Invalid,
    OrderSubmission,
    SanitizedOrder,
    Valid,
    ValidationResult,
)

MISSING_FIELDS = "All fields are required."
INVALID_NAME = "Name must contain only letters and spaces."
INVALID_EMAIL = "Invalid email format."
INVALID_PHONE = "Invalid phone number."

NAME_PATTERN = re.compile(r"[a-zA-Z\s]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")
PHONE_SEPARATORS = re.compile(r"[-()\s]")


def normalize_phone(phone: str) -> str:
    """Drop hyphens, parentheses and whitespace from a phone number."""
    return PHONE_SEPARATORS.sub("", phone)


def validate(raw: OrderSubmission) -> ValidationResult:
    """Check a raw submission against the intake rules.

    Args:
        raw: The submitted order fields.

    Returns:
        Valid, or Invalid carrying the reason of the first failed rule.
    """
    if not all(getattr(raw, field) for field in ORDER_FIELDS):
        return Invalid(MISSING_FIELDS)
    if not NAME_PATTERN.fullmatch(raw.name):
        return Invalid(INVALID_NAME)
    if not EMAIL_PATTERN.fullmatch(raw.email):
        return Invalid(INVALID_EMAIL)
    if not PHONE_PATTERN.fullmatch(normalize_phone(raw.phone)):
        return Invalid(INVALID_PHONE)
    return Valid()


def sanitize_text(value: str) -> str:
    """Strip every HTML tag, dropping script/style content entirely."""
    return nh3.clean(value, tags=set())


def sanitize(raw: OrderSubmission) -> SanitizedOrder:
    """Sanitize each field of a submission that passed validation."""
    return SanitizedOrder(
        **{field: sanitize_text(getattr(raw, field)) for field in ORDER_FIELDS}
    )
