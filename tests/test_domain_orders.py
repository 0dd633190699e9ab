"""
Tests for the orders domain layer.

Covers validation rule order, sanitization, email composition and
domain errors. No external dependencies or IO required.
"""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from order_intake.domain.orders.entities import (
    Invalid,
    OrderSubmission,
    SanitizedOrder,
    Valid,
)
from order_intake.domain.orders.errors import (
    NotificationError,
    OrderPersistenceError,
    OrderValidationError,
)
from order_intake.domain.orders.messages import (
    admin_notification,
    customer_confirmation,
)
from order_intake.domain.orders.validation import (
    INVALID_EMAIL,
    INVALID_NAME,
    INVALID_PHONE,
    MISSING_FIELDS,
    normalize_phone,
    sanitize,
    sanitize_text,
    validate,
)

VALID = OrderSubmission(
    name="Jane Doe",
    email="jane@example.com",
    phone="555-123-4567",
    service="Moving",
    details="3 boxes",
)


class TestPresenceRule:
    """Rule 1: all five fields must be non-empty."""

    @pytest.mark.parametrize(
        "field", ["name", "email", "phone", "service", "details"]
    )
    def test_missing_field(self, field: str) -> None:
        assert validate(replace(VALID, **{field: None})) == Invalid(MISSING_FIELDS)

    @pytest.mark.parametrize(
        "field", ["name", "email", "phone", "service", "details"]
    )
    def test_empty_field(self, field: str) -> None:
        assert validate(replace(VALID, **{field: ""})) == Invalid(MISSING_FIELDS)

    def test_all_missing(self) -> None:
        assert validate(OrderSubmission()) == Invalid(MISSING_FIELDS)

    def test_presence_checked_before_formats(self) -> None:
        """A bad name does not hide a missing field."""
        raw = replace(VALID, name="R2D2", details=None)
        assert validate(raw) == Invalid(MISSING_FIELDS)


class TestNameRule:
    """Rule 2: letters and whitespace only."""

    @pytest.mark.parametrize(
        "name", ["Jane2", "O'Brien", "Mary-Jane", "Dr. Who", "José", "<b>Jane</b>"]
    )
    def test_rejected(self, name: str) -> None:
        assert validate(replace(VALID, name=name)) == Invalid(INVALID_NAME)

    @pytest.mark.parametrize("name", ["Jane", "jane doe", "JANE  DOE", "Jane\tDoe"])
    def test_accepted(self, name: str) -> None:
        assert validate(replace(VALID, name=name)) == Valid()

    def test_name_checked_before_email(self) -> None:
        raw = replace(VALID, name="Jane1", email="not-an-email")
        assert validate(raw) == Invalid(INVALID_NAME)


class TestEmailRule:
    """Rule 3: local@domain.tld shape."""

    @pytest.mark.parametrize(
        "email",
        [
            "not-an-email",
            "jane.example.com",
            "jane@example",
            "jane@@example.com",
            "jane doe@example.com",
            "@example.com",
            "jane@.com",
            "jane@example.",
            "jane@example.com\n",
        ],
    )
    def test_rejected(self, email: str) -> None:
        assert validate(replace(VALID, email=email)) == Invalid(INVALID_EMAIL)

    @pytest.mark.parametrize(
        "email", ["jane@example.com", "j.doe+orders@mail.example.co.uk"]
    )
    def test_accepted(self, email: str) -> None:
        assert validate(replace(VALID, email=email)) == Valid()

    def test_email_checked_before_phone(self) -> None:
        raw = replace(VALID, email="nope", phone="123")
        assert validate(raw) == Invalid(INVALID_EMAIL)


class TestPhoneRule:
    """Rule 4: optional + and 10-15 digits after removing separators."""

    @pytest.mark.parametrize(
        "phone",
        [
            "(555) 123-4567",
            "555-123-4567",
            "5551234567",
            "+44 20 7946 0958",
            "+123456789012345",
        ],
    )
    def test_accepted(self, phone: str) -> None:
        assert validate(replace(VALID, phone=phone)) == Valid()

    @pytest.mark.parametrize(
        "phone",
        [
            "555-1234",
            "1234567890123456",
            "555.123.4567",
            "555-123-456x",
            "++15551234567",
            "5551234567+",
            "call me",
        ],
    )
    def test_rejected(self, phone: str) -> None:
        assert validate(replace(VALID, phone=phone)) == Invalid(INVALID_PHONE)

    def test_normalize_phone(self) -> None:
        assert normalize_phone("(555) 123-4567") == "5551234567"


class TestOpenFields:
    """Service and details only need to be present."""

    def test_markup_in_details_passes_validation(self) -> None:
        raw = replace(VALID, details="<script>alert(1)</script>" * 50)
        assert validate(raw) == Valid()


class TestSanitization:
    """Tests for HTML sanitization of order fields."""

    def test_plain_text_unchanged(self) -> None:
        assert sanitize(VALID) == SanitizedOrder(
            name="Jane Doe",
            email="jane@example.com",
            phone="555-123-4567",
            service="Moving",
            details="3 boxes",
        )

    @pytest.mark.parametrize(
        "value",
        [
            "<script>alert('x')</script>Fragile",
            "<img src=x onerror=alert(1)>boxes",
            "<a href='javascript:alert(1)'>click</a>",
            "<SCRIPT SRC=//evil.example/x.js></SCRIPT>",
            "<style>body{display:none}</style>2 chairs",
        ],
    )
    def test_no_markup_survives(self, value: str) -> None:
        cleaned = sanitize_text(value)
        assert "<" not in cleaned
        assert "script" not in cleaned.lower()

    def test_script_content_dropped(self) -> None:
        assert sanitize_text("<script>alert(1)</script>Fragile") == "Fragile"

    def test_tags_stripped_text_kept(self) -> None:
        assert sanitize_text("<b>3</b> boxes") == "3 boxes"

    @pytest.mark.parametrize(
        "value",
        [
            "3 boxes",
            "Tom & Jerry",
            "a < b > c",
            "<i>fragile</i> & heavy",
            "<script>x</script>",
            "",
        ],
    )
    def test_idempotent(self, value: str) -> None:
        once = sanitize_text(value)
        assert sanitize_text(once) == once

    def test_fields_sanitized_independently(self) -> None:
        raw = replace(VALID, service="<b>Moving</b>", details="<script>x</script>ok")
        cleaned = sanitize(raw)
        assert cleaned.service == "Moving"
        assert cleaned.details == "ok"
        assert cleaned.name == "Jane Doe"


class TestMessages:
    """Tests for notification email composition."""

    ORDER = SanitizedOrder(
        name="Jane Doe",
        email="jane@example.com",
        phone="555-123-4567",
        service="Moving",
        details="3 boxes",
    )

    def test_admin_notification(self) -> None:
        now = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        email = admin_notification(
            self.ORDER,
            admin_email="owner@example.com",
            business_name="Acme Moving",
            submitted_at=now,
        )
        assert email.to == "owner@example.com"
        assert email.subject == "New Order from Acme Moving Website"
        for line in (
            "Name: Jane Doe",
            "Email: jane@example.com",
            "Phone: 555-123-4567",
            "Service: Moving",
            "Details: 3 boxes",
            "Timestamp: 2026-03-01T12:00:00+00:00",
        ):
            assert line in email.body

    def test_customer_confirmation(self) -> None:
        email = customer_confirmation(self.ORDER, business_name="Acme Moving")
        assert email.to == "jane@example.com"
        assert email.subject == "Order Confirmation - Acme Moving"
        assert email.body.startswith("Dear Jane Doe,")
        assert "- Service: Moving" in email.body
        assert "- Details: 3 boxes" in email.body
        assert "- Phone: 555-123-4567" in email.body


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_validation_error_keeps_reason(self) -> None:
        exc = OrderValidationError(INVALID_EMAIL)
        assert exc.reason == INVALID_EMAIL
        assert str(exc) == INVALID_EMAIL

    def test_persistence_error_message(self) -> None:
        exc = OrderPersistenceError("database is locked")
        assert exc.reason == "database is locked"
        assert "database is locked" in exc.message

    def test_notification_error_message(self) -> None:
        exc = NotificationError("jane@example.com", "timeout")
        assert exc.recipient == "jane@example.com"
        assert "jane@example.com" in str(exc)
