"""
Shared fixtures for the orders tests.

In-memory fakes stand in for the order store and the mailer so the
use case and the API can be tested without a database or SMTP server.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

import pytest

from order_intake.domain.orders.entities import (
    OutgoingEmail,
    SanitizedOrder,
    StoredOrder,
)
from order_intake.domain.orders.errors import (
    NotificationError,
    OrderPersistenceError,
)
from order_intake.domain.orders.ports import Mailer, OrderRepository


class FakeOrderRepository(OrderRepository):
    """Keeps inserted orders in a list; can be told to fail."""

    def __init__(self, fail: bool = False) -> None:
        self.orders: list[StoredOrder] = []
        self._fail = fail

    async def add(self, order: SanitizedOrder) -> StoredOrder:
        if self._fail:
            raise OrderPersistenceError("disk I/O error")
        stored = StoredOrder(
            id=len(self.orders) + 1,
            name=order.name,
            email=order.email,
            phone=order.phone,
            service=order.service,
            details=order.details,
            created_at=datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc),
        )
        self.orders.append(stored)
        return stored


class FakeMailer(Mailer):
    """Records every send attempt; fails for the listed recipients.

    Failing sends raise ``error`` when given, else a NotificationError.
    """

    def __init__(
        self,
        failing_recipients: tuple[str, ...] = (),
        error: Optional[Exception] = None,
    ) -> None:
        self.attempts: list[OutgoingEmail] = []
        self._failing = set(failing_recipients)
        self._error = error

    async def send(self, email: OutgoingEmail) -> None:
        self.attempts.append(email)
        if email.to in self._failing:
            if self._error is not None:
                raise self._error
            raise NotificationError(email.to, "535 authentication failed")

    def sent_to(self) -> list[str]:
        return [email.to for email in self.attempts]


@pytest.fixture
def valid_order() -> dict[str, str]:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-123-4567",
        "service": "Moving",
        "details": "3 boxes",
    }


@pytest.fixture
def repository() -> FakeOrderRepository:
    return FakeOrderRepository()


@pytest.fixture
def failing_repository() -> FakeOrderRepository:
    return FakeOrderRepository(fail=True)


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def make_mailer() -> Callable[..., FakeMailer]:
    """Build a FakeMailer that fails for the given recipients."""

    def _make(*failing_recipients: str, error: Optional[Exception] = None) -> FakeMailer:
        return FakeMailer(failing_recipients=failing_recipients, error=error)

    return _make
