"""
Use case: Submit an order from the website order form.

Input: SubmitOrderCommand (name, email, phone, service, details)
Output: SubmissionOutcome
Side effects: Inserts one order row; sends the admin notification and,
    when enabled, the customer confirmation email.
Failure cases: OrderValidationError, OrderPersistenceError.

Once the order is stored the request can no longer fail: email
failures are logged, and a failed customer confirmation only
downgrades the success message.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from order_intake.application.orders.dtos import (
    CUSTOMER_CONFIRMATION_FAILED_MESSAGE,
    SUCCESS_MESSAGE,
    SubmissionOutcome,
    SubmitOrderCommand,
)
from order_intake.domain.orders.entities import (
    Invalid,
    OrderSubmission,
    OutgoingEmail,
    SanitizedOrder,
    StoredOrder,
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
from order_intake.domain.orders.ports import Mailer, OrderRepository
from order_intake.domain.orders.validation import sanitize, validate

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmitOrderUseCase:
    """Validates, stores and announces a new order.

    Args:
        repository: Order store.
        mailer: Outbound mail sender, shared by both notifications.
        admin_email: Fixed recipient of the admin notification.
        business_name: Business name used in email text.
        send_customer_confirmation: Whether this deployment also
            emails the customer.
        store_timeout: Seconds to wait for the insert before giving up.
        clock: Source of the submission timestamp.
    """

    def __init__(
        self,
        repository: OrderRepository,
        mailer: Mailer,
        admin_email: str,
        business_name: str,
        send_customer_confirmation: bool = True,
        store_timeout: float = 10.0,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repository = repository
        self._mailer = mailer
        self._admin_email = admin_email
        self._business_name = business_name
        self._send_customer_confirmation = send_customer_confirmation
        self._store_timeout = store_timeout
        self._clock = clock

    async def execute(self, command: SubmitOrderCommand) -> SubmissionOutcome:
        """Run the order submission use case.

        Args:
            command: The raw order-form fields.

        Returns:
            The outcome to report to the caller.

        Raises:
            OrderValidationError: The submission broke a validation rule.
            OrderPersistenceError: The order could not be stored.
        """
        submission = OrderSubmission(
            name=command.name,
            email=command.email,
            phone=command.phone,
            service=command.service,
            details=command.details,
        )

        result = validate(submission)
        if isinstance(result, Invalid):
            raise OrderValidationError(result.reason)

        order = sanitize(submission)
        stored = await self._store(order)
        logger.info("Order stored: id=%d", stored.id)

        admin_result, customer_result = await asyncio.gather(
            self._notify_admin(order, stored),
            self._notify_customer(order, stored),
            return_exceptions=True,
        )
        admin_notified = self._settle(admin_result, "Admin", stored)
        customer_notified = self._settle(customer_result, "Customer", stored)

        message = SUCCESS_MESSAGE
        if customer_notified is False:
            message = CUSTOMER_CONFIRMATION_FAILED_MESSAGE

        return SubmissionOutcome(
            order_id=stored.id,
            message=message,
            admin_notified=admin_notified,
            customer_notified=customer_notified,
        )

    async def _store(self, order: SanitizedOrder) -> StoredOrder:
        try:
            return await asyncio.wait_for(
                self._repository.add(order), timeout=self._store_timeout
            )
        except asyncio.TimeoutError as exc:
            raise OrderPersistenceError(
                f"insert timed out after {self._store_timeout}s"
            ) from exc

    async def _notify_admin(
        self, order: SanitizedOrder, stored: StoredOrder
    ) -> bool:
        email = admin_notification(
            order,
            admin_email=self._admin_email,
            business_name=self._business_name,
            submitted_at=self._clock(),
        )
        return await self._deliver(email, "Admin", stored)

    async def _notify_customer(
        self, order: SanitizedOrder, stored: StoredOrder
    ) -> Optional[bool]:
        if not self._send_customer_confirmation:
            return None
        email = customer_confirmation(order, business_name=self._business_name)
        return await self._deliver(email, "Customer", stored)

    async def _deliver(
        self, email: OutgoingEmail, audience: str, stored: StoredOrder
    ) -> bool:
        """Send one notification; failures are logged, never raised."""
        try:
            await self._mailer.send(email)
        except NotificationError as exc:
            logger.error(
                "%s email for order id=%d failed: %s", audience, stored.id, exc.reason
            )
            return False
        logger.info("%s email for order id=%d sent", audience, stored.id)
        return True

    @staticmethod
    def _settle(
        result: Optional[bool] | BaseException, audience: str, stored: StoredOrder
    ) -> Optional[bool]:
        """Turn an unexpected notification exception into a failed send."""
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, BaseException):
            logger.error(
                "%s email for order id=%d failed unexpectedly: %s",
                audience,
                stored.id,
                type(result).__name__,
                exc_info=result,
            )
            return False
        return result
