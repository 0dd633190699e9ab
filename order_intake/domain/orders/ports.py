"""
Port interfaces (ABCs) for the orders bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from order_intake.domain.orders.entities import (
    OutgoingEmail,
    SanitizedOrder,
    StoredOrder,
)


class OrderRepository(ABC):
    """Port for persisting submitted orders.

    The store is append-only: orders are inserted once and
    never read back, updated or deleted by the intake flow.
    """

    @abstractmethod
    async def add(self, order: SanitizedOrder) -> StoredOrder:
        """Insert one order and return it with its generated id.

        Raises:
            OrderPersistenceError: If the store rejects the insert.
        """
        raise NotImplementedError


class Mailer(ABC):
    """Port for sending plain-text emails."""

    @abstractmethod
    async def send(self, email: OutgoingEmail) -> None:
        """Deliver one email to the mail server.

        Raises:
            NotificationError: If the email could not be sent.
        """
        raise NotImplementedError
