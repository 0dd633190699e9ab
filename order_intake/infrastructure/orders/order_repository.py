"""
Adapter: Order repository.

Implements OrderRepository port.
Responsible for inserting submitted orders into the orders table.
"""

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from order_intake.domain.orders.entities import SanitizedOrder, StoredOrder
from order_intake.domain.orders.errors import OrderPersistenceError
from order_intake.domain.orders.ports import OrderRepository
from order_intake.infrastructure.orders.database import orders_table


class SqlOrderRepository(OrderRepository):
    """SQLAlchemy implementation of the order repository.

    Each insert runs in its own transaction; ``id`` and ``created_at``
    are generated by the database.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def add(self, order: SanitizedOrder) -> StoredOrder:
        """Insert one order.

        Args:
            order: The sanitized order to persist.

        Returns:
            The stored order with its generated id and creation time.

        Raises:
            OrderPersistenceError: If the database rejects the insert.
        """
        statement = (
            insert(orders_table)
            .values(
                name=order.name,
                email=order.email,
                phone=order.phone,
                service=order.service,
                details=order.details,
            )
            .returning(orders_table.c.id, orders_table.c.created_at)
        )

        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(statement)
                row = result.one()
        except SQLAlchemyError as exc:
            raise OrderPersistenceError(str(exc)) from exc

        return StoredOrder(
            id=row.id,
            name=order.name,
            email=order.email,
            phone=order.phone,
            service=order.service,
            details=order.details,
            created_at=row.created_at,
        )
