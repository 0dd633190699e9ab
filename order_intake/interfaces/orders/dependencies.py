"""
Dependency injection for the orders bounded context.

The use case and its collaborators are built once by the application
lifespan (see ``order_intake.main``) and kept on ``app.state``.
Routes receive the use case through FastAPI's ``Depends``; tests
replace it with ``app.dependency_overrides``.
"""

from fastapi import Request

from order_intake.application.orders.submit_order import SubmitOrderUseCase
from order_intake.core.config import Settings
from order_intake.domain.orders.ports import Mailer, OrderRepository


def build_submit_order_use_case(
    settings: Settings,
    repository: OrderRepository,
    mailer: Mailer,
) -> SubmitOrderUseCase:
    """Build SubmitOrderUseCase from settings and its collaborators."""
    return SubmitOrderUseCase(
        repository=repository,
        mailer=mailer,
        admin_email=settings.admin_email,
        business_name=settings.business_name,
        send_customer_confirmation=settings.send_customer_confirmation,
        store_timeout=settings.store_timeout_seconds,
    )


def get_submit_order_use_case(request: Request) -> SubmitOrderUseCase:
    """Return the use case wired at startup."""
    return request.app.state.submit_order_use_case
