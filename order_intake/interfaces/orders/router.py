"""
FastAPI router for the orders bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

import logging

from fastapi import APIRouter, Depends

from order_intake.application.orders.dtos import SubmitOrderCommand
from order_intake.application.orders.submit_order import SubmitOrderUseCase
from order_intake.interfaces.orders.dependencies import get_submit_order_use_case
from order_intake.interfaces.orders.schemas import (
    ErrorResponse,
    OrderSubmissionRequest,
    OrderSubmittedResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])


@router.post(
    "/orders",
    response_model=OrderSubmittedResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Submit an order",
    description=(
        "Validate, store and announce an order-form submission. "
        "A stored order is always reported with status 200."
    ),
)
async def submit_order(
    request: OrderSubmissionRequest,
    use_case: SubmitOrderUseCase = Depends(get_submit_order_use_case),
) -> OrderSubmittedResponse:
    """Submit an order from the website form."""
    logger.info("Received order submission")
    command = SubmitOrderCommand(
        name=request.name,
        email=request.email,
        phone=request.phone,
        service=request.service,
        details=request.details,
    )
    outcome = await use_case.execute(command)
    return OrderSubmittedResponse(message=outcome.message)
