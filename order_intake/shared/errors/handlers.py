"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share the ``{"error": ...}`` shape.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from order_intake.domain.orders.errors import (
    OrderDomainError,
    OrderPersistenceError,
    OrderValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

SAVE_FAILED = "Failed to save order."
INVALID_BODY = "Invalid request body."
INTERNAL_ERROR = "Internal server error"


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_body(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies that are not a JSON object of string fields."""
        logger.warning("Malformed order request: %d error(s)", len(exc.errors()))
        return _error_response(HTTP_400, INVALID_BODY)

    @app.exception_handler(OrderValidationError)
    async def handle_validation(
        _request: Request, exc: OrderValidationError
    ) -> JSONResponse:
        """Handle submissions that broke a validation rule."""
        logger.warning("Order rejected: %s", exc.reason)
        return _error_response(HTTP_400, exc.reason)

    @app.exception_handler(OrderPersistenceError)
    async def handle_persistence(
        _request: Request, exc: OrderPersistenceError
    ) -> JSONResponse:
        """Handle store failures. The detail stays in the server log."""
        logger.error("Database insert error: %s", exc.reason)
        return _error_response(HTTP_500, SAVE_FAILED)

    @app.exception_handler(OrderDomainError)
    async def handle_order_domain(
        _request: Request, exc: OrderDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled orders domain errors."""
        logger.error("Unhandled orders domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR)
