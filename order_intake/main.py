"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (orders, health)
- Error handlers (centralized domain-to-HTTP mapping)
- CORS policy
- Logging configuration
- Order store engine and mailer (built and disposed by the lifespan)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from order_intake.core.config import Settings, settings
from order_intake.infrastructure.orders.database import (
    create_order_engine,
    init_schema,
)
from order_intake.infrastructure.orders.order_repository import SqlOrderRepository
from order_intake.infrastructure.orders.smtp_mailer import SmtpMailer
from order_intake.interfaces.health import router as health_router
from order_intake.interfaces.orders.dependencies import build_submit_order_use_case
from order_intake.interfaces.orders.router import router as orders_router
from order_intake.shared.errors.handlers import register_error_handlers
from order_intake.shared.logging import configure_logging
from order_intake.shared.security.cors import add_cors_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the order store and wire the use case."""
    config: Settings = app.state.settings

    engine = create_order_engine(config.database_url)
    await init_schema(engine)
    logger.info("Connected to order store at %s", config.database_location())

    logger.info("EMAIL_USER: %s", config.email_user)
    logger.info("EMAIL_PASS is set: %s", bool(config.email_pass))
    mailer = SmtpMailer(
        hostname=config.smtp_host,
        port=config.smtp_port,
        username=config.email_user,
        password=config.email_pass,
        start_tls=config.smtp_start_tls,
        timeout=config.mail_timeout_seconds,
    )
    if not mailer.sender:
        logger.warning("EMAIL_USER is not set; order emails will not be sent.")
    await mailer.verify()

    app.state.submit_order_use_case = build_submit_order_use_case(
        config,
        repository=SqlOrderRepository(engine),
        mailer=mailer,
    )

    yield

    await engine.dispose()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and CORS middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use. Defaults to the process settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    config = app_settings or settings
    configure_logging(level=config.log_level)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = config

    # --- CORS ---
    add_cors_middleware(app, config)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api")
    app.include_router(orders_router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
