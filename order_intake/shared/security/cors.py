"""
CORS policy for the order form.

Two policies are supported:
- strict: only the configured origins, ``POST`` and ``Content-Type``
- open: any origin, method and header
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from order_intake.core.config import Settings

logger = logging.getLogger(__name__)

STRICT_METHODS = ["POST"]
STRICT_HEADERS = ["Content-Type"]


def add_cors_middleware(app: FastAPI, settings: Settings) -> None:
    """Install the CORS middleware selected by the settings."""
    if settings.cors_allow_all:
        logger.warning("CORS open to all origins")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=STRICT_METHODS,
        allow_headers=STRICT_HEADERS,
    )
