"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        database_url: SQLAlchemy async URL of the order store.
        store_timeout_seconds: Upper bound for a single order insert.
        email_user: SMTP account used to send notifications.
        email_pass: Password (or app password) of the SMTP account.
        smtp_host: SMTP server host.
        smtp_port: SMTP server port.
        smtp_start_tls: Upgrade the SMTP connection with STARTTLS.
        mail_timeout_seconds: Upper bound for a single email send.
        admin_email: Recipient of new-order notifications.
        business_name: Business name used in email subjects and bodies.
        send_customer_confirmation: Also email a confirmation to the customer.
        cors_allow_origins: Origins allowed by the strict CORS policy.
        cors_allow_all: Accept any origin, method and header instead.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Order Intake"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    database_url: str = "sqlite+aiosqlite:///./data/orders.db"
    store_timeout_seconds: float = Field(default=10.0, gt=0)

    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_start_tls: bool = True
    mail_timeout_seconds: float = Field(default=10.0, gt=0)

    admin_email: str = "admin@example.com"
    business_name: str = "Dziquist Transport and Logistics"
    send_customer_confirmation: bool = True

    cors_allow_origins: list[str] = [
        "http://localhost:8080",
        "https://projectdzi.netlify.app",
    ]
    cors_allow_all: bool = False

    def database_location(self) -> str:
        """Return the database URL with any password masked, for logging."""
        return make_url(self.database_url).render_as_string(hide_password=True)


settings = Settings()
