"""
Domain-specific errors for the orders bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class OrderDomainError(Exception):
    """Base error for all orders domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class OrderValidationError(OrderDomainError):
    """Raised when a submission breaks one of the validation rules.

    The reason is safe to show to the caller.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class OrderPersistenceError(OrderDomainError):
    """Raised when the order store fails to save an order."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to save order: {reason}")
        self.reason = reason


class NotificationError(OrderDomainError):
    """Raised when an email could not be delivered to the mail server."""

    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__(f"Failed to send email to {recipient}: {reason}")
        self.recipient = recipient
        self.reason = reason
