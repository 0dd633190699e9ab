"""
Plain-text notification emails for a newly stored order.

Bodies are built from sanitized fields only. No templating engine.
"""

from datetime import datetime

from order_intake.domain.orders.entities import OutgoingEmail, SanitizedOrder


def admin_notification(
    order: SanitizedOrder,
    admin_email: str,
    business_name: str,
    submitted_at: datetime,
) -> OutgoingEmail:
    """Build the email telling the business about a new order.

    Args:
        order: The sanitized order.
        admin_email: Fixed recipient for order notifications.
        business_name: Shown in the subject line.
        submitted_at: Server-side submission timestamp.
    """
    body = (
        "New Order Received:\n"
        f"Name: {order.name}\n"
        f"Email: {order.email}\n"
        f"Phone: {order.phone}\n"
        f"Service: {order.service}\n"
        f"Details: {order.details}\n"
        f"Timestamp: {submitted_at.isoformat()}\n"
    )
    return OutgoingEmail(
        to=admin_email,
        subject=f"New Order from {business_name} Website",
        body=body,
    )


def customer_confirmation(
    order: SanitizedOrder, business_name: str
) -> OutgoingEmail:
    """Build the confirmation email sent back to the customer."""
    body = (
        f"Dear {order.name},\n"
        "\n"
        f"Thank you for your order with {business_name}!\n"
        "Order Details:\n"
        f"- Service: {order.service}\n"
        f"- Details: {order.details}\n"
        f"- Phone: {order.phone}\n"
        "\n"
        "We will contact you shortly to confirm. "
        "For any queries, reply to this email or call us.\n"
        "\n"
        "Best,\n"
        f"{business_name} Team\n"
    )
    return OutgoingEmail(
        to=order.email,
        subject=f"Order Confirmation - {business_name}",
        body=body,
    )
