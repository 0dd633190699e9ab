"""Order Intake: order-form submission service."""
