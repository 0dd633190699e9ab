"""
Orders bounded context: domain layer.

This module contains all domain logic for order intake:
- Submission validation and sanitization
- Notification email composition
- Ports for the order store and the mailer
"""
