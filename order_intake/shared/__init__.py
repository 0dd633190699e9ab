"""
Shared module package.

Contains cross-cutting concerns used across the service:
- Error handling and mapping
- CORS policy
- Logging configuration
"""
